"""Unit tests for the client document model."""

from haste.client.document import DocumentModel, LoadedDocument, NewDocument


class TestNewDocument:

    def test_starts_blank_and_unlocked(self):
        model = DocumentModel()

        assert model.state == NewDocument()
        assert model.get_key() is None
        assert not model.is_dirty
        assert not model.is_locked

    def test_set_content_marks_dirty(self):
        model = DocumentModel()

        model.set_content("hello")

        assert model.get_content() == "hello"
        assert model.is_dirty

    def test_clearing_content_is_clean_again(self):
        model = DocumentModel()
        model.set_content("hello")

        model.set_content("")

        assert not model.is_dirty


class TestPersistence:

    def test_mark_saved_assigns_key_and_keeps_content(self):
        model = DocumentModel()
        model.set_content("print('hi')")

        model.mark_saved("bakuda", "python")

        assert model.state == LoadedDocument(content="print('hi')", key="bakuda", language="python")
        assert not model.is_dirty
        assert model.is_locked

    def test_hydrate_replaces_state(self):
        model = DocumentModel()
        model.set_content("draft")

        model.hydrate(LoadedDocument(content="stored", key="bakuda"))

        assert model.get_content() == "stored"
        assert model.get_key() == "bakuda"
        assert not model.is_dirty
        assert model.is_locked

    def test_set_content_never_changes_key(self):
        model = DocumentModel()
        model.hydrate(LoadedDocument(content="stored", key="bakuda"))

        model.set_content("edited")

        assert model.get_key() == "bakuda"
        assert model.is_dirty

    def test_dirty_compares_to_persisted_content(self):
        model = DocumentModel()
        model.hydrate(LoadedDocument(content="stored", key="bakuda"))
        model.set_content("edited")

        model.set_content("stored")

        assert not model.is_dirty

    def test_reset_returns_to_blank_unlocked(self):
        model = DocumentModel()
        model.hydrate(LoadedDocument(content="stored", key="bakuda", language="python"))

        model.reset()

        assert model.state == NewDocument()
        assert model.get_language() is None
        assert not model.is_locked

    def test_duplicate_and_serialize_do_not_mutate(self):
        model = DocumentModel()
        model.hydrate(LoadedDocument(content="stored", key="bakuda"))

        assert model.duplicate() == "stored"
        assert model.serialize() == "stored"
        assert model.get_key() == "bakuda"
