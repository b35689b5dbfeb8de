"""Unit tests for DocumentService."""

import random

import pytest

from haste.config import Settings
from haste.documents.service import ABOUT_KEY, DocumentService
from haste.domain.documents.errors import (
    ContentTooLargeError,
    DocumentNotFoundError,
    EmptyContentError,
)
from haste.domain.documents.keys import KeyGenerator
from haste.infrastructure.storage.sql_document_store import SQLDocumentStore


@pytest.fixture
def store(db_session, clock):
    return SQLDocumentStore(db_session, clock=clock)


def make_service(store, **overrides):
    settings = Settings(DATABASE_URL="sqlite://", MAX_PASTE_SIZE=100, **overrides)
    return DocumentService(store, KeyGenerator(store, rng=random.Random(5)), settings)


class TestCreate:

    def test_create_then_retrieve(self, store):
        service = make_service(store)

        key = service.create("fn main() {}")
        document = service.retrieve(key)

        assert document.key == key
        assert document.content == "fn main() {}"
        assert document.language is None

    def test_key_has_configured_length(self, store):
        service = make_service(store, KEY_LENGTH=6)

        key = service.create("hello")

        assert len(key) == 6

    def test_empty_content_rejected(self, store):
        service = make_service(store)

        with pytest.raises(EmptyContentError):
            service.create("   ")

    def test_oversized_content_rejected(self, store):
        service = make_service(store)

        with pytest.raises(ContentTooLargeError):
            service.create("x" * 101)

    def test_expire_days_passed_to_store(self, store, clock):
        service = make_service(store)

        key = service.create("hello", expire_days=0)

        assert store.get_document(key).expires_at is None


class TestRetrieve:

    def test_unknown_key_not_found(self, store):
        service = make_service(store)

        with pytest.raises(DocumentNotFoundError) as exc:
            service.retrieve("ghost")

        assert exc.value.key == "ghost"

    def test_retrieve_counts_view(self, store):
        service = make_service(store)
        key = service.create("hello")

        service.retrieve(key)
        service.retrieve(key)

        assert store.get_document(key).views == 2

    def test_about_served_from_file(self, store, tmp_path):
        about = tmp_path / "about.md"
        about.write_text("# Haste\n", encoding="utf-8")
        service = make_service(store, ABOUT_DOCUMENT_PATH=str(about))

        document = service.retrieve(ABOUT_KEY)

        assert document.key == "about"
        assert document.content == "# Haste\n"
        assert document.language == "markdown"

    def test_about_falls_back_to_store_when_file_missing(self, store, tmp_path):
        service = make_service(store, ABOUT_DOCUMENT_PATH=str(tmp_path / "missing.md"))
        store.set(ABOUT_KEY, "stored about")

        document = service.retrieve(ABOUT_KEY)

        assert document.content == "stored about"
        assert document.language is None

    def test_about_not_found_without_file_or_row(self, store):
        service = make_service(store)

        with pytest.raises(DocumentNotFoundError):
            service.retrieve(ABOUT_KEY)
