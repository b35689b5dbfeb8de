"""Unit tests for Pygments highlighting and extension mapping."""

import pytest

from haste.client.highlighting import PygmentsHighlighter


@pytest.fixture
def highlighter():
    return PygmentsHighlighter()


class TestExtensionMapping:

    @pytest.mark.parametrize("ext,language", [
        ("py", "python"),
        ("js", "javascript"),
        ("rs", "rust"),
        ("md", "markdown"),
        ("txt", "text"),
    ])
    def test_language_for_extension(self, highlighter, ext, language):
        assert highlighter.language_for_extension(ext) == language

    def test_pygments_alias_extension_accepted(self, highlighter):
        assert highlighter.language_for_extension("zig") == "zig"

    def test_unrecognised_extension_has_no_language(self, highlighter):
        assert highlighter.language_for_extension("zzz") is None

    def test_extension_for_language_uses_first_listed(self, highlighter):
        assert highlighter.extension_for_language("python") == "py"
        assert highlighter.extension_for_language("bash") == "bash"
        assert highlighter.extension_for_language("cpp") == "cpp"

    def test_unknown_language_passes_through(self, highlighter):
        assert highlighter.extension_for_language("rst") == "rst"


class TestHighlight:

    def test_explicit_language(self, highlighter):
        result = highlighter.highlight("def f():\n    return 1\n", "python")

        assert result.language == "python"
        assert '<span class="k">def</span>' in result.markup

    def test_plain_text_is_escaped_only(self, highlighter):
        result = highlighter.highlight("<b>&</b>", "text")

        assert result.markup == "&lt;b&gt;&amp;&lt;/b&gt;"
        assert result.language == "text"

    def test_detects_from_shebang(self, highlighter):
        content = "#!/usr/bin/env python\nprint('hi')\n"

        assert highlighter.detect_language(content) == "python"
        assert highlighter.highlight(content).language == "python"

    def test_unknown_language_falls_back_to_detection(self, highlighter):
        content = "#!/usr/bin/env python\nprint('hi')\n"

        result = highlighter.highlight(content, "no-such-language")

        assert result.language == "python"

    def test_markup_is_html_safe(self, highlighter):
        result = highlighter.highlight("x = '<script>'\n", "python")

        assert "<script>" not in result.markup
