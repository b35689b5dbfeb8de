"""Syntax highlighting and language/extension mapping (Pygments).

Languages are Pygments lexer aliases. Display paths carry a short file
extension instead ("py" rather than "python"); EXTENSION_MAP converts
between the two.
"""

import html
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from pygments import highlight as pygments_highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import get_lexer_by_name, guess_lexer
from pygments.util import ClassNotFound

logger = logging.getLogger(__name__)

PLAIN_TEXT = "text"

# File extension -> Pygments alias. The first extension listed for a
# language is the one used when building display paths.
EXTENSION_MAP: dict[str, str] = {
    # Scripting languages
    "js": "javascript",
    "ts": "typescript",
    "py": "python",
    "rb": "ruby",
    "pl": "perl",
    "php": "php",
    "lua": "lua",
    "vbs": "vbscript",
    "bash": "bash",
    "sh": "bash",
    # Compiled languages
    "java": "java",
    "cpp": "cpp",
    "cc": "cpp",
    "c": "c",
    "h": "cpp",
    "cs": "csharp",
    "go": "go",
    "rs": "rust",
    "rust": "rust",
    "swift": "swift",
    "kt": "kotlin",
    "kotlin": "kotlin",
    "scala": "scala",
    "pas": "delphi",
    "m": "objective-c",
    "vala": "vala",
    # Functional languages
    "erl": "erlang",
    "hs": "haskell",
    "lisp": "common-lisp",
    "sm": "smalltalk",
    # Markup and data formats
    "html": "html",
    "htm": "html",
    "xml": "xml",
    "css": "css",
    "scss": "scss",
    "json": "json",
    "yaml": "yaml",
    "yml": "yaml",
    "md": "markdown",
    "tex": "latex",
    # Database
    "sql": "sql",
    # Configuration and other
    "ini": "ini",
    "diff": "diff",
    "dockerfile": "docker",
    "nginx": "nginx",
    "txt": PLAIN_TEXT,
}


@dataclass(frozen=True)
class HighlightResult:
    markup: str
    language: Optional[str] = None


class Highlighter(ABC):
    """Highlighting port. Implementations are synchronous and side-effect free."""

    @abstractmethod
    def detect_language(self, content: str) -> Optional[str]:
        pass

    @abstractmethod
    def highlight(self, content: str, language: Optional[str] = None) -> HighlightResult:
        pass

    @abstractmethod
    def extension_for_language(self, language: str) -> str:
        pass

    @abstractmethod
    def language_for_extension(self, ext: str) -> Optional[str]:
        pass


class PygmentsHighlighter(Highlighter):
    """Highlighter rendering HTML spans with Pygments.

    Markup is produced without the surrounding <div>/<pre> wrapper, so the
    view decides how to frame it.
    """

    def __init__(self):
        self._formatter = HtmlFormatter(nowrap=True)

    def detect_language(self, content: str) -> Optional[str]:
        """Guess the language of content; None for plain text."""
        try:
            lexer = guess_lexer(content)
        except ClassNotFound:
            return None
        return self._alias(lexer)

    def highlight(self, content: str, language: Optional[str] = None) -> HighlightResult:
        """Highlight content as language, or auto-detect when no language is given.

        An unknown language falls back to auto-detection. Plain text is
        HTML-escaped only.
        """
        if language in (PLAIN_TEXT, "txt"):
            return HighlightResult(markup=html.escape(content), language=PLAIN_TEXT)

        if language:
            try:
                lexer = get_lexer_by_name(language)
            except ClassNotFound:
                logger.debug(f"Unknown language {language!r}, detecting instead")
            else:
                return HighlightResult(
                    markup=pygments_highlight(content, lexer, self._formatter),
                    language=language,
                )

        try:
            lexer = guess_lexer(content)
        except ClassNotFound:
            return HighlightResult(markup=html.escape(content))

        detected = self._alias(lexer)
        if detected is None:
            return HighlightResult(markup=html.escape(content))
        return HighlightResult(
            markup=pygments_highlight(content, lexer, self._formatter),
            language=detected,
        )

    def extension_for_language(self, language: str) -> str:
        for ext, lang in EXTENSION_MAP.items():
            if lang == language:
                return ext
        return language

    def language_for_extension(self, ext: str) -> Optional[str]:
        """Map a path extension to a language; None if nothing recognises it.

        Extensions missing from EXTENSION_MAP are accepted when they are
        themselves a Pygments alias ('zig', 'rst').
        """
        if ext in EXTENSION_MAP:
            return EXTENSION_MAP[ext]
        try:
            get_lexer_by_name(ext)
        except ClassNotFound:
            return None
        return ext

    @staticmethod
    def _alias(lexer) -> Optional[str]:
        if not lexer.aliases:
            return None
        alias = lexer.aliases[0]
        return None if alias == PLAIN_TEXT else alias
