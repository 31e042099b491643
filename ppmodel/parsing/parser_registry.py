"""
Parser Registry for Tree-sitter

Manages language parsers and provides a unified interface.
Parsers are cached per thread; tree-sitter parsers must not be shared
between threads.
"""

import threading
from pathlib import Path

try:
    from tree_sitter import Parser
    from tree_sitter_language_pack import get_language
except ImportError as e:
    raise ImportError(
        "tree-sitter-language-pack is required. " "Install with: pip install tree-sitter tree-sitter-language-pack"
    ) from e

from ..exceptions import UnsupportedLanguageError
from ..observability import get_logger

logger = get_logger(__name__)

EXTENSION_LANGUAGES = {
    ".java": "java",
}


class ParserRegistry:
    """
    Registry for language parsers.

    Supports:
    - Java
    """

    def __init__(self):
        self._languages: dict[str, object] = {}
        self._thread_local = threading.local()
        self._setup_languages()

    def _register_language(self, name: str) -> None:
        """Register a tree-sitter-language-pack grammar under its name."""
        try:
            lang = get_language(name)
        except (LookupError, ValueError, OSError) as e:
            logger.warning("parser_load_failed", language=name, error=str(e))
            return

        self._languages[name] = lang
        logger.debug("parser_loaded", language=name)

    def _setup_languages(self):
        """Setup Tree-sitter languages"""
        self._register_language("java")

    def get_parser(self, language: str) -> Parser:
        """
        Get the calling thread's parser for a language.

        Raises:
            UnsupportedLanguageError: If no grammar is registered
        """
        language = language.lower()

        if not hasattr(self._thread_local, "parsers"):
            self._thread_local.parsers = {}
        parsers: dict[str, Parser] = self._thread_local.parsers

        if language in parsers:
            return parsers[language]

        lang = self._languages.get(language)
        if lang is None:
            raise UnsupportedLanguageError(language)

        parser = Parser(lang)
        parsers[language] = parser
        return parser

    def detect_language(self, file_path: str | Path) -> str | None:
        """Detect language from file extension."""
        return EXTENSION_LANGUAGES.get(Path(file_path).suffix.lower())


# Global registry instance
_registry: ParserRegistry | None = None
_registry_lock = threading.Lock()


def get_registry() -> ParserRegistry:
    """Get global parser registry instance"""
    global _registry
    if _registry is None:
        with _registry_lock:
            if _registry is None:
                _registry = ParserRegistry()
    return _registry
