"""Tree-sitter parser wrapper.

Loads the C# grammar and exposes a parse() that returns a raw tree-sitter
tree. Handles a missing tree-sitter installation gracefully: callers check
TREE_SITTER_AVAILABLE or is_language_supported() first.

Usage:
    parser = TreeSitterParser()
    if parser.is_language_supported("csharp"):
        tree = parser.parse(code_bytes, "csharp")
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

logger = logging.getLogger(__name__)

TREE_SITTER_AVAILABLE = False
_tree_sitter_module: Any = None
_language_modules: dict[str, Any] = {}

# Grammar distributions, keyed by the language name used in this package.
GRAMMAR_PACKAGES = {
    "csharp": "tree-sitter-c-sharp",
}

try:
    import tree_sitter as _tree_sitter_module  # type: ignore[no-redef]

    TREE_SITTER_AVAILABLE = True

    try:
        import tree_sitter_c_sharp

        _language_modules["csharp"] = tree_sitter_c_sharp
    except ImportError:
        pass

except ImportError:
    TREE_SITTER_AVAILABLE = False


if TYPE_CHECKING:

    class Node:
        type: str
        is_named: bool
        has_error: bool
        start_point: tuple[int, int]
        children: list[Node]
        named_children: list[Node]

    class Tree:
        root_node: Node


def get_supported_languages() -> list[str]:
    """Get list of languages with installed grammars."""
    if not TREE_SITTER_AVAILABLE:
        return []
    return list(_language_modules.keys())


class TreeSitterParser:
    """Wrapper around tree-sitter parsers for the installed grammars.

    tree-sitter Parser objects are not safe to share between threads, so each
    thread gets its own instance through ``parse``.
    """

    def __init__(self) -> None:
        self._languages: dict[str, Any] = {}

        if not TREE_SITTER_AVAILABLE:
            return

        for lang_name, lang_module in _language_modules.items():
            try:
                lang_fn = getattr(lang_module, f"language_{lang_name}", None)
                if lang_fn is None:
                    lang_fn = getattr(lang_module, "language", None)
                if lang_fn is None:
                    continue

                # tree-sitter >= 0.23 returns PyCapsule; wrap in Language()
                self._languages[lang_name] = _tree_sitter_module.Language(lang_fn())
            except Exception as e:
                logger.debug(f"Cannot load {lang_name} grammar: {e}")

    def parse(self, code: bytes, language: str) -> Tree | None:
        """Parse code and return syntax tree.

        Args:
            code: Source code as bytes
            language: Language name (e.g., "csharp")

        Returns:
            Tree object, or None if the language is not supported
        """
        lang = self._languages.get(language)
        if lang is None:
            return None

        parser = _tree_sitter_module.Parser(lang)
        result: Tree | None = parser.parse(code)
        return result

    def is_language_supported(self, language: str) -> bool:
        """Check if a language is supported."""
        return language in self._languages
