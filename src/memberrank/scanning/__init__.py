"""C# parsing: tree-sitter parse trees normalized into SyntaxNode trees."""

from .kinds import (
    EXECUTABLE_STATEMENT_KINDS,
    NESTING_ENLARGER_KINDS,
    SIMPLE_STATEMENT_KINDS,
    STATEMENT_KINDS,
    TYPE_DECLARATION_KINDS,
    NodeKind,
)
from .normalizer import CSharpParser, normalize
from .syntax import Location, SyntaxNode, iter_nodes
from .treesitter_parser import TREE_SITTER_AVAILABLE, TreeSitterParser, get_supported_languages

__all__ = [
    "NodeKind",
    "TYPE_DECLARATION_KINDS",
    "STATEMENT_KINDS",
    "SIMPLE_STATEMENT_KINDS",
    "EXECUTABLE_STATEMENT_KINDS",
    "NESTING_ENLARGER_KINDS",
    "Location",
    "SyntaxNode",
    "iter_nodes",
    "CSharpParser",
    "normalize",
    "TREE_SITTER_AVAILABLE",
    "TreeSitterParser",
    "get_supported_languages",
]
