"""Normalizer: converts tree-sitter parse trees into SyntaxNode trees.

The C# grammar's node types are mapped onto NodeKind here, so the extractor
and the metrics never see grammar-specific names. Three grammar details are
smoothed over on the way:

- members of a type live under a ``declaration_list`` node; the list is
  spliced away so members become immediate children of their type;
- ``#if``/``#elif``/``#else`` branches are spliced the same way and their
  conditions dropped, and the remaining directives are skipped like comments;
- ``checked``/``unchecked`` blocks, ``yield return``/``yield break`` and
  parenthesized/simple lambdas share a grammar type and are told apart by
  their tokens.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from ..exceptions import FileAccessError, ParserUnavailableError, ParsingError
from .kinds import NodeKind
from .syntax import Location, SyntaxNode
from .treesitter_parser import GRAMMAR_PACKAGES, TreeSitterParser

logger = logging.getLogger(__name__)

LANGUAGE = "csharp"

_TYPE_MAP: dict[str, NodeKind] = {
    "compilation_unit": NodeKind.COMPILATION_UNIT,
    "namespace_declaration": NodeKind.NAMESPACE_DECLARATION,
    "file_scoped_namespace_declaration": NodeKind.NAMESPACE_DECLARATION,
    "class_declaration": NodeKind.CLASS_DECLARATION,
    "struct_declaration": NodeKind.STRUCT_DECLARATION,
    "record_declaration": NodeKind.RECORD_DECLARATION,
    "record_struct_declaration": NodeKind.RECORD_DECLARATION,
    "interface_declaration": NodeKind.INTERFACE_DECLARATION,
    "enum_declaration": NodeKind.ENUM_DECLARATION,
    "method_declaration": NodeKind.METHOD_DECLARATION,
    "constructor_declaration": NodeKind.CONSTRUCTOR_DECLARATION,
    "destructor_declaration": NodeKind.DESTRUCTOR_DECLARATION,
    "property_declaration": NodeKind.PROPERTY_DECLARATION,
    "indexer_declaration": NodeKind.INDEXER_DECLARATION,
    "event_declaration": NodeKind.EVENT_DECLARATION,
    "event_field_declaration": NodeKind.FIELD_DECLARATION,
    "field_declaration": NodeKind.FIELD_DECLARATION,
    "operator_declaration": NodeKind.OPERATOR_DECLARATION,
    "conversion_operator_declaration": NodeKind.CONVERSION_OPERATOR_DECLARATION,
    "accessor_declaration": NodeKind.ACCESSOR_DECLARATION,
    "block": NodeKind.BLOCK,
    "local_declaration_statement": NodeKind.LOCAL_DECLARATION_STATEMENT,
    "expression_statement": NodeKind.EXPRESSION_STATEMENT,
    "empty_statement": NodeKind.EMPTY_STATEMENT,
    "labeled_statement": NodeKind.LABELED_STATEMENT,
    "goto_statement": NodeKind.GOTO_STATEMENT,
    "break_statement": NodeKind.BREAK_STATEMENT,
    "continue_statement": NodeKind.CONTINUE_STATEMENT,
    "return_statement": NodeKind.RETURN_STATEMENT,
    "throw_statement": NodeKind.THROW_STATEMENT,
    "while_statement": NodeKind.WHILE_STATEMENT,
    "do_statement": NodeKind.DO_STATEMENT,
    "for_statement": NodeKind.FOR_STATEMENT,
    "foreach_statement": NodeKind.FOREACH_STATEMENT,
    "for_each_statement": NodeKind.FOREACH_STATEMENT,
    "using_statement": NodeKind.USING_STATEMENT,
    "fixed_statement": NodeKind.FIXED_STATEMENT,
    "unsafe_statement": NodeKind.UNSAFE_STATEMENT,
    "lock_statement": NodeKind.LOCK_STATEMENT,
    "if_statement": NodeKind.IF_STATEMENT,
    "switch_statement": NodeKind.SWITCH_STATEMENT,
    "try_statement": NodeKind.TRY_STATEMENT,
    "local_function_statement": NodeKind.LOCAL_FUNCTION_STATEMENT,
    "anonymous_method_expression": NodeKind.ANONYMOUS_METHOD_EXPRESSION,
}

# Conditional-compilation branches; every branch is kept.
_PREPROC_BRANCH_TYPES = frozenset({"preproc_if", "preproc_elif", "preproc_else"})

# Grammar nodes whose children are lifted into the parent.
_SPLICED_TYPES = frozenset({"declaration_list"}) | _PREPROC_BRANCH_TYPES

# Named grammar nodes that are trivia rather than syntax.
_SKIPPED_TYPES = frozenset(
    {
        "comment",
        "preproc_region",
        "preproc_endregion",
        "preproc_line",
        "preproc_pragma",
        "preproc_nullable",
        "preproc_error",
        "preproc_warning",
        "preproc_define",
        "preproc_undef",
    }
)


def kind_of(node: Any) -> NodeKind:
    """Map a tree-sitter node onto its NodeKind."""
    node_type = node.type
    if node_type == "checked_statement":
        if any(child.type == "unchecked" for child in node.children):
            return NodeKind.UNCHECKED_STATEMENT
        return NodeKind.CHECKED_STATEMENT
    if node_type == "yield_statement":
        if any(child.type == "break" for child in node.children):
            return NodeKind.YIELD_BREAK_STATEMENT
        return NodeKind.YIELD_RETURN_STATEMENT
    if node_type == "lambda_expression":
        if any(child.type == "parameter_list" for child in node.children):
            return NodeKind.PARENTHESIZED_LAMBDA_EXPRESSION
        return NodeKind.SIMPLE_LAMBDA_EXPRESSION
    return _TYPE_MAP.get(node_type, NodeKind.OTHER)


def _child_nodes(node: Any) -> list[Any]:
    """Named children of a grammar node, with spliced lists flattened."""
    children = node.named_children
    if node.type in _PREPROC_BRANCH_TYPES:
        # The branch condition is a preprocessor expression, not code
        condition = node.child_by_field_name("condition")
        if condition is not None:
            children = [child for child in children if child != condition]

    result: list[Any] = []
    for child in children:
        if child.type in _SKIPPED_TYPES:
            continue
        if child.type in _SPLICED_TYPES:
            result.extend(_child_nodes(child))
        else:
            result.append(child)
    return result


@dataclass
class _Frame:
    node: Any
    pending: list[Any]
    index: int = 0
    built: list[SyntaxNode] = field(default_factory=list)


def normalize(root: Any, path: str) -> SyntaxNode:
    """Convert a tree-sitter node and its subtree into a SyntaxNode tree.

    Uses an explicit stack, so deeply nested expressions (long string
    concatenations, else-if ladders) cannot exhaust the recursion limit.
    """
    stack = [_Frame(root, _child_nodes(root))]
    result: SyntaxNode | None = None

    while stack:
        frame = stack[-1]
        if frame.index < len(frame.pending):
            child = frame.pending[frame.index]
            frame.index += 1
            stack.append(_Frame(child, _child_nodes(child)))
            continue

        stack.pop()
        converted = SyntaxNode(
            kind=kind_of(frame.node),
            children=tuple(frame.built),
            location=Location(path, frame.node.start_point[0] + 1),
            type_name=frame.node.type,
        )
        if stack:
            stack[-1].built.append(converted)
        else:
            result = converted

    assert result is not None
    return result


class CSharpParser:
    """Parses C# source into SyntaxNode trees.

    Usage:
        parser = CSharpParser()
        root = parser.parse_file(Path("Program.cs"))

    Raises:
        ParserUnavailableError: If tree-sitter or the C# grammar is missing
    """

    def __init__(self, strict: bool = False) -> None:
        self._parser = TreeSitterParser()
        if not self._parser.is_language_supported(LANGUAGE):
            raise ParserUnavailableError(LANGUAGE, GRAMMAR_PACKAGES[LANGUAGE])
        self.strict = strict

    def parse_source(self, code: bytes, path: str = "") -> SyntaxNode:
        """Parse source bytes; ``path`` is recorded in every node's location."""
        tree = self._parser.parse(code, LANGUAGE)
        if tree is None:
            raise ParsingError(Path(path), LANGUAGE, "parser returned no tree")

        if tree.root_node.has_error:
            if self.strict:
                raise ParsingError(Path(path), LANGUAGE, "source contains syntax errors")
            logger.debug(f"{path}: syntax errors, keeping recovered tree")

        return normalize(tree.root_node, path)

    def parse_file(self, path: Path) -> SyntaxNode:
        """Read and parse a file.

        Raises:
            FileAccessError: If the file cannot be read
            ParsingError: If the file cannot be parsed
        """
        try:
            code = path.read_bytes()
        except OSError as e:
            raise FileAccessError(path, f"OS error: {e}")
        return self.parse_source(code, str(path))
