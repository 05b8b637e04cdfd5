"""Node kinds: the closed vocabulary every syntax node is tagged with.

Grammar node types the metrics never branch on collapse into
``NodeKind.OTHER``; their children are still kept so the walkers can look
through them.
"""

from enum import Enum


class NodeKind(Enum):
    """Kind tag of a normalized C# syntax node."""

    # Containers
    COMPILATION_UNIT = "compilation_unit"
    NAMESPACE_DECLARATION = "namespace_declaration"

    # Type declarations
    CLASS_DECLARATION = "class_declaration"
    STRUCT_DECLARATION = "struct_declaration"
    RECORD_DECLARATION = "record_declaration"
    INTERFACE_DECLARATION = "interface_declaration"
    ENUM_DECLARATION = "enum_declaration"

    # Members
    METHOD_DECLARATION = "method_declaration"
    CONSTRUCTOR_DECLARATION = "constructor_declaration"
    DESTRUCTOR_DECLARATION = "destructor_declaration"
    PROPERTY_DECLARATION = "property_declaration"
    INDEXER_DECLARATION = "indexer_declaration"
    EVENT_DECLARATION = "event_declaration"
    OPERATOR_DECLARATION = "operator_declaration"
    CONVERSION_OPERATOR_DECLARATION = "conversion_operator_declaration"
    FIELD_DECLARATION = "field_declaration"
    ACCESSOR_DECLARATION = "accessor_declaration"

    # Statements
    BLOCK = "block"
    LOCAL_DECLARATION_STATEMENT = "local_declaration_statement"
    EXPRESSION_STATEMENT = "expression_statement"
    EMPTY_STATEMENT = "empty_statement"
    LABELED_STATEMENT = "labeled_statement"
    GOTO_STATEMENT = "goto_statement"
    BREAK_STATEMENT = "break_statement"
    CONTINUE_STATEMENT = "continue_statement"
    RETURN_STATEMENT = "return_statement"
    YIELD_RETURN_STATEMENT = "yield_return_statement"
    YIELD_BREAK_STATEMENT = "yield_break_statement"
    THROW_STATEMENT = "throw_statement"
    WHILE_STATEMENT = "while_statement"
    DO_STATEMENT = "do_statement"
    FOR_STATEMENT = "for_statement"
    FOREACH_STATEMENT = "foreach_statement"
    USING_STATEMENT = "using_statement"
    FIXED_STATEMENT = "fixed_statement"
    CHECKED_STATEMENT = "checked_statement"
    UNCHECKED_STATEMENT = "unchecked_statement"
    UNSAFE_STATEMENT = "unsafe_statement"
    LOCK_STATEMENT = "lock_statement"
    IF_STATEMENT = "if_statement"
    SWITCH_STATEMENT = "switch_statement"
    TRY_STATEMENT = "try_statement"
    LOCAL_FUNCTION_STATEMENT = "local_function_statement"

    # Anonymous functions
    ANONYMOUS_METHOD_EXPRESSION = "anonymous_method_expression"
    PARENTHESIZED_LAMBDA_EXPRESSION = "parenthesized_lambda_expression"
    SIMPLE_LAMBDA_EXPRESSION = "simple_lambda_expression"

    OTHER = "other"


TYPE_DECLARATION_KINDS = frozenset(
    {
        NodeKind.CLASS_DECLARATION,
        NodeKind.STRUCT_DECLARATION,
        NodeKind.RECORD_DECLARATION,
        NodeKind.INTERFACE_DECLARATION,
    }
)

# Statements that do nothing but hold other statements.
COMPOUND_STATEMENT_KINDS = frozenset(
    {
        NodeKind.BLOCK,
        NodeKind.LABELED_STATEMENT,
        NodeKind.WHILE_STATEMENT,
        NodeKind.DO_STATEMENT,
        NodeKind.FOR_STATEMENT,
        NodeKind.FOREACH_STATEMENT,
        NodeKind.USING_STATEMENT,
        NodeKind.FIXED_STATEMENT,
        NodeKind.CHECKED_STATEMENT,
        NodeKind.UNCHECKED_STATEMENT,
        NodeKind.UNSAFE_STATEMENT,
        NodeKind.LOCK_STATEMENT,
        NodeKind.IF_STATEMENT,
        NodeKind.SWITCH_STATEMENT,
        NodeKind.TRY_STATEMENT,
        NodeKind.LOCAL_FUNCTION_STATEMENT,
    }
)

SIMPLE_STATEMENT_KINDS = frozenset(
    {
        NodeKind.LOCAL_DECLARATION_STATEMENT,
        NodeKind.EXPRESSION_STATEMENT,
        NodeKind.EMPTY_STATEMENT,
        NodeKind.GOTO_STATEMENT,
        NodeKind.BREAK_STATEMENT,
        NodeKind.CONTINUE_STATEMENT,
        NodeKind.RETURN_STATEMENT,
        NodeKind.YIELD_RETURN_STATEMENT,
        NodeKind.YIELD_BREAK_STATEMENT,
        NodeKind.THROW_STATEMENT,
    }
)

STATEMENT_KINDS = SIMPLE_STATEMENT_KINDS | COMPOUND_STATEMENT_KINDS

# Every statement kind except the block: what marks a member as executable.
EXECUTABLE_STATEMENT_KINDS = STATEMENT_KINDS - {NodeKind.BLOCK}

# Entering one of these adds a level of nesting.
NESTING_ENLARGER_KINDS = frozenset(
    {
        NodeKind.ANONYMOUS_METHOD_EXPRESSION,
        NodeKind.CHECKED_STATEMENT,
        NodeKind.DO_STATEMENT,
        NodeKind.FIXED_STATEMENT,
        NodeKind.FOR_STATEMENT,
        NodeKind.FOREACH_STATEMENT,
        NodeKind.IF_STATEMENT,
        NodeKind.LOCK_STATEMENT,
        NodeKind.PARENTHESIZED_LAMBDA_EXPRESSION,
        NodeKind.SWITCH_STATEMENT,
        NodeKind.TRY_STATEMENT,
        NodeKind.UNSAFE_STATEMENT,
        NodeKind.UNCHECKED_STATEMENT,
        NodeKind.WHILE_STATEMENT,
    }
)


def is_statement(kind: NodeKind) -> bool:
    return kind in STATEMENT_KINDS


def is_type_declaration(kind: NodeKind) -> bool:
    return kind in TYPE_DECLARATION_KINDS
