"""
Node factory and provenance helpers.

Synthesized nodes have no location of their own; set_text_range copies it
(and, for statements, the leading comments) from the node they replace, and
set_original_node records the back-reference read at print time.
"""

from typing import List, Optional, TypeVar

from .nodes import (
    ASTNode, Expression, Statement, SourceUnit,
    Identifier, StringLiteral, PropertyAccess, CallExpression, BinaryExpression,
    BinaryOperator, ObjectLiteral, PropertyAssignment, ExpressionStatement,
    VariableStatement, VariableDeclaration, VariableKind, NotEmittedStatement,
)

N = TypeVar('N', bound=ASTNode)


# -----------------------------------------------------------------------------
# Provenance
# -----------------------------------------------------------------------------

def set_original_node(node: N, original: Optional[ASTNode]) -> N:
    node.original = original
    return node


def get_original_node(node: Optional[ASTNode]) -> Optional[ASTNode]:
    """Follow the original chain to the node that came from the parser."""
    if node is None:
        return None
    while node.original is not None:
        node = node.original
    return node


def set_text_range(node: N, source: ASTNode) -> N:
    """Give a synthesized node the text range (and leading comments) of `source`."""
    node.location = source.location
    if isinstance(node, Statement) and isinstance(source, Statement):
        node.leading_comments = list(source.leading_comments)
    return node


def update_source_unit(unit: SourceUnit, statements: List[Statement]) -> SourceUnit:
    """New unit with the same file name and the given statements; original points at `unit`."""
    updated = SourceUnit(unit.file_name, statements, unit.location)
    updated.trailing_comments = list(unit.trailing_comments)
    return set_original_node(updated, unit)


# -----------------------------------------------------------------------------
# Expressions
# -----------------------------------------------------------------------------

def create_identifier(name: str) -> Identifier:
    return Identifier(name)


def create_string_literal(value: str, single_quote: bool = True) -> StringLiteral:
    """Synthesized string literals print with single quotes."""
    return StringLiteral(value, single_quote=single_quote)


def create_property_access(expression: Expression, name: str) -> PropertyAccess:
    return PropertyAccess(expression, name)


def create_call(callee: Expression, arguments: List[Expression]) -> CallExpression:
    return CallExpression(callee, arguments)


def create_assignment(left: Expression, right: Expression) -> BinaryExpression:
    return BinaryExpression(left, BinaryOperator.ASSIGN, right)


def create_logical_or(left: Expression, right: Expression) -> BinaryExpression:
    return BinaryExpression(left, BinaryOperator.OR, right)


def create_object_literal(properties: List[PropertyAssignment]) -> ObjectLiteral:
    return ObjectLiteral(properties)


def create_property_assignment(name: str, initializer: Expression) -> PropertyAssignment:
    return PropertyAssignment(Identifier(name), initializer)


def create_goog_call(method: str, argument: StringLiteral) -> CallExpression:
    """goog.<method>('<argument>')"""
    return CallExpression(PropertyAccess(Identifier("goog"), method), [argument])


# -----------------------------------------------------------------------------
# Statements
# -----------------------------------------------------------------------------

def create_expression_statement(expression: Expression) -> ExpressionStatement:
    return ExpressionStatement(expression)


def create_variable_statement(name: Identifier, initializer: Optional[Expression],
                              kind: VariableKind = VariableKind.VAR) -> VariableStatement:
    """Single-declarator `var name = initializer;`"""
    return VariableStatement(kind, [VariableDeclaration(name, initializer)])


def create_not_emitted_statement(original: Statement) -> NotEmittedStatement:
    """Placeholder for `original`: prints only the comments attached to it."""
    placeholder = NotEmittedStatement()
    set_original_node(placeholder, original)
    return set_text_range(placeholder, original)
