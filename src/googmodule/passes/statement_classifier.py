"""
Statement Classifier

Pure syntactic predicates over top-level statements of TypeScript's CommonJS
emit. No type information is consulted and nothing here raises: any shape
that does not match exactly is UNRECOGNIZED and passes through the rewrite
untouched.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional

from ..shared.nodes import (
    ASTNode, Expression, Statement, Identifier, StringLiteral, BooleanLiteral, ObjectLiteral,
    PropertyAccess, CallExpression, BinaryExpression, BinaryOperator,
    ExpressionStatement, VariableStatement,
)
from ..utils.config import (
    GOOG_NAMESPACE_PREFIX, REQUIRE_FUNCTION, EXPORT_STAR_HELPERS, EXPORTS_IDENTIFIER,
    MODULE_IDENTIFIER, USE_STRICT_DIRECTIVE, ES_MODULE_PROPERTY,
)


class StatementKind(Enum):
    USE_STRICT = "use_strict"                                # "use strict";
    ES_MODULE_MARKER = "es_module_marker"                    # Object.defineProperty(exports, "__esModule", ...)
    EXPORTS_ASSIGNMENT = "exports_assignment"                # exports = X;
    MODULE_EXPORTS_ASSIGNMENT = "module_exports_assignment"  # module.exports = X;
    SIDE_EFFECT_REQUIRE = "side_effect_require"              # require('x');
    EXPORT_STAR_REQUIRE = "export_star_require"              # __exportStar(require('x'), exports);
    ALIASED_REQUIRE = "aliased_require"                      # var x = require('x');
    UNRECOGNIZED = "unrecognized"


@dataclass
class Classification:
    """
    Verdict for one statement.

    specifier is the require() argument for the three require kinds; wrapper is
    the outer helper call for EXPORT_STAR_REQUIRE; declared_name is the
    variable of ALIASED_REQUIRE.
    """
    kind: StatementKind
    statement: Statement
    specifier: Optional[str] = None
    wrapper: Optional[CallExpression] = None
    declared_name: Optional[Identifier] = None

    @property
    def is_require(self) -> bool:
        return self.specifier is not None


# -----------------------------------------------------------------------------
# Shape helpers
# -----------------------------------------------------------------------------

def is_identifier_named(node: Optional[ASTNode], name: str) -> bool:
    return isinstance(node, Identifier) and node.name == name


def is_property_access(node: Optional[ASTNode], parent: str, child: str) -> bool:
    """True if node is `<parent>.<child>` with an identifier on the left."""
    return (isinstance(node, PropertyAccess)
            and is_identifier_named(node.expression, parent)
            and node.name == child)


def _plain_assignment(stmt: Statement) -> Optional[BinaryExpression]:
    if not isinstance(stmt, ExpressionStatement):
        return None
    expr = stmt.expression
    if not isinstance(expr, BinaryExpression) or expr.operator is not BinaryOperator.ASSIGN:
        return None
    return expr


# -----------------------------------------------------------------------------
# Predicates
# -----------------------------------------------------------------------------

def is_use_strict(stmt: Statement) -> bool:
    """`"use strict";`"""
    if not isinstance(stmt, ExpressionStatement):
        return False
    expr = stmt.expression
    return isinstance(expr, StringLiteral) and expr.value == USE_STRICT_DIRECTIVE


def is_es_module_property(stmt: Statement) -> bool:
    """Exactly `Object.defineProperty(exports, "__esModule", { value: true });`"""
    if not isinstance(stmt, ExpressionStatement):
        return False
    call = stmt.expression
    if not isinstance(call, CallExpression):
        return False
    if not is_property_access(call.callee, "Object", "defineProperty"):
        return False
    if len(call.arguments) != 3:
        return False
    target, name, descriptor = call.arguments
    if not is_identifier_named(target, EXPORTS_IDENTIFIER):
        return False
    if not isinstance(name, StringLiteral) or name.value != ES_MODULE_PROPERTY:
        return False
    if not isinstance(descriptor, ObjectLiteral) or len(descriptor.properties) != 1:
        return False
    prop = descriptor.properties[0]
    if not is_identifier_named(prop.name, "value"):
        return False
    return isinstance(prop.initializer, BooleanLiteral) and prop.initializer.value is True


def is_module_exports_assignment(stmt: Statement) -> bool:
    """`module.exports = X;`"""
    assignment = _plain_assignment(stmt)
    return assignment is not None and is_property_access(assignment.left, MODULE_IDENTIFIER, EXPORTS_IDENTIFIER)


def is_exports_assignment(stmt: Statement) -> bool:
    """`exports = X;`"""
    assignment = _plain_assignment(stmt)
    return assignment is not None and is_identifier_named(assignment.left, EXPORTS_IDENTIFIER)


def has_exports_assignment(statements: Iterable[Statement]) -> bool:
    """True if any statement reassigns `exports` or `module.exports` directly."""
    return any(is_module_exports_assignment(s) or is_exports_assignment(s) for s in statements)


def extract_require(expr: Optional[Expression]) -> Optional[str]:
    """
    The string argument of `require('foo')`, or None.

    An empty specifier counts as no require.
    """
    if not isinstance(expr, CallExpression):
        return None
    if not is_identifier_named(expr.callee, REQUIRE_FUNCTION):
        return None
    if len(expr.arguments) != 1:
        return None
    arg = expr.arguments[0]
    if not isinstance(arg, StringLiteral):
        return None
    return arg.value or None


def extract_goog_namespace_import(specifier: str) -> Optional[str]:
    """
    Namespace part of a goog: import URL, or None.

    For example, for `require('goog:foo.Bar')`, returns `foo.Bar`.
    """
    if specifier.startswith(GOOG_NAMESPACE_PREFIX):
        return specifier[len(GOOG_NAMESPACE_PREFIX):]
    return None


def is_export_star_call(expr: Optional[Expression]) -> bool:
    """`__exportStar(...)` or `__export(...)` with an identifier callee"""
    return (isinstance(expr, CallExpression)
            and isinstance(expr.callee, Identifier)
            and expr.callee.name in EXPORT_STAR_HELPERS)


# -----------------------------------------------------------------------------
# Classification
# -----------------------------------------------------------------------------

def classify_statement(stmt: Statement) -> Classification:
    """Decide which CommonJS shape a top-level statement has."""
    if isinstance(stmt, ExpressionStatement):
        return _classify_expression_statement(stmt)
    if isinstance(stmt, VariableStatement):
        return _classify_variable_statement(stmt)
    return Classification(StatementKind.UNRECOGNIZED, stmt)


def _classify_expression_statement(stmt: ExpressionStatement) -> Classification:
    if is_use_strict(stmt):
        return Classification(StatementKind.USE_STRICT, stmt)
    if is_es_module_property(stmt):
        return Classification(StatementKind.ES_MODULE_MARKER, stmt)
    if is_module_exports_assignment(stmt):
        return Classification(StatementKind.MODULE_EXPORTS_ASSIGNMENT, stmt)
    if is_exports_assignment(stmt):
        return Classification(StatementKind.EXPORTS_ASSIGNMENT, stmt)

    expr = stmt.expression
    if is_export_star_call(expr):
        inner = expr.arguments[0] if expr.arguments else None
        specifier = extract_require(inner)
        if specifier is not None:
            return Classification(StatementKind.EXPORT_STAR_REQUIRE, stmt, specifier=specifier, wrapper=expr)
        return Classification(StatementKind.UNRECOGNIZED, stmt)

    specifier = extract_require(expr)
    if specifier is not None:
        return Classification(StatementKind.SIDE_EFFECT_REQUIRE, stmt, specifier=specifier)
    return Classification(StatementKind.UNRECOGNIZED, stmt)


def _classify_variable_statement(stmt: VariableStatement) -> Classification:
    if len(stmt.declarations) != 1:
        return Classification(StatementKind.UNRECOGNIZED, stmt)
    decl = stmt.declarations[0]
    if not isinstance(decl.name, Identifier):
        return Classification(StatementKind.UNRECOGNIZED, stmt)
    specifier = extract_require(decl.initializer)
    if specifier is None:
        return Classification(StatementKind.UNRECOGNIZED, stmt)
    return Classification(StatementKind.ALIASED_REQUIRE, stmt, specifier=specifier, declared_name=decl.name)
