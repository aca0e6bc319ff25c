"""
Statement Rewriter

Turns classifier verdicts into output statements, in input order:

    "use strict";                      ->  (placeholder, comments kept)
    module.exports = X;                ->  exports = X;
    require('./a');                    ->  var googmodule_1_ = goog.require('lib.a');
    var b = require('./a');            ->  var b = googmodule_1_;
    __exportStar(require('./c'), e);   ->  var googmodule_2_ = goog.require('lib.c');
                                           __exportStar(googmodule_2_, e);

Every namespace gets exactly one goog.require per unit; later imports of the
same namespace alias the identifier bound by the first one.
"""

import logging
from typing import List, Optional, TYPE_CHECKING

from ..shared.nodes import (
    Expression, Statement, Identifier, StringLiteral, CallExpression, ExpressionStatement,
    BinaryExpression,
)
from ..shared.factory import (
    create_assignment, create_call, create_expression_statement, create_goog_call,
    create_identifier, create_not_emitted_statement, create_string_literal,
    create_variable_statement, set_original_node, set_text_range,
)
from ..utils.config import EXPORTS_IDENTIFIER, REQUIRE_FUNCTION, TSLIB_MODULE
from .namespace_bindings import NamespaceBindingTable, SyntheticNameCounter
from .statement_classifier import (
    Classification, StatementKind, classify_statement, extract_goog_namespace_import,
    is_identifier_named,
)

if TYPE_CHECKING:
    from ..analysis.module_system.host import ProcessorHost
    from ..analysis.module_system.manifest import ModulesManifest

logger = logging.getLogger(__name__)


class StatementRewriter:
    """
    Per-unit rewrite state: the binding table and the synthetic name counter.

    One instance per unit; host and manifest exceptions propagate unchanged.
    """

    def __init__(self, host: 'ProcessorHost', manifest: 'ModulesManifest', file_name: str):
        self.host = host
        self.manifest = manifest
        self.file_name = file_name
        self.bindings = NamespaceBindingTable()
        self.counter = SyntheticNameCounter()

    def rewrite(self, statements: List[Statement]) -> List[Statement]:
        out: List[Statement] = []
        for stmt in statements:
            self.rewrite_statement(classify_statement(stmt), out)
        return out

    def rewrite_statement(self, verdict: Classification, out: List[Statement]) -> None:
        """Append the replacement(s) for one classified statement to `out`."""
        stmt = verdict.statement
        kind = verdict.kind

        if kind in (StatementKind.USE_STRICT, StatementKind.ES_MODULE_MARKER):
            out.append(create_not_emitted_statement(stmt))
        elif kind is StatementKind.MODULE_EXPORTS_ASSIGNMENT:
            out.append(self._rewrite_module_exports_assignment(stmt))
        elif kind is StatementKind.SIDE_EFFECT_REQUIRE:
            ident = self.counter.next_identifier()
            out.append(self.create_goog_require(stmt, verdict.specifier, ident))
        elif kind is StatementKind.EXPORT_STAR_REQUIRE:
            ident = self.counter.next_identifier()
            out.append(self.create_goog_require(stmt, verdict.specifier, ident))
            out.append(self._reexport(verdict.wrapper, ident))
        elif kind is StatementKind.ALIASED_REQUIRE:
            out.append(self.create_goog_require(stmt, verdict.specifier, verdict.declared_name))
        else:
            # UNRECOGNIZED and EXPORTS_ASSIGNMENT pass through untouched
            out.append(stmt)

    def resolve_namespace(self, specifier: str) -> str:
        """goog:ns -> ns; anything else goes through the host."""
        namespace = extract_goog_namespace_import(specifier)
        if namespace is not None:
            return namespace
        if self.host.convert_index_import_shorthand:
            specifier = self.host.resolve_index_shorthand(self.file_name, specifier)
        return self.host.path_to_module_name(self.file_name, specifier)

    def create_goog_require(self, original: Statement, specifier: str, ident: Identifier) -> Statement:
        """
        `var <ident> = goog.require('<ns>');` for the first import of a namespace,
        `var <ident> = <first ident>;` for every later one.
        """
        namespace = self.resolve_namespace(specifier)
        existing = self.bindings.lookup(namespace)
        initializer: Expression
        if existing is None:
            self.bindings.bind(namespace, ident)
            self.manifest.add_referenced_module(self.file_name, namespace)
            initializer = create_goog_call("require", create_string_literal(namespace))
            logger.debug(f"{self.file_name}: bound {namespace} to {ident.name}")
        else:
            initializer = set_original_node(create_identifier(existing.name), existing)
            logger.debug(f"{self.file_name}: {ident.name} reuses {existing.name} for {namespace}")
        statement = create_variable_statement(ident, initializer)
        return set_original_node(set_text_range(statement, original), original)

    @staticmethod
    def _rewrite_module_exports_assignment(stmt: ExpressionStatement) -> Statement:
        assignment: BinaryExpression = stmt.expression
        rewritten = create_expression_statement(
            create_assignment(create_identifier(EXPORTS_IDENTIFIER), assignment.right)
        )
        return set_original_node(set_text_range(rewritten, stmt), stmt)

    @staticmethod
    def _reexport(wrapper: CallExpression, ident: Identifier) -> Statement:
        """`<helper>(<ident>[, <second argument>]);`"""
        arguments: List[Expression] = [ident]
        if len(wrapper.arguments) > 1:
            arguments.append(wrapper.arguments[1])
        return create_expression_statement(create_call(wrapper.callee, arguments))


def rewrite_tslib_require(stmt: Statement) -> Statement:
    """
    `require('tslib');` -> `goog.require('tslib');`, anything else unchanged.

    The only rewrite applied in JS transpilation mode.
    """
    if not isinstance(stmt, ExpressionStatement):
        return stmt
    call = stmt.expression
    if not isinstance(call, CallExpression) or not is_identifier_named(call.callee, REQUIRE_FUNCTION):
        return stmt
    if len(call.arguments) != 1:
        return stmt
    arg: Optional[Expression] = call.arguments[0]
    if not isinstance(arg, StringLiteral) or arg.value != TSLIB_MODULE:
        return stmt
    rewritten = create_expression_statement(create_goog_call("require", arg))
    return set_original_node(set_text_range(rewritten, stmt), stmt)
