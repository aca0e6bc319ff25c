"""
Binder: parent links and lexical name resolution.

Scopes follow JavaScript: module and function scopes receive hoisted `var`
and function declarations; blocks receive `let`/`const`. Every identifier in
reference or declaration position gets the Symbol it resolves to (None for
globals such as `require`, `exports` and `Object`).
"""

import logging
from dataclasses import fields
from typing import Dict, Iterable, List, Optional

from ..shared.ast_visitor import ASTVisitor
from ..shared.factory import get_original_node
from ..shared.nodes import (
    ASTNode, SourceUnit, Statement, Identifier, StringLiteral, VariableKind,
    VariableStatement, VariableDeclaration, ObjectBindingPattern, ArrayBindingPattern,
    FunctionDeclaration, FunctionExpression, ArrowFunction, Block, IfStatement, ForInStatement,
    ForStatement, WhileStatement, DoStatement, TryStatement, CatchClause, SwitchStatement,
    ClassDeclaration, ClassExpression, MethodDeclaration, ImportDeclaration,
)
from ..shared.scope import Scope, ScopeKind, ScopeManager, Symbol, SymbolKind

logger = logging.getLogger(__name__)


def set_parent_links(node: ASTNode) -> None:
    """Point every child's `parent` at the node that holds it."""
    stack: List[ASTNode] = [node]
    while stack:
        current = stack.pop()
        for f in fields(current):
            value = getattr(current, f.name)
            children = value if isinstance(value, list) else [value]
            for child in children:
                if isinstance(child, ASTNode):
                    child.parent = current
                    stack.append(child)


class _Binder(ASTVisitor[None]):
    """Declares names on scope entry, then resolves identifiers while walking."""

    def __init__(self) -> None:
        self.scopes = ScopeManager()
        self.module_scope: Optional[Scope] = None

    # -------------------------------------------------------------------------
    # Declarations
    # -------------------------------------------------------------------------

    def _declare_binding(self, scope: Scope, decl: VariableDeclaration) -> None:
        name = decl.name
        if isinstance(name, Identifier):
            scope.declare(name.name, SymbolKind.VARIABLE, decl)
        elif isinstance(name, (ObjectBindingPattern, ArrayBindingPattern)):
            for element in name.elements:
                scope.declare(element.name.name, SymbolKind.VARIABLE, element)

    def _declare_lexical(self, statements: Iterable[Statement]) -> None:
        """let/const, function, class and import declarations of one statement list"""
        scope = self.scopes.current_scope()
        for stmt in statements:
            if isinstance(stmt, VariableStatement) and stmt.kind is not VariableKind.VAR:
                for decl in stmt.declarations:
                    self._declare_binding(scope, decl)
            elif isinstance(stmt, FunctionDeclaration):
                scope.declare(stmt.name.name, SymbolKind.FUNCTION, stmt)
            elif isinstance(stmt, ClassDeclaration):
                scope.declare(stmt.name.name, SymbolKind.CLASS, stmt)
            elif isinstance(stmt, ImportDeclaration) and stmt.import_clause is not None:
                for spec in stmt.import_clause.specifiers:
                    scope.declare(spec.name.name, SymbolKind.IMPORT, spec)

    def _hoist_vars(self, statements: Iterable[Statement]) -> None:
        """`var` declarations anywhere in a function or module body, nested functions excluded"""
        scope = self.scopes.current_scope()
        for stmt in statements:
            if isinstance(stmt, VariableStatement) and stmt.kind is VariableKind.VAR:
                for decl in stmt.declarations:
                    self._declare_binding(scope, decl)
            elif isinstance(stmt, Block):
                self._hoist_vars(stmt.statements)
            elif isinstance(stmt, IfStatement):
                self._hoist_vars([stmt.then_statement])
                if stmt.else_statement is not None:
                    self._hoist_vars([stmt.else_statement])
            elif isinstance(stmt, ForInStatement):
                self._hoist_vars([stmt.initializer, stmt.statement])
            elif isinstance(stmt, ForStatement):
                if isinstance(stmt.initializer, VariableStatement):
                    self._hoist_vars([stmt.initializer])
                self._hoist_vars([stmt.statement])
            elif isinstance(stmt, (WhileStatement, DoStatement)):
                self._hoist_vars([stmt.statement])
            elif isinstance(stmt, TryStatement):
                self._hoist_vars([stmt.try_block])
                if stmt.catch_clause is not None:
                    self._hoist_vars([stmt.catch_clause.block])
                if stmt.finally_block is not None:
                    self._hoist_vars([stmt.finally_block])
            elif isinstance(stmt, SwitchStatement):
                for clause in stmt.clauses:
                    self._hoist_vars(clause.statements)

    def _enter_body(self, statements: List[Statement]) -> None:
        self._hoist_vars(statements)
        self._declare_lexical(statements)
        for stmt in statements:
            stmt.accept(self)

    # -------------------------------------------------------------------------
    # Visits
    # -------------------------------------------------------------------------

    def visit_source_unit(self, node: SourceUnit) -> None:
        with self.scopes.scope(ScopeKind.MODULE) as scope:
            self.module_scope = scope
            self._enter_body(node.statements)

    def visit_identifier(self, node: Identifier) -> None:
        node._symbol = self.scopes.lookup(node.name)

    def visit_string_literal(self, node: StringLiteral) -> None:
        pass

    def visit_block(self, node: Block) -> None:
        with self.scopes.scope(ScopeKind.BLOCK):
            self._declare_lexical(node.statements)
            for stmt in node.statements:
                stmt.accept(self)

    def visit_for_in_statement(self, node: ForInStatement) -> None:
        with self.scopes.scope(ScopeKind.BLOCK) as scope:
            if node.initializer.kind is not VariableKind.VAR:
                for decl in node.initializer.declarations:
                    self._declare_binding(scope, decl)
            node.initializer.accept(self)
            node.expression.accept(self)
            node.statement.accept(self)

    def visit_for_statement(self, node: ForStatement) -> None:
        with self.scopes.scope(ScopeKind.BLOCK) as scope:
            initializer = node.initializer
            if isinstance(initializer, VariableStatement) and initializer.kind is not VariableKind.VAR:
                for decl in initializer.declarations:
                    self._declare_binding(scope, decl)
            for part in (initializer, node.condition, node.incrementor):
                if part is not None:
                    part.accept(self)
            node.statement.accept(self)

    def visit_catch_clause(self, node: CatchClause) -> None:
        with self.scopes.scope(ScopeKind.BLOCK) as scope:
            if node.variable is not None:
                scope.declare(node.variable.name, SymbolKind.VARIABLE, node)
                node.variable.accept(self)
            node.block.accept(self)

    def visit_switch_statement(self, node: SwitchStatement) -> None:
        node.expression.accept(self)
        # One lexical scope shared by every case
        with self.scopes.scope(ScopeKind.BLOCK):
            self._declare_lexical(s for clause in node.clauses for s in clause.statements)
            for clause in node.clauses:
                clause.accept(self)

    def _visit_function(self, node, own_name: Optional[Identifier]) -> None:
        with self.scopes.scope(ScopeKind.FUNCTION) as scope:
            if own_name is not None:
                scope.declare(own_name.name, SymbolKind.FUNCTION, node)
                own_name.accept(self)
            for param in node.parameters:
                scope.declare(param.name.name, SymbolKind.PARAMETER, param)
                param.accept(self)
            self._enter_body(node.body.statements)

    def visit_function_declaration(self, node: FunctionDeclaration) -> None:
        # Name is declared in the enclosing scope
        node.name.accept(self)
        self._visit_function(node, None)

    def visit_function_expression(self, node: FunctionExpression) -> None:
        self._visit_function(node, node.name)

    def visit_arrow_function(self, node: ArrowFunction) -> None:
        with self.scopes.scope(ScopeKind.FUNCTION) as scope:
            for param in node.parameters:
                scope.declare(param.name.name, SymbolKind.PARAMETER, param)
                param.accept(self)
            if isinstance(node.body, Block):
                self._enter_body(node.body.statements)
            else:
                node.body.accept(self)

    def visit_method_declaration(self, node: MethodDeclaration) -> None:
        self._visit_function(node, None)

    def visit_class_expression(self, node: ClassExpression) -> None:
        with self.scopes.scope(ScopeKind.BLOCK) as scope:
            if node.name is not None:
                scope.declare(node.name.name, SymbolKind.CLASS, node)
                node.name.accept(self)
            if node.heritage is not None:
                node.heritage.accept(self)
            for member in node.members:
                member.accept(self)


class SymbolTable:
    """
    Binder results for every unit of a build.

    bind(unit) must run before get_symbol_at_location is asked about the unit's nodes.
    """

    def __init__(self) -> None:
        self._module_scopes: Dict[str, Scope] = {}

    def bind(self, unit: SourceUnit) -> Scope:
        set_parent_links(unit)
        binder = _Binder()
        unit.accept(binder)
        self._module_scopes[unit.file_name] = binder.module_scope
        logger.debug(f"Bound {unit.file_name}: {len(binder.module_scope.symbols)} module-level symbols")
        return binder.module_scope

    def module_scope(self, file_name: str) -> Optional[Scope]:
        return self._module_scopes.get(file_name)

    def get_symbol_at_location(self, node: Optional[ASTNode]) -> Optional[Symbol]:
        """Symbol of an identifier (or of the parsed identifier it was made from)."""
        if not isinstance(node, Identifier):
            return None
        if node._symbol is not None:
            return node._symbol
        original = get_original_node(node)
        if isinstance(original, Identifier):
            return original._symbol
        return None
