"""
Scope resolution: lexical scopes and the symbols declared in them.

A stack of scopes, each scope is name -> Symbol. declare = set_var, lookup = get_var.
JavaScript `var` and function declarations land in the nearest function (or module)
scope; `let`/`const` land in the innermost scope.
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Generator, List, Optional


# -----------------------------------------------------------------------------
# Scope kind (categorizes scope types)
# -----------------------------------------------------------------------------


class ScopeKind(Enum):
    MODULE = "module"
    FUNCTION = "function"
    BLOCK = "block"

    @property
    def is_var_scope(self) -> bool:
        """True for scopes that receive hoisted `var` and function declarations."""
        return self in (ScopeKind.MODULE, ScopeKind.FUNCTION)


# -----------------------------------------------------------------------------
# Symbol kind
# -----------------------------------------------------------------------------


class SymbolKind(Enum):
    IMPORT = "import"
    VARIABLE = "variable"
    FUNCTION = "function"
    CLASS = "class"
    PARAMETER = "parameter"


# -----------------------------------------------------------------------------
# Symbol (one declared name; redeclarations append to declarations)
# -----------------------------------------------------------------------------


@dataclass(eq=False)
class Symbol:
    """
    One declared name.

    declarations holds the declaring nodes in source order: ImportSpecifier,
    VariableDeclaration, FunctionDeclaration, ClassDeclaration, ParameterDeclaration,
    BindingElement or a catch variable.
    """
    name: str
    kind: SymbolKind
    declarations: List[Any] = field(default_factory=list)

    @property
    def value_declaration(self) -> Optional[Any]:
        return self.declarations[0] if self.declarations else None


# -----------------------------------------------------------------------------
# Scope (one dict in the stack: name -> Symbol)
# -----------------------------------------------------------------------------


@dataclass(eq=False)
class Scope:
    """
    One scope level.
    Single map: name -> Symbol. declare() merges redeclarations.
    """

    parent: Optional[Scope]
    kind: ScopeKind
    _symbols: Dict[str, Symbol] = field(default_factory=dict)

    def lookup(self, name: str) -> Optional[Symbol]:
        """Get symbol from scope chain, innermost to outermost."""
        if name in self._symbols:
            return self._symbols[name]
        if self.parent is not None:
            return self.parent.lookup(name)
        return None

    def declare(self, name: str, kind: SymbolKind, declaration: Any) -> Symbol:
        """Declare name in this scope; a redeclaration adds to the existing symbol."""
        symbol = self._symbols.get(name)
        if symbol is None:
            symbol = Symbol(name=name, kind=kind)
            self._symbols[name] = symbol
        symbol.declarations.append(declaration)
        return symbol

    def var_scope(self) -> Scope:
        """Nearest enclosing scope that receives `var` declarations."""
        scope: Scope = self
        while not scope.kind.is_var_scope and scope.parent is not None:
            scope = scope.parent
        return scope

    @property
    def symbols(self) -> Dict[str, Symbol]:
        return dict(self._symbols)


# -----------------------------------------------------------------------------
# Scope manager (stack, scope() push/pop, declare/lookup on current)
# -----------------------------------------------------------------------------


class ScopeManager:
    """
    Scope stack. enter_scope = push, exit_scope = pop.
    lookup/declare operate on current (innermost) scope.
    """

    def __init__(self) -> None:
        self._stack: List[Scope] = []
        self._current: Optional[Scope] = None

    def enter_scope(self, kind: ScopeKind) -> Scope:
        scope = Scope(parent=self._current, kind=kind)
        self._stack.append(scope)
        self._current = scope
        return scope

    def exit_scope(self) -> None:
        if not self._stack:
            raise RuntimeError("Cannot exit scope: no active scope")
        self._stack.pop()
        self._current = self._stack[-1] if self._stack else None

    @contextmanager
    def scope(self, kind: ScopeKind) -> Generator[Scope, None, None]:
        """Context manager: enter on __enter__, exit on __exit__ (with self.scope())."""
        s = self.enter_scope(kind)
        try:
            yield s
        finally:
            self.exit_scope()

    def current_scope(self) -> Optional[Scope]:
        return self._current

    def lookup(self, name: str) -> Optional[Symbol]:
        """Resolve name in current scope chain."""
        if self._current is None:
            return None
        return self._current.lookup(name)
