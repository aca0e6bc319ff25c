"""
Default-export substitution

A default import of a goog: namespace binds the namespace object itself,
not a module with a `default` member:

    import Foo from 'goog:some.Foo';
    Foo.default.bar();            ->  Foo.bar();

TypeScript's CommonJS emit reads the default import through `.default`; the
hook installed here strips it at print time. Only `<identifier>.default`
accesses whose identifier traces back to an import or export declaration
with a goog: specifier are replaced.
"""

import logging
from typing import Optional, Union, TYPE_CHECKING

from ..shared.nodes import (
    ASTNode, Identifier, PropertyAccess, ImportDeclaration, ExportDeclaration, NodeType,
    StringLiteral,
)
from ..shared.factory import get_original_node
from ..utils.config import DEFAULT_EXPORT_PROPERTY
from .base import EmitHint, TransformationContext
from .statement_classifier import extract_goog_namespace_import

if TYPE_CHECKING:
    from ..analysis.binder import SymbolTable

logger = logging.getLogger(__name__)

ModuleDeclaration = Union[ImportDeclaration, ExportDeclaration]


def find_module_declaration(identifier: Identifier, symbol_table: 'SymbolTable') -> Optional[ModuleDeclaration]:
    """
    The import/export declaration `identifier` came from, or None.

    Tried in order:
    1. the identifier's original node is itself such a declaration
    2. the first declaration of its symbol sits two levels below an import
       (ImportSpecifier -> ImportClause -> ImportDeclaration)
    """
    original = get_original_node(identifier)
    if isinstance(original, (ImportDeclaration, ExportDeclaration)):
        return original

    symbol = symbol_table.get_symbol_at_location(identifier)
    if symbol is None or symbol.value_declaration is None:
        return None
    parent = symbol.value_declaration.parent
    grandparent = parent.parent if parent is not None else None
    if isinstance(grandparent, ImportDeclaration):
        return grandparent
    return None


def substitute_default_access(node: ASTNode, symbol_table: 'SymbolTable') -> ASTNode:
    """`X.default` -> `X` when X is a default import of a goog: namespace; else `node`."""
    if not isinstance(node, PropertyAccess) or node.name != DEFAULT_EXPORT_PROPERTY:
        return node
    if not isinstance(node.expression, Identifier):
        return node

    declaration = find_module_declaration(node.expression, symbol_table)
    if declaration is None:
        return node
    specifier = declaration.module_specifier
    if not isinstance(specifier, StringLiteral):
        return node
    if not extract_goog_namespace_import(specifier.value):
        return node

    logger.debug(f"Dropping .default on {node.expression.name} ({specifier.value})")
    return node.expression


def install_default_substitution(context: TransformationContext) -> None:
    """Chain the `.default` hook after whatever hook is already installed."""
    previous = context.on_substitute_node
    context.enable_substitution(NodeType.PROPERTY_ACCESS)

    def on_substitute_node(hint: EmitHint, node: ASTNode) -> ASTNode:
        node = previous(hint, node)
        return substitute_default_access(node, context.symbol_table)

    context.on_substitute_node = on_substitute_node
