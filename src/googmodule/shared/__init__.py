"""
Shared components: AST, scopes, diagnostics.
"""

from .source_location import SourceLocation
from .errors import (
    Error, ErrorReporter,
    GoogModuleError, GoogModuleSourceError, GoogModuleImplementationError,
)
from .nodes import (
    ASTNode, Expression, Statement, SourceUnit, NodeType, Comment,
    BinaryOperator, UnaryOperator, VariableKind, MethodKind, ImportKind,
    Identifier, StringLiteral, NumericLiteral, BooleanLiteral, NullLiteral, ThisExpression,
    ObjectLiteral, PropertyAssignment, ArrayLiteral, PropertyAccess, ElementAccess,
    CallExpression, NewExpression, BinaryExpression, UnaryExpression, ConditionalExpression,
    ParenthesizedExpression, CommaListExpression, FunctionExpression, ParameterDeclaration,
    ArrowFunction, ClassExpression, UpdateExpression, SuperExpression, ShorthandPropertyAssignment,
    ExpressionStatement, VariableStatement, VariableDeclaration,
    ObjectBindingPattern, ArrayBindingPattern, BindingElement,
    FunctionDeclaration, Block, ReturnStatement, IfStatement, ForInStatement,
    ForStatement, WhileStatement, DoStatement, BreakStatement, ContinueStatement,
    ThrowStatement, TryStatement, CatchClause, SwitchStatement, CaseClause,
    ClassDeclaration, MethodDeclaration, PropertyDeclaration, ClassElement,
    EmptyStatement, NotEmittedStatement,
    ImportDeclaration, ImportClause, ImportSpecifier, ExportDeclaration, ExportSpecifier,
)
from .ast_visitor import ASTVisitor
from .scope import Scope, ScopeKind, ScopeManager, Symbol, SymbolKind
