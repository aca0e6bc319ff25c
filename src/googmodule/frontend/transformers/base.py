"""
JavaScript AST Transformer
Converts the Lark parse tree to googmodule AST nodes
"""

from lark import Transformer, v_args
from lark.lexer import Token
from typing import List, Optional, Union
from typing_extensions import TypeAlias
import logging

from ...shared import (
    SourceLocation, Expression, Statement, SourceUnit,
    BinaryOperator, UnaryOperator, VariableKind, MethodKind, ImportKind,
    Identifier, StringLiteral, BooleanLiteral, NullLiteral, ThisExpression,
    ObjectLiteral, PropertyAssignment, ArrayLiteral, PropertyAccess, NewExpression,
    BinaryExpression, UnaryExpression, ConditionalExpression, ParenthesizedExpression,
    CommaListExpression, FunctionExpression, ParameterDeclaration,
    ArrowFunction, ClassExpression, UpdateExpression, SuperExpression, ShorthandPropertyAssignment,
    ExpressionStatement, VariableStatement, VariableDeclaration,
    ObjectBindingPattern, ArrayBindingPattern, BindingElement,
    FunctionDeclaration, Block, ReturnStatement, IfStatement, ForInStatement, EmptyStatement,
    ForStatement, WhileStatement, DoStatement, BreakStatement, ContinueStatement, ThrowStatement,
    TryStatement, CatchClause, SwitchStatement, CaseClause,
    ClassDeclaration, ClassElement, MethodDeclaration, PropertyDeclaration,
    ImportDeclaration, ImportClause, ImportSpecifier, ExportDeclaration, ExportSpecifier,
)
from ...shared.errors import GoogModuleImplementationError
from .literals import LiteralParser
from .expressions import (
    BinaryExpressionParser, SuffixChainParser, MemberSuffix, IndexSuffix, CallSuffix, Suffix,
)

# Lark Meta object contains location information
LarkMeta: TypeAlias = Union[None, object]
ParamsOrBlock: TypeAlias = Union[List[ParameterDeclaration], Block, Token]

logger: logging.Logger = logging.getLogger(__name__)


@v_args(inline=True, meta=True)
class GoogModuleTransformer(Transformer):
    """
    JavaScript AST Transformer

    One method per grammar rule or alias; anonymous tokens are filtered by the
    grammar so methods only receive named terminals and transformed children.
    """

    def __init__(self) -> None:
        super().__init__()
        self.expression_parser: BinaryExpressionParser = BinaryExpressionParser(self._extract_location)
        self.current_file: str = ""  # Must be set by parser before use

    def _extract_location(self, meta: LarkMeta) -> SourceLocation:
        """Extract location from Lark meta object"""
        if not self.current_file:
            raise GoogModuleImplementationError(
                "Parser bug: current_file not set before transforming"
            )
        if meta is None or not hasattr(meta, 'line'):
            return SourceLocation(file=self.current_file, line=0, column=0)
        return SourceLocation(
            file=self.current_file,
            line=meta.line,
            column=meta.column,
            start=meta.start_pos,
            end=meta.end_pos,
            end_line=getattr(meta, 'end_line', 0),
            end_column=getattr(meta, 'end_column', 0),
        )

    def _token_location(self, token: Token) -> SourceLocation:
        return SourceLocation(
            file=self.current_file,
            line=token.line,
            column=token.column,
            start=token.start_pos,
            end=token.end_pos,
            end_line=token.end_line,
            end_column=token.end_column,
        )

    def _identifier(self, token: Token) -> Identifier:
        return Identifier(str(token), location=self._token_location(token))

    # =========================================================================
    # SOURCE UNIT AND STATEMENTS
    # =========================================================================

    def source_unit(self, meta: LarkMeta, *statements: Statement) -> SourceUnit:
        return SourceUnit(self.current_file, list(statements), location=self._extract_location(meta))

    def empty_stmt(self, meta: LarkMeta) -> EmptyStatement:
        return EmptyStatement(location=self._extract_location(meta))

    def expr_stmt(self, meta: LarkMeta, expression: Expression) -> ExpressionStatement:
        return ExpressionStatement(expression, location=self._extract_location(meta))

    def block(self, meta: LarkMeta, *statements: Statement) -> Block:
        return Block(list(statements), location=self._extract_location(meta))

    def return_stmt(self, meta: LarkMeta, expression: Optional[Expression] = None) -> ReturnStatement:
        return ReturnStatement(expression, location=self._extract_location(meta))

    def if_stmt(self, meta: LarkMeta, condition: Expression, then_statement: Statement,
                else_statement: Optional[Statement] = None) -> IfStatement:
        return IfStatement(condition, then_statement, else_statement, location=self._extract_location(meta))

    def _loop_variable(self, kind: VariableKind, name: Token) -> VariableStatement:
        name_location = self._token_location(name)
        return VariableStatement(
            kind,
            [VariableDeclaration(self._identifier(name), None, location=name_location)],
            location=name_location,
        )

    def for_in_stmt(self, meta: LarkMeta, kind: VariableKind, name: Token, expression: Expression,
                    statement: Statement) -> ForInStatement:
        """Grammar: 'for' '(' var_kind NAME 'in' expr ')' statement"""
        return ForInStatement(self._loop_variable(kind, name), expression, statement,
                              location=self._extract_location(meta))

    def for_of_stmt(self, meta: LarkMeta, kind: VariableKind, name: Token, expression: Expression,
                    statement: Statement) -> ForInStatement:
        return ForInStatement(self._loop_variable(kind, name), expression, statement, is_for_of=True,
                              location=self._extract_location(meta))

    def for_stmt(self, meta: LarkMeta, initializer: Optional[Union[VariableStatement, Expression]],
                 condition: Optional[Expression], incrementor: Optional[Expression],
                 statement: Statement) -> ForStatement:
        """Grammar: 'for' '(' for_init ';' for_cond ';' for_update ')' statement"""
        return ForStatement(initializer, condition, incrementor, statement, location=self._extract_location(meta))

    def for_init(self, meta: LarkMeta, part: Optional[Union[VariableStatement, Expression]] = None):
        return part

    for_cond = for_init
    for_update = for_init

    def for_var_init(self, meta: LarkMeta, kind: VariableKind, *declarations: VariableDeclaration) -> VariableStatement:
        return VariableStatement(kind, list(declarations), location=self._extract_location(meta))

    def while_stmt(self, meta: LarkMeta, condition: Expression, statement: Statement) -> WhileStatement:
        return WhileStatement(condition, statement, location=self._extract_location(meta))

    def do_stmt(self, meta: LarkMeta, statement: Statement, condition: Expression) -> DoStatement:
        return DoStatement(statement, condition, location=self._extract_location(meta))

    def break_stmt(self, meta: LarkMeta) -> BreakStatement:
        return BreakStatement(location=self._extract_location(meta))

    def continue_stmt(self, meta: LarkMeta) -> ContinueStatement:
        return ContinueStatement(location=self._extract_location(meta))

    def throw_stmt(self, meta: LarkMeta, expression: Expression) -> ThrowStatement:
        return ThrowStatement(expression, location=self._extract_location(meta))

    def try_stmt(self, meta: LarkMeta, try_block: Block, catch_clause: CatchClause,
                 finally_block: Optional[Block] = None) -> TryStatement:
        return TryStatement(try_block, catch_clause, finally_block, location=self._extract_location(meta))

    def try_finally(self, meta: LarkMeta, try_block: Block, finally_block: Block) -> TryStatement:
        return TryStatement(try_block, None, finally_block, location=self._extract_location(meta))

    def catch_clause(self, meta: LarkMeta, *children: Union[Token, Block]) -> CatchClause:
        """Grammar: 'catch' ['(' NAME ')'] block"""
        variable = self._identifier(children[0]) if len(children) == 2 else None
        return CatchClause(variable, children[-1], location=self._extract_location(meta))

    def switch_stmt(self, meta: LarkMeta, expression: Expression, *clauses: CaseClause) -> SwitchStatement:
        return SwitchStatement(expression, list(clauses), location=self._extract_location(meta))

    def case_clause(self, meta: LarkMeta, expression: Expression, *statements: Statement) -> CaseClause:
        return CaseClause(expression, list(statements), location=self._extract_location(meta))

    def default_case(self, meta: LarkMeta, *statements: Statement) -> CaseClause:
        return CaseClause(None, list(statements), location=self._extract_location(meta))

    # =========================================================================
    # DECLARATIONS
    # =========================================================================

    def var_stmt(self, meta: LarkMeta, kind: VariableKind, *declarations: VariableDeclaration) -> VariableStatement:
        return VariableStatement(kind, list(declarations), location=self._extract_location(meta))

    def var_kind(self, meta: LarkMeta, token: Token) -> VariableKind:
        return VariableKind(str(token))

    def var_decl(self, meta: LarkMeta, name, initializer: Optional[Expression] = None) -> VariableDeclaration:
        return VariableDeclaration(name, initializer, location=self._extract_location(meta))

    def object_pattern(self, meta: LarkMeta, *elements: BindingElement) -> ObjectBindingPattern:
        return ObjectBindingPattern(list(elements), location=self._extract_location(meta))

    def array_pattern(self, meta: LarkMeta, *names: Token) -> ArrayBindingPattern:
        elements = [BindingElement(self._identifier(n), location=self._token_location(n)) for n in names]
        return ArrayBindingPattern(elements, location=self._extract_location(meta))

    def binding_elem(self, meta: LarkMeta, name: Token, alias: Optional[Token] = None) -> BindingElement:
        """`a` binds a; `a: b` binds b to property a"""
        if alias is None:
            return BindingElement(self._identifier(name), location=self._extract_location(meta))
        return BindingElement(self._identifier(alias), property_name=str(name),
                              location=self._extract_location(meta))

    def params(self, meta: LarkMeta, *names: Token) -> List[ParameterDeclaration]:
        return [ParameterDeclaration(self._identifier(n), location=self._token_location(n)) for n in names]

    def function_decl(self, meta: LarkMeta, name: Token, *rest: ParamsOrBlock) -> FunctionDeclaration:
        """Grammar: 'function' NAME '(' [params] ')' block"""
        parameters = rest[0] if len(rest) == 2 else []
        return FunctionDeclaration(self._identifier(name), parameters, rest[-1],
                                   location=self._extract_location(meta))

    def function_expr(self, meta: LarkMeta, *children: ParamsOrBlock) -> FunctionExpression:
        """Grammar: 'function' [NAME] '(' [params] ')' block"""
        name: Optional[Identifier] = None
        parameters: List[ParameterDeclaration] = []
        for child in children[:-1]:
            if isinstance(child, Token):
                name = self._identifier(child)
            else:
                parameters = child
        return FunctionExpression(name, parameters, children[-1], location=self._extract_location(meta))

    def class_decl(self, meta: LarkMeta, name: Token, *rest) -> ClassDeclaration:
        """Grammar: 'class' NAME [class_heritage] class_body"""
        heritage = rest[0] if len(rest) == 2 else None
        return ClassDeclaration(self._identifier(name), heritage, rest[-1], location=self._extract_location(meta))

    def class_expr(self, meta: LarkMeta, *children) -> ClassExpression:
        """Grammar: 'class' [NAME] [class_heritage] class_body"""
        name: Optional[Identifier] = None
        heritage: Optional[Expression] = None
        for child in children[:-1]:
            if isinstance(child, Token):
                name = self._identifier(child)
            else:
                heritage = child
        return ClassExpression(name, heritage, children[-1], location=self._extract_location(meta))

    def class_heritage(self, meta: LarkMeta, expression: Expression) -> Expression:
        return expression

    def class_body(self, meta: LarkMeta, *members: ClassElement) -> List[ClassElement]:
        return list(members)

    def static_member(self, meta: LarkMeta, member: ClassElement) -> ClassElement:
        member.is_static = True
        member.location = self._extract_location(meta)
        return member

    def method(self, meta: LarkMeta, name: str, *rest: ParamsOrBlock) -> MethodDeclaration:
        """Grammar: method_name '(' [params] ')' block"""
        parameters = rest[0] if len(rest) == 2 else []
        return MethodDeclaration(MethodKind.METHOD, name, parameters, rest[-1], location=self._extract_location(meta))

    def getter(self, meta: LarkMeta, name: str, body: Block) -> MethodDeclaration:
        return MethodDeclaration(MethodKind.GET, name, [], body, location=self._extract_location(meta))

    def setter(self, meta: LarkMeta, name: str, parameters: List[ParameterDeclaration],
               body: Block) -> MethodDeclaration:
        return MethodDeclaration(MethodKind.SET, name, parameters, body, location=self._extract_location(meta))

    def class_field(self, meta: LarkMeta, name: str, initializer: Optional[Expression] = None) -> PropertyDeclaration:
        return PropertyDeclaration(name, initializer, location=self._extract_location(meta))

    def method_name(self, meta: LarkMeta, token: Token) -> str:
        return str(token)

    # =========================================================================
    # MODULE SYNTAX
    # =========================================================================

    def import_decl(self, meta: LarkMeta, clause: ImportClause, specifier: Token) -> ImportDeclaration:
        location = self._extract_location(meta)
        module_specifier = LiteralParser.parse_string(specifier, self._token_location(specifier))
        clause.location = location
        declaration = ImportDeclaration(clause, module_specifier, location=location)
        return declaration

    def bare_import(self, meta: LarkMeta, specifier: Token) -> ImportDeclaration:
        module_specifier = LiteralParser.parse_string(specifier, self._token_location(specifier))
        return ImportDeclaration(None, module_specifier, location=self._extract_location(meta))

    def _specifier(self, kind: ImportKind, token: Token) -> ImportSpecifier:
        return ImportSpecifier(kind, self._identifier(token), location=self._token_location(token))

    def default_clause(self, meta: LarkMeta, name: Token) -> ImportClause:
        return ImportClause(self._specifier(ImportKind.DEFAULT, name), [])

    def default_named_clause(self, meta: LarkMeta, name: Token, named: List[ImportSpecifier]) -> ImportClause:
        return ImportClause(self._specifier(ImportKind.DEFAULT, name), named)

    def named_clause(self, meta: LarkMeta, named: List[ImportSpecifier]) -> ImportClause:
        return ImportClause(None, named)

    def namespace_clause(self, meta: LarkMeta, name: Token) -> ImportClause:
        return ImportClause(None, [self._specifier(ImportKind.NAMESPACE, name)])

    def default_namespace_clause(self, meta: LarkMeta, name: Token, namespace: Token) -> ImportClause:
        return ImportClause(self._specifier(ImportKind.DEFAULT, name),
                            [self._specifier(ImportKind.NAMESPACE, namespace)])

    def named_imports(self, meta: LarkMeta, *specifiers: ImportSpecifier) -> List[ImportSpecifier]:
        return list(specifiers)

    def import_spec(self, meta: LarkMeta, name: Token, alias: Optional[Token] = None) -> ImportSpecifier:
        """`{a}` binds a; `{a as b}` binds b to export a"""
        if alias is None:
            return self._specifier(ImportKind.NAMED, name)
        return ImportSpecifier(ImportKind.NAMED, self._identifier(alias), property_name=str(name),
                               location=self._extract_location(meta))

    def export_star(self, meta: LarkMeta, specifier: Token) -> ExportDeclaration:
        module_specifier = LiteralParser.parse_string(specifier, self._token_location(specifier))
        return ExportDeclaration(None, module_specifier, location=self._extract_location(meta))

    def export_named(self, meta: LarkMeta, *children: Union[ExportSpecifier, Token]) -> ExportDeclaration:
        specifiers = [c for c in children if isinstance(c, ExportSpecifier)]
        module_specifier = None
        if children and isinstance(children[-1], Token):
            module_specifier = LiteralParser.parse_string(children[-1], self._token_location(children[-1]))
        return ExportDeclaration(specifiers, module_specifier, location=self._extract_location(meta))

    def export_spec(self, meta: LarkMeta, name: Token, alias: Optional[Token] = None) -> ExportSpecifier:
        if alias is None:
            return ExportSpecifier(str(name), location=self._extract_location(meta))
        return ExportSpecifier(str(alias), property_name=str(name), location=self._extract_location(meta))

    # =========================================================================
    # EXPRESSIONS
    # =========================================================================

    def comma_list(self, meta: LarkMeta, *elements: Expression) -> CommaListExpression:
        return CommaListExpression(list(elements), location=self._extract_location(meta))

    def assignment(self, meta: LarkMeta, target: Expression, operator: BinaryOperator,
                   value: Expression) -> BinaryExpression:
        return BinaryExpression(target, operator, value, location=self._extract_location(meta))

    def assign_op(self, meta: LarkMeta, token: Token) -> BinaryOperator:
        return BinaryOperator(str(token))

    def conditional(self, meta: LarkMeta, condition: Expression, when_true: Expression,
                    when_false: Expression) -> ConditionalExpression:
        return ConditionalExpression(condition, when_true, when_false, location=self._extract_location(meta))

    def binary(self, meta: LarkMeta, first: Expression, *rest: Union[BinaryOperator, Expression]) -> Expression:
        """Flat chain `unary (binop unary)*`; precedence applied here"""
        return self.expression_parser.parse_chain(first, rest)

    binary_nb = binary

    def binop(self, meta: LarkMeta, token: Token) -> BinaryOperator:
        return BinaryOperator(str(token))

    def prefix(self, meta: LarkMeta, operator: UnaryOperator, operand: Expression) -> UnaryExpression:
        return UnaryExpression(operator, operand, location=self._extract_location(meta))

    def prefix_op(self, meta: LarkMeta, token: Token) -> UnaryOperator:
        return UnaryOperator(str(token))

    def prefix_update(self, meta: LarkMeta, operator: str, operand: Expression) -> UpdateExpression:
        return UpdateExpression(operator, operand, prefix=True, location=self._extract_location(meta))

    def postfix_update(self, meta: LarkMeta, operand: Expression, operator: str) -> UpdateExpression:
        return UpdateExpression(operator, operand, prefix=False, location=self._extract_location(meta))

    def update_op(self, meta: LarkMeta, token: Token) -> str:
        return str(token)

    def arrow_function(self, meta: LarkMeta, parameters: List[ParameterDeclaration],
                       body: Union[Block, Expression]) -> ArrowFunction:
        return ArrowFunction(parameters, body, location=self._extract_location(meta))

    def arrow_name(self, meta: LarkMeta, token: Token) -> List[ParameterDeclaration]:
        return [ParameterDeclaration(self._identifier(token), location=self._token_location(token))]

    def arrow_empty(self, meta: LarkMeta) -> List[ParameterDeclaration]:
        return []

    def arrow_parens(self, meta: LarkMeta, expression: Expression) -> List[ParameterDeclaration]:
        """`(a, b) =>` arrives parsed as a parenthesized expression"""
        elements = expression.elements if isinstance(expression, CommaListExpression) else [expression]
        parameters = []
        for element in elements:
            if not isinstance(element, Identifier):
                raise ValueError("arrow function parameters must be plain names")
            parameters.append(ParameterDeclaration(element, location=element.location))
        return parameters

    def postfix(self, meta: LarkMeta, primary: Expression, *suffixes: Suffix) -> Expression:
        return SuffixChainParser.apply(primary, suffixes)

    postfix_nb = postfix

    def member(self, meta: LarkMeta, token: Token) -> MemberSuffix:
        # DOT_NAME may contain whitespace between the dot and the name
        return MemberSuffix(str(token)[1:].strip(), self._token_location(token))

    def index(self, meta: LarkMeta, argument: Expression) -> IndexSuffix:
        return IndexSuffix(argument, self._extract_location(meta))

    def call(self, meta: LarkMeta, arguments: List[Expression]) -> CallSuffix:
        return CallSuffix(arguments, self._extract_location(meta))

    def arguments(self, meta: LarkMeta, *args: Expression) -> List[Expression]:
        return list(args)

    def identifier(self, meta: LarkMeta, token: Token) -> Identifier:
        return self._identifier(token)

    def string(self, meta: LarkMeta, token: Token) -> StringLiteral:
        return LiteralParser.parse_string(token, self._token_location(token))

    def number(self, meta: LarkMeta, token: Token):
        return LiteralParser.parse_number(token, self._token_location(token))

    def true_lit(self, meta: LarkMeta) -> BooleanLiteral:
        return BooleanLiteral(True, location=self._extract_location(meta))

    def false_lit(self, meta: LarkMeta) -> BooleanLiteral:
        return BooleanLiteral(False, location=self._extract_location(meta))

    def null_lit(self, meta: LarkMeta) -> NullLiteral:
        return NullLiteral(location=self._extract_location(meta))

    def this_expr(self, meta: LarkMeta) -> ThisExpression:
        return ThisExpression(location=self._extract_location(meta))

    def super_expr(self, meta: LarkMeta) -> SuperExpression:
        return SuperExpression(location=self._extract_location(meta))

    def array(self, meta: LarkMeta, *elements: Expression) -> ArrayLiteral:
        return ArrayLiteral(list(elements), location=self._extract_location(meta))

    def paren(self, meta: LarkMeta, expression: Expression) -> ParenthesizedExpression:
        return ParenthesizedExpression(expression, location=self._extract_location(meta))

    def object(self, meta: LarkMeta, *properties: PropertyAssignment) -> ObjectLiteral:
        return ObjectLiteral(list(properties), location=self._extract_location(meta))

    def prop(self, meta: LarkMeta, key: Expression, value: Expression) -> PropertyAssignment:
        return PropertyAssignment(key, value, location=self._extract_location(meta))

    def shorthand_prop(self, meta: LarkMeta, token: Token) -> ShorthandPropertyAssignment:
        return ShorthandPropertyAssignment(self._identifier(token), location=self._extract_location(meta))

    def new_expr(self, meta: LarkMeta, callee: Expression,
                 arguments: Optional[List[Expression]] = None) -> NewExpression:
        return NewExpression(callee, arguments, location=self._extract_location(meta))

    def member_callee(self, meta: LarkMeta, callee: Expression, token: Token) -> PropertyAccess:
        return PropertyAccess(callee, str(token)[1:].strip(), location=callee.location)
