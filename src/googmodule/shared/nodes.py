"""
JavaScript AST (Abstract Syntax Tree) Definitions

Nodes for the JavaScript subset produced by TypeScript's CommonJS emit, plus
the ES import/export declarations the default-export substitution traces back to.

Visitor Pattern Support:
- All AST nodes have accept() methods for polymorphic dispatch
- See shared/ast_visitor.py for the visitor base class

Provenance:
- `original` points at the node a synthesized node was created from
  (set via factory.set_original_node, read via factory.get_original_node)
- `parent` is filled in by the binder for nodes of the input tree
- `location` is the text range; synthesized statements inherit it from the
  statement they replace
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, TypeVar, Union, TYPE_CHECKING

from .source_location import SourceLocation

if TYPE_CHECKING:
    from .ast_visitor import ASTVisitor
    from .scope import Symbol

T = TypeVar('T')


class NodeType(Enum):
    """AST node kinds"""
    SOURCE_UNIT = "source_unit"
    # Expressions
    IDENTIFIER = "identifier"
    STRING_LITERAL = "string_literal"
    NUMERIC_LITERAL = "numeric_literal"
    BOOLEAN_LITERAL = "boolean_literal"
    NULL_LITERAL = "null_literal"
    THIS_EXPRESSION = "this_expression"
    OBJECT_LITERAL = "object_literal"
    PROPERTY_ASSIGNMENT = "property_assignment"
    ARRAY_LITERAL = "array_literal"
    PROPERTY_ACCESS = "property_access"
    ELEMENT_ACCESS = "element_access"
    CALL = "call"
    NEW = "new"
    BINARY = "binary"
    UNARY = "unary"
    CONDITIONAL = "conditional"
    PARENTHESIZED = "parenthesized"
    COMMA_LIST = "comma_list"
    FUNCTION_EXPRESSION = "function_expression"
    ARROW_FUNCTION = "arrow_function"
    CLASS_EXPRESSION = "class_expression"
    UPDATE = "update"
    SUPER = "super"
    SHORTHAND_PROPERTY_ASSIGNMENT = "shorthand_property_assignment"
    PARAMETER = "parameter"
    # Statements
    EXPRESSION_STATEMENT = "expression_statement"
    VARIABLE_STATEMENT = "variable_statement"
    VARIABLE_DECLARATION = "variable_declaration"
    OBJECT_BINDING_PATTERN = "object_binding_pattern"
    ARRAY_BINDING_PATTERN = "array_binding_pattern"
    BINDING_ELEMENT = "binding_element"
    FUNCTION_DECLARATION = "function_declaration"
    BLOCK = "block"
    RETURN = "return"
    IF = "if"
    FOR_IN = "for_in"
    FOR = "for"
    WHILE = "while"
    DO = "do"
    BREAK = "break"
    CONTINUE = "continue"
    THROW = "throw"
    TRY = "try"
    CATCH_CLAUSE = "catch_clause"
    SWITCH = "switch"
    CASE_CLAUSE = "case_clause"
    CLASS_DECLARATION = "class_declaration"
    METHOD_DECLARATION = "method_declaration"
    PROPERTY_DECLARATION = "property_declaration"
    EMPTY = "empty"
    NOT_EMITTED = "not_emitted"
    # Module syntax
    IMPORT_DECLARATION = "import_declaration"
    IMPORT_CLAUSE = "import_clause"
    IMPORT_SPECIFIER = "import_specifier"
    EXPORT_DECLARATION = "export_declaration"
    EXPORT_SPECIFIER = "export_specifier"


class BinaryOperator(Enum):
    """Binary and assignment operators"""
    ASSIGN = "="
    ADD_ASSIGN = "+="
    SUB_ASSIGN = "-="
    MUL_ASSIGN = "*="
    DIV_ASSIGN = "/="
    MOD_ASSIGN = "%="
    OR_ASSIGN = "||="
    AND_ASSIGN = "&&="
    BIT_OR_ASSIGN = "|="
    BIT_AND_ASSIGN = "&="
    BIT_XOR_ASSIGN = "^="
    SHL_ASSIGN = "<<="
    SHR_ASSIGN = ">>="
    USHR_ASSIGN = ">>>="
    OR = "||"
    AND = "&&"
    NULLISH = "??"
    BIT_OR = "|"
    BIT_XOR = "^"
    BIT_AND = "&"
    EQ = "=="
    NE = "!="
    STRICT_EQ = "==="
    STRICT_NE = "!=="
    LT = "<"
    GT = ">"
    LE = "<="
    GE = ">="
    INSTANCEOF = "instanceof"
    IN = "in"
    SHL = "<<"
    SHR = ">>"
    USHR = ">>>"
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    MOD = "%"
    POW = "**"

    @property
    def is_assignment(self) -> bool:
        return self.value.endswith("=") and self.value not in ("==", "!=", "===", "!==", "<=", ">=")


class UnaryOperator(Enum):
    """Prefix operators"""
    NOT = "!"
    NEG = "-"
    POS = "+"
    BIT_NOT = "~"
    TYPEOF = "typeof"
    VOID = "void"
    DELETE = "delete"

    @property
    def is_keyword(self) -> bool:
        return self.value.isalpha()


class VariableKind(Enum):
    VAR = "var"
    LET = "let"
    CONST = "const"


class MethodKind(Enum):
    """Class member functions"""
    METHOD = "method"
    GET = "get"
    SET = "set"


class ImportKind(Enum):
    """How an import specifier binds its local name"""
    DEFAULT = "default"      # import foo from 'x'
    NAMED = "named"          # import {foo} from 'x'
    NAMESPACE = "namespace"  # import * as foo from 'x'


@dataclass(frozen=True)
class Comment:
    """A source comment, kept verbatim (including delimiters)"""
    text: str
    location: Optional[SourceLocation] = None

    @property
    def is_block(self) -> bool:
        return self.text.startswith("/*")


class ASTNode:
    """
    Base class for all AST nodes

    Visitor Pattern Support:
    - Subclasses implement accept() to call the matching visit_* method

    __slots__ keeps the per-node provenance fields explicit.
    """
    __slots__ = ('node_type', 'location', 'original', 'parent')

    def __init__(self, node_type: NodeType, location: Optional[SourceLocation] = None):
        self.node_type = node_type
        self.location = location
        self.original: Optional[ASTNode] = None
        self.parent: Optional[ASTNode] = None

    def accept(self, visitor: 'ASTVisitor[T]') -> 'T':
        raise NotImplementedError(f"accept() not implemented for {self.__class__.__name__}")


class Expression(ASTNode):
    """Base class for expressions"""
    __slots__ = ()


class Statement(ASTNode):
    """Base class for statements; carries the comments printed before it"""
    __slots__ = ('leading_comments',)

    def __init__(self, node_type: NodeType, location: Optional[SourceLocation] = None):
        super().__init__(node_type, location)
        self.leading_comments: List[Comment] = []


# =====================================================================
# EXPRESSIONS
# =====================================================================

@dataclass
class Identifier(Expression):
    """Identifier (variable name)"""
    name: str

    def __str__(self) -> str:
        return self.name

    def __init__(self, name: str, location: SourceLocation = None):
        super().__init__(NodeType.IDENTIFIER, location)
        self.name = name
        # Symbol resolved by the binder (input tree only)
        self._symbol: Optional['Symbol'] = None

    def accept(self, visitor: 'ASTVisitor[T]') -> 'T':
        return visitor.visit_identifier(self)


@dataclass
class StringLiteral(Expression):
    """
    String literal; `value` is the decoded text.

    single_quote and raw (the quoted source text, parsed literals only) only affect printing.
    """
    value: str

    def __init__(self, value: str, single_quote: bool = False, location: SourceLocation = None):
        super().__init__(NodeType.STRING_LITERAL, location)
        self.value = value
        self.single_quote = single_quote
        self.raw: Optional[str] = None

    def accept(self, visitor: 'ASTVisitor[T]') -> 'T':
        return visitor.visit_string_literal(self)


@dataclass
class NumericLiteral(Expression):
    """Numeric literal, kept as source text (0x10, 1e3, .5)"""
    text: str

    def __init__(self, text: str, location: SourceLocation = None):
        super().__init__(NodeType.NUMERIC_LITERAL, location)
        self.text = text

    def accept(self, visitor: 'ASTVisitor[T]') -> 'T':
        return visitor.visit_numeric_literal(self)


@dataclass
class BooleanLiteral(Expression):
    value: bool

    def __init__(self, value: bool, location: SourceLocation = None):
        super().__init__(NodeType.BOOLEAN_LITERAL, location)
        self.value = value

    def accept(self, visitor: 'ASTVisitor[T]') -> 'T':
        return visitor.visit_boolean_literal(self)


@dataclass
class NullLiteral(Expression):

    def __init__(self, location: SourceLocation = None):
        super().__init__(NodeType.NULL_LITERAL, location)

    def accept(self, visitor: 'ASTVisitor[T]') -> 'T':
        return visitor.visit_null_literal(self)


@dataclass
class ThisExpression(Expression):

    def __init__(self, location: SourceLocation = None):
        super().__init__(NodeType.THIS_EXPRESSION, location)

    def accept(self, visitor: 'ASTVisitor[T]') -> 'T':
        return visitor.visit_this_expression(self)


@dataclass
class PropertyAssignment(ASTNode):
    """`name: initializer` inside an object literal"""
    name: Expression  # Identifier, StringLiteral or NumericLiteral
    initializer: Expression

    def __init__(self, name: Expression, initializer: Expression, location: SourceLocation = None):
        super().__init__(NodeType.PROPERTY_ASSIGNMENT, location)
        self.name = name
        self.initializer = initializer

    def accept(self, visitor: 'ASTVisitor[T]') -> 'T':
        return visitor.visit_property_assignment(self)


@dataclass
class ObjectLiteral(Expression):
    """Object literal { a: 1, 'b': 2 }"""
    properties: List[PropertyAssignment]

    def __init__(self, properties: List[PropertyAssignment], location: SourceLocation = None):
        super().__init__(NodeType.OBJECT_LITERAL, location)
        self.properties = properties

    def accept(self, visitor: 'ASTVisitor[T]') -> 'T':
        return visitor.visit_object_literal(self)


@dataclass
class ArrayLiteral(Expression):
    """Array literal [1, 2, 3]"""
    elements: List[Expression]

    def __init__(self, elements: List[Expression], location: SourceLocation = None):
        super().__init__(NodeType.ARRAY_LITERAL, location)
        self.elements = elements

    def accept(self, visitor: 'ASTVisitor[T]') -> 'T':
        return visitor.visit_array_literal(self)


@dataclass
class PropertyAccess(Expression):
    """Property access (obj.name)"""
    expression: Expression
    name: str

    def __init__(self, expression: Expression, name: str, location: SourceLocation = None):
        super().__init__(NodeType.PROPERTY_ACCESS, location)
        self.expression = expression
        self.name = name

    def accept(self, visitor: 'ASTVisitor[T]') -> 'T':
        return visitor.visit_property_access(self)


@dataclass
class ElementAccess(Expression):
    """Element access (obj[expr])"""
    expression: Expression
    argument: Expression

    def __init__(self, expression: Expression, argument: Expression, location: SourceLocation = None):
        super().__init__(NodeType.ELEMENT_ACCESS, location)
        self.expression = expression
        self.argument = argument

    def accept(self, visitor: 'ASTVisitor[T]') -> 'T':
        return visitor.visit_element_access(self)


@dataclass
class CallExpression(Expression):
    """
    Call expression - callee is always an AST node

    Examples:
    - require('x')        -> callee=Identifier("require")
    - goog.require('x')   -> callee=PropertyAccess(Identifier("goog"), "require")
    """
    callee: Expression
    arguments: List[Expression]

    def __init__(self, callee: Expression, arguments: List[Expression], location: SourceLocation = None):
        super().__init__(NodeType.CALL, location)
        self.callee = callee
        self.arguments = arguments

    def accept(self, visitor: 'ASTVisitor[T]') -> 'T':
        return visitor.visit_call_expression(self)


@dataclass
class NewExpression(Expression):
    """new Foo(args); arguments is None for `new Foo` without parentheses"""
    callee: Expression
    arguments: Optional[List[Expression]]

    def __init__(self, callee: Expression, arguments: Optional[List[Expression]] = None,
                 location: SourceLocation = None):
        super().__init__(NodeType.NEW, location)
        self.callee = callee
        self.arguments = arguments

    def accept(self, visitor: 'ASTVisitor[T]') -> 'T':
        return visitor.visit_new_expression(self)


@dataclass
class BinaryExpression(Expression):
    """Binary operation, including assignments (a = b, a || b, a + b)"""
    left: Expression
    operator: BinaryOperator
    right: Expression

    def __init__(self, left: Expression, operator: BinaryOperator, right: Expression,
                 location: SourceLocation = None):
        super().__init__(NodeType.BINARY, location)
        self.left = left
        self.operator = operator
        self.right = right

    def accept(self, visitor: 'ASTVisitor[T]') -> 'T':
        return visitor.visit_binary_expression(self)


@dataclass
class UnaryExpression(Expression):
    """Prefix operation (!x, -x, typeof x, void 0)"""
    operator: UnaryOperator
    operand: Expression

    def __init__(self, operator: UnaryOperator, operand: Expression, location: SourceLocation = None):
        super().__init__(NodeType.UNARY, location)
        self.operator = operator
        self.operand = operand

    def accept(self, visitor: 'ASTVisitor[T]') -> 'T':
        return visitor.visit_unary_expression(self)


@dataclass
class ConditionalExpression(Expression):
    condition: Expression
    when_true: Expression
    when_false: Expression

    def __init__(self, condition: Expression, when_true: Expression, when_false: Expression,
                 location: SourceLocation = None):
        super().__init__(NodeType.CONDITIONAL, location)
        self.condition = condition
        self.when_true = when_true
        self.when_false = when_false

    def accept(self, visitor: 'ASTVisitor[T]') -> 'T':
        return visitor.visit_conditional_expression(self)


@dataclass
class ParenthesizedExpression(Expression):
    """Parentheses written in the source; the printer never adds its own"""
    expression: Expression

    def __init__(self, expression: Expression, location: SourceLocation = None):
        super().__init__(NodeType.PARENTHESIZED, location)
        self.expression = expression

    def accept(self, visitor: 'ASTVisitor[T]') -> 'T':
        return visitor.visit_parenthesized_expression(self)


@dataclass
class CommaListExpression(Expression):
    """Comma operator sequence (0, foo.bar)"""
    elements: List[Expression]

    def __init__(self, elements: List[Expression], location: SourceLocation = None):
        super().__init__(NodeType.COMMA_LIST, location)
        self.elements = elements

    def accept(self, visitor: 'ASTVisitor[T]') -> 'T':
        return visitor.visit_comma_list_expression(self)


@dataclass
class ParameterDeclaration(ASTNode):
    """Function parameter"""
    name: Identifier

    def __init__(self, name: Identifier, location: SourceLocation = None):
        super().__init__(NodeType.PARAMETER, location)
        self.name = name

    def accept(self, visitor: 'ASTVisitor[T]') -> 'T':
        return visitor.visit_parameter_declaration(self)


@dataclass
class FunctionExpression(Expression):
    """function [name](params) { body }"""
    name: Optional[Identifier]
    parameters: List[ParameterDeclaration]
    body: 'Block'

    def __init__(self, name: Optional[Identifier], parameters: List[ParameterDeclaration], body: 'Block',
                 location: SourceLocation = None):
        super().__init__(NodeType.FUNCTION_EXPRESSION, location)
        self.name = name
        self.parameters = parameters
        self.body = body

    def accept(self, visitor: 'ASTVisitor[T]') -> 'T':
        return visitor.visit_function_expression(self)


@dataclass
class ArrowFunction(Expression):
    """(params) => body, where body is a Block or a bare expression"""
    parameters: List[ParameterDeclaration]
    body: Union['Block', Expression]

    def __init__(self, parameters: List[ParameterDeclaration], body: Union['Block', Expression],
                 location: SourceLocation = None):
        super().__init__(NodeType.ARROW_FUNCTION, location)
        self.parameters = parameters
        self.body = body

    def accept(self, visitor: 'ASTVisitor[T]') -> 'T':
        return visitor.visit_arrow_function(self)


@dataclass
class ClassExpression(Expression):
    """class [name] [extends heritage] { members }"""
    name: Optional[Identifier]
    heritage: Optional[Expression]
    members: List['ClassElement']

    def __init__(self, name: Optional[Identifier], heritage: Optional[Expression], members: List['ClassElement'],
                 location: SourceLocation = None):
        super().__init__(NodeType.CLASS_EXPRESSION, location)
        self.name = name
        self.heritage = heritage
        self.members = members

    def accept(self, visitor: 'ASTVisitor[T]') -> 'T':
        return visitor.visit_class_expression(self)


@dataclass
class UpdateExpression(Expression):
    """i++, --i"""
    operator: str
    operand: Expression
    prefix: bool

    def __init__(self, operator: str, operand: Expression, prefix: bool, location: SourceLocation = None):
        super().__init__(NodeType.UPDATE, location)
        self.operator = operator
        self.operand = operand
        self.prefix = prefix

    def accept(self, visitor: 'ASTVisitor[T]') -> 'T':
        return visitor.visit_update_expression(self)


@dataclass
class SuperExpression(Expression):

    def __init__(self, location: SourceLocation = None):
        super().__init__(NodeType.SUPER, location)

    def accept(self, visitor: 'ASTVisitor[T]') -> 'T':
        return visitor.visit_super_expression(self)


@dataclass
class ShorthandPropertyAssignment(ASTNode):
    """`{ a }`: property named after the identifier it reads"""
    name: Identifier

    def __init__(self, name: Identifier, location: SourceLocation = None):
        super().__init__(NodeType.SHORTHAND_PROPERTY_ASSIGNMENT, location)
        self.name = name

    def accept(self, visitor: 'ASTVisitor[T]') -> 'T':
        return visitor.visit_shorthand_property_assignment(self)


# =====================================================================
# STATEMENTS
# =====================================================================

@dataclass
class ExpressionStatement(Statement):
    """
    Expression used as a statement (evaluates expression, discards result).

    Examples:
        require('./a');                 # CallExpression wrapped in ExpressionStatement
        module.exports = Foo;           # BinaryExpression wrapped in ExpressionStatement
    """
    expression: Expression

    def __init__(self, expression: Expression, location: SourceLocation = None):
        super().__init__(NodeType.EXPRESSION_STATEMENT, location)
        self.expression = expression

    def accept(self, visitor: 'ASTVisitor[T]') -> 'T':
        return visitor.visit_expression_statement(self)


@dataclass
class BindingElement(ASTNode):
    """One name in a destructuring pattern: `a` or `a: b` (property_name='a', name=b)"""
    name: Identifier
    property_name: Optional[str]

    def __init__(self, name: Identifier, property_name: Optional[str] = None, location: SourceLocation = None):
        super().__init__(NodeType.BINDING_ELEMENT, location)
        self.name = name
        self.property_name = property_name

    def accept(self, visitor: 'ASTVisitor[T]') -> 'T':
        return visitor.visit_binding_element(self)


@dataclass
class ObjectBindingPattern(ASTNode):
    """{ a, b: c } on the left of a declaration"""
    elements: List[BindingElement]

    def __init__(self, elements: List[BindingElement], location: SourceLocation = None):
        super().__init__(NodeType.OBJECT_BINDING_PATTERN, location)
        self.elements = elements

    def accept(self, visitor: 'ASTVisitor[T]') -> 'T':
        return visitor.visit_object_binding_pattern(self)


@dataclass
class ArrayBindingPattern(ASTNode):
    """[a, b] on the left of a declaration"""
    elements: List[BindingElement]

    def __init__(self, elements: List[BindingElement], location: SourceLocation = None):
        super().__init__(NodeType.ARRAY_BINDING_PATTERN, location)
        self.elements = elements

    def accept(self, visitor: 'ASTVisitor[T]') -> 'T':
        return visitor.visit_array_binding_pattern(self)


BindingName = Union[Identifier, ObjectBindingPattern, ArrayBindingPattern]


@dataclass
class VariableDeclaration(ASTNode):
    """One declarator of a variable statement (name = initializer)"""
    name: BindingName
    initializer: Optional[Expression]

    def __init__(self, name: BindingName, initializer: Optional[Expression] = None,
                 location: SourceLocation = None):
        super().__init__(NodeType.VARIABLE_DECLARATION, location)
        self.name = name
        self.initializer = initializer

    def accept(self, visitor: 'ASTVisitor[T]') -> 'T':
        return visitor.visit_variable_declaration(self)


@dataclass
class VariableStatement(Statement):
    """var/let/const with one or more declarators"""
    kind: VariableKind
    declarations: List[VariableDeclaration]

    def __init__(self, kind: VariableKind, declarations: List[VariableDeclaration],
                 location: SourceLocation = None):
        super().__init__(NodeType.VARIABLE_STATEMENT, location)
        self.kind = kind
        self.declarations = declarations

    def accept(self, visitor: 'ASTVisitor[T]') -> 'T':
        return visitor.visit_variable_statement(self)


@dataclass
class Block(Statement):
    statements: List[Statement]

    def __init__(self, statements: List[Statement], location: SourceLocation = None):
        super().__init__(NodeType.BLOCK, location)
        self.statements = statements

    def accept(self, visitor: 'ASTVisitor[T]') -> 'T':
        return visitor.visit_block(self)


@dataclass
class FunctionDeclaration(Statement):
    name: Identifier
    parameters: List[ParameterDeclaration]
    body: Block

    def __init__(self, name: Identifier, parameters: List[ParameterDeclaration], body: Block,
                 location: SourceLocation = None):
        super().__init__(NodeType.FUNCTION_DECLARATION, location)
        self.name = name
        self.parameters = parameters
        self.body = body

    def accept(self, visitor: 'ASTVisitor[T]') -> 'T':
        return visitor.visit_function_declaration(self)


@dataclass
class ReturnStatement(Statement):
    expression: Optional[Expression]

    def __init__(self, expression: Optional[Expression] = None, location: SourceLocation = None):
        super().__init__(NodeType.RETURN, location)
        self.expression = expression

    def accept(self, visitor: 'ASTVisitor[T]') -> 'T':
        return visitor.visit_return_statement(self)


@dataclass
class IfStatement(Statement):
    condition: Expression
    then_statement: Statement
    else_statement: Optional[Statement]

    def __init__(self, condition: Expression, then_statement: Statement,
                 else_statement: Optional[Statement] = None, location: SourceLocation = None):
        super().__init__(NodeType.IF, location)
        self.condition = condition
        self.then_statement = then_statement
        self.else_statement = else_statement

    def accept(self, visitor: 'ASTVisitor[T]') -> 'T':
        return visitor.visit_if_statement(self)


@dataclass
class ForInStatement(Statement):
    """for (var key in object) statement, or `for (const x of items)` when is_for_of"""
    initializer: VariableStatement
    expression: Expression
    statement: Statement
    is_for_of: bool

    def __init__(self, initializer: VariableStatement, expression: Expression, statement: Statement,
                 is_for_of: bool = False, location: SourceLocation = None):
        super().__init__(NodeType.FOR_IN, location)
        self.initializer = initializer
        self.expression = expression
        self.statement = statement
        self.is_for_of = is_for_of

    def accept(self, visitor: 'ASTVisitor[T]') -> 'T':
        return visitor.visit_for_in_statement(self)


@dataclass
class ForStatement(Statement):
    """for (initializer; condition; incrementor) statement; every header part may be absent"""
    initializer: Optional[Union[VariableStatement, Expression]]
    condition: Optional[Expression]
    incrementor: Optional[Expression]
    statement: Statement

    def __init__(self, initializer: Optional[Union[VariableStatement, Expression]], condition: Optional[Expression],
                 incrementor: Optional[Expression], statement: Statement, location: SourceLocation = None):
        super().__init__(NodeType.FOR, location)
        self.initializer = initializer
        self.condition = condition
        self.incrementor = incrementor
        self.statement = statement

    def accept(self, visitor: 'ASTVisitor[T]') -> 'T':
        return visitor.visit_for_statement(self)


@dataclass
class WhileStatement(Statement):
    condition: Expression
    statement: Statement

    def __init__(self, condition: Expression, statement: Statement, location: SourceLocation = None):
        super().__init__(NodeType.WHILE, location)
        self.condition = condition
        self.statement = statement

    def accept(self, visitor: 'ASTVisitor[T]') -> 'T':
        return visitor.visit_while_statement(self)


@dataclass
class DoStatement(Statement):
    statement: Statement
    condition: Expression

    def __init__(self, statement: Statement, condition: Expression, location: SourceLocation = None):
        super().__init__(NodeType.DO, location)
        self.statement = statement
        self.condition = condition

    def accept(self, visitor: 'ASTVisitor[T]') -> 'T':
        return visitor.visit_do_statement(self)


@dataclass
class BreakStatement(Statement):

    def __init__(self, location: SourceLocation = None):
        super().__init__(NodeType.BREAK, location)

    def accept(self, visitor: 'ASTVisitor[T]') -> 'T':
        return visitor.visit_break_statement(self)


@dataclass
class ContinueStatement(Statement):

    def __init__(self, location: SourceLocation = None):
        super().__init__(NodeType.CONTINUE, location)

    def accept(self, visitor: 'ASTVisitor[T]') -> 'T':
        return visitor.visit_continue_statement(self)


@dataclass
class ThrowStatement(Statement):
    expression: Expression

    def __init__(self, expression: Expression, location: SourceLocation = None):
        super().__init__(NodeType.THROW, location)
        self.expression = expression

    def accept(self, visitor: 'ASTVisitor[T]') -> 'T':
        return visitor.visit_throw_statement(self)


@dataclass
class CatchClause(ASTNode):
    """catch [(variable)] block"""
    variable: Optional[Identifier]
    block: Block

    def __init__(self, variable: Optional[Identifier], block: Block, location: SourceLocation = None):
        super().__init__(NodeType.CATCH_CLAUSE, location)
        self.variable = variable
        self.block = block

    def accept(self, visitor: 'ASTVisitor[T]') -> 'T':
        return visitor.visit_catch_clause(self)


@dataclass
class TryStatement(Statement):
    """try block with a catch clause, a finally block, or both"""
    try_block: Block
    catch_clause: Optional[CatchClause]
    finally_block: Optional[Block]

    def __init__(self, try_block: Block, catch_clause: Optional[CatchClause], finally_block: Optional[Block],
                 location: SourceLocation = None):
        super().__init__(NodeType.TRY, location)
        self.try_block = try_block
        self.catch_clause = catch_clause
        self.finally_block = finally_block

    def accept(self, visitor: 'ASTVisitor[T]') -> 'T':
        return visitor.visit_try_statement(self)


@dataclass
class CaseClause(ASTNode):
    """`case expression:` or, with no expression, `default:`"""
    expression: Optional[Expression]
    statements: List[Statement]

    def __init__(self, expression: Optional[Expression], statements: List[Statement],
                 location: SourceLocation = None):
        super().__init__(NodeType.CASE_CLAUSE, location)
        self.expression = expression
        self.statements = statements

    def accept(self, visitor: 'ASTVisitor[T]') -> 'T':
        return visitor.visit_case_clause(self)


@dataclass
class SwitchStatement(Statement):
    expression: Expression
    clauses: List[CaseClause]

    def __init__(self, expression: Expression, clauses: List[CaseClause], location: SourceLocation = None):
        super().__init__(NodeType.SWITCH, location)
        self.expression = expression
        self.clauses = clauses

    def accept(self, visitor: 'ASTVisitor[T]') -> 'T':
        return visitor.visit_switch_statement(self)


@dataclass
class MethodDeclaration(Statement):
    """
    Class method, getter or setter.

    A statement so that comments above a member stay with it.
    """
    kind: MethodKind
    name: str
    parameters: List[ParameterDeclaration]
    body: Block
    is_static: bool

    def __init__(self, kind: MethodKind, name: str, parameters: List[ParameterDeclaration], body: Block,
                 is_static: bool = False, location: SourceLocation = None):
        super().__init__(NodeType.METHOD_DECLARATION, location)
        self.kind = kind
        self.name = name
        self.parameters = parameters
        self.body = body
        self.is_static = is_static

    def accept(self, visitor: 'ASTVisitor[T]') -> 'T':
        return visitor.visit_method_declaration(self)


@dataclass
class PropertyDeclaration(Statement):
    """Class field: `name = initializer;`"""
    name: str
    initializer: Optional[Expression]
    is_static: bool

    def __init__(self, name: str, initializer: Optional[Expression] = None, is_static: bool = False,
                 location: SourceLocation = None):
        super().__init__(NodeType.PROPERTY_DECLARATION, location)
        self.name = name
        self.initializer = initializer
        self.is_static = is_static

    def accept(self, visitor: 'ASTVisitor[T]') -> 'T':
        return visitor.visit_property_declaration(self)


ClassElement = Union[MethodDeclaration, PropertyDeclaration]


@dataclass
class ClassDeclaration(Statement):
    name: Identifier
    heritage: Optional[Expression]
    members: List[ClassElement]

    def __init__(self, name: Identifier, heritage: Optional[Expression], members: List[ClassElement],
                 location: SourceLocation = None):
        super().__init__(NodeType.CLASS_DECLARATION, location)
        self.name = name
        self.heritage = heritage
        self.members = members

    def accept(self, visitor: 'ASTVisitor[T]') -> 'T':
        return visitor.visit_class_declaration(self)


@dataclass
class EmptyStatement(Statement):

    def __init__(self, location: SourceLocation = None):
        super().__init__(NodeType.EMPTY, location)

    def accept(self, visitor: 'ASTVisitor[T]') -> 'T':
        return visitor.visit_empty_statement(self)


@dataclass
class NotEmittedStatement(Statement):
    """
    Placeholder that prints nothing but its leading comments.

    Stands in for removed statements ("use strict", the __esModule marker) and for
    the detached comment header of a file, so their text range survives the rewrite.
    """

    def __init__(self, location: SourceLocation = None):
        super().__init__(NodeType.NOT_EMITTED, location)

    def accept(self, visitor: 'ASTVisitor[T]') -> 'T':
        return visitor.visit_not_emitted_statement(self)


# =====================================================================
# MODULE SYNTAX
# =====================================================================

@dataclass
class ImportSpecifier(ASTNode):
    """
    One local binding introduced by an import declaration.

    parent chain: ImportSpecifier -> ImportClause -> ImportDeclaration
    """
    kind: ImportKind
    name: Identifier
    property_name: Optional[str]

    def __init__(self, kind: ImportKind, name: Identifier, property_name: Optional[str] = None,
                 location: SourceLocation = None):
        super().__init__(NodeType.IMPORT_SPECIFIER, location)
        self.kind = kind
        self.name = name
        self.property_name = property_name

    def accept(self, visitor: 'ASTVisitor[T]') -> 'T':
        return visitor.visit_import_specifier(self)


@dataclass
class ImportClause(ASTNode):
    """Everything between `import` and `from`"""
    default: Optional[ImportSpecifier]
    bindings: List[ImportSpecifier]

    def __init__(self, default: Optional[ImportSpecifier], bindings: List[ImportSpecifier],
                 location: SourceLocation = None):
        super().__init__(NodeType.IMPORT_CLAUSE, location)
        self.default = default
        self.bindings = bindings

    @property
    def specifiers(self) -> List[ImportSpecifier]:
        return ([self.default] if self.default is not None else []) + list(self.bindings)

    def accept(self, visitor: 'ASTVisitor[T]') -> 'T':
        return visitor.visit_import_clause(self)


@dataclass
class ImportDeclaration(Statement):
    """import foo, {bar as baz} from 'x';  /  import * as ns from 'x';  /  import 'x';"""
    import_clause: Optional[ImportClause]
    module_specifier: StringLiteral

    def __init__(self, import_clause: Optional[ImportClause], module_specifier: StringLiteral,
                 location: SourceLocation = None):
        super().__init__(NodeType.IMPORT_DECLARATION, location)
        self.import_clause = import_clause
        self.module_specifier = module_specifier

    def accept(self, visitor: 'ASTVisitor[T]') -> 'T':
        return visitor.visit_import_declaration(self)


@dataclass
class ExportSpecifier(ASTNode):
    """`name` or `property_name as name` inside export { ... }"""
    name: str
    property_name: Optional[str]

    def __init__(self, name: str, property_name: Optional[str] = None, location: SourceLocation = None):
        super().__init__(NodeType.EXPORT_SPECIFIER, location)
        self.name = name
        self.property_name = property_name

    def accept(self, visitor: 'ASTVisitor[T]') -> 'T':
        return visitor.visit_export_specifier(self)


@dataclass
class ExportDeclaration(Statement):
    """export * from 'x';  /  export {a, b as c} [from 'x'];  (specifiers is None for export *)"""
    specifiers: Optional[List[ExportSpecifier]]
    module_specifier: Optional[StringLiteral]

    def __init__(self, specifiers: Optional[List[ExportSpecifier]], module_specifier: Optional[StringLiteral],
                 location: SourceLocation = None):
        super().__init__(NodeType.EXPORT_DECLARATION, location)
        self.specifiers = specifiers
        self.module_specifier = module_specifier

    def accept(self, visitor: 'ASTVisitor[T]') -> 'T':
        return visitor.visit_export_declaration(self)


@dataclass
class SourceUnit(ASTNode):
    """One module: its file name and top-level statements"""
    file_name: str
    statements: List[Statement]

    def __init__(self, file_name: str, statements: List[Statement], location: SourceLocation = None):
        super().__init__(NodeType.SOURCE_UNIT, location)
        self.file_name = file_name
        self.statements = statements
        # Comments after the last statement
        self.trailing_comments: List[Comment] = []

    def accept(self, visitor: 'ASTVisitor[T]') -> 'T':
        return visitor.visit_source_unit(self)
