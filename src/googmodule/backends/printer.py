"""
JavaScript Printer

Emits JavaScript text for a (rewritten) SourceUnit.

- One statement per line, blocks indented with INDENT
- Leading comments printed verbatim on their own lines before their statement
- NotEmittedStatement prints only its comments
- Parsed string literals keep their source quoting; synthesized ones use single quotes
- Every expression goes through the context's substitution hook before printing
- Parentheses are printed only where the tree has a ParenthesizedExpression
"""

from typing import List, Optional

from ..shared.ast_visitor import ASTVisitor
from ..shared.nodes import (
    ASTNode, Comment, Statement, SourceUnit, Expression,
    Identifier, StringLiteral, NumericLiteral, BooleanLiteral, NullLiteral, ThisExpression,
    ObjectLiteral, PropertyAssignment, ArrayLiteral, PropertyAccess, ElementAccess,
    CallExpression, NewExpression, BinaryExpression, UnaryExpression, UnaryOperator,
    ConditionalExpression, ParenthesizedExpression, CommaListExpression,
    ParameterDeclaration, FunctionExpression, ArrowFunction, ClassExpression, UpdateExpression,
    SuperExpression, ShorthandPropertyAssignment, ExpressionStatement, BindingElement,
    ObjectBindingPattern, ArrayBindingPattern, VariableDeclaration, VariableStatement,
    Block, FunctionDeclaration, ReturnStatement, IfStatement, ForInStatement, ForStatement,
    WhileStatement, DoStatement, BreakStatement, ContinueStatement, ThrowStatement, TryStatement,
    CatchClause, SwitchStatement, CaseClause, ClassDeclaration, ClassElement, MethodDeclaration,
    MethodKind, PropertyDeclaration, EmptyStatement, NotEmittedStatement,
    ImportSpecifier, ImportClause, ImportDeclaration, ImportKind, ExportSpecifier, ExportDeclaration,
)
from ..passes.base import EmitHint, TransformationContext
from ..utils.config import INDENT, NEWLINE


_ESCAPES = {
    "\\": "\\\\",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\b": "\\b",
    "\f": "\\f",
    "\v": "\\v",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def quote_string(value: str, single_quote: bool = True) -> str:
    """JavaScript string literal for `value`."""
    quote = "'" if single_quote else '"'
    out = []
    for ch in value:
        if ch == quote:
            out.append("\\" + ch)
        elif ch in _ESCAPES:
            out.append(_ESCAPES[ch])
        elif ord(ch) < 0x20:
            out.append(f"\\x{ord(ch):02x}")
        else:
            out.append(ch)
    return quote + "".join(out) + quote


class JavaScriptPrinter(ASTVisitor[str]):
    """
    Prints the AST back to JavaScript source.

    The context is optional; without one no substitution runs.
    """

    def __init__(self, context: Optional[TransformationContext] = None):
        self.context = context
        self.indent_level = 0

    def print_unit(self, unit: SourceUnit) -> str:
        return unit.accept(self)

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _indent(self) -> str:
        return INDENT * self.indent_level

    def _expr(self, node: Expression) -> str:
        if self.context is not None:
            node = self.context.substitute(EmitHint.EXPRESSION, node)
        return node.accept(self)

    def _exprs(self, nodes: List[Expression]) -> str:
        return ", ".join(self._expr(n) for n in nodes)

    def _comments(self, comments: List[Comment]) -> List[str]:
        return [self._indent() + c.text for c in comments]

    def print_statement(self, stmt: Statement) -> str:
        """Comments and code of one statement, indented at the current level; '' if nothing prints."""
        lines = self._comments(stmt.leading_comments)
        code = stmt.accept(self)
        if code:
            lines.append(self._indent() + code)
        return NEWLINE.join(lines)

    def _statements(self, statements: List[Statement]) -> List[str]:
        return [text for text in (self.print_statement(s) for s in statements) if text]

    def _block(self, statements: List[Statement]) -> str:
        self.indent_level += 1
        body = self._statements(statements)
        self.indent_level -= 1
        if not body:
            return "{ }"
        return "{" + NEWLINE + NEWLINE.join(body) + NEWLINE + self._indent() + "}"

    def _embedded(self, stmt: Statement) -> str:
        """Body of if/else/for: blocks stay on the same line, anything else goes on the next one."""
        if isinstance(stmt, Block) and not stmt.leading_comments:
            return " " + stmt.accept(self)
        self.indent_level += 1
        text = self.print_statement(stmt)
        self.indent_level -= 1
        return NEWLINE + text

    def _function(self, keyword_and_name: str, parameters: List[ParameterDeclaration], body: Block) -> str:
        params = ", ".join(p.accept(self) for p in parameters)
        return f"{keyword_and_name}({params}) {body.accept(self)}"

    def _class(self, keyword_and_name: str, heritage: Optional[Expression], members: List[ClassElement]) -> str:
        """Members one per line; an empty body still spans two lines."""
        head = keyword_and_name
        if heritage is not None:
            head += f" extends {self._expr(heritage)}"
        self.indent_level += 1
        body = self._statements(members)
        self.indent_level -= 1
        return head + " {" + NEWLINE + "".join(line + NEWLINE for line in body) + self._indent() + "}"

    # -------------------------------------------------------------------------
    # Unit
    # -------------------------------------------------------------------------

    def visit_source_unit(self, node: SourceUnit) -> str:
        lines = self._statements(node.statements)
        lines.extend(self._comments(node.trailing_comments))
        if not lines:
            return ""
        return NEWLINE.join(lines) + NEWLINE

    # -------------------------------------------------------------------------
    # Expressions
    # -------------------------------------------------------------------------

    def visit_identifier(self, node: Identifier) -> str:
        return node.name

    def visit_string_literal(self, node: StringLiteral) -> str:
        if node.raw is not None:
            return node.raw
        return quote_string(node.value, node.single_quote)

    def visit_numeric_literal(self, node: NumericLiteral) -> str:
        return node.text

    def visit_boolean_literal(self, node: BooleanLiteral) -> str:
        return "true" if node.value else "false"

    def visit_null_literal(self, node: NullLiteral) -> str:
        return "null"

    def visit_this_expression(self, node: ThisExpression) -> str:
        return "this"

    def visit_object_literal(self, node: ObjectLiteral) -> str:
        if not node.properties:
            return "{}"
        return "{ " + ", ".join(p.accept(self) for p in node.properties) + " }"

    def visit_property_assignment(self, node: PropertyAssignment) -> str:
        return f"{node.name.accept(self)}: {self._expr(node.initializer)}"

    def visit_array_literal(self, node: ArrayLiteral) -> str:
        return "[" + self._exprs(node.elements) + "]"

    def visit_property_access(self, node: PropertyAccess) -> str:
        return f"{self._expr(node.expression)}.{node.name}"

    def visit_element_access(self, node: ElementAccess) -> str:
        return f"{self._expr(node.expression)}[{self._expr(node.argument)}]"

    def visit_call_expression(self, node: CallExpression) -> str:
        return f"{self._expr(node.callee)}({self._exprs(node.arguments)})"

    def visit_new_expression(self, node: NewExpression) -> str:
        text = f"new {self._expr(node.callee)}"
        if node.arguments is not None:
            text += f"({self._exprs(node.arguments)})"
        return text

    def visit_binary_expression(self, node: BinaryExpression) -> str:
        return f"{self._expr(node.left)} {node.operator.value} {self._expr(node.right)}"

    def visit_unary_expression(self, node: UnaryExpression) -> str:
        operand = self._expr(node.operand)
        if node.operator.is_keyword:
            return f"{node.operator.value} {operand}"
        # `- -x`, not `--x`
        if node.operator in (UnaryOperator.NEG, UnaryOperator.POS) and operand.startswith(node.operator.value):
            return f"{node.operator.value} {operand}"
        return f"{node.operator.value}{operand}"

    def visit_conditional_expression(self, node: ConditionalExpression) -> str:
        return f"{self._expr(node.condition)} ? {self._expr(node.when_true)} : {self._expr(node.when_false)}"

    def visit_parenthesized_expression(self, node: ParenthesizedExpression) -> str:
        return f"({self._expr(node.expression)})"

    def visit_comma_list_expression(self, node: CommaListExpression) -> str:
        return self._exprs(node.elements)

    def visit_parameter_declaration(self, node: ParameterDeclaration) -> str:
        return node.name.name

    def visit_function_expression(self, node: FunctionExpression) -> str:
        keyword = f"function {node.name.name}" if node.name is not None else "function "
        return self._function(keyword, node.parameters, node.body)

    def visit_arrow_function(self, node: ArrowFunction) -> str:
        params = ", ".join(p.accept(self) for p in node.parameters)
        if isinstance(node.body, Block):
            return f"({params}) => {node.body.accept(self)}"
        return f"({params}) => {self._expr(node.body)}"

    def visit_class_expression(self, node: ClassExpression) -> str:
        keyword = f"class {node.name.name}" if node.name is not None else "class"
        return self._class(keyword, node.heritage, node.members)

    def visit_update_expression(self, node: UpdateExpression) -> str:
        operand = self._expr(node.operand)
        if node.prefix:
            return f"{node.operator}{operand}"
        return f"{operand}{node.operator}"

    def visit_super_expression(self, node: SuperExpression) -> str:
        return "super"

    def visit_shorthand_property_assignment(self, node: ShorthandPropertyAssignment) -> str:
        return node.name.name

    # -------------------------------------------------------------------------
    # Statements
    # -------------------------------------------------------------------------

    def visit_expression_statement(self, node: ExpressionStatement) -> str:
        return f"{self._expr(node.expression)};"

    def visit_binding_element(self, node: BindingElement) -> str:
        if node.property_name is not None:
            return f"{node.property_name}: {node.name.name}"
        return node.name.name

    def visit_object_binding_pattern(self, node: ObjectBindingPattern) -> str:
        if not node.elements:
            return "{}"
        return "{ " + ", ".join(e.accept(self) for e in node.elements) + " }"

    def visit_array_binding_pattern(self, node: ArrayBindingPattern) -> str:
        return "[" + ", ".join(e.accept(self) for e in node.elements) + "]"

    def visit_variable_declaration(self, node: VariableDeclaration) -> str:
        name = node.name.accept(self)
        if node.initializer is None:
            return name
        return f"{name} = {self._expr(node.initializer)}"

    def _declaration_list(self, node: VariableStatement) -> str:
        return f"{node.kind.value} " + ", ".join(d.accept(self) for d in node.declarations)

    def visit_variable_statement(self, node: VariableStatement) -> str:
        return self._declaration_list(node) + ";"

    def visit_block(self, node: Block) -> str:
        return self._block(node.statements)

    def visit_function_declaration(self, node: FunctionDeclaration) -> str:
        return self._function(f"function {node.name.name}", node.parameters, node.body)

    def visit_return_statement(self, node: ReturnStatement) -> str:
        if node.expression is None:
            return "return;"
        return f"return {self._expr(node.expression)};"

    def visit_if_statement(self, node: IfStatement) -> str:
        text = f"if ({self._expr(node.condition)})" + self._embedded(node.then_statement)
        if node.else_statement is None:
            return text
        if isinstance(node.then_statement, Block):
            text += " else"
        else:
            text += NEWLINE + self._indent() + "else"
        if isinstance(node.else_statement, IfStatement) and not node.else_statement.leading_comments:
            return text + " " + node.else_statement.accept(self)
        return text + self._embedded(node.else_statement)

    def visit_for_in_statement(self, node: ForInStatement) -> str:
        keyword = "of" if node.is_for_of else "in"
        head = f"for ({self._declaration_list(node.initializer)} {keyword} {self._expr(node.expression)})"
        return head + self._embedded(node.statement)

    def visit_for_statement(self, node: ForStatement) -> str:
        """`for (;;)` when every header part is absent"""
        if node.initializer is None:
            initializer = ""
        elif isinstance(node.initializer, VariableStatement):
            initializer = self._declaration_list(node.initializer)
        else:
            initializer = self._expr(node.initializer)
        condition = "" if node.condition is None else " " + self._expr(node.condition)
        incrementor = "" if node.incrementor is None else " " + self._expr(node.incrementor)
        return f"for ({initializer};{condition};{incrementor})" + self._embedded(node.statement)

    def visit_while_statement(self, node: WhileStatement) -> str:
        return f"while ({self._expr(node.condition)})" + self._embedded(node.statement)

    def visit_do_statement(self, node: DoStatement) -> str:
        text = "do" + self._embedded(node.statement)
        tail = f"while ({self._expr(node.condition)});"
        if isinstance(node.statement, Block) and not node.statement.leading_comments:
            return f"{text} {tail}"
        return text + NEWLINE + self._indent() + tail

    def visit_break_statement(self, node: BreakStatement) -> str:
        return "break;"

    def visit_continue_statement(self, node: ContinueStatement) -> str:
        return "continue;"

    def visit_throw_statement(self, node: ThrowStatement) -> str:
        return f"throw {self._expr(node.expression)};"

    def visit_try_statement(self, node: TryStatement) -> str:
        text = "try " + node.try_block.accept(self)
        if node.catch_clause is not None:
            text += NEWLINE + self._indent() + node.catch_clause.accept(self)
        if node.finally_block is not None:
            text += NEWLINE + self._indent() + "finally " + node.finally_block.accept(self)
        return text

    def visit_catch_clause(self, node: CatchClause) -> str:
        if node.variable is None:
            return "catch " + node.block.accept(self)
        return f"catch ({node.variable.name}) " + node.block.accept(self)

    def visit_switch_statement(self, node: SwitchStatement) -> str:
        self.indent_level += 1
        clauses = [self._indent() + clause.accept(self) for clause in node.clauses]
        self.indent_level -= 1
        head = f"switch ({self._expr(node.expression)}) {{"
        return head + NEWLINE + "".join(c + NEWLINE for c in clauses) + self._indent() + "}"

    def visit_case_clause(self, node: CaseClause) -> str:
        head = "default:" if node.expression is None else f"case {self._expr(node.expression)}:"
        self.indent_level += 1
        body = self._statements(node.statements)
        self.indent_level -= 1
        return NEWLINE.join([head] + body)

    def visit_class_declaration(self, node: ClassDeclaration) -> str:
        return self._class(f"class {node.name.name}", node.heritage, node.members)

    def visit_method_declaration(self, node: MethodDeclaration) -> str:
        prefix = "static " if node.is_static else ""
        if node.kind is not MethodKind.METHOD:
            prefix += f"{node.kind.value} "
        return self._function(prefix + node.name, node.parameters, node.body)

    def visit_property_declaration(self, node: PropertyDeclaration) -> str:
        prefix = "static " if node.is_static else ""
        if node.initializer is None:
            return f"{prefix}{node.name};"
        return f"{prefix}{node.name} = {self._expr(node.initializer)};"

    def visit_empty_statement(self, node: EmptyStatement) -> str:
        return ";"

    def visit_not_emitted_statement(self, node: NotEmittedStatement) -> str:
        return ""

    # -------------------------------------------------------------------------
    # Module syntax
    # -------------------------------------------------------------------------

    def visit_import_specifier(self, node: ImportSpecifier) -> str:
        if node.kind is ImportKind.NAMESPACE:
            return f"* as {node.name.name}"
        if node.property_name is not None:
            return f"{node.property_name} as {node.name.name}"
        return node.name.name

    def visit_import_clause(self, node: ImportClause) -> str:
        parts = []
        if node.default is not None:
            parts.append(node.default.accept(self))
        named = [b for b in node.bindings if b.kind is ImportKind.NAMED]
        namespace = [b for b in node.bindings if b.kind is ImportKind.NAMESPACE]
        parts.extend(b.accept(self) for b in namespace)
        if named or (not parts):
            parts.append("{ " + ", ".join(b.accept(self) for b in named) + " }" if named else "{}")
        return ", ".join(parts)

    def visit_import_declaration(self, node: ImportDeclaration) -> str:
        specifier = node.module_specifier.accept(self)
        if node.import_clause is None:
            return f"import {specifier};"
        return f"import {node.import_clause.accept(self)} from {specifier};"

    def visit_export_specifier(self, node: ExportSpecifier) -> str:
        if node.property_name is not None:
            return f"{node.property_name} as {node.name}"
        return node.name

    def visit_export_declaration(self, node: ExportDeclaration) -> str:
        if node.specifiers is None:
            clause = "*"
        elif node.specifiers:
            clause = "{ " + ", ".join(s.accept(self) for s in node.specifiers) + " }"
        else:
            clause = "{}"
        if node.module_specifier is None:
            return f"export {clause};"
        return f"export {clause} from {node.module_specifier.accept(self)};"


def print_node(node: ASTNode, context: Optional[TransformationContext] = None) -> str:
    """Text of any node; statements include their comments."""
    printer = JavaScriptPrinter(context)
    if isinstance(node, Statement):
        return printer.print_statement(node)
    return node.accept(printer)
