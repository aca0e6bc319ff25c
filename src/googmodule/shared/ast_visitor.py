"""
AST Visitor Pattern

Design:
- Abstract base class with visit_* methods for each AST node type
- Default implementations walk children and return None
- Leaf visits that every visitor must decide on are abstract

Used by the binder (parent links, name resolution) and the printer
(which overrides every visit to return text).
"""

from typing import TypeVar, Generic, TYPE_CHECKING
from abc import ABC, abstractmethod

if TYPE_CHECKING:
    from .nodes import Identifier, StringLiteral

T = TypeVar('T')


class ASTVisitor(ABC, Generic[T]):
    """
    Abstract visitor for the JavaScript AST.

    Usage:
        class NameCollector(ASTVisitor[None]):
            def __init__(self):
                self.names = []

            def visit_identifier(self, node) -> None:
                self.names.append(node.name)

            def visit_string_literal(self, node) -> None:
                pass

        unit.accept(NameCollector())
    """

    # Leaves
    @abstractmethod
    def visit_identifier(self, node: 'Identifier') -> T:
        raise NotImplementedError(f"{self.__class__.__name__} must implement visit_identifier()")

    @abstractmethod
    def visit_string_literal(self, node: 'StringLiteral') -> T:
        raise NotImplementedError(f"{self.__class__.__name__} must implement visit_string_literal()")

    def visit_numeric_literal(self, node) -> T:
        pass

    def visit_boolean_literal(self, node) -> T:
        pass

    def visit_null_literal(self, node) -> T:
        pass

    def visit_this_expression(self, node) -> T:
        pass

    # Expressions
    def visit_object_literal(self, node) -> T:
        for prop in node.properties:
            prop.accept(self)

    def visit_property_assignment(self, node) -> T:
        # Property names are not references
        node.initializer.accept(self)

    def visit_array_literal(self, node) -> T:
        for element in node.elements:
            element.accept(self)

    def visit_property_access(self, node) -> T:
        node.expression.accept(self)

    def visit_element_access(self, node) -> T:
        node.expression.accept(self)
        node.argument.accept(self)

    def visit_call_expression(self, node) -> T:
        node.callee.accept(self)
        for arg in node.arguments:
            arg.accept(self)

    def visit_new_expression(self, node) -> T:
        node.callee.accept(self)
        for arg in node.arguments or []:
            arg.accept(self)

    def visit_binary_expression(self, node) -> T:
        node.left.accept(self)
        node.right.accept(self)

    def visit_unary_expression(self, node) -> T:
        node.operand.accept(self)

    def visit_conditional_expression(self, node) -> T:
        node.condition.accept(self)
        node.when_true.accept(self)
        node.when_false.accept(self)

    def visit_parenthesized_expression(self, node) -> T:
        node.expression.accept(self)

    def visit_comma_list_expression(self, node) -> T:
        for element in node.elements:
            element.accept(self)

    def visit_function_expression(self, node) -> T:
        if node.name is not None:
            node.name.accept(self)
        for param in node.parameters:
            param.accept(self)
        node.body.accept(self)

    def visit_parameter_declaration(self, node) -> T:
        node.name.accept(self)

    def visit_arrow_function(self, node) -> T:
        for param in node.parameters:
            param.accept(self)
        node.body.accept(self)

    def visit_class_expression(self, node) -> T:
        if node.name is not None:
            node.name.accept(self)
        if node.heritage is not None:
            node.heritage.accept(self)
        for member in node.members:
            member.accept(self)

    def visit_update_expression(self, node) -> T:
        node.operand.accept(self)

    def visit_super_expression(self, node) -> T:
        pass

    def visit_shorthand_property_assignment(self, node) -> T:
        node.name.accept(self)

    # Statements
    def visit_source_unit(self, node) -> T:
        for stmt in node.statements:
            stmt.accept(self)

    def visit_expression_statement(self, node) -> T:
        node.expression.accept(self)

    def visit_variable_statement(self, node) -> T:
        for decl in node.declarations:
            decl.accept(self)

    def visit_variable_declaration(self, node) -> T:
        node.name.accept(self)
        if node.initializer is not None:
            node.initializer.accept(self)

    def visit_object_binding_pattern(self, node) -> T:
        for element in node.elements:
            element.accept(self)

    def visit_array_binding_pattern(self, node) -> T:
        for element in node.elements:
            element.accept(self)

    def visit_binding_element(self, node) -> T:
        node.name.accept(self)

    def visit_function_declaration(self, node) -> T:
        node.name.accept(self)
        for param in node.parameters:
            param.accept(self)
        node.body.accept(self)

    def visit_block(self, node) -> T:
        for stmt in node.statements:
            stmt.accept(self)

    def visit_return_statement(self, node) -> T:
        if node.expression is not None:
            node.expression.accept(self)

    def visit_if_statement(self, node) -> T:
        node.condition.accept(self)
        node.then_statement.accept(self)
        if node.else_statement is not None:
            node.else_statement.accept(self)

    def visit_for_in_statement(self, node) -> T:
        node.initializer.accept(self)
        node.expression.accept(self)
        node.statement.accept(self)

    def visit_for_statement(self, node) -> T:
        for part in (node.initializer, node.condition, node.incrementor):
            if part is not None:
                part.accept(self)
        node.statement.accept(self)

    def visit_while_statement(self, node) -> T:
        node.condition.accept(self)
        node.statement.accept(self)

    def visit_do_statement(self, node) -> T:
        node.statement.accept(self)
        node.condition.accept(self)

    def visit_break_statement(self, node) -> T:
        pass

    def visit_continue_statement(self, node) -> T:
        pass

    def visit_throw_statement(self, node) -> T:
        node.expression.accept(self)

    def visit_try_statement(self, node) -> T:
        node.try_block.accept(self)
        if node.catch_clause is not None:
            node.catch_clause.accept(self)
        if node.finally_block is not None:
            node.finally_block.accept(self)

    def visit_catch_clause(self, node) -> T:
        if node.variable is not None:
            node.variable.accept(self)
        node.block.accept(self)

    def visit_switch_statement(self, node) -> T:
        node.expression.accept(self)
        for clause in node.clauses:
            clause.accept(self)

    def visit_case_clause(self, node) -> T:
        if node.expression is not None:
            node.expression.accept(self)
        for stmt in node.statements:
            stmt.accept(self)

    def visit_class_declaration(self, node) -> T:
        node.name.accept(self)
        if node.heritage is not None:
            node.heritage.accept(self)
        for member in node.members:
            member.accept(self)

    def visit_method_declaration(self, node) -> T:
        for param in node.parameters:
            param.accept(self)
        node.body.accept(self)

    def visit_property_declaration(self, node) -> T:
        if node.initializer is not None:
            node.initializer.accept(self)

    def visit_empty_statement(self, node) -> T:
        pass

    def visit_not_emitted_statement(self, node) -> T:
        pass

    # Module syntax
    def visit_import_declaration(self, node) -> T:
        if node.import_clause is not None:
            node.import_clause.accept(self)
        node.module_specifier.accept(self)

    def visit_import_clause(self, node) -> T:
        for spec in node.specifiers:
            spec.accept(self)

    def visit_import_specifier(self, node) -> T:
        node.name.accept(self)

    def visit_export_declaration(self, node) -> T:
        for spec in node.specifiers or []:
            spec.accept(self)
        if node.module_specifier is not None:
            node.module_specifier.accept(self)

    def visit_export_specifier(self, node) -> T:
        pass
