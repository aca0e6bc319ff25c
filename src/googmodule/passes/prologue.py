"""
Module prologue: the statements that open every rewritten unit.

    goog.module('<namespace>');
    var module = module || { id: '<module id>' };
    module = module;          // not in ES5 mode
    exports = {};             // not in ES5 mode, and only if the unit never assigns exports
"""

from typing import List

from ..shared.nodes import NotEmittedStatement, Statement
from ..shared.factory import (
    create_assignment, create_expression_statement, create_goog_call, create_identifier,
    create_logical_or, create_object_literal, create_property_assignment,
    create_string_literal, create_variable_statement,
)
from ..utils.config import EXPORTS_IDENTIFIER, MODULE_IDENTIFIER


def build_prologue(namespace: str, module_id: str, es5_mode: bool,
                   has_exports_assignment: bool) -> List[Statement]:
    """Header statements for a unit providing `namespace`."""
    header: List[Statement] = [
        create_expression_statement(create_goog_call("module", create_string_literal(namespace))),
        # `module` is not defined in Closure's goog.module bodies
        create_variable_statement(
            create_identifier(MODULE_IDENTIFIER),
            create_logical_or(
                create_identifier(MODULE_IDENTIFIER),
                create_object_literal([create_property_assignment("id", create_string_literal(module_id))]),
            ),
        ),
    ]
    if es5_mode:
        return header

    # Marks `module` as used so it is not reported as unused
    header.append(create_expression_statement(
        create_assignment(create_identifier(MODULE_IDENTIFIER), create_identifier(MODULE_IDENTIFIER))
    ))
    if not has_exports_assignment:
        header.append(create_expression_statement(
            create_assignment(create_identifier(EXPORTS_IDENTIFIER), create_object_literal([]))
        ))
    return header


def prologue_insertion_index(statements: List[Statement]) -> int:
    """Number of leading placeholders; the prologue goes after them."""
    index = 0
    while index < len(statements) and isinstance(statements[index], NotEmittedStatement):
        index += 1
    return index


def insert_prologue(statements: List[Statement], header: List[Statement]) -> List[Statement]:
    index = prologue_insertion_index(statements)
    return statements[:index] + header + statements[index:]
