"""
Expression Parser - Extracted from GoogModuleTransformer
Handles operator precedence for flat binary chains and member/call suffix chains
"""

from dataclasses import dataclass
from typing import Any, Callable, List, Sequence, Union
from typing_extensions import TypeAlias
from ...shared import (
    BinaryExpression, BinaryOperator, CallExpression, ElementAccess, Expression,
    PropertyAccess, SourceLocation,
)

# Type aliases for better clarity
LarkMeta: TypeAlias = Any  # Lark's internal Meta object
LocationExtractor: TypeAlias = Callable[[LarkMeta], SourceLocation]

B = BinaryOperator

# Higher binds tighter
BINARY_PRECEDENCE = {
    B.NULLISH: 1, B.OR: 1,
    B.AND: 2,
    B.BIT_OR: 3,
    B.BIT_XOR: 4,
    B.BIT_AND: 5,
    B.EQ: 6, B.NE: 6, B.STRICT_EQ: 6, B.STRICT_NE: 6,
    B.LT: 7, B.GT: 7, B.LE: 7, B.GE: 7, B.INSTANCEOF: 7, B.IN: 7,
    B.SHL: 8, B.SHR: 8, B.USHR: 8,
    B.ADD: 9, B.SUB: 9,
    B.MUL: 10, B.DIV: 10, B.MOD: 10,
    B.POW: 11,
}

RIGHT_ASSOCIATIVE = frozenset({B.POW})


@dataclass
class MemberSuffix:
    """.name"""
    name: str
    location: SourceLocation


@dataclass
class IndexSuffix:
    """[expr]"""
    argument: Expression
    location: SourceLocation


@dataclass
class CallSuffix:
    """(args)"""
    arguments: List[Expression]
    location: SourceLocation


Suffix: TypeAlias = Union[MemberSuffix, IndexSuffix, CallSuffix]


class BinaryExpressionParser:
    """Dedicated parser for binary expressions"""

    def __init__(self, location_extractor: LocationExtractor) -> None:
        self.extract_location = location_extractor

    def parse_chain(self, first: Expression, rest: Sequence[Any]) -> Expression:
        """
        Fold `first (op operand)*` into a tree, operator-precedence style.

        rest alternates BinaryOperator and operand: [op1, e1, op2, e2, ...]
        """
        operators: List[BinaryOperator] = list(rest[0::2])
        operands: List[Expression] = [first] + list(rest[1::2])

        output: List[Expression] = [operands[0]]
        pending: List[BinaryOperator] = []

        for op, operand in zip(operators, operands[1:]):
            while pending and self._binds_before(pending[-1], op):
                self._reduce(output, pending)
            pending.append(op)
            output.append(operand)
        while pending:
            self._reduce(output, pending)
        return output[0]

    @staticmethod
    def _binds_before(stacked: BinaryOperator, incoming: BinaryOperator) -> bool:
        left, right = BINARY_PRECEDENCE[stacked], BINARY_PRECEDENCE[incoming]
        if left != right:
            return left > right
        return incoming not in RIGHT_ASSOCIATIVE

    @staticmethod
    def _reduce(output: List[Expression], pending: List[BinaryOperator]) -> None:
        right = output.pop()
        left = output.pop()
        output.append(BinaryExpression(left, pending.pop(), right, location=left.location))


class SuffixChainParser:
    """Applies member, index and call suffixes to a primary expression, left to right"""

    @staticmethod
    def apply(primary: Expression, suffixes: Sequence[Suffix]) -> Expression:
        result = primary
        for suffix in suffixes:
            if isinstance(suffix, MemberSuffix):
                result = PropertyAccess(result, suffix.name, location=primary.location)
            elif isinstance(suffix, IndexSuffix):
                result = ElementAccess(result, suffix.argument, location=primary.location)
            else:
                result = CallExpression(result, suffix.arguments, location=primary.location)
        return result
