"""
googmodule AST Transformers
===========================

Specialized transformers for different AST node types.
"""

from .base import GoogModuleTransformer
from .literals import LiteralParser
from .expressions import BinaryExpressionParser, SuffixChainParser

__all__ = [
    'GoogModuleTransformer',
    'LiteralParser',
    'BinaryExpressionParser',
    'SuffixChainParser',
]
