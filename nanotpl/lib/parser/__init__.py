"""
Parser package for nanotpl token substitution.

Provides delimiter-aware token scanning and the resolver strategies an
engine selects between at build time.
"""

from .base import TokenParser, TokenResolver, delimiter_escape, pattern_compile
from .resolvers import FunctionResolver, VariableResolver, value_stringify

__all__ = [
    "TokenParser",
    "TokenResolver",
    "delimiter_escape",
    "pattern_compile",
    "FunctionResolver",
    "VariableResolver",
    "value_stringify",
]
