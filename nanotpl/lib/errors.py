"""
Resolution errors raised by strict-mode engines.

Resolvers never raise these directly; they hand them back inside a failed
`ResolveResult` and the parser decides, from the engine's `warn` flag,
whether to raise or to pass the original tag through.
"""

from typing import Self


class UnresolvedTokenError(Exception):
    """Base class for tokens that could not be resolved.

    Attributes:
        tag: The full original tag text, delimiters included
    """

    def __init__(self: Self, message: str, tag: str) -> None:
        super().__init__(message)
        self.tag: str = tag


class UnresolvedVariableError(UnresolvedTokenError):
    """A path segment is absent or unreachable in the data context."""

    def __init__(self: Self, segment: str, tag: str) -> None:
        super().__init__(f"'{segment}' missing in {tag}", tag)
        self.segment: str = segment


class MissingFunctionError(UnresolvedTokenError):
    """No callable is registered under the requested function name."""

    def __init__(self: Self, name: str, tag: str) -> None:
        super().__init__(f"Missing function '{name}' in {tag}", tag)
        self.name: str = name
