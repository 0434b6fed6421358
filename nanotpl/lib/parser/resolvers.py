"""
Token resolvers for nanotpl.

Implements the two resolution strategies an engine chooses between at
build time:
- Variables: nested dot-path walk through the data context
- Functions: single-level dispatch to a callable with an optional argument
"""

import json
from collections.abc import Mapping, Sequence
from typing import Any, Self
from nanotpl.config.settings import appsettings
from nanotpl.lib.errors import MissingFunctionError, UnresolvedVariableError
from nanotpl.lib.log import LOG
from nanotpl.models.dataModel import ResolveResult, TokenMatch

# Marks a missing key or index, distinct from a stored None
_ABSENT: object = object()


def value_stringify(value: Any) -> str:
    """Render a resolved value as substitution text.

    Falsy values render literally. None is a defined value and renders as
    "null"; structured values render as compact JSON.

    Examples:
        >>> value_stringify(0)
        '0'
        >>> value_stringify(False)
        'false'
        >>> value_stringify(None)
        'null'
        >>> value_stringify({"a": [1, 2]})
        '{"a":[1,2]}'
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if isinstance(value, (Mapping, list, tuple)):
        return json.dumps(value, default=str, separators=(",", ":"))
    return str(value)


def segment_lookup(target: Any, segment: str) -> Any:
    """Look up one path segment in the current target.

    Mappings are indexed by key, falling back to an integer key for purely
    numeric segments. Non-string sequences are indexed by integer position.

    Returns:
        The value found, or the module's absent marker
    """
    if isinstance(target, Mapping):
        if segment in target:
            return target[segment]
        if segment.isdecimal() and int(segment) in target:
            return target[int(segment)]
        return _ABSENT
    if isinstance(target, Sequence) and not isinstance(target, (str, bytes)):
        if segment.isdecimal() and int(segment) < len(target):
            return target[int(segment)]
    return _ABSENT


class VariableResolver:
    """Resolver for variable tokens by nested path lookup.

    Attributes:
        separator: Path segment separator
    """

    def __init__(self: Self, separator: str = ".") -> None:
        self.separator: str = separator

    def resolve(self: Self, match: TokenMatch, context: Mapping[str, Any]) -> ResolveResult:
        """Walk the data context segment by segment.

        Args:
            match: Scanned token whose body is a dot path, e.g. "user.name"
            context: Data context to walk

        Returns:
            ResolveResult with the stringified value, or an
            UnresolvedVariableError naming the first segment that failed
        """
        lookup: Any = context
        for segment in match.token.split(self.separator):
            lookup = segment_lookup(lookup, segment)
            if lookup is _ABSENT:
                return ResolveResult(
                    text="",
                    error=UnresolvedVariableError(segment, match.tag),
                    success=False,
                )

        text: str = value_stringify(lookup)
        if appsettings.debug_mode:
            LOG(f"Resolved {match.tag} -> {text!r}")
        return ResolveResult(text=text)


class FunctionResolver:
    """Resolver for function tokens of the form name[:argument].

    Attributes:
        separator: Separates the function name from its argument; only the
            first occurrence splits
    """

    def __init__(self: Self, separator: str = ":") -> None:
        self.separator: str = separator

    def resolve(self: Self, match: TokenMatch, context: Mapping[str, Any]) -> ResolveResult:
        """Dispatch the token to a callable in the context.

        The callable is invoked with no arguments when the token has no
        separator, otherwise with the whole remainder after the first
        separator. Exceptions raised by the callable propagate unchanged.

        Args:
            match: Scanned token, e.g. "greet" or "echo:a, b, c"
            context: Mapping of function names to callables

        Returns:
            ResolveResult with the stringified return value, or a
            MissingFunctionError if no callable is registered under the name
        """
        name, found, remainder = match.token.partition(self.separator)
        argument: str | None = remainder if found else None

        function: Any = context.get(name) if isinstance(context, Mapping) else None
        if not callable(function):
            return ResolveResult(
                text="",
                error=MissingFunctionError(name, match.tag),
                success=False,
            )

        value: Any = function() if argument is None else function(argument)
        text: str = value_stringify(value)
        if appsettings.debug_mode:
            LOG(f"Called {name}({argument!r}) for {match.tag} -> {text!r}")
        return ResolveResult(text=text)
