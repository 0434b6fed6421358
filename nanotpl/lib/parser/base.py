r"""
Base parser implementation for delimiter-bounded token substitution.

Provides a generic parsing engine that scans a template for tokens using a
compiled, delimiter-aware pattern and substitutes each one through a
configurable resolver strategy.

The parser handles:
- Literal escaping of user-supplied delimiters before pattern compilation
- Case-insensitive, non-overlapping, single-pass token scanning
- Resolver strategy pattern for the variable and function modes
- Strict (raise) versus lenient (pass-through) handling of failures

Example:
    parser = TokenParser(pattern_compile(config), VariableResolver(), warn=True)
    text = parser.parse("Hello ${name}", {"name": "Jane"})
"""

import re
from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable, Self
from nanotpl.models.dataModel import EngineConfig, ResolveResult, TokenMatch
from nanotpl.lib.log import LOG


def delimiter_escape(delimiter: str) -> str:
    """Escape a delimiter for literal inclusion in a pattern.

    Every special character is escaped individually so that the delimiter
    only ever matches its own literal text.

    Args:
        delimiter: Raw delimiter string, e.g. "$(" or "[["

    Returns:
        The delimiter with every regex-special character backslash-escaped

    Examples:
        >>> delimiter_escape("$(")
        '\\$\\('
        >>> delimiter_escape("{{")
        '\\{\\{'
    """
    return re.escape(delimiter)


def pattern_compile(config: EngineConfig) -> re.Pattern[str]:
    """Compile the token matcher for an engine configuration.

    The matcher is: start delimiter, optional whitespace, one or more path
    characters (captured), optional whitespace, end delimiter.

    Args:
        config: Engine configuration

    Returns:
        Compiled, case-insensitive pattern
    """
    source: str = (
        delimiter_escape(config.start)
        + r"\s*("
        + config.path
        + r")\s*"
        + delimiter_escape(config.end)
    )
    return re.compile(source, re.IGNORECASE)


@runtime_checkable
class TokenResolver(Protocol):
    """Protocol defining the resolver interface for token substitution.

    Resolvers handle one resolution strategy (variable path walk or
    function dispatch). They report failures through the returned
    ResolveResult instead of raising, leaving the strict/lenient decision
    to the parser.
    """

    def resolve(self: Self, match: TokenMatch, context: Mapping[str, Any]) -> ResolveResult:
        """Resolve a token against a data context.

        Args:
            match: The scanned token, with its tag and trimmed body
            context: Caller-owned data context

        Returns:
            ResolveResult containing:
                - text: Substitution if successful
                - error: UnresolvedTokenError if resolution failed
                - success: Whether resolution succeeded
        """
        ...


class TokenParser:
    """Generic token parser using a resolver strategy.

    Attributes:
        pattern: Compiled delimiter-aware token matcher
        resolver: Strategy for resolving token bodies
        warn: Raise on the first unresolved token instead of passing it through
    """

    def __init__(
        self: Self, pattern: re.Pattern[str], resolver: TokenResolver, warn: bool = True
    ) -> None:
        self.pattern: re.Pattern[str] = pattern
        self.resolver: TokenResolver = resolver
        self.warn: bool = warn

    def tokens_find(self: Self, template: str) -> list[TokenMatch]:
        """Scan a template for all non-overlapping tokens, left to right.

        Args:
            template: Template text to scan

        Returns:
            Token matches in template order
        """
        return [
            TokenMatch(
                tag=found.group(0),
                token=found.group(1).strip(),
                start=found.start(),
                end=found.end(),
            )
            for found in self.pattern.finditer(template)
        ]

    def parse(self: Self, template: str, context: Mapping[str, Any]) -> str:
        """Substitute every token in a template.

        All tokens are found before the output is assembled, so text
        produced by one substitution is never rescanned in the same pass.

        Args:
            template: Template text
            context: Caller-owned data context

        Returns:
            The substituted text

        Raises:
            UnresolvedTokenError: In strict mode, on the first token that
                cannot be resolved
        """
        if not template:
            return template

        result: list[str] = []
        position: int = 0
        for match in self.tokens_find(template):
            result.append(template[position : match.start])
            result.append(self._substitute(match, context))
            position = match.end
        result.append(template[position:])
        return "".join(result)

    def _substitute(self: Self, match: TokenMatch, context: Mapping[str, Any]) -> str:
        """Resolve one token and apply the strict/lenient failure policy."""
        resolved: ResolveResult = self.resolver.resolve(match, context)
        if resolved.success:
            return resolved.text

        LOG(f"Unresolved token {match.tag}: {resolved.error}")
        if self.warn and resolved.error is not None:
            raise resolved.error
        return match.tag
