"""
Engine construction and rendering for nanotpl.

An engine is built once from a configuration and can then render any number
of templates. Engines with disjoint delimiter sets can be chained over the
same text to form a multi-pass pipeline.

Features:
- Mode-dependent configuration defaulting
- Strategy selection (variable path walk or function dispatch) at build time
- Multi-pass rendering across independently configured engines

Example:
    variables = engine_build()
    functions = engine_build(functions=True)
    text = pipeline_render(
        "Hello #{greet:${name}}!",
        [(variables, {"name": "Jane"}), (functions, {"greet": greet})],
    )
"""

import re
from collections.abc import Iterable, Mapping
from typing import Any, Self
from nanotpl.lib.parser import (
    FunctionResolver,
    TokenParser,
    TokenResolver,
    VariableResolver,
    pattern_compile,
)
from nanotpl.lib.log import LOG
from nanotpl.models.dataModel import EngineConfig, TokenMatch


class Engine:
    """Immutable string-interpolation engine.

    Holds one configuration and the matcher compiled from it. Rendering reads
    only from its arguments, so an engine can be shared freely, including
    across threads.
    """

    __slots__ = ("_config", "_parser")

    def __init__(self: Self, config: EngineConfig) -> None:
        resolver: TokenResolver = (
            FunctionResolver() if config.functions else VariableResolver()
        )
        self._config: EngineConfig = config
        self._parser: TokenParser = TokenParser(
            pattern_compile(config), resolver, warn=config.warn
        )

    @property
    def config(self: Self) -> EngineConfig:
        """The engine's configuration."""
        return self._config

    @property
    def pattern(self: Self) -> re.Pattern[str]:
        """The compiled token matcher."""
        return self._parser.pattern

    def render(self: Self, template: str, context: Mapping[str, Any]) -> str:
        """Substitute every token of this engine's delimiter set.

        Args:
            template: Template text
            context: Data context (variable mode) or mapping of callables
                (function mode); never mutated

        Returns:
            The rendered text

        Raises:
            UnresolvedVariableError: Strict variable mode, unresolvable path
            MissingFunctionError: Strict function mode, no such callable
        """
        return self._parser.parse(template, context)

    __call__ = render

    def tokens_find(self: Self, template: str) -> list[TokenMatch]:
        """List the tokens this engine would resolve in a template."""
        return self._parser.tokens_find(template)

    def __repr__(self: Self) -> str:
        return (
            f"Engine(start={self._config.start!r}, end={self._config.end!r}, "
            f"warn={self._config.warn}, functions={self._config.functions})"
        )


def engine_build(
    config: EngineConfig | Mapping[str, Any] | None = None, **overrides: Any
) -> Engine:
    """Build an engine from a (partial) configuration.

    Args:
        config: An EngineConfig, a mapping of configuration fields, or None
            for all defaults
        **overrides: Configuration fields taking precedence over `config`

    Returns:
        A new immutable Engine

    Examples:
        >>> engine_build().render("Hello ${name}!", {"name": "Jane"})
        'Hello Jane!'
        >>> engine_build(start="{{", end="}}")("{{ x }}", {"x": 1})
        '1'
    """
    fields: dict[str, Any]
    if isinstance(config, EngineConfig):
        if not overrides:
            return Engine(config)
        fields = config.model_dump(exclude_unset=True)
    else:
        fields = dict(config or {})
    fields.update(overrides)

    resolved: EngineConfig = EngineConfig(**fields)
    LOG(f"Built {resolved.model_dump()}")
    return Engine(resolved)


def pipeline_render(
    template: str, passes: Iterable[tuple[Engine, Mapping[str, Any]]]
) -> str:
    """Render a template through several engines in sequence.

    Each pass renders the output of the previous one, resolving only its
    own delimiter set.

    Args:
        template: Initial template text
        passes: (engine, context) pairs, applied in order

    Returns:
        The text after the final pass
    """
    text: str = template
    for engine, context in passes:
        text = engine.render(text, context)
    return text
