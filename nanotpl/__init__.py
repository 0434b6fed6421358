"""Configurable string interpolation with pluggable delimiters.

Build an engine once, then render templates against a data context:

    >>> from nanotpl import engine_build
    >>> render = engine_build()
    >>> render("Hello ${user.name}!", {"user": {"name": "Jane"}})
    'Hello Jane!'

Function mode dispatches tokens to callables, and engines with different
delimiters chain into multi-pass pipelines:

    >>> from nanotpl import pipeline_render
    >>> pipeline_render(
    ...     "Hello #{greet:${name}}!",
    ...     [
    ...         (engine_build(), {"name": "Jane"}),
    ...         (engine_build(functions=True), {"greet": lambda n: "Welcome, " + n}),
    ...     ],
    ... )
    'Hello Welcome, Jane!'
"""

from typing import Final

from nanotpl.lib.engine import Engine, engine_build, pipeline_render
from nanotpl.lib.errors import (
    MissingFunctionError,
    UnresolvedTokenError,
    UnresolvedVariableError,
)
from nanotpl.lib.parser import (
    FunctionResolver,
    TokenParser,
    TokenResolver,
    VariableResolver,
    delimiter_escape,
    pattern_compile,
    value_stringify,
)
from nanotpl.models.dataModel import EngineConfig, ResolveResult, TokenMatch

__version__: Final[str] = "0.3.0"

__all__ = [
    "Engine",
    "engine_build",
    "pipeline_render",
    "EngineConfig",
    "TokenMatch",
    "ResolveResult",
    "TokenParser",
    "TokenResolver",
    "VariableResolver",
    "FunctionResolver",
    "delimiter_escape",
    "pattern_compile",
    "value_stringify",
    "UnresolvedTokenError",
    "UnresolvedVariableError",
    "MissingFunctionError",
]
