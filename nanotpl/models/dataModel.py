"""
dataModel.py

This module defines the data models used throughout the nanotpl package.
The models leverage Pydantic for validation and immutability.

Features:
- Engine configuration with mode-dependent defaulting
- Token matches produced by the scanner
- Resolution results returned by resolver strategies

Usage:
Import these models to configure engines and to implement custom resolvers.
"""

from typing import Any
from pydantic import BaseModel, ConfigDict, Field
from nanotpl.config.settings import (
    DEFAULT_FUNCTION_END,
    DEFAULT_FUNCTION_PATH,
    DEFAULT_FUNCTION_START,
    DEFAULT_VARIABLE_END,
    DEFAULT_VARIABLE_PATH,
    DEFAULT_VARIABLE_START,
)
from nanotpl.lib.errors import UnresolvedTokenError


def _start_default(data: dict[str, Any]) -> str:
    return DEFAULT_FUNCTION_START if data.get("functions") else DEFAULT_VARIABLE_START


def _end_default(data: dict[str, Any]) -> str:
    return DEFAULT_FUNCTION_END if data.get("functions") else DEFAULT_VARIABLE_END


def _path_default(data: dict[str, Any]) -> str:
    return DEFAULT_FUNCTION_PATH if data.get("functions") else DEFAULT_VARIABLE_PATH


class EngineConfig(BaseModel):
    """
    Immutable engine configuration.

    Every field is optional. `functions` is declared, and therefore
    validated, first; the delimiter and path defaults are then derived from
    its validated value. `model_fields_set` lists only the fields the caller
    actually gave, so a config can be rebuilt with different overrides and
    have its defaults re-derived.

    Attributes:
        functions: Function-dispatch mode instead of variable-path mode
        warn: Strict mode; unresolved tokens raise instead of passing through
        start: Literal opening delimiter (never a regex fragment)
        end: Literal closing delimiter (never a regex fragment)
        path: Regex character-class pattern for a valid token body
    """

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    functions: bool = Field(default=False, description="Function-dispatch mode.")
    warn: bool = Field(default=True, description="Raise on unresolved tokens.")
    start: str = Field(default_factory=_start_default, description="Opening delimiter.")
    end: str = Field(default_factory=_end_default, description="Closing delimiter.")
    path: str = Field(
        default_factory=_path_default,
        alias="pathPattern",
        description="Pattern of characters allowed in a token body.",
    )


class TokenMatch(BaseModel):
    """A single delimiter-bounded token found by the scanner.

    Attributes:
        tag: Full matched text, delimiters included
        token: Inner token body, whitespace-trimmed and never empty
        start: Offset of the tag in the template
        end: Offset just past the tag in the template
    """

    model_config = ConfigDict(frozen=True)

    tag: str
    token: str
    start: int
    end: int


class ResolveResult(BaseModel):
    """Result of a token resolution.

    Attributes:
        text: The substitution text if resolution succeeded
        error: The resolution error if it failed
        success: Whether resolution succeeded
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    text: str
    error: UnresolvedTokenError | None = None
    success: bool = True
