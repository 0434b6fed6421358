"""
settings.py

This module provides configuration management for the nanotpl package.

Features:
- Ambient settings (logging verbosity) using Pydantic settings
- Mode-dependent defaults for engine delimiters and token path patterns

Usage:
Import appsettings for ambient configuration values and the DEFAULT_*
constants when an engine configuration needs defaulting.

Environment:
- Set `NANOTPL_BEQUIET=false` to see resolution diagnostics on stderr.

Note:
Engine configuration itself is never read from the environment; it is
always passed explicitly to `engine_build`.
"""

from typing import Final
from pydantic_settings import BaseSettings, SettingsConfigDict

# Variable (path) mode defaults
DEFAULT_VARIABLE_START: Final[str] = "${"
DEFAULT_VARIABLE_END: Final[str] = "}"
DEFAULT_VARIABLE_PATH: Final[str] = r"[a-z0-9_$][\.a-z0-9_]*"

# Function mode defaults: argument lists need ':', ',', '/', '-' and space
DEFAULT_FUNCTION_START: Final[str] = "#{"
DEFAULT_FUNCTION_END: Final[str] = "}"
DEFAULT_FUNCTION_PATH: Final[str] = r"[a-z0-9_$][\.a-z0-9_$:,/ \-]*"


class App(BaseSettings):
    """
    Ambient settings model.

    Settings can be overridden through environment variables with the
    NANOTPL_ prefix.

    Attributes:
        beQuiet: Suppress diagnostic logging output
        debug_mode: Log every token resolution, not only failures
    """

    beQuiet: bool = True
    debug_mode: bool = False

    model_config = SettingsConfigDict(
        env_prefix="NANOTPL_",
        case_sensitive=False,
        extra="allow",
    )


appsettings: Final[App] = App()
