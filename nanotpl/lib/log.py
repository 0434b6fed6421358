"""
Centralized package logging using Loguru.

This module provides a function-based logging mechanism (`LOG`) that dynamically
respects the `beQuiet` flag from the ambient settings.

Features:
- A custom `LOG` function for package-specific debug logging.
- Dynamic checking of the `beQuiet` flag to suppress logs when necessary.
- Consistent and customizable logging format.

Example:
    from nanotpl.lib.log import LOG
    LOG("Token '${name}' passed through unresolved")

Environment:
- Set `NANOTPL_BEQUIET=false` to enable logging output.
"""

from loguru import logger
from typing import Any
import sys

# Create a distinct logger instance for the package
app_logger = logger.bind(app="NANOTPL")

logger_format = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> │ "
    "<level>{level: <5}</level> │ "
    "<yellow>{name: >28}</yellow>::"
    "<cyan>{function: <30}</cyan> @ "
    "<cyan>{line: <4}</cyan> ║ "
    "<level>{message}</level>"
)

# The host's own sinks and records are left alone; this sink only takes ours
sink_id: int = app_logger.add(
    sys.stderr,
    format=logger_format,
    filter=lambda record: record["extra"].get("app") == "NANOTPL",
)


def LOG(*args: Any, **kwargs: Any) -> None:
    """
    Package-specific logging function.

    Checks the `beQuiet` flag in `appsettings` on every call and logs the
    message only if logging is enabled.

    :param args: Positional arguments for the log message.
    :param kwargs: Keyword arguments for additional log metadata.
    """
    from nanotpl.config.settings import appsettings

    if not appsettings.beQuiet:
        app_logger.opt(depth=1).debug(*args, **kwargs)
