"""
Logging configuration for mensual.

Module loggers are plain ``logging.getLogger(__name__)`` loggers; this module
only decides the root level and attaches a Rich handler once.
"""

# SPDX-License-Identifier: MIT

import logging
import os

from rich.logging import RichHandler

from mensual.configuration import LOG_LEVEL_ENV_VAR, LOG_LEVELS


def resolve_log_level(configured_level: str, force_debug: bool = False) -> int:
    """
    Pick the effective root log level.

    Precedence: force_debug, then the MENSUAL_LOG_LEVEL environment variable,
    then the configured level. Unknown names fall back to WARNING.

    Args:
        configured_level: Level name from the configuration file
        force_debug: Set by --verbose on the command line

    Returns:
        A logging level number
    """
    if force_debug:
        return logging.DEBUG

    env_level = os.getenv(LOG_LEVEL_ENV_VAR, "").upper()
    if env_level in LOG_LEVELS:
        return getattr(logging, env_level)

    level = configured_level.upper()
    if level in LOG_LEVELS:
        return getattr(logging, level)
    return logging.WARNING


def configure_logging(
    configured_level: str = "WARNING", force_debug: bool = False
) -> None:
    root_logger = logging.getLogger()
    root_logger.setLevel(resolve_log_level(configured_level, force_debug))

    if not any(isinstance(h, RichHandler) for h in root_logger.handlers):
        handler = RichHandler(show_path=False, rich_tracebacks=True)
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        root_logger.addHandler(handler)
