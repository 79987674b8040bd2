"""
Logging setup for numlib.

All module loggers live under the "numlib" namespace. The library itself
only ever logs at DEBUG; applications that want to see those messages call
configure_logging() once at startup.
"""

import logging
import sys
from typing import Optional

from numlib.config.settings import LOG_LEVEL_NAMES, get_settings

ROOT_LOGGER_NAME = "numlib"


class TextFormatter(logging.Formatter):
    """Human-readable text log formatter"""

    def __init__(self):
        super().__init__(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )


def get_logger(name: str) -> logging.Logger:
    """
    Return a logger under the numlib namespace.

    Args:
        name: Usually __name__ of the calling module. Names that already start
              with "numlib" are used unchanged.
    """
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Attach a single stderr handler to the numlib root logger.

    Calling this more than once replaces the previous handler rather than
    stacking duplicates.

    Args:
        level: Level name such as "DEBUG". Defaults to NumericSettings.log_level.

    Returns:
        The configured "numlib" logger.

    Raises:
        ValueError: If level is not a standard logging level name.
    """
    level_name = (level or get_settings().log_level).upper()
    if level_name not in LOG_LEVEL_NAMES:
        raise ValueError(
            f"log level must be one of {', '.join(LOG_LEVEL_NAMES)}, got: {level!r}"
        )
    log_level = getattr(logging, level_name)

    root = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(root.handlers):
        if getattr(handler, "_numlib_handler", False):
            root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(TextFormatter())
    handler._numlib_handler = True
    root.addHandler(handler)
    root.setLevel(log_level)

    return root
