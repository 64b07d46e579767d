"""Loguru sinks for liftbook.

Console output always goes to stderr. A rotating, zipped file sink is
added when ``LIFTBOOK_LOG_FILE`` is set.
"""

import sys
from pathlib import Path
from typing import Any

from loguru import logger

from liftbook.config.settings import Settings

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}"


def build_handlers(config: Settings) -> list[dict[str, Any]]:
    """Translate logging settings into loguru handler definitions."""
    handlers: list[dict[str, Any]] = [
        {"sink": sys.stderr, "format": CONSOLE_FORMAT, "level": config.log_level, "colorize": True},
    ]
    if config.log_file:
        log_path = Path(config.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            {
                "sink": log_path,
                "format": FILE_FORMAT,
                "level": config.log_level,
                "rotation": config.log_rotation,
                "retention": config.log_retention,
                "compression": "zip",
                "backtrace": True,
            }
        )
    return handlers


def setup_logger(config: Settings) -> None:
    """Replace all loguru sinks with the ones described by ``config``."""
    logger.configure(handlers=build_handlers(config))
    destination = config.log_file or "stderr"
    logger.debug(f"Logging at {config.log_level} to {destination}")
