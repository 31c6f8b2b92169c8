"""Logging utilities for DepCompare."""

import logging
from typing import Dict, Any
from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

_loggers: Dict[str, "DepCompareLogger"] = {}
_level = logging.INFO


class DepCompareLogger:
    """Custom logger with rich formatting on standard error."""

    def __init__(self, name: str, level: int = logging.INFO) -> None:
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level)
        self._setup_handlers()

    def _setup_handlers(self) -> None:
        """Setup rich console handler with custom theme."""
        # stdout is reserved for the report confirmation line
        console = Console(stderr=True, theme=Theme({
            "info": "cyan",
            "warning": "yellow",
            "error": "red",
            "critical": "red bold",
            "debug": "dim",
        }))

        handler = RichHandler(
            console=console,
            show_time=True,
            show_path=False,
            markup=False,
        )

        formatter = logging.Formatter(
            fmt="%(name)s: %(message)s",
            datefmt="[%X]"
        )
        handler.setFormatter(formatter)

        # Remove existing handlers to avoid duplicates
        self.logger.handlers.clear()
        self.logger.addHandler(handler)
        self.logger.propagate = False

    def set_level(self, level: int) -> None:
        """Set the minimum level this logger emits."""
        self.logger.setLevel(level)

    def error(self, msg: str, **kwargs: Any) -> None:
        """Log error message."""
        self.logger.error(msg, extra=kwargs)

    def debug(self, msg: str, **kwargs: Any) -> None:
        """Log debug message."""
        self.logger.debug(msg, extra=kwargs)


def setup_logging(level: int = logging.WARNING) -> None:
    """Set the level of every DepCompare logger, existing and future.

    Args:
        level: Logging level
    """
    global _level
    _level = level

    for logger in _loggers.values():
        logger.set_level(level)


def get_logger(name: str) -> DepCompareLogger:
    """Get a DepCompare logger instance.

    Loggers are cached by name so repeated lookups share one handler.

    Args:
        name: Logger name

    Returns:
        Configured logger instance
    """
    if name not in _loggers:
        _loggers[name] = DepCompareLogger(name, _level)
    return _loggers[name]
