# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: specforge
"""
Logger implementation for specforge.

This module provides the default logger implementation based on Python's
standard logging module, enhanced with structured key-value context.
"""

from __future__ import annotations

import datetime
import enum
import json
import logging
import sys
from logging import StreamHandler
from typing import Any

from specforge.logging.config import LoggingSettings
from specforge.logging.level import LogLevel

_CONTEXT_ATTR = "specforge_context"
_HANDLER_ATTR = "_specforge_handler"


class StructuredFormatter(logging.Formatter):
    """Formatter that renders the structured context attached to a record."""

    def __init__(
        self,
        json_format: bool = False,
        include_timestamp: bool = True,
        include_level: bool = True,
    ) -> None:
        """Initialize a structured formatter.

        Args:
            json_format: Whether to format logs as JSON
            include_timestamp: Whether to include timestamps in logs
            include_level: Whether to include log level in logs
        """
        self.json_format = json_format
        self.include_timestamp = include_timestamp
        self.include_level = include_level

        fmt = "%(name)s %(message)s"
        if include_timestamp:
            fmt = "%(asctime)s " + fmt
        if include_level and not json_format:
            fmt = fmt + " [%(levelname)s]"

        super().__init__(fmt=fmt, datefmt="%Y-%m-%d %H:%M:%S")

    def format(self, record: logging.LogRecord) -> str:
        extra: dict[str, Any] = dict(getattr(record, _CONTEXT_ATTR, None) or {})

        if self.json_format:
            return self._format_json(record, extra)

        message = super().format(record)
        if not extra:
            return message
        ctx_str = " ".join(f"{k}={self._format_value(v)}" for k, v in extra.items())
        return f"{message} {ctx_str}"

    def _format_json(self, record: logging.LogRecord, extra: dict[str, Any]) -> str:
        log_data: dict[str, Any] = {
            "message": record.getMessage(),
            "name": record.name,
            **extra,
        }
        if self.include_level:
            log_data["level"] = record.levelname
        if self.include_timestamp:
            log_data["timestamp"] = self.formatTime(record, self.datefmt)
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
            log_data["error"] = str(record.exc_info[1])

        return json.dumps(log_data, default=str)

    def _format_value(self, value: Any) -> str:
        if isinstance(value, str):
            # Quote strings that contain spaces
            if " " in value:
                return f'"{value}"'
            return value
        if isinstance(value, datetime.datetime | datetime.date):
            return value.isoformat()
        if isinstance(value, enum.Enum):
            return str(value.value)
        if isinstance(value, type):
            return value.__qualname__
        try:
            return json.dumps(value)
        except TypeError:
            return str(value)


class SpecforgeLogger:
    """Default logger for specforge.

    Wraps a standard library logger and merges bound context with the
    keyword context given to each call.
    """

    def __init__(
        self,
        name: str,
        settings: LoggingSettings | None = None,
        bound_context: dict[str, Any] | None = None,
    ) -> None:
        self.name = name
        self._settings = settings or LoggingSettings.load()
        self._logger = logging.getLogger(name)
        self._bound_context: dict[str, Any] = dict(bound_context or {})
        self._configure()

    def _configure(self) -> None:
        self._logger.setLevel(self._settings.level)
        self._logger.propagate = False

        # Reconfigure only the handler we own so callers' handlers survive.
        for handler in list(self._logger.handlers):
            if getattr(handler, _HANDLER_ATTR, False):
                self._logger.removeHandler(handler)

        if self._settings.console_enabled:
            console = StreamHandler(sys.stderr)
            console.setFormatter(
                StructuredFormatter(
                    json_format=self._settings.json_format,
                    include_timestamp=self._settings.include_timestamp,
                    include_level=self._settings.include_level,
                )
            )
            setattr(console, _HANDLER_ATTR, True)
            self._logger.addHandler(console)

    @property
    def stdlib_logger(self) -> logging.Logger:
        return self._logger

    def _log(self, level: int, msg: str, **kwargs: Any) -> None:
        if not self._logger.isEnabledFor(level):
            return
        exc_info = kwargs.pop("exc_info", None)
        context = {**self._bound_context, **kwargs}
        self._logger.log(level, msg, exc_info=exc_info, extra={_CONTEXT_ATTR: context})

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log(logging.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._log(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log(logging.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._log(logging.ERROR, message, **kwargs)

    def critical(self, message: str, **kwargs: Any) -> None:
        self._log(logging.CRITICAL, message, **kwargs)

    def set_level(self, level: LogLevel) -> None:
        self._logger.setLevel(level.to_stdlib_level())

    def bind(self, **kwargs: Any) -> SpecforgeLogger:
        """Create a new logger with bound context values.

        Args:
            **kwargs: Context values to bind

        Returns:
            New logger instance with bound context
        """
        return SpecforgeLogger(
            self.name,
            settings=self._settings,
            bound_context={**self._bound_context, **kwargs},
        )


def get_logger(name: str, level: LogLevel | None = None) -> SpecforgeLogger:
    """Get a logger for the specified name.

    Args:
        name: Logger name (typically __name__)
        level: Optional log level override

    Returns:
        Configured logger instance
    """
    logger = SpecforgeLogger(name, settings=LoggingSettings.load())

    if level is not None:
        logger.set_level(level)

    return logger
