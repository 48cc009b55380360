"""
Logging sink for the Aerospike SDK.

Configuration loaders, the Info transport and the client all receive a sink
explicitly instead of reaching for a module-level logger. ``Logger`` is the
default sink and forwards to the standard ``logging`` module under
``aero_sdk.<component>``.

Usage:
    from aero_sdk.log import Logger, LogLevel

    logger = Logger(LogLevel.WARN)
    client = Client(config, logger=logger)
"""

import logging
from enum import IntEnum
from typing import Protocol, runtime_checkable

LOGGER_NAMESPACE = "aero_sdk"


class LogLevel(IntEnum):
    """Minimum severity a sink forwards."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARN = logging.WARNING
    ERR = logging.ERROR
    OFF = logging.CRITICAL + 10

    @classmethod
    def parse(cls, value: str) -> "LogLevel":
        """Parse a level name such as ``"info"`` or ``"off"``."""
        try:
            return cls[value.strip().upper()]
        except KeyError:
            names = ", ".join(member.name.lower() for member in cls)
            raise ValueError(f"Invalid log level '{value}'. Must be one of: {names}.") from None


@runtime_checkable
class LogSink(Protocol):
    """Diagnostic sink consumed by configuration and connection code."""

    def info(self, component: str, message: str) -> None: ...

    def warn(self, component: str, message: str) -> None: ...

    def err(self, component: str, message: str) -> None: ...


class Logger:
    """
    ``LogSink`` backed by the standard ``logging`` module.

    Each component gets its own child logger (``aero_sdk.client``,
    ``aero_sdk.net`` ...), so applications can tune verbosity per component
    with regular logging configuration.
    """

    def __init__(self, level: LogLevel = LogLevel.INFO, namespace: str = LOGGER_NAMESPACE):
        self.level = level
        self.namespace = namespace

    def get_logger(self, component: str) -> logging.Logger:
        return logging.getLogger(f"{self.namespace}.{component}")

    def enabled_for(self, level: LogLevel) -> bool:
        return self.level is not LogLevel.OFF and level >= self.level

    def info(self, component: str, message: str) -> None:
        self._log(LogLevel.INFO, component, message)

    def warn(self, component: str, message: str) -> None:
        self._log(LogLevel.WARN, component, message)

    def err(self, component: str, message: str) -> None:
        self._log(LogLevel.ERR, component, message)

    def _log(self, level: LogLevel, component: str, message: str) -> None:
        if not self.enabled_for(level):
            return
        self.get_logger(component).log(int(level), message)

    def __repr__(self) -> str:
        return f"Logger(level={self.level.name}, namespace={self.namespace!r})"


__all__ = ["LOGGER_NAMESPACE", "LogLevel", "LogSink", "Logger"]
