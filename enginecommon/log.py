"""Levelled, coloured console logging for the engine and its scripts."""

from __future__ import annotations

import enum
import sys
from typing import TextIO

_GREEN = "\x1b[32m"
_BLUE = "\x1b[34m"
_MAGENTA = "\x1b[35m"
_YELLOW = "\x1b[33m"
_RED = "\x1b[31m"
_CYAN = "\x1b[36m"
_NORMAL = "\x1b[0m"


class LogLevel(enum.IntEnum):
    """Severity of a message; a logger shows messages at or above its level."""

    INFO = 0
    WARNING = 1
    ERROR = 2
    CRITICAL_ERROR = 3
    NOTHING = 4


_LABELS = {
    LogLevel.INFO: (_GREEN, "Info: "),
    LogLevel.WARNING: (_MAGENTA, "Warning: "),
    LogLevel.ERROR: (_YELLOW, "Error: "),
    LogLevel.CRITICAL_ERROR: (_RED, "Critical error: "),
}


def format_message(
    level: LogLevel, function: str, message: str, script: bool = False
) -> str:
    """Build one coloured log line, ending in a newline.

    ``script`` marks messages that come from the scripting layer.
    """
    try:
        colour, label = _LABELS[LogLevel(level)]
    except (KeyError, ValueError):
        raise ValueError(f"no message format for level {level!r}") from None
    prefix = f"{_CYAN}Lua " if script else ""
    return f"{prefix}{colour}{label}{_BLUE}({function}){_NORMAL} {message}\n"


class Logger:
    """Writes messages to ``out`` (info) and ``err`` (everything else)."""

    def __init__(
        self,
        level: LogLevel = LogLevel.INFO,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.level = LogLevel(level)
        self._out = out
        self._err = err

    @property
    def out(self) -> TextIO:
        return self._out if self._out is not None else sys.stdout

    @property
    def err(self) -> TextIO:
        return self._err if self._err is not None else sys.stderr

    def set_level(self, value: int) -> LogLevel:
        """Set the level, clamping out-of-range values with a warning."""
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError("log level must be an integer")
        clamped = min(max(value, LogLevel.INFO), LogLevel.NOTHING)
        if clamped != value:
            self.warning("set_level", f"Value out of range. Setting to {clamped}.")
        self.level = LogLevel(clamped)
        return self.level

    def _emit(self, level: LogLevel, stream: TextIO, function: str, message: str) -> None:
        if self.level > level:
            return
        stream.write(format_message(level, function, message))

    def info(self, function: str, message: str) -> None:
        """Log an informational message to ``out``."""
        self._emit(LogLevel.INFO, self.out, function, message)

    def warning(self, function: str, message: str) -> None:
        """Log a warning to ``err``."""
        self._emit(LogLevel.WARNING, self.err, function, message)

    def error(self, function: str, message: str) -> None:
        """Log an error to ``err``."""
        self._emit(LogLevel.ERROR, self.err, function, message)

    def critical_error(self, function: str, message: str) -> None:
        """Log a critical error to ``err``."""
        self._emit(LogLevel.CRITICAL_ERROR, self.err, function, message)

    def out_of_memory(self, function: str) -> None:
        """Report memory exhaustion; this is shown at every level."""
        self.err.write(
            f"{_RED}Critical error: {_BLUE}({function}){_NORMAL} Out of memory.\n"
        )

    def script_message(self, level: LogLevel, function: str, message: str) -> None:
        """Write a message on behalf of a script, regardless of the level.

        Info goes to ``out``; the other levels go to ``err``.
        """
        if not isinstance(function, str) or not isinstance(message, str):
            self.error("script_message", "Arguments must be strings")
            raise TypeError("Arguments must be strings")
        level = LogLevel(level)
        text = format_message(level, function, message, script=True)
        stream = self.out if level is LogLevel.INFO else self.err
        stream.write(text)