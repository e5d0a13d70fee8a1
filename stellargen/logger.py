"""Levelled logger writing to the console and to a log file."""

from __future__ import annotations

import sys
import time
from enum import IntFlag
from pathlib import Path
from typing import IO, Optional, Union

_STATE_MASK = 0xFF


class LogLevel(IntFlag):
    """Log levels and display modes; combined as bit flags into a state."""

    FATAL = 0b00000001
    ERROR = 0b00000010
    WARNING = 0b00000100
    INFO = 0b00001000
    DEBUG = 0b00010000
    DISP_CMD = 0b00100000
    DISP_TXT = 0b01000000


_LEVEL_STYLE = {
    LogLevel.FATAL: ("FATAL", "\033[91m"),
    LogLevel.ERROR: ("ERROR", "\033[93m"),
    LogLevel.WARNING: ("WARNING", "\033[95m"),
    LogLevel.INFO: ("INFO", "\033[94m"),
    LogLevel.DEBUG: ("DEBUG", "\033[92m"),
}
_UNKNOWN_STYLE = ("UNKNOWN", "\033[97m")


def format_message(level: int, message: str, timestamp: str, color: bool) -> str:
    """Render one log line, with terminal colours when ``color`` is true."""
    name, code = _LEVEL_STYLE.get(level, _UNKNOWN_STYLE)
    if color:
        return f"\033[90m[{timestamp}] {code}{name}\033[37m : {message}\033[0m"
    return f"[{timestamp}] {name} : {message}"


class Logger:
    """Writes messages whose level is enabled in its state."""

    def __init__(self, log_file_path: Union[str, Path], state: int = _STATE_MASK) -> None:
        self._state = int(state) & _STATE_MASK
        self._closed = False
        self._file: Optional[IO[str]]
        try:
            self._file = open(log_file_path, "w", encoding="utf-8")
        except OSError:
            self._file = None
            self.set_display_txt(False)
            self.log(LogLevel.ERROR, f"Logger can not open log file. Log file path : {log_file_path}")
        self.log(LogLevel.INFO, "Logger created")

    def __enter__(self) -> "Logger":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def set_display_cmd(self, state: bool) -> None:
        """Enable or disable console output."""
        self._apply(LogLevel.DISP_CMD, state)

    def set_display_txt(self, state: bool) -> None:
        """Enable or disable file output; refused if no file is open."""
        if state and self._file is None:
            print("Logger Error : Logger file has not been open, thus can not write in it.",
                  file=sys.stderr)
            return
        self._apply(LogLevel.DISP_TXT, state)

    def set_level(self, level: int, state: bool) -> None:
        """Enable or disable the given level or display mode bits."""
        if state and (level & LogLevel.DISP_TXT) == LogLevel.DISP_TXT and self._file is None:
            self.log(LogLevel.ERROR, "Logger file has not been open, thus can not write in it.")
            return
        self._apply(level, state)

    def is_display(self, level: int) -> bool:
        """True if every bit of ``level`` is enabled."""
        return (self._state & level) == level

    @property
    def state(self) -> int:
        """The current bit state."""
        return self._state

    def log(self, level: int, message: str) -> None:
        """Write ``message`` if ``level`` is enabled."""
        if (self._state & level) != level:
            return
        timestamp = time.strftime("%H:%M:%S")
        if self.is_display(LogLevel.DISP_CMD):
            print(format_message(level, message, timestamp, True), flush=True)
        if self.is_display(LogLevel.DISP_TXT) and self._file is not None:
            self._file.write(format_message(level, message, timestamp, False) + "\n")
            self._file.flush()

    def close(self) -> None:
        """Log the shutdown and close the log file."""
        if self._closed:
            return
        self.log(LogLevel.INFO, "Logger destroyed")
        self._closed = True
        if self._file is not None:
            self._file.close()
            self._file = None

    def _apply(self, bits: int, state: bool) -> None:
        self._state = ((self._state & ~int(bits)) | (int(bits) if state else 0)) & _STATE_MASK


_settings: dict = {"state": _STATE_MASK, "path": "UNKNOWN.log", "instance": None}


def configure(state: int, log_file_path: Union[str, Path]) -> None:
    """Set the state and file used when the shared logger is first created."""
    _settings["state"] = state
    _settings["path"] = log_file_path


def get_logger() -> Logger:
    """Return the shared logger, creating it on first use."""
    if _settings["instance"] is None:
        _settings["instance"] = Logger(_settings["path"], _settings["state"])
    return _settings["instance"]