"""
Unified logging system for the relay translator
Provides leveled console lines and single-use operation tracking
"""
import sys
import os
import json
import time
import threading
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Optional, Dict, Any, Callable, List, Mapping, TextIO, Tuple

from relay_translator.core.exceptions import TrackerAlreadyClosedError


class LogLevel(Enum):
    """Log levels with priority values"""
    DEBUG = 10
    INFO = 20
    WARN = 30
    ERROR = 40
    FATAL = 50  # same behaviour as ERROR, only the label differs

    @classmethod
    def from_name(cls, name: str) -> 'LogLevel':
        """Parse a configured level name ('WARNING' is accepted for WARN)."""
        normalized = name.strip().upper()
        if normalized == 'WARNING':
            normalized = 'WARN'
        try:
            return cls[normalized]
        except KeyError:
            raise ValueError(f"Unknown log level: {name!r}")


class Colors:
    """ANSI color codes for terminal output"""
    GRAY = '\033[90m'
    WHITE = '\033[97m'
    YELLOW = '\033[93m'
    RED = '\033[91m'
    ENDC = '\033[0m'

    LEVELS = {
        LogLevel.DEBUG: GRAY,
        LogLevel.INFO: WHITE,
        LogLevel.WARN: YELLOW,
        LogLevel.ERROR: RED,
        LogLevel.FATAL: RED,
    }


def pair_fields(fields: Tuple[Any, ...]) -> List[Tuple[str, Any]]:
    """
    Turn a flat ``key, value, key, value`` sequence into ordered pairs.

    A trailing key without a value is dropped silently.
    """
    return [(str(fields[i]), fields[i + 1]) for i in range(0, len(fields) - 1, 2)]


def format_value(value: Any) -> str:
    """Render a field value by kind: text, number, duration or mapping."""
    if isinstance(value, str):
        return value
    if isinstance(value, timedelta):
        return f"{value.total_seconds() * 1000:.3f}ms"
    if isinstance(value, Mapping):
        return json.dumps(dict(value), ensure_ascii=False, default=str, separators=(',', ':'))
    return str(value)


@dataclass
class OperationTracker:
    """Timing and input record for one unit of work; closes exactly once."""
    operation: str
    start_time: datetime
    input: Dict[str, Any]
    _started: float = field(default_factory=time.monotonic, repr=False)
    _closed: bool = field(default=False, repr=False)

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> timedelta:
        """Mark the tracker consumed and return the elapsed duration."""
        if self._closed:
            raise TrackerAlreadyClosedError(f"Operation '{self.operation}' was already closed")
        self._closed = True
        return timedelta(seconds=time.monotonic() - self._started)


class UnifiedLogger:
    """
    Leveled logger writing ``[timestamp] LEVEL: message | key=value ...`` lines
    """

    def __init__(self,
                 name: str = "RelayTranslator",
                 min_level: LogLevel = LogLevel.INFO,
                 stream: Optional[TextIO] = None,
                 enable_colors: bool = True,
                 storage_callback: Optional[Callable[[Dict[str, Any]], None]] = None):
        """
        Initialize the unified logger

        Args:
            name: Logger name/identifier
            min_level: Minimum log level to write
            stream: Output stream (defaults to the current sys.stdout)
            enable_colors: Whether to color lines on a terminal
            storage_callback: Receives a structured entry for every written line
        """
        self.name = name
        self.min_level = min_level
        self.stream = stream
        self.enable_colors = enable_colors
        self.storage_callback = storage_callback
        self._lock = threading.Lock()

    def _format_timestamp(self) -> str:
        """Format current UTC timestamp with milliseconds"""
        now = datetime.now(timezone.utc)
        return now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"

    def _use_colors(self, stream: TextIO) -> bool:
        if not self.enable_colors or os.environ.get('NO_COLOR') is not None:
            return False
        isatty = getattr(stream, 'isatty', None)
        return bool(isatty and isatty())

    def format_line(self, level: LogLevel, message: str, fields: Tuple[Any, ...]) -> str:
        """Build the console line for a message and its raw fields."""
        line = f"[{self._format_timestamp()}] {level.name}: {message}"
        if fields:
            line += " |"
            for key, value in pair_fields(fields):
                line += f" {key}={format_value(value)}"
        return line

    def log(self, level: LogLevel, message: str, *fields: Any):
        """
        Main logging method

        Args:
            level: Log level
            message: Log message
            *fields: Alternating keys and values
        """
        if level.value < self.min_level.value:
            return

        line = self.format_line(level, message, fields)
        stream = self.stream or sys.stdout

        with self._lock:
            output = line
            if self._use_colors(stream):
                output = f"{Colors.LEVELS[level]}{line}{Colors.ENDC}"
            try:
                print(output, file=stream, flush=True)
            except UnicodeEncodeError:
                # Consoles with a narrow codec (cp1252 on Windows)
                print(line.encode('ascii', 'replace').decode('ascii'), file=stream, flush=True)

        if self.storage_callback:
            self.storage_callback({
                'timestamp': datetime.now(timezone.utc).isoformat(),
                'level': level.name,
                'message': message,
                'fields': pair_fields(fields),
            })

    # Convenience methods
    def debug(self, message: str, *fields: Any):
        self.log(LogLevel.DEBUG, message, *fields)

    def info(self, message: str, *fields: Any):
        self.log(LogLevel.INFO, message, *fields)

    def warn(self, message: str, *fields: Any):
        self.log(LogLevel.WARN, message, *fields)

    def error(self, message: str, *fields: Any):
        self.log(LogLevel.ERROR, message, *fields)

    def fatal(self, message: str, *fields: Any):
        """Log at FATAL. Does not terminate the process."""
        self.log(LogLevel.FATAL, message, *fields)

    # Operation tracking
    def start_operation(self, operation: str, input: Dict[str, Any]) -> OperationTracker:
        """Log the start of an operation and return its tracker."""
        self.info(f"started: {operation}", "input", input)
        return OperationTracker(
            operation=operation,
            start_time=datetime.now(timezone.utc),
            input=input,
        )

    def complete_operation(self, tracker: OperationTracker, output: Dict[str, Any]):
        """Close a tracker on the success path."""
        duration = tracker.close()
        self.info(f"completed: {tracker.operation}",
                  "duration", duration,
                  "input", tracker.input,
                  "output", output)

    def error_operation(self, tracker: OperationTracker, error: BaseException, resolution: str):
        """Close a tracker on the failure path with a resolution hint."""
        duration = tracker.close()
        self.error(f"failed: {tracker.operation}",
                   "error", str(error),
                   "duration", duration,
                   "resolution", resolution,
                   "input", tracker.input)


def create_logger(level_name: str = "INFO", **kwargs) -> UnifiedLogger:
    """
    Create a logger from a configured level name

    Args:
        level_name: DEBUG, INFO, WARN, ERROR or FATAL
        **kwargs: Additional arguments for UnifiedLogger

    Returns:
        UnifiedLogger instance
    """
    return UnifiedLogger(min_level=LogLevel.from_name(level_name), **kwargs)
