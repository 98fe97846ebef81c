"""In-memory record of logged errors."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable

from .errors import LoggableError, LogLevel, ResponseError


def _rfc3339(timestamp: datetime) -> str:
    if timestamp.microsecond == 0:
        spec = "seconds"
    elif timestamp.microsecond % 1000 == 0:
        spec = "milliseconds"
    else:
        spec = "microseconds"
    return timestamp.isoformat(timespec=spec)


@dataclass
class LogEntry:
    """A single recorded log line."""

    level: LogLevel
    message: str
    timestamp: datetime
    path: str | None = None

    def to_json(self) -> str:
        return json.dumps(
            {
                "level": self.level.value,
                "message": self.message,
                "path": self.path,
                "timestamp": _rfc3339(self.timestamp),
            },
            separators=(",", ":"),
            sort_keys=True,
            ensure_ascii=False,
        )


@dataclass
class LogRecorder:
    """Keeps recorded entries in arrival order."""

    entries: list[LogEntry] = field(default_factory=list)

    def record(self, log: Any, path: str | None = None) -> None:
        """Store anything with ``message``, ``level`` and ``timestamp``."""
        self.entries.append(LogEntry(log.level, log.message, log.timestamp, path))

    def retrieve(self, index: int, length: int) -> str:
        """Render ``length`` entries starting at ``index``.

        A range running past the end is cut short; a start outside the
        recorded entries raises IndexError.
        """
        total = len(self.entries)
        if not 0 <= index <= total:
            raise IndexError(f"log index {index} out of range")
        if index + length > total or index + length < 0:
            length = total - index
        if length < 0:
            raise IndexError(f"log length {length} out of range")

        listed = "".join(
            entry.to_json() + "," for entry in self.entries[index : index + length]
        )
        # The final character (a comma, or the bracket when empty) is dropped.
        return ("{logs:[" + listed)[:-1] + "]}"

    def log_on_error(self, func: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
        """Call ``func``; record a loggable error it raises and return None."""
        try:
            return func(*args, **kwargs)
        except (LoggableError, ResponseError) as error:
            self.record(error)
            return None