"""Simulation log — a narrative of what the engine decided and when.

The numeric trace records *movements*.  Plenty of interesting things
happen between movements: the head idles waiting for a request, a
sweep reverses, a batch is frozen, a newly arrived request flags the
head down.  Those events go into the log instead, so the trace stays
a pure list of head movements.

- **LogLevel** — severity levels ordered for filtering (DEBUG < ERROR).
- **LogEntry** — a single structured record (level, message, source, time).
- **Logger** — an append-only log, one per run.

Design choices:
    - **IntEnum for levels** so they compare naturally with ``<``.
    - **Frozen dataclass for entries** — log records should be immutable.
    - **Simulated time, not wall time** — entries are stamped with the
      engine's clock so a log reads alongside the trace.
"""

from dataclasses import dataclass
from enum import IntEnum


class LogLevel(IntEnum):
    """Severity levels for log entries."""

    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3


@dataclass(frozen=True)
class LogEntry:
    """A single structured log record.

    Attributes:
        level: The severity of this event.
        message: A human-readable description of what happened.
        source: The policy that generated the event (e.g. "SCAN").
        time: Simulated time of the event.

    """

    level: LogLevel
    message: str
    source: str
    time: float = 0.0

    def __str__(self) -> str:
        """Format as ``[LEVEL] t=time source: message``."""
        return f"[{self.level.name}] t={self.time:.2f} {self.source}: {self.message}"


class Logger:
    """Append-only log buffer."""

    def __init__(self) -> None:
        """Create an empty logger."""
        self._entries: list[LogEntry] = []

    @property
    def entries(self) -> list[LogEntry]:
        """Return all log entries in chronological order."""
        return list(self._entries)

    def log(
        self,
        level: LogLevel,
        message: str,
        *,
        source: str,
        time: float = 0.0,
    ) -> None:
        """Append a new entry to the log.

        Args:
            level: Severity of the event.
            message: Human-readable event description.
            source: Policy that generated the event.
            time: Simulated time of the event.

        """
        self._entries.append(LogEntry(level=level, message=message, source=source, time=time))
