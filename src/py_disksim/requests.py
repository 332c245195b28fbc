"""Disk I/O requests — the value type every scheduling policy consumes.

A request asks the disk head to visit one **cylinder**.  In a static
textbook exercise every request is known up front; in a dynamic one
each request has an **arrival time** and only becomes visible to the
scheduler once the simulated clock reaches it.

Two requests may target the same cylinder, so a request is identified
by its **order** (its position in the caller's input), never by its
cylinder.  The order is also the universal tie-breaker: whenever two
requests are otherwise equivalent, the one the caller listed first
wins.  This keeps every simulation deterministic.
"""

import re
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum


class SimulationError(Exception):
    """Base class for every error the simulator raises."""


class InvalidRequestError(SimulationError):
    """Raise when a request cannot be parsed or lies outside the disk."""


class Direction(StrEnum):
    """Sweep direction of the disk head.

    ``UP`` means towards higher cylinder numbers, ``DOWN`` towards
    lower ones.  Only the sweep-family policies care about it.
    """

    UP = "up"
    DOWN = "down"

    def reversed(self) -> "Direction":
        """Return the opposite direction."""
        return Direction.DOWN if self is Direction.UP else Direction.UP

    @staticmethod
    def toward(start: int, end: int) -> "Direction":
        """Return the direction the head travels going from *start* to *end*.

        A zero-length move is reported as ``DOWN``.
        """
        return Direction.UP if end > start else Direction.DOWN


@dataclass(frozen=True)
class DiskRequest:
    """A single I/O request.

    Frozen: the engine decides *when* a request is serviced, but never
    changes *what* it asks for.

    Attributes:
        position: Target cylinder.
        order: Stable input sequence number (tie-breaker).
        arrival_time: Simulated instant the request becomes visible.

    """

    position: int
    order: int
    arrival_time: float = 0.0

    def __str__(self) -> str:
        """Format as ``#order: cylinder@arrival``."""
        return f"#{self.order}: {self.position}@{self.arrival_time:g}"

    @staticmethod
    def batch(
        positions: Iterable[int],
        *,
        arrival_time: float = 0.0,
        start: int = 1,
    ) -> list["DiskRequest"]:
        """Number a list of cylinders in input order.

        Args:
            positions: Cylinders to request.
            arrival_time: Arrival instant shared by every request.
            start: Order assigned to the first request.

        Returns:
            One request per cylinder.

        """
        return [
            DiskRequest(position=pos, order=i, arrival_time=arrival_time)
            for i, pos in enumerate(positions, start=start)
        ]


_SEPARATORS = re.compile(r"[,;\s]+")


def parse_requests(text: str) -> list[DiskRequest]:
    """Parse user text into requests.

    Tokens are separated by commas, semicolons or whitespace.  Each
    token is either ``CYL`` (arrives at time 0) or ``CYL:ARRIVAL``.

    Args:
        text: Raw request text, e.g. ``"98, 183:2.5 37"``.

    Returns:
        The parsed requests, numbered from 1 in input order.

    Raises:
        InvalidRequestError: If a token is not a valid request.

    """
    requests: list[DiskRequest] = []
    for token in _SEPARATORS.split(text.strip()):
        if not token:
            continue
        cylinder, _, arrival = token.partition(":")
        try:
            position = int(cylinder)
            arrival_time = float(arrival) if arrival else 0.0
        except ValueError:
            msg = f"Invalid request '{token}': expected CYLINDER or CYLINDER:ARRIVAL"
            raise InvalidRequestError(msg) from None
        requests.append(
            DiskRequest(position=position, order=len(requests) + 1, arrival_time=arrival_time)
        )
    return requests
