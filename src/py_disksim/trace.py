"""Trace and results — what the head did, and what it added up to.

Every head movement becomes a ``Step``.  Most steps **service** a
request; two kinds do not:

- **PIVOT** — SCAN-style policies run out to the disk edge before
  reversing (or, for C-SCAN, before jumping).
- **JUMP** — C-SCAN and C-LOOK relocate the head to the other end of
  the disk (or of the pending requests) without servicing anything.

The ``TraceRecorder`` collects steps while an engine runs and then
derives the summary metrics:

- **total movement** — the sum of every step's distance, pivots and
  jumps included.
- **processing order** — the cylinders of servicing steps only, in the
  order they were serviced.
- **average seek** — total movement divided by the number of serviced
  requests (not the number of steps).
- **elapsed time** — the instant the last step finished.
"""

from dataclasses import dataclass
from enum import StrEnum

from py_disksim.config import Policy
from py_disksim.logging import LogEntry
from py_disksim.requests import Direction, DiskRequest


class StepKind(StrEnum):
    """What a head movement was for."""

    SERVICE = "service"
    PIVOT = "pivot"
    JUMP = "jump"


@dataclass(frozen=True)
class Step:
    """One head movement in the trace.

    Attributes:
        start: Cylinder the head departed from.
        end: Cylinder the head stopped on.
        distance: Cylinders crossed (``abs(end - start)``).
        departure: Simulated time the head departed.
        duration: Travel time plus service time (servicing steps only).
        kind: Whether the step serviced a request, pivoted, or jumped.
        request: The serviced request, for servicing steps.
        intercepted: True if the request flagged the head down en route.

    """

    start: int
    end: int
    distance: int
    departure: float
    duration: float
    kind: StepKind = StepKind.SERVICE
    request: DiskRequest | None = None
    intercepted: bool = False

    @property
    def servicing(self) -> bool:
        """Return True if this step serviced a request."""
        return self.kind is StepKind.SERVICE

    @property
    def arrival(self) -> float:
        """Return the simulated time this step finished."""
        return self.departure + self.duration

    @property
    def direction(self) -> Direction:
        """Return the direction of travel (``DOWN`` for zero-length steps)."""
        return Direction.toward(self.start, self.end)

    def __str__(self) -> str:
        """Format as ``T=departure: start -> end (distance)``."""
        label = "" if self.servicing else f" [{self.kind}]"
        if self.intercepted:
            label = " [intercept]"
        return f"T={self.departure:.2f}: {self.start} -> {self.end} ({self.distance}){label}"


@dataclass(frozen=True)
class SimulationResult:
    """The immutable outcome of one policy run.

    Attributes:
        policy: The policy that produced this result.
        initial_position: Cylinder the head started on.
        direction: Initial sweep direction.
        final_direction: Sweep direction when the run ended.
        trace: Every head movement, in order.
        processing_order: Serviced cylinders, in service order.
        total_movement: Sum of every step's distance.
        elapsed_time: Simulated time the last step finished.
        average_seek: ``total_movement / serviced`` (0.0 if none).
        log: Narrative events recorded during the run.

    """

    policy: Policy
    initial_position: int
    direction: Direction
    final_direction: Direction
    trace: tuple[Step, ...]
    processing_order: tuple[int, ...]
    total_movement: int
    elapsed_time: float
    average_seek: float
    log: tuple[LogEntry, ...] = ()

    @property
    def serviced(self) -> int:
        """Return the number of serviced requests."""
        return len(self.processing_order)


class TraceRecorder:
    """Accumulate steps during a run and summarise them afterwards."""

    def __init__(self) -> None:
        """Create an empty recorder."""
        self._steps: list[Step] = []

    @property
    def steps(self) -> list[Step]:
        """Return a copy of the steps recorded so far."""
        return list(self._steps)

    def record(self, step: Step) -> None:
        """Append *step* to the trace."""
        self._steps.append(step)

    def build(
        self,
        *,
        policy: Policy,
        initial_position: int,
        direction: Direction,
        final_direction: Direction | None = None,
        log: list[LogEntry] | None = None,
    ) -> SimulationResult:
        """Derive the summary metrics and freeze the result.

        Args:
            policy: The policy that ran.
            initial_position: Cylinder the head started on.
            direction: Initial sweep direction.
            final_direction: Sweep direction at the end (default:
                *direction*).
            log: Log entries to attach to the result.

        Returns:
            The completed simulation result.

        """
        total = sum(step.distance for step in self._steps)
        order = tuple(step.end for step in self._steps if step.servicing)
        elapsed = self._steps[-1].arrival if self._steps else 0.0
        average = total / len(order) if order else 0.0
        return SimulationResult(
            policy=policy,
            initial_position=initial_position,
            direction=direction,
            final_direction=final_direction or direction,
            trace=tuple(self._steps),
            processing_order=order,
            total_movement=total,
            elapsed_time=elapsed,
            average_seek=average,
            log=tuple(log or ()),
        )
