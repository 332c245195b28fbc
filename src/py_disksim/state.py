"""Run state — the head, the clock, and the two request queues.

Every policy engine drives one ``RunState``.  The state owns:

- **The request arena** — a tuple of the caller's requests, sorted by
  ``(arrival_time, order)``.  It is never modified.
- **Pending** — a deque of arena indices not yet visible to the
  scheduler, in arrival order.
- **Active** — a list of arena indices the engine may choose from, in
  admission order.  For the frozen and N-step policies this is the
  sealed batch.
- **The head** — position, sweep direction and simulated time.

Queues hold *indices*, not requests, so removing a serviced request
never depends on object equality, and two requests for the same
cylinder can never be confused.

The helpers here (admission, idling, interception lookups, and the
three kinds of head movement) are shared building blocks.  Each
engine in ``py_disksim.policies`` composes the ones it needs.
"""

from collections import deque
from collections.abc import Iterable

from py_disksim.config import SimulationConfig
from py_disksim.intercept import Intercept, find_intercept
from py_disksim.logging import Logger, LogLevel
from py_disksim.requests import Direction, DiskRequest
from py_disksim.trace import SimulationResult, Step, StepKind, TraceRecorder


class RunState:
    """Mutable state of a single simulation run."""

    def __init__(self, config: SimulationConfig, requests: Iterable[DiskRequest]) -> None:
        """Copy *requests* into a fresh arena and park the head.

        Args:
            config: The run's configuration.
            requests: The caller's workload (copied, never mutated).

        """
        self._config = config
        self._requests: tuple[DiskRequest, ...] = tuple(
            sorted(requests, key=lambda r: (r.arrival_time, r.order))
        )
        self.pending: deque[int] = deque(range(len(self._requests)))
        self.active: list[int] = []
        self.head = config.initial_position
        self.direction = config.direction
        self.time = 0.0
        self._logger = Logger()
        self._recorder = TraceRecorder()

    @property
    def requests(self) -> tuple[DiskRequest, ...]:
        """Return the request arena."""
        return self._requests

    @property
    def done(self) -> bool:
        """Return True once every request has been serviced."""
        return not self.active and not self.pending

    def position(self, index: int) -> int:
        """Return the cylinder requested by arena entry *index*."""
        return self._requests[index].position

    def log(self, level: LogLevel, message: str) -> None:
        """Record a narrative event at the current simulated time."""
        self._logger.log(level, message, source=self._config.policy.value, time=self.time)

    # -- Admission -------------------------------------------------------------

    def admit(self, *, limit: int | None = None) -> int:
        """Move arrived requests from pending to active.

        Args:
            limit: Admit at most this many (None = every arrived request).

        Returns:
            The number of requests admitted.

        """
        admitted = 0
        while self.pending and self._requests[self.pending[0]].arrival_time <= self.time:
            if limit is not None and admitted >= limit:
                break
            self.active.append(self.pending.popleft())
            admitted += 1
        return admitted

    def idle(self) -> None:
        """Advance the clock to the next arrival if nothing has arrived yet.

        Idling moves no cylinders and emits no step; it is only logged.
        """
        if not self.pending:
            return
        next_arrival = self._requests[self.pending[0]].arrival_time
        if next_arrival > self.time:
            self.log(LogLevel.INFO, f"Idle until t={next_arrival:.2f}")
            self.time = next_arrival

    def ready(self) -> bool:
        """Admit arrivals, idling first if there is nothing to do.

        Returns:
            True if the active queue has work; False after an idle.

        """
        self.admit()
        if self.active:
            return True
        self.idle()
        return False

    # -- Target selection helpers ------------------------------------------------

    def ahead(self) -> list[int]:
        """Return active indices at or beyond the head, nearest first.

        "Beyond" follows the current sweep direction.  Ties keep
        admission order (the sort is stable).
        """
        if self.direction is Direction.UP:
            candidates = [i for i in self.active if self.position(i) >= self.head]
        else:
            candidates = [i for i in self.active if self.position(i) <= self.head]
        return sorted(candidates, key=lambda i: abs(self.position(i) - self.head))

    def edge(self, direction: Direction | None = None) -> int:
        """Return the boundary cylinder in *direction* (default: current)."""
        direction = direction or self.direction
        if direction is Direction.UP:
            return self._config.max_cylinder
        return self._config.min_cylinder

    def intercept(self, target: int, direction: Direction | None = None) -> Intercept | None:
        """Return the pending request that would stop a move to *target*."""
        return find_intercept(
            self._requests,
            self.pending,
            head=self.head,
            target=target,
            now=self.time,
            time_per_cylinder=self._config.time_per_cylinder,
            direction=direction or self.direction,
        )

    def reverse(self, reason: str) -> None:
        """Flip the sweep direction."""
        self.direction = self.direction.reversed()
        self.log(LogLevel.DEBUG, f"{reason}; now sweeping {self.direction}")

    # -- Head movement -------------------------------------------------------------

    def service(self, index: int, *, intercepted: bool = False) -> Step:
        """Move to request *index*, service it, and drop it from its queue.

        Intercepted requests are still pending when serviced; every
        other request comes from the active queue.
        """
        request = self._requests[index]
        if intercepted:
            self.pending.remove(index)
            self.log(
                LogLevel.INFO,
                f"Request {request.order} ({request.position}) intercepted the head",
            )
        else:
            self.active.remove(index)
        return self._move(request.position, StepKind.SERVICE, request, intercepted=intercepted)

    def pivot(self, target: int) -> Step:
        """Run out to boundary cylinder *target* without servicing."""
        step = self._move(target, StepKind.PIVOT)
        self.log(LogLevel.DEBUG, f"Reached boundary {target}")
        return step

    def jump(self, target: int) -> Step:
        """Relocate the head to *target* without servicing (circular policies)."""
        start = self.head
        step = self._move(target, StepKind.JUMP)
        self.log(LogLevel.DEBUG, f"Jumped from {start} to {target}")
        return step

    def _move(
        self,
        target: int,
        kind: StepKind,
        request: DiskRequest | None = None,
        *,
        intercepted: bool = False,
    ) -> Step:
        distance = abs(target - self.head)
        duration = distance * self._config.time_per_cylinder
        if kind is StepKind.SERVICE:
            duration += self._config.time_per_request
        step = Step(
            start=self.head,
            end=target,
            distance=distance,
            departure=self.time,
            duration=duration,
            kind=kind,
            request=request,
            intercepted=intercepted,
        )
        self._recorder.record(step)
        self.head = target
        self.time = step.arrival
        return step

    # -- Completion ------------------------------------------------------------------

    def result(self) -> SimulationResult:
        """Summarise the run into an immutable result."""
        return self._recorder.build(
            policy=self._config.policy,
            initial_position=self._config.initial_position,
            direction=self._config.direction,
            final_direction=self.direction,
            log=self._logger.entries,
        )
