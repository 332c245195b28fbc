"""Interception — letting a newly arrived request flag down a moving head.

A seek is not instantaneous.  While the head travels from cylinder A
to cylinder B, new requests keep arriving.  If one of them sits
*between* A and B and has arrived by the time the head passes over it,
a real controller would simply stop there on the way.  That request
**intercepts** the head: it is serviced now, and the original target
waits for the next step.

Example (one time unit per cylinder): the head leaves cylinder 50 at
t=0 heading for 100.  A request for cylinder 70 arrives at t=15.  The
head passes 70 at t=20, after the request arrived, so the head stops
at 70 first.

Rules:
    - Only **pending** requests (not yet admitted) are candidates.
    - A candidate must lie *strictly* between the head and the target,
      on the side the head is travelling towards.
    - It must have arrived no later than the instant the head reaches
      its cylinder.
    - The nearest qualifying candidate wins; ties go to input order.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from py_disksim.requests import Direction, DiskRequest


@dataclass(frozen=True)
class Intercept:
    """A pending request that stops the head on its way to a target.

    Attributes:
        index: The request's index in the run's request arena.
        request: The intercepting request.
        reached_at: Simulated time the head reaches its cylinder.

    """

    index: int
    request: DiskRequest
    reached_at: float


def find_intercept(
    requests: Sequence[DiskRequest],
    pending: Iterable[int],
    *,
    head: int,
    target: int,
    now: float,
    time_per_cylinder: float,
    direction: Direction,
) -> Intercept | None:
    """Return the pending request that would intercept a planned move.

    Args:
        requests: The run's request arena.
        pending: Indices (into *requests*) of not-yet-admitted requests.
        head: Cylinder the head departs from.
        target: Cylinder the head is planning to reach.
        now: Simulated departure time.
        time_per_cylinder: Time to cross one cylinder.
        direction: Direction of travel.

    Returns:
        The winning interception, or None if the planned target stands.

    """
    best: Intercept | None = None
    best_key: tuple[int, int] | None = None
    for index in pending:
        request = requests[index]
        if direction is Direction.UP:
            in_path = head < request.position < target
        else:
            in_path = target < request.position < head
        if not in_path:
            continue
        distance = abs(request.position - head)
        reached_at = now + distance * time_per_cylinder
        if request.arrival_time > reached_at:
            continue
        key = (distance, request.order)
        if best_key is None or key < best_key:
            best = Intercept(index=index, request=request, reached_at=reached_at)
            best_key = key
    return best
