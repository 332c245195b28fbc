"""Simulation configuration — which policy to run and on what disk.

Every parameter an engine needs is an explicit field of
``SimulationConfig``.  Engines never fall back to hidden defaults:
if a batched policy is selected, the caller must say how big a batch
is.

Validation happens **eagerly**, before any engine runs.  A request
outside the disk or a nonsensical bound is a caller mistake and is
rejected with a descriptive error instead of being clamped.  Normal
scheduling outcomes (no request ahead, nothing arrived yet) are never
errors.

Error taxonomy:
    - ``InvalidRequestError`` — a request (or the initial head position)
      lies outside ``[min_cylinder, max_cylinder]``, or has an arrival
      time that is negative or not finite.
    - ``DegenerateBoundsError`` — ``max_cylinder <= min_cylinder``.
    - ``ConfigurationError`` — negative or non-finite timings, or a
      batched policy without a positive batch size.
"""

import dataclasses
import math
from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum

from py_disksim.requests import Direction, DiskRequest, InvalidRequestError, SimulationError


class DegenerateBoundsError(SimulationError):
    """Raise when the disk has no room for a sweep (max <= min)."""


class ConfigurationError(SimulationError):
    """Raise when a timing or batching parameter is unusable."""


_DESCRIPTIONS: dict[str, str] = {
    "FCFS": "First Come First Served: service requests in arrival order.",
    "SSTF": "Shortest Seek Time First: always service the nearest request.",
    "SCAN": "Elevator: sweep to the disk edge, then reverse.",
    "C-SCAN": "Circular SCAN: sweep one way, jump back to the opposite edge.",
    "LOOK": "Like SCAN, but reverse at the last request instead of the edge.",
    "C-LOOK": "Like C-SCAN, but jump to the farthest pending request, not the edge.",
    "F-SCAN": "Freeze the arrived requests into a batch and SCAN it.",
    "F-LOOK": "Freeze the arrived requests into a batch and LOOK through it.",
    "SCAN-N": "N-step SCAN: SCAN over batches of at most N requests.",
    "LOOK-N": "N-step LOOK: LOOK over batches of at most N requests.",
}


class Policy(StrEnum):
    """The closed set of supported scheduling policies.

    Values are the display names used in reports and on the wire.
    """

    FCFS = "FCFS"
    SSTF = "SSTF"
    SCAN = "SCAN"
    C_SCAN = "C-SCAN"
    LOOK = "LOOK"
    C_LOOK = "C-LOOK"
    F_SCAN = "F-SCAN"
    F_LOOK = "F-LOOK"
    SCAN_N = "SCAN-N"
    LOOK_N = "LOOK-N"

    @property
    def direction_aware(self) -> bool:
        """Return True if the initial sweep direction affects this policy."""
        return self not in {Policy.FCFS, Policy.SSTF}

    @property
    def batched(self) -> bool:
        """Return True if this policy needs a ``batch_size``."""
        return self in {Policy.SCAN_N, Policy.LOOK_N}

    @property
    def description(self) -> str:
        """Return a one-line description of the policy."""
        return _DESCRIPTIONS[self.value]

    @classmethod
    def parse(cls, text: str) -> "Policy":
        """Look up a policy by name, ignoring case, dashes and underscores.

        ``"cscan"``, ``"C-SCAN"`` and ``"c_scan"`` all name C-SCAN.

        Raises:
            ConfigurationError: If no policy has that name.

        """
        key = _normalise(text)
        for policy in cls:
            if _normalise(policy.value) == key:
                return policy
        names = ", ".join(p.value for p in cls)
        msg = f"Unknown policy '{text}'. Use one of: {names}"
        raise ConfigurationError(msg)


def _normalise(name: str) -> str:
    return name.strip().upper().replace("-", "").replace("_", "")


@dataclass(frozen=True)
class SimulationConfig:
    """Everything a policy engine needs besides the requests.

    Attributes:
        policy: The scheduling policy to run.
        initial_position: Cylinder the head starts on.
        min_cylinder: Lowest addressable cylinder.
        max_cylinder: Highest addressable cylinder.
        direction: Initial sweep direction (ignored by FCFS and SSTF).
        time_per_cylinder: Simulated time to cross one cylinder.
        time_per_request: Simulated time to service one request.
        batch_size: Batch size N for SCAN-N and LOOK-N.

    """

    policy: Policy
    initial_position: int
    min_cylinder: int = 0
    max_cylinder: int = 199
    direction: Direction = Direction.UP
    time_per_cylinder: float = 1.0
    time_per_request: float = 0.0
    batch_size: int | None = None

    def with_policy(self, policy: Policy) -> "SimulationConfig":
        """Return a copy of this configuration running *policy*."""
        return dataclasses.replace(self, policy=policy)

    def validate(self, requests: Sequence[DiskRequest] = ()) -> None:
        """Reject a configuration (and workload) the engines cannot run.

        Args:
            requests: The workload that will be simulated.

        Raises:
            DegenerateBoundsError: If ``max_cylinder <= min_cylinder``.
            InvalidRequestError: If the head or a request is off the disk,
                or a request arrival time is negative or not finite.
            ConfigurationError: If a timing is negative or not finite, or a
                batched policy lacks a positive batch size.

        """
        if self.max_cylinder <= self.min_cylinder:
            msg = (
                f"Degenerate bounds: max cylinder ({self.max_cylinder}) must be greater"
                f" than min cylinder ({self.min_cylinder})"
            )
            raise DegenerateBoundsError(msg)

        if not self.min_cylinder <= self.initial_position <= self.max_cylinder:
            msg = (
                f"Initial position {self.initial_position} is outside the disk"
                f" ({self.min_cylinder}-{self.max_cylinder})"
            )
            raise InvalidRequestError(msg)

        timings = (self.time_per_cylinder, self.time_per_request)
        if any(not math.isfinite(t) or t < 0 for t in timings):
            msg = (
                "Timings must be finite and not negative"
                f" (time_per_cylinder={self.time_per_cylinder},"
                f" time_per_request={self.time_per_request})"
            )
            raise ConfigurationError(msg)

        if self.policy.batched and (self.batch_size is None or self.batch_size < 1):
            msg = f"{self.policy} needs a batch size of at least 1 (got {self.batch_size})"
            raise ConfigurationError(msg)

        for request in requests:
            if not self.min_cylinder <= request.position <= self.max_cylinder:
                msg = (
                    f"Request {request.order} to cylinder {request.position} is outside"
                    f" the disk ({self.min_cylinder}-{self.max_cylinder})"
                )
                raise InvalidRequestError(msg)
            if not math.isfinite(request.arrival_time) or request.arrival_time < 0:
                msg = (
                    f"Request {request.order} has an invalid arrival time"
                    f" ({request.arrival_time})"
                )
                raise InvalidRequestError(msg)
