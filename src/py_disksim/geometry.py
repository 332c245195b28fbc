"""Disk geometry and access-time estimates.

Exercises rarely hand you cylinder numbers directly.  More often they
give a **block number** and the disk's geometry, and you must work out
which cylinder the block lives on.  Once a policy has produced its
total head movement, the same geometry (plus the spindle speed) turns
that movement into an estimated **access time**:

    access time = seek time + rotational latency + transfer time

- **Seek** — cylinders crossed × time per cylinder.
- **Latency** — on average half a rotation per request.
- **Transfer** — the fraction of a track a block occupies × one
  rotation, per request.

Geometry uses the classic layout: sectors fill a track, and the
tracks on every face fill a cylinder.  Blocks and cylinders are
numbered from 0.
"""

import dataclasses
import math
from collections.abc import Iterable
from dataclasses import dataclass

from py_disksim.requests import DiskRequest, SimulationError

_MS_PER_MINUTE = 60_000.0
_DEFAULT_SECTORS_PER_TRACK = 10


class GeometryError(SimulationError):
    """Raise when a geometry or timing parameter is unusable."""


@dataclass(frozen=True)
class DiskGeometry:
    """Physical layout of a disk.

    Attributes:
        sectors_per_track: Sectors on one track.
        cylinders: Number of cylinders.
        faces: Recording surfaces (heads).
        sector_size: Bytes per sector.
        block_size: Bytes per file-system block.

    """

    sectors_per_track: int = 10
    cylinders: int = 100
    faces: int = 2
    sector_size: int = 512
    block_size: int = 1024

    def __post_init__(self) -> None:
        """Reject non-positive dimensions."""
        for name in ("sectors_per_track", "cylinders", "faces", "sector_size", "block_size"):
            value = getattr(self, name)
            if value <= 0:
                msg = f"{name} must be positive (got {value})"
                raise GeometryError(msg)

    @property
    def bytes_per_track(self) -> int:
        """Return the capacity of one track in bytes."""
        return self.sectors_per_track * self.sector_size

    @property
    def blocks_per_track(self) -> float:
        """Return how many blocks fit on one track."""
        return self.bytes_per_track / self.block_size

    @property
    def blocks_per_cylinder(self) -> float:
        """Return how many blocks fit on one cylinder (all faces)."""
        return self.blocks_per_track * self.faces

    @property
    def sectors_per_block(self) -> int:
        """Return the sectors one block spans (rounded up)."""
        return math.ceil(self.block_size / self.sector_size)

    def block_to_cylinder(self, block: int) -> int:
        """Return the cylinder holding *block*.

        Raises:
            GeometryError: If *block* is negative.

        """
        _check_block(block)
        return math.floor(block / self.blocks_per_cylinder)

    def blocks_to_cylinders(self, requests: Iterable[DiskRequest]) -> list[DiskRequest]:
        """Return *requests* with each block number replaced by its cylinder.

        Order and arrival time are kept, so a block workload can be
        simulated like a cylinder one.

        Raises:
            GeometryError: If a block number is negative.

        """
        return [
            dataclasses.replace(request, position=self.block_to_cylinder(request.position))
            for request in requests
        ]


def _check_block(block: int) -> None:
    if block < 0:
        msg = f"Block number must not be negative (got {block})"
        raise GeometryError(msg)


@dataclass(frozen=True)
class TimingSpecs:
    """Mechanical timing of a disk.

    Attributes:
        seek_time_per_cylinder: Milliseconds to cross one cylinder.
        rpm: Spindle speed in revolutions per minute.
        sectors_per_block: Sectors read per request.

    """

    seek_time_per_cylinder: float = 1.0
    rpm: int = 7200
    sectors_per_block: int = 2

    def __post_init__(self) -> None:
        """Reject impossible timings."""
        if self.rpm <= 0:
            msg = f"rpm must be positive (got {self.rpm})"
            raise GeometryError(msg)
        if self.seek_time_per_cylinder < 0:
            msg = f"Seek time must not be negative (got {self.seek_time_per_cylinder})"
            raise GeometryError(msg)

    @property
    def rotation_time_ms(self) -> float:
        """Return the time of one full rotation in milliseconds."""
        return _MS_PER_MINUTE / self.rpm

    @property
    def average_latency_ms(self) -> float:
        """Return the average rotational latency (half a rotation)."""
        return self.rotation_time_ms / 2


@dataclass(frozen=True)
class AccessTime:
    """Estimated access time broken into its components (milliseconds)."""

    seek_ms: float
    latency_ms: float
    transfer_ms: float

    @property
    def total_ms(self) -> float:
        """Return seek + latency + transfer."""
        return self.seek_ms + self.latency_ms + self.transfer_ms

    def __str__(self) -> str:
        """Format every component on one line."""
        return (
            f"Seek: {self.seek_ms:.2f}ms, Latency: {self.latency_ms:.2f}ms, "
            f"Transfer: {self.transfer_ms:.2f}ms, Total: {self.total_ms:.2f}ms"
        )


def estimate_access_time(
    total_cylinders: int,
    requests: int,
    timing: TimingSpecs,
    geometry: DiskGeometry | None = None,
) -> AccessTime:
    """Turn a policy's head movement into an access-time estimate.

    Args:
        total_cylinders: Total head movement of the run.
        requests: Number of serviced requests.
        timing: Seek time, spindle speed and block span.
        geometry: Disk layout; without it a track is assumed to hold
            10 sectors.

    Returns:
        The seek, latency and transfer components.

    Raises:
        GeometryError: If the movement is negative or no request was
            serviced.

    """
    if total_cylinders < 0:
        msg = f"Head movement must not be negative (got {total_cylinders})"
        raise GeometryError(msg)
    if requests <= 0:
        msg = f"At least one request is needed (got {requests})"
        raise GeometryError(msg)

    sectors_per_track = (
        geometry.sectors_per_track if geometry is not None else _DEFAULT_SECTORS_PER_TRACK
    )
    per_block = timing.sectors_per_block / sectors_per_track * timing.rotation_time_ms
    return AccessTime(
        seek_ms=total_cylinders * timing.seek_time_per_cylinder,
        latency_ms=timing.average_latency_ms * requests,
        transfer_ms=per_block * requests,
    )
