"""Tests for disk geometry and access-time estimates.

The default geometry has 10 sectors of 512 bytes per track, two faces
and 1 KiB blocks: 5 blocks per track, 10 per cylinder, 2 sectors per
block.
"""

import pytest

from py_disksim.geometry import (
    AccessTime,
    DiskGeometry,
    GeometryError,
    TimingSpecs,
    estimate_access_time,
)
from py_disksim.requests import DiskRequest


class TestDiskGeometry:
    """Verify the block-to-cylinder arithmetic."""

    def test_derived_sizes(self) -> None:
        """Track, block and cylinder capacities follow from the layout."""
        geometry = DiskGeometry()
        expected_bytes = 5120
        expected_per_track = 5.0
        expected_per_cylinder = 10.0
        expected_span = 2
        assert geometry.bytes_per_track == expected_bytes
        assert geometry.blocks_per_track == expected_per_track
        assert geometry.blocks_per_cylinder == expected_per_cylinder
        assert geometry.sectors_per_block == expected_span

    def test_block_to_cylinder(self) -> None:
        """Blocks fill a cylinder before moving to the next."""
        geometry = DiskGeometry()
        assert geometry.block_to_cylinder(0) == 0
        assert geometry.block_to_cylinder(9) == 0
        assert geometry.block_to_cylinder(10) == 1
        assert geometry.block_to_cylinder(25) == 2  # noqa: PLR2004

    def test_blocks_to_cylinders(self) -> None:
        """A block workload maps to a cylinder workload, keeping order and arrival."""
        blocks = [
            DiskRequest(position=0, order=1),
            DiskRequest(position=15, order=2, arrival_time=4.0),
            DiskRequest(position=99, order=3),
        ]
        mapped = DiskGeometry().blocks_to_cylinders(blocks)
        assert [r.position for r in mapped] == [0, 1, 9]
        assert [r.order for r in mapped] == [1, 2, 3]
        assert mapped[1].arrival_time == 4.0  # noqa: PLR2004

    def test_negative_block_in_workload(self) -> None:
        """Mapping rejects a negative block number."""
        with pytest.raises(GeometryError, match="negative"):
            DiskGeometry().blocks_to_cylinders([DiskRequest(position=-3, order=1)])

    def test_odd_sector_span_rounds_up(self) -> None:
        """A block that does not fill whole sectors still spans a full one."""
        geometry = DiskGeometry(sector_size=512, block_size=1500)
        expected = 3
        assert geometry.sectors_per_block == expected

    def test_negative_block(self) -> None:
        """Block numbers start at 0."""
        with pytest.raises(GeometryError, match="negative"):
            DiskGeometry().block_to_cylinder(-1)

    @pytest.mark.parametrize(
        "field", ["sectors_per_track", "cylinders", "faces", "sector_size", "block_size"]
    )
    def test_dimensions_must_be_positive(self, field: str) -> None:
        """Every dimension must be positive."""
        with pytest.raises(GeometryError, match=field):
            DiskGeometry(**{field: 0})  # type: ignore[arg-type]


class TestTiming:
    """Verify rotation arithmetic."""

    def test_rotation(self) -> None:
        """At 6000 rpm one rotation takes 10 ms; latency is half that."""
        timing = TimingSpecs(rpm=6000)
        expected_rotation = 10.0
        expected_latency = 5.0
        assert timing.rotation_time_ms == expected_rotation
        assert timing.average_latency_ms == expected_latency

    def test_rpm_must_be_positive(self) -> None:
        """A stopped disk has no rotation time."""
        with pytest.raises(GeometryError, match="rpm"):
            TimingSpecs(rpm=0)


class TestAccessTime:
    """Verify access-time estimates."""

    def test_estimate(self) -> None:
        """100 cylinders and 4 requests at 6000 rpm."""
        estimate = estimate_access_time(100, 4, TimingSpecs(rpm=6000))
        assert estimate == AccessTime(seek_ms=100.0, latency_ms=20.0, transfer_ms=8.0)
        expected_total = 128.0
        assert estimate.total_ms == expected_total

    def test_geometry_sets_track_length(self) -> None:
        """Longer tracks make each block a smaller slice of a rotation."""
        estimate = estimate_access_time(
            100, 4, TimingSpecs(rpm=6000), DiskGeometry(sectors_per_track=20)
        )
        expected_transfer = 4.0
        assert estimate.transfer_ms == expected_transfer

    def test_str(self) -> None:
        """Every component is printed."""
        text = str(AccessTime(seek_ms=1.0, latency_ms=2.0, transfer_ms=3.0))
        assert text == "Seek: 1.00ms, Latency: 2.00ms, Transfer: 3.00ms, Total: 6.00ms"

    def test_needs_a_request(self) -> None:
        """An estimate for zero requests is meaningless."""
        with pytest.raises(GeometryError, match="request"):
            estimate_access_time(10, 0, TimingSpecs())

    def test_negative_movement(self) -> None:
        """Head movement cannot be negative."""
        with pytest.raises(GeometryError, match="negative"):
            estimate_access_time(-1, 1, TimingSpecs())
