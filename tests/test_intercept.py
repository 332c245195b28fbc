"""Tests for the interception helper.

A pending request intercepts the head when it lies strictly between
the head and its planned target, on the side the head is travelling
towards, and has arrived by the time the head passes over it.
"""

from py_disksim.intercept import find_intercept
from py_disksim.requests import Direction, DiskRequest

_HEAD = 50
_TARGET = 100


def _intercept(
    requests: list[DiskRequest],
    *,
    head: int = _HEAD,
    target: int = _TARGET,
    now: float = 0.0,
    direction: Direction = Direction.UP,
) -> DiskRequest | None:
    """Run the helper with every request pending, one time unit per cylinder."""
    found = find_intercept(
        requests,
        range(len(requests)),
        head=head,
        target=target,
        now=now,
        time_per_cylinder=1.0,
        direction=direction,
    )
    return found.request if found is not None else None


class TestInterception:
    """Verify which pending request, if any, stops the head."""

    def test_request_in_path_intercepts(self) -> None:
        """Arriving at t=15, the head passes 70 at t=20: intercept."""
        request = DiskRequest(position=70, order=1, arrival_time=15.0)
        assert _intercept([request]) == request

    def test_reports_when_head_reaches_request(self) -> None:
        """The result carries the instant the head reaches the cylinder."""
        requests = [DiskRequest(position=70, order=1, arrival_time=10.0)]
        found = find_intercept(
            requests,
            [0],
            head=_HEAD,
            target=_TARGET,
            now=2.0,
            time_per_cylinder=0.5,
            direction=Direction.UP,
        )
        assert found is not None
        assert found.index == 0
        expected = 12.0
        assert found.reached_at == expected

    def test_arriving_exactly_when_head_passes(self) -> None:
        """Arrival equal to the pass time still counts."""
        request = DiskRequest(position=70, order=1, arrival_time=20.0)
        assert _intercept([request]) == request

    def test_arriving_too_late(self) -> None:
        """Arriving after the head has passed does not intercept."""
        request = DiskRequest(position=70, order=1, arrival_time=25.0)
        assert _intercept([request]) is None

    def test_target_cylinder_is_not_in_path(self) -> None:
        """The path is strictly between head and target."""
        at_target = DiskRequest(position=_TARGET, order=1, arrival_time=1.0)
        at_head = DiskRequest(position=_HEAD, order=2, arrival_time=0.0)
        assert _intercept([at_target, at_head]) is None

    def test_behind_the_head_is_ignored(self) -> None:
        """Requests on the other side of the head never intercept."""
        request = DiskRequest(position=30, order=1, arrival_time=0.0)
        assert _intercept([request]) is None

    def test_nearest_candidate_wins(self) -> None:
        """Among qualifying requests the one closest to the head wins."""
        far = DiskRequest(position=90, order=1, arrival_time=0.0)
        near = DiskRequest(position=60, order=2, arrival_time=5.0)
        assert _intercept([far, near]) == near

    def test_nearer_but_late_candidate_loses(self) -> None:
        """A nearer request that is not yet there yields to a farther one."""
        near_late = DiskRequest(position=60, order=1, arrival_time=30.0)
        far = DiskRequest(position=90, order=2, arrival_time=0.0)
        assert _intercept([near_late, far]) == far

    def test_tie_broken_by_input_order(self) -> None:
        """Two requests for the same cylinder resolve by order."""
        second = DiskRequest(position=70, order=2, arrival_time=1.0)
        first = DiskRequest(position=70, order=1, arrival_time=2.0)
        assert _intercept([second, first]) == first

    def test_moving_down(self) -> None:
        """Interception works in the downward direction too."""
        request = DiskRequest(position=30, order=1, arrival_time=10.0)
        found = _intercept([request], head=50, target=10, direction=Direction.DOWN)
        assert found == request

    def test_no_pending_requests(self) -> None:
        """Nothing pending means nothing intercepts."""
        assert _intercept([]) is None
