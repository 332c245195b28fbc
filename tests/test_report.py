"""Tests for the plain-text reports."""

from py_disksim.config import Policy, SimulationConfig
from py_disksim.engine import simulate, simulate_all
from py_disksim.report import (
    format_comparison,
    format_log,
    format_result,
    format_steps,
    step_rows,
)
from py_disksim.logging import LogLevel
from py_disksim.requests import DiskRequest

_CYLINDERS = [82, 170, 43, 140, 24, 16, 190]


class TestStepRows:
    """Verify the tabulated trace."""

    def test_first_row_is_the_start(self) -> None:
        """Row 0 shows the initial head position only."""
        config = SimulationConfig(policy=Policy.SCAN, initial_position=50)
        rows = step_rows(simulate(config, DiskRequest.batch(_CYLINDERS)))
        assert rows[0].number == 0
        assert rows[0].start is None
        assert rows[0].end == 50  # noqa: PLR2004
        assert rows[0].arrow == "start"

    def test_running_total(self) -> None:
        """The last row's total is the total head movement."""
        config = SimulationConfig(policy=Policy.SCAN, initial_position=50)
        result = simulate(config, DiskRequest.batch(_CYLINDERS))
        rows = step_rows(result)
        assert len(rows) == len(result.trace) + 1
        assert rows[-1].accumulated == result.total_movement

    def test_arrows(self) -> None:
        """Arrows follow the movement; pivots are labelled."""
        config = SimulationConfig(policy=Policy.SCAN, initial_position=50)
        rows = step_rows(simulate(config, DiskRequest.batch(_CYLINDERS)))
        arrows = [row.arrow for row in rows[1:]]
        assert arrows == ["↑", "↑", "↑", "↑", "↑ pivot", "↓", "↓", "↓"]

    def test_zero_distance_has_no_arrow(self) -> None:
        """Servicing the head's own cylinder shows a dash."""
        config = SimulationConfig(policy=Policy.FCFS, initial_position=50)
        rows = step_rows(simulate(config, DiskRequest.batch([50])))
        assert rows[1].arrow == "-"


class TestFormatting:
    """Verify the text blocks."""

    def test_result_summary(self) -> None:
        """The summary shows the policy, order and totals."""
        config = SimulationConfig(policy=Policy.SCAN, initial_position=50)
        text = format_result(simulate(config, DiskRequest.batch(_CYLINDERS)), config)
        assert "=== SCAN ===" in text
        assert "Direction: up (↑)" in text
        assert "Processing order: 82 -> 140 -> 170 -> 190 -> 43 -> 24 -> 16" in text
        assert "Total head movement: 332 cylinders" in text

    def test_direction_hidden_for_fcfs(self) -> None:
        """FCFS ignores direction, so the report omits it."""
        config = SimulationConfig(policy=Policy.FCFS, initial_position=50)
        text = format_result(simulate(config, DiskRequest.batch([60])), config)
        assert "Direction" not in text

    def test_batch_size_shown_for_n_step(self) -> None:
        """The N of an N-step policy is reported."""
        config = SimulationConfig(policy=Policy.LOOK_N, initial_position=50, batch_size=3)
        text = format_result(simulate(config, DiskRequest.batch(_CYLINDERS)), config)
        assert "Batch size: 3" in text

    def test_empty_order(self) -> None:
        """An empty workload prints a placeholder order."""
        config = SimulationConfig(policy=Policy.LOOK, initial_position=50)
        text = format_result(simulate(config, []), config)
        assert "Processing order: (none)" in text
        assert "Total head movement: 0 cylinders" in text

    def test_step_table(self) -> None:
        """The table has a header, a rule and one line per row."""
        config = SimulationConfig(policy=Policy.SCAN, initial_position=50)
        result = simulate(config, DiskRequest.batch(_CYLINDERS))
        lines = format_steps(result).splitlines()
        assert "From" in lines[0]
        assert set(lines[1]) == {"-"}
        assert len(lines) == len(result.trace) + 3
        assert "pivot" in lines[7]

    def test_log(self) -> None:
        """The log is printed one entry per line."""
        config = SimulationConfig(policy=Policy.LOOK, initial_position=50)
        result = simulate(config, DiskRequest.batch([60, 40]))
        lines = format_log(result).splitlines()
        assert len(lines) == len(result.log)
        assert lines[0].startswith("[INFO] t=0.00 LOOK:")

    def test_log_hides_entries_below_level(self) -> None:
        """Raising the level drops the DEBUG reversal entry."""
        config = SimulationConfig(policy=Policy.LOOK, initial_position=50)
        result = simulate(config, DiskRequest.batch([60, 40]))
        text = format_log(result, min_level=LogLevel.INFO)
        assert "now sweeping down" not in text
        assert "now sweeping down" in format_log(result)
        assert all(line.startswith("[INFO]") for line in text.splitlines())

    def test_comparison_is_ranked(self) -> None:
        """Policies are listed from least to most movement."""
        config = SimulationConfig(policy=Policy.FCFS, initial_position=50)
        results = simulate_all(
            config, DiskRequest.batch(_CYLINDERS), [Policy.FCFS, Policy.SSTF, Policy.SCAN]
        )
        lines = format_comparison(results).splitlines()
        assert lines[0].startswith("Policy")
        assert [line.split()[0] for line in lines[1:]] == ["SSTF", "SCAN", "FCFS"]
