"""Plain-text reports of a simulation result.

These helpers are pure: they take a result and return strings (or
rows), leaving it to the caller to print them, send them over HTTP or
show them in a table widget.
"""

from collections.abc import Mapping
from dataclasses import dataclass

from py_disksim.config import Policy, SimulationConfig
from py_disksim.logging import LogLevel
from py_disksim.requests import Direction
from py_disksim.trace import SimulationResult

_ARROWS = {Direction.UP: "↑", Direction.DOWN: "↓"}


@dataclass(frozen=True)
class StepRow:
    """One row of the step table.

    Row 0 is the starting position; ``start`` is ``None`` there.
    """

    number: int
    start: int | None
    end: int
    distance: int
    accumulated: int
    arrow: str
    departure: float


def step_rows(result: SimulationResult) -> list[StepRow]:
    """Tabulate the trace with a running total of head movement."""
    rows = [StepRow(0, None, result.initial_position, 0, 0, "start", 0.0)]
    accumulated = 0
    for number, step in enumerate(result.trace, start=1):
        accumulated += step.distance
        arrow = _ARROWS[step.direction] if step.distance else "-"
        if not step.servicing:
            arrow = f"{arrow} {step.kind}"
        rows.append(
            StepRow(
                number=number,
                start=step.start,
                end=step.end,
                distance=step.distance,
                accumulated=accumulated,
                arrow=arrow,
                departure=step.departure,
            )
        )
    return rows


def format_steps(result: SimulationResult) -> str:
    """Render the step table as aligned text."""
    header = f"{'#':>3}  {'From':>5}  {'To':>5}  {'Dist':>5}  {'Total':>6}  {'T':>8}  Dir"
    lines = [header, "-" * len(header)]
    for row in step_rows(result):
        start = "-" if row.start is None else str(row.start)
        lines.append(
            f"{row.number:>3}  {start:>5}  {row.end:>5}  {row.distance:>5}  "
            f"{row.accumulated:>6}  {row.departure:>8.2f}  {row.arrow}"
        )
    return "\n".join(lines)


def format_result(result: SimulationResult, config: SimulationConfig) -> str:
    """Render the summary block for one run."""
    order = " -> ".join(str(c) for c in result.processing_order) or "(none)"
    lines = [
        f"=== {result.policy} ===",
        f"Initial position: {result.initial_position}",
        f"Bounds: {config.min_cylinder}-{config.max_cylinder}",
    ]
    if result.policy.direction_aware:
        lines.append(f"Direction: {result.direction} ({_ARROWS[result.direction]})")
    if config.batch_size is not None and result.policy.batched:
        lines.append(f"Batch size: {config.batch_size}")
    lines += [
        f"Processing order: {order}",
        f"Total head movement: {result.total_movement} cylinders",
        f"Average seek: {result.average_seek:.2f} cylinders/request",
        f"Elapsed time: {result.elapsed_time:.2f}",
    ]
    return "\n".join(lines)


def format_log(result: SimulationResult, *, min_level: LogLevel = LogLevel.DEBUG) -> str:
    """Render the run's log entries at or above *min_level*, one per line."""
    return "\n".join(str(entry) for entry in result.log if entry.level >= min_level)


def format_comparison(results: Mapping[Policy, SimulationResult]) -> str:
    """Render one line per policy, sorted by total movement."""
    ranked = sorted(results.values(), key=lambda r: (r.total_movement, r.elapsed_time))
    lines = [f"{'Policy':<8}  {'Movement':>8}  {'Avg seek':>8}  {'Time':>8}"]
    lines += [
        f"{r.policy.value:<8}  {r.total_movement:>8}  {r.average_seek:>8.2f}  {r.elapsed_time:>8.2f}"
        for r in ranked
    ]
    return "\n".join(lines)
