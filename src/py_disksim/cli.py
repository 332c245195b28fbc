"""Command-line entry point (``py-disksim``).

Examples::

    py-disksim SCAN "82 170 43 140 24 16 190" --head 50 --direction up
    py-disksim SSTF "98:0 183:5 37:5" --head 53 --steps --log
    py-disksim LOOK-N "10 90 40 60" --head 50 --batch-size 2
    py-disksim all "82 170 43 140" --head 50 --batch-size 3
    py-disksim C-LOOK "98 183 37 122" --head 53 --rpm 7200
    py-disksim FCFS "120 15 260" --head 0 --max 99 --blocks --sectors-per-track 20

The output is the same text report ``py_disksim.report`` produces.
Invalid input is reported on stderr with exit status 2.
"""

import argparse
import sys

from py_disksim.config import Policy, SimulationConfig
from py_disksim.engine import simulate, simulate_all
from py_disksim.geometry import DiskGeometry, TimingSpecs, estimate_access_time
from py_disksim.logging import LogLevel
from py_disksim.report import format_comparison, format_log, format_result, format_steps
from py_disksim.requests import Direction, SimulationError, parse_requests

_EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="py-disksim",
        description="Simulate disk-head scheduling policies.",
    )
    parser.add_argument("policy", help="policy name (e.g. SCAN, c-look) or 'all' to compare")
    parser.add_argument("requests", help="cylinders, optionally CYL:ARRIVAL, e.g. '98 183:2'")
    parser.add_argument("--head", type=int, required=True, help="initial head cylinder")
    parser.add_argument("--min", dest="min_cylinder", type=int, default=0)
    parser.add_argument("--max", dest="max_cylinder", type=int, default=199)
    parser.add_argument(
        "--direction", choices=[d.value for d in Direction], default=Direction.UP.value
    )
    parser.add_argument("--time-per-cylinder", type=float, default=1.0)
    parser.add_argument("--time-per-request", type=float, default=0.0)
    parser.add_argument("--batch-size", type=int, default=None, help="N for SCAN-N/LOOK-N")
    parser.add_argument("--rpm", type=int, default=None, help="estimate access time at this rpm")
    parser.add_argument("--steps", action="store_true", help="print the step table")
    parser.add_argument("--log", action="store_true", help="print the event log")
    parser.add_argument(
        "--verbose", action="store_true", help="include DEBUG entries in the event log"
    )

    geometry = parser.add_argument_group("geometry")
    geometry.add_argument(
        "--blocks", action="store_true", help="treat requests as block numbers, not cylinders"
    )
    geometry.add_argument("--sectors-per-track", type=int, default=10)
    geometry.add_argument("--faces", type=int, default=2)
    geometry.add_argument("--sector-size", type=int, default=512)
    geometry.add_argument("--block-size", type=int, default=1024)
    return parser


def run(argv: list[str] | None = None) -> str:
    """Parse *argv*, simulate, and return the report text.

    Raises:
        SimulationError: If the policy name, requests or parameters are
            invalid.

    """
    args = build_parser().parse_args(argv)
    compare = args.policy.lower() == "all"
    config = SimulationConfig(
        policy=Policy.FCFS if compare else Policy.parse(args.policy),
        initial_position=args.head,
        min_cylinder=args.min_cylinder,
        max_cylinder=args.max_cylinder,
        direction=Direction(args.direction),
        time_per_cylinder=args.time_per_cylinder,
        time_per_request=args.time_per_request,
        batch_size=args.batch_size,
    )
    geometry = DiskGeometry(
        sectors_per_track=args.sectors_per_track,
        faces=args.faces,
        sector_size=args.sector_size,
        block_size=args.block_size,
    )
    requests = parse_requests(args.requests)
    if args.blocks:
        requests = geometry.blocks_to_cylinders(requests)

    if compare:
        policies = [p for p in Policy if not p.batched or args.batch_size is not None]
        return format_comparison(simulate_all(config, requests, policies))

    result = simulate(config, requests)
    sections = [format_result(result, config)]
    if args.rpm is not None and result.serviced:
        timing = TimingSpecs(
            seek_time_per_cylinder=args.time_per_cylinder,
            rpm=args.rpm,
            sectors_per_block=geometry.sectors_per_block,
        )
        estimate = estimate_access_time(
            result.total_movement, result.serviced, timing, geometry
        )
        sections[0] += f"\nAccess time: {estimate}"
    if args.steps:
        sections.append(format_steps(result))
    if args.log:
        min_level = LogLevel.DEBUG if args.verbose else LogLevel.INFO
        sections.append(format_log(result, min_level=min_level))
    return "\n\n".join(sections)


def main(argv: list[str] | None = None) -> int:
    """Console entry point; return the process exit status."""
    try:
        output = run(argv)
    except SimulationError as e:
        print(f"Error: {e}", file=sys.stderr)  # noqa: T201
        return _EXIT_USAGE
    print(output)  # noqa: T201
    return 0
