"""py-disksim — a disk-head scheduling simulator.

Given I/O requests (each targeting a cylinder, each with its own
arrival time) and a head starting at a known cylinder, compute the
order requests are serviced in, the total head movement, and a
time-stamped trace of every movement under ten classical policies.

Re-exports public symbols so callers can write::

    from py_disksim import Policy, SimulationConfig, DiskRequest, simulate
"""

from py_disksim.config import (
    ConfigurationError,
    DegenerateBoundsError,
    Policy,
    SimulationConfig,
)
from py_disksim.engine import simulate, simulate_all
from py_disksim.intercept import Intercept, find_intercept
from py_disksim.requests import (
    Direction,
    DiskRequest,
    InvalidRequestError,
    SimulationError,
    parse_requests,
)
from py_disksim.scheduler import DiskScheduler
from py_disksim.trace import SimulationResult, Step, StepKind

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "DegenerateBoundsError",
    "Direction",
    "DiskRequest",
    "DiskScheduler",
    "Intercept",
    "InvalidRequestError",
    "Policy",
    "SimulationConfig",
    "SimulationError",
    "SimulationResult",
    "Step",
    "StepKind",
    "__version__",
    "find_intercept",
    "parse_requests",
    "simulate",
    "simulate_all",
]
