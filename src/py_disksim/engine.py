"""Simulation entry point — validate, dispatch, summarise.

``simulate`` is the single door into the engines: it validates the
configuration and workload, builds a fresh ``RunState`` (the caller's
list is copied, never mutated), runs the engine the ``Policy`` selects
and returns the frozen ``SimulationResult``.

``simulate_all`` runs the same workload under several policies, which
is how the classic "compare the algorithms" exercise is set up.
"""

from collections.abc import Iterable

from py_disksim.config import Policy, SimulationConfig
from py_disksim.logging import LogLevel
from py_disksim.policies import ENGINES
from py_disksim.requests import DiskRequest
from py_disksim.state import RunState
from py_disksim.trace import SimulationResult


def simulate(config: SimulationConfig, requests: Iterable[DiskRequest]) -> SimulationResult:
    """Run one policy over *requests* to completion.

    Args:
        config: Policy, disk bounds, starting head state and timings.
        requests: The workload.  An empty workload yields a result with
            zero movement.

    Returns:
        The trace and summary metrics of the run.

    Raises:
        SimulationError: If the configuration or a request is invalid
            (see ``SimulationConfig.validate``).

    """
    workload = list(requests)
    config.validate(workload)

    state = RunState(config, workload)
    state.log(
        LogLevel.INFO,
        f"Start at cylinder {config.initial_position} with {len(workload)} request(s)",
    )
    ENGINES[config.policy](state, config.batch_size)
    state.log(LogLevel.INFO, f"Finished at cylinder {state.head}")
    return state.result()


def simulate_all(
    config: SimulationConfig,
    requests: Iterable[DiskRequest],
    policies: Iterable[Policy] | None = None,
) -> dict[Policy, SimulationResult]:
    """Run the same workload under several policies.

    Args:
        config: Shared configuration; its ``policy`` field is replaced.
        requests: The workload.
        policies: Policies to run (default: every policy).  Batched
            policies need ``config.batch_size``.

    Returns:
        One result per policy, in the order they were run.

    """
    workload = list(requests)
    selected = list(policies) if policies is not None else list(Policy)
    return {policy: simulate(config.with_policy(policy), workload) for policy in selected}
