"""Disk scheduler — ties a configuration to a request queue.

Where ``simulate`` is a one-shot function, ``DiskScheduler`` models a
disk that lives across several rounds of work: requests are queued one
at a time, ``run()`` services the whole queue, and the head stays
wherever the last round left it, still sweeping the way it last
moved.  The policy can be swapped between rounds (Strategy pattern).
"""

import dataclasses

from py_disksim.config import Policy, SimulationConfig
from py_disksim.engine import simulate
from py_disksim.requests import Direction, DiskRequest
from py_disksim.trace import SimulationResult


class DiskScheduler:
    """A disk whose head position and sweep direction carry over between runs."""

    def __init__(self, *, config: SimulationConfig) -> None:
        """Create a scheduler with a configuration and an empty queue.

        The head starts at ``config.initial_position``.
        """
        self._config = config
        self._queue: list[DiskRequest] = []
        self._history: list[SimulationResult] = []

    @property
    def head(self) -> int:
        """Return the current head position."""
        return self._config.initial_position

    @property
    def direction(self) -> Direction:
        """Return the direction the next run starts sweeping in."""
        return self._config.direction

    @property
    def policy(self) -> Policy:
        """Return the current scheduling policy."""
        return self._config.policy

    @policy.setter
    def policy(self, value: Policy) -> None:
        """Swap the scheduling policy."""
        self._config = self._config.with_policy(value)

    @property
    def config(self) -> SimulationConfig:
        """Return the configuration the next run will use."""
        return self._config

    @property
    def pending(self) -> list[int]:
        """Return the cylinders currently queued."""
        return [r.position for r in self._queue]

    @property
    def history(self) -> list[SimulationResult]:
        """Return the results of every previous run."""
        return list(self._history)

    def add_request(self, cylinder: int, *, arrival_time: float = 0.0) -> DiskRequest:
        """Queue an I/O request for *cylinder*.

        Arrival times are relative to the start of the next run.
        """
        request = DiskRequest(
            position=cylinder, order=len(self._queue) + 1, arrival_time=arrival_time
        )
        self._queue.append(request)
        return request

    def run(self) -> SimulationResult:
        """Service every queued request.

        Moves the head to where the run ended, keeps the direction it
        was sweeping in, and clears the queue.
        If the run raises, the queue is left intact.

        Returns:
            The result of this run.

        """
        result = simulate(self._config, self._queue)
        if result.trace:
            self._config = dataclasses.replace(
                self._config,
                initial_position=result.trace[-1].end,
                direction=result.final_direction,
            )
        self._queue.clear()
        self._history.append(result)
        return result
