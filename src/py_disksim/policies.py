"""Disk scheduling policies — ten ways to order the same requests.

The disk arm behaves like an elevator in a building, and each policy
is a different rule for which floor to visit next:

    - **FCFS** — stop at every floor in the order people pressed buttons.
    - **SSTF** — always go to the nearest requested floor (greedy).
    - **SCAN** — go all the way up, then all the way down.
    - **C-SCAN** — go all the way up, jump back to the bottom, go up again.
    - **LOOK** — like SCAN, but turn around at the last request.
    - **C-LOOK** — like C-SCAN, but jump to the lowest request, not the
      ground floor.
    - **F-SCAN / F-LOOK** — close the doors: everyone waiting *now* is
      served in one sweep; newcomers wait for the next sweep.
    - **SCAN-N / LOOK-N** — the same, but at most N passengers per sweep.

Requests arrive over time.  Every engine shares the same admission
rule (a request is visible once the clock reaches its arrival time)
and idles when there is nothing to do.  The continuously-refreshed
policies (SSTF, SCAN, C-SCAN, LOOK, C-LOOK) also let a request that
arrives mid-seek **intercept** the head if it lies on the way.  The
batched policies never do: a sealed batch ignores newcomers until it
is drained.

Each engine is a plain function over a ``RunState``; ``ENGINES`` maps
every ``Policy`` to its engine.
"""

from collections.abc import Callable
from typing import TypeAlias

from py_disksim.config import Policy
from py_disksim.logging import LogLevel
from py_disksim.requests import Direction
from py_disksim.state import RunState

Engine: TypeAlias = Callable[[RunState, int | None], None]


# -- Queue-order policies ----------------------------------------------------


def run_fcfs(state: RunState, _batch_size: int | None = None) -> None:
    """First Come, First Served — service in arrival order.

    Fair (no starvation), but the arm zigzags across the disk.
    """
    while not state.done:
        if not state.ready():
            continue
        state.service(state.active[0])


def run_sstf(state: RunState, _batch_size: int | None = None) -> None:
    """Shortest Seek Time First — always go to the nearest request.

    Minimises each individual seek but can starve distant requests.
    Ties go to the request admitted first.  The direction of travel is
    whatever the chosen target implies.
    """
    while not state.done:
        if not state.ready():
            continue
        index = min(state.active, key=lambda i: abs(state.position(i) - state.head))
        target = state.position(index)
        intercept = state.intercept(target, Direction.toward(state.head, target))
        if intercept is not None:
            state.service(intercept.index, intercepted=True)
        else:
            state.service(index)


# -- Sweep policies ------------------------------------------------------------


def run_scan(state: RunState, _batch_size: int | None = None) -> None:
    """SCAN (elevator) — sweep to the disk edge, then reverse.

    With nothing left ahead, the head still runs out to the boundary
    (a non-servicing pivot) before turning around.
    """
    while not state.done:
        if not state.ready():
            continue
        ahead = state.ahead()
        index = ahead[0] if ahead else None
        if index is None:
            target = state.edge()
            if state.head == target:
                state.reverse(f"At boundary {target}")
                continue
        else:
            target = state.position(index)

        intercept = state.intercept(target)
        if intercept is not None:
            state.service(intercept.index, intercepted=True)
        elif index is None:
            state.pivot(target)
            state.reverse(f"Pivoted at {target}")
        else:
            state.service(index)


def run_cscan(state: RunState, _batch_size: int | None = None) -> None:
    """Circular SCAN — sweep one way, then jump back and sweep again.

    The logical direction never changes.  At the far boundary the head
    jumps to the opposite boundary; the jump counts towards movement
    but services nothing and cannot be intercepted.
    """
    while not state.done:
        if not state.ready():
            continue
        ahead = state.ahead()
        index = ahead[0] if ahead else None
        if index is None:
            target = state.edge()
            if state.head == target:
                state.jump(state.edge(state.direction.reversed()))
                continue
        else:
            target = state.position(index)

        intercept = state.intercept(target)
        if intercept is not None:
            state.service(intercept.index, intercepted=True)
        elif index is None:
            state.pivot(target)
        else:
            state.service(index)


def run_look(state: RunState, _batch_size: int | None = None) -> None:
    """LOOK — like SCAN, but reverse at the last request, not the edge."""
    while not state.done:
        if not state.ready():
            continue
        ahead = state.ahead()
        if not ahead:
            state.reverse(f"Nothing ahead of {state.head}")
            continue
        intercept = state.intercept(state.position(ahead[0]))
        if intercept is not None:
            state.service(intercept.index, intercepted=True)
        else:
            state.service(ahead[0])


def run_clook(state: RunState, _batch_size: int | None = None) -> None:
    """Circular LOOK — sweep one way, then jump to the farthest request.

    With nothing ahead, the head jumps to the extreme active request on
    the opposite side (the lowest one when sweeping up).  The jump
    services nothing; that request is serviced next, with distance 0.
    """
    while not state.done:
        if not state.ready():
            continue
        ahead = state.ahead()
        if not ahead:
            if state.direction is Direction.UP:
                extreme = min(state.active, key=state.position)
            else:
                extreme = max(state.active, key=state.position)
            state.jump(state.position(extreme))
            continue
        intercept = state.intercept(state.position(ahead[0]))
        if intercept is not None:
            state.service(intercept.index, intercepted=True)
        else:
            state.service(ahead[0])


# -- Batched policies -------------------------------------------------------------


def _run_batched(state: RunState, *, limit: int | None, to_edge: bool) -> None:
    """Sweep sealed batches of requests.

    When the batch is empty, admit every arrived request (or the
    ``limit`` earliest of them) as the next batch.  Requests arriving
    while a batch is in progress stay pending.

    Args:
        state: The run to drive.
        limit: Maximum batch size (None = everything that has arrived).
        to_edge: SCAN rules (pivot at the boundary) if True, else LOOK
            rules (reverse at the last batch member).

    """
    while not state.done:
        if not state.active:
            state.idle()
            count = state.admit(limit=limit)
            state.log(LogLevel.INFO, f"Froze a batch of {count} request(s)")
            continue

        ahead = state.ahead()
        if ahead:
            state.service(ahead[0])
            continue
        if not to_edge:
            state.reverse(f"Batch exhausted ahead of {state.head}")
            continue
        edge = state.edge()
        if state.head != edge:
            state.pivot(edge)
        state.reverse(f"At boundary {edge}")


def run_fscan(state: RunState, _batch_size: int | None = None) -> None:
    """F-SCAN — SCAN over a frozen batch of everything that has arrived."""
    _run_batched(state, limit=None, to_edge=True)


def run_flook(state: RunState, _batch_size: int | None = None) -> None:
    """F-LOOK — LOOK over a frozen batch of everything that has arrived."""
    _run_batched(state, limit=None, to_edge=False)


def run_scan_n(state: RunState, batch_size: int | None = None) -> None:
    """N-step SCAN — SCAN over batches of the N earliest arrivals."""
    _run_batched(state, limit=batch_size, to_edge=True)


def run_look_n(state: RunState, batch_size: int | None = None) -> None:
    """N-step LOOK — LOOK over batches of the N earliest arrivals."""
    _run_batched(state, limit=batch_size, to_edge=False)


ENGINES: dict[Policy, Engine] = {
    Policy.FCFS: run_fcfs,
    Policy.SSTF: run_sstf,
    Policy.SCAN: run_scan,
    Policy.C_SCAN: run_cscan,
    Policy.LOOK: run_look,
    Policy.C_LOOK: run_clook,
    Policy.F_SCAN: run_fscan,
    Policy.F_LOOK: run_flook,
    Policy.SCAN_N: run_scan_n,
    Policy.LOOK_N: run_look_n,
}
