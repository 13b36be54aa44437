"""Optimistic estimate of the pressure still reachable from a state."""

from __future__ import annotations

from valve_pressure.network.model import ReducedNetwork
from valve_pressure.search.state import SearchState


def bound(state: SearchState, network: ReducedNetwork) -> int:
    """Upper bound on the final pressure of any path extending ``state``.

    Topology is ignored: unopened valves are taken by descending flow and the
    i-th one is credited with ``remaining - 2 * i`` minutes. Any real plan
    spends at least one minute before its first opening and at least two
    (a step plus the opening minute) between openings.
    """
    total = state.pressure
    minutes = state.remaining
    flows = network.flows
    for idx in network.by_flow:
        if minutes <= 0:
            break
        if state.visited & (1 << idx):
            continue
        total += flows[idx] * minutes
        minutes -= 2
    return total


__all__ = ["bound"]
