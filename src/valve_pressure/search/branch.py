"""Successor generation: walk to an unopened valve and open it."""

from __future__ import annotations

from valve_pressure.network.model import ReducedNetwork
from valve_pressure.search.state import SearchState


def branch(state: SearchState, network: ReducedNetwork) -> list[SearchState]:
    """Return every legal child of ``state``, in valve index order.

    Reaching valve ``t`` and opening it costs ``dist + 1`` minutes; the move is
    legal only if at least one minute is left afterwards for it to release
    pressure. Zero-flow valves (the start, when it has no flow) are skipped.
    """
    row = network.steps[state.position]
    children: list[SearchState] = []
    for target, flow in enumerate(network.flows):
        bit = 1 << target
        if flow == 0 or state.visited & bit:
            continue
        cost = row[target] + 1
        if state.remaining <= cost:
            continue
        remaining = state.remaining - cost
        children.append(
            SearchState(
                position=target,
                remaining=remaining,
                visited=state.visited | bit,
                pressure=state.pressure + flow * remaining,
                opened=state.opened + (target,),
            )
        )
    return children


__all__ = ["branch"]
