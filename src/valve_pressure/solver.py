"""Entry points: best pressure alone and with a helper walking alongside."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Union

from valve_pressure.config import SolverConfig
from valve_pressure.network.model import ReducedNetwork, ValveRecord
from valve_pressure.network.reduce import reduce_network
from valve_pressure.search.combiner import best_disjoint_pair
from valve_pressure.search.driver import BranchAndBound

Network = Union[ReducedNetwork, Sequence[ValveRecord]]


@dataclass(frozen=True)
class SearchResult:
    """Single-agent optimum with the opening order that achieves it."""

    pressure: int
    opened: tuple[str, ...]
    expanded: int
    pruned: int


@dataclass(frozen=True)
class PairResult:
    """Two-agent optimum and the valve sets each walker opens."""

    pressure: int
    own: tuple[str, ...]
    helper: tuple[str, ...]
    expanded: int
    pruned: int


def prepare_network(network: Network, config: SolverConfig | None = None) -> ReducedNetwork:
    """Reduce raw valve records; reduced networks pass through untouched."""
    if isinstance(network, ReducedNetwork):
        return network
    cfg = config or SolverConfig()
    return reduce_network(list(network), start=cfg.start, mask_width=cfg.mask_width)


def solve_single(
    network: Network, time_budget: int, *, config: SolverConfig | None = None
) -> SearchResult:
    """Best pressure one walker releases within ``time_budget`` minutes."""
    cfg = config or SolverConfig()
    reduced = prepare_network(network, cfg)
    search = BranchAndBound(reduced, prune_ratio=cfg.prune_ratio)
    pressure = search.run(time_budget)
    opened: tuple[str, ...] = ()
    if search.best_state is not None:
        opened = tuple(reduced.names[idx] for idx in search.best_state.opened)
    return SearchResult(
        pressure=pressure,
        opened=opened,
        expanded=search.expanded,
        pruned=search.pruned,
    )


def solve_with_helper(
    network: Network, time_budget: int, *, config: SolverConfig | None = None
) -> PairResult:
    """Best combined pressure of two walkers opening disjoint valve sets."""
    cfg = config or SolverConfig()
    reduced = prepare_network(network, cfg)
    ratio = cfg.helper_prune_ratio
    if reduced.size <= cfg.exhaustive_max_valves:
        ratio = None
    search = BranchAndBound(reduced, prune_ratio=ratio, track_masks=True)
    search.run(time_budget)
    assert search.best_for_mask is not None
    pairing = best_disjoint_pair(search.best_for_mask)
    return PairResult(
        pressure=pairing.pressure,
        own=reduced.names_for_mask(pairing.own_mask),
        helper=reduced.names_for_mask(pairing.helper_mask),
        expanded=search.expanded,
        pruned=search.pruned,
    )


def max_pressure(network: Network, time_budget: int, *, config: SolverConfig | None = None) -> int:
    return solve_single(network, time_budget, config=config).pressure


def max_pressure_with_helper(
    network: Network, time_budget: int, *, config: SolverConfig | None = None
) -> int:
    return solve_with_helper(network, time_budget, config=config).pressure


__all__ = [
    "PairResult",
    "SearchResult",
    "max_pressure",
    "max_pressure_with_helper",
    "prepare_network",
    "solve_single",
    "solve_with_helper",
]
