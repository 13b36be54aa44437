"""Depth-first branch-and-bound over valve opening orders."""

from __future__ import annotations

import numpy as np

from valve_pressure.network.model import ReducedNetwork
from valve_pressure.search.bound import bound
from valve_pressure.search.branch import branch
from valve_pressure.search.state import SearchState


class BranchAndBound:
    """Single-agent search keeping the best pressure seen so far.

    A child is discarded when ``bound(child) <= prune_ratio * best``. The strict
    pass uses ``1.0``; a smaller ratio keeps individually weaker paths alive,
    which matters when ``track_masks`` collects the best pressure per opened
    valve set for pairing later. ``prune_ratio=None`` disables pruning.
    """

    def __init__(
        self,
        network: ReducedNetwork,
        *,
        prune_ratio: float | None = 1.0,
        track_masks: bool = False,
    ) -> None:
        if prune_ratio is not None and prune_ratio <= 0:
            msg = f"prune_ratio must be positive or None, got {prune_ratio}"
            raise ValueError(msg)
        self.network = network
        self.prune_ratio = prune_ratio
        self.track_masks = track_masks
        self.best = 0
        self.best_state: SearchState | None = None
        self.best_for_mask: np.ndarray | None = None
        self.expanded = 0
        self.pruned = 0

    # ------------------------------------------------------------------ API --
    def run(self, time_budget: int) -> int:
        """Search from the start valve and return the best pressure found."""
        root = SearchState.initial(self.network, time_budget)
        self.best = 0
        self.best_state = root
        self.expanded = 0
        self.pruned = 0
        if self.track_masks:
            self.best_for_mask = np.full(1 << self.network.size, -1, dtype=np.int64)
        if self.network.size == 0:
            if self.best_for_mask is not None:
                self.best_for_mask[0] = 0
            return 0
        self._visit(root)
        return self.best

    # -------------------------------------------------------------- internal --
    def _visit(self, state: SearchState) -> None:
        self.expanded += 1
        if state.pressure > self.best:
            self.best = state.pressure
            self.best_state = state
        table = self.best_for_mask
        if table is not None and state.pressure > table[state.visited]:
            table[state.visited] = state.pressure

        scored: list[tuple[int, SearchState]] = []
        for child in branch(state, self.network):
            estimate = bound(child, self.network)
            if self._prunable(estimate):
                self.pruned += 1
                continue
            scored.append((estimate, child))
        scored.sort(key=lambda pair: pair[0], reverse=True)

        for estimate, child in scored:
            # best may have grown while exploring earlier siblings.
            if self._prunable(estimate):
                self.pruned += 1
                continue
            self._visit(child)

    def _prunable(self, estimate: int) -> bool:
        if self.prune_ratio is None:
            return False
        return estimate <= self.prune_ratio * self.best


__all__ = ["BranchAndBound"]
