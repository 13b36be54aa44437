"""State containers for the valve search."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from valve_pressure.network.model import ReducedNetwork


@dataclass(frozen=True)
class SearchState:
    """Position, clock and opened valves at one node of the search tree."""

    position: int
    remaining: int
    visited: int = 0  # bit i set once valve i is open
    pressure: int = 0  # total released by the open valves over the whole budget
    opened: Tuple[int, ...] = ()

    @classmethod
    def initial(cls, network: ReducedNetwork, time_budget: int) -> "SearchState":
        """Root state: standing on the start valve with nothing open."""
        if time_budget < 0:
            msg = f"Time budget must be non-negative, got {time_budget}"
            raise ValueError(msg)
        return cls(position=network.start, remaining=time_budget)
