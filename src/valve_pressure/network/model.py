"""Valve records and the reduced network the search runs on."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import cached_property
from typing import Tuple

import numpy as np

DEFAULT_MASK_WIDTH = 16


class NetworkConfigError(ValueError):
    """Raised when a valve network cannot be searched as configured."""


@dataclass(frozen=True)
class ValveRecord:
    """One valve as reported by the scan: name, flow rate and tunnels."""

    name: str
    flow: int
    neighbors: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        # Accept any iterable of names from callers, store a tuple.
        object.__setattr__(self, "neighbors", tuple(self.neighbors))


@dataclass(frozen=True)
class ReducedNetwork:
    """Interesting valves only, indexed ``0..k-1`` for bitmask search.

    ``distances`` is the k x k sub-matrix of the all-pairs step counts. It is
    read-only and takes no part in equality or hashing. ``by_flow`` lists valve
    indices by descending flow and is only consulted by the bound function.
    """

    names: Tuple[str, ...]
    flows: Tuple[int, ...]
    distances: np.ndarray = field(compare=False)
    start: int
    by_flow: Tuple[int, ...]

    @property
    def size(self) -> int:
        return len(self.names)

    @cached_property
    def steps(self) -> tuple[tuple[int, ...], ...]:
        """``distances`` as nested Python ints for the search inner loop."""
        return tuple(tuple(row) for row in self.distances.tolist())

    @property
    def full_mask(self) -> int:
        """Bitmask with one bit set per valve that is worth opening."""
        mask = 0
        for idx, flow in enumerate(self.flows):
            if flow > 0:
                mask |= 1 << idx
        return mask

    def names_for_mask(self, mask: int) -> tuple[str, ...]:
        """Return valve names for the bits set in ``mask``, in index order."""
        return tuple(name for idx, name in enumerate(self.names) if mask & (1 << idx))

    @classmethod
    def empty(cls) -> "ReducedNetwork":
        """A network without valves; every search on it releases nothing."""
        distances = np.zeros((0, 0), dtype=np.uint16)
        distances.setflags(write=False)
        return cls(names=(), flows=(), distances=distances, start=-1, by_flow=())


__all__ = ["DEFAULT_MASK_WIDTH", "NetworkConfigError", "ReducedNetwork", "ValveRecord"]
