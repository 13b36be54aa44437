"""Solver configuration."""

from __future__ import annotations

from dataclasses import dataclass

from valve_pressure.network.model import DEFAULT_MASK_WIDTH

DEFAULT_TIME_BUDGET = 30
DEFAULT_HELPER_TIME_BUDGET = 26
# The per-mask table holds 2**k int64 entries.
MAX_MASK_WIDTH = 24


@dataclass(frozen=True)
class SolverConfig:
    """Tunable knobs for the valve search.

    ``helper_prune_ratio`` is an empirical loosening for the pass that fills
    the per-mask table and may lose the best pairing. Networks with at most
    ``exhaustive_max_valves`` interesting valves (every default mask width)
    skip pruning in that pass, so the ratio only speeds up wider networks.
    """

    start: str = "AA"
    mask_width: int = DEFAULT_MASK_WIDTH
    prune_ratio: float = 1.0
    helper_prune_ratio: float | None = 0.75
    exhaustive_max_valves: int = DEFAULT_MASK_WIDTH

    def __post_init__(self) -> None:
        if not 1 <= self.mask_width <= MAX_MASK_WIDTH:
            msg = f"mask_width must be within 1..{MAX_MASK_WIDTH}, got {self.mask_width}"
            raise ValueError(msg)
        if not 0 < self.prune_ratio <= 1:
            msg = f"prune_ratio must be within (0, 1], got {self.prune_ratio}"
            raise ValueError(msg)
        if self.helper_prune_ratio is not None and not 0 < self.helper_prune_ratio <= 1:
            msg = f"helper_prune_ratio must be within (0, 1] or None, got {self.helper_prune_ratio}"
            raise ValueError(msg)
        if self.exhaustive_max_valves < 0:
            msg = f"exhaustive_max_valves must be non-negative, got {self.exhaustive_max_valves}"
            raise ValueError(msg)


__all__ = [
    "DEFAULT_HELPER_TIME_BUDGET",
    "DEFAULT_TIME_BUDGET",
    "MAX_MASK_WIDTH",
    "SolverConfig",
]
