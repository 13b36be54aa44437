"""valve-pressure package."""

from valve_pressure.config import SolverConfig
from valve_pressure.network.distance import distance_matrix
from valve_pressure.network.model import NetworkConfigError, ReducedNetwork, ValveRecord
from valve_pressure.network.reduce import reduce_network
from valve_pressure.parsing import load_scan, parse_scan
from valve_pressure.solver import (
    PairResult,
    SearchResult,
    max_pressure,
    max_pressure_with_helper,
    solve_single,
    solve_with_helper,
)

__all__ = [
    "NetworkConfigError",
    "PairResult",
    "ReducedNetwork",
    "SearchResult",
    "SolverConfig",
    "ValveRecord",
    "distance_matrix",
    "load_scan",
    "max_pressure",
    "max_pressure_with_helper",
    "parse_scan",
    "reduce_network",
    "solve_single",
    "solve_with_helper",
]
