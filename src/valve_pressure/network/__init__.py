"""Valve network model, distance precompute and reduction."""

from valve_pressure.network.distance import UNREACHABLE, build_tunnel_graph, distance_matrix
from valve_pressure.network.model import (
    DEFAULT_MASK_WIDTH,
    NetworkConfigError,
    ReducedNetwork,
    ValveRecord,
)
from valve_pressure.network.reduce import reduce_network

__all__ = [
    "DEFAULT_MASK_WIDTH",
    "NetworkConfigError",
    "ReducedNetwork",
    "UNREACHABLE",
    "ValveRecord",
    "build_tunnel_graph",
    "distance_matrix",
    "reduce_network",
]
