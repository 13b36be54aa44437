"""All-pairs step counts between valves (Floyd-Warshall over one-minute tunnels)."""

from __future__ import annotations

import warnings
from typing import Sequence

import networkx as nx
import numpy as np

from valve_pressure.network.model import NetworkConfigError, ValveRecord

DISTANCE_DTYPE = np.uint16
UNREACHABLE = int(np.iinfo(DISTANCE_DTYPE).max)


def build_tunnel_graph(records: Sequence[ValveRecord]) -> nx.Graph:
    """Return the undirected tunnel graph, validating valve names on the way.

    Raises:
        NetworkConfigError: on duplicate names, negative flows or tunnels to
            valves that are not part of ``records``.
    """
    graph = nx.Graph()
    for record in records:
        if record.name in graph:
            msg = f"Duplicate valve name '{record.name}'"
            raise NetworkConfigError(msg)
        if record.flow < 0:
            msg = f"Valve '{record.name}' has negative flow rate {record.flow}"
            raise NetworkConfigError(msg)
        graph.add_node(record.name, flow=int(record.flow))

    declared: set[tuple[str, str]] = set()
    for record in records:
        for neighbor in record.neighbors:
            if neighbor not in graph:
                msg = f"Valve '{record.name}' has a tunnel to unknown valve '{neighbor}'"
                raise NetworkConfigError(msg)
            declared.add((record.name, neighbor))
            graph.add_edge(record.name, neighbor)

    one_way = sorted((a, b) for a, b in declared if (b, a) not in declared and a != b)
    if one_way:
        listed = ", ".join(f"{a}->{b}" for a, b in one_way)
        warnings.warn(f"[valves] tunnels without a way back treated as two-way: {listed}")
    return graph


def distance_matrix(records: Sequence[ValveRecord]) -> np.ndarray:
    """Return the read-only ``V x V`` matrix of minimum steps between valves.

    Rows and columns follow the order of ``records``. Pairs with no connecting
    tunnels hold :data:`UNREACHABLE`.
    """
    count = len(records)
    if count >= UNREACHABLE:
        msg = f"{count} valves do not fit distances stored as {np.dtype(DISTANCE_DTYPE).name}"
        raise NetworkConfigError(msg)

    graph = build_tunnel_graph(records)
    if count == 0:
        empty = np.zeros((0, 0), dtype=DISTANCE_DTYPE)
        empty.setflags(write=False)
        return empty

    names = [record.name for record in records]
    adjacency = nx.to_numpy_array(graph, nodelist=names, weight=None, dtype=np.int64)
    dist = np.where(adjacency > 0, 1, UNREACHABLE).astype(np.int64)
    np.fill_diagonal(dist, 0)

    for k in range(count):
        # Sums are formed in int64 and clamped so two sentinels never wrap.
        via = np.minimum(dist[:, k, None] + dist[None, k, :], UNREACHABLE)
        np.minimum(dist, via, out=dist)

    result = dist.astype(DISTANCE_DTYPE)
    result.setflags(write=False)
    return result


__all__ = ["DISTANCE_DTYPE", "UNREACHABLE", "build_tunnel_graph", "distance_matrix"]
