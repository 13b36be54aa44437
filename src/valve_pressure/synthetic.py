"""Seeded synthetic valve networks for benchmarking and brute-force checks."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterable, Sequence

import networkx as nx

from valve_pressure.network.model import ValveRecord


@dataclass(frozen=True)
class SyntheticSpec:
    """Shape of a synthetic valve network."""

    name: str
    n_valves: int
    n_flowing: int
    seed: int
    extra_tunnels: int = 0
    max_flow: int = 25


def _valve_names(count: int) -> list[str]:
    # AA, BB, ... ZZ first, then two-letter pairs, so the start is always "AA".
    letters = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    names = [ch * 2 for ch in letters]
    names.extend(a + b for a in letters for b in letters if a != b)
    if count > len(names):
        msg = f"Cannot name more than {len(names)} synthetic valves"
        raise ValueError(msg)
    return names[:count]


def tunnel_graph(spec: SyntheticSpec) -> nx.Graph:
    """Random spanning tree plus ``extra_tunnels`` chords over valve indices."""
    rng = random.Random(spec.seed)
    g = nx.Graph(name=spec.name)
    g.add_nodes_from(range(spec.n_valves))
    order = list(range(spec.n_valves))
    rng.shuffle(order)
    for idx in range(1, len(order)):
        g.add_edge(order[idx], order[rng.randrange(idx)])
    max_edges = spec.n_valves * (spec.n_valves - 1) // 2
    target = min(max_edges, g.number_of_edges() + spec.extra_tunnels)
    while g.number_of_edges() < target:
        u, v = rng.sample(range(spec.n_valves), 2)
        g.add_edge(u, v)
    return g


def generate_network(spec: SyntheticSpec) -> list[ValveRecord]:
    """Build valve records; valve 0 (``AA``) is the zero-flow start."""
    if spec.n_valves < 2:
        msg = f"Synthetic network needs at least two valves, got {spec.n_valves}"
        raise ValueError(msg)
    if not 0 <= spec.n_flowing < spec.n_valves:
        msg = f"n_flowing must be within 0..{spec.n_valves - 1}, got {spec.n_flowing}"
        raise ValueError(msg)
    graph = tunnel_graph(spec)
    names = _valve_names(spec.n_valves)
    rng = random.Random(spec.seed + 1)
    flowing = set(rng.sample(range(1, spec.n_valves), spec.n_flowing))
    records = []
    for idx in range(spec.n_valves):
        flow = rng.randint(1, spec.max_flow) if idx in flowing else 0
        neighbors = tuple(names[j] for j in sorted(graph.neighbors(idx)))
        records.append(ValveRecord(names[idx], flow, neighbors))
    return records


def format_scan(records: Iterable[ValveRecord]) -> str:
    """Render records in the scan-report format :func:`parse_scan` reads."""
    lines = []
    for record in records:
        links: Sequence[str] = record.neighbors
        if not links:
            msg = f"Valve {record.name} has no tunnels and cannot be written as a reading"
            raise ValueError(msg)
        if len(links) == 1:
            tail = f"tunnel leads to valve {links[0]}"
        else:
            tail = f"tunnels lead to valves {', '.join(links)}"
        lines.append(f"Valve {record.name} has flow rate={record.flow}; {tail}")
    return "\n".join(lines) + "\n"


__all__ = ["SyntheticSpec", "format_scan", "generate_network", "tunnel_graph"]
