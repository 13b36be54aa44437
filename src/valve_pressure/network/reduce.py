"""Drop valves that are never worth opening and renumber the rest for bitmasks."""

from __future__ import annotations

from typing import Sequence

import numpy as np

from valve_pressure.network.distance import distance_matrix
from valve_pressure.network.model import (
    DEFAULT_MASK_WIDTH,
    NetworkConfigError,
    ReducedNetwork,
    ValveRecord,
)


def reduce_network(
    records: Sequence[ValveRecord],
    *,
    start: str = "AA",
    mask_width: int = DEFAULT_MASK_WIDTH,
) -> ReducedNetwork:
    """Keep positive-flow valves plus ``start``, in input order.

    Zero-flow valves only matter as pass-throughs, and the distance matrix
    already accounts for those. An empty record list gives an empty network.

    Raises:
        NetworkConfigError: when ``start`` is missing, a tunnel is dangling, or
            more valves remain than ``mask_width`` bits can index.
    """
    if not records:
        return ReducedNetwork.empty()

    full = distance_matrix(records)
    names = [record.name for record in records]
    if start not in names:
        msg = f"Start valve '{start}' not present in network"
        raise NetworkConfigError(msg)

    keep = [idx for idx, record in enumerate(records) if record.flow > 0 or record.name == start]
    if len(keep) > mask_width:
        msg = f"{len(keep)} interesting valves exceed the mask width of {mask_width} bits"
        raise NetworkConfigError(msg)

    distances = full[np.ix_(keep, keep)]
    distances.setflags(write=False)
    flows = tuple(int(records[idx].flow) for idx in keep)
    by_flow = tuple(sorted(range(len(keep)), key=lambda i: (-flows[i], i)))
    return ReducedNetwork(
        names=tuple(names[idx] for idx in keep),
        flows=flows,
        distances=distances,
        start=keep.index(names.index(start)),
        by_flow=by_flow,
    )


__all__ = ["reduce_network"]
