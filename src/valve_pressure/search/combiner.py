"""Pair two disjoint opened-valve sets with the largest combined pressure."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class Pairing:
    """Best disjoint pair of valve masks and their summed pressure."""

    pressure: int = 0
    own_mask: int = 0
    helper_mask: int = 0


def best_disjoint_pair(best_for_mask: np.ndarray) -> Pairing:
    """Scan reached masks for the best pair that shares no valve.

    ``best_for_mask[m]`` is the best pressure of a walk opening exactly the
    valves in ``m`` and ``-1`` when no walk did. The empty mask is a legitimate
    partner (the helper stays put). Returns an empty :class:`Pairing` when
    fewer than two masks were reached.
    """
    reached = np.flatnonzero(best_for_mask >= 0)
    if reached.size < 2:
        return Pairing()

    values = best_for_mask[reached]
    order = np.argsort(-values, kind="stable")
    masks = reached[order].tolist()
    ranked = values[order].tolist()

    best = Pairing()
    count = len(masks)
    for i in range(count):
        value_i = ranked[i]
        # Partners are no better than value_i, so nothing after this can win.
        if 2 * value_i <= best.pressure:
            break
        mask_i = masks[i]
        for j in range(i + 1, count):
            total = value_i + ranked[j]
            if total <= best.pressure:
                break
            if mask_i & masks[j]:
                continue
            best = Pairing(pressure=total, own_mask=mask_i, helper_mask=masks[j])
            break
    return best


__all__ = ["Pairing", "best_disjoint_pair"]
