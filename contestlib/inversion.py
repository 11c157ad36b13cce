"""Inversion counting."""

from __future__ import annotations

import operator
from typing import Iterable

from contestlib.misc import PosCompression
from contestlib.segment_tree import SegmentTree


def count_inversions(values: Iterable[int]) -> int:
    """Count pairs ``i < j`` with ``values[i] > values[j]`` in O(N log N)."""
    items = list(values)
    ranks = PosCompression(items)
    n = len(ranks)
    seen = SegmentTree([0] * n, operator.add, 0)

    inversions = 0
    for value in items:
        # Descending rank: earlier larger values land at smaller positions.
        position = n - 1 - ranks.encode(value)
        inversions += seen.query(0, position)
        seen.add(position, 1)
    return inversions