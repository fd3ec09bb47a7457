from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from quadsplit.node import Node


@dataclass(frozen=True)
class DecompositionStats:
    node_count: int
    min_side: int
    max_side: int
    mean_area: float
    max_variance: int
    mean_variance: float


def _mean(xs: list[int]) -> float:
    return sum(xs) / len(xs) if xs else 0.0


def summarize(nodes: Iterable[Node]) -> DecompositionStats:
    """Summary of a node collection; an empty collection yields zeros."""
    items = list(nodes)
    if not items:
        return DecompositionStats(0, 0, 0, 0.0, 0, 0.0)

    sides = [min(n.w, n.h) for n in items] + [max(n.w, n.h) for n in items]
    return DecompositionStats(
        node_count=len(items),
        min_side=min(sides),
        max_side=max(sides),
        mean_area=_mean([n.area for n in items]),
        max_variance=max(n.variance for n in items),
        mean_variance=_mean([n.variance for n in items]),
    )
