from __future__ import annotations

from collections.abc import Iterable

import numpy as np

from quadsplit.errors import TilingError
from quadsplit.node import Node


def sort_nodes(nodes: Iterable[Node]) -> list[Node]:
    """Row-major order: top to bottom, then left to right."""
    return sorted(nodes, key=lambda n: (n.y, n.x, n.h, n.w))


def covered_area(nodes: Iterable[Node]) -> int:
    return sum(n.area for n in nodes)


def validate_tiling(nodes: Iterable[Node], x0: int, y0: int, width: int, height: int) -> None:
    """
    Raise TilingError unless `nodes` cover the rectangle exactly once.

    Checks, in order: every node lies inside the rectangle, no pixel is
    covered twice, no pixel is left uncovered.
    """
    coverage = np.zeros((height, width), dtype=np.int32)

    for n in nodes:
        if n.w < 1 or n.h < 1:
            raise TilingError(f"Empty node: {n!r}")
        lx = n.x - x0
        ly = n.y - y0
        if lx < 0 or ly < 0 or lx + n.w > width or ly + n.h > height:
            raise TilingError(
                f"Node {n!r} lies outside rectangle ({x0}, {y0}, {width}, {height})"
            )
        coverage[ly : ly + n.h, lx : lx + n.w] += 1

    overlap = int(np.count_nonzero(coverage > 1))
    if overlap:
        raise TilingError(f"Nodes overlap on {overlap} pixel(s)")

    gaps = int(np.count_nonzero(coverage == 0))
    if gaps:
        raise TilingError(f"Nodes leave {gaps} pixel(s) uncovered")


def is_tiling(nodes: Iterable[Node], x0: int, y0: int, width: int, height: int) -> bool:
    try:
        validate_tiling(nodes, x0, y0, width, height)
    except TilingError:
        return False
    return True
