from __future__ import annotations

import heapq
import itertools
import logging
from collections.abc import Sequence

import numpy as np

from quadsplit.config import DEFAULT_MIN_NODE_DIM, DecomposerConfig
from quadsplit.errors import ConfigurationError
from quadsplit.node import Node
from quadsplit.tiling import sort_nodes
from quadsplit.variance import PixelPlane

logger = logging.getLogger(__name__)

Buffer = Sequence[int] | np.ndarray


class _ActiveSet:
    """Max-variance-first heap; ties resolved by creation order."""

    def __init__(self) -> None:
        self._heap: list[tuple[int, int, Node]] = []
        self._seq = itertools.count()

    def push(self, node: Node) -> None:
        heapq.heappush(self._heap, (-node.variance, next(self._seq), node))

    def pop(self) -> Node:
        return heapq.heappop(self._heap)[2]

    def drain(self) -> list[Node]:
        nodes = [entry[2] for entry in self._heap]
        self._heap.clear()
        return nodes

    def __len__(self) -> int:
        return len(self._heap)


class QuadTreeDecomposer:
    """
    Variance-driven quad-tree decomposition of a pixel buffer.

    The candidate with the highest variance is split into four children
    until either enough nodes exist (`decompose_by_count`) or every
    remaining candidate is at or below a variance ceiling
    (`decompose_by_variance`). Nodes whose width or height is at or under
    `min_node_dim` are never split.
    """

    def __init__(
        self,
        width: int,
        height: int,
        offset: int = 0,
        stride: int | None = None,
        min_node_dim: int = DEFAULT_MIN_NODE_DIM,
        is_rgb: bool = True,
    ) -> None:
        self.config = DecomposerConfig(
            width=width,
            height=height,
            offset=offset,
            stride=stride,
            min_node_dim=min_node_dim,
            is_rgb=is_rgb,
        )

    @classmethod
    def from_config(cls, config: DecomposerConfig) -> QuadTreeDecomposer:
        return cls(
            config.width,
            config.height,
            offset=config.offset,
            stride=config.stride,
            min_node_dim=config.min_node_dim,
            is_rgb=config.is_rgb,
        )

    def decompose_by_count(
        self, nodes: list[Node] | None, buffer: Buffer, target_count: int
    ) -> list[Node]:
        """
        Split until finalized + active candidates reach `target_count`.

        The result may hold up to three nodes more than the target, since a
        split always yields four children.
        """
        if target_count < 4:
            raise ConfigurationError(
                f"The target number of nodes must be at least 4, got {target_count}"
            )
        return self._decompose(nodes, buffer, target_count=target_count, target_variance=None)

    def decompose_by_variance(
        self, nodes: list[Node] | None, buffer: Buffer, target_variance: int
    ) -> list[Node]:
        """Split every candidate whose variance exceeds `target_variance`."""
        if target_variance < 0:
            raise ConfigurationError(
                f"The target variance of nodes must be at least 0, got {target_variance}"
            )
        return self._decompose(nodes, buffer, target_count=None, target_variance=target_variance)

    def _is_too_small(self, node: Node) -> bool:
        dim = self.config.min_node_dim
        return node.w <= dim or node.h <= dim

    def _seed_roots(self, plane: PixelPlane) -> list[Node]:
        cfg = self.config
        x0, y0 = cfg.origin
        hw = cfg.width >> 1
        hh = cfg.height >> 1
        return [
            Node.scored(plane, x, y, hw, hh, is_rgb=cfg.is_rgb)
            for x, y in ((x0, y0), (x0 + hw, y0), (x0, y0 + hh), (x0 + hw, y0 + hh))
        ]

    def _decompose(
        self,
        nodes: list[Node] | None,
        buffer: Buffer,
        *,
        target_count: int | None,
        target_variance: int | None,
    ) -> list[Node]:
        if nodes is None:
            nodes = []

        cfg = self.config
        plane = PixelPlane(buffer, cfg.stride)
        finalized: list[Node] = []
        active = _ActiveSet()

        for node in sort_nodes(set(nodes)):
            if self._is_too_small(node):
                finalized.append(node)
            else:
                active.push(node)

        # roots are seeded only for an empty input collection
        if not nodes:
            roots = self._seed_roots(plane)
            logger.debug(
                "Seeding %d root quadrants of %dx%d at %s",
                len(roots),
                cfg.width >> 1,
                cfg.height >> 1,
                cfg.origin,
            )
            for root in roots:
                active.push(root)

        while len(active) > 0:
            if target_count is not None and len(finalized) + len(active) >= target_count:
                break

            parent = active.pop()

            if self._is_too_small(parent):
                finalized.append(parent)
                continue

            if target_variance is not None and parent.variance <= target_variance:
                finalized.append(parent)
                continue

            for x, y, w, h in parent.split():
                active.push(Node.scored(plane, x, y, w, h, is_rgb=cfg.is_rgb, parent=parent))

        terminal = finalized + active.drain()
        logger.debug(
            "Decomposition finished with %d nodes (target_count=%s, target_variance=%s)",
            len(terminal),
            target_count,
            target_variance,
        )
        return _merge_into(nodes, terminal)


def _merge_into(nodes: list[Node], terminal: list[Node]) -> list[Node]:
    """
    Rewrite `nodes` in place to hold exactly the terminal nodes.

    Input nodes that stayed terminal keep their position; input nodes that
    were split are dropped; new nodes are appended in row-major order.
    """
    terminal_set = set(terminal)
    seen: set[Node] = set()
    kept: list[Node] = []

    for node in nodes:
        if node in terminal_set and node not in seen:
            kept.append(node)
            seen.add(node)

    for node in sort_nodes(terminal):
        if node not in seen:
            kept.append(node)
            seen.add(node)

    nodes[:] = kept
    return nodes
