from __future__ import annotations

from dataclasses import dataclass, field

from quadsplit.variance import PixelPlane, compute_variance

Rect = tuple[int, int, int, int]  # (x, y, w, h)


@dataclass(frozen=True)
class Node:
    """
    Axis-aligned rectangle of the source buffer plus its variance score.

    Equality and hashing use the geometry only. `parent` points at the node
    this one was split from and is kept for lineage; the decomposer never
    walks it.
    """

    x: int
    y: int
    w: int
    h: int
    variance: int = field(default=0, compare=False)
    parent: Node | None = field(default=None, compare=False, repr=False)

    @classmethod
    def scored(
        cls,
        plane: PixelPlane,
        x: int,
        y: int,
        w: int,
        h: int,
        *,
        is_rgb: bool,
        parent: Node | None = None,
    ) -> Node:
        variance = compute_variance(plane, x, y, w, h, is_rgb)
        return cls(x, y, w, h, variance=variance, parent=parent)

    @property
    def bbox(self) -> Rect:
        return (self.x, self.y, self.w, self.h)

    @property
    def area(self) -> int:
        return self.w * self.h

    @property
    def depth(self) -> int:
        d = 0
        p = self.parent
        while p is not None:
            d += 1
            p = p.parent
        return d

    def split(self) -> list[Rect]:
        """
        Quarter the rectangle.

        On odd sizes the far column/row of children gets the extra pixel, so
        the four rectangles cover the node exactly.
        """
        near_w = self.w >> 1
        near_h = self.h >> 1
        far_w = self.w - near_w
        far_h = self.h - near_h
        mid_x = self.x + near_w
        mid_y = self.y + near_h
        return [
            (self.x, self.y, near_w, near_h),
            (mid_x, self.y, far_w, near_h),
            (self.x, mid_y, near_w, far_h),
            (mid_x, mid_y, far_w, far_h),
        ]
