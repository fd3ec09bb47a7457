from __future__ import annotations

from collections.abc import Iterable

import cv2
import numpy as np

from quadsplit.node import Node


def _to_bgr(image: np.ndarray) -> np.ndarray:
    if image.ndim == 2:
        gray = np.clip(image, 0, 255).astype(np.uint8)
        return cv2.cvtColor(gray, cv2.COLOR_GRAY2BGR)
    return image.astype(np.uint8, copy=True)


def draw_nodes(
    image: np.ndarray,
    nodes: Iterable[Node],
    *,
    color: tuple[int, int, int] = (0, 255, 0),
    thickness: int = 1,
) -> np.ndarray:
    """
    Outline node rectangles on a BGR copy of `image`.

    Grayscale input is expanded to three channels; the input is untouched.
    """
    dbg = _to_bgr(image)
    for n in nodes:
        cv2.rectangle(dbg, (n.x, n.y), (n.x + n.w - 1, n.y + n.h - 1), color, thickness)
    return dbg
