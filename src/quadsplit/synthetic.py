from __future__ import annotations

import cv2
import numpy as np


def constant_luma(width: int, height: int, value: int) -> np.ndarray:
    return np.full((height, width), value, dtype=np.int32)


def quadrant_luma(
    width: int, height: int, *, top_left: int = 0, rest: int = 255
) -> np.ndarray:
    """Top-left quadrant at `top_left`, the other three at `rest`."""
    img = np.full((height, width), rest, dtype=np.int32)
    img[: height // 2, : width // 2] = top_left
    return img


def checkerboard_luma(
    width: int, height: int, *, cell: int = 1, low: int = 0, high: int = 255
) -> np.ndarray:
    ys, xs = np.indices((height, width))
    mask = ((xs // cell) + (ys // cell)) % 2 == 1
    return np.where(mask, high, low).astype(np.int32)


def draw_rect_luma(
    img: np.ndarray, x: int, y: int, w: int, h: int, value: int
) -> np.ndarray:
    """Fill a rectangle in place (cv2 corners are inclusive)."""
    cv2.rectangle(img, (x, y), (x + w - 1, y + h - 1), int(value), thickness=-1)
    return img


def pack_rgb(rgb: np.ndarray) -> np.ndarray:
    """
    HxWx3 uint8 RGB -> HxW int32 of packed 0xFFRRGGBB pixels.

    The result is usable as a buffer directly (stride == W).
    """
    if rgb.ndim != 3 or rgb.shape[2] != 3:
        raise ValueError("rgb must be an HxWx3 array")
    px = rgb.astype(np.uint32)
    packed = (0xFF << 24) | (px[..., 0] << 16) | (px[..., 1] << 8) | px[..., 2]
    return packed.view(np.int32)


def embed(
    plane: np.ndarray, *, stride: int, x0: int = 0, y0: int = 0, fill: int = 0
) -> tuple[np.ndarray, int]:
    """
    Place `plane` inside a wider flat buffer.

    Returns the flat buffer and the linear offset of the plane's top-left
    pixel.
    """
    h, w = plane.shape[:2]
    if x0 + w > stride:
        raise ValueError(f"Plane of width {w} at x0={x0} does not fit stride {stride}")
    canvas = np.full((y0 + h, stride), fill, dtype=plane.dtype)
    canvas[y0 : y0 + h, x0 : x0 + w] = plane
    return canvas.reshape(-1), y0 * stride + x0
