from __future__ import annotations

from collections.abc import Sequence

import numpy as np

_INT32_SPAN = 1 << 32
_INT32_MIN = -(1 << 31)


def _narrow_int32(value: int) -> int:
    # two's complement wrap, same as casting a 64-bit accumulator to int32
    return (value - _INT32_MIN) % _INT32_SPAN + _INT32_MIN


class PixelPlane:
    """
    Read-only 2D view over a flat row-major pixel buffer.

    The buffer is not copied when it already is an integer numpy array.
    Rectangles are read by index, so the last row does not need to be
    padded out to a full stride.
    """

    __slots__ = ("_flat", "stride")

    def __init__(self, buffer: Sequence[int] | np.ndarray, stride: int) -> None:
        flat = np.asarray(buffer)
        if flat.dtype.kind not in "iu":
            flat = flat.astype(np.int64)
        flat = flat.reshape(-1)
        flat.flags.writeable = False
        self._flat = flat
        self.stride = stride

    @property
    def size(self) -> int:
        return self._flat.shape[0]

    def region(self, x: int, y: int, w: int, h: int) -> np.ndarray:
        """Pixels of the rectangle as an int64 (h, w) array."""
        rows = (y + np.arange(h))[:, None] * self.stride
        cols = x + np.arange(w)
        return self._flat[rows + cols].astype(np.int64)


def _channel_spread(channel: np.ndarray, n: int) -> int:
    total = int(channel.sum())
    sq_total = int((channel * channel).sum())
    return sq_total - (total * total) // n


def variance_rgb(region: np.ndarray) -> int:
    """
    Mean per-channel variance of packed 0xAARRGGBB pixels (alpha ignored).

    Each channel contributes sum(x^2) - sum(x)^2 / n; the three are
    averaged and normalized by n once more.
    """
    n = region.size
    r = (region >> 16) & 0xFF
    g = (region >> 8) & 0xFF
    b = region & 0xFF
    spread = _channel_spread(r, n) + _channel_spread(g, n) + _channel_spread(b, n)
    return _narrow_int32(spread // (3 * n))


def variance_luma(region: np.ndarray) -> int:
    """Population variance of a single-channel region."""
    n = region.size
    return _narrow_int32(_channel_spread(region, n) // n)


def compute_variance(plane: PixelPlane, x: int, y: int, w: int, h: int, is_rgb: bool) -> int:
    region = plane.region(x, y, w, h)
    if is_rgb:
        return variance_rgb(region)
    return variance_luma(region)
