from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any

from quadsplit.errors import ConfigurationError

MIN_IMAGE_DIM = 8
DEFAULT_MIN_NODE_DIM = 8


@dataclass(frozen=True)
class DecomposerConfig:
    """
    Geometry and policy of a decomposition.

    The source rectangle starts at linear index `offset` of a row-major
    buffer holding `stride` samples per row.
    """

    width: int
    height: int
    offset: int = 0
    stride: int | None = None
    min_node_dim: int = DEFAULT_MIN_NODE_DIM
    is_rgb: bool = True

    def __post_init__(self) -> None:
        for name in ("width", "height", "offset", "stride", "min_node_dim"):
            value = getattr(self, name)
            if name == "stride" and value is None:
                continue
            if not isinstance(value, int) or isinstance(value, bool):
                raise ConfigurationError(f"The {name} must be an integer, got {value!r}")
        if not isinstance(self.is_rgb, bool):
            raise ConfigurationError(f"is_rgb must be a boolean, got {self.is_rgb!r}")

        if self.height < MIN_IMAGE_DIM:
            raise ConfigurationError(
                f"The height must be at least {MIN_IMAGE_DIM}, got {self.height}"
            )
        if self.width < MIN_IMAGE_DIM:
            raise ConfigurationError(
                f"The width must be at least {MIN_IMAGE_DIM}, got {self.width}"
            )
        if self.height & 1:
            raise ConfigurationError(f"The height must be a multiple of 2, got {self.height}")
        if self.width & 1:
            raise ConfigurationError(f"The width must be a multiple of 2, got {self.width}")
        if self.offset < 0:
            raise ConfigurationError(f"The offset must be at least 0, got {self.offset}")

        # frozen: fill the default stride through object.__setattr__
        if self.stride is None:
            object.__setattr__(self, "stride", self.width)
        if self.stride < self.width:
            raise ConfigurationError(
                f"The stride must be at least the width ({self.width}), got {self.stride}"
            )
        if self.min_node_dim < 1:
            raise ConfigurationError(
                f"The minimum node dimension must be at least 1, got {self.min_node_dim}"
            )

    @property
    def origin(self) -> tuple[int, int]:
        """Top-left (x, y) of the source rectangle inside the buffer."""
        y0 = self.offset // self.stride
        return self.offset - y0 * self.stride, y0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> DecomposerConfig:
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigurationError(
                f"Unknown configuration keys: {unknown}. Supported: {sorted(known)}"
            )
        for key in ("width", "height"):
            if key not in data:
                raise ConfigurationError(f"Configuration missing required field: {key}")
        return cls(**dict(data))
