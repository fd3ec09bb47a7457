from .config import DecomposerConfig
from .decomposer import QuadTreeDecomposer
from .errors import ConfigurationError, QuadTreeError, TilingError
from .node import Node
from .render import draw_nodes
from .stats import DecompositionStats, summarize
from .synthetic import (
    checkerboard_luma,
    constant_luma,
    draw_rect_luma,
    embed,
    pack_rgb,
    quadrant_luma,
)
from .tiling import is_tiling, sort_nodes, validate_tiling

__all__ = [
    "QuadTreeDecomposer",
    "DecomposerConfig",
    "Node",
    "DecompositionStats",
    "summarize",
    "sort_nodes",
    "validate_tiling",
    "is_tiling",
    "draw_nodes",
    "constant_luma",
    "quadrant_luma",
    "checkerboard_luma",
    "draw_rect_luma",
    "pack_rgb",
    "embed",
    "QuadTreeError",
    "ConfigurationError",
    "TilingError",
]
