from __future__ import annotations


class QuadTreeError(ValueError):
    """Base error for quad-tree configuration and decomposition."""


class ConfigurationError(QuadTreeError):
    """Invalid geometry or decomposition target."""


class TilingError(QuadTreeError):
    """A node collection does not exactly tile its rectangle."""
