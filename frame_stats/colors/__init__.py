"""Color assignment for timer names."""

from .color_hash import ColorProvider, HashColorProvider

__all__ = ["ColorProvider", "HashColorProvider"]
