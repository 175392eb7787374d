"""
Deterministic name -> color assignment for timer bars.
"""

from typing import Callable, Tuple

import colorhash

# A color provider is any callable that maps a timer name to a CSS color string
ColorProvider = Callable[[str], str]


class HashColorProvider:
    """
    Colors timer names with the color-hash algorithm.
    
    Hue is derived from the hash of the name, lightness and saturation are
    fixed so that all bars share the same tone.
    
    Args:
        lightness: HSL lightness in [0, 1]
        saturation: HSL saturation in [0, 1]
    """
    
    def __init__(self, lightness: float = 0.5, saturation: float = 0.3):
        if not 0 <= lightness <= 1 or not 0 <= saturation <= 1:
            raise ValueError("lightness and saturation must be within [0, 1]")
        self.lightness = lightness
        self.saturation = saturation
    
    def color_hash(self, name: str) -> colorhash.ColorHash:
        return colorhash.ColorHash(name, lightness=(self.lightness,), saturation=(self.saturation,))
    
    def hsl(self, name: str) -> Tuple[float, float, float]:
        """Return (hue in degrees, saturation, lightness) for name."""
        return self.color_hash(name).hsl
    
    def hex(self, name: str) -> str:
        """Return the color for name as '#rrggbb'."""
        return self.color_hash(name).hex
    
    def __call__(self, name: str) -> str:
        return self.hex(name)
