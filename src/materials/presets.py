# materials/presets.py
from typing import Optional
from core.color import Color
from core.matrix import scaling
from materials.material import Material
from materials.patterns import CheckerPattern, RingPattern, StripePattern

class ColorPresets:
    """Common colors for materials and patterns."""

    # Warm colors
    RED = Color(0.9, 0.2, 0.2)
    ORANGE = Color(0.9, 0.6, 0.1)
    YELLOW = Color(0.9, 0.9, 0.1)

    # Cool colors
    BLUE = Color(0.2, 0.3, 0.9)
    GREEN = Color(0.2, 0.8, 0.2)
    PURPLE = Color(0.6, 0.2, 0.8)

    # Neutral colors
    WHITE = Color(0.9, 0.9, 0.9)
    GRAY = Color(0.5, 0.5, 0.5)
    BLACK = Color(0.1, 0.1, 0.1)


class DielectricPresets:
    """Transparent materials with realistic refractive indices."""

    @staticmethod
    def _clear(refractive_index: float, tint: Color) -> Material:
        return Material(color=tint, ambient=0.0, diffuse=0.1, specular=0.9, shininess=300.0,
                        reflective=0.9, transparency=0.9, refractive_index=refractive_index)

    @staticmethod
    def glass(tint: Color = Color(0.0, 0.0, 0.0)) -> Material:
        return DielectricPresets._clear(1.5, tint)

    @staticmethod
    def water() -> Material:
        return DielectricPresets._clear(1.333, Color(0.0, 0.0, 0.05))

    @staticmethod
    def diamond() -> Material:
        return DielectricPresets._clear(2.417, Color(0.0, 0.0, 0.0))

    @staticmethod
    def ice() -> Material:
        return DielectricPresets._clear(1.31, Color(0.02, 0.02, 0.04))

    @staticmethod
    def sapphire() -> Material:
        return DielectricPresets._clear(1.77, Color(0.0, 0.0, 0.2))


class MetalPresets:
    """Opaque mirrors of varying strength."""

    @staticmethod
    def mirror() -> Material:
        return Material(color=Color(0.0, 0.0, 0.0), ambient=0.0, diffuse=0.0, specular=1.0,
                        shininess=400.0, reflective=1.0)

    @staticmethod
    def chrome() -> Material:
        return Material(color=Color(0.2, 0.2, 0.2), ambient=0.05, diffuse=0.2, specular=1.0,
                        shininess=300.0, reflective=0.8)

    @staticmethod
    def gold() -> Material:
        return Material(color=Color(1.0, 0.78, 0.34), ambient=0.1, diffuse=0.6, specular=0.8,
                        shininess=150.0, reflective=0.35)


class SurfacePresets:
    """Matte and patterned opaque surfaces."""

    @staticmethod
    def matte(color: Color) -> Material:
        """Create a matte material with the given color."""
        return Material(color=color, specular=0.0)

    @staticmethod
    def checkerboard(color1: Optional[Color] = None, color2: Optional[Color] = None,
                     scale: float = 1.0, reflective: float = 0.0) -> Material:
        """Create a checkerboard floor with default or custom colors."""
        if color1 is None:
            color1 = ColorPresets.WHITE
        if color2 is None:
            color2 = ColorPresets.BLACK
        pattern = CheckerPattern(color1, color2, scaling(scale, scale, scale))
        return Material(pattern=pattern, specular=0.0, reflective=reflective)

    @staticmethod
    def marble(seed: Optional[int] = None) -> Material:
        """Perturbed stripes that read as veined stone."""
        pattern = StripePattern([Color(0.85, 0.85, 0.85), Color(0.35, 0.35, 0.4)],
                                scaling(0.2, 0.2, 0.2)).perturb(seed=seed, scale=0.6)
        return Material(pattern=pattern, specular=0.3, shininess=50.0)

    @staticmethod
    def wood(seed: Optional[int] = None) -> Material:
        pattern = RingPattern([Color(0.55, 0.35, 0.2), Color(0.45, 0.27, 0.15)],
                              scaling(0.1, 0.1, 0.1)).perturb(seed=seed, scale=0.4)
        return Material(pattern=pattern, specular=0.1)
