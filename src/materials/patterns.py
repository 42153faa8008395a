# materials/patterns.py
import math
from typing import List, Optional, Sequence
import numpy as np
from core.color import Color
from core.matrix import frozen, identity, inverse, transform
from core.vector import Vector3, point

class Pattern:
    """
    Base class for procedural color patterns.

    Patterns live in their own space: a world point is taken into the
    shape's object space and then through the pattern's own transform
    before the pattern function sees it.
    """
    def __init__(self, transform: Optional[np.ndarray] = None):
        self.transform = transform if transform is not None else identity()
        self.perturbation = None

    @property
    def transform(self) -> np.ndarray:
        return self._transform

    @transform.setter
    def transform(self, m: np.ndarray):
        self._inverse = frozen(inverse(m))
        self._transform = frozen(m)

    def perturb(self, seed: Optional[int] = None, scale: float = 0.15) -> "Pattern":
        """
        Jitters lookups with 3D value noise. The noise table is drawn once,
        here, so later lookups are deterministic and thread-safe.
        """
        self.perturbation = ValueNoise(np.random.default_rng(seed), scale)
        return self

    def pattern_at(self, p: Vector3) -> Color:
        """
        Color at a point already in pattern space.
        """
        if self.perturbation is not None:
            offset = self.perturbation.offset(p)
            p = point(p.x + offset, p.y + offset, p.z + offset)
        return self.local_pattern_at(p)

    def pattern_at_shape(self, shape, world_point: Vector3) -> Color:
        object_point = shape.world_to_object(world_point)
        pattern_point = transform(self._inverse, object_point)
        return self.pattern_at(pattern_point)

    def local_pattern_at(self, p: Vector3) -> Color:
        raise NotImplementedError("local_pattern_at() must be implemented by pattern subclasses.")


class ValueNoise:
    """Smooth 3D value noise in [-1, 1] scaled by a constant factor."""
    def __init__(self, rng: np.random.Generator, scale: float):
        self.scale = scale
        # Permutation table, doubled to avoid wrapping the index.
        self.p = rng.permutation(256).tolist() * 2

    @staticmethod
    def _fade(t: float) -> float:
        return t * t * t * (t * (t * 6 - 15) + 10)

    def _corner(self, x: int, y: int, z: int) -> float:
        h = self.p[self.p[self.p[x & 255] + (y & 255)] + (z & 255)]
        return h / 127.5 - 1.0

    def noise(self, x: float, y: float, z: float) -> float:
        xi, yi, zi = math.floor(x), math.floor(y), math.floor(z)
        u = self._fade(x - xi)
        v = self._fade(y - yi)
        w = self._fade(z - zi)

        def lerp(a, b, t):
            return a + (b - a) * t

        x00 = lerp(self._corner(xi, yi, zi), self._corner(xi + 1, yi, zi), u)
        x10 = lerp(self._corner(xi, yi + 1, zi), self._corner(xi + 1, yi + 1, zi), u)
        x01 = lerp(self._corner(xi, yi, zi + 1), self._corner(xi + 1, yi, zi + 1), u)
        x11 = lerp(self._corner(xi, yi + 1, zi + 1), self._corner(xi + 1, yi + 1, zi + 1), u)
        return lerp(lerp(x00, x10, v), lerp(x01, x11, v), w)

    def offset(self, p: Vector3) -> float:
        return self.scale * self.noise(p.x, p.y, p.z)


class StripePattern(Pattern):
    """Bands along x, cycling through the given colors."""
    def __init__(self, colors: Sequence[Color], transform: Optional[np.ndarray] = None):
        super().__init__(transform)
        self.colors: List[Color] = list(colors)

    def local_pattern_at(self, p: Vector3) -> Color:
        return self.colors[int(abs(math.floor(p.x))) % len(self.colors)]


class GradientPattern(Pattern):
    """Linear blend from a to b over each unit of x."""
    def __init__(self, a: Color, b: Color, transform: Optional[np.ndarray] = None):
        super().__init__(transform)
        self.a = a
        self.b = b

    def local_pattern_at(self, p: Vector3) -> Color:
        return self.a + (self.b - self.a) * (p.x - math.floor(p.x))


class RingPattern(Pattern):
    """Concentric rings in the xz plane."""
    def __init__(self, colors: Sequence[Color], transform: Optional[np.ndarray] = None):
        super().__init__(transform)
        self.colors: List[Color] = list(colors)

    def local_pattern_at(self, p: Vector3) -> Color:
        return self.colors[int(math.floor(math.sqrt(p.x * p.x + p.z * p.z))) % len(self.colors)]


class CheckerPattern(Pattern):
    """3D checkerboard of unit cubes."""
    def __init__(self, a: Color, b: Color, transform: Optional[np.ndarray] = None):
        super().__init__(transform)
        self.a = a
        self.b = b

    def local_pattern_at(self, p: Vector3) -> Color:
        if (math.floor(p.x) + math.floor(p.y) + math.floor(p.z)) % 2 == 0:
            return self.a
        return self.b


class RadialGradientPattern(Pattern):
    """Gradient from a to b repeating with distance from the y axis."""
    def __init__(self, a: Color, b: Color, transform: Optional[np.ndarray] = None):
        super().__init__(transform)
        self.a = a
        self.b = b

    def local_pattern_at(self, p: Vector3) -> Color:
        dist = math.sqrt(p.x * p.x + p.z * p.z)
        return self.a + (self.b - self.a) * (dist - math.floor(dist))


class TestPattern(Pattern):
    """Returns the pattern-space coordinates as a color."""
    __test__ = False

    def local_pattern_at(self, p: Vector3) -> Color:
        return Color(p.x, p.y, p.z)
