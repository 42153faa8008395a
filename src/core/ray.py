# core/ray.py
import numpy as np
from core.errors import TupleKindError
from core.matrix import transform
from core.vector import Vector3

class Ray:
    """
    Represents a ray in 3D space with an origin point and direction vector.
    """
    __slots__ = ("origin", "direction")

    def __init__(self, origin: Vector3, direction: Vector3):
        if not origin.is_point():
            raise TupleKindError(f"ray origin must be a point, got {origin!r}")
        if not direction.is_vector():
            raise TupleKindError(f"ray direction must be a vector, got {direction!r}")
        self.origin = origin
        self.direction = direction

    def position(self, t: float) -> Vector3:
        """
        Returns the point along the ray at parameter t.
        """
        return self.origin + self.direction * t

    def transform(self, m: np.ndarray) -> "Ray":
        """
        Returns a new ray with origin and direction mapped through m.
        The direction is not renormalized so t stays comparable across spaces.
        """
        return Ray(transform(m, self.origin), transform(m, self.direction))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Ray):
            return NotImplemented
        return self.origin == other.origin and self.direction == other.direction

    __hash__ = None

    def __repr__(self) -> str:
        return f"Ray({self.origin!r}, {self.direction!r})"
