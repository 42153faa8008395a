# core/vector.py
import math
import numpy as np
from core.errors import TupleKindError
from core.utils import EPSILON

POINT = 1.0
VECTOR = 0.0


class Vector3:
    """
    A 3D coordinate with a homogeneous tag w: 1 for points, 0 for vectors.
    Arithmetic follows the tags (point + vector is a point, point - point
    is a vector), and the vector-only operations refuse points.
    """
    __slots__ = ("x", "y", "z", "w")

    def __init__(self, x: float, y: float, z: float, w: float = VECTOR):
        self.x = x
        self.y = y
        self.z = z
        self.w = w

    def is_point(self) -> bool:
        return self.w == POINT

    def is_vector(self) -> bool:
        return self.w == VECTOR

    def __add__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __sub__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z, -self.w)

    def __mul__(self, t: float) -> "Vector3":
        return Vector3(self.x * t, self.y * t, self.z * t, self.w * t)

    def __rmul__(self, t: float) -> "Vector3":
        return self.__mul__(t)

    def __truediv__(self, t: float) -> "Vector3":
        return Vector3(self.x / t, self.y / t, self.z / t, self.w / t)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return (abs(self.x - other.x) < EPSILON and abs(self.y - other.y) < EPSILON
                and abs(self.z - other.z) < EPSILON and abs(self.w - other.w) < EPSILON)

    __hash__ = None

    def _require_vector(self, *others: "Vector3"):
        for v in (self,) + others:
            if not v.is_vector():
                raise TupleKindError(f"expected a vector, got {v!r}")

    def dot(self, other: "Vector3") -> float:
        self._require_vector(other)
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector3") -> "Vector3":
        self._require_vector(other)
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def magnitude(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalize(self) -> "Vector3":
        self._require_vector()
        l = self.magnitude()
        if l == 0:
            return Vector3(0, 0, 0)
        return self / l

    def reflect(self, normal: "Vector3") -> "Vector3":
        """
        Mirrors this direction about the normal.
        """
        self._require_vector(normal)
        return self - normal * 2 * self.dot(normal)

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z, self.w], dtype=np.float64)

    @staticmethod
    def from_array(values) -> "Vector3":
        return Vector3(float(values[0]), float(values[1]), float(values[2]), float(values[3]))

    def __repr__(self) -> str:
        kind = "point" if self.is_point() else "vector" if self.is_vector() else f"w={self.w}"
        return f"Vector3({self.x}, {self.y}, {self.z}, {kind})"


def point(x: float, y: float, z: float) -> Vector3:
    return Vector3(x, y, z, POINT)


def vector(x: float, y: float, z: float) -> Vector3:
    return Vector3(x, y, z, VECTOR)
