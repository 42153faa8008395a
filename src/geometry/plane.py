# geometry/plane.py
from typing import List
from core.ray import Ray
from core.utils import EPSILON
from core.vector import Vector3, vector
from geometry.hittable import Shape

class Plane(Shape):
    """
    The infinite xz plane (y = 0) in object space.
    """
    def local_intersect(self, ray: Ray) -> List[float]:
        if abs(ray.direction.y) < EPSILON:
            # Parallel or coplanar rays never cross the plane.
            return []
        return [-ray.origin.y / ray.direction.y]

    def local_normal_at(self, p: Vector3) -> Vector3:
        return vector(0, 1, 0)
