# geometry/cube.py
import math
from typing import List, Tuple
from core.ray import Ray
from core.utils import EPSILON, safe_divide
from core.vector import Vector3, vector
from geometry.hittable import Shape

class Cube(Shape):
    """
    Axis-aligned cube spanning [-1, 1] on every object-space axis.
    """
    @staticmethod
    def _check_axis(origin: float, direction: float) -> Tuple[float, float]:
        # Slab method: where the ray enters and leaves the pair of faces on one axis.
        # A zero direction component gives signed infinities, never an exception.
        t0 = safe_divide(-1 - origin, direction)
        t1 = safe_divide(1 - origin, direction)
        if t0 > t1:
            t0, t1 = t1, t0
        return t0, t1

    def local_intersect(self, ray: Ray) -> List[float]:
        if ray.direction.dot(ray.direction) < EPSILON * EPSILON:
            return []
        xtmin, xtmax = self._check_axis(ray.origin.x, ray.direction.x)
        ytmin, ytmax = self._check_axis(ray.origin.y, ray.direction.y)
        ztmin, ztmax = self._check_axis(ray.origin.z, ray.direction.z)

        tmin = max(xtmin, ytmin, ztmin)
        tmax = min(xtmax, ytmax, ztmax)
        if tmin > tmax or math.isinf(tmin) or math.isinf(tmax):
            return []
        return [tmin, tmax]

    def local_normal_at(self, p: Vector3) -> Vector3:
        ax, ay, az = abs(p.x), abs(p.y), abs(p.z)
        maxc = max(ax, ay, az)
        # Edges and corners tie; X wins over Y, Y wins over Z.
        if maxc == ax:
            return vector(p.x, 0, 0)
        if maxc == ay:
            return vector(0, p.y, 0)
        return vector(0, 0, p.z)
