# geometry/cylinder.py
import math
from typing import List
from core.ray import Ray
from core.utils import EPSILON
from core.vector import Vector3, vector
from geometry.hittable import Shape

class Cylinder(Shape):
    """
    Infinite, uncapped cylinder of radius 1 around the object-space y axis.
    """
    def local_intersect(self, ray: Ray) -> List[float]:
        d, o = ray.direction, ray.origin
        a = d.x * d.x + d.z * d.z
        if a < EPSILON * EPSILON:
            # Parallel to the axis: the ray runs along the wall or misses it.
            return []
        b = 2 * (o.x * d.x + o.z * d.z)
        c = o.x * o.x + o.z * o.z - 1
        disc = b * b - 4 * a * c
        if disc < 0:
            return []

        sqrt_disc = math.sqrt(disc)
        t0 = (-b - sqrt_disc) / (2 * a)
        t1 = (-b + sqrt_disc) / (2 * a)
        if t0 > t1:
            t0, t1 = t1, t0
        return [t0, t1]

    def local_normal_at(self, p: Vector3) -> Vector3:
        return vector(p.x, 0, p.z)
