# geometry/sphere.py
import math
from typing import List
from core.ray import Ray
from core.utils import EPSILON
from core.vector import Vector3, point
from geometry.hittable import Shape

class Sphere(Shape):
    """
    Unit sphere centered at the object-space origin. Size and position come
    from the transform.
    """
    def local_intersect(self, ray: Ray) -> List[float]:
        sphere_to_ray = ray.origin - point(0, 0, 0)
        a = ray.direction.dot(ray.direction)
        if a < EPSILON * EPSILON:
            return []
        b = 2 * ray.direction.dot(sphere_to_ray)
        c = sphere_to_ray.dot(sphere_to_ray) - 1
        discriminant = b * b - 4 * a * c

        if discriminant < 0:
            return []

        # Both roots, including ones behind the origin; hit() filters later.
        sqrt_disc = math.sqrt(discriminant)
        return [(-b - sqrt_disc) / (2 * a), (-b + sqrt_disc) / (2 * a)]

    def local_normal_at(self, p: Vector3) -> Vector3:
        return p - point(0, 0, 0)


def glass_sphere() -> Sphere:
    """
    A unit sphere of clear glass, handy for refraction scenes and tests.
    """
    s = Sphere()
    s.material.transparency = 1.0
    s.material.refractive_index = 1.5
    return s
