# geometry/world.py
from typing import List, Optional
from core.color import Color
from core.errors import SceneError
from core.matrix import scaling
from core.ray import Ray
from core.vector import Vector3, point
from geometry.hittable import Shape
from geometry.intersection import IntersectionList
from geometry.sphere import Sphere
from materials.light import PointLight
from materials.material import Material

class World:
    """
    The scene: an ordered list of shapes and the point lights shining on them.
    Read-only while rendering.
    """
    def __init__(self, objects: Optional[List[Shape]] = None, lights: Optional[List[PointLight]] = None):
        self.objects: List[Shape] = list(objects) if objects else []
        self.lights: List[PointLight] = list(lights) if lights else []

    def add(self, obj: Shape):
        self.objects.append(obj)

    def add_light(self, light: PointLight):
        self.lights.append(light)

    def clear(self):
        self.objects.clear()
        self.lights.clear()

    def intersect(self, ray: Ray) -> IntersectionList:
        """
        Intersects every object (linear scan) and merges the results in t order.
        """
        intersections = []
        for obj in self.objects:
            intersections.extend(obj.intersect(ray))
        return IntersectionList(intersections)

    def the_light(self) -> PointLight:
        if len(self.lights) != 1:
            raise SceneError(f"world has {len(self.lights)} lights; pass the light explicitly")
        return self.lights[0]

    def is_shadowed(self, p: Vector3, light: Optional[PointLight] = None) -> bool:
        """
        True if some surface sits between p and the light.
        """
        if light is None:
            light = self.the_light()
        v = light.position - p
        distance = v.magnitude()
        h = self.intersect(Ray(p, v.normalize())).hit()
        return h is not None and h.t < distance

    @staticmethod
    def default() -> "World":
        """
        Two concentric spheres lit from the upper left, the reference scene
        most shading tests are written against.
        """
        light = PointLight(point(-10, 10, -10), Color(1, 1, 1))
        outer = Sphere(material=Material(color=Color(0.8, 1.0, 0.6), diffuse=0.7, specular=0.2))
        inner = Sphere(transform=scaling(0.5, 0.5, 0.5))
        return World([outer, inner], [light])


def intersect_shape(ray: Ray, shape: Shape) -> IntersectionList:
    return shape.intersect(ray)


def intersect_world(ray: Ray, world: World) -> IntersectionList:
    return world.intersect(ray)
