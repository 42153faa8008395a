# geometry/intersection.py
"""
Intersections, sorted intersection lists and the per-hit shading context.

An Intersection is a parametric distance t along a ray plus the shape it
belongs to. Shapes are compared by identity everywhere in this module: two
equal-looking spheres are still two different containers for refraction.
"""
from typing import Iterable, List, Optional
from core.ray import Ray
from core.utils import EPSILON
from core.vector import Vector3

# Refractive index of the medium surrounding every shape.
VACUUM_INDEX = 1.0


class Intersection:
    """
    A ray crossing a shape's surface at parameter t.
    """
    __slots__ = ("t", "shape")

    def __init__(self, t: float, shape):
        self.t = t
        self.shape = shape

    def __eq__(self, other) -> bool:
        if not isinstance(other, Intersection):
            return NotImplemented
        return self.t == other.t and self.shape is other.shape

    __hash__ = None

    def __lt__(self, other: "Intersection") -> bool:
        return self.t < other.t

    def prepare(self, ray: Ray, xs: Optional["IntersectionList"] = None) -> "ShadingContext":
        return prepare_computations(self, ray, xs)

    def __repr__(self) -> str:
        return f"Intersection(t={self.t}, shape={type(self.shape).__name__}@{id(self.shape):#x})"


class IntersectionList:
    """
    Intersections kept in ascending t order. Sorting is stable, so equal t
    values keep the order in which their shapes were intersected.
    """
    def __init__(self, intersections: Iterable[Intersection] = ()):
        self.intersections: List[Intersection] = sorted(intersections, key=lambda i: i.t)

    def __add__(self, other: "IntersectionList") -> "IntersectionList":
        return IntersectionList(self.intersections + other.intersections)

    def __len__(self) -> int:
        return len(self.intersections)

    def __getitem__(self, index: int) -> Intersection:
        return self.intersections[index]

    def __iter__(self):
        return iter(self.intersections)

    def hit(self) -> Optional[Intersection]:
        """
        Returns the visible hit: the smallest t strictly greater than zero.
        """
        for i in self.intersections:
            if i.t > 0:
                return i
        return None

    def __repr__(self) -> str:
        return f"IntersectionList({self.intersections!r})"


def hit(xs: IntersectionList) -> Optional[Intersection]:
    return xs.hit()


class ShadingContext:
    """
    Geometry derived from one hit, consumed by lighting, shadow rays and
    the reflection/refraction recursion.
    """
    def __init__(self, t: float, shape, point: Vector3, eye: Vector3, normal: Vector3,
                 inside: bool, reflect: Vector3, n1: float, n2: float):
        self.t = t
        self.shape = shape
        self.point = point
        self.eye = eye              # Points back toward the ray origin.
        self.normal = normal        # Faces the eye; flipped when inside.
        self.inside = inside
        self.reflect = reflect
        self.n1 = n1                # Index on the side the ray comes from.
        self.n2 = n2                # Index on the side the ray goes into.
        # Ray origins nudged off the surface to avoid self-intersection acne.
        self.over_point = point + normal * EPSILON
        self.under_point = point - normal * EPSILON


def refractive_indices(hit: Intersection, xs: Iterable[Intersection]):
    """
    Walks the intersections in t order, tracking which shapes the ray is
    inside of, and returns (n1, n2) for the hit.
    """
    containers = []
    n1 = n2 = VACUUM_INDEX
    for i in xs:
        is_hit = i is hit or i == hit
        if is_hit:
            n1 = containers[-1].material.refractive_index if containers else VACUUM_INDEX

        for idx, shape in enumerate(containers):
            if shape is i.shape:
                del containers[idx]
                break
        else:
            containers.append(i.shape)

        if is_hit:
            n2 = containers[-1].material.refractive_index if containers else VACUUM_INDEX
            break
    return n1, n2


def prepare_computations(hit: Intersection, ray: Ray,
                         xs: Optional[IntersectionList] = None) -> ShadingContext:
    """
    Builds the shading context for hit. xs is the full sorted list the hit
    came from; without it the hit is treated as the only surface crossed.
    """
    point = ray.position(hit.t)
    eye = -ray.direction
    normal = hit.shape.normal_at(point)
    inside = False
    if normal.dot(eye) < 0:
        inside = True
        normal = -normal
    reflect = ray.direction.reflect(normal)
    n1, n2 = refractive_indices(hit, xs if xs is not None else [hit])
    return ShadingContext(hit.t, hit.shape, point, eye, normal, inside, reflect, n1, n2)
