# geometry/__init__.py
"""
Shapes, the intersection engine and the scene container.

Every shape is a unit primitive in its own object space; a 4x4 transform
places it in the world. Rays are intersected against shapes by moving them
into object space, so the per-shape algorithms stay simple:

    sphere    unit sphere at the origin (quadratic)
    plane     the xz plane (single root)
    cube      [-1, 1] on every axis (slab test)
    cylinder  infinite radius-1 tube around y (quadratic without y)
"""
from geometry.cube import Cube
from geometry.cylinder import Cylinder
from geometry.hittable import Shape
from geometry.intersection import (
    Intersection,
    IntersectionList,
    ShadingContext,
    hit,
    prepare_computations,
)
from geometry.plane import Plane
from geometry.sphere import Sphere, glass_sphere
from geometry.world import World, intersect_shape, intersect_world

__all__ = [
    "Shape",
    "Sphere",
    "Plane",
    "Cube",
    "Cylinder",
    "glass_sphere",
    "Intersection",
    "IntersectionList",
    "ShadingContext",
    "hit",
    "prepare_computations",
    "World",
    "intersect_shape",
    "intersect_world",
]
