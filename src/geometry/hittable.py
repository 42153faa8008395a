# geometry/hittable.py
from typing import List, Optional
import numpy as np
from core.errors import TupleKindError
from core.matrix import frozen, identity, inverse, transform
from core.ray import Ray
from core.vector import Vector3
from geometry.intersection import Intersection, IntersectionList
from materials.material import Material

class Shape:
    """
    Abstract surface with an object-to-world transform and a material.

    Subclasses only answer questions in their own object space
    (local_intersect, local_normal_at); this class moves rays and points
    into that space and moves normals back out.
    """
    def __init__(self, transform: Optional[np.ndarray] = None, material: Optional[Material] = None):
        self.transform = transform if transform is not None else identity()
        self.material = material if material is not None else Material()

    @property
    def transform(self) -> np.ndarray:
        return self._transform

    @transform.setter
    def transform(self, m: np.ndarray):
        # Inverting here surfaces a singular transform at scene build time.
        inv = inverse(m)
        self._inverse = frozen(inv)
        self._inverse_transpose = frozen(inv.T)
        self._transform = frozen(m)

    @property
    def inverse_transform(self) -> np.ndarray:
        return self._inverse

    def world_to_object(self, p: Vector3) -> Vector3:
        return transform(self._inverse, p)

    def intersect(self, ray: Ray) -> IntersectionList:
        local_ray = ray.transform(self._inverse)
        return IntersectionList(Intersection(t, self) for t in self.local_intersect(local_ray))

    def normal_at(self, world_point: Vector3) -> Vector3:
        if not world_point.is_point():
            raise TupleKindError(f"normal_at expects a point, got {world_point!r}")
        local_normal = self.local_normal_at(self.world_to_object(world_point))
        # The inverse-transpose keeps normals perpendicular under non-uniform scaling.
        r = self._inverse_transpose @ local_normal.to_array()
        return Vector3(float(r[0]), float(r[1]), float(r[2])).normalize()

    def local_intersect(self, ray: Ray) -> List[float]:
        raise NotImplementedError("local_intersect() must be implemented by subclasses.")

    def local_normal_at(self, p: Vector3) -> Vector3:
        raise NotImplementedError("local_normal_at() must be implemented by subclasses.")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(transform={self._transform.tolist()})"
