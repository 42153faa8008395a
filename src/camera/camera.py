# camera/camera.py
import math
from typing import List, Optional
import numpy as np
from core.matrix import frozen, identity, inverse, transform
from core.ray import Ray
from core.vector import point

class Camera:
    """
    Pinhole camera looking down -z in its own space, with the image plane
    one unit in front of the eye. The transform orients the world relative
    to the camera (see core.matrix.view_transform).
    """
    def __init__(self, hsize: int, vsize: int, field_of_view: float,
                 transform: Optional[np.ndarray] = None):
        self.hsize = hsize
        self.vsize = vsize
        self.field_of_view = field_of_view
        self.transform = transform if transform is not None else identity()
        self.update_camera()

    @property
    def transform(self) -> np.ndarray:
        return self._transform

    @transform.setter
    def transform(self, m: np.ndarray):
        self._inverse = frozen(inverse(m))
        self._transform = frozen(m)
        self._origin = transform(self._inverse, point(0, 0, 0))

    def update_camera(self):
        """Recomputes the image plane extent and pixel size."""
        half_view = math.tan(self.field_of_view / 2)
        aspect = self.hsize / self.vsize
        if aspect >= 1:
            self.half_width = half_view
            self.half_height = half_view / aspect
        else:
            self.half_width = half_view * aspect
            self.half_height = half_view
        self.pixel_size = (self.half_width * 2) / self.hsize

    def _ray_through(self, x_offset: float, y_offset: float) -> Ray:
        # Canvas x grows to the right, camera-space x to the left.
        world_x = self.half_width - x_offset
        world_y = self.half_height - y_offset
        pixel = transform(self._inverse, point(world_x, world_y, -1))
        return Ray(self._origin, (pixel - self._origin).normalize())

    def project_ray(self, x: int, y: int) -> Ray:
        """Ray from the eye through the center of pixel (x, y)."""
        return self._ray_through((x + 0.5) * self.pixel_size, (y + 0.5) * self.pixel_size)

    def project_subsample_rays(self, x: int, y: int, rng: np.random.Generator,
                               samples: int = 10) -> List[Ray]:
        """Rays through random positions inside pixel (x, y)."""
        jitter = rng.random((samples, 2))
        return [self._ray_through((x + u) * self.pixel_size, (y + v) * self.pixel_size)
                for u, v in jitter]
