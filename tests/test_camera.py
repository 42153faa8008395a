"""Unit tests for the pinhole camera."""

import math

import numpy as np
import pytest

from camera.camera import Camera
from core.errors import NonInvertibleTransformError
from core.matrix import chain, identity, rotation_y, scaling, translation
from core.vector import point, vector


class TestCameraSetup:
    """Tests for construction and pixel size."""

    def test_defaults(self):
        c = Camera(160, 120, math.pi / 2)
        assert (c.hsize, c.vsize) == (160, 120)
        assert c.field_of_view == math.pi / 2
        np.testing.assert_array_equal(c.transform, identity())

    def test_pixel_size_horizontal_canvas(self):
        assert Camera(200, 125, math.pi / 2).pixel_size == pytest.approx(0.01)

    def test_pixel_size_vertical_canvas(self):
        assert Camera(125, 200, math.pi / 2).pixel_size == pytest.approx(0.01)

    def test_singular_transform(self):
        with pytest.raises(NonInvertibleTransformError):
            Camera(10, 10, math.pi / 2, scaling(1, 1, 0))


class TestProjectRay:
    """Tests for rays through pixel centers."""

    def test_center_of_canvas(self):
        r = Camera(201, 101, math.pi / 2).project_ray(100, 50)
        assert r.origin == point(0, 0, 0)
        assert r.direction == vector(0, 0, -1)

    def test_corner_of_canvas(self):
        r = Camera(201, 101, math.pi / 2).project_ray(0, 0)
        assert r.origin == point(0, 0, 0)
        assert r.direction == vector(0.66519, 0.33259, -0.66851)

    def test_transformed_camera(self):
        c = Camera(201, 101, math.pi / 2, chain(translation(0, -2, 5), rotation_y(math.pi / 4)))
        r = c.project_ray(100, 50)
        k = math.sqrt(2) / 2
        assert r.origin == point(0, 2, -5)
        assert r.direction == vector(k, 0, -k)

    def test_transform_can_be_replaced(self):
        c = Camera(201, 101, math.pi / 2)
        c.transform = translation(0, 0, -3)
        assert c.project_ray(100, 50).origin == point(0, 0, 3)

    def test_transform_cannot_be_edited_in_place(self):
        c = Camera(201, 101, math.pi / 2)
        with pytest.raises(ValueError):
            c.transform[2, 3] = -3.0
        assert c.project_ray(100, 50).origin == point(0, 0, 0)


class TestSubsampleRays:
    """Tests for jittered rays inside a pixel."""

    def test_count_and_unit_directions(self, rng):
        rays = Camera(11, 11, math.pi / 2).project_subsample_rays(5, 5, rng, samples=8)
        assert len(rays) == 8
        for r in rays:
            assert r.origin == point(0, 0, 0)
            assert r.direction.magnitude() == pytest.approx(1.0)

    def test_rays_stay_inside_the_pixel(self, rng):
        c = Camera(11, 11, math.pi / 2)
        for r in c.project_subsample_rays(0, 0, rng, samples=20):
            # Pixel (0, 0) spans camera-space x in [1 - size, 1] and y likewise.
            d = r.direction / -r.direction.z
            assert c.half_width - c.pixel_size <= d.x <= c.half_width
            assert c.half_height - c.pixel_size <= d.y <= c.half_height

    def test_same_seed_same_rays(self):
        c = Camera(11, 11, math.pi / 2)
        a = c.project_subsample_rays(3, 4, np.random.default_rng(9), samples=4)
        b = c.project_subsample_rays(3, 4, np.random.default_rng(9), samples=4)
        assert [r.direction for r in a] == [r.direction for r in b]
