"""Unit tests for render settings and the render driver.

Tests cover:
- Quality presets and validation
- Rendering the reference world
- Resolution scaling and progress reporting
- Supersampled renders being reproducible and independent of worker count
"""

import math

import numpy as np
import pytest

from camera.camera import Camera
from core.color import Color
from core.errors import SceneError
from core.matrix import view_transform
from core.vector import point, vector
from renderer.raytracer import Renderer
from renderer.settings import MAX_BOUNCES, QUALITY_LEVELS, RenderSettings, SuperSamplingMode


@pytest.fixture
def camera():
    return Camera(11, 11, math.pi / 2, view_transform(point(0, 0, -5), point(0, 0, 0), vector(0, 1, 0)))


class TestRenderSettings:
    """Tests for the render configuration."""

    def test_defaults(self):
        s = RenderSettings()
        assert s.max_bounces == MAX_BOUNCES == 5
        assert s.samples == 1
        assert s.scale == 1.0
        assert s.workers is None
        assert s.seed == 0
        assert s.supersampling is SuperSamplingMode.NONE

    def test_multiple_samples_are_stochastic(self):
        assert RenderSettings(samples=4).supersampling is SuperSamplingMode.STOCHASTIC

    def test_quality_levels(self):
        assert set(QUALITY_LEVELS) == {"interactive", "balanced", "high_quality"}
        s = RenderSettings.from_quality("interactive", seed=3)
        assert s.scale == QUALITY_LEVELS["interactive"].scale
        assert s.seed == 3

    def test_unknown_quality(self):
        with pytest.raises(SceneError):
            RenderSettings.from_quality("ultra")

    @pytest.mark.parametrize("kwargs", [
        {"samples": 0}, {"max_bounces": -1}, {"scale": 0}, {"workers": 0}, {"chunk_size": 0},
    ])
    def test_invalid_values(self, kwargs):
        with pytest.raises(SceneError):
            RenderSettings(**kwargs)


class TestRenderer:
    """Tests for rendering whole images."""

    def test_default_world(self, default_world, camera):
        canvas = Renderer(camera, default_world, RenderSettings(workers=1)).render()
        assert canvas.pixel_at(5, 5) == Color(0.38066, 0.47583, 0.2855)

    def test_pixel_color_matches_render(self, default_world, camera):
        r = Renderer(camera, default_world, RenderSettings(workers=1))
        assert r.pixel_color(5, 5) == Color(0.38066, 0.47583, 0.2855)

    def test_scale_changes_resolution(self, default_world):
        r = Renderer(Camera(20, 10, math.pi / 3), default_world, RenderSettings(scale=0.5, workers=1))
        assert (r.width, r.height) == (10, 5)
        canvas = r.render()
        assert (canvas.width, canvas.height) == (10, 5)

    def test_progress_reports_every_row(self, default_world, camera):
        seen = []
        settings = RenderSettings(workers=1, chunk_size=3)
        Renderer(camera, default_world, settings).render(progress=lambda done, total: seen.append((done, total)))
        assert seen[-1] == (11, 11)
        assert [d for d, _ in seen] == [3, 6, 9, 11]

    def test_supersampled_render_is_reproducible(self, default_world, camera):
        settings = RenderSettings(samples=3, seed=5, workers=1)
        a = Renderer(camera, default_world, settings).render()
        b = Renderer(camera, default_world, settings).render()
        np.testing.assert_array_equal(a.pixels, b.pixels)

    def test_seed_changes_supersampled_render(self, default_world, camera):
        a = Renderer(camera, default_world, RenderSettings(samples=3, seed=1, workers=1)).render()
        b = Renderer(camera, default_world, RenderSettings(samples=3, seed=2, workers=1)).render()
        assert not np.array_equal(a.pixels, b.pixels)

    def test_parallel_render_matches_serial(self, default_world, camera):
        serial = Renderer(camera, default_world, RenderSettings(samples=2, workers=1)).render()
        parallel = Renderer(camera, default_world, RenderSettings(samples=2, workers=2, chunk_size=2)).render()
        np.testing.assert_array_equal(serial.pixels, parallel.pixels)
