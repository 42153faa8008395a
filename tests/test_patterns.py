"""Unit tests for procedural patterns and their transforms."""

import math

import pytest

from core.color import BLACK, WHITE, Color
from core.errors import NonInvertibleTransformError
from core.matrix import scaling, translation
from core.vector import point
from geometry import Sphere
from materials.patterns import (
    CheckerPattern,
    GradientPattern,
    RadialGradientPattern,
    RingPattern,
    StripePattern,
    TestPattern,
    ValueNoise,
)


class TestStripe:
    """Tests for stripes along x."""

    def test_constant_in_y_and_z(self):
        p = StripePattern([WHITE, BLACK])
        for q in (point(0, 0, 0), point(0, 1, 0), point(0, 2, 0), point(0, 0, 1), point(0, 0, 2)):
            assert p.pattern_at(q) == WHITE

    @pytest.mark.parametrize("x,expected", [
        (0, WHITE), (0.9, WHITE), (1, BLACK), (-0.1, BLACK), (-1, BLACK), (-1.1, WHITE),
    ])
    def test_alternates_in_x(self, x, expected):
        assert StripePattern([WHITE, BLACK]).pattern_at(point(x, 0, 0)) == expected

    def test_cycles_through_more_than_two_colors(self):
        red = Color(1, 0, 0)
        p = StripePattern([WHITE, BLACK, red])
        assert [p.pattern_at(point(x, 0, 0)) for x in (0, 1, 2, 3)] == [WHITE, BLACK, red, WHITE]

    def test_object_transform(self):
        s = Sphere(scaling(2, 2, 2))
        assert StripePattern([WHITE, BLACK]).pattern_at_shape(s, point(1.5, 0, 0)) == WHITE

    def test_pattern_transform(self):
        p = StripePattern([WHITE, BLACK], scaling(2, 2, 2))
        assert p.pattern_at_shape(Sphere(), point(1.5, 0, 0)) == WHITE

    def test_object_and_pattern_transform(self):
        s = Sphere(scaling(2, 2, 2))
        p = StripePattern([WHITE, BLACK], translation(0.5, 0, 0))
        assert p.pattern_at_shape(s, point(2.5, 0, 0)) == WHITE


class TestPatternSpace:
    """Tests for the world -> object -> pattern mapping."""

    def test_default_transform(self):
        assert TestPattern().pattern_at_shape(Sphere(), point(2, 3, 4)) == Color(2, 3, 4)

    def test_object_transform(self):
        s = Sphere(scaling(2, 2, 2))
        assert TestPattern().pattern_at_shape(s, point(2, 3, 4)) == Color(1, 1.5, 2)

    def test_pattern_transform(self):
        p = TestPattern(scaling(2, 2, 2))
        assert p.pattern_at_shape(Sphere(), point(2, 3, 4)) == Color(1, 1.5, 2)

    def test_both_transforms(self):
        s = Sphere(scaling(2, 2, 2))
        p = TestPattern(translation(0.5, 1, 1.5))
        assert p.pattern_at_shape(s, point(2.5, 3, 3.5)) == Color(0.75, 0.5, 0.25)

    def test_singular_pattern_transform(self):
        with pytest.raises(NonInvertibleTransformError):
            TestPattern(scaling(1, 0, 1))


class TestOtherPatterns:
    """Tests for gradients, rings and checkers."""

    @pytest.mark.parametrize("x,v", [(0, 1.0), (0.25, 0.75), (0.5, 0.5), (0.75, 0.25)])
    def test_gradient(self, x, v):
        assert GradientPattern(WHITE, BLACK).pattern_at(point(x, 0, 0)) == Color(v, v, v)

    @pytest.mark.parametrize("p,expected", [
        ((0, 0, 0), WHITE), ((1, 0, 0), BLACK), ((0, 0, 1), BLACK), ((0.708, 0, 0.708), BLACK),
    ])
    def test_ring(self, p, expected):
        assert RingPattern([WHITE, BLACK]).pattern_at(point(*p)) == expected

    @pytest.mark.parametrize("p,expected", [
        ((0, 0, 0), WHITE), ((0.99, 0, 0), WHITE), ((1.01, 0, 0), BLACK),
        ((0, 0.99, 0), WHITE), ((0, 1.01, 0), BLACK),
        ((0, 0, 0.99), WHITE), ((0, 0, 1.01), BLACK),
    ])
    def test_checker_repeats_on_every_axis(self, p, expected):
        assert CheckerPattern(WHITE, BLACK).pattern_at(point(*p)) == expected

    def test_radial_gradient(self):
        p = RadialGradientPattern(WHITE, BLACK)
        assert p.pattern_at(point(0, 0, 0)) == WHITE
        assert p.pattern_at(point(0, 0, 0.5)) == Color(0.5, 0.5, 0.5)
        assert p.pattern_at(point(0.3, 5, 0.4)) == Color(0.5, 0.5, 0.5)


class TestPerturbation:
    """Tests for noise-perturbed patterns."""

    def test_same_seed_same_colors(self):
        a = GradientPattern(WHITE, BLACK).perturb(seed=11, scale=0.3)
        b = GradientPattern(WHITE, BLACK).perturb(seed=11, scale=0.3)
        for q in (point(0.1, 0.2, 0.3), point(2.7, -1.4, 0.05)):
            assert a.pattern_at(q) == b.pattern_at(q)

    def test_noise_is_bounded(self, rng):
        noise = ValueNoise(rng, 0.5)
        for x in range(20):
            v = noise.offset(point(x * 0.37, x * 0.11, -x * 0.23))
            assert -0.5 <= v <= 0.5

    def test_noise_is_continuous(self, rng):
        noise = ValueNoise(rng, 1.0)
        assert math.isclose(noise.noise(1.3, 2.1, 0.7), noise.noise(1.3 + 1e-9, 2.1, 0.7), abs_tol=1e-6)


class TestPatternTransformIsFrozen:
    """Tests for replacing pattern transforms."""

    def test_in_place_edit_raises(self):
        p = TestPattern()
        with pytest.raises(ValueError):
            p.transform[0, 3] = 1.0

    def test_reassignment_takes_effect(self):
        p = TestPattern()
        p.transform = translation(1, 0, 0)
        assert p.pattern_at_shape(Sphere(), point(2, 3, 4)) == Color(1, 3, 4)
