"""Tests for the domain transform combinators."""

import math
import warnings

import numpy.testing as npt
import pytest

from surfaces import (
    Point,
    as_surface,
    slope,
    steps,
    checker,
    rings,
    ellipse,
    rotate,
    translate,
    scale,
    invert,
    flip,
    mul,
    add,
)
from surfaces.combinators import Rotate, Mul, Add


POINTS = [
    Point(0, 0),
    Point(1, 2),
    Point(-3.5, 0.25),
    Point(10, -7),
    Point(0.1, 0.9),
]


def _plane(p: Point) -> float:
    """Smooth, asymmetric test surface."""
    return 3 * p.x - 2 * p.y + 1


PLANE = as_surface(_plane)


class TestRotate:
    @pytest.mark.parametrize("f", [PLANE, checker(), rings(0.5)], ids=repr)
    @pytest.mark.parametrize("p", POINTS)
    def test_zero_rotation_is_identity(self, f, p):
        assert rotate(f, 0)(p) == f(p)

    @pytest.mark.parametrize("p", POINTS)
    def test_full_turn_is_periodic(self, p):
        npt.assert_allclose(rotate(PLANE, 360)(p), PLANE(p), atol=1e-9)
        npt.assert_allclose(rotate(PLANE, -720)(p), PLANE(p), atol=1e-9)

    def test_samples_point_rotated_by_minus_angle(self):
        f = rotate(slope(), 90)
        assert f(Point(0, 1)) == pytest.approx(1.0)
        assert f(Point(1, 0)) == pytest.approx(0.0, abs=1e-12)

    @pytest.mark.parametrize("p", POINTS)
    def test_rotations_add_up(self, p):
        npt.assert_allclose(rotate(rotate(PLANE, 30), 60)(p), rotate(PLANE, 90)(p), atol=1e-9)

    def test_repr_shows_parameters(self):
        assert repr(rotate(checker(), 45)) == "Rotate(field=Checker(s=1.0), degrees=45.0)"

    def test_rejects_bad_arguments(self):
        with pytest.raises(TypeError):
            rotate(3, 10)
        with pytest.raises(TypeError):
            rotate(slope(), "ten")


class TestTranslate:
    @pytest.mark.parametrize("a, b", [(2, 3), (-2, 3), (2, -3), (-2.5, -0.5), (0, 0)])
    @pytest.mark.parametrize("p", POINTS)
    def test_offsets_by_absolute_value(self, a, b, p):
        expected = PLANE(Point(p.x + abs(a), p.y + abs(b)))
        assert translate(PLANE, Point(a, b))(p) == expected

    def test_accepts_pairs(self):
        assert translate(slope(), (-4, 1))(Point(1, 0)) == 5.0

    @pytest.mark.parametrize("bad", [5, (1, 2, 3), ("a", "b")])
    def test_rejects_non_vectors(self, bad):
        with pytest.raises(TypeError):
            translate(slope(), bad)


class TestScale:
    def test_divides_coordinates(self):
        assert scale(slope(), Point(2, 4))(Point(4, 8)) == 2.0
        assert scale(as_surface(lambda p: p.y), (2, 4))(Point(4, 8)) == 2.0
        assert scale(steps(), Point(2, 1))(Point(5, 0)) == 2.0

    def test_negative_factor_mirrors(self):
        assert scale(slope(), (-1, 1))(Point(3, 0)) == -3.0

    def test_nonzero_factors_do_not_warn(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            scale(slope(), (0.5, 3))

    def test_zero_factor_warns_and_stays_total(self):
        with pytest.warns(RuntimeWarning):
            f = scale(slope(), Point(0, 1))
        assert f(Point(1, 0)) == math.inf
        assert f(Point(-1, 0)) == -math.inf
        assert math.isnan(f(Point(0, 0)))

    def test_zero_factor_propagates_through_generators(self):
        with pytest.warns(RuntimeWarning):
            f = scale(checker(), (1, 0))
        assert math.isnan(f(Point(1, 1)))
        with pytest.warns(RuntimeWarning):
            g = scale(ellipse(), (0, 0))
        assert g(Point(1, 1)) == 0.0


class TestReflections:
    def test_invert_swaps_coordinates(self):
        assert invert(PLANE)(Point(1, 2)) == PLANE(Point(2, 1))

    def test_flip_negates_x(self):
        assert flip(slope())(Point(3, 1)) == -3.0
        assert flip(PLANE)(Point(1, 2)) == PLANE(Point(-1, 2))

    @pytest.mark.parametrize("p", POINTS)
    def test_invert_is_involution(self, p):
        assert invert(invert(PLANE))(p) == PLANE(p)
        assert invert(invert(checker(0.3)))(p) == checker(0.3)(p)

    @pytest.mark.parametrize("p", POINTS)
    def test_flip_is_involution(self, p):
        assert flip(flip(PLANE))(p) == PLANE(p)
        assert flip(flip(checker(0.3)))(p) == checker(0.3)(p)


class TestValueTransforms:
    def test_mul_and_add(self):
        assert mul(slope(), 3)(Point(2, 0)) == 6.0
        assert add(slope(), -1)(Point(2, 0)) == 1.0

    @pytest.mark.parametrize("c1, c2", [(2, 3), (0.5, -4), (-1.5, 0.1), (0, 7)])
    @pytest.mark.parametrize("p", POINTS)
    def test_mul_is_associative(self, c1, c2, p):
        npt.assert_allclose(mul(mul(PLANE, c1), c2)(p), mul(PLANE, c1 * c2)(p), rtol=1e-12)

    def test_post_transform_order(self):
        # add then mul: (x + 1) * 2
        f = mul(add(slope(), 1), 2)
        assert f(Point(3, 0)) == 8.0

    def test_operators(self):
        p = Point(3, 0)
        assert isinstance(slope() * 2, Mul)
        assert isinstance(2 * slope(), Mul)
        assert isinstance(slope() + 1, Add)
        assert isinstance(1 + slope(), Add)
        assert (0.5 * slope() + 1)(p) == 2.5

    def test_operators_reject_non_reals(self):
        with pytest.raises(TypeError):
            slope() * "2"
        with pytest.raises(TypeError):
            slope() + slope()


class TestComposition:
    def test_transforms_nest(self):
        f = rotate(scale(translate(checker(), Point(0.5, 0.5)), Point(2, 2)), 45)
        assert isinstance(f, Rotate)
        for p in POINTS:
            assert f(p) in (0.0, 1.0)

    def test_plain_callables_are_accepted(self):
        f = flip(lambda p: p.x * 10 + p.y)
        assert f(Point(1, 2)) == -8.0
