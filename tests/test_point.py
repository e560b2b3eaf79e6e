"""Tests for the immutable Point and the Real policy."""

import copy
import pickle

import numpy as np
import numpy.testing as npt
import pytest

from surfaces.core import Point, ORIGIN, as_real, divide


class TestAsReal:
    def test_int_becomes_float(self):
        value = as_real(3)
        assert value == 3.0
        assert isinstance(value, float)

    def test_numpy_scalar(self):
        assert as_real(np.float32(0.5)) == 0.5
        assert as_real(np.int64(7)) == 7.0

    @pytest.mark.parametrize("bad", ["1", None, 1 + 2j, [1]])
    def test_rejects_non_reals(self, bad):
        with pytest.raises(TypeError):
            as_real(bad)

    def test_divide_by_zero_is_ieee(self):
        assert divide(1, 0) == float('inf')
        assert divide(-1, 0) == float('-inf')
        assert np.isnan(divide(0, 0))


class TestPoint:
    def test_coordinates(self):
        p = Point(1, -2.5)
        assert p.x == 1.0
        assert p.y == -2.5
        assert isinstance(p.x, float)

    def test_immutable(self):
        p = Point(1, 2)
        with pytest.raises(AttributeError):
            p.x = 3
        with pytest.raises(AttributeError):
            del p.y
        with pytest.raises(AttributeError):
            p.z = 0

    def test_equality_is_fieldwise(self):
        assert Point(1, 2) == Point(1.0, 2.0)
        assert Point(1, 2) != Point(2, 1)
        assert Point(0, 0) == ORIGIN

    def test_not_equal_to_tuple(self):
        assert Point(1, 2) != (1, 2)

    def test_hashable(self):
        assert len({Point(1, 2), Point(1.0, 2.0), Point(2, 1)}) == 2

    def test_rejects_non_numbers(self):
        with pytest.raises(TypeError):
            Point("1", 2)
        with pytest.raises(TypeError):
            Point(1, None)

    def test_unpacking(self):
        x, y = Point(3, 4)
        assert (x, y) == (3.0, 4.0)

    def test_tuple_round_trip(self):
        p = Point(3, 4)
        assert p.to_tuple() == (3.0, 4.0)
        assert Point.from_tuple(p.to_tuple()) == p
        assert Point.from_tuple(p) is p

    @pytest.mark.parametrize("bad", [5, (1, 2, 3), (1,), "ab"])
    def test_from_tuple_rejects_non_pairs(self, bad):
        with pytest.raises(TypeError):
            Point.from_tuple(bad)

    def test_to_vector(self):
        npt.assert_array_equal(Point(3, 4).to_vector(), [3.0, 4.0])
        assert Point(3, 4).to_vector().dtype == np.float64

    def test_copy_and_pickle(self):
        p = Point(1.5, -2)
        assert copy.copy(p) == p
        assert copy.deepcopy(p) == p
        assert pickle.loads(pickle.dumps(p)) == p


class TestPointText:
    @pytest.mark.parametrize("p, text", [
        (Point(1.5, -2), "1.5 -2"),
        (Point(0, 0), "0 0"),
        (Point(0.1, 100), "0.1 100"),
        (Point(1e10, -0.25), "1e+10 -0.25"),
        (Point(float('inf'), float('nan')), "inf nan"),
    ])
    def test_str(self, p, text):
        assert str(p) == text

    def test_single_space_no_trailing_delimiter(self):
        text = str(Point(3, 4))
        assert text.count(' ') == 1
        assert not text.endswith(' ')

    def test_repr(self):
        assert repr(Point(1.5, -2)) == "Point(x=1.5, y=-2.0)"
