"""Tests for types.py: Vec2 arithmetic, coercion, bounds checks, colors."""

import sys

import pytest

from canvas_tui.canvas import Basic
from canvas_tui.errors import ItemTooBig, NegativeValue, TooLarge
from canvas_tui.types import Color, Vec2, as_vec2, check_bounds, trunc_div


class TestVec2Arithmetic:
    def test_add_vec_tuple_and_scalar(self):
        assert Vec2(1, 2) + Vec2(3, 4) == Vec2(4, 6)
        assert Vec2(1, 2) + (3, 4) == Vec2(4, 6)
        assert Vec2(1, 2) + 1 == Vec2(2, 3)
        assert 1 + Vec2(1, 2) == Vec2(2, 3)

    def test_sub(self):
        assert Vec2(5, 5) - (1, 2) == Vec2(4, 3)
        assert 5 - Vec2(1, 2) == Vec2(4, 3)

    def test_mul_is_elementwise(self):
        assert Vec2(2, 3) * 2 == Vec2(4, 6)
        assert Vec2(2, 3) * (3, 4) == Vec2(6, 12)

    def test_neg(self):
        assert -Vec2(1, -2) == Vec2(-1, 2)

    def test_tdiv_truncates_toward_zero(self):
        assert Vec2(-3, 3).tdiv(2) == Vec2(-1, 1)
        assert Vec2(-3, 3) // 2 == Vec2(-2, 1)

    def test_trunc_div(self):
        assert trunc_div(7, 2) == 3
        assert trunc_div(-7, 2) == -3
        assert trunc_div(7, -2) == -3

    def test_unpacks(self):
        x, y = Vec2(4, 5)
        assert (x, y) == (4, 5)

    def test_str(self):
        assert str(Vec2(1, -2)) == "(1, -2)"


class TestVec2Conversion:
    def test_to_unsigned_rejects_negative(self):
        with pytest.raises(NegativeValue) as exc:
            Vec2(-1, 0).to_unsigned("offset")
        assert exc.value.value == -1
        assert exc.value.name == "offset"

    def test_to_unsigned(self):
        assert Vec2(3, 4).to_unsigned() == (3, 4)

    def test_from_unsigned_rejects_huge(self):
        with pytest.raises(TooLarge) as exc:
            Vec2.from_unsigned(sys.maxsize + 1, 0)
        assert exc.value.value == sys.maxsize + 1

    def test_positions_are_column_major(self):
        assert list(Vec2(2, 2).positions()) == [Vec2(0, 0), Vec2(0, 1), Vec2(1, 0), Vec2(1, 1)]

    def test_positions_empty(self):
        assert list(Vec2(0, 3).positions()) == []


class TestAsVec2:
    def test_accepts_common_forms(self):
        assert as_vec2(Vec2(1, 2)) == Vec2(1, 2)
        assert as_vec2((1, 2)) == Vec2(1, 2)
        assert as_vec2(3) == Vec2(3, 3)

    def test_accepts_canvas(self):
        assert as_vec2(Basic((3, 4))) == Vec2(3, 4)

    def test_rejects_bool_and_junk(self):
        with pytest.raises(TypeError):
            as_vec2(True)
        with pytest.raises(TypeError):
            as_vec2("3x4")


class TestCheckBounds:
    def test_fits(self):
        check_bounds((1, 1), (2, 2), (3, 3), "box")

    def test_too_big(self):
        with pytest.raises(ItemTooBig) as exc:
            check_bounds((2, 2), (2, 2), (3, 3), "box")
        err = exc.value
        assert err.name == "box"
        assert err.pos == Vec2(2, 2)
        assert err.size == Vec2(2, 2)
        assert err.canvas == Vec2(3, 3)
        assert "box" in str(err)


class TestColor:
    def test_from_hex(self):
        assert Color.from_hex("#ff8000") == Color(255, 128, 0)
        assert Color.from_hex("000000") == Color.BLACK

    def test_from_hex_bad_length(self):
        with pytest.raises(ValueError):
            Color.from_hex("#fff")

    def test_grayscale(self):
        assert Color.grayscale(255) == Color.WHITE
        assert Color(1, 2, 3).rgb == (1, 2, 3)
