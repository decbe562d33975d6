"""Tests for canvas.py — Basic, Window, ErrorCatcher and error chaining."""

import logging

import pytest

from canvas_tui.canvas import Basic, ErrorCatcher, Window
from canvas_tui.charset import LIGHT
from canvas_tui.errors import (
    CanvasError,
    ItemTooBig,
    JustificationOutOfBounds,
    NegativeValue,
    OutOfBounds,
    RecoveryError,
    TextOverflow,
)
from canvas_tui.justification import AtUnchecked, Centered, TopLeft
from canvas_tui.shapes import Rect, Single
from canvas_tui.types import Cell, Color, Vec2
from canvas_tui.widgets import Title


class TestCanvasBasics:
    def test_new_canvas_is_blank(self):
        assert Basic((3, 2)).to_string() == "   \n   \n"

    def test_filled_with(self):
        canvas = Basic.filled_with((2, 1), ".", Color.WHITE, None)
        assert canvas.get((1, 0)) == Cell(".", Color.WHITE, None)
        assert Basic.filled_with_text((2, 1), "#").to_string() == "##\n"

    def test_negative_size(self):
        with pytest.raises(NegativeValue) as exc:
            Basic((-1, 2))
        assert exc.value.name == "width"

    def test_set_then_get(self):
        canvas = Basic((3, 3))
        result = canvas.set((1, 1), "x")
        assert result.ok
        assert result.shape == Single(Vec2(1, 1))
        assert result.canvas is canvas
        assert canvas.get((1, 1)).text == "x"

    def test_set_out_of_bounds(self):
        result = Basic((3, 1)).set((3, 0), "x")
        assert not result.ok
        assert isinstance(result.error, OutOfBounds)
        assert (result.error.x, result.error.y) == (3, 0)

    def test_set_negative_position(self):
        assert isinstance(Basic((3, 1)).set((-1, 0), "x").error, OutOfBounds)

    def test_get_out_of_bounds_raises(self):
        canvas = Basic((3, 2))
        with pytest.raises(OutOfBounds):
            canvas.get((3, 0))
        with pytest.raises(OutOfBounds):
            canvas.get((0, 2))

    def test_highlight_keeps_unset_color(self):
        canvas = Basic((1, 1))
        canvas.highlight((0, 0), foreground=Color.WHITE).check()
        canvas.highlight((0, 0), background=Color.BLACK).check()
        assert canvas.get((0, 0)) == Cell(" ", Color.WHITE, Color.BLACK)

    def test_fill(self):
        canvas = Basic((2, 2))
        assert canvas.fill("#").shape == Rect(Vec2(0, 0), Vec2(2, 2))
        assert canvas.to_string() == "##\n##\n"

    def test_fill_box_too_big_writes_nothing(self):
        canvas = Basic((3, 3))
        result = canvas.fill_box((2, 2), (2, 2), "x")
        assert isinstance(result.error, ItemTooBig)
        assert result.error.name == "fill"
        assert canvas.to_string() == "   \n   \n   \n"

    def test_highlight_box(self):
        canvas = Basic((3, 1))
        canvas.highlight_box((1, 0), (2, 1), background=Color.WHITE).check()
        assert canvas.get((0, 0)).background is None
        assert canvas.get((2, 0)).background == Color.WHITE
        assert canvas.highlight_box((2, 0), (2, 1)).error.name == "highlight"

    def test_cells_hold_one_character(self):
        canvas = Basic((3, 1))
        with pytest.raises(ValueError):
            canvas.set((0, 0), "ab")
        with pytest.raises(ValueError):
            canvas.set((0, 0), "")
        with pytest.raises(ValueError):
            canvas.fill_box((0, 0), (2, 1), "ab")
        with pytest.raises(ValueError):
            Basic((2, 2), fill="..")
        assert canvas.to_string() == "   \n"


class TestText:
    def test_centered(self):
        result = Basic((7, 3)).text(Centered(), "abc")
        assert result.shape == Rect(Vec2(2, 1), Vec2(3, 1))

    def test_overflow_keeps_prefix(self):
        canvas = Basic((5, 1))
        result = canvas.text_absolute((2, 0), "hello")
        err = result.error
        assert isinstance(err, TextOverflow)
        assert err.starting == Vec2(2, 0)
        assert err.ending == Vec2(5, 0)
        assert err.text == "hello"
        assert err.canvas == Vec2(5, 1)
        assert canvas.to_string() == "  hel\n"

    def test_text_too_long_to_justify(self):
        assert isinstance(Basic((3, 1)).text(Centered(), "hello").error, JustificationOutOfBounds)


class TestRect:
    def test_rect_absolute(self):
        canvas = Basic((4, 3))
        result = canvas.rect_absolute((0, 0), (4, 3), LIGHT)
        assert result.shape == Rect(Vec2(0, 0), Vec2(4, 3))
        assert canvas.to_string() == "┌──┐\n│  │\n└──┘\n"

    def test_rect_centered(self):
        canvas = Basic((6, 5))
        assert canvas.rect(Centered(), (4, 3), LIGHT).shape == Rect(Vec2(1, 1), Vec2(4, 3))

    def test_rect_too_big(self):
        result = Basic((4, 3)).rect_absolute((1, 0), (4, 3), LIGHT)
        assert result.error.name == "rect"

    def test_grid_too_big(self):
        result = Basic((6, 5)).grid_absolute((0, 0), (2, 1), (2, 2), LIGHT)
        assert isinstance(result.error, ItemTooBig)
        assert result.error.name == "grid"


class TestChaining:
    def test_first_error_wins(self):
        canvas = Basic((3, 3))
        result = canvas.set((0, 0), "a").set((9, 9), "b").set((1, 0), "c")
        assert isinstance(result.error, OutOfBounds)
        assert (result.error.x, result.error.y) == (9, 9)
        assert canvas.get((0, 0)).text == "a"
        assert canvas.get((1, 0)).text == " "

    def test_failed_result_passes_same_error(self):
        canvas = Basic((3, 3))
        failed = canvas.set((9, 9), "b")
        again = failed.set((0, 0), "c").rect_absolute((0, 0), (3, 3), LIGHT).fill("#")
        assert again.error is failed.error
        assert canvas.to_string() == "   \n   \n   \n"

    def test_result_forwards_to_canvas(self):
        canvas = Basic((3, 1))
        canvas.set((0, 0), "a").set((1, 0), "b").text_absolute((2, 0), "c").check()
        assert canvas.to_string() == "abc\n"

    def test_failed_result_raises_on_reads(self):
        failed = Basic((3, 3)).set((9, 9), "b")
        with pytest.raises(OutOfBounds):
            failed.window_absolute((0, 0), (1, 1))
        with pytest.raises(OutOfBounds):
            failed.window(Centered(), (1, 1))
        with pytest.raises(OutOfBounds):
            failed.shape

    def test_check(self):
        canvas = Basic((1, 1))
        ok = canvas.set((0, 0), "x")
        assert ok.check() is ok
        with pytest.raises(OutOfBounds):
            canvas.set((1, 0), "x").check()

    def test_discard_info(self):
        canvas = Basic((1, 1))
        assert canvas.set((0, 0), "x").discard_info() is None
        assert isinstance(canvas.set((1, 0), "x").discard_info(), OutOfBounds)
        assert canvas.set((1, 0), "x").discard_result() is None


class TestWindow:
    def test_writes_are_translated(self):
        canvas = Basic((5, 5))
        window = canvas.window_absolute((1, 1), (3, 3))
        assert isinstance(window, Window)
        assert window.size == Vec2(3, 3)
        window.set((0, 0), "x").check()
        assert canvas.get((1, 1)).text == "x"
        assert window.get((0, 0)).text == "x"

    def test_justified_window(self):
        canvas = Basic((5, 5))
        window = canvas.window(Centered(), (3, 3))
        window.text(Centered(), "o").check()
        assert canvas.get((2, 2)).text == "o"
        assert TopLeft().window(canvas, (2, 2)).offset == Vec2(1, 1)

    def test_nested_windows(self):
        canvas = Basic((5, 5))
        inner = canvas.window_absolute((1, 1), (3, 3)).window_absolute((1, 1), (1, 1))
        inner.set((0, 0), "y").check()
        assert canvas.get((2, 2)).text == "y"

    def test_window_too_big(self):
        with pytest.raises(ItemTooBig) as exc:
            Basic((5, 5)).window_absolute((3, 3), (3, 3))
        assert exc.value.name == "window"

    def test_can_decorate_own_edge(self):
        canvas = Basic((5, 5))
        window = canvas.window_absolute((1, 1), (3, 3))
        window.text(AtUnchecked(Vec2(3, 0)), "z").check()
        assert canvas.get((4, 1)).text == "z"

    def test_backing_canvas_still_bounds_writes(self):
        window = Basic((5, 5)).window_absolute((1, 1), (3, 3))
        assert isinstance(window.set((4, 0), "x").error, OutOfBounds)


class TestErrorCatcher:
    def test_callback_runs_once_per_error(self):
        errors = []
        canvas = Basic((3, 1)).when_error(lambda inner, err: errors.append(err))
        assert isinstance(canvas, ErrorCatcher)
        result = canvas.set((5, 0), "x").set((6, 0), "y")
        assert len(errors) == 1
        assert errors[0] is result.error

    def test_nested_failures_throw_once(self):
        errors = []
        canvas = Basic((3, 3)).when_error(lambda inner, err: errors.append(err))
        canvas.fill_box((2, 2), (2, 2), "x")
        canvas.text_absolute((1, 0), "long")
        canvas.rect_absolute((1, 1), (3, 3), LIGHT)
        assert [type(err) for err in errors] == [ItemTooBig, TextOverflow, ItemTooBig]

    def test_callback_gets_inner_canvas(self):
        seen = []
        inner = Basic((3, 1))
        inner.when_error(lambda canvas, err: seen.append(canvas)).set((9, 0), "x")
        assert seen == [inner]

    def test_fallback_drawing(self):
        inner = Basic((5, 1))
        catcher = inner.when_error(lambda canvas, err: canvas.text_absolute((0, 0), "ERR"))
        result = catcher.text_absolute((3, 0), "hello")
        assert isinstance(result.error, TextOverflow)
        assert inner.to_string() == "ERRhe\n"

    def test_windows_throw_to_catcher(self):
        errors = []
        catcher = Basic((5, 5)).when_error(lambda inner, err: errors.append(err))
        window = catcher.window_absolute((1, 1), (3, 3))
        window.set((10, 0), "x")
        assert len(errors) == 1

    def test_window_creation_throws(self):
        errors = []
        catcher = Basic((5, 5)).when_error(lambda inner, err: errors.append(err))
        with pytest.raises(ItemTooBig):
            catcher.window_absolute((4, 4), (3, 3))
        assert len(errors) == 1

    def test_failing_callback_is_fatal(self):
        catcher = Basic((3, 1)).when_error(lambda canvas, err: canvas.set((99, 0), "!"))
        with pytest.raises(RecoveryError):
            catcher.set((9, 0), "a")

    def test_raising_callback_is_fatal(self):
        def recover(canvas, err):
            raise OutOfBounds(0, 0)

        with pytest.raises(RecoveryError):
            Basic((3, 1)).when_error(recover).set((9, 0), "a")

    def test_catcher_has_no_error(self):
        catcher = Basic((3, 1)).when_error(lambda canvas, err: None)
        assert catcher.error is None
        assert catcher.size == Vec2(3, 1)

    def test_logs_recovery(self, caplog):
        catcher = Basic((3, 1)).when_error(lambda canvas, err: None)
        with caplog.at_level(logging.DEBUG, logger="canvas_tui.canvas"):
            catcher.set((9, 0), "a")
        assert "running error callback" in caplog.text


class TestWidgets:
    def test_draw_title(self):
        canvas = Basic((7, 3))
        result = canvas.draw(Centered(), Title("foo", Color.BLACK, Color.WHITE))
        assert result.shape == Rect(Vec2(1, 1), Vec2(5, 1))
        assert canvas.to_string() == "       \n  foo  \n       \n"
        assert canvas.get((0, 1)).foreground is None
        assert canvas.get((1, 1)).foreground == Color.BLACK
        assert canvas.get((2, 1)).foreground == Color.BLACK
        assert canvas.get((5, 1)).background == Color.WHITE
        assert canvas.get((6, 1)).foreground is None

    def test_title_that_does_not_fit(self):
        assert isinstance(Basic((4, 1)).draw(Centered(), Title("long")).error, JustificationOutOfBounds)

    def test_bounds_error_names_widget(self):
        result = Basic((4, 1)).draw(AtUnchecked(Vec2(1, 0)), Title("ab"))
        assert isinstance(result.error, ItemTooBig)
        assert result.error.name == "title"

    def test_failing_widget(self):
        class Broken:
            name = "broken"

            def size(self, container):
                return Vec2(1, 1)

            def draw(self, canvas):
                return canvas.set((5, 5), "x")

        assert isinstance(Basic((3, 3)).draw(Centered(), Broken()).error, CanvasError)


class TestDocumentedExamples:
    def test_set_get_everywhere(self):
        canvas = Basic((4, 3))
        for pos in canvas.size.positions():
            canvas.set(pos, "*").check()
            assert canvas.get(pos).text == "*"

    def test_centered_odd_object(self):
        assert Centered().resolve((5, 4), (3, 2)) == Vec2(1, 1)

    def test_text_overflow_fields(self):
        err = Basic((5, 3)).text_absolute((2, 1), "hello").error
        assert err.starting == Vec2(2, 1)
        assert err.ending == Vec2(5, 1)
        assert err.canvas == Vec2(5, 3)

    def test_rect_corner_and_edge(self):
        canvas = Basic((5, 5))
        canvas.rect_absolute((1, 1), (3, 3), LIGHT).check()
        assert canvas.get((1, 1)).text == "┌"
        assert canvas.get((2, 1)).text == "─"

    def test_grid_intersection(self):
        canvas = Basic((7, 5))
        canvas.grid_absolute((0, 0), (2, 1), (2, 2), LIGHT).check()
        assert canvas.get((3, 2)).text == "┼"

    def test_placeholder_then_keep_drawing(self):
        catcher = Basic((3, 3)).when_error(lambda canvas, err: canvas.set((0, 0), "?"))
        assert not catcher.set((9, 9), "x").ok
        assert catcher.get((0, 0)).text == "?"
        assert catcher.set((1, 1), "y").ok
        assert catcher.get((1, 1)).text == "y"
