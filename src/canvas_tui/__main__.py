"""CLI entry point for canvas-tui."""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable

import click

from canvas_tui.canvas import Basic, Canvas, Window
from canvas_tui.charset import CharSet
from canvas_tui.config import RenderConfig
from canvas_tui.grid import full_grid_size
from canvas_tui.justification import Centered
from canvas_tui.render import render
from canvas_tui.result import DrawResult
from canvas_tui.types import Color, Vec2
from canvas_tui.widgets import Title

logger = logging.getLogger(__name__)


class SizeParam(click.ParamType):
    """A ``WxH`` pair such as ``20x5``."""

    name = "WxH"

    def convert(self, value, param, ctx) -> Vec2:
        if isinstance(value, Vec2):
            return value
        parts = str(value).lower().split("x")
        if len(parts) != 2:
            self.fail(f"expected WxH, got '{value}'", param, ctx)
        try:
            x, y = int(parts[0]), int(parts[1])
        except ValueError:
            self.fail(f"expected WxH with integer parts, got '{value}'", param, ctx)
        if x < 0 or y < 0:
            self.fail(f"sizes cannot be negative, got '{value}'", param, ctx)
        return Vec2(x, y)


SIZE = SizeParam()

_CHARSETS = [charset.value for charset in CharSet]


def _common_options(command: Callable) -> Callable:
    command = click.option("--no-color", "no_color", is_flag=True, help="Render without terminal colors")(command)
    command = click.option("--verbose", "-v", "verbose", is_flag=True, help="Log debug output to stderr")(command)
    command = click.option(
        "--output", "-o", "output", type=str, default=None, help="Write output to this file instead of stdout"
    )(command)
    command = click.option("--fill", "fill", type=str, default=None, help="Character to fill the inside with")(command)
    command = click.option(
        "--charset", "-c", "charset", type=click.Choice(_CHARSETS), default=CharSet.Light.value, help="Box characters"
    )(command)
    return command


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _single_char(fill: str | None) -> str | None:
    if fill is not None and len(fill) != 1:
        click.echo(f"error: --fill takes a single character, got '{fill}'", err=True)
        sys.exit(1)
    return fill


def _emit(canvas: Canvas, result: DrawResult, config: RenderConfig, output: str | None) -> None:
    error = result.discard_info()
    if error is not None:
        click.echo(f"error: {error}", err=True)
        sys.exit(1)

    rendered = render(canvas, config)
    if output:
        try:
            with open(output, "w", encoding="utf-8") as f:
                f.write(click.unstyle(rendered))
        except OSError as e:
            click.echo(f"error: cannot write '{output}': {e}", err=True)
            sys.exit(1)
    else:
        click.echo(rendered, nl=False)


@click.group()
def main() -> None:
    """Draw boxes and grids onto a character canvas."""


@main.command()
@click.option("--cell", "cell", type=SIZE, default="3x1", show_default=True, help="Size of each cell")
@click.option("--dims", "dims", type=SIZE, default="2x2", show_default=True, help="Columns x rows")
@click.option("--size", "size", type=SIZE, default=None, help="Canvas size (defaults to the grid plus a margin)")
@click.option("--labels", "labels", is_flag=True, help="Write each cell's column,row inside it")
@_common_options
def grid(
    cell: Vec2,
    dims: Vec2,
    size: Vec2 | None,
    labels: bool,
    charset: str,
    fill: str | None,
    output: str | None,
    verbose: bool,
    no_color: bool,
) -> None:
    """Draw a grid of DIMS cells, each CELL big."""
    _configure_logging(verbose)
    config = RenderConfig(charset=CharSet(charset), color=not no_color, fill=_single_char(fill) or " ")
    if size is None:
        size = full_grid_size(cell, dims) + 2
    logger.debug("drawing a %s grid of %s cells on a %s canvas", dims, cell, size)

    canvas = Basic(size)
    result = canvas.grid(Centered(), cell, dims, config.chars)
    if fill is not None:
        result = result.fill_inside(config.fill)
    if labels:

        def label(window: Window, at: Vec2) -> DrawResult:
            return window.text(Centered(), f"{at.x},{at.y}").foreground(Color.from_hex("#5fafff"))

        result = result.draw_inside(label)
    _emit(canvas, result, config, output)


@main.command()
@click.option("--box", "box", type=SIZE, default="12x3", show_default=True, help="Size of the box, border included")
@click.option("--size", "size", type=SIZE, default=None, help="Canvas size (defaults to the box plus a margin)")
@click.option("--text", "text", type=str, default=None, help="Title to center inside the box")
@_common_options
def box(
    box: Vec2,
    size: Vec2 | None,
    text: str | None,
    charset: str,
    fill: str | None,
    output: str | None,
    verbose: bool,
    no_color: bool,
) -> None:
    """Draw a box, optionally with a highlighted title inside."""
    _configure_logging(verbose)
    config = RenderConfig(charset=CharSet(charset), color=not no_color, fill=_single_char(fill) or " ")
    if size is None:
        size = box + 2
    logger.debug("drawing a %s box on a %s canvas", box, size)

    canvas = Basic(size)
    result = canvas.rect(Centered(), box, config.chars)
    if fill is not None:
        result = result.fill_inside(config.fill)
    if text is not None:
        title = Title(text, foreground=Color.BLACK, background=Color.WHITE)
        result = result.draw_inside(lambda window: window.draw(Centered(), title))
    _emit(canvas, result, config, output)


if __name__ == "__main__":
    main()
