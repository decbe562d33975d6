"""Centralized configuration for canvas-tui."""

from __future__ import annotations

from dataclasses import dataclass

from canvas_tui.charset import BoxChars, CharSet


@dataclass
class RenderConfig:
    """Configuration for drawing and rendering a canvas."""

    charset: CharSet = CharSet.Light
    color: bool = True
    fill: str = " "

    @property
    def chars(self) -> BoxChars:
        return self.charset.chars
