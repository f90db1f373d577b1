from __future__ import annotations

import math
import operator

from turtletrace_core.render.animation import AnimationConfig, AnimationRenderer
from turtletrace_core.render.png import PngConfig, PngRenderer

from .lines import Lines
from .ops import LineTo, MoveTo, OpLog, SetColor


class Turtle:
    """A drawing cursor that records every pen command into its op log.

    Heading is in degrees, counter-clockwise, with 0 pointing along +x. It is
    never normalized, so ``heading()`` returns the full rotation history.
    """

    def __init__(self) -> None:
        self._x = 0.0
        self._y = 0.0
        self._h = 0.0
        self._ops = OpLog()

    @property
    def ops(self) -> OpLog:
        return self._ops

    def forward(self, dist: int) -> None:
        """Move forward, drawing a line (backwards if ``dist`` < 0).

        ``dist`` must be an integer; floats raise ``TypeError``. A non-finite
        heading leaves the position at NaN, which replays as pixel 0.
        """
        dist = _as_int(dist, "dist")
        h_rad = math.radians(self._h)
        c = math.cos(h_rad) if math.isfinite(h_rad) else math.nan
        s = math.sin(h_rad) if math.isfinite(h_rad) else math.nan
        self._x += dist * c
        self._y += dist * s
        self._ops.append(LineTo(self._x, self._y))

    def turn(self, degrees: float) -> None:
        # Rotation is applied by the next forward(); no op is recorded.
        self._h += degrees

    def move_to(self, nx: int, ny: int) -> None:
        """Jump to a new location without drawing a line."""
        self._x = float(_as_int(nx, "nx"))
        self._y = float(_as_int(ny, "ny"))
        self._ops.append(MoveTo(self._x, self._y))

    def set_color(self, r: int, g: int, b: int) -> None:
        """Set the color used for lines drawn after this call.

        Channels must be integers in ``0..255``; anything else is rejected
        rather than truncated.
        """
        channels = tuple(_as_int(value, name) for name, value in (("r", r), ("g", g), ("b", b)))
        for name, value in zip("rgb", channels):
            if not 0 <= value <= 255:
                raise ValueError(f"color channel {name} must be in 0..255, got {value}")
        self._ops.append(SetColor(*channels))

    def position(self) -> tuple[float, float]:
        return (self._x, self._y)

    def heading(self) -> float:
        return self._h

    def lines(self) -> Lines:
        """Restartable sequence of the lines walked so far."""
        return Lines(self._ops)

    def draw_png(self, config: PngConfig | None = None) -> PngRenderer:
        return PngRenderer(self, config=config)

    def draw_window(self, config: AnimationConfig | None = None) -> AnimationRenderer:
        return AnimationRenderer(self, config=config)


def _as_int(value: object, name: str) -> int:
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}") from None
