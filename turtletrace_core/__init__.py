"""Turtle graphics: record a pen path, then rasterize it to PNG or animate it in a window.

    t = Turtle()
    t.forward(40)
    t.turn(60.0)
    t.set_color(255, 64, 0)
    t.forward(70)
    t.draw_png().save("bent_line.png")
"""

from turtletrace_core.core import Line, LineTo, Lines, MoveTo, OpLog, RenderError, SetColor, Turtle, WindowInitError
from turtletrace_core.render import AnimationConfig, AnimationRenderer, AnimationResult, PngConfig, PngRenderer

__all__ = [
    "AnimationConfig",
    "AnimationRenderer",
    "AnimationResult",
    "Line",
    "LineTo",
    "Lines",
    "MoveTo",
    "OpLog",
    "PngConfig",
    "PngRenderer",
    "RenderError",
    "SetColor",
    "Turtle",
    "WindowInitError",
]
