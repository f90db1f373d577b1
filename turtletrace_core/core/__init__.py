from .errors import RenderError, WindowInitError
from .events import InputEvent
from .ops import DrawOp, LineTo, MoveTo, OpLog, SetColor
from .lines import Line, LineSource, Lines, PenState, advance
from .frame_rate_controller import FrameRateController
from .turtle import Turtle

__all__ = [
    "DrawOp",
    "FrameRateController",
    "InputEvent",
    "Line",
    "LineSource",
    "LineTo",
    "Lines",
    "MoveTo",
    "OpLog",
    "PenState",
    "RenderError",
    "SetColor",
    "Turtle",
    "WindowInitError",
    "advance",
]
