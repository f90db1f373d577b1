from __future__ import annotations

from dataclasses import dataclass, replace
import math
from typing import Iterable, Iterator, Protocol

from .ops import DrawOp, LineTo, MoveTo, SetColor


RGB = tuple[int, int, int]
WHITE: RGB = (255, 255, 255)
PIXEL_MIN = -(2**31)
PIXEL_MAX = 2**31 - 1


@dataclass(frozen=True)
class Line:
    """A line with integer pixel endpoints and the color it is drawn in.

    ``color_changed`` is set when a color change was recorded since the
    previous line, so a renderer holding draw-color state can skip updates.
    """

    start: tuple[int, int]
    end: tuple[int, int]
    color: RGB
    color_changed: bool = False


@dataclass(frozen=True)
class PenState:
    x: int = 0
    y: int = 0
    color: RGB = WHITE
    color_changed: bool = True


def to_pixel(value: float) -> int:
    """Truncate a coordinate toward zero, saturating at the 32-bit range; NaN maps to 0."""
    if math.isnan(value):
        return 0
    return int(min(max(value, PIXEL_MIN), PIXEL_MAX))


def advance(state: PenState, op: DrawOp) -> tuple[PenState, Line | None]:
    """Fold one op into the pen state, returning the line it emits if any."""
    if isinstance(op, MoveTo):
        return replace(state, x=to_pixel(op.x), y=to_pixel(op.y)), None
    if isinstance(op, SetColor):
        return replace(state, color=(op.r, op.g, op.b), color_changed=True), None
    if isinstance(op, LineTo):
        nx, ny = to_pixel(op.x), to_pixel(op.y)
        line = Line(
            start=(state.x, state.y),
            end=(nx, ny),
            color=state.color,
            color_changed=state.color_changed,
        )
        return replace(state, x=nx, y=ny, color_changed=False), line
    raise TypeError(f"unsupported drawing operation: {op!r}")


class Lines:
    """Lazy, restartable sequence of lines folded from an op log.

    Every ``iter()`` starts from the origin in white and re-walks the log, so
    repeated iterations yield identical lines.
    """

    def __init__(self, ops: Iterable[DrawOp]) -> None:
        self._ops = ops

    def __iter__(self) -> Iterator[Line]:
        state = PenState()
        for op in self._ops:
            state, line = advance(state, op)
            if line is not None:
                yield line


class LineSource(Protocol):
    def lines(self) -> Iterable[Line]:
        ...
