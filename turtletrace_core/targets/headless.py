from __future__ import annotations

from collections import deque
from typing import Iterable

import numpy as np

from turtletrace_core.core.events import InputEvent
from turtletrace_core.render.canvas import draw_line as draw_canvas_line, fill, new_canvas

from .base import RGB, WindowTarget


class HeadlessTarget(WindowTarget):
    """Offscreen target backed by a numpy canvas.

    ``scripted_events`` holds one batch per ``poll_events`` call; once the
    script runs out every poll returns an empty batch.
    """

    def __init__(self, scripted_events: Iterable[list[InputEvent]] | None = None) -> None:
        self._script: deque[list[InputEvent]] = deque(scripted_events or [])
        self._canvas: np.ndarray | None = None
        self._draw_color: RGB = (255, 255, 255)
        self.title: str | None = None
        self.started = False
        self.stopped = False
        self.frames_presented = 0
        self.polls = 0
        self.clears: list[RGB] = []
        self.color_changes: list[RGB] = []
        self.drawn: list[tuple[tuple[int, int], tuple[int, int], RGB]] = []

    def start(self, title: str, width: int, height: int) -> None:
        self.title = title
        self._canvas = new_canvas(width, height)
        self.started = True

    def clear(self, color: RGB) -> None:
        fill(self._require_canvas(), color)
        self.clears.append(color)

    def set_draw_color(self, color: RGB) -> None:
        self._draw_color = color
        self.color_changes.append(color)

    def draw_line(self, start: tuple[int, int], end: tuple[int, int]) -> None:
        draw_canvas_line(self._require_canvas(), start, end, self._draw_color)
        self.drawn.append((start, end, self._draw_color))

    def present(self) -> None:
        self._require_canvas()
        self.frames_presented += 1

    def poll_events(self) -> list[InputEvent]:
        self.polls += 1
        if self._script:
            return self._script.popleft()
        return []

    def stop(self) -> None:
        self.started = False
        self.stopped = True

    def snapshot(self) -> np.ndarray:
        return self._require_canvas().copy()

    def _require_canvas(self) -> np.ndarray:
        if self._canvas is None:
            raise RuntimeError("headless target not started")
        return self._canvas
