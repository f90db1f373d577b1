from __future__ import annotations

import logging
import os
import time

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from turtletrace_core.core.errors import WindowInitError  # noqa: E402
from turtletrace_core.core.events import InputEvent  # noqa: E402

from .base import RGB, WindowTarget  # noqa: E402

LOGGER = logging.getLogger(__name__)

_KEY_NAMES: dict[int, str] = {
    pygame.K_SPACE: "space",
    pygame.K_s: "s",
    pygame.K_r: "r",
    pygame.K_LEFTBRACKET: "[",
    pygame.K_RIGHTBRACKET: "]",
    pygame.K_ESCAPE: "escape",
}


class PygameTarget(WindowTarget):
    """Centered SDL window driven through pygame."""

    def __init__(self) -> None:
        self._surface: pygame.Surface | None = None
        self._draw_color: RGB = (255, 255, 255)

    def start(self, title: str, width: int, height: int) -> None:
        os.environ.setdefault("SDL_VIDEO_CENTERED", "1")
        try:
            pygame.display.init()
            self._surface = pygame.display.set_mode((width, height))
            pygame.display.set_caption(title)
        except pygame.error as exc:
            pygame.display.quit()
            raise WindowInitError(f"failed to open {width}x{height} window: {exc}") from exc
        LOGGER.debug("opened window %r (%dx%d, driver=%s)", title, width, height, pygame.display.get_driver())

    def clear(self, color: RGB) -> None:
        self._require_surface().fill(color)

    def set_draw_color(self, color: RGB) -> None:
        self._draw_color = color

    def draw_line(self, start: tuple[int, int], end: tuple[int, int]) -> None:
        pygame.draw.line(self._require_surface(), self._draw_color, start, end)

    def present(self) -> None:
        self._require_surface()
        pygame.display.flip()

    def poll_events(self) -> list[InputEvent]:
        out: list[InputEvent] = []
        now = time.monotonic()
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                out.append(InputEvent(event_type="quit", timestamp=now))
            elif event.type == pygame.KEYDOWN:
                out.append(InputEvent(event_type="key_down", timestamp=now, key=key_name(event.key)))
        return out

    def stop(self) -> None:
        if self._surface is not None:
            self._surface = None
            pygame.display.quit()

    def _require_surface(self) -> pygame.Surface:
        if self._surface is None:
            raise RuntimeError("pygame target not started")
        return self._surface


def key_name(key: int) -> str:
    name = _KEY_NAMES.get(key)
    if name is not None:
        return name
    return pygame.key.name(key)
