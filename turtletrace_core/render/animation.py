from __future__ import annotations

from dataclasses import dataclass, replace
import logging
import time
from typing import TYPE_CHECKING, Callable, Iterator

from turtletrace_core.core.events import InputEvent
from turtletrace_core.core.frame_rate_controller import FrameRateController
from turtletrace_core.core.lines import Line, LineSource

from .canvas import RGB, validate_rgb

if TYPE_CHECKING:
    from turtletrace_core.targets.base import WindowTarget

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnimationConfig:
    title: str = "turtle"
    width: int = 500
    height: int = 500
    interactive: bool = True
    speed: float = 60.0
    background: RGB = (0, 0, 0)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("width and height must be > 0")
        if self.speed <= 0:
            raise ValueError("speed must be > 0")
        validate_rgb(self.background, "background")


@dataclass(frozen=True)
class AnimationResult:
    ticks: int
    segments_drawn: int
    stopped_by_user: bool


class AnimationPlayer:
    """Playback state for the animation loop: one line per tick plus key controls.

    Keys (interactive mode only, except Escape which always exits):

    + **space** : pause and unpause
    + **s** : when paused, advance one line
    + **r** : clear the window and restart from the first line
    + **[** : one millisecond more delay per line
    + **]** : one millisecond less delay per line
    """

    def __init__(self, source: LineSource, config: AnimationConfig) -> None:
        self._source = source
        self._config = config
        self._lines: Iterator[Line] = iter(source.lines())
        self.rate = FrameRateController(target_fps=config.speed)
        self.paused = False
        self.exhausted = False
        self._step = False
        self.segments_drawn = 0

    @property
    def config(self) -> AnimationConfig:
        return self._config

    def tick(self, target: "WindowTarget") -> Line | None:
        if self.paused and not self._step:
            return None
        self._step = False
        line = next(self._lines, None)
        if line is None:
            if not self.exhausted:
                LOGGER.debug("animation exhausted after %d lines", self.segments_drawn)
            self.paused = True
            self.exhausted = True
            return None
        if line.color_changed:
            target.set_draw_color(line.color)
        target.draw_line(line.start, line.end)
        target.present()
        self.segments_drawn += 1
        return line

    def handle_event(self, event: InputEvent, target: "WindowTarget") -> bool:
        """Apply one input event; returns False when the loop should exit."""
        if event.event_type == "quit":
            return False
        if event.event_type != "key_down":
            return True
        if event.key == "escape":
            return False
        if not self._config.interactive:
            return True
        if event.key == "space":
            self.paused = not self.paused
        elif event.key == "s":
            self._step = True
        elif event.key == "r":
            self.reset(target)
        elif event.key == "[":
            self.rate.slower()
            self._log_rate()
        elif event.key == "]":
            self.rate.faster()
            self._log_rate()
        return True

    def _log_rate(self) -> None:
        fps = self.rate.effective_fps
        LOGGER.debug(
            "line delay %d ms (%s)",
            self.rate.delay_ms,
            "unthrottled" if fps is None else f"{fps:.1f} lines/s",
        )

    def reset(self, target: "WindowTarget") -> None:
        self._lines = iter(self._source.lines())
        self.paused = False
        self.exhausted = False
        self._step = False
        target.clear(self._config.background)

    def run(
        self,
        target: "WindowTarget",
        max_ticks: int | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> AnimationResult:
        if max_ticks is not None and max_ticks <= 0:
            raise ValueError("max_ticks must be > 0")
        cfg = self._config
        target.start(cfg.title, cfg.width, cfg.height)
        self._log_rate()
        ticks = 0
        stopped_by_user = False
        try:
            target.clear(cfg.background)
            target.present()
            while max_ticks is None or ticks < max_ticks:
                self.tick(target)
                ticks += 1
                if not all(self.handle_event(event, target) for event in target.poll_events()):
                    stopped_by_user = True
                    break
                sleep(self.rate.delay_s)
        finally:
            target.stop()
        return AnimationResult(ticks=ticks, segments_drawn=self.segments_drawn, stopped_by_user=stopped_by_user)


class AnimationRenderer:
    """Opens a window and animates a turtle's path one line per frame."""

    def __init__(self, source: LineSource, config: AnimationConfig | None = None) -> None:
        self._source = source
        self._config = config or AnimationConfig()

    @property
    def config(self) -> AnimationConfig:
        return self._config

    def title(self, title: str) -> "AnimationRenderer":
        self._config = replace(self._config, title=title)
        return self

    def size(self, width: int, height: int) -> "AnimationRenderer":
        self._config = replace(self._config, width=width, height=height)
        return self

    def interactive(self, enabled: bool) -> "AnimationRenderer":
        self._config = replace(self._config, interactive=bool(enabled))
        return self

    def speed(self, fps: float) -> "AnimationRenderer":
        self._config = replace(self._config, speed=float(fps))
        return self

    def background(self, r: int, g: int, b: int) -> "AnimationRenderer":
        self._config = replace(self._config, background=(r, g, b))
        return self

    def show(
        self,
        target: "WindowTarget | None" = None,
        max_ticks: int | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> AnimationResult:
        if target is None:
            from turtletrace_core.targets.pygame_target import PygameTarget

            target = PygameTarget()
        player = AnimationPlayer(self._source, self._config)
        result = player.run(target, max_ticks=max_ticks, sleep=sleep)
        LOGGER.debug(
            "animation finished: ticks=%d lines=%d stopped_by_user=%s",
            result.ticks,
            result.segments_drawn,
            result.stopped_by_user,
        )
        return result
