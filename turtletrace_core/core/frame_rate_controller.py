from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class FrameRateController:
    """Tracks the per-segment delay of the animation loop in whole milliseconds.

    The starting delay is ``round(1000 / target_fps)`` with Python's
    round-half-to-even, so 400 fps (2.5 ms) gives 2 ms, not 3.
    """

    target_fps: float
    delay_ms: int = field(init=False)

    def __post_init__(self) -> None:
        if self.target_fps <= 0:
            raise ValueError("target_fps must be > 0")
        self.delay_ms = int(round(1000.0 / float(self.target_fps)))

    @property
    def delay_s(self) -> float:
        return self.delay_ms / 1000.0

    @property
    def effective_fps(self) -> float | None:
        if self.delay_ms == 0:
            return None
        return 1000.0 / float(self.delay_ms)

    def slower(self, step_ms: int = 1) -> int:
        if step_ms <= 0:
            raise ValueError("step_ms must be > 0")
        self.delay_ms += step_ms
        return self.delay_ms

    def faster(self, step_ms: int = 1) -> int:
        if step_ms <= 0:
            raise ValueError("step_ms must be > 0")
        self.delay_ms = max(0, self.delay_ms - step_ms)
        return self.delay_ms
