from __future__ import annotations

from dataclasses import dataclass, replace
import logging
from pathlib import Path

import numpy as np
from PIL import Image

from turtletrace_core.core.errors import RenderError
from turtletrace_core.core.lines import LineSource

from .canvas import RGB, draw_line, new_canvas, validate_rgb

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class PngConfig:
    width: int = 500
    height: int = 500
    background: RGB = (0, 0, 0)
    antialias: bool = False

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("width and height must be > 0")
        validate_rgb(self.background, "background")


class PngRenderer:
    """Rasterizes a turtle's lines into an RGB image and writes it as PNG.

    Setters return the renderer so configuration can be chained:

        turtle.draw_png().size(320, 240).background(16, 16, 16).save("out.png")
    """

    def __init__(self, source: LineSource, config: PngConfig | None = None) -> None:
        self._source = source
        self._config = config or PngConfig()

    @property
    def config(self) -> PngConfig:
        return self._config

    def size(self, width: int, height: int) -> "PngRenderer":
        self._config = replace(self._config, width=width, height=height)
        return self

    def background(self, r: int, g: int, b: int) -> "PngRenderer":
        self._config = replace(self._config, background=(r, g, b))
        return self

    def antialias(self, enabled: bool) -> "PngRenderer":
        self._config = replace(self._config, antialias=bool(enabled))
        return self

    def render(self) -> np.ndarray:
        cfg = self._config
        if cfg.antialias:
            LOGGER.warning("antialiased drawing is not supported; drawing aliased lines")
        canvas = new_canvas(cfg.width, cfg.height, cfg.background)
        count = 0
        pixels = 0
        for line in self._source.lines():
            pixels += draw_line(canvas, line.start, line.end, line.color)
            count += 1
        LOGGER.debug("rasterized %d lines (%d pixels) into %dx%d image", count, pixels, cfg.width, cfg.height)
        return canvas

    def save(self, path: str | Path) -> Path:
        out = Path(path)
        frame = self.render()
        try:
            Image.fromarray(frame).save(out, format="PNG")
        except OSError as exc:
            raise RenderError(f"failed to write PNG to {out}: {exc}") from exc
        LOGGER.debug("saved PNG to %s", out)
        return out
