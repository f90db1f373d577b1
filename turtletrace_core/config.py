from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
import tomllib
from typing import Any

from turtletrace_core.render.animation import AnimationConfig
from turtletrace_core.render.png import PngConfig


@dataclass(frozen=True)
class RenderConfig:
    png: PngConfig = field(default_factory=PngConfig)
    window: AnimationConfig = field(default_factory=AnimationConfig)


def load_render_config(path: str | Path) -> RenderConfig:
    """Load renderer settings from a TOML file with optional [png] and [window] tables.

    Absent keys keep their defaults; colors are written as ``[r, g, b]`` arrays.
    """
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"render config not found: {config_path}")
    with config_path.open("rb") as f:
        raw = tomllib.load(f)
    return parse_render_config(raw)


def parse_render_config(raw: dict[str, Any]) -> RenderConfig:
    png_raw = _coerce_table(raw.get("png", {}), "png")
    window_raw = _coerce_table(raw.get("window", {}), "window")

    png_defaults = PngConfig()
    png = PngConfig(
        width=_coerce_int(png_raw.get("width", png_defaults.width), "png.width"),
        height=_coerce_int(png_raw.get("height", png_defaults.height), "png.height"),
        background=_coerce_rgb(png_raw.get("background", png_defaults.background), "png.background"),
        antialias=_coerce_bool(png_raw.get("antialias", png_defaults.antialias), "png.antialias"),
    )

    window_defaults = AnimationConfig()
    window = AnimationConfig(
        title=_coerce_str(window_raw.get("title", window_defaults.title), "window.title"),
        width=_coerce_int(window_raw.get("width", window_defaults.width), "window.width"),
        height=_coerce_int(window_raw.get("height", window_defaults.height), "window.height"),
        interactive=_coerce_bool(window_raw.get("interactive", window_defaults.interactive), "window.interactive"),
        speed=_coerce_float(window_raw.get("speed", window_defaults.speed), "window.speed"),
        background=_coerce_rgb(window_raw.get("background", window_defaults.background), "window.background"),
    )
    return RenderConfig(png=png, window=window)


def _coerce_table(value: object, field_name: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise ValueError(f"{field_name} must be a table")
    return value


def _coerce_int(value: object, field_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{field_name} must be an integer")
    return value


def _coerce_float(value: object, field_name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{field_name} must be a number")
    return float(value)


def _coerce_bool(value: object, field_name: str) -> bool:
    if not isinstance(value, bool):
        raise ValueError(f"{field_name} must be a boolean")
    return value


def _coerce_str(value: object, field_name: str) -> str:
    if not isinstance(value, str):
        raise ValueError(f"{field_name} must be a string")
    return value


def _coerce_rgb(value: object, field_name: str) -> tuple[int, int, int]:
    if not isinstance(value, (list, tuple)) or len(value) != 3:
        raise ValueError(f"{field_name} must be a list of 3 integers")
    channels = tuple(_coerce_int(v, field_name) for v in value)
    return (channels[0], channels[1], channels[2])
