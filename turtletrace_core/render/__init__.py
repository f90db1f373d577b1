from .animation import AnimationConfig, AnimationPlayer, AnimationRenderer, AnimationResult
from .canvas import draw_line, new_canvas
from .png import PngConfig, PngRenderer

__all__ = [
    "AnimationConfig",
    "AnimationPlayer",
    "AnimationRenderer",
    "AnimationResult",
    "PngConfig",
    "PngRenderer",
    "draw_line",
    "new_canvas",
]
