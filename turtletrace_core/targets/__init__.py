from .base import WindowTarget
from .headless import HeadlessTarget

__all__ = ["HeadlessTarget", "WindowTarget"]
