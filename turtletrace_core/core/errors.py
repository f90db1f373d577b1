from __future__ import annotations


class RenderError(RuntimeError):
    """Raised when a renderer cannot produce its output."""


class WindowInitError(RenderError):
    """Raised when the windowing toolkit fails to open a window."""
