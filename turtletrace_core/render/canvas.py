from __future__ import annotations

import numpy as np


RGB = tuple[int, int, int]


def new_canvas(width: int, height: int, color: RGB = (0, 0, 0)) -> np.ndarray:
    if width <= 0 or height <= 0:
        raise ValueError("width and height must be > 0")
    canvas = np.zeros((height, width, 3), dtype=np.uint8)
    canvas[:, :, 0] = color[0]
    canvas[:, :, 1] = color[1]
    canvas[:, :, 2] = color[2]
    return canvas


def fill(dst: np.ndarray, color: RGB) -> None:
    dst[:, :, 0] = color[0]
    dst[:, :, 1] = color[1]
    dst[:, :, 2] = color[2]


def in_bounds(dst: np.ndarray, x: int, y: int) -> bool:
    return 0 <= x < dst.shape[1] and 0 <= y < dst.shape[0]


def draw_line(dst: np.ndarray, start: tuple[int, int], end: tuple[int, int], color: RGB) -> int:
    """Draw an aliased Bresenham line and return the number of pixels written.

    The scan stops at the first pixel outside the canvas: a line that starts
    off-canvas draws nothing, and one that leaves the canvas is not resumed.
    """
    x0, y0 = start
    x1, y1 = end
    dx = abs(x1 - x0)
    dy = -abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    err = dx + dy

    written = 0
    x, y = x0, y0
    while True:
        if not in_bounds(dst, x, y):
            break
        dst[y, x, 0] = color[0]
        dst[y, x, 1] = color[1]
        dst[y, x, 2] = color[2]
        written += 1
        if x == x1 and y == y1:
            break
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x += sx
        if e2 <= dx:
            err += dx
            y += sy
    return written


def validate_rgb(color: RGB, field_name: str) -> None:
    if len(color) != 3:
        raise ValueError(f"{field_name} must have 3 channels")
    for value in color:
        if not 0 <= int(value) <= 255:
            raise ValueError(f"{field_name} channels must be in 0..255")
