from __future__ import annotations

from abc import ABC, abstractmethod

from turtletrace_core.core.events import InputEvent


RGB = tuple[int, int, int]


class WindowTarget(ABC):
    """Window primitives the animation loop draws through."""

    @abstractmethod
    def start(self, title: str, width: int, height: int) -> None:
        raise NotImplementedError

    @abstractmethod
    def clear(self, color: RGB) -> None:
        raise NotImplementedError

    @abstractmethod
    def set_draw_color(self, color: RGB) -> None:
        raise NotImplementedError

    @abstractmethod
    def draw_line(self, start: tuple[int, int], end: tuple[int, int]) -> None:
        raise NotImplementedError

    @abstractmethod
    def present(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def poll_events(self) -> list[InputEvent]:
        raise NotImplementedError

    @abstractmethod
    def stop(self) -> None:
        raise NotImplementedError
