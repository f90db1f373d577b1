from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from turtletrace_core.core.turtle import Turtle


Command = Callable[[Turtle], None]


@dataclass
class LSystem:
    axiom: str
    rules: dict[str, str]
    commands: dict[str, Command] = field(default_factory=dict)

    def step(self, state: str) -> str:
        return "".join(self.rules.get(c, c) for c in state)

    def expand(self, generations: int) -> str:
        if generations < 0:
            raise ValueError("generations must be >= 0")
        state = self.axiom
        for _ in range(generations):
            state = self.step(state)
        return state

    def draw(self, turtle: Turtle, generations: int) -> Turtle:
        """Run the command bound to each symbol; symbols without one are skipped."""
        for c in self.expand(generations):
            command = self.commands.get(c)
            if command is not None:
                command(turtle)
        return turtle


def walk(dist: int) -> Command:
    def _walk(t: Turtle) -> None:
        t.forward(dist)

    return _walk


def turn(degrees: float) -> Command:
    def _turn(t: Turtle) -> None:
        t.turn(degrees)

    return _turn
