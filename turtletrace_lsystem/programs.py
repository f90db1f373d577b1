from __future__ import annotations

import random

from turtletrace_core.core.turtle import Turtle

from .grammar import LSystem, turn, walk


def arrowhead_system(step: int = 2) -> LSystem:
    return LSystem(
        axiom="A",
        rules={"A": "+B-A-B+", "B": "-A+B+A-"},
        commands={
            "A": walk(step),
            "B": walk(step),
            "+": turn(-60.0),
            "-": turn(60.0),
        },
    )


def arrowhead(
    generations: int = 8,
    step: int = 2,
    start: tuple[int, int] = (40, 500),
    recolor_probability: float = 0.0,
    seed: int | None = None,
) -> Turtle:
    """Sierpinski arrowhead curve.

    With ``recolor_probability`` > 0 the pen starts in a random color and
    switches to a new random color after each symbol with that probability.
    """
    if not 0.0 <= recolor_probability <= 1.0:
        raise ValueError("recolor_probability must be in [0, 1]")
    system = arrowhead_system(step)
    t = Turtle()
    t.move_to(*start)
    if recolor_probability <= 0.0:
        return system.draw(t, generations)

    rng = random.Random(seed)
    t.set_color(*_random_rgb(rng))
    for c in system.expand(generations):
        command = system.commands.get(c)
        if command is not None:
            command(t)
        if rng.random() < recolor_probability:
            t.set_color(*_random_rgb(rng))
    return t


def koch_curve(t: Turtle, depth: int, length: float) -> None:
    if depth == 0:
        t.forward(int(length))
        return
    koch_curve(t, depth - 1, length)
    t.turn(-60.0)
    koch_curve(t, depth - 1, length)
    t.turn(120.0)
    koch_curve(t, depth - 1, length)
    t.turn(-60.0)
    koch_curve(t, depth - 1, length)


def koch_snowflake(depth: int = 4, start: tuple[int, int] = (50, 370)) -> Turtle:
    if depth < 0:
        raise ValueError("depth must be >= 0")
    length = 512.0 / 1.2 / 3**depth
    t = Turtle()
    t.move_to(*start)
    t.turn(-60.0)
    koch_curve(t, depth, length)
    t.turn(120.0)
    koch_curve(t, depth, length)
    t.turn(120.0)
    koch_curve(t, depth, length)
    return t


def _random_rgb(rng: random.Random) -> tuple[int, int, int]:
    return (rng.randrange(256), rng.randrange(256), rng.randrange(256))
