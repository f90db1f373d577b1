from __future__ import annotations

import argparse
from pathlib import Path

from turtletrace_core.config import RenderConfig, load_render_config
from turtletrace_core.core.turtle import Turtle
from turtletrace_core.render.animation import AnimationConfig
from turtletrace_core.render.png import PngConfig
from turtletrace_core.targets.headless import HeadlessTarget
from turtletrace_lsystem import arrowhead, koch_snowflake


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="turtletrace")
    sub = parser.add_subparsers(dest="command", required=True)

    koch = sub.add_parser("koch", help="Draw a Koch snowflake.")
    koch.add_argument("--depth", type=int, default=4)
    _add_render_args(koch)

    arrow = sub.add_parser("arrowhead", help="Draw a Sierpinski arrowhead curve from an L-system.")
    arrow.add_argument("--generations", type=int, default=8)
    arrow.add_argument(
        "--recolor",
        type=float,
        default=0.0,
        help="Probability of switching to a random color after each symbol.",
    )
    arrow.add_argument("--seed", type=int, default=None)
    _add_render_args(arrow)
    args = parser.parse_args(argv)

    if args.command == "koch":
        turtle = koch_snowflake(depth=args.depth)
        defaults = RenderConfig(window=AnimationConfig(title="Koch snowflake", speed=50.0))
    elif args.command == "arrowhead":
        turtle = arrowhead(generations=args.generations, recolor_probability=args.recolor, seed=args.seed)
        defaults = RenderConfig(
            png=PngConfig(width=600, height=600),
            window=AnimationConfig(title="Sierpinski arrowhead", width=600, height=600),
        )
    else:
        raise RuntimeError(f"unsupported command: {args.command}")

    config = load_render_config(args.config) if args.config is not None else defaults
    _render(turtle, config, args)


def _add_render_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--render", choices=["png", "window", "headless"], default="png")
    parser.add_argument("--out", type=Path, default=None, help="PNG output path (png render only).")
    parser.add_argument("--config", type=Path, default=None, help="TOML file with [png] and [window] tables.")
    parser.add_argument(
        "--ticks",
        type=int,
        default=None,
        help="Max animation ticks. Default: run until window close; one per line plus one for headless.",
    )


def _render(turtle: Turtle, config: RenderConfig, args: argparse.Namespace) -> None:
    if args.render == "png":
        out = args.out or Path(f"{args.command}.png")
        saved = turtle.draw_png(config.png).save(out)
        print(f"saved {saved} ops={len(turtle.ops)}")
        return

    renderer = turtle.draw_window(config.window)
    if args.render == "headless":
        max_ticks = args.ticks if args.ticks is not None else sum(1 for _ in turtle.lines()) + 1
        result = renderer.show(target=HeadlessTarget(), max_ticks=max_ticks, sleep=lambda _s: None)
    else:
        result = renderer.show(max_ticks=args.ticks)
    print(
        f"run complete: ticks={result.ticks} lines={result.segments_drawn} "
        f"stopped_by_user={result.stopped_by_user}"
    )


if __name__ == "__main__":
    main()
