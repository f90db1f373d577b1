from __future__ import annotations

import math
import unittest

from turtletrace_core.core.lines import PIXEL_MAX, PIXEL_MIN, Line, Lines, PenState, advance, to_pixel
from turtletrace_core.core.ops import LineTo, MoveTo, OpLog, SetColor
from turtletrace_core.core.turtle import Turtle


WHITE = (255, 255, 255)


class LinesTests(unittest.TestCase):
    def test_square_lines_have_truncated_endpoints(self) -> None:
        t = Turtle()
        t.forward(100)
        t.turn(90.0)
        t.forward(100)
        t.turn(90.0)
        t.forward(100)
        t.turn(90.0)
        t.forward(100)
        lines = list(t.lines())
        self.assertEqual(
            [(line.start, line.end) for line in lines],
            [
                ((0, 0), (100, 0)),
                ((100, 0), (100, 100)),
                ((100, 100), (0, 100)),
                ((0, 100), (0, 0)),
            ],
        )
        self.assertTrue(all(line.color == WHITE for line in lines))

    def test_color_changes_mid_stroke(self) -> None:
        t = Turtle()
        t.set_color(255, 0, 0)
        t.forward(10)
        t.set_color(0, 255, 0)
        t.forward(10)
        lines = list(t.lines())
        self.assertEqual(len(lines), 2)
        self.assertEqual(lines[0].color, (255, 0, 0))
        self.assertEqual(lines[1].color, (0, 255, 0))
        self.assertTrue(lines[0].color_changed)
        self.assertTrue(lines[1].color_changed)

    def test_color_changed_clears_after_emission(self) -> None:
        t = Turtle()
        t.set_color(1, 2, 3)
        t.forward(5)
        t.forward(5)
        lines = list(t.lines())
        self.assertTrue(lines[0].color_changed)
        self.assertFalse(lines[1].color_changed)
        self.assertEqual(lines[1].color, (1, 2, 3))

    def test_move_to_emits_no_line(self) -> None:
        t = Turtle()
        t.move_to(50, 50)
        t.forward(10)
        self.assertEqual(list(t.lines()), [Line(start=(50, 50), end=(60, 50), color=WHITE, color_changed=True)])

    def test_forward_zero_is_zero_length_line(self) -> None:
        t = Turtle()
        t.move_to(7, 3)
        t.forward(0)
        (line,) = list(t.lines())
        self.assertEqual(line.start, (7, 3))
        self.assertEqual(line.end, (7, 3))

    def test_line_count_equals_forward_count(self) -> None:
        t = Turtle()
        forwards = 0
        for i in range(25):
            if i % 4 == 0:
                t.move_to(i, -i)
            if i % 5 == 0:
                t.set_color(i, i, i)
            t.turn(37.0)
            t.forward(i - 10)
            forwards += 1
        self.assertEqual(len(list(t.lines())), forwards)

    def test_iteration_is_restartable(self) -> None:
        t = Turtle()
        t.forward(13)
        t.turn(120.0)
        t.set_color(9, 8, 7)
        t.forward(21)
        lines = t.lines()
        self.assertEqual(list(lines), list(lines))
        self.assertEqual(list(lines), list(t.lines()))

    def test_fresh_iteration_sees_new_ops(self) -> None:
        t = Turtle()
        t.forward(10)
        lines = t.lines()
        self.assertEqual(len(list(lines)), 1)
        t.forward(10)
        self.assertEqual(len(list(lines)), 2)

    def test_truncation_is_toward_zero(self) -> None:
        log = OpLog()
        log.append(MoveTo(-2.7, 3.9))
        log.append(LineTo(-0.5, -1.5))
        (line,) = list(Lines(log))
        self.assertEqual(line.start, (-2, 3))
        self.assertEqual(line.end, (0, -1))

    def test_to_pixel_saturates_and_maps_nan_to_zero(self) -> None:
        self.assertEqual(to_pixel(math.nan), 0)
        self.assertEqual(to_pixel(math.inf), PIXEL_MAX)
        self.assertEqual(to_pixel(-math.inf), PIXEL_MIN)
        self.assertEqual(to_pixel(1e300), 2**31 - 1)
        self.assertEqual(to_pixel(-1e300), -(2**31))
        self.assertEqual(to_pixel(-3.9), -3)

    def test_non_finite_endpoints_replay_as_saturated_pixels(self) -> None:
        log = OpLog()
        log.append(MoveTo(math.nan, 7.0))
        log.append(LineTo(math.inf, -math.inf))
        (line,) = list(Lines(log))
        self.assertEqual(line.start, (0, 7))
        self.assertEqual(line.end, (PIXEL_MAX, PIXEL_MIN))

    def test_nan_heading_replays_to_origin(self) -> None:
        t = Turtle()
        t.move_to(4, 4)
        t.turn(math.nan)
        t.forward(1)
        t.forward(1)
        self.assertEqual(
            [(line.start, line.end) for line in t.lines()],
            [((4, 4), (0, 0)), ((0, 0), (0, 0))],
        )

    def test_replay_reaches_live_position(self) -> None:
        t = Turtle()
        t.move_to(200, 200)
        for _ in range(7):
            t.forward(33)
            t.turn(51.0)
        last = list(t.lines())[-1]
        x, y = t.position()
        self.assertEqual(last.end, (int(x), int(y)))

    def test_advance_is_a_pure_step(self) -> None:
        state = PenState()
        moved, line = advance(state, MoveTo(4.0, 5.0))
        self.assertIsNone(line)
        self.assertEqual((moved.x, moved.y), (4, 5))
        self.assertEqual((state.x, state.y), (0, 0))

        colored, line = advance(moved, SetColor(10, 20, 30))
        self.assertIsNone(line)
        self.assertEqual(colored.color, (10, 20, 30))

        after, line = advance(colored, LineTo(8.9, 5.0))
        self.assertEqual(line, Line(start=(4, 5), end=(8, 5), color=(10, 20, 30), color_changed=True))
        self.assertFalse(after.color_changed)

    def test_op_log_rejects_unknown_ops(self) -> None:
        log = OpLog()
        with self.assertRaises(TypeError):
            log.append(("line_to", 1.0, 2.0))  # type: ignore[arg-type]
        self.assertEqual(len(log), 0)


if __name__ == "__main__":
    unittest.main()
