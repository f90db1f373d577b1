from __future__ import annotations

import importlib.util
import os
import unittest
from unittest import mock

from turtletrace_core.core.errors import WindowInitError
from turtletrace_core.core.turtle import Turtle


@unittest.skipUnless(importlib.util.find_spec("pygame") is not None, "pygame is not installed")
class PygameTargetTests(unittest.TestCase):
    def setUp(self) -> None:
        self._env = mock.patch.dict(os.environ, {"SDL_VIDEODRIVER": "dummy"})
        self._env.start()
        from turtletrace_core.targets import pygame_target

        self.module = pygame_target
        self.pygame = pygame_target.pygame

    def tearDown(self) -> None:
        self.pygame.display.quit()
        self._env.stop()

    def test_draws_lines_on_window_surface(self) -> None:
        target = self.module.PygameTarget()
        target.start("turtle", 32, 24)
        try:
            self.assertEqual(self.pygame.display.get_caption()[0], "turtle")
            target.clear((0, 0, 0))
            target.set_draw_color((255, 0, 0))
            target.draw_line((2, 3), (12, 3))
            target.present()
            surface = self.pygame.display.get_surface()
            self.assertEqual(tuple(surface.get_at((7, 3)))[:3], (255, 0, 0))
            self.assertEqual(tuple(surface.get_at((7, 10)))[:3], (0, 0, 0))
        finally:
            target.stop()

    def test_maps_keys_and_close(self) -> None:
        target = self.module.PygameTarget()
        target.start("turtle", 16, 16)
        try:
            self.pygame.event.post(self.pygame.event.Event(self.pygame.KEYDOWN, key=self.pygame.K_LEFTBRACKET))
            self.pygame.event.post(self.pygame.event.Event(self.pygame.KEYDOWN, key=self.pygame.K_SPACE))
            self.pygame.event.post(self.pygame.event.Event(self.pygame.QUIT))
            events = target.poll_events()
        finally:
            target.stop()
        self.assertEqual(
            [(e.event_type, e.key) for e in events],
            [("key_down", "["), ("key_down", "space"), ("quit", None)],
        )

    def test_key_names(self) -> None:
        self.assertEqual(self.module.key_name(self.pygame.K_ESCAPE), "escape")
        self.assertEqual(self.module.key_name(self.pygame.K_RIGHTBRACKET), "]")
        self.assertEqual(self.module.key_name(self.pygame.K_r), "r")

    def test_start_failure_raises_window_init_error(self) -> None:
        target = self.module.PygameTarget()
        with mock.patch.object(self.pygame.display, "set_mode", side_effect=self.pygame.error("no video device")):
            with self.assertRaises(WindowInitError):
                target.start("turtle", 16, 16)

    def test_show_uses_pygame_by_default(self) -> None:
        t = Turtle()
        t.forward(5)
        result = t.draw_window().size(16, 16).show(max_ticks=3, sleep=lambda _s: None)
        self.assertEqual(result.segments_drawn, 1)
        self.assertFalse(self.pygame.display.get_init())


if __name__ == "__main__":
    unittest.main()
