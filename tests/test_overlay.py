import unittest
from types import SimpleNamespace

import pygame

from tetris_config import CONFIG
from tetris_engine import Rules
from tetris_overlay import Overlay


def key(k):
    return SimpleNamespace(type=pygame.KEYDOWN, key=k)


class OverlayTests(unittest.TestCase):
    def setUp(self):
        self.config = dict(CONFIG)
        self.overlay = Overlay(self.config)
        self.overlay.toggle()

    def select(self, name):
        while self.overlay.items[self.overlay.index][0] != name:
            self.overlay.handle(key(pygame.K_DOWN))

    def test_numeric_steps_and_clamps(self):
        self.select("TICK_MS")
        self.overlay.handle(key(pygame.K_RIGHT))
        self.assertEqual(self.config["TICK_MS"], 450)
        for _ in range(50):
            self.overlay.handle(key(pygame.K_LEFT))
        self.assertEqual(self.config["TICK_MS"], 100)

    def test_boolean_toggles(self):
        self.select("HARD_DROP_LOCKS")
        self.overlay.handle(key(pygame.K_RETURN))
        self.assertTrue(self.config["HARD_DROP_LOCKS"])
        self.assertTrue(Rules.from_config(self.config).hard_drop_locks)

    def test_choice_cycles(self):
        self.select("SCORE_MODE")
        self.overlay.handle(key(pygame.K_RIGHT))
        self.assertEqual(self.config["SCORE_MODE"], "clear")
        self.overlay.handle(key(pygame.K_RIGHT))
        self.assertEqual(self.config["SCORE_MODE"], "row")

    def test_escape_closes_without_touching_config(self):
        self.overlay.handle(key(pygame.K_ESCAPE))
        self.assertFalse(self.overlay.active)
        self.assertEqual(self.config, CONFIG)

    def test_edits_leave_global_config_alone(self):
        self.select("ROTATE_CW")
        self.overlay.handle(key(pygame.K_LEFT))
        self.assertFalse(self.config["ROTATE_CW"])
        self.assertTrue(CONFIG["ROTATE_CW"])


if __name__ == "__main__":
    unittest.main()
