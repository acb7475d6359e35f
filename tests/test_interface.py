"""
Unit tests for the live display front-end, using the SDL dummy video driver.
Run from project root: python -m pytest tests/ -v
"""
import importlib.util
import os
import tempfile
import unittest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import numpy as np

from mandel.option import Option
from mandel.mandel_for import render

HAVE_PYGAME = importlib.util.find_spec("pygame") is not None


@unittest.skipUnless(HAVE_PYGAME, "pygame is not installed")
class TestWindow(unittest.TestCase):

    def setUp(self):
        import pygame as pg
        from mandel_view import App

        self.pg = pg
        self.tmp = tempfile.TemporaryDirectory()
        self.path = os.path.join(self.tmp.name, "window.png")
        self.opt = Option(["--width", "8", "--height", "6", "--max-iters", "16",
                           "--output", self.path])
        self.app = App(self.opt)

    def tearDown(self):
        self.pg.quit()
        self.tmp.cleanup()

    def test_display_computes_buffer(self):
        self.app.display()
        np.testing.assert_array_equal(self.app.output, render(self.opt.render_config()))
        self.assertEqual(self.app.palette.size, 16)

    def test_redraw_after_resize_reuses_buffer(self):
        self.app.display()
        before = self.app.output.copy()
        self.pg.display.set_mode((16, 12), flags=self.pg.RESIZABLE)
        self.app.update_window(videoexpose=True)
        self.assertEqual(self.pg.display.get_surface().get_size(), (16, 12))
        np.testing.assert_array_equal(self.app.output, before)

    def test_keys(self):
        self.app.display()
        self.assertTrue(self.app.on_key_press(self.pg.K_q))
        self.assertTrue(self.app.on_key_press(self.pg.K_ESCAPE))
        self.assertFalse(self.app.on_key_press(self.pg.K_a))
        self.assertFalse(self.app.on_key_press(self.pg.K_e))
        self.assertTrue(os.path.exists(self.path))


if __name__ == "__main__":
    unittest.main()
