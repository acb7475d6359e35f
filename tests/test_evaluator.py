"""
Unit tests for the escape-time kernels, point coloring and the render loop.
Run from project root: python -m pytest tests/ -v
"""
import math
import unittest

import numpy as np

from mandel.base import RenderConfig
from mandel.mandel_common import escape_time, get_color
from mandel.mandel_for import calculate_point, render
from mandel.palette import Color, Palette


class TestEscapeTime(unittest.TestCase):
    """Smoothed iteration count for single points."""

    def test_cardioid_point_runs_full_budget(self):
        self.assertEqual(escape_time(0.0, 0.0, 32), 32.0)
        self.assertEqual(escape_time(0.125, 0.0, 32), 32.0)

    def test_period_two_bulb_point_runs_full_budget(self):
        self.assertEqual(escape_time(-1.0, 0.0, 32), 32.0)

    def test_far_point_escapes_after_one_iteration(self):
        # z1 = 2+2i, |z1|^2 = 8, log_zn = 1.5
        mu = escape_time(2.0, 2.0, 32)
        self.assertFalse(math.isnan(mu))
        self.assertAlmostEqual(mu, 2.0 - math.log2(1.5))
        self.assertTrue(0.0 < mu < 2.0)

    def test_escape_bound_is_magnitude_four(self):
        # z: 0, 1, 2, 5; |z|^2 = 4 still iterates, 25 escapes on the third step
        mu = escape_time(1.0, 0.0, 32)
        self.assertAlmostEqual(mu, 4.0 - math.log2(math.log2(25.0) / 2.0))

    def test_overshoot_clamps_to_zero(self):
        self.assertEqual(escape_time(100.0, 100.0, 32), 0.0)

    def test_overflow_does_not_produce_nan(self):
        mu = escape_time(1e200, 1e200, 32)
        self.assertFalse(math.isnan(mu))
        self.assertEqual(mu, 0.0)

    def test_single_iteration_budget(self):
        # Budget exhausted before the escape test; no smoothing.
        self.assertEqual(escape_time(0.0, 0.0, 1), 1.0)
        self.assertEqual(escape_time(2.0, 2.0, 1), 1.0)
        self.assertLess(escape_time(2.0, 2.0, 2), 2.0)


class TestGetColor(unittest.TestCase):
    """Palette lookup, clamping and blending of the smoothed count."""

    def setUp(self):
        self.palette = Palette([(0, 0, 0), (100, 100, 100), (200, 200, 200)], inside=(1, 2, 3))
        self.inside = tuple(self.palette.inside)

    def color(self, mu):
        return tuple(int(c) for c in get_color(self.palette.colors, self.inside, mu, 3))

    def test_blends_adjacent_entries(self):
        self.assertEqual(self.color(0.5), (50, 50, 50))
        self.assertEqual(self.color(1.0), (100, 100, 100))

    def test_clamps_secondary_index(self):
        self.assertEqual(self.color(2.25), (200, 200, 200))

    def test_interior_uses_inside_color(self):
        self.assertEqual(self.color(3.0), (1, 2, 3))


class TestCalculatePoint(unittest.TestCase):

    def setUp(self):
        self.palette = Palette.generate(32)

    def test_interior_point_gets_interior_color(self):
        self.assertEqual(calculate_point(0.0, 0.0, self.palette), self.palette.inside)
        self.assertEqual(calculate_point(-1.0, 0.0, self.palette), Color(0, 0, 0))

    def test_matches_python_interpolation(self):
        mu = escape_time(2.0, 2.0, 32)
        i = math.floor(mu)
        expected = self.palette.lookup(i).interpolate(self.palette.lookup(i + 1), mu - i)
        self.assertEqual(calculate_point(2.0, 2.0, self.palette), expected)

    def test_far_point_gets_first_entry(self):
        self.assertEqual(calculate_point(100.0, 100.0, self.palette), self.palette.lookup(0))


class TestRender(unittest.TestCase):
    """End-to-end render into the RGBA pixel buffer."""

    def setUp(self):
        self.config = RenderConfig(width=4, height=4, max_iters=32)

    def test_small_render(self):
        output = render(self.config)
        self.assertEqual(output.shape, (4, 4, 4))
        self.assertEqual(output.dtype, np.uint8)
        self.assertEqual(len(output.tobytes()), 64)
        self.assertTrue(np.all(output[:, :, 3] == 0xff))

        # row 2, column 3 samples (0.125, 0.0)
        self.assertEqual(self.config.plane_point(3, 2), (0.125, 0.0))
        self.assertEqual(output[2, 3].tolist(), [0, 0, 0, 255])
        self.assertEqual(output.tobytes()[44:48], b"\x00\x00\x00\xff")

    def test_pixels_match_calculate_point(self):
        palette = Palette.generate(32)
        output = render(self.config, palette)
        for y in range(4):
            for x in range(4):
                color = calculate_point(*self.config.plane_point(x, y), palette)
                self.assertEqual(bytes(output[y, x]), color.as_rgba())

    def test_render_is_reproducible(self):
        config = RenderConfig(width=24, height=16, max_iters=50, shaping="root")
        self.assertEqual(render(config).tobytes(), render(config).tobytes())

    def test_non_square_render(self):
        config = RenderConfig(width=7, height=3, max_iters=10)
        output = render(config)
        self.assertEqual(output.shape, (3, 7, 4))
        self.assertEqual(len(output.tobytes()), 7 * 3 * 4)

    def test_rejects_mismatched_palette(self):
        with self.assertRaises(ValueError):
            render(self.config, Palette.generate(16))


class TestRenderConfig(unittest.TestCase):

    def test_defaults(self):
        config = RenderConfig()
        self.assertEqual((config.width, config.height, config.max_iters), (1920, 1080, 32))
        self.assertEqual(config.bounds, (-2.5, 1.0, -1.0, 1.0))
        self.assertEqual(config.plane_point(0, 0), (-2.5, -1.0))

    def test_rejects_invalid_values(self):
        for kwargs in (
            dict(width=0), dict(height=-1), dict(max_iters=0),
            dict(bounds=(1.0, -2.5, -1.0, 1.0)), dict(bounds=(-2.5, 1.0, 1.0, 1.0)),
            dict(shaping="cubic"), dict(degree=0),
        ):
            with self.assertRaises(ValueError):
                RenderConfig(**kwargs)


if __name__ == "__main__":
    unittest.main()
