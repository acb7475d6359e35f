# -*- coding: utf-8 -*-
"""
Provides the base constants and the RenderConfig class.
"""

__all__ = ["WIDTH", "HEIGHT", "MAX_ITERS", "BOUNDS", "RADIUS",
           "INSIDE_COLOR", "SHAPINGS", "RenderConfig"]

WIDTH = 1920
HEIGHT = 1080
MAX_ITERS = 32

# min-x, max-x, min-y, max-y of the complex plane window.
BOUNDS = (-2.5, 1.0, -1.0, 1.0)

RADIUS = 2.0
INSIDE_COLOR = (0x00, 0x00, 0x00)
SHAPINGS = ("linear", "root")


class RenderConfig(object):

    def __init__(self, width=WIDTH, height=HEIGHT, max_iters=MAX_ITERS,
                 bounds=BOUNDS, shaping="linear", degree=3):

        min_x, max_x, min_y, max_y = (float(v) for v in bounds)

        if width < 1 or height < 1:
            raise ValueError(f"invalid size: {width}x{height}")
        if max_iters < 1:
            raise ValueError(f"max_iters must be positive: {max_iters}")
        if not (min_x < max_x and min_y < max_y):
            raise ValueError(f"empty plane window: {tuple(bounds)}")
        if shaping not in SHAPINGS:
            raise ValueError(f"unknown shaping: '{shaping}'")
        if degree < 1:
            raise ValueError(f"degree must be positive: {degree}")

        self.width = int(width)
        self.height = int(height)
        self.max_iters = int(max_iters)
        self.min_x, self.max_x, self.min_y, self.max_y = min_x, max_x, min_y, max_y
        self.shaping = shaping
        self.degree = int(degree)


    @property
    def bounds(self):
        return (self.min_x, self.max_x, self.min_y, self.max_y)


    def plane_point(self, x, y):
        """
        Map pixel (x, y) to its sample point in the complex plane.
        Same arithmetic as the image loop in mandel_for.
        """
        x0 = ((self.max_x - self.min_x) * x) / self.width + self.min_x
        y0 = ((self.max_y - self.min_y) * y) / self.height + self.min_y

        return x0, y0


    def __repr__(self):
        return "RenderConfig(width={}, height={}, max_iters={}, bounds={}, shaping='{}', degree={})".format(
            self.width, self.height, self.max_iters, self.bounds, self.shaping, self.degree)
