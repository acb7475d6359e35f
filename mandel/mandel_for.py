# -*- coding: utf-8 -*-
"""
Mandelbrot functions. Loop over the rows using a plain for loop.
"""

__all__ = ["mandelbrot", "render", "calculate_point"]

from .mandel_common import mandel
from .palette import Color, Palette

import numpy as np
from numba import njit

@njit(nogil=True)
def mandelbrot(output, colors, inside, min_x, max_x, min_y, max_y, max_iters):

    height, width = output.shape[:2]

    for y in range(height):
        cimag = ((max_y - min_y) * y) / height + min_y

        for x in range(width):
            creal = ((max_x - min_x) * x) / width + min_x
            r, g, b = mandel(colors, inside, creal, cimag, max_iters)
            output[y,x,0] = r
            output[y,x,1] = g
            output[y,x,2] = b
            output[y,x,3] = 0xff


def render(config, palette=None):
    """
    Compute the RGBA pixel buffer, shape (height, width, 4), for config.
    The palette is built from config unless given.
    """
    if palette is None:
        palette = Palette.generate(config.max_iters, config.shaping, config.degree)
    elif palette.size != config.max_iters:
        raise ValueError("palette size {} differs from max_iters {}".format(
            palette.size, config.max_iters))

    output = np.empty((config.height, config.width, 4), dtype=np.ctypeslib.ctypes.c_uint8)

    mandelbrot(
        output, palette.colors, tuple(palette.inside), config.min_x,
        config.max_x, config.min_y, config.max_y, palette.size )

    return output


def calculate_point(creal, cimag, palette):
    """
    Color of one point in the complex plane; the palette size is the
    max iteration count.
    """
    rgb = mandel(palette.colors, tuple(palette.inside), float(creal), float(cimag), palette.size)

    return Color(*(int(c) for c in rgb))
