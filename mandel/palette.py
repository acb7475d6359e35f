# -*- coding: utf-8 -*-
"""
Provides the Color type and the Palette gradient.

The palette holds one color per iteration: red and green run from 0x00
to 0xff, blue from 0x55 to 0xff. Progress i/size is either used as is
("linear") or passed through an n-th root first ("root"), which spends
more of the gradient on the bright end.
"""

__all__ = ["Color", "Palette", "odd_root", "shape_linear", "shape_root"]

import math
from collections import namedtuple

import numpy as np

from .base import INSIDE_COLOR, SHAPINGS
from .mandel_common import lerp

# Gradient endpoints (low, high) per channel.
RED = (0x00, 0xff)
GREEN = (0x00, 0xff)
BLUE = (0x55, 0xff)


class Color(namedtuple("Color", ["red", "green", "blue"])):
    """
    Immutable RGB color with 8-bit channels.
    """
    __slots__ = ()

    def as_rgba(self):
        """
        Return the 4-byte pixel, alpha fixed at fully opaque.
        """
        return bytes((self.red, self.green, self.blue, 0xff))


    def interpolate(self, other, t):
        """
        Blend linearly toward other; t=0 gives self, t=1 gives other.
        Channels are rounded half up, same as the render kernels.
        """
        return Color(
            lerp(self.red, other.red, t),
            lerp(self.green, other.green, t),
            lerp(self.blue, other.blue, t) )


def odd_root(p, n):
    """
    n-th root of p. Odd n keeps the sign of p; progress values are never
    negative, so that branch does not change the palette.
    """
    if n < 1:
        raise ValueError(f"root degree must be positive: {n}")
    if n % 2 == 0:
        return p ** (1.0 / n)

    return math.copysign(abs(p) ** (1.0 / n), p)


def shape_linear(p, degree=None):
    return p


def shape_root(p, degree=3):
    return odd_root(p, degree)


_SHAPERS = dict(zip(SHAPINGS, (shape_linear, shape_root)))


class Palette(object):

    def __init__(self, colors, inside=INSIDE_COLOR):

        colors = np.array(colors, dtype=np.ctypeslib.ctypes.c_int16).reshape((-1, 3))
        colors.flags.writeable = False

        self.colors = colors
        self.inside = Color(*(int(c) for c in inside))
        self._entries = tuple(Color(*(int(c) for c in row)) for row in colors)


    @classmethod
    def generate(cls, size, shaping="linear", degree=3):
        """
        Build the gradient for the given max iteration count.

        Args:
            size: number of entries, equal to the max iteration count
            shaping: "linear" or "root"
            degree: root degree, used by the "root" shaping only

        Raises:
            ValueError for a non-positive size or unknown shaping
        """
        if int(size) != size or size < 1:
            raise ValueError(f"palette size must be a positive integer: {size}")
        if shaping not in _SHAPERS:
            raise ValueError(f"unknown shaping: '{shaping}'")

        shaper = _SHAPERS[shaping]
        size = int(size)
        colors = np.empty((size, 3), dtype=np.ctypeslib.ctypes.c_int16)

        for i in range(size):
            mu = shaper(i / size, degree)
            colors[i][0] = lerp(RED[0], RED[1], mu)
            colors[i][1] = lerp(GREEN[0], GREEN[1], mu)
            colors[i][2] = lerp(BLUE[0], BLUE[1], mu)

        return cls(colors, INSIDE_COLOR)


    @property
    def size(self):
        return self.colors.shape[0]


    def lookup(self, index):
        """
        Return the color at index. Callers clamp into [0, size).
        """
        if not 0 <= index < self.size:
            raise IndexError(f"palette index out of range: {index}")

        return self._entries[index]


    def __len__(self):
        return self.size


    def __iter__(self):
        return iter(self._entries)


    def __eq__(self, other):
        if not isinstance(other, Palette):
            return NotImplemented
        return self.inside == other.inside and np.array_equal(self.colors, other.colors)

    __hash__ = None
