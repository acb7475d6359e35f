# -*- coding: utf-8 -*-
"""
Common kernels for the escape-time loop, smooth coloring, and palette blending.
"""

__all__ = ["lerp", "escape_time", "get_color", "mandel"]

import math, os

from .base import RADIUS

ESCAPE_RADIUS_2 = RADIUS * RADIUS
LOG2_BASE = math.log2(2.0)
EPSILON = 1e-300

# Keep log2 and friends off the vectorized math library, so the compiled
# kernels round exactly like the interpreter.
os.environ['NUMBA_DISABLE_INTEL_SVML'] = str(1)
os.environ['NUMBA_LOOP_VECTORIZE'] = str(0)
os.environ['NUMBA_SLP_VECTORIZE'] = str(0)

from numba import njit, uint8

def _lerp(c1, c2, t):

    # Round half up; the result lies between c1 and c2.
    return uint8(math.floor(c1 + (c2 - c1) * t + 0.5))

lerp = njit(nogil=True)(_lerp)


def _escape_time(creal, cimag, max_iters):

    zreal = 0.0
    zimag = 0.0
    iteration = 0.0

    # Compute z = z^2 + c.
    while zreal * zreal + zimag * zimag <= ESCAPE_RADIUS_2 and iteration < max_iters:
        ztemp = zreal * zreal - zimag * zimag + creal
        zimag = 2.0 * zreal * zimag + cimag
        zreal = ztemp
        iteration += 1.0

    if iteration < max_iters:
        # Smooth coloring.
        normz_sqr = max(zreal * zreal + zimag * zimag, EPSILON)
        log_zn = math.log2(normz_sqr) / 2.0
        if log_zn > 0.0:
            nu = math.log2(log_zn / LOG2_BASE) / LOG2_BASE
            iteration = iteration + 1.0 - nu

        # Far-away points overshoot below zero; also catches NaN.
        if not iteration >= 0.0:
            iteration = 0.0

    return iteration

escape_time = njit(nogil=True)(_escape_time)


def _get_color(colors, inside, mu, max_iters):

    last = max_iters - 1
    i_mu = int(math.floor(mu))
    dx = mu - i_mu

    if mu >= max_iters:
        r1, g1, b1 = inside[0], inside[1], inside[2]
    else:
        i = min(i_mu, last)
        r1, g1, b1 = colors[i, 0], colors[i, 1], colors[i, 2]

    i = min(i_mu + 1, last)
    r2, g2, b2 = colors[i, 0], colors[i, 1], colors[i, 2]

    r = lerp(r1, r2, dx)
    g = lerp(g1, g2, dx)
    b = lerp(b1, b2, dx)

    return (r, g, b)

get_color = njit(nogil=True)(_get_color)


def _mandel(colors, inside, creal, cimag, max_iters):

    mu = escape_time(creal, cimag, max_iters)

    return get_color(colors, inside, mu, max_iters)

mandel = njit(nogil=True)(_mandel)
