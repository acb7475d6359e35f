#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Render the Mandelbrot Set with smooth coloring and save it as an image.
"""

from timeit import default_timer as timer
import sys

from mandel.option import Option
from mandel.mandel_for import render
from mandel.export import save_image
from mandel.palette import Palette

def main(opt):

    config = opt.render_config()
    print("[{:>3}] size: {}x{}, iterations: {}, shaping: {}".format(
        0, config.width, config.height, config.max_iters, config.shaping))

    s = timer()
    palette = Palette.generate(config.max_iters, config.shaping, config.degree)
    print("      palette {:.3f} seconds".format(timer() - s))

    s = timer()
    pixels = render(config, palette)
    print("   mandelbrot {:.3f} seconds".format(timer() - s))

    try:
        save_image(pixels, opt.output)
    except (OSError, ValueError) as e:
        print(f"cannot save image '{opt.output}': {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == '__main__':

    sys.exit(main(Option()))
