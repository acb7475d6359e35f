#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Display the Mandelbrot Set with smooth coloring in a resizable window.
"""

import time

from mandel.option import Option
from mandel.interface import WindowPygame
from mandel.mandel_for import render
from mandel.palette import Palette

class App(WindowPygame):

    def __init__(self, opt):
        super().__init__(opt)

        c = self.config
        print("[{:>3}] palette {} colors, shaping {}".format(self.level, c.max_iters, c.shaping))

        # Construct the palette once; it is read-only afterwards.
        self.palette = Palette.generate(c.max_iters, c.shaping, c.degree)

        # Instantiate the Window interface.
        super().init()

    def display(self):

        self.print_info()
        self.start_time = time.time()

        self.output = render(self.config, self.palette)
        self.update_window()

    def exit(self):

        del self.palette, self.output


if __name__ == '__main__':

    mandel = App(Option())
    try:
        mandel.run()
        mandel.exit()
    except KeyboardInterrupt:
        mandel.exit()
