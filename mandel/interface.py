# -*- coding: utf-8 -*-
"""
Provides the Pygame-based window interface.
"""

__all__ = ["WindowPygame"]

import os, sys, time
os.environ['SDL_VIDEO_ALLOW_SCREENSAVER'] = '1';

import numpy as np
import pygame as pg

from .export import save_image

class WindowPygame(object):

    def __init__(self, opt):

        self.config = opt.render_config()
        self.width = self.config.width
        self.height = self.config.height
        self.max_iters = self.config.max_iters
        self.output_path = opt.output
        self.level = 0
        self.start_time = 0.0
        self.window = None

        # filled in by display()
        self.output = np.zeros((self.height, self.width, 4), dtype=np.ctypeslib.ctypes.c_uint8)


    def init(self):

        # There's no sound or anything like that. Thus initializing display only.
        try:
            pg.display.init()
            self.window = pg.display.set_mode(
                (self.width, self.height), flags=pg.DOUBLEBUF|pg.RESIZABLE)
        except pg.error as e:
            print(f"cannot open display: {e}", file=sys.stderr)
            sys.exit(1)

        self.window.fill(pg.Color('#000000'))

        pg.display.set_caption("Mandelbrot Set")
        pg.display.flip()


    def display(self):
        """
        Compute self.output and show it. Implemented by the application.
        """
        raise NotImplementedError


    def print_info(self):

        c = self.config
        print("[{:>3}] size: {}x{}, iterations: {}, shaping: {}".format(
            self.level, c.width, c.height, c.max_iters, c.shaping))
        print("[{:>3}] min-x, max-x : {:.16f}, {:.16f}".format(
            self.level, c.min_x, c.max_x))
        print("[{:>3}] min-y, max-y : {:.16f}, {:.16f}".format(
            self.level, c.min_y, c.max_y))


    def run(self):

        self.display()

        # Wait for an event so minimum CPU utilization when idled.
        while True:
            e = pg.event.wait()
            if e.type == pg.KEYDOWN:
                if self.on_key_press(e.key):
                    break
                pg.event.clear()
                sys.stdout.flush()
            elif e.type == pg.VIDEORESIZE:
                self.update_window(videoexpose=True)
            elif e.type == pg.VIDEOEXPOSE:
                self.update_window(videoexpose=True)
            elif e.type == pg.QUIT:
                break

        pg.quit()


    def update_window(self, videoexpose=False):

        buf = np.ravel(self.output)

        if not videoexpose:
            end_time = time.time() - self.start_time
            print("  RGB values total : {}".format(self.__tally_rgb(buf)))
            print("      compute time : {:.3f} seconds".format(end_time))

        img = pg.image.frombuffer(buf, (self.width, self.height), 'RGBA')

        # The buffer is computed once; stretch it to the current window.
        surface = pg.display.get_surface()
        size = surface.get_size()
        if size != (self.width, self.height):
            img = pg.transform.scale(img, size)

        surface.blit(img, (0,0))
        pg.display.flip()


    def on_key_press(self, symbol):
        """
        Handle a key; return True to exit the application.
        """
        if symbol in (pg.K_q, pg.K_ESCAPE):
            return True

        elif symbol == pg.K_e:
            save_image(self.output, self.output_path)

        return False


    def __tally_rgb(self, buf):

        t = np.sum(buf, dtype=np.int64)

        # Subtract the alpha channel.
        t -= 255 * self.height * self.width

        return int(t)
