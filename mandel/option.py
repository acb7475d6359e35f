# -*- coding: utf-8 -*-
"""
Provides the Option class for config file and command line parsing.
"""

__all__ = ['Option', 'show_keyboard_shortcuts']

import sys

from configparser import ConfigParser
from optparse import OptionGroup, OptionParser
from os.path import basename, exists

from .base import WIDTH, HEIGHT, MAX_ITERS, BOUNDS, SHAPINGS, RenderConfig

class Option(object):

    def __init__(self, argv=None):

        usage = "%prog [--config filepath [section]] [options]"
        epilog = """
          Values exceeding the range specification are silently clipped to
          the respective minimum or maximum value. The palette holds one
          color per iteration.
          """
        epilog = " ".join([line.lstrip() for line in epilog.splitlines()])

        p = OptionParser(usage=usage, version="%prog 0.1.0", epilog=epilog)
        self.prog = p.get_prog_name()

        def _opt(parser, opt, t, h, **kwargs):
          if t is None:
            parser.add_option(opt, help=h, action="store_true", default=False)
          else:
            parser.add_option(opt, type=t, help=h, metavar="ARG", **kwargs)

        argv = list(sys.argv[1:] if argv is None else argv)

        # allow options with underscore by replacing with dash
        for i in range(len(argv)):
            if argv[i].startswith('--'):
                name, sep, value = argv[i].partition('=')
                argv[i] = name.replace('_', '-') + sep + value

        # configure options
        _opt(p, "--shortcuts", None, "show keyboard shortcuts and exit")
        _opt(p, "--width", "int", f"width of image [1-8000]: {WIDTH}")
        _opt(p, "--height", "int", f"height of image [1-5000]: {HEIGHT}")
        _opt(p, "--max-iters", "int", f"maximum iterations [1-100000]: {MAX_ITERS}")
        _opt(p, "--min-x", "float", f"plane window min-x [float]: {BOUNDS[0]}")
        _opt(p, "--max-x", "float", f"plane window max-x [float]: {BOUNDS[1]}")
        _opt(p, "--min-y", "float", f"plane window min-y [float]: {BOUNDS[2]}")
        _opt(p, "--max-y", "float", f"plane window max-y [float]: {BOUNDS[3]}")
        _opt(p, "--shaping", "choice", "palette shaping [linear,root]: linear",
             choices=SHAPINGS)
        _opt(p, "--degree", "int", "root degree for root shaping [1-16]: 3")

        g = OptionGroup(p, "Export Options (mandel_export)")
        _opt(g, "--output", "string", "image file to write: image.png")
        p.add_option_group(g)

        p.set_defaults(
            width=WIDTH, height=HEIGHT, max_iters=MAX_ITERS,
            min_x=BOUNDS[0], max_x=BOUNDS[1], min_y=BOUNDS[2], max_y=BOUNDS[3],
            shaping='linear', degree=3, output='image.png' )

        # optionally, override defaults from a config file
        self.__handle_config(p, argv)

        # process command-line arguments
        (opt, args) = p.parse_args(argv)

        # show usage
        if len(args):
            p.print_help()
            sys.exit(2)
        if opt.shortcuts:
            show_keyboard_shortcuts()
            sys.exit(0)

        # clamp to minimum-maximum values
        self.width = max(1, min(8000, opt.width))
        self.height = max(1, min(5000, opt.height))
        self.max_iters = max(1, min(100000, opt.max_iters))
        self.degree = max(1, min(16, opt.degree))
        self.min_x, self.max_x = opt.min_x, opt.max_x
        self.min_y, self.max_y = opt.min_y, opt.max_y
        self.shaping = opt.shaping
        self.output = opt.output

        if self.shaping not in SHAPINGS:
            self.__error(f"invalid shaping: '{self.shaping}'")
        if not (self.min_x < self.max_x and self.min_y < self.max_y):
            self.__error("empty plane window: min-x, max-x : {}, {}; min-y, max-y : {}, {}".format(
                self.min_x, self.max_x, self.min_y, self.max_y))

        del opt, args


    def render_config(self):

        return RenderConfig(
            self.width, self.height, self.max_iters,
            (self.min_x, self.max_x, self.min_y, self.max_y),
            self.shaping, self.degree )


    def __error(self, mesg):

        print(f"{basename(self.prog)}: error: {mesg}", file=sys.stderr)
        sys.exit(2)


    def __handle_config(self, parser, argv):

        if len(argv) >= 1 and argv[0].startswith('--config'):
            try:
                (_, config_path) = argv[0].split('=')
                del argv[0]
            except ValueError:
                if len(argv) < 2:
                    self.__error("--config option requires an argument")
                config_path = argv[1]
                del argv[1], argv[0]

            if len(argv) >= 1 and not argv[0].startswith('-'):
                section = argv[0]
                del argv[0]
            else:
                section = 'common'

            if not exists(config_path):
                self.__error(f"no such file or directory: '{config_path}'")

            config = ConfigParser(default_section=None, empty_lines_in_values=False)
            config.read(config_path)

            # the common section is optional when another one is named
            if section == 'common' or config.has_section('common'):
                self.__override_defaults(parser, config, 'common')
            if section != 'common':
                self.__override_defaults(parser, config, section)


    def __override_defaults(self, parser, config, section):

        if not config.has_section(section):
            self.__error(f"no such section in config: '{section}'")

        opt = dict()

        for key in ('width', 'height', 'max_iters', 'degree'):
            if config.has_option(section, key):
                opt[key] = int(config.get(section, key))

        for key in ('min_x', 'max_x', 'min_y', 'max_y'):
            if config.has_option(section, key):
                opt[key] = float(config.get(section, key))

        for key in ('shaping', 'output'):
            if config.has_option(section, key):
                opt[key] = str(config.get(section, key))

        if len(opt):
            parser.set_defaults(**opt)


def show_keyboard_shortcuts():

    print("""
Keyboard shortcuts:
  The image is computed once and redrawn when the window is resized.
  q) Esc)    terminate the application and exit
  e)         export the window RGBA values to the --output file
    """.strip())
