#!/usr/bin/env python3

__author__ = "Gregory Maynard-Hoare"
__copyright__ = "Copyright (C) 2024 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"
__version__ = "1.0.0"

import sys
from argparse import ArgumentParser
from chip8vm import main, StartupError
from chip8vm.constants import DEFAULT_CLOCK_SPEED, DEFAULT_KEYMAP
from chip8vm.errors import LoadError, ExecError
from chip8vm.inputs.i_null import InputsError
from chip8vm.renderers.r_null import RendererError


def parse_args(argv=None):
    parser = ArgumentParser()
    parser.add_argument("filename", help="ROM to execute (normally ending in .ch8 or .c8)")
    parser.add_argument(
        "-c", "--clock_speed", type=int, default=DEFAULT_CLOCK_SPEED,
        help="set the CPU speed in operations/second (default {}, 0 = uncapped)".format(DEFAULT_CLOCK_SPEED)
    )
    parser.add_argument(
        "-r", "--renderer", choices=["pygame", "null"],
        help="set the rendering, input, and audio systems (pygame by default if available, otherwise null)"
    )
    parser.add_argument(
        "-s", "--scale", type=int,
        help="set the window width in PyGame mode (default 1024)"
    )
    parser.add_argument(
        "-m", "--mute", action="store_true", default=False,
        help="mute the emulated buzzer"
    )
    parser.add_argument(
        "-k", "--keymap", default=DEFAULT_KEYMAP,
        help="redefine the 16 keyscan codes for keys 0-F.  Separate each decimal with a comma"
    )
    parser.add_argument(
        "--index_overflow_quirks", type=int, choices=[0, 1], default=0,
        help="set Vf after ADD I, Vx from the post-addition index register, as the reference interpreter does"
    )
    parser.add_argument(
        "-D", "--disassemble", action="store_true", default=False,
        help="print a disassembly of the ROM before running it"
    )
    parser.add_argument(
        "-d", "--debug", action="store_true", default=False,
        help="enable live debug output.  Slows CPU execution"
    )
    return parser.parse_args(argv)  # Can call sys.exit(2) if args are incorrect


def run(argv=None):
    args = vars(parse_args(argv))

    # It is possible to start the emulator from a GUI by calling main() with a dictionary
    try:
        main(args)
    except (StartupError, LoadError, InputsError, RendererError) as err:
        sys.exit(str(err))
    except ExecError as err:
        sys.exit("Emulation halted.\n\n{}\n\n{}".format(getattr(err, "debug_info", ""), err))


if __name__ == "__main__":
    run()
