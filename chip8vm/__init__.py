#!/usr/bin/env python3

"""
Main Startup Module

Simply call main(args) to start the emulator, replacing args with a dictionary
of options.  This can be done via the Terminal or GUI.

All options must be supplied.  Defaults can be specified with a 'None'.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import APP_INTRO, APP_COPYRIGHT, APP_NAME, DEFAULT_CLOCK_SPEED, DEFAULT_KEYMAP, PROGRAM_START
from .debugger import Debugger
from .hostio import Loader
from .host import Host
from .machine import Machine


class StartupError(Exception):
    pass


def main(args):
    print("".join((APP_INTRO, APP_COPYRIGHT)))

    opt_renderer = args["renderer"]
    auto_select_renderer = opt_renderer is None  # If necessary, try PyGame first, then run headless.
    mute_audio = args["mute"]

    # flake8: noqa: F401
    if auto_select_renderer or opt_renderer == "pygame":
        # pylint: disable=unused-import, import-outside-toplevel, raise-missing-from
        try:
            import pygame
        except ImportError:
            if auto_select_renderer:
                print("PyGame does not appear to be installed.  Running headless.")
                opt_renderer = "null"
            else:
                raise StartupError(
                    "PyGame does not appear to be installed."
                )
        else:
            from .inputs.i_pygame import Inputs
            from .renderers.r_pygame import Renderer

            if mute_audio:
                from .audio.a_null import Audio
            else:
                from .audio.a_pygame import Audio

    if opt_renderer == "null":
        # pylint: disable=import-outside-toplevel
        from .inputs.i_null import Inputs
        from .renderers.r_null import Renderer
        from .audio.a_null import Audio
    elif opt_renderer not in (None, "pygame"):
        raise StartupError("Unknown renderer '{}'.".format(opt_renderer))

    # Set up debugger and live output if necessary
    debugger = Debugger()
    debugger.set_live(args["debug"])

    # Create a new machine and read the ROM binary into it
    quirks = args["index_overflow_quirks"]
    machine = Machine(debugger=debugger, index_overflow_quirks=bool(quirks))
    loader = Loader()
    program = loader.load_binary(args["filename"])
    machine.load(program)

    if args["disassemble"]:
        print("\n".join(machine.disassemble(PROGRAM_START, len(program))))

    # Set up the host-side plugins
    inputs = Inputs(args["keymap"] or DEFAULT_KEYMAP)
    renderer = Renderer(scale=args["scale"])
    renderer.set_resolution(*machine.framebuffer.get_vid_size())
    renderer.set_title("{} - {}".format(APP_NAME, loader.get_title(args["filename"])))
    audio = Audio()

    clock_speed = args["clock_speed"]
    host = Host(machine, renderer, inputs, audio, DEFAULT_CLOCK_SPEED if clock_speed is None else clock_speed)
    print("Press P to pause emulation, ESC to quit.")

    try:
        host.run()
    finally:
        # The machine has stopped, so shut down the rendering framework.  __del__ cannot be relied upon when using PyPy
        audio.shutdown()
        inputs.shutdown()
        renderer.shutdown()
