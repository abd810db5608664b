#!/usr/bin/env python3

"""
Framebuffer Emulator

Pixels are written here, and are only drawn to the actual display (the host
rendering system) when the host gets round to it, which is usually at 60Hz.
The framebuffer itself knows nothing about the renderer.  It just raises a
redraw flag whenever its contents change, and the host clears the flag once it
has pushed a snapshot to the screen.

Programs for this system cannot write directly into video RAM.  Instead,
sprites are drawn to the screen using an XOR method.  Each pixel is stored as
a whole byte holding either 0 or 1, in row-major order.

Collisions (where any pixel was set, but was unset by an XOR), are reported
back to the caller so the CPU can set the Vf flag.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import VID_WIDTH, VID_HEIGHT
from .ram import RAM


class Framebuffer:
    def __init__(self, vid_width=VID_WIDTH, vid_height=VID_HEIGHT):
        self.vid_width = vid_width
        self.vid_height = vid_height
        self.vid_size = vid_width * vid_height
        self.vram = RAM(self.vid_size)
        self.redraw = False

    def clear(self):
        self.vram.clear()
        self.redraw = True

    def xor_pixel(self, x, y):
        # Returns flagging any collision.  Coordinates always wrap around the screen edges.
        vram_loc = (y % self.vid_height) * self.vid_width + (x % self.vid_width)
        pixel = self.vram.read(vram_loc)
        self.vram.write(vram_loc, pixel ^ 1)
        self.redraw = True
        return pixel != 0

    def get_pixel(self, x, y):
        return self.vram.read((y % self.vid_height) * self.vid_width + (x % self.vid_width))

    def get_pixels(self):
        # Snapshot, so the renderer can't scribble on video RAM
        return bytes(self.vram.mem)

    def get_vid_size(self):
        return self.vid_width, self.vid_height

    def should_redraw(self):
        return self.redraw

    def clear_redraw(self):
        self.redraw = False
