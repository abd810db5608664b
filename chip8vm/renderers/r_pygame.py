#!/usr/bin/env python3

"""
PyGame Renderer Plugin

Draws framebuffer snapshots onto an SDL window surface via PyGame.  The surface
is allocated at the size of the emulated screen, and then the contents are
stretched (using 'Nearest Neighbour' translation) to fit the window itself.
This means we don't have to draw the same pixel multiple times.

Lit pixels are drawn green on a near-black background.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import pygame
from .r_null import RendererError, Renderer as RendererBase
from ..constants import APP_NAME

PIXEL_OFF = 0x111111
PIXEL_ON = 0x33FF77


class Renderer(RendererBase):
    def __init__(self, scale=None, **kwargs):
        if scale is None:
            scale = 1024  # Default window width if not supplied

        if scale < 2:
            raise RendererError("Window width must be at least 2 pixels.")

        pygame.display.init()
        self.set_title(APP_NAME)
        self.rgb_buffer = None
        self.scaled_size = (scale, scale // 2)
        self.display_surface = pygame.display.set_mode(self.scaled_size)

        # Split compound RGB values for faster byte-based lookup later
        self.rgb_map = [bytes((i >> 16, (i >> 8) & 0xFF, i & 0xFF)) for i in (PIXEL_OFF, PIXEL_ON)]

        super().__init__(scale)

    def set_resolution(self, width, height):
        self.rgb_buffer = memoryview(bytearray(self.rgb_map[0] * (width * height)))  # 24-bit
        super().set_resolution(width, height)

    def draw(self, pixels):
        rgb_buffer = self.rgb_buffer
        rgb_map = self.rgb_map

        # Update RGB buffer in-place to minimise allocations and PyGame calls
        for location, pixel in enumerate(pixels):
            rgb_location = location * 3
            rgb_buffer[rgb_location:rgb_location + 3] = rgb_map[pixel]

        # Blit the bytearray straight to the surface, rather than via very frequent PixelArray updates
        render_surface = pygame.image.frombuffer(rgb_buffer, (self.width, self.height), "RGB")
        scaled_win = pygame.transform.scale(render_surface, self.scaled_size)
        self.display_surface.blit(scaled_win, (0, 0))
        pygame.display.flip()
        super().draw(pixels)

    def set_title(self, title):
        pygame.display.set_caption(title)

    def shutdown(self):
        # PyGame can segfault if display.quit is called via __del__
        pygame.display.quit()
        super().shutdown()
