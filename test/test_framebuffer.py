#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import unittest
from chip8vm.framebuffer import Framebuffer


class TestFrameBuffer(unittest.TestCase):
    def setUp(self):
        self.framebuffer = Framebuffer()
        self.framebuffer_small = Framebuffer(4, 5)

    def test_framebuffer_init(self):
        self.assertEqual((64, 32), self.framebuffer.get_vid_size())
        self.assertEqual(bytes(64 * 32), self.framebuffer.get_pixels())
        self.assertFalse(self.framebuffer.should_redraw())

    def test_framebuffer_writes(self):
        fb = self.framebuffer_small
        self.assertFalse(fb.xor_pixel(0, 0))
        self.assertEqual("0100000000000000000000000000000000000000", fb.get_pixels().hex())
        self.assertFalse(fb.xor_pixel(1, 1))
        self.assertEqual("0100000000010000000000000000000000000000", fb.get_pixels().hex())
        self.assertTrue(fb.should_redraw())

    def test_framebuffer_collision(self):
        fb = self.framebuffer_small
        fb.xor_pixel(2, 3)
        self.assertTrue(fb.xor_pixel(2, 3))
        self.assertEqual(0, fb.get_pixel(2, 3))

    def test_framebuffer_wrapping(self):
        fb = self.framebuffer_small
        fb.xor_pixel(4, 5)
        self.assertEqual(1, fb.get_pixel(0, 0))
        fb.xor_pixel(7, 11)
        self.assertEqual(1, fb.get_pixel(3, 1))
        self.assertEqual(2, sum(fb.get_pixels()))

    def test_framebuffer_clear(self):
        fb = self.framebuffer
        fb.xor_pixel(10, 10)
        fb.clear_redraw()
        fb.clear()
        self.assertEqual(bytes(64 * 32), fb.get_pixels())
        self.assertTrue(fb.should_redraw())
        fb.clear_redraw()
        self.assertFalse(fb.should_redraw())

    def test_framebuffer_snapshot(self):
        fb = self.framebuffer
        pixels = fb.get_pixels()
        fb.xor_pixel(0, 0)
        self.assertEqual(0, pixels[0])
        self.assertEqual(1, fb.get_pixels()[0])
