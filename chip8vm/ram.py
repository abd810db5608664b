#!/usr/bin/env python3

"""
RAM Emulator

Supports reading and writing of blocks of memory or individual bytes.  Every
access is checked against the size of the bank, so a program that points the
index register past the end of memory gets a MemoryOutOfBounds error rather
than silently wrapping around onto the font or its own code.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .errors import MemoryOutOfBounds


class RAM:
    def __init__(self, mem_size=0):
        self.resize(mem_size)

    def resize(self, mem_size):
        self.mem = memoryview(bytearray(mem_size))
        self.mem_top = mem_size - 1
        self.mem_size = mem_size

    def read(self, location):
        self.check_bounds(location)
        return self.mem[location]

    def read_block(self, location, size=1):
        self.check_bounds(location, size)
        return self.mem[location:location + size]

    def write(self, location, byte):
        self.check_bounds(location)
        self.mem[location] = byte

    def write_block(self, location, block):
        block_size = len(block)
        self.check_bounds(location, block_size)
        self.mem[location:location + block_size] = block

    def check_bounds(self, location, size=1):
        # Zero-sized blocks still need a valid starting point
        if location < 0 or location > self.mem_top:
            raise MemoryOutOfBounds(location)

        block_top = location + max(size, 1) - 1

        if block_top > self.mem_top:
            raise MemoryOutOfBounds(block_top)

    def clear(self):
        self.mem[:] = bytes(self.mem_size)
