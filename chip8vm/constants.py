#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

# App identification
APP_NAME = "Chip8VM"
APP_VERSION = "1.0.0"
APP_COPYRIGHT = "Copyright (C) 2022 Gregory Maynard-Hoare, licensed under GNU Affero General Public License v3.0"
APP_INTRO = "{} V{} -- ".format(APP_NAME, APP_VERSION)

# Memory layout
MEM_SIZE = 0x1000
PROGRAM_START = 0x200
PROGRAM_MAX_SIZE = MEM_SIZE - PROGRAM_START
PC_MAX = MEM_SIZE - 2  # Highest address holding a complete instruction
FONT_START = 0x000
FONT_SPRITE_HEIGHT = 5

# Machine geometry
NUM_REGISTERS = 0x10
NUM_KEYS = 0x10
STACK_SIZE = 16
VID_WIDTH = 64
VID_HEIGHT = 32

# Host cadences
TIMER_FREQ = 60.0           # Delay and sound timers count down at 60Hz
DEFAULT_CLOCK_SPEED = 700   # Instructions per second

# Results of a single step
STEP_CONTINUE = 0
STEP_SUSPENDED = 1

# Default mappings for keys 0-F, later populated into a dictionary.  These are PyGame key codes, laid out as the
# 1234/QWER/ASDF/ZXCV block of a QWERTY keyboard, which mirrors the original hex keypad
DEFAULT_KEYMAP = "120,49,50,51,113,119,101,97,115,100,122,99,52,114,102,118"

# Built-in hexadecimal font, 5 bytes per digit 0-F
SYSTEM_FONT = bytes((
    0xF0, 0x90, 0x90, 0x90, 0xF0,  # 0
    0x20, 0x60, 0x20, 0x20, 0x70,  # 1
    0xF0, 0x10, 0xF0, 0x80, 0xF0,  # 2
    0xF0, 0x10, 0xF0, 0x10, 0xF0,  # 3
    0x90, 0x90, 0xF0, 0x10, 0x10,  # 4
    0xF0, 0x80, 0xF0, 0x10, 0xF0,  # 5
    0xF0, 0x80, 0xF0, 0x90, 0xF0,  # 6
    0xF0, 0x10, 0x20, 0x40, 0x40,  # 7
    0xF0, 0x90, 0xF0, 0x90, 0xF0,  # 8
    0xF0, 0x90, 0xF0, 0x10, 0xF0,  # 9
    0xF0, 0x90, 0xF0, 0x90, 0x90,  # A
    0xE0, 0x90, 0xE0, 0x90, 0xE0,  # B
    0xF0, 0x80, 0x80, 0x80, 0xF0,  # C
    0xE0, 0x90, 0x90, 0x90, 0xE0,  # D
    0xF0, 0x80, 0xF0, 0x80, 0xF0,  # E
    0xF0, 0x80, 0xF0, 0x80, 0x80   # F
))
