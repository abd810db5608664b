#!/usr/bin/env python3

"""
Machine Emulator (CHIP-8)

Owns all of the emulated state: RAM, registers, call stack, timers, video RAM
and the hex keypad.  The host drives it one instruction at a time with step(),
and is responsible for everything to do with real time.  Timers are only ever
counted down by the host via tick_timers(), at its own 60Hz cadence, because
instruction throughput and timer rate have nothing to do with each other.

Instructions are dispatched through a dictionary of handlers, keyed the same
way as the mnemonic table in opcodes.py.  Each handler works out where the
program counter goes next by setting 'next_pc'.  It is only committed once the
handler has finished without error, so a faulting instruction leaves the
program counter pointing at itself.

Waiting for a key (Fx0A) doesn't block.  The machine records which register
wants the key and refuses to step until the host reports a key going down via
set_key().
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from random import Random
from .constants import (
    MEM_SIZE, PROGRAM_START, PROGRAM_MAX_SIZE, PC_MAX, FONT_START, FONT_SPRITE_HEIGHT, NUM_REGISTERS, NUM_KEYS,
    STACK_SIZE, STEP_CONTINUE, STEP_SUSPENDED, SYSTEM_FONT
)
from .debugger import Debugger
from .disassembler import disassemble_block
from .errors import EmptyProgram, ProgramTooLarge, ExecError, UnknownOpcode, MemoryOutOfBounds
from .framebuffer import Framebuffer
from .hostio import Loader
from .opcodes import decode_key, mnemonic
from .ram import RAM
from .stack import Stack

CPU_ENDIAN = "big"  # CHIP-8 is big-endian


class Machine:
    def __init__(self, rng=None, debugger=None, index_overflow_quirks=False):
        self.ram = RAM(MEM_SIZE)
        self.ram.write_block(FONT_START, SYSTEM_FONT)
        self.stack = Stack(STACK_SIZE)
        self.framebuffer = Framebuffer()
        self.debugger = Debugger() if debugger is None else debugger
        self.live_debug = self.debugger.is_live()

        # Cxkk draws from this, so tests can pass in a seeded (or fake) source
        self.rng = Random() if rng is None else rng

        """
        Quirks
        ------

        - Index overflow quirks : When enabled, Fx1E computes Vf from the index register *after* the addition (i.e.
                                  I + Vx + Vx), as the reference interpreter did.  When disabled, Vf is simply set
                                  when the new I no longer fits in a byte.
        """

        self.index_overflow_quirks = index_overflow_quirks

        # Define instruction pointers.  Keys must match opcodes.MNEMONICS.
        self.instructions = {
            0x0000: self._00E0,
            0x000E: self._00EE,
            0x1000: self._1nnn,
            0x2000: self._2nnn,
            0x3000: self._3xkk,
            0x4000: self._4xkk,
            0x5000: self._5xy0,
            0x6000: self._6xkk,
            0x7000: self._7xkk,
            0x8000: self._8xy0,
            0x8001: self._8xy1,
            0x8002: self._8xy2,
            0x8003: self._8xy3,
            0x8004: self._8xy4,
            0x8005: self._8xy5,
            0x8006: self._8xy6,
            0x8007: self._8xy7,
            0x800E: self._8xyE,
            0x9000: self._9xy0,
            0xA000: self._Annn,
            0xB000: self._Bnnn,
            0xC000: self._Cxkk,
            0xD000: self._Dxyn,
            0xE09E: self._Ex9E,
            0xE0A1: self._ExA1,
            0xF007: self._Fx07,
            0xF00A: self._Fx0A,
            0xF015: self._Fx15,
            0xF018: self._Fx18,
            0xF01E: self._Fx1E,
            0xF029: self._Fx29,
            0xF033: self._Fx33,
            0xF055: self._Fx55,
            0xF065: self._Fx65
        }

        # Initialise registers
        self.v = memoryview(bytearray(NUM_REGISTERS))
        self.i = 0  # Index register

        # Initialise timers
        self.dt = 0  # Delay timer
        self.st = 0  # Sound timer

        # Initialise program counter and current opcode
        self.pc = PROGRAM_START
        self.next_pc = PROGRAM_START
        self.debug_pc = PROGRAM_START
        self.opcode = 0

        # Input-related vars
        self.key_down = [False] * NUM_KEYS
        self.awaiting_key = None  # Register number waiting for a keypress

    # Program loading

    def load(self, program):
        program_size = len(program)

        if program_size == 0:
            raise EmptyProgram("Program is empty.")

        if program_size > PROGRAM_MAX_SIZE:
            raise ProgramTooLarge(
                "Program is {} bytes, but only {} bytes fit in memory.".format(program_size, PROGRAM_MAX_SIZE)
            )

        self.ram.write_block(PROGRAM_START, program)

    def load_file(self, filename, loader=None):
        self.load((Loader() if loader is None else loader).load_binary(filename))

    # Execution

    def step(self):
        if self.awaiting_key is not None:
            return STEP_SUSPENDED

        self.debug_pc = self.pc  # Keep track of the program counter in case there is a crash
        self.opcode = None  # Nothing decoded yet

        try:
            self.execute(self.fetch())
        except ExecError as err:
            instruction = "(fetch failed)" if self.opcode is None else mnemonic(self.opcode)
            err.debug_info = self.debugger.debug(self, instruction, verbose=True)
            raise

        return STEP_CONTINUE if self.awaiting_key is None else STEP_SUSPENDED

    def fetch(self):
        if self.pc > PC_MAX:
            raise MemoryOutOfBounds(self.pc, "Program counter 0x{:03x} runs off the end of memory.".format(self.pc))

        return int.from_bytes(self.ram.read_block(self.pc, 2), CPU_ENDIAN, signed=False)

    def execute(self, opcode):
        self.opcode = opcode
        instruction = self.instructions.get(decode_key(opcode))

        if instruction is None:
            raise UnknownOpcode(opcode >> 8, opcode & 0xFF, self.pc)

        if self.live_debug:
            self.debugger.output(self, mnemonic(opcode))

        self.next_pc = (self.pc + 2) & 0xFFF
        instruction()
        self.pc = self.next_pc

    # Host interface

    def tick_timers(self, delay_decrement=1, sound_decrement=1):
        self.dt = max(0, self.dt - delay_decrement)
        self.st = max(0, self.st - sound_decrement)

    def set_key(self, key, pressed):
        self._check_key(key)
        was_down = self.key_down[key]
        self.key_down[key] = pressed

        # Only a fresh press ends the wait, not a key that was already held
        if pressed and not was_down and self.awaiting_key is not None:
            self.v[self.awaiting_key] = key
            self.awaiting_key = None

    def is_key_down(self, key):
        self._check_key(key)
        return self.key_down[key]

    @staticmethod
    def _check_key(key):
        if not 0 <= key < NUM_KEYS:
            raise ValueError("Key 0x{:x} is not on the keypad.".format(key))

    def get_framebuffer(self):
        return self.framebuffer.get_pixels()

    def get_pixel(self, x, y):
        return self.framebuffer.get_pixel(x, y)

    def should_redraw(self):
        return self.framebuffer.should_redraw()

    def clear_redraw(self):
        self.framebuffer.clear_redraw()

    def disassemble(self, start, length):
        start = max(0, start)
        end = min(MEM_SIZE, start + length)

        if end <= start:
            return []

        return disassemble_block(self.ram.mem[start:end], start)

    # References to Vx, Vy, byte and addr are always in the same opcode position throughout all instructions, so avoid
    # excessive code duplication.  These are recalculated each time they are referenced.
    @property
    def vx(self):
        return (self.opcode & 0xF00) >> 8

    @property
    def vy(self):
        return (self.opcode & 0xF0) >> 4

    @property
    def addr(self):
        return self.opcode & 0xFFF

    @property
    def byte(self):
        return self.opcode & 0xFF

    @property
    def nibble(self):
        return self.opcode & 0xF

    def _jump(self, address):
        if address > PC_MAX:
            raise MemoryOutOfBounds(address, "Jump target 0x{:03x} runs off the end of memory.".format(address))

        self.next_pc = address

    def _post_skip(self):
        self.next_pc = (self.pc + 4) & 0xFFF

    def _00E0(self):  # CLS
        self.framebuffer.clear()

    def _00EE(self):  # RET
        # The call site was stored, so resume just past it
        self.next_pc = (self.stack.pop() + 2) & 0xFFF

    def _1nnn(self):  # JP addr
        self._jump(self.addr)

    def _2nnn(self):  # CALL addr
        self._jump(self.addr)  # Checked before anything is pushed
        self.stack.push(self.pc)

    def _3xkk(self):  # SE Vx, byte
        if self.v[self.vx] == self.byte:
            self._post_skip()

    def _4xkk(self):  # SNE Vx, byte
        if self.v[self.vx] != self.byte:
            self._post_skip()

    def _5xy0(self):  # SE Vx, Vy
        if self.v[self.vx] == self.v[self.vy]:
            self._post_skip()

    def _6xkk(self):  # LD Vx, byte
        self.v[self.vx] = self.byte

    def _7xkk(self):  # ADD Vx, byte
        vx = self.vx
        self.v[vx] = (self.v[vx] + self.byte) & 0xFF

    def _8xy0(self):  # LD Vx, Vy
        self.v[self.vx] = self.v[self.vy]

    def _8xy1(self):  # OR Vx, Vy
        self.v[self.vx] |= self.v[self.vy]

    def _8xy2(self):  # AND Vx, Vy
        self.v[self.vx] &= self.v[self.vy]

    def _8xy3(self):  # XOR Vx, Vy
        self.v[self.vx] ^= self.v[self.vy]

    # Flag-setting instructions write Vf last, as Vf may also be one of the operands

    def _8xy4(self):  # ADD Vx, Vy
        val = self.v[self.vx] + self.v[self.vy]
        self.v[self.vx] = val & 0xFF
        self.v[0xF] = int(val > 0xFF)  # Vf is set when carrying

    def _8xy5(self):  # SUB Vx, Vy
        vx_val = self.v[self.vx]
        vy_val = self.v[self.vy]
        self.v[self.vx] = (vx_val - vy_val) & 0xFF
        self.v[0xF] = int(vx_val > vy_val)  # Vf is set when NOT borrowing

    def _8xy6(self):  # SHR Vx
        val = self.v[self.vx]
        self.v[self.vx] = val >> 1
        self.v[0xF] = val & 1

    def _8xy7(self):  # SUBN Vy, Vx
        # The result lands in Vy, not Vx
        vx_val = self.v[self.vx]
        vy_val = self.v[self.vy]
        self.v[self.vy] = (vy_val - vx_val) & 0xFF
        self.v[0xF] = int(vy_val > vx_val)

    def _8xyE(self):  # SHL Vx
        val = self.v[self.vx]
        self.v[self.vx] = (val << 1) & 0xFF
        self.v[0xF] = val >> 7

    def _9xy0(self):  # SNE Vx, Vy
        if self.v[self.vx] != self.v[self.vy]:
            self._post_skip()

    def _Annn(self):  # LD I, addr
        self.i = self.addr

    def _Bnnn(self):  # JP V0, addr
        self._jump(self.v[0] + self.addr)

    def _Cxkk(self):  # RND Vx, byte
        # The ANDing here is intentional.  This is not a random number between 0 and 'byte' inclusive.
        self.v[self.vx] = self.rng.randint(0, 0xFF) & self.byte

    def _Dxyn(self):  # DRW Vx, Vy, nibble
        height = self.nibble
        # Read the whole sprite up front, so a bad index register faults before anything is drawn
        sprite = self.ram.read_block(self.i, height) if height else b""
        vx_pos = self.v[self.vx]
        vy_pos = self.v[self.vy]
        collided = False

        for y, spr_data in enumerate(sprite):
            for x in range(8):
                if spr_data & (0x80 >> x):
                    if self.framebuffer.xor_pixel(vx_pos + x, vy_pos + y):
                        # Don't stop drawing.  Set the flag, and never unset it for this sprite.
                        collided = True

        self.framebuffer.redraw = True  # Even an empty sprite counts as a draw
        self.v[0xF] = int(collided)

    def _Ex9E(self):  # SKP Vx
        if self.key_down[self.v[self.vx] & 0xF]:
            self._post_skip()

    def _ExA1(self):  # SKNP Vx
        if not self.key_down[self.v[self.vx] & 0xF]:
            self._post_skip()

    def _Fx07(self):  # LD Vx, DT
        self.v[self.vx] = self.dt

    def _Fx0A(self):  # LD Vx, K
        # Execution continues past this instruction once set_key() delivers a keypress
        self.awaiting_key = self.vx

    def _Fx15(self):  # LD DT, Vx
        self.dt = self.v[self.vx]

    def _Fx18(self):  # LD ST, Vx
        self.st = self.v[self.vx]

    def _Fx1E(self):  # ADD I, Vx
        vx_val = self.v[self.vx]
        val = self.i + vx_val
        self.i = val & 0xFFFF

        if self.index_overflow_quirks:
            self.v[0xF] = int(self.i + vx_val > 0xFF)
        else:
            self.v[0xF] = int(val > 0xFF)

    def _Fx29(self):  # LD F, Vx
        self.i = FONT_START + FONT_SPRITE_HEIGHT * self.v[self.vx]

    def _Fx33(self):  # LD B, Vx
        val = self.v[self.vx]
        self.ram.write_block(self.i, bytes((val // 100, (val // 10) % 10, val % 10)))

    def _Fx55(self):  # LD [I], Vx
        count = self.vx + 1
        self.ram.write_block(self.i, self.v[:count])
        self.i = (self.i + count) & 0xFFFF

    def _Fx65(self):  # LD Vx, [I]
        count = self.vx + 1
        self.v[:count] = self.ram.read_block(self.i, count)
        self.i = (self.i + count) & 0xFFFF
