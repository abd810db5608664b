#!/usr/bin/env python3

"""
Opcode Table

Instructions are looked up by masking the raw opcode down to a key.  The top
nibble picks the instruction family, and that family decides which of the
remaining bits take part in the lookup:

    * 0x0 and 0x8 families are sub-keyed by the lowest nibble (mask 0xF00F)
    * 0xE and 0xF families are sub-keyed by the low byte (mask 0xF0FF)
    * Every other family is a single instruction (mask 0xF000)

The same keys are used by the Machine to find an instruction handler, and by
the disassembler to find a mnemonic, so the two can never disagree about what
an opcode means.

Operand templates are formatted with these fields:
    n   = nibble
    kk  = byte
    nnn = address
    x/y = register (0-15)
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

FAMILY_MASKS = {
    0x0: 0xF00F,
    0x8: 0xF00F,
    0xE: 0xF0FF,
    0xF: 0xF0FF
}

DEFAULT_MASK = 0xF000

MNEMONICS = {
    0x0000: "CLS",
    0x000E: "RET",
    0x1000: "JP 0x{nnn:03x}",
    0x2000: "CALL 0x{nnn:03x}",
    0x3000: "SE V{x:01x}, 0x{kk:02x}",
    0x4000: "SNE V{x:01x}, 0x{kk:02x}",
    0x5000: "SE V{x:01x}, V{y:01x}",
    0x6000: "LD V{x:01x}, 0x{kk:02x}",
    0x7000: "ADD V{x:01x}, 0x{kk:02x}",
    0x8000: "LD V{x:01x}, V{y:01x}",
    0x8001: "OR V{x:01x}, V{y:01x}",
    0x8002: "AND V{x:01x}, V{y:01x}",
    0x8003: "XOR V{x:01x}, V{y:01x}",
    0x8004: "ADD V{x:01x}, V{y:01x}",
    0x8005: "SUB V{x:01x}, V{y:01x}",
    0x8006: "SHR V{x:01x}",
    0x8007: "SUBN V{y:01x}, V{x:01x}",
    0x800E: "SHL V{x:01x}",
    0x9000: "SNE V{x:01x}, V{y:01x}",
    0xA000: "LD I, 0x{nnn:03x}",
    0xB000: "JP V0, 0x{nnn:03x}",
    0xC000: "RND V{x:01x}, 0x{kk:02x}",
    0xD000: "DRW V{x:01x}, V{y:01x}, 0x{n:01x}",
    0xE09E: "SKP V{x:01x}",
    0xE0A1: "SKNP V{x:01x}",
    0xF007: "LD V{x:01x}, DT",
    0xF00A: "LD V{x:01x}, K",
    0xF015: "LD DT, V{x:01x}",
    0xF018: "LD ST, V{x:01x}",
    0xF01E: "ADD I, V{x:01x}",
    0xF029: "LD F, V{x:01x}",
    0xF033: "LD B, V{x:01x}",
    0xF055: "LD [I], V{x:01x}",
    0xF065: "LD V{x:01x}, [I]"
}

UNKNOWN_MNEMONIC = "??? (unknown)"


def decode_key(opcode):
    return opcode & FAMILY_MASKS.get(opcode >> 12, DEFAULT_MASK)


def decode_fields(opcode):
    return {
        "x": (opcode & 0xF00) >> 8,
        "y": (opcode & 0xF0) >> 4,
        "kk": opcode & 0xFF,
        "n": opcode & 0xF,
        "nnn": opcode & 0xFFF
    }


def mnemonic(opcode):
    template = MNEMONICS.get(decode_key(opcode))

    if template is None:
        return UNKNOWN_MNEMONIC

    return template.format(**decode_fields(opcode))
