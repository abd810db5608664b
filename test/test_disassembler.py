#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import unittest
from chip8vm.disassembler import disassemble_opcode, disassemble_block
from chip8vm.opcodes import decode_key, mnemonic, UNKNOWN_MNEMONIC


class TestDisassembler(unittest.TestCase):
    def test_opcodes_decode_key(self):
        self.assertEqual(0x0000, decode_key(0x00E0))
        self.assertEqual(0x000E, decode_key(0x00EE))
        self.assertEqual(0x1000, decode_key(0x1234))
        self.assertEqual(0x5000, decode_key(0x5121))
        self.assertEqual(0x800E, decode_key(0x8ABE))
        self.assertEqual(0xE09E, decode_key(0xE59E))
        self.assertEqual(0xF065, decode_key(0xFA65))

    def test_opcodes_mnemonics(self):
        for opcode, expected in (
            (0x00E0, "CLS"),
            (0x00EE, "RET"),
            (0x1234, "JP 0x234"),
            (0x2345, "CALL 0x345"),
            (0x3A12, "SE Va, 0x12"),
            (0x4B34, "SNE Vb, 0x34"),
            (0x5120, "SE V1, V2"),
            (0x6C05, "LD Vc, 0x05"),
            (0x7D01, "ADD Vd, 0x01"),
            (0x8120, "LD V1, V2"),
            (0x8121, "OR V1, V2"),
            (0x8122, "AND V1, V2"),
            (0x8123, "XOR V1, V2"),
            (0x8124, "ADD V1, V2"),
            (0x8125, "SUB V1, V2"),
            (0x8126, "SHR V1"),
            (0x8127, "SUBN V2, V1"),
            (0x812E, "SHL V1"),
            (0x9120, "SNE V1, V2"),
            (0xA123, "LD I, 0x123"),
            (0xB123, "JP V0, 0x123"),
            (0xC1FF, "RND V1, 0xff"),
            (0xD125, "DRW V1, V2, 0x5"),
            (0xE19E, "SKP V1"),
            (0xE1A1, "SKNP V1"),
            (0xF107, "LD V1, DT"),
            (0xF10A, "LD V1, K"),
            (0xF115, "LD DT, V1"),
            (0xF118, "LD ST, V1"),
            (0xF11E, "ADD I, V1"),
            (0xF129, "LD F, V1"),
            (0xF133, "LD B, V1"),
            (0xF155, "LD [I], V1"),
            (0xF165, "LD V1, [I]")
        ):
            self.assertEqual(expected, mnemonic(opcode))

    def test_opcodes_unknown(self):
        for opcode in 0x0123, 0x8008, 0xE000, 0xF0FF, 0xFFFF:
            self.assertEqual(UNKNOWN_MNEMONIC, mnemonic(opcode))

    def test_disassembler_total(self):
        # Every possible opcode produces a line, and none of them raise
        for opcode in range(0x10000):
            self.assertTrue(disassemble_opcode(opcode, 0x200).startswith("0x200: "))

    def test_disassembler_opcode(self):
        self.assertEqual("0x200: 6005  LD V0, 0x05", disassemble_opcode(0x6005, 0x200))
        self.assertEqual("0x3fe: ffff  ??? (unknown)", disassemble_opcode(0xFFFF, 0x3FE))

    def test_disassembler_block(self):
        self.assertEqual(
            ["0x300: 00ee  RET", "0x302: 1300  JP 0x300"],
            disassemble_block(b"\x00\xEE\x13\x00\x55", 0x300)
        )
        self.assertEqual([], disassemble_block(b"\x00", 0x300))
