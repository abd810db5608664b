#!/usr/bin/env python3

"""
Disassembler

Turns raw instructions back into readable mnemonics, for diagnostics only.
Nothing here touches machine state.  Unlike execution, disassembly is total:
any opcode not in the table is shown as unknown rather than raising, since data
tables and sprites are routinely mixed in with code.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .opcodes import mnemonic


def disassemble_opcode(opcode, address):
    return "0x{:03x}: {:04x}  {}".format(address, opcode, mnemonic(opcode))


def disassemble_block(block, start):
    # One line per whole instruction.  A trailing odd byte is ignored.
    lines = []

    for offset in range(0, len(block) - 1, 2):
        opcode = (block[offset] << 8) | block[offset + 1]
        lines.append(disassemble_opcode(opcode, start + offset))

    return lines
