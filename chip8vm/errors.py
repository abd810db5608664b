#!/usr/bin/env python3

"""
Emulation Errors

Everything that can go wrong while loading or running a program is reported
through one of these.  None of them are fatal to the host process; it is up to
whoever drives the Machine to decide whether to halt, reset, or carry on.

Load errors are recoverable (try another ROM).  Execution errors are raised
before the offending instruction has altered any machine state, so a dump taken
afterwards shows the machine exactly as it was when the fault was found.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"


class LoadError(Exception):
    pass


class EmptyProgram(LoadError):
    pass


class ProgramTooLarge(LoadError):
    pass


class ProgramUnreadable(LoadError):
    pass


class ExecError(Exception):
    pass


class UnknownOpcode(ExecError):
    def __init__(self, msb, lsb, address, message=None):
        self.msb = msb
        self.lsb = lsb
        self.opcode = (msb << 8) | lsb
        self.address = address

        if message is None:
            message = "Opcode 0x{:04x} at address 0x{:03x} is not recognised.".format(self.opcode, address)

        super().__init__(message)


class StackOverflow(ExecError):
    pass


class StackUnderflow(ExecError):
    pass


class MemoryOutOfBounds(ExecError):
    def __init__(self, address, message=None):
        self.address = address

        if message is None:
            message = "Memory access at address 0x{:04x} is out of bounds.".format(address)

        super().__init__(message)
