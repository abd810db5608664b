#!/usr/bin/env python3

"""
Stack Emulator

There is no stack pointer register exposed to the running program, and no
specified location for the stack in RAM, so we can simply wrap a list to fully
emulate it.  Only return addresses are ever stored here.

The stack has a fixed number of levels.  Calling too deep or returning with
nothing to return to raises an error instead of corrupting anything, and
leaves the stack contents as they were.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .errors import StackOverflow, StackUnderflow


class Stack:
    def __init__(self, size):
        self.items = []
        self.size = size

    def push(self, item):
        if len(self.items) >= self.size:
            raise StackOverflow("Stack overflow ({} levels deep)".format(self.size))

        self.items.append(item)

    def pop(self):
        try:
            return self.items.pop()
        except IndexError:
            raise StackUnderflow("Stack underflow") from None

    def get_items(self):
        # For debugging
        return self.items

    def __len__(self):
        return len(self.items)
