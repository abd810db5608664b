#!/usr/bin/env python3

"""
Null Input Plugin

Serves as a base class for other Input plugins.  Can be used on its own if zero
input functionality is required.

Input plugins translate host key codes into hex keypad numbers and hand them to
the Machine.  They never resolve a pending 'wait for key' themselves; that is
done by Machine.set_key() when a key goes down.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from ..constants import NUM_KEYS


class InputsError(Exception):
    pass


class Inputs:
    def __init__(self, keymap):
        self.keymap_dict = {}
        self.paused = False
        keymap_split = keymap.split(",")

        if len(keymap_split) != NUM_KEYS:
            raise InputsError("Incorrect number of keys defined -- 16 required.  Use commas to split numbers")

        for key_num, key_defined in enumerate(keymap_split):
            try:
                key_defined_ord = int(key_defined)
            except ValueError:
                raise InputsError("Defined keys are not all integer values") from None

            if key_defined_ord in self.keymap_dict:
                raise InputsError("Duplicate keys defined")

            self.keymap_dict[key_defined_ord] = key_num

    def process_messages(self, machine):  # pylint: disable=unused-argument
        return False  # Don't exit the program

    def key_event(self, machine, host_key, pressed):
        # Returns whether the host key is mapped onto the keypad
        hex_key = self.keymap_dict.get(host_key)

        if hex_key is None:
            return False

        machine.set_key(hex_key, pressed)
        return True

    def toggle_pause(self):
        self.paused = not self.paused
        print("Paused" if self.paused else "Resumed")

    def is_paused(self):
        return self.paused

    def shutdown(self):
        pass
