#!/usr/bin/env python3

"""
Host I/O Functionality

Handles loading ROM binaries from the host filesystem, for later writing into
RAM.  ROMs are raw binary images with no header, loaded verbatim.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from os import path
from .errors import ProgramUnreadable


class Loader:
    def load_binary(self, filename):
        try:
            with open(filename, "rb") as f:
                return f.read()
        except OSError as err:
            raise ProgramUnreadable("Couldn't open '{}': {}".format(filename, err.strerror or err)) from err

    def get_title(self, filename):
        # ROM name without any directory or extension, for the window title
        return path.splitext(path.basename(filename))[0]
