#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import os
import tempfile
import unittest
from hashlib import sha256
from chip8vm.errors import LoadError, ProgramUnreadable
from chip8vm.hostio import Loader


class TestLoader(unittest.TestCase):
    def setUp(self):
        self.loader = Loader()

    def test_loader_load_file_present(self):
        with tempfile.TemporaryDirectory() as tmp_dir:
            filename = os.path.join(tmp_dir, "rom.ch8")

            with open(filename, "wb") as f:
                f.write(bytes(range(256)))

            self.assertEqual(
                sha256(bytes(range(256))).hexdigest(),
                sha256(self.loader.load_binary(filename)).hexdigest()
            )

    def test_loader_load_file_missing(self):
        self.assertRaises(ProgramUnreadable, self.loader.load_binary, "NoFile.ch8")

    def test_loader_load_directory(self):
        with tempfile.TemporaryDirectory() as tmp_dir:
            self.assertRaises(LoadError, self.loader.load_binary, tmp_dir)

    def test_loader_get_title(self):
        self.assertEqual("PONG", self.loader.get_title(os.path.join("roms", "games", "PONG.ch8")))
        self.assertEqual("maze", self.loader.get_title("maze"))
