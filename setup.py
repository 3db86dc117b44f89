#!/usr/bin/python3
# -*- coding: utf-8 -*-

# Copyright © 2009-2017 Francesco Fumanti <francesco.fumanti@gmx.net>
# Copyright © 2011-2017 marmuta <marmvta@gmail.com>
# Copyright © 2026 EmojiSuggest contributors
#
# This file is part of EmojiSuggest.
#
# EmojiSuggest is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 3 of the License, or
# (at your option) any later version.
#
# EmojiSuggest is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program. If not, see <http://www.gnu.org/licenses/>.

import os
import sys
import glob
import site
import shutil
import subprocess
import sysconfig
import unittest
from pathlib import Path

from setuptools import setup, Command
from setuptools.command.install import install


#### custom test command ####

class TestCommand(Command):
    """ Run doctests and unit tests of the EmojiSuggest package """
    user_options = [] # required by Command

    def initialize_options(self):
        pass

    def finalize_options(self):
        pass

    def run(self):
        import doctest
        import importlib

        loader = unittest.TestLoader()
        suite = loader.discover("EmojiSuggest/test", top_level_dir=".")

        for name in ["EmojiSuggest.utils",
                     "EmojiSuggest.Emoji",
                     "EmojiSuggest.EmojiCompat",
                     "EmojiSuggest.EmojiSuggestions",
                     "EmojiSuggest.TextContext"]:
            suite.addTests(doctest.DocTestSuite(importlib.import_module(name)))

        result = unittest.TextTestRunner(verbosity=2).run(suite)
        sys.exit(0 if result.wasSuccessful() else 1)


class CustomInstallCommand(install):
    """ Compile GSettings schemas after direct installs """

    def run(self):
        install.run(self)

        # Packagers compile schemas in their post-install scripts
        if os.getenv("FAKEROOTKEY"):
            print("Skipping glib-compile-schemas in fakeroot environment.")
            return

        if self.user:
            install_base = Path(site.getuserbase())
        else:
            install_base = Path(sysconfig.get_paths()["data"])
        schema_dir = install_base / "share" / "glib-2.0" / "schemas"

        if not shutil.which("glib-compile-schemas"):
            print("Warning: glib-compile-schemas not found, "
                  "schemas in {} stay uncompiled".format(schema_dir))
            return

        if schema_dir.exists():
            print("Running glib-compile-schemas...")
            try:
                subprocess.check_call(["glib-compile-schemas", str(schema_dir)])
            except subprocess.CalledProcessError as e:
                print("Error running glib-compile-schemas: {}".format(e))
                sys.exit(1)
        else:
            print("Warning: Schema directory not found: {}".format(schema_dir))


##### setup #####

setup(
    name = 'emoji-suggest',
    version = '0.1.0',
    license = 'GPL-3+',
    description = 'Live emoji suggestions for composing text',

    packages = ['EmojiSuggest'],
    package_data = {'EmojiSuggest': ['data/emoji/*.txt']},
    data_files = [('share/glib-2.0/schemas', glob.glob('data/*.gschema.xml')),
                  ('share/doc/emoji-suggest',
                      glob.glob('emoji-suggest-defaults.conf.example')),
                 ],

    scripts = ['emoji-suggest'],

    python_requires = '>=3.6',
    install_requires = ['PyGObject', 'pycairo'],
    extras_require = {'test': ['pytest']},

    cmdclass = {
                'install': CustomInstallCommand,
                'test': TestCommand,
                }
)
