#!/usr/bin/python3

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
import glob
import shutil
import subprocess
import tempfile
import unittest
from unittest import mock

from gi.repository import GLib, Gio

import EmojiSuggest.Config
from EmojiSuggest.Config import (Config, ConfigSuggestions, ConfigEmoji,
                                 parse_command_line, SYSTEM_DEFAULTS_FILENAME)
from EmojiSuggest.ConfigUtils import ConfigObject
from EmojiSuggest.Emoji import EmojiSkinTone
from EmojiSuggest.Exceptions import SchemaError


SCHEMA_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)),
                          "..", "..", "data")


class TestParseCommandLine(unittest.TestCase):

    def test_defaults(self):
        options = parse_command_line([])
        self.assertIsNone(options.debug)
        self.assertIsNone(options.emoji_preferred_skin_tone)
        self.assertIsNone(options.emoji_image_set_dir)
        self.assertIsNone(options.suggestions_enabled)

    def test_options(self):
        options = parse_command_line(["-d", "info", "-s", "medium-dark",
                                      "--image-set-dir", "/tmp/emoji",
                                      "--disable-suggestions"])
        self.assertEqual("info", options.debug)
        self.assertEqual("medium-dark", options.emoji_preferred_skin_tone)
        self.assertEqual("/tmp/emoji", options.emoji_image_set_dir)
        self.assertIs(False, options.suggestions_enabled)

    def test_invalid_skin_tone(self):
        with mock.patch("sys.stderr"):
            with self.assertRaises(SystemExit):
                parse_command_line(["--skin-tone", "purple"])


@unittest.skipUnless(shutil.which("glib-compile-schemas"),
                     "glib-compile-schemas not available")
class _TestGSettingsBase(unittest.TestCase):
    """
    Runs against the schemas of this source tree, compiled into a
    temporary directory, with an in-memory settings backend.
    """

    def setUp(self):
        self._tmp_dir = tempfile.TemporaryDirectory(prefix="test_emoji_suggest_")
        self._dir = self._tmp_dir.name

        schema_dir = os.path.join(self._dir, "schemas")
        os.mkdir(schema_dir)
        for fn in glob.glob(os.path.join(SCHEMA_DIR, "*.gschema.xml")):
            shutil.copy(fn, schema_dir)
        subprocess.check_call(["glib-compile-schemas", "--strict",
                               schema_dir])

        self.schema_source = Gio.SettingsSchemaSource.new_from_directory(
            schema_dir, None, False)
        self.backend = Gio.memory_settings_backend_new()

    def tearDown(self):
        self._tmp_dir.cleanup()

    @staticmethod
    def process_events():
        context = GLib.MainContext.default()
        while context.iteration(False):
            pass


class TestConfigObject(_TestGSettingsBase):

    def test_defaults(self):
        suggestions = ConfigSuggestions(schema_source=self.schema_source,
                                        backend=self.backend)
        suggestions.init_from_gsettings()
        self.assertIs(True, suggestions.enabled)

        emoji = ConfigEmoji(schema_source=self.schema_source,
                            backend=self.backend)
        emoji.init_from_gsettings()
        self.assertEqual(EmojiSkinTone.DEFAULT, emoji.preferred_skin_tone)
        self.assertEqual("", emoji.image_set_dir)
        self.assertEqual("Sans", emoji.font)

    def test_property_writes_gsettings(self):
        emoji = ConfigEmoji(schema_source=self.schema_source,
                            backend=self.backend)
        emoji.preferred_skin_tone = EmojiSkinTone.MEDIUM
        self.assertEqual(EmojiSkinTone.MEDIUM, emoji.preferred_skin_tone)
        self.assertEqual("medium",
                         emoji.settings.get_string("preferred-skin-tone"))

    def test_invalid_skin_tone_rejected(self):
        emoji = ConfigEmoji(schema_source=self.schema_source,
                            backend=self.backend)
        emoji.init_from_gsettings()
        with self.assertLogs("Config", level="WARNING"):
            emoji.preferred_skin_tone = "purple"
        self.assertEqual(EmojiSkinTone.DEFAULT, emoji.preferred_skin_tone)

    def test_change_notification(self):
        suggestions = ConfigSuggestions(schema_source=self.schema_source,
                                        backend=self.backend)
        suggestions.init_from_gsettings()
        changes = []
        suggestions.enabled_notify_add(changes.append)

        suggestions.settings.set_boolean("enabled", False)
        self.process_events()

        self.assertEqual([False], changes)
        self.assertIs(False, suggestions.enabled)

        suggestions.enabled_notify_remove(changes.append)
        suggestions.settings.set_boolean("enabled", True)
        self.process_events()
        self.assertEqual([False], changes)

    def test_image_set_dir_resolution(self):
        emoji = ConfigEmoji(schema_source=self.schema_source,
                            backend=self.backend)
        self.assertEqual("", emoji.image_set_dir)

        emoji.image_set_dir = self._dir
        self.assertEqual(self._dir, emoji.image_set_dir)

        data_home = os.path.join(self._dir, "data")
        image_dir = os.path.join(data_home, "emoji-suggest", "emoji", "twemoji")
        os.makedirs(image_dir)
        with mock.patch.dict(os.environ, {"XDG_DATA_HOME": data_home}):
            emoji.image_set_dir = "twemoji"
            self.assertEqual(image_dir, emoji.image_set_dir)

            emoji.image_set_dir = "missing"
            self.assertEqual("", emoji.image_set_dir)

    def test_missing_schema(self):
        with self.assertRaises(SchemaError):
            ConfigObject(None, "apps.emojisuggest.missing",
                         schema_source=self.schema_source,
                         backend=self.backend)


class TestConfig(_TestGSettingsBase):

    def setUp(self):
        _TestGSettingsBase.setUp(self)

        # no system defaults of the test machine
        self._sysdef_dir = os.path.join(self._dir, "sysdef")
        os.mkdir(self._sysdef_dir)
        for name in ["INSTALL_DIR", "SYSTEM_DEFAULTS_DIR"]:
            patcher = mock.patch.object(EmojiSuggest.Config, name,
                                        self._sysdef_dir)
            patcher.start()
            self.addCleanup(patcher.stop)

    def tearDown(self):
        if hasattr(Config, "self"):
            Config.self.cleanup()
            del Config.self
        _TestGSettingsBase.tearDown(self)

    def _new_config(self, argv=()):
        return Config(list(argv), self.schema_source, self.backend)

    def test_singleton(self):
        config = self._new_config()
        self.assertIs(config, Config())
        self.assertIs(True, config.suggestions.enabled)
        self.assertEqual(EmojiSkinTone.DEFAULT,
                         config.emoji.preferred_skin_tone)

    def test_command_line_overrides_gsettings(self):
        config = self._new_config(["--skin-tone", "dark",
                                   "--disable-suggestions",
                                   "--font", "Noto Color Emoji"])

        self.assertEqual(EmojiSkinTone.DARK, config.emoji.preferred_skin_tone)
        self.assertIs(False, config.suggestions.enabled)
        self.assertEqual("Noto Color Emoji", config.emoji.font)

        # not written to gsettings
        self.assertEqual("default", config.emoji.settings
                                    .get_string("preferred-skin-tone"))
        self.assertTrue(config.suggestions.settings.get_boolean("enabled"))

    def test_system_defaults(self):
        with open(os.path.join(self._sysdef_dir, SYSTEM_DEFAULTS_FILENAME),
                  "w", encoding="utf-8") as f:
            f.write("[suggestions]\n"
                    "enabled=False\n"
                    "[emoji]\n"
                    "preferred-skin-tone=medium-light\n"
                    "font=Test Font\n"
                    "unknown-key=1\n")

        config = self._new_config()

        self.assertIs(False, config.suggestions.enabled)
        self.assertEqual(EmojiSkinTone.MEDIUM_LIGHT,
                         config.emoji.preferred_skin_tone)
        self.assertEqual("Test Font", config.emoji.font)

        # system defaults are applied once, then stored in gsettings
        self.assertIs(False, config.use_system_defaults)
        self.assertEqual("Test Font", config.emoji.settings.get_string("font"))


if __name__ == '__main__':
    unittest.main()
