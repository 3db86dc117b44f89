# -*- coding: utf-8 -*-

# Copyright © 2008-2010 Chris Jones <tortoise@tortuga>
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

"""
File containing Config singleton.
"""

import os
import sys
from optparse import OptionParser
from gettext import gettext as _

from EmojiSuggest.ConfigUtils import ConfigObject
from EmojiSuggest.Emoji import EmojiSkinTone
from EmojiSuggest.EmojiCompat import DEFAULT_FONT
from EmojiSuggest.Exceptions import SchemaError
from EmojiSuggest.utils import XDGDirs

### Logging ###
import logging
_logger = logging.getLogger("Config")
###############

# gsettings objects
SCHEMA_EMOJISUGGEST = "apps.emojisuggest"
SCHEMA_SUGGESTIONS  = "apps.emojisuggest.suggestions"
SCHEMA_EMOJI        = "apps.emojisuggest.emoji"

INSTALL_DIR                = "/usr/share/emoji-suggest"
SYSTEM_DEFAULTS_DIR        = "/etc/emoji-suggest"
SYSTEM_DEFAULTS_FILENAME   = "emoji-suggest-defaults.conf"

# image sets given by name live here, below the XDG data directories
EMOJI_IMAGE_SET_SUBDIR     = os.path.join("emoji-suggest", "emoji")

LOG_FORMAT = '%(asctime)s:%(levelname)s:%(name)s: %(message)s'


def parse_command_line(argv=None):
    """ Returns the options of the command line argv """
    parser = OptionParser(prog="emoji-suggest")
    parser.add_option("-d", "--debug", type="str", dest="debug",
        help="DEBUG={notset|debug|info|warning|error|critical}")
    parser.add_option("-s", "--skin-tone", type="choice",
        dest="emoji_preferred_skin_tone",
        choices=list(EmojiSkinTone.ALL),
        help="Preferred skin tone of suggested emoji: {}"
             .format(", ".join(EmojiSkinTone.ALL)))
    parser.add_option("-i", "--image-set-dir", type="str",
        dest="emoji_image_set_dir",
        help="Directory or name of an emoji image set")
    parser.add_option("-f", "--font", type="str", dest="emoji_font",
        help="Font to check emoji glyphs with")
    parser.add_option("--disable-suggestions", action="store_false",
        dest="suggestions_enabled",
        help="Don't suggest any emoji")
    options = parser.parse_args(argv)[0]
    return options


def setup_logging(debug=None):
    log_params = {
        "format" : LOG_FORMAT
    }
    if debug:
        log_params["level"] = getattr(logging, debug.upper())
    logging.basicConfig(**log_params)


class Config(ConfigObject):
    """
    Singleton Class to encapsulate the gsettings stuff and check values.
    """

    def __new__(cls, *args, **kwargs):
        """
        Singleton magic.
        """
        if not hasattr(cls, "self"):
            cls.self = object.__new__(cls)
            cls.self.init(*args, **kwargs)
        return cls.self

    def __init__(self, *args, **kwargs):
        """
        This constructor is still called multiple times.
        Do nothing here and use the singleton constructor "init()" instead.
        Don't call base class constructors.
        """
        pass

    def init(self, argv=None, schema_source=None, backend=None):
        """
        Singleton constructor, should only run once.
        Raises SchemaError if the gsettings schemas aren't installed.
        """
        options = parse_command_line(argv)
        self.options = options

        # setup logging
        setup_logging(options.debug)

        # call base class constructor once logging is available
        ConfigObject.__init__(self, None, SCHEMA_EMOJISUGGEST,
                              schema_source, backend)

        # Load system defaults (if there are any, not required).
        # Used for distribution specific settings, aka branding.
        paths = [os.path.join(INSTALL_DIR, SYSTEM_DEFAULTS_FILENAME),
                 os.path.join(SYSTEM_DEFAULTS_DIR, SYSTEM_DEFAULTS_FILENAME)]
        self.load_system_defaults(paths)

        # initialize all property values
        self.init_properties(options)

        _logger.debug("Leaving init")

    def cleanup(self):
        self.disconnect_notifications()

    def _init_keys(self):
        """ Create key descriptions """

        self.schema = SCHEMA_EMOJISUGGEST
        self.sysdef_section = "main"

        self.add_key("use-system-defaults", False)

        self.suggestions = ConfigSuggestions(self)
        self.emoji       = ConfigEmoji(self)

        self.children = [self.suggestions,
                         self.emoji]


class ConfigSuggestions(ConfigObject):
    """ Suggestion settings """

    def __init__(self, parent=None, schema_source=None, backend=None):
        ConfigObject.__init__(self, parent, SCHEMA_SUGGESTIONS,
                              schema_source, backend)

    def _init_keys(self):
        self.sysdef_section = "suggestions"

        self.add_key("enabled", True)


class ConfigEmoji(ConfigObject):
    """ Emoji catalog settings """

    def __init__(self, parent=None, schema_source=None, backend=None):
        ConfigObject.__init__(self, parent, SCHEMA_EMOJI,
                              schema_source, backend)

    def _init_keys(self):
        self.sysdef_section = "emoji"

        self.add_key("preferred-skin-tone", EmojiSkinTone.DEFAULT)
        self.add_key("image-set-dir", "")
        self.add_key("font", DEFAULT_FONT)

    def _can_set_preferred_skin_tone(self, value):
        if not EmojiSkinTone.is_valid(value):
            _logger.warning(_("Invalid skin tone '{}', expected one of {}")
                            .format(value, ", ".join(EmojiSkinTone.ALL)))
            return False
        return True

    def get_image_set_dir(self):
        """
        Full path of the emoji image set, empty if there is none.
        Plain names are looked up in the user's, then the system's
        data directories.
        """
        name = self.gskeys["image_set_dir"].value
        if not name:
            return ""
        return self._get_user_sys_filename(
            name, _("emoji image set"),
            user_filename_func=lambda fn: XDGDirs.get_data_home(
                os.path.join(EMOJI_IMAGE_SET_SUBDIR, fn)),
            system_filename_func=lambda fn: XDGDirs.find_data_file(
                os.path.join(EMOJI_IMAGE_SET_SUBDIR, fn)))


def load_config(argv=None):
    """
    Config singleton for the command line front end,
    exits if the gsettings schemas aren't installed.
    """
    try:
        return Config(argv)
    except SchemaError as e:
        _logger.error(str(e))
        sys.exit(1)
