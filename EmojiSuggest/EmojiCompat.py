# -*- coding: utf-8 -*-

# Copyright © 2017 marmuta <marmvta@gmail.com>
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
Can an emoji be displayed on this system?

Two independent answers: EmojiImageCompat knows about emoji images that
can stand in for missing font glyphs, GlyphProbe asks Pango whether the
system fonts cover the sequence.
"""

import os
import logging
import configparser

import cairo

from EmojiSuggest.Version import require_gi_versions
require_gi_versions()
from gi.repository import Pango, PangoCairo

_logger = logging.getLogger(__name__)


DEFAULT_FONT = "Sans"

METADATA_FILENAME = "metadata.ini"
METADATA_VERSIONS_SECTION = "versions"


def emoji_filename_from_sequence(label):
    return emoji_filename_from_codepoints([ord(c) for c in label])


def emoji_filename_from_codepoints(codepoints):
    """
    Image file name of an emoji, zero width joiners and
    variation selectors don't take part.

    Doctests:

    >>> emoji_filename_from_codepoints([0x1F44B, 0x1F3FD])
    '1f44b-1f3fd.svg'
    >>> emoji_filename_from_codepoints([0x2764, 0xfe0f])
    '2764.svg'
    """
    fn = ""
    for cp in codepoints:
        if cp not in (0x200D, 0xfe0f):
            if fn:
                fn += "-"
            fn += (hex(cp)[2:]).zfill(4)
    return fn + ".svg"


class EmojiMatch:
    """ Result of EmojiImageCompat.get_emoji_match() """
    UNKNOWN     = 0   # no image set loaded
    UNSUPPORTED = 1
    SUPPORTED   = 2


class EmojiImageCompat:
    """
    Compatibility layer for emoji the fonts can't render.

    An image set is a directory of SVG files named by code points, e.g.
    1f44b-1f3fd.svg, with an optional metadata.ini that tells for each
    image the metadata version it was added in:

        [versions]
        1f97a = 11

    Images without an entry belong to version 0.
    """

    def __init__(self, image_dir):
        self.image_dir = image_dir
        self._filenames = None
        self._added_versions = {}

        if image_dir:
            self._load()

    def is_available(self):
        return self._filenames is not None

    def _load(self):
        try:
            filenames = os.listdir(self.image_dir)
        except OSError as ex:
            _logger.warning("emoji image set '{}' unavailable: {}"
                            .format(self.image_dir, ex))
            return

        self._filenames = set(fn for fn in filenames if fn.endswith(".svg"))
        self._added_versions = self._read_metadata(
            os.path.join(self.image_dir, METADATA_FILENAME))

        _logger.info("loaded emoji image set '{}', {} images"
                     .format(self.image_dir, len(self._filenames)))

    @staticmethod
    def _read_metadata(filename):
        versions = {}
        parser = configparser.ConfigParser()
        parser.optionxform = str   # keep case of file names
        try:
            parser.read(filename, encoding="utf-8")
        except (configparser.Error, UnicodeDecodeError) as ex:
            _logger.error("failed to read emoji image metadata: " + str(ex))
            return versions

        if parser.has_section(METADATA_VERSIONS_SECTION):
            for name, value in parser.items(METADATA_VERSIONS_SECTION):
                try:
                    versions[name + ".svg"] = int(value)
                except ValueError:
                    _logger.warning("emoji image metadata: invalid version "
                                    "'{}' for '{}'".format(value, name))
        return versions

    def get_emoji_match(self, sequence, metadata_version):
        if self._filenames is None:
            return EmojiMatch.UNKNOWN

        fn = emoji_filename_from_sequence(sequence)
        if fn not in self._filenames:
            return EmojiMatch.UNSUPPORTED

        if self._added_versions.get(fn, 0) > metadata_version:
            return EmojiMatch.UNSUPPORTED

        return EmojiMatch.SUPPORTED


class GlyphProbe:
    """
    Asks Pango if a character sequence renders without unknown glyphs
    in the given font, font fallback included.
    """

    def __init__(self, font=DEFAULT_FONT):
        self.font = font or DEFAULT_FONT

        # 1x1 scratch surface, nothing is ever drawn
        self._surface = cairo.ImageSurface(cairo.FORMAT_ARGB32, 1, 1)
        self._context = cairo.Context(self._surface)
        self._layout = PangoCairo.create_layout(self._context)
        self._layout.set_font_description(
            Pango.FontDescription.from_string(self.font))

    def has_glyph(self, sequence):
        if not sequence:
            return False
        self._layout.set_text(sequence, -1)
        return self._layout.get_unknown_glyphs_count() == 0
