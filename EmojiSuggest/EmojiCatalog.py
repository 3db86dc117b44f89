# -*- coding: utf-8 -*-

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
import time
import logging
from itertools import chain

from EmojiSuggest.Emoji import (EmojiSkinTone, parse_raw_emoji_specs_file)
from EmojiSuggest.EmojiCompat import (EmojiImageCompat, EmojiMatch,
                                      GlyphProbe)
from EmojiSuggest.Exceptions import EmojiDataError
from EmojiSuggest.utils import get_data_dir

_logger = logging.getLogger("EmojiCatalog")


EMOJI_DEFINITIONS_FILENAME = os.path.join("emoji", "root.txt")


def build_emoji_catalog(loader, preferred_skin_tone, is_supported):
    """
    Flatten the emoji groups returned by loader, resolve each definition
    to preferred_skin_tone and keep what is_supported() accepts.

    Returns a tuple of Emoji in definition order, empty if loader failed.
    """
    try:
        groups = loader()
    except (EmojiDataError, OSError) as ex:
        _logger.warning("emoji definitions unavailable, "
                        "no emoji suggestions: " + str(ex))
        return ()

    if not groups:
        _logger.warning("no emoji definitions found")
        return ()

    emojis = []
    for emoji_set in chain.from_iterable(groups.values()):
        emoji = emoji_set.base(preferred_skin_tone)
        try:
            supported = is_supported(emoji)
        except Exception as ex:
            _logger.debug("support check failed for '{}' ({}), "
                          "skipping it: {}".format(emoji.value, emoji.name, ex))
            supported = False
        if supported:
            emojis.append(emoji)

    return tuple(emojis)


def make_emoji_support_check(emoji_compat, metadata_version, glyph_probe):
    """
    An emoji can be displayed when the image set has it
    or the system fonts have a glyph for it. An oracle that fails
    counts as not supporting the emoji, the other one still decides.
    """
    def is_supported_by_images(emoji):
        if emoji_compat is None:
            return False
        try:
            return emoji_compat.get_emoji_match(emoji.value, metadata_version) \
                   == EmojiMatch.SUPPORTED
        except Exception as ex:
            _logger.debug("image set check failed for '{}' ({}): {}"
                          .format(emoji.value, emoji.name, ex))
        return False

    def is_supported_by_fonts(emoji):
        try:
            return bool(glyph_probe.has_glyph(emoji.value))
        except Exception as ex:
            _logger.debug("glyph check failed for '{}' ({}): {}"
                          .format(emoji.value, emoji.name, ex))
        return False

    def is_supported(emoji):
        return is_supported_by_images(emoji) or is_supported_by_fonts(emoji)

    return is_supported


class EmojiCatalog:
    """
    Emoji that can be suggested in one text entry session.
    Built on first access, then cached for the lifetime of the instance.
    """

    def __init__(self, builder):
        self._builder = builder
        self._emojis = None

    @staticmethod
    def from_config(editor_info, config):
        """
        Catalog of the packaged emoji definitions, filtered for the
        focused editor and the fonts and images available.
        """
        def builder():
            # read once, later changes don't rebuild the catalog
            skin_tone = config.emoji.preferred_skin_tone
            if not EmojiSkinTone.is_valid(skin_tone):
                skin_tone = EmojiSkinTone.DEFAULT

            image_dir = config.emoji.image_set_dir
            try:
                emoji_compat = EmojiImageCompat(image_dir) \
                               if image_dir else None
                glyph_probe = GlyphProbe(config.emoji.font)
            except Exception as ex:
                _logger.warning("failed to set up emoji support checks, "
                                "no emoji suggestions: " + str(ex))
                return ()

            filename = os.path.join(get_data_dir(),
                                    EMOJI_DEFINITIONS_FILENAME)
            return build_emoji_catalog(
                lambda: parse_raw_emoji_specs_file(filename),
                skin_tone,
                make_emoji_support_check(
                    emoji_compat,
                    editor_info.emoji_compat_metadata_version,
                    glyph_probe))

        return EmojiCatalog(builder)

    def is_built(self):
        return self._emojis is not None

    def get_emojis(self):
        if self._emojis is None:
            t = time.time()
            self._emojis = tuple(self._builder())
            _logger.info("emoji catalog built with {} emoji in {:.3f}s"
                         .format(len(self._emojis), time.time() - t))
        return self._emojis
