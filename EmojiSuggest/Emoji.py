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

"""
Emoji records and the loader for raw emoji definition files.

Definition file format, UTF-8:

    # comment
    [group-name]
    <emoji>;<name>;<keyword>|<keyword>|...
    \t<variant emoji>;<name>;<keyword>|...

Lines starting with a tab are presentation variants (skin tones) of the
closest preceding definition line.
"""

import os
import logging
from collections import namedtuple, OrderedDict

from EmojiSuggest.Exceptions import EmojiDataError

_logger = logging.getLogger(__name__)


class EmojiSkinTone:
    """ Skin tone ids, as stored in gsettings """
    DEFAULT      = "default"
    LIGHT        = "light"
    MEDIUM_LIGHT = "medium-light"
    MEDIUM       = "medium"
    MEDIUM_DARK  = "medium-dark"
    DARK         = "dark"

    ALL = (DEFAULT, LIGHT, MEDIUM_LIGHT, MEDIUM, MEDIUM_DARK, DARK)

    # Fitzpatrick modifiers
    _modifiers = OrderedDict([
        (LIGHT,        "\U0001F3FB"),
        (MEDIUM_LIGHT, "\U0001F3FC"),
        (MEDIUM,       "\U0001F3FD"),
        (MEDIUM_DARK,  "\U0001F3FE"),
        (DARK,         "\U0001F3FF"),
    ])

    @staticmethod
    def is_valid(skin_tone):
        return skin_tone in EmojiSkinTone.ALL

    @staticmethod
    def from_sequence(sequence):
        """
        Skin tone of the first modifier found in sequence.

        Doctests:

        >>> EmojiSkinTone.from_sequence("\U0001F44B")
        'default'
        >>> EmojiSkinTone.from_sequence("\U0001F44B\U0001F3FD")
        'medium'
        """
        for skin_tone, modifier in EmojiSkinTone._modifiers.items():
            if modifier in sequence:
                return skin_tone
        return EmojiSkinTone.DEFAULT


class Emoji(namedtuple("Emoji", ["value", "name", "keywords"])):
    """
    One concrete emoji, a specific presentation variant.
    Immutable; keywords is a frozenset.
    """
    __slots__ = ()

    def __new__(cls, value, name, keywords=()):
        return super(Emoji, cls).__new__(cls, value, name,
                                         frozenset(keywords))

    @property
    def skin_tone(self):
        return EmojiSkinTone.from_sequence(self.value)

    def __str__(self):
        return self.value


class EmojiSet:
    """
    One emoji definition with all its presentation variants.
    The first variant is the base (neutral) one.
    """

    def __init__(self, emojis):
        if not emojis:
            raise ValueError("EmojiSet requires at least one emoji")
        self.emojis = list(emojis)

    def __repr__(self):
        return "EmojiSet({!r})".format(self.emojis)

    def base(self, skin_tone=EmojiSkinTone.DEFAULT):
        """
        Variant with the given skin tone, falls back to the first,
        neutral variant.
        """
        for emoji in self.emojis:
            if emoji.skin_tone == skin_tone:
                return emoji
        return self.emojis[0]


def parse_raw_emoji_specs_file(filename):
    """
    Read an emoji definition file.
    Returns an ordered dict {group name: [EmojiSet, ...]}.
    Raises EmojiDataError if the file can't be read or is malformed.
    """
    try:
        with open(filename, encoding="utf-8") as f:
            lines = f.readlines()
    except (OSError, UnicodeDecodeError) as ex:
        raise EmojiDataError("failed to read emoji definitions '{}'"
                             .format(filename), ex)

    return parse_raw_emoji_specs(lines, os.path.basename(filename))


def parse_raw_emoji_specs(lines, source="<string>"):
    groups = OrderedDict()
    group = ""
    variants = None

    def flush():
        if variants:
            groups.setdefault(group, []).append(EmojiSet(variants))

    for lineno, line in enumerate(lines, 1):
        line = line.rstrip("\r\n")
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue

        if stripped.startswith("[") and stripped.endswith("]"):
            flush()
            variants = None
            group = stripped[1:-1].strip()
            groups.setdefault(group, [])
            continue

        is_variant = line.startswith("\t")
        emoji = _parse_emoji_line(stripped, source, lineno)

        if is_variant:
            if variants is None:
                raise EmojiDataError("{}:{}: variant without base emoji"
                                     .format(source, lineno))
            variants.append(emoji)
        else:
            flush()
            variants = [emoji]

    flush()

    _logger.debug("parsed {} emoji definitions in {} groups from {}"
                  .format(sum(len(sets) for sets in groups.values()),
                          len(groups), source))
    return groups


def _parse_emoji_line(line, source, lineno):
    fields = line.split(";")
    if len(fields) < 2 or not fields[0] or not fields[1]:
        raise EmojiDataError("{}:{}: expected '<emoji>;<name>[;<keywords>]'"
                             .format(source, lineno))
    value, name = fields[0], fields[1]
    keywords = []
    if len(fields) >= 3 and fields[2]:
        keywords = [k for k in fields[2].split("|") if k]
    return Emoji(value, name, keywords)
