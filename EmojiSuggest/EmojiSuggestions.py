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
Live emoji suggestions for the composing text.

Typing ":<query>" makes emoji whose name and keywords contain <query>
available as candidates. Text changes are filtered for actual changes of
the composing text, debounced and then matched against the emoji catalog
of the current text entry session.
"""

import logging
_logger = logging.getLogger("EmojiSuggestions")

from EmojiSuggest.EmojiCatalog import EmojiCatalog
from EmojiSuggest.Timer import Debouncer
from EmojiSuggest.utils import CurrentValue


EMOJI_SUGGESTION_INDICATOR = ":"
EMOJI_SUGGESTION_DEBOUNCE_DELAY = 0.4   # seconds
EMOJI_SUGGESTION_QUERY_MIN_LENGTH = 2
EMOJI_SUGGESTION_MAX_COUNT = 5


class EmojiSuggestionCandidate:
    """ Suggestion list entry for one emoji """
    __slots__ = ("emoji",)

    def __init__(self, emoji):
        self.emoji = emoji

    @property
    def text(self):
        """ Text to insert """
        return self.emoji.value

    @property
    def secondary_text(self):
        return self.emoji.name

    def __repr__(self):
        return "EmojiSuggestionCandidate({!r})".format(self.emoji)


def extract_query(composing_text,
                  indicator=EMOJI_SUGGESTION_INDICATOR,
                  min_length=EMOJI_SUGGESTION_QUERY_MIN_LENGTH):
    """
    Text after the last indicator, None while composing_text is
    too short. Without indicator the whole text is the query.

    Doctests:

    >>> extract_query("hi :smi")
    'smi'
    >>> extract_query("a:b:cat")
    'cat'
    >>> print(extract_query(":s"))
    None
    >>> extract_query("smile")
    'smile'
    >>> extract_query("ab:")
    ''
    """
    if len(composing_text) <= min_length:
        return None
    return composing_text[composing_text.rfind(indicator) + 1:]


def match_suggestions(query, emojis, max_count=EMOJI_SUGGESTION_MAX_COUNT):
    """
    First max_count emoji whose name contains query and that have
    at least one keyword containing query. Case sensitive.
    """
    candidates = []
    if not query or max_count <= 0:
        return candidates

    for emoji in emojis:
        if query in emoji.name and \
           any(query in keyword for keyword in emoji.keywords):
            candidates.append(EmojiSuggestionCandidate(emoji))
            if len(candidates) >= max_count:
                break

    return candidates


class ChangeFilter:
    """
    Let a text snapshot pass only if its composing text differs
    from the one of the previously offered snapshot.
    """

    def __init__(self):
        self._last_composing_text = None

    def accept(self, snapshot):
        composing_text = snapshot.composing_text
        if composing_text == self._last_composing_text:
            return False
        self._last_composing_text = composing_text
        return True

    def reset(self):
        self._last_composing_text = None


class EmojiSuggestions:
    """
    Keeps active_candidates up to date with the composing text of
    text_context. One instance per text entry session; call cleanup()
    when the session ends.

    config must provide config.suggestions.enabled and, for the default
    catalog, config.emoji.preferred_skin_tone, image_set_dir and font.
    """

    def __init__(self, text_context, config, catalog=None):
        self._text_context = text_context
        self._config = config

        if catalog is None:
            catalog = EmojiCatalog.from_config(
                text_context.get_editor_info(), config)
        self._catalog = catalog

        # published candidate lists, tuples, read-only for listeners
        self.active_candidates = CurrentValue(())

        self._change_filter = ChangeFilter()
        self._debouncer = Debouncer(EMOJI_SUGGESTION_DEBOUNCE_DELAY,
                                    self._on_text_settled)

        self._text_context.connect("text-changed", self._on_text_changed)

    def cleanup(self):
        self._text_context.disconnect("text-changed", self._on_text_changed)
        self._debouncer.cancel()
        self._change_filter.reset()
        self.active_candidates.cleanup()

    def get_catalog(self):
        return self._catalog

    def is_pending(self):
        """ Is a text change waiting for its quiet period to elapse? """
        return self._debouncer.is_pending()

    def _on_text_changed(self, snapshot):
        if self._change_filter.accept(snapshot):
            self._debouncer.push(snapshot)

    def _on_text_settled(self, snapshot):
        self._publish(self._find_candidates())

    def _find_candidates(self):
        if not self._config.suggestions.enabled:
            return []

        query = extract_query(self._text_context.get_composing_text())
        if query is None:
            return []

        candidates = match_suggestions(query,
                                       self._catalog.get_emojis(),
                                       EMOJI_SUGGESTION_MAX_COUNT)
        _logger.debug("query {!r}: {} candidates"
                      .format(query, len(candidates)))
        return candidates

    def _publish(self, candidates):
        self.active_candidates.value = tuple(candidates)
