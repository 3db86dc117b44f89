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

import unittest
from unittest import mock

from gi.repository import GLib

from EmojiSuggest.Emoji import Emoji
from EmojiSuggest.EmojiCatalog import EmojiCatalog
from EmojiSuggest.EmojiSuggestions import (EmojiSuggestions, ChangeFilter,
                                           extract_query, match_suggestions,
                                           EMOJI_SUGGESTION_MAX_COUNT)
from EmojiSuggest.TextContext import TextContext, TextSnapshot, TextSpan


# short quiet period, the main loop runs for a multiple of it
TEST_DEBOUNCE_DELAY = 0.02
TEST_SETTLE_TIME = 0.2


def run_main_loop(seconds):
    loop = GLib.MainLoop()
    GLib.timeout_add(int(seconds * 1000), loop.quit)
    loop.run()


def smileys(n):
    return [Emoji(chr(0x1F600 + i), "smiley {}".format(i), ["smiley", "face"])
            for i in range(n)]


class TestExtractQuery(unittest.TestCase):

    def test_too_short(self):
        for text in ["", ":", ":s", "ab"]:
            self.assertIsNone(extract_query(text), text)

    def test_after_last_indicator(self):
        self.assertEqual("smi", extract_query("hi :smi"))
        self.assertEqual("cat", extract_query("a:b:cat"))
        self.assertEqual("sm", extract_query(":sm"))

    def test_trailing_indicator(self):
        self.assertEqual("", extract_query("ab:"))

    def test_without_indicator(self):
        self.assertEqual("smile", extract_query("smile"))

    def test_custom_indicator_and_length(self):
        self.assertEqual("cat", extract_query("x;cat", ";", 2))
        self.assertIsNone(extract_query("x;cat", ";", 5))


class TestMatchSuggestions(unittest.TestCase):

    def test_name_and_keyword_must_contain_query(self):
        emojis = [Emoji("\U0001F604", "smile", ["happy"]),
                  Emoji("\U0001F600", "grin", ["smile", "cat"])]
        self.assertEqual([], match_suggestions("smile", emojis))
        self.assertEqual([], match_suggestions("happy", emojis))

    def test_match(self):
        emojis = [Emoji("\U0001F604", "smiling face", ["smile", "happy"]),
                  Emoji("\U0001F431", "cat face", ["cat"])]
        candidates = match_suggestions("smil", emojis)
        self.assertEqual(["\U0001F604"], [c.text for c in candidates])
        self.assertEqual("smiling face", candidates[0].secondary_text)

    def test_case_sensitive(self):
        emojis = [Emoji("\U0001F604", "smiling face", ["smile"])]
        self.assertEqual([], match_suggestions("Smil", emojis))

    def test_max_count_in_catalog_order(self):
        emojis = smileys(10)
        candidates = match_suggestions("smiley", emojis)
        self.assertEqual(EMOJI_SUGGESTION_MAX_COUNT, len(candidates))
        self.assertEqual(emojis[:EMOJI_SUGGESTION_MAX_COUNT],
                         [c.emoji for c in candidates])

        self.assertEqual(2, len(match_suggestions("smiley", emojis, 2)))
        self.assertEqual([], match_suggestions("smiley", emojis, 0))

    def test_empty(self):
        self.assertEqual([], match_suggestions("", smileys(3)))
        self.assertEqual([], match_suggestions("smiley", []))

    def test_fresh_candidates(self):
        emojis = smileys(1)
        first = match_suggestions("smiley", emojis)
        second = match_suggestions("smiley", emojis)
        self.assertIsNot(first[0], second[0])
        self.assertIs(first[0].emoji, second[0].emoji)


class TestChangeFilter(unittest.TestCase):

    def test_same_composing_text_dropped(self):
        change_filter = ChangeFilter()
        self.assertTrue(change_filter.accept(
            TextSnapshot("a :smi", None, TextSpan(2, 4))))
        # caret moved, composing text unchanged
        self.assertFalse(change_filter.accept(
            TextSnapshot("a :smi", TextSpan(0, 0), TextSpan(2, 4))))
        self.assertTrue(change_filter.accept(
            TextSnapshot("a :smil", None, TextSpan(2, 5))))

    def test_reset(self):
        change_filter = ChangeFilter()
        snapshot = TextSnapshot(":smi", None, TextSpan(0, 4))
        self.assertTrue(change_filter.accept(snapshot))
        change_filter.reset()
        self.assertTrue(change_filter.accept(snapshot))


class TestEmojiSuggestions(unittest.TestCase):

    class Config_mockup:
        class Suggestions:
            enabled = True
        def __init__(self):
            self.suggestions = self.Suggestions()

    def setUp(self):
        patcher = mock.patch(
            "EmojiSuggest.EmojiSuggestions.EMOJI_SUGGESTION_DEBOUNCE_DELAY",
            TEST_DEBOUNCE_DELAY)
        patcher.start()
        self.addCleanup(patcher.stop)

        self.emojis = [
            Emoji("\U0001F604", "grinning face with smiling eyes",
                  ["smile", "grinning face with smiling eyes"]),
            Emoji("\U0001F642", "slightly smiling face",
                  ["smile", "slightly smiling face"]),
            Emoji("\U0001F431", "cat face", ["cat", "pet", "cat face"]),
        ] + smileys(10)
        self.build_count = 0

        self.config = self.Config_mockup()
        self.text_context = TextContext()
        self.text_context.activate()
        self.suggestions = EmojiSuggestions(self.text_context, self.config,
                                            EmojiCatalog(self._build_catalog))

        self.published = []
        self.suggestions.active_candidates.connect("value-changed",
                                                   self.published.append)

    def tearDown(self):
        self.suggestions.cleanup()
        self.text_context.cleanup()

    def test_initially_empty(self):
        self.assertEqual((), self.suggestions.active_candidates.value)
        self.assertFalse(self.suggestions.get_catalog().is_built())

    def test_publishes_after_quiet_period(self):
        self.text_context.set_composing_text(":smiling")
        self.assertEqual([], self.published)
        self.assertTrue(self.suggestions.is_pending())

        run_main_loop(TEST_SETTLE_TIME)

        self.assertEqual(1, len(self.published))
        values = [c.text for c in self.published[0]]
        self.assertEqual(["\U0001F604", "\U0001F642"], values)
        self.assertIsInstance(self.suggestions.active_candidates.value, tuple)
        self.assertEqual(1, self.build_count)

    def test_burst_publishes_once_with_latest_text(self):
        for text in [":s", ":sm", ":smi", ":smil", ":cat"]:
            self.text_context.set_composing_text(text)

        run_main_loop(TEST_SETTLE_TIME)

        self.assertEqual(1, len(self.published))
        self.assertEqual(["\U0001F431"],
                         [c.text for c in self.published[0]])

    def test_unchanged_composing_text_not_processed_again(self):
        self.text_context.set_composing_text(":cat")
        run_main_loop(TEST_SETTLE_TIME)

        # same composing text, only the caret moved
        snapshot = self.text_context.get_snapshot()
        self.text_context.update(snapshot.text, TextSpan(0, 0),
                                 snapshot.composing)
        run_main_loop(TEST_SETTLE_TIME)

        self.assertEqual(1, len(self.published))

    def test_max_count(self):
        self.text_context.set_composing_text(":smiley")
        run_main_loop(TEST_SETTLE_TIME)
        self.assertEqual(EMOJI_SUGGESTION_MAX_COUNT,
                         len(self.suggestions.active_candidates.value))

    def test_short_composing_text_publishes_empty(self):
        self.text_context.set_composing_text(":cat")
        run_main_loop(TEST_SETTLE_TIME)
        self.text_context.set_composing_text(":c")
        run_main_loop(TEST_SETTLE_TIME)

        self.assertEqual(2, len(self.published))
        self.assertEqual((), self.published[-1])

    def test_no_match_publishes_empty(self):
        self.text_context.set_composing_text(":unicorn")
        run_main_loop(TEST_SETTLE_TIME)
        self.assertEqual([()], self.published)

    def test_disabled_publishes_empty(self):
        self.config.suggestions.enabled = False
        self.text_context.set_composing_text(":cat")
        run_main_loop(TEST_SETTLE_TIME)

        self.assertEqual([()], self.published)
        self.assertFalse(self.suggestions.get_catalog().is_built())

    def test_cleanup_cancels_pending_processing(self):
        self.text_context.set_composing_text(":cat")
        self.suggestions.cleanup()
        self.assertFalse(self.suggestions.is_pending())

        run_main_loop(TEST_SETTLE_TIME)
        self.assertEqual([], self.published)

        # disconnected from the text context
        self.text_context.set_composing_text(":smile")
        self.assertFalse(self.suggestions.is_pending())

    def test_catalog_built_once(self):
        for text in [":cat", ":smil", ":smiley"]:
            self.text_context.set_composing_text(text)
            run_main_loop(TEST_SETTLE_TIME)
        self.assertEqual(3, len(self.published))
        self.assertEqual(1, self.build_count)

    def _build_catalog(self):
        self.build_count += 1
        return self.emojis


if __name__ == '__main__':
    unittest.main()
