# -*- coding: utf-8 -*-

# Copyright © 2012-2017 marmuta <marmvta@gmail.com>
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
Console front end. Every line read from stdin becomes the composing
text of a pseudo text entry; published suggestions are printed to stdout.
"""

import sys
import signal

from gi.repository import GLib

from EmojiSuggest.Config import load_config
from EmojiSuggest.EmojiSuggestions import EmojiSuggestions
from EmojiSuggest.TextContext import TextContext, TextSpan, EditorInfo
from EmojiSuggest.Timer import Timer

### Logging ###
import logging
_logger = logging.getLogger("EmojiSuggestApp")
###############

# seconds between checks for pending suggestions at end of input
DRAIN_POLL_INTERVAL = 0.1


class EmojiSuggestApp:
    """
    Main controller of the console front end.
    """

    def __init__(self, config, stdin=None, stdout=None):
        self._config = config
        self._stdin = stdin or sys.stdin
        self._stdout = stdout or sys.stdout

        self._loop = GLib.MainLoop()
        self._input_watch = None
        self._signal_sources = []
        self._suggestions = None
        self._drain_timer = Timer()

        self._text_context = TextContext()
        self._text_context.connect("text-entry-activated",
                                   self._on_text_entry_activated)
        self._text_context.connect("text-entry-deactivated",
                                   self._on_text_entry_deactivated)

    def cleanup(self):
        self._drain_timer.stop()
        if self._input_watch is not None:
            GLib.source_remove(self._input_watch)
            self._input_watch = None
        for source_id in self._signal_sources:
            GLib.source_remove(source_id)
        self._signal_sources = []

        self._text_context.deactivate()
        self._text_context.cleanup()

    def run(self):
        channel = GLib.IOChannel.unix_new(self._stdin.fileno())
        self._input_watch = GLib.io_add_watch(
            channel, GLib.PRIORITY_DEFAULT,
            GLib.IOCondition.IN | GLib.IOCondition.HUP,
            self._on_input)

        self._signal_sources = [
            GLib.unix_signal_add(GLib.PRIORITY_HIGH, signal.SIGTERM,
                                 self.on_sigterm),
            GLib.unix_signal_add(GLib.PRIORITY_HIGH, signal.SIGINT,
                                 self.on_sigint),
        ]

        self._text_context.activate(EditorInfo())

        _logger.info("Entering mainloop of emoji-suggest")
        self._loop.run()

        self.cleanup()

    def quit(self):
        if self._loop.is_running():
            self._loop.quit()

    def _quit_when_settled(self):
        """ Let the last input line still produce its suggestions. """
        if self._suggestions and self._suggestions.is_pending():
            self._drain_timer.start(DRAIN_POLL_INTERVAL, self._on_drain_timer)
        else:
            self.quit()

    def _on_drain_timer(self):
        if self._suggestions and self._suggestions.is_pending():
            return True
        self.quit()
        return False

    def on_sigterm(self):
        _logger.debug("SIGTERM received")
        self.quit()
        return GLib.SOURCE_CONTINUE

    def on_sigint(self):
        """
        Exit on Ctrl+C press.
        """
        _logger.debug("SIGINT received")
        self.quit()
        return GLib.SOURCE_CONTINUE

    def _on_input(self, channel, condition):
        line = ""
        if condition & GLib.IOCondition.IN:
            try:
                line = channel.readline()
            except GLib.Error as ex:
                _logger.warning("failed to read input, stopping: " +
                                str(ex))
                line = ""

        if not line:
            _logger.debug("end of input")
            self._input_watch = None
            self._quit_when_settled()
            return False

        text = line.rstrip("\r\n")
        self._text_context.update(text, None, TextSpan(0, len(text)))
        return True

    def _on_text_entry_activated(self, editor_info):
        self._suggestions = EmojiSuggestions(self._text_context,
                                             self._config)
        self._suggestions.active_candidates.connect(
            "value-changed", self._on_candidates_changed)

    def _on_text_entry_deactivated(self):
        if self._suggestions:
            self._suggestions.cleanup()
            self._suggestions = None

    def _on_candidates_changed(self, candidates):
        out = self._stdout
        for candidate in candidates:
            out.write("{}  {}\n".format(candidate.text,
                                        candidate.secondary_text))
        if not candidates:
            out.write("-\n")
        out.flush()


def main(argv=None):
    config = load_config(argv)

    app = EmojiSuggestApp(config)
    try:
        app.run()
    finally:
        config.cleanup()
