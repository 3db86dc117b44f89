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

import logging
_logger = logging.getLogger(__name__)

from EmojiSuggest.utils import EventSource


class TextSpan:
    """
    Range of text offsets [begin, end).

    Doctests:

    >>> span = TextSpan(3, 2)
    >>> span.begin(), span.end(), span.is_empty()
    (3, 5, False)
    >>> TextSpan().is_empty()
    True
    """

    def __init__(self, pos=0, length=0):
        self.pos = pos
        self.length = length

    def begin(self):
        return self.pos

    def end(self):
        return self.pos + self.length

    def is_empty(self):
        return self.length == 0

    def __eq__(self, other):
        return isinstance(other, TextSpan) and \
               self.pos == other.pos and self.length == other.length

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((self.pos, self.length))

    def __repr__(self):
        return "TextSpan({}, {})".format(self.pos, self.length)


class TextSnapshot:
    """
    Immutable state of the edited text at one point in time.
    selection is the caret when empty, composing the span of
    provisional, not yet committed text.
    """
    __slots__ = ("text", "selection", "composing")

    def __init__(self, text="", selection=None, composing=None):
        n = len(text)
        if selection is None:
            selection = TextSpan(n, 0)
        if composing is None:
            composing = TextSpan(n, 0)

        object.__setattr__(self, "text", text)
        object.__setattr__(self, "selection", self._clip(selection, n))
        object.__setattr__(self, "composing", self._clip(composing, n))

    def __setattr__(self, name, value):
        raise AttributeError("TextSnapshot is immutable")

    @staticmethod
    def _clip(span, n):
        begin = max(0, min(span.begin(), n))
        end = max(begin, min(span.end(), n))
        return TextSpan(begin, end - begin)

    @property
    def composing_text(self):
        return self.text[self.composing.begin():self.composing.end()]

    def __repr__(self):
        return "TextSnapshot({!r}, {!r}, {!r})" \
               .format(self.text, self.selection, self.composing)


class EditorInfo:
    """ Properties of the focused text entry. """

    def __init__(self, emoji_compat_metadata_version=0):
        # highest emoji metadata version the editor can deal with
        self.emoji_compat_metadata_version = emoji_compat_metadata_version

    def __repr__(self):
        return "EditorInfo(emoji_compat_metadata_version={})" \
               .format(self.emoji_compat_metadata_version)


class TextContext(EventSource):
    """
    Keep track of the text of the focused text entry.

    Events:
        "text-entry-activated" (editor_info): a text entry got the focus
        "text-entry-deactivated" (): it lost the focus
        "text-changed" (snapshot): text, selection or composing span
                                   changed
    """

    _event_names = ("text-entry-activated",
                    "text-entry-deactivated",
                    "text-changed")

    def __init__(self):
        EventSource.__init__(self, self._event_names)
        self._editor_info = None
        self._snapshot = TextSnapshot()

    def cleanup(self):
        EventSource.cleanup(self)
        self._editor_info = None

    def is_active(self):
        return self._editor_info is not None

    def get_editor_info(self):
        return self._editor_info or EditorInfo()

    def activate(self, editor_info=None):
        """ A text entry was focused. """
        if self._editor_info is not None:
            self.deactivate()

        self._editor_info = editor_info or EditorInfo()
        self._snapshot = TextSnapshot()

        _logger.debug("text entry activated: {}".format(self._editor_info))
        self.emit("text-entry-activated", self._editor_info)

    def deactivate(self):
        if self._editor_info is not None:
            self._editor_info = None
            _logger.debug("text entry deactivated")
            self.emit("text-entry-deactivated")

    def get_snapshot(self):
        return self._snapshot

    def get_composing_text(self):
        return self._snapshot.composing_text

    def update(self, text, selection=None, composing=None):
        """ The editor reports new content. """
        self._snapshot = TextSnapshot(text, selection, composing)
        self.emit("text-changed", self._snapshot)

    def set_composing_text(self, composing_text):
        """
        Replace the composing text; without composing span, start
        composing at the caret. The caret ends up after the new
        composing text.
        """
        snapshot = self._snapshot
        span = snapshot.composing
        if span.is_empty():
            span = snapshot.selection

        text = snapshot.text[:span.begin()] + composing_text + \
               snapshot.text[span.end():]
        composing = TextSpan(span.begin(), len(composing_text))
        caret = TextSpan(composing.end(), 0)

        self.update(text, caret, composing)
