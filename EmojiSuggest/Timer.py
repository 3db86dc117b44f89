# -*- coding: utf-8 -*-

# Copyright © 2016 marmuta <marmvta@gmail.com>
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

from gi.repository import GLib

_logger = logging.getLogger("Timer")


class Timer(object):
    """
    GLib timeout source that calls callback(*args) every <delay> seconds
    for as long as the callback returns True.
    """

    def __init__(self, delay=None, callback=None, *args):
        self._source_id = None
        self._callback = callback
        self._args = args

        if delay is not None:
            self.start(delay)

    def start(self, delay, callback=None, *args):
        """ (Re)start, an already running timer begins a new period. """
        if callback is not None:
            self._callback = callback
            self._args = args

        self.stop()
        self._source_id = GLib.timeout_add(int(delay * 1000), self._on_timeout)

    def stop(self):
        if self._source_id is not None:
            GLib.source_remove(self._source_id)
            self._source_id = None

    def is_running(self):
        return self._source_id is not None

    def _on_timeout(self):
        keep_running = False
        try:
            keep_running = bool(self.on_timer())
        finally:
            if not keep_running:
                # GLib destroys the source, also when on_timer raised
                self._source_id = None
        return keep_running

    def on_timer(self):
        """ Overload this, return False to stop. """
        return self._callback(*self._args) if self._callback else False


class TimerOnce(Timer):
    """ Calls its callback once per start(). """

    def on_timer(self):
        if self._callback:
            self._callback(*self._args)
        return False


class Debouncer(object):
    """
    Deliver only the latest of a burst of values, once no new value
    arrived for <delay> seconds.

    Every push() restarts the quiet period. Values pushed while the
    timer is running replace each other; cancel() drops the pending value.
    """

    def __init__(self, delay, callback):
        self.delay = delay
        self._callback = callback
        self._pending = None
        self._timer = TimerOnce()

    def push(self, value):
        self._pending = value
        self._timer.start(self.delay, self._on_quiet_period_elapsed)

    def is_pending(self):
        return self._timer.is_running()

    def cancel(self):
        self._timer.stop()
        self._pending = None

    def _on_quiet_period_elapsed(self):
        value = self._pending
        self._pending = None
        _logger.debug("quiet period of {}s elapsed".format(self.delay))
        self._callback(value)
