# -*- coding: utf-8 -*-

# Copyright © 2007-2009 Chris Jones <tortoise@tortuga>
# Copyright © 2011-2016 marmuta <marmvta@gmail.com>
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


class EventSource(object):
    """
    Named events with plain python callbacks, delivered synchronously.
    Unknown event names raise KeyError.
    """

    def __init__(self, event_names):
        self._listeners = {name: [] for name in event_names}

    def cleanup(self):
        """ Forget all listeners. """
        for listeners in self._listeners.values():
            listeners.clear()

    def connect(self, event_name, callback):
        listeners = self._listeners[event_name]
        if callback not in listeners:
            listeners.append(callback)

    def disconnect(self, event_name, callback):
        try:
            self._listeners[event_name].remove(callback)
        except ValueError:
            pass

    def emit(self, event_name, *args, **kwargs):
        # iterate a copy, callbacks may disconnect
        for callback in self._listeners[event_name][:]:
            callback(*args, **kwargs)


class CurrentValue(EventSource):
    """
    Holds a single current value and notifies listeners of every assignment.

    There is one writer, the owner, and any number of readers. Readers get
    the latest value through the value property or the "value-changed"
    event. Assignments always replace the whole value.

    Doctests:

    >>> cv = CurrentValue(())
    >>> cv.value
    ()
    >>> seen = []
    >>> cv.connect("value-changed", seen.append)
    >>> cv.value = ("a",)
    >>> cv.value = ("a",)
    >>> seen
    [('a',), ('a',)]
    """

    def __init__(self, initial_value=None):
        EventSource.__init__(self, ["value-changed"])
        self._value = initial_value

    def get_value(self):
        return self._value

    def set_value(self, value):
        self._value = value
        self.emit("value-changed", value)

    value = property(get_value, set_value)


def get_data_dir():
    """ Directory of the data files shipped with the package """
    return os.path.join(os.path.dirname(os.path.abspath(__file__)), "data")


class XDGDirs:
    """
    Build paths compliant with XDG Base Directory Specification.
    http://standards.freedesktop.org/basedir-spec/basedir-spec-latest.html

    Doctests:

    >>> old_env = os.environ.copy()
    >>> os.environ["HOME"] = "/home/test_user"

    # XDG_DATA_HOME unavailable
    >>> os.environ["XDG_DATA_HOME"] = ""
    >>> XDGDirs.get_data_home("emoji-suggest/emoji")
    '/home/test_user/.local/share/emoji-suggest/emoji'

    # XDG_DATA_HOME available
    >>> os.environ["XDG_DATA_HOME"] = "/home/test_user/.data_home"
    >>> XDGDirs.get_data_home("emoji-suggest/emoji")
    '/home/test_user/.data_home/emoji-suggest/emoji'

    >>> os.environ.clear()
    >>> os.environ.update(old_env)
    """

    @staticmethod
    def get_data_home(file=""):
        """
        User specific data files.
        """
        path = os.environ.get("XDG_DATA_HOME")
        if not path or \
           not os.path.isabs(path):
            path = os.path.join(os.path.expanduser("~"), ".local", "share")
        return os.path.join(path, file) if file else path

    @staticmethod
    def get_data_dirs():
        """
        Search paths for system wide data files.
        """
        paths = os.environ.get("XDG_DATA_DIRS", "").split(":")
        paths = [p for p in paths if os.path.isabs(p)]
        if not paths:
            paths = ["/usr/local/share", "/usr/share"]
        return paths

    @staticmethod
    def find_data_file(file):
        """
        Search for an existing data file, user directory first.
        Returns None if the file could not be found.
        """
        paths = [XDGDirs.get_data_home()] + XDGDirs.get_data_dirs()
        for path in paths:
            filename = os.path.join(path, file)
            if os.path.exists(filename):
                return filename
        return None
