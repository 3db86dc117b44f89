# -*- coding: utf-8 -*-

# Copyright © 2008-2010 Chris Jones <tortoise@tortuga>
# Copyright © 2011-2014 marmuta <marmvta@gmail.com>
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


class ChainableError(Exception):
    """
    Base class for EmojiSuggest errors.

    The message includes the one of the chained exception, which also
    becomes the __cause__, so tracebacks start at the original error.
    """

    def __init__(self, message, chained_exception=None):
        Exception.__init__(self, message)
        self.message = message
        self.chained_exception = chained_exception
        if chained_exception is not None:
            self.__cause__ = chained_exception

    def __str__(self):
        if self.chained_exception is not None:
            return "{}, {}".format(self.message, self.chained_exception)
        return str(self.message)


class EmojiDataError(ChainableError):
    """Error raised when the emoji definition file can't be read or parsed."""
    pass


class SchemaError(ChainableError):
    """Error raised when a gsettings schema does not exist """
    pass
