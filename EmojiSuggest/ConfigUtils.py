# -*- coding: utf-8 -*-

# Copyright © 2011-2017 marmuta <marmvta@gmail.com>
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
File containing ConfigObject.
"""

### Logging ###
import logging
_logger = logging.getLogger("ConfigUtils")
###############

import os
import configparser
from ast import literal_eval
from gettext import gettext as _

from gi.repository import Gio

from EmojiSuggest.Exceptions import SchemaError

_CAN_SET_HOOK       = "_can_set_"       # return true if value is valid
_POST_NOTIFY_HOOK   = "_post_notify_"   # runs after all listeners notified
_NOTIFY_CALLBACKS   = "_{}_notify_callbacks" # name of list of callbacks


class ConfigObject(object):
    """
    Tree of gsettings schemas with python properties for their keys.

    Keys added in _init_keys() get a property, <prop>_notify_add() and
    <prop>_notify_remove(). Values come from gsettings, may be replaced
    once by distribution defaults and are overridden by command line
    options without being written back.

    Overload _can_set_<prop>(value) to validate and _post_notify_<prop>()
    to act after listeners were told about a gsettings change.

    schema_source and backend default to the installed schemas and the
    default settings backend. Children always use their parent's.
    """
    def __init__(self, parent=None, schema="",
                 schema_source=None, backend=None):
        self.parent = parent
        self.children = []
        self.schema = schema
        self.gskeys = {}            # {property name: GSKey}
        self.sysdef_section = None  # section in the system defaults file
        self.system_defaults = {}   # {property name: value}

        if parent is not None:
            schema_source = parent.schema_source
            backend = parent.backend
        elif schema_source is None:
            schema_source = Gio.SettingsSchemaSource.get_default()
        self.schema_source = schema_source
        self.backend = backend

        self._init_keys()

        settings_schema = None
        if schema_source is not None:
            settings_schema = schema_source.lookup(self.schema, True)
        if settings_schema is None:
            raise SchemaError(_("gsettings schema for '{}' is not installed")
                              .format(self.schema))

        self.settings = Gio.Settings.new_full(settings_schema, backend, None)
        for gskey in self.gskeys.values():
            gskey.settings = self.settings
            self._setup_property(gskey)

        self.check_hooks()

    def _init_keys(self):
        """ overload this and use add_key() to add key-value tuples """
        pass

    def add_key(self, key, default):
        """
        Add gsettings key <key>. The type of default is the type of
        the key, the property name is key with underscores.
        """
        gskey = GSKey(key, default)
        self.gskeys[gskey.prop] = gskey
        return gskey

    def check_hooks(self):
        """
        Catch misspelled hook functions, their names have to end in
        a known property.
        """
        for member in dir(self):
            for prefix in (_CAN_SET_HOOK, _POST_NOTIFY_HOOK):
                if member.startswith(prefix) and \
                   member[len(prefix):] not in self.gskeys:
                    raise NameError(
                        "'{}' looks like a ConfigObject hook function, but "
                        "'{}' is not a known property of '{}'"
                        .format(member, member[len(prefix):], str(self)))

    def disconnect_notifications(self):
        """ Recursively remove all callbacks from all notification lists. """
        for prop in self.gskeys:
            setattr(self, _NOTIFY_CALLBACKS.format(prop), [])

        for child in self.children:
            child.disconnect_notifications()

    def _can_set(self, prop, value):
        hook = getattr(self, _CAN_SET_HOOK + prop, None)
        return hook is None or hook(value)

    def _setup_property(self, gskey):
        """ Create property, notify functions and gsettings callback """
        prop = gskey.prop
        cls = type(self)

        setattr(self, _NOTIFY_CALLBACKS.format(prop), [])

        def notify_add(self, callback, _prop=prop):
            getattr(self, _NOTIFY_CALLBACKS.format(_prop)).append(callback)

        def notify_remove(self, callback, _prop=prop):
            callbacks = getattr(self, _NOTIFY_CALLBACKS.format(_prop))
            if callback in callbacks:
                callbacks.remove(callback)

        def changed_cb(self, settings, key, _prop=prop):
            _gskey = self.gskeys[_prop]
            value = _gskey.gsettings_get()

            if self._can_set(_prop, value) and _gskey.value != value:
                _gskey.value = value
                for callback in list(getattr(self,
                                        _NOTIFY_CALLBACKS.format(_prop))):
                    callback(value)

            post_notify = getattr(self, _POST_NOTIFY_HOOK + _prop, None)
            if post_notify:
                post_notify()

        def get_value(self, _prop=prop):
            return self.gskeys[_prop].value

        def set_value(self, value, save=True, _prop=prop):
            _gskey = self.gskeys[_prop]
            if self._can_set(_prop, value):
                if save and value != _gskey.value:
                    _gskey.gsettings_set(value)
                _gskey.value = value

        setattr(cls, prop + "_notify_add", notify_add)
        setattr(cls, prop + "_notify_remove", notify_remove)
        setattr(cls, "_" + prop + "_changed_cb", changed_cb)

        # get_<prop> and set_<prop> may be overloaded
        if not hasattr(cls, "get_" + prop):
            setattr(cls, "get_" + prop, get_value)
        if not hasattr(cls, "set_" + prop):
            setattr(cls, "set_" + prop, set_value)
        setattr(cls, prop, property(getattr(cls, "get_" + prop),
                                    getattr(cls, "set_" + prop)))

        self.settings.connect("changed::" + gskey.key,
                              getattr(self, "_" + prop + "_changed_cb"))

    def init_properties(self, options):
        """ gsettings, then system defaults, then command line options """
        self.init_from_gsettings()

        if self.use_system_defaults:
            self.init_from_system_defaults()
            self.use_system_defaults = False  # only on the first start

        self.init_from_options(options)

    def init_from_gsettings(self):
        for gskey in self.gskeys.values():
            gskey.value = gskey.gsettings_get()

        for child in self.children:
            child.init_from_gsettings()

    def init_from_system_defaults(self):
        """ Store the system defaults in gsettings """
        for prop, value in self.system_defaults.items():
            setattr(self, prop, value)

        for child in self.children:
            child.init_from_system_defaults()

    def init_from_options(self, options):
        """
        Options are named <sysdef_section>_<property> for children and
        <property> for the root. They aren't written to gsettings.
        """
        prefix = ""
        if self.parent is not None and self.sysdef_section:
            prefix = self.sysdef_section + "_"

        for prop, gskey in self.gskeys.items():
            value = getattr(options, prefix + prop, None)
            if value is not None:
                gskey.value = value

        for child in self.children:
            child.init_from_options(options)

    @staticmethod
    def _get_user_sys_filename(filename, description,
                               user_filename_func=None,
                               system_filename_func=None):
        """
        Full path of filename. If it doesn't exist as given, it is taken
        as a base name and looked up in the user directory, then in the
        system directory. Returns "" when nothing was found.
        """
        filepath = filename
        if filename and not os.path.exists(filename):
            _logger.debug(_("{description} '{filename}' not found yet, "
                            "retrying in default paths")
                          .format(description=description, filename=filename))
            filepath = ""
            for func in (user_filename_func, system_filename_func):
                if func:
                    candidate = func(filename)
                    if candidate and os.path.exists(candidate):
                        filepath = candidate
                        break

        if not filepath:
            if filename:
                _logger.error(_("failed to find {description} '{filename}'")
                              .format(description=description,
                                      filename=filename))
            return ""

        _logger.debug(_("{description} '{filepath}' found.")
                      .format(description=description, filepath=filepath))
        return filepath

    def load_system_defaults(self, paths):
        """
        Read distribution defaults from the ini files in paths,
        later files win. None of them has to exist.
        """
        _logger.info(_("Looking for system defaults in {paths}")
                     .format(paths=paths))

        parser = configparser.ConfigParser()
        try:
            filenames = parser.read(paths, encoding="utf-8")
        except configparser.Error as ex:
            _logger.error(_("Failed to read system defaults. ") + str(ex))
            return

        if not filenames:
            _logger.info(_("No system defaults found."))
            return

        _logger.info(_("Loading system defaults from {filenames}")
                     .format(filenames=filenames))
        self._read_sysdef_section(parser)

    def _read_sysdef_section(self, parser):
        for child in self.children:
            child._read_sysdef_section(parser)

        self.system_defaults = {}
        if not self.sysdef_section or \
           not parser.has_section(self.sysdef_section):
            return

        gskeys = dict((gskey.key, gskey) for gskey in self.gskeys.values())
        for key, text in parser.items(self.sysdef_section):
            _logger.info(_("Found system default '{}={}'").format(key, text))

            gskey = gskeys.get(key)
            value = self._convert_sysdef_key(gskey, key, text)
            if value is not None:
                self.system_defaults[gskey.prop] = value

    def _convert_sysdef_key(self, gskey, key, text):
        """
        Value of the system default string text, of the type of
        gskey's default. None if it can't be used.
        """
        if gskey is None:
            _logger.warning(_("System defaults: Unknown key '{}' "
                              "in section '{}'")
                            .format(key, self.sysdef_section))
            return None

        if isinstance(gskey.default, str):
            return text.strip('"')

        try:
            value = literal_eval(text)
        except (ValueError, SyntaxError) as ex:
            value = ex
        if type(value) != type(gskey.default):
            _logger.warning(_("System defaults: Invalid value '{}'"
                              " for key '{}' in section '{}'")
                            .format(text, key, self.sysdef_section))
            return None
        return value


class GSKey:
    """
    One gsettings key of a ConfigObject and its current property value.
    """

    _getters = {bool:  "get_boolean",
                int:   "get_int",
                float: "get_double",
                str:   "get_string"}

    def __init__(self, key, default):
        self.settings = None              # Gio.Settings of the schema
        self.key = key                    # gsettings key name
        self.prop = key.replace("-", "_") # python property name
        self.default = default            # hard coded default, gives type
        self.value = default              # current property value

    def gsettings_get(self):
        getter = self._getters.get(type(self.default))
        try:
            if getter:
                return getattr(self.settings, getter)(self.key)
            return self.settings[self.key]
        except KeyError as ex:
            _logger.error(_("Failed to get gsettings value. ") + str(ex))
        return self.default

    def gsettings_set(self, value):
        self.settings[self.key] = value
