r"""
commandline option definitions and emitters.

Overview
- OptionDefinition: one accepted command-line option. Immutable once built;
  every attribute is exposed through a read-only property (sequences come back
  as tuples).
- Flags / REQUIRED: per-option flags. REQUIRED makes the parser report the
  option when it never appears on the command line.
- Emitters: switch_option, complement_switch_option, valued_option,
  default_valued_option, multivalued_option, default_multivalued_option.
  Prefer them over building OptionDefinition by hand: they pair the right
  actions with the right parameter slots.

Attributes
- long_names: ordered; the first one is the primary (canonical) name.
- short_names: matched exactly like long names; shown as aliases in help.
- parameters: ordered Parameter slots. Empty means a pure flag with no value.
- delimiter: single character splitting multi-valued text (default ',').
- if_found / if_not_found: Action strategies (see commandline.actions).
- config_key: destination key in the configuration tree.
- description / default_values_description: help text. An empty default
  description means no "[Default: …]" suffix is shown.
- flags: Flags.

Conventions
- Valued options do not provide defaults unless explicitly requested.
- Switches (exactly one boolean slot) do: they are stored as "false" when absent,
  and may be given bare (--flag) as shorthand for --flag=true.
- Complement switches store the inverse of their boolean and never write a
  default, so they cannot override the default of the switch they complement.

Name rules (duplicates, missing long name, '=' in a name) are deliberately
not enforced here: a whole option table is checked at once by
commandline.validation.validate_definitions, which reports every violation.

Quick example:
    >>> from commandline.options import *
    >>> from commandline.parameters import integer
    >>> table = [
    ...     switch_option(["--help", "--usage"], "ShowHelp", "Print this help text.", short_names=["-h"]),
    ...     default_valued_option("--port", integer(1, 65535), "8080", "Server.Port", "Port to listen on."),
    ... ]
"""
from collections.abc import Iterable
from enum import IntFlag

from .actions import *
from .parameters import Parameter, BooleanParameter, boolean
from .utils import *


class Flags(IntFlag):
    NONE = 0x00
    REQUIRED = 0x01


REQUIRED = Flags.REQUIRED


def _sanitize_names(kind, names, /):
    """
    Internal: normalize a name collection into a tuple of strings.

    A lone string is one name. Emptiness and content are checked later by the
    definition validator, so only the types are enforced here.
    """
    if isinstance(names, str):
        return (names,)
    if not isinstance(names, Iterable):
        raise TypeError("option %s must be a string or an iterable of strings" % kind)
    names = tuple(names)
    for name in names:
        if not isinstance(name, str):
            raise TypeError("option %s must be strings" % kind)
    return names


class OptionDefinition:
    """
    Declarative record describing one accepted option.

    Construction checks types and shapes only (TypeError/ValueError): names must
    be strings, parameters Parameter instances, actions Action instances, the
    delimiter exactly one character and config_key a non-empty string.
    """

    __introspectable__ = (
        "long_names",
        "short_names",
        "parameters",
        "delimiter",
        "if_found",
        "if_not_found",
        "config_key",
        "description",
        "default_values_description",
        "flags",
    )

    __slots__ = tuple("_" + name for name in __introspectable__)

    def __init__(
            self,
            long_names,
            /,
            short_names=(),
            parameters=(),
            delimiter=",",
            if_found=Unset,
            if_not_found=Unset,
            *,
            config_key,
            description="",
            default_values_description="",
            flags=Flags.NONE,
    ):
        self._long_names = _sanitize_names("long names", long_names)
        self._short_names = _sanitize_names("short names", short_names)

        if isinstance(parameters, Parameter):
            parameters = (parameters,)
        if not isinstance(parameters, Iterable):
            raise TypeError("option parameters must be an iterable of parameters")
        parameters = tuple(parameters)
        for parameter in parameters:
            if not isinstance(parameter, Parameter):
                raise TypeError("option parameters must be Parameter instances")
        self._parameters = parameters

        if not isinstance(delimiter, str):
            raise TypeError("option delimiter must be a string")
        elif len(delimiter) != 1:
            raise ValueError("option delimiter must be a single character")
        self._delimiter = delimiter

        if_found = coalesce(if_found, store_values())
        if_not_found = coalesce(if_not_found, do_nothing())
        if not isinstance(if_found, Action) or not isinstance(if_not_found, Action):
            raise TypeError("option actions must be Action instances")
        self._if_found = if_found
        self._if_not_found = if_not_found

        if not isinstance(config_key, str):
            raise TypeError("option config key must be a string")
        elif not config_key.strip():
            raise ValueError("option config key cannot be empty")
        self._config_key = config_key

        for name, text in (("description", description), ("default values description", default_values_description)):
            if not isinstance(text, str):
                raise TypeError("option %s must be a string" % name)
        self._description = description
        self._default_values_description = default_values_description

        if not isinstance(flags, int) or isinstance(flags, bool):
            raise TypeError("option flags must be Flags")
        self._flags = Flags(flags)

    long_names = mirror("long_names")
    short_names = mirror("short_names")
    parameters = mirror("parameters")
    delimiter = mirror("delimiter")
    if_found = mirror("if_found")
    if_not_found = mirror("if_not_found")
    config_key = mirror("config_key")
    description = mirror("description")
    default_values_description = mirror("default_values_description")
    flags = mirror("flags")

    @property
    def names(self):
        """
        All names, long ones first, in declaration order.
        """
        return self._long_names + self._short_names

    @property
    def primary_name(self):
        """
        The canonical name: the first long name (empty when none was declared).
        """
        return self._long_names[0] if self._long_names else ""

    @property
    def is_required(self):
        return Flags.REQUIRED in self._flags

    @property
    def is_switch(self):
        """
        Exactly one boolean slot: may be written bare as shorthand for =true.
        """
        return len(self._parameters) == 1 and isinstance(self._parameters[0], BooleanParameter)

    def matches(self, name, /):
        return name in self._long_names or name in self._short_names

    def __repr__(self):
        return "option-definition(%s)" % ", ".join("%s=%r" % pair for pair in self.__rich_repr__())

    def __rich_repr__(self):
        for name in type(self).__introspectable__:
            yield name, getattr(self, name)


def switch_option(names, config_key, description, flags=Flags.NONE, /, *, short_names=()):
    """
    Boolean switch, stored as "false" when absent and "true" when given bare.
    """
    return OptionDefinition(
        names,
        short_names,
        (boolean(),),
        ",",
        store_values(),
        store_constants("false"),
        config_key=config_key,
        description=description,
        flags=flags,
    )


def complement_switch_option(names, config_key, description, flags=Flags.NONE, /, *, short_names=()):
    """
    Inverse of an existing switch sharing its config key; therefore has *no*
    default. Use only with the matching switch_option also defined.
    """
    return OptionDefinition(
        names,
        short_names,
        (boolean(),),
        ",",
        store_inverse_bool(),
        do_nothing(),
        config_key=config_key,
        description=description,
        flags=flags,
    )


def valued_option(names, parameter, config_key, description, flags=Flags.NONE, /, *, short_names=()):
    return OptionDefinition(
        names,
        short_names,
        (parameter,),
        ",",
        store_values(),
        do_nothing(),
        config_key=config_key,
        description=description,
        flags=flags,
    )


def default_valued_option(names, parameter, default_value, config_key, description, flags=Flags.NONE, /, *, short_names=()):
    """
    Single-valued option whose default is written when it is absent and shown in help.
    """
    return OptionDefinition(
        names,
        short_names,
        (parameter,),
        ",",
        store_values(),
        store_constants(default_value),
        config_key=config_key,
        description=description,
        default_values_description=default_value,
        flags=flags,
    )


def multivalued_option(names, parameters, config_key, description, flags=Flags.NONE, /, *, short_names=(), delimiter=","):
    return OptionDefinition(
        names,
        short_names,
        parameters,
        delimiter,
        store_values(),
        do_nothing(),
        config_key=config_key,
        description=description,
        flags=flags,
    )


def default_multivalued_option(names, parameters, default_values, config_key, description, flags=Flags.NONE, /, *, short_names=(), delimiter=","):
    """
    Multi-valued option with defaults; default_values uses the option delimiter
    (for example "127.0.0.1,8080" for two slots).
    """
    return OptionDefinition(
        names,
        short_names,
        parameters,
        delimiter,
        store_values(),
        store_constants(default_values),
        config_key=config_key,
        description=description,
        default_values_description=default_values,
        flags=flags,
    )


__all__ = (
    "Flags",
    "REQUIRED",
    "OptionDefinition",
    "switch_option",
    "complement_switch_option",
    "valued_option",
    "default_valued_option",
    "multivalued_option",
    "default_multivalued_option",
)
