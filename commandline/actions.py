"""
Actions: what happens to the destination tree when an option is found or absent.

Every option definition carries two actions, picked when it is declared:
- if_found: run with the raw value text and the split value list once the
  option was matched and its parameters validated.
- if_not_found: run up front for every option, before any argument is read,
  with an empty text and an empty list. This seeds each destination key with
  its default (or leaves it alone), so found/absent are symmetric writes.

The set of behaviors is closed:
- StoreValues: raw text at the key, one child per parameter slot.
- StoreConstants: a fixed text split by the option delimiter, then StoreValues.
- StoreInverseBool: the logical negation of a single boolean, then StoreValues.
- DoNothing: absence needs no default.

Tree protocol used here
- config.set(key, value), config.get(key) (get-or-create),
  node.remove_children(), node.add(name, value).
"""
from typing import final

from .faults import *
from .formatting import parse_bool, split
from .utils import mirror


class Action:
    """
    Base of the closed set of action strategies. Stateless unless noted.
    """

    __slots__ = ()

    def perform(self, config, option, values, value_list, /):
        raise NotImplementedError

    def __repr__(self):
        return "%s()" % type(self).__name__

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return all(getattr(self, name) == getattr(other, name) for name in self.__slots__)

    def __hash__(self):
        return hash((type(self), *(getattr(self, name) for name in self.__slots__)))


@final
class StoreValues(Action):
    __slots__ = ()

    def perform(self, config, option, values, value_list, /):
        # top-level node holds the value as-is, unparsed
        config.set(option.config_key, values)

        # drop children left by the default so they are not duplicated
        node = config.get(option.config_key)
        node.remove_children()

        if len(value_list) == len(option.parameters):
            for parameter, value in zip(option.parameters, value_list):
                node.add(parameter.name, value)


@final
class StoreConstants(Action):
    """
    Store a fixed text, typically the default of an absent option.
    """

    __slots__ = ("_constants",)

    def __init__(self, constants, /):
        if not isinstance(constants, str):
            raise TypeError("constant values must be a string")
        self._constants = constants

    constants = mirror("constants")

    def perform(self, config, option, values, value_list, /):
        STORE_VALUES.perform(config, option, self.constants, split(self.constants, option.delimiter))

    def __repr__(self):
        return "%s(%r)" % (type(self).__name__, self.constants)


@final
class StoreInverseBool(Action):
    """
    Store the negation of the given boolean (complement options).
    """

    __slots__ = ()

    def perform(self, config, option, values, value_list, /):
        if len(option.parameters) > 1 or len(value_list) > 1:
            raise InverseActionError(
                "inverse boolean action on %r, which takes %d parameters" % (option.primary_name, len(option.parameters)),
                title="inverse action on a multi-valued option",
                code=FaultCode.INVERSE_ACTION,
                hint="complement options must take exactly one boolean parameter",
                option=option.primary_name,
            )
        inverted = "false" if parse_bool(values) else "true"
        STORE_VALUES.perform(config, option, inverted, [inverted])


@final
class DoNothing(Action):
    __slots__ = ()

    def perform(self, config, option, values, value_list, /):
        return None


STORE_VALUES = StoreValues()


def store_values():
    return STORE_VALUES


def store_constants(values, /):
    return StoreConstants(values)


def store_inverse_bool():
    return StoreInverseBool()


def do_nothing():
    return DoNothing()


__all__ = (
    "Action",
    "StoreValues",
    "StoreConstants",
    "StoreInverseBool",
    "DoNothing",
    "store_values",
    "store_constants",
    "store_inverse_bool",
    "do_nothing",
)
