r"""
commandline parameter slots and their validators.

Overview
- Parameter: one positional value within an option's value list. It carries a
  display name (used for the help syntax and for the child nodes written into
  the destination tree) and a validation predicate.
- StringParameter: any text is accepted.
- BooleanParameter: true/false/yes/no/on/off/1/0, case-insensitively.
- IntegerParameter: a strict decimal integer fitting a signed 64-bit range,
  optionally bounded by an inclusive [lower, upper] range.

Validation contract
- validate(option_name, value, index) returns None when the value passes, or a
  CommandException describing the problem. The index is the 1-based position
  of the slot within the option's value list. Nothing is printed here; the
  parser decides how faults are surfaced.

Emitters
- string(name="value"), boolean(name="value")
- integer(), integer(name), integer(lower, upper), integer(name, lower, upper)

Quick example:
    >>> from commandline.parameters import integer, string
    >>> slots = (integer("percent", 0, 100), string("direction"))
    >>> slots[0].validate("--range", "42", 1) is None
    True
"""
import re

from .faults import *
from .formatting import BOOLEAN_LITERALS
from .utils import *

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1


class Parameter:
    """
    Base parameter slot: accepts any value.

    Subclasses override validate(); the base behavior is the string slot's.
    """

    __slots__ = ("_name",)

    def __init__(self, name="value", /):
        if not isinstance(name, str):
            raise TypeError("parameter name must be a string")
        elif not (name := name.strip()):
            raise ValueError("parameter name cannot be empty")
        self._name = name

    name = mirror("name")

    def validate(self, option_name, value, index, /):
        return None

    def __repr__(self):
        return "%s(%r)" % (type(self).__name__, self._name)

    def __rich_repr__(self):
        yield "name", self._name


class StringParameter(Parameter):
    __slots__ = ()


class BooleanParameter(Parameter):
    __slots__ = ()

    def validate(self, option_name, value, index, /):
        # spellings compatible with the destination tree's boolean reader
        if value.lower() in BOOLEAN_LITERALS:
            return None
        return InvalidBooleanError(
            "argument %d to %r must be a boolean value ('true' or 'false')" % (index, option_name),
            title="invalid boolean value",
            code=FaultCode.INVALID_BOOLEAN,
            hint="use one of true/false, yes/no, on/off or 1/0 (for example: %s=true)" % option_name,
            option=option_name,
            index=index,
            value=value,
        )


class IntegerParameter(Parameter):
    """
    Signed 64-bit integer slot with optional inclusive bounds.

    Bounds given in the wrong order are swapped at construction. A value that
    is not an integer at all is reported as such even when bounds exist; only
    a well-formed integer can be out of range.
    """

    __slots__ = ("_lower", "_upper")

    def __init__(self, name="value", /, lower=Unset, upper=Unset):
        super().__init__(name)
        if (lower is Unset) != (upper is Unset):
            raise TypeError("integer bounds must be given together")
        for bound in (lower, upper):
            if not isinstance(bound, int | Unset) or isinstance(bound, bool):
                raise TypeError("integer bounds must be integers")
        if lower is not Unset and lower > upper:
            lower, upper = upper, lower
        self._lower = lower
        self._upper = upper

    @property
    def bounded(self):
        return self._lower is not Unset

    @property
    def lower(self):
        return coalesce(self._lower, INT64_MIN)

    @property
    def upper(self):
        return coalesce(self._upper, INT64_MAX)

    def validate(self, option_name, value, index, /):
        number = None
        if re.fullmatch(r"[+-]?[0-9]+", value):
            number = int(value)
            if not INT64_MIN <= number <= INT64_MAX:
                number = None

        if number is None:
            return InvalidIntegerError(
                "argument %d to %r must be an integer" % (index, option_name),
                title="invalid integer value",
                code=FaultCode.INVALID_INTEGER,
                hint="pass a whole decimal number (for example: %s=%d)" % (option_name, self.lower if self.bounded else 0),
                option=option_name,
                index=index,
                value=value,
            )

        if self.bounded and not self.lower <= number <= self.upper:
            return IntegerRangeError(
                "argument %d to %r must be an integer within range [%d,%d]" % (index, option_name, self.lower, self.upper),
                title="integer out of range",
                code=FaultCode.INTEGER_OUT_OF_RANGE,
                hint="pick a value between %d and %d, both included" % (self.lower, self.upper),
                option=option_name,
                index=index,
                value=value,
            )

        return None

    def __repr__(self):
        if not self.bounded:
            return super().__repr__()
        return "%s(%r, %d, %d)" % (type(self).__name__, self._name, self._lower, self._upper)

    def __rich_repr__(self):
        yield "name", self._name
        if self.bounded:
            yield "lower", self._lower
            yield "upper", self._upper


def string(name="value", /):
    """
    Emit a slot that accepts any text.
    """
    return StringParameter(name)


def boolean(name="value", /):
    """
    Emit a boolean slot. An option whose only slot is boolean is a switch.
    """
    return BooleanParameter(name)


def integer(*parameters):
    """
    Emit an integer slot.

    Forms
    - integer()                     -> unbounded slot named "value"
    - integer(name)                 -> unbounded slot
    - integer(lower, upper)         -> bounded slot named "value"
    - integer(name, lower, upper)   -> bounded slot
    """
    match parameters:
        case ():
            return IntegerParameter()
        case (str() as name,):
            return IntegerParameter(name)
        case (int() as lower, int() as upper):
            return IntegerParameter("value", lower, upper)
        case (str() as name, int() as lower, int() as upper):
            return IntegerParameter(name, lower, upper)
        case _:
            raise TypeError("integer() takes (), (name), (lower, upper) or (name, lower, upper)")


__all__ = (
    "Parameter",
    "StringParameter",
    "BooleanParameter",
    "IntegerParameter",
    "string",
    "boolean",
    "integer",
    "INT64_MIN",
    "INT64_MAX",
)
