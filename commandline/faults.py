"""
commandline faults (user-input errors, declaration errors) and rendering.

Scope
- FaultCode: canonical, stable numeric identifiers for every reported issue.
  Codes are grouped by domain to keep copy consistent and make logs/searches
  predictable.
- CommandException: base type for recoverable user-input faults (unknown
  option, bad parameter, missing required option). They carry message +
  options and know how to render themselves.
- DeclarationError / DefinitionExit: programming mistakes in an option table.
  They abort startup; they are never reported as ordinary parse failures.
- trigger(): central entry point to surface any fault.

UX goals
- Option-first messages: every message names the offending option and, for
  parameter problems, the 1-based argument index.
- Soft but technical language: short titles, one-sentence bodies, a single clear hint.
- Lowercased tone with readable styling (configurable via __styles__ in __main__).

Integration
- The parser collects user faults while it runs and calls trigger(fault, shell=True)
  for each one: in shell mode they are printed to the stderr console and parsing
  goes on. Outside shell mode they are raised.
- The definition validator raises a DefinitionExit carrying every violation,
  after printing them.
"""
import copy
from collections import defaultdict
from enum import IntEnum
from types import MappingProxyType

from rich.console import Console, Group
from rich.text import Text

from .utils import Unset

console = Console(stderr=True)


class FaultCode(IntEnum):
    """
    canonical fault codes (stable identifiers).

    grouping (by high-level domain)
    - options (1111x/1112x)
      • UNKNOWN_OPTION, MISSING_PARAMETER, PARAMETER_COUNT,
        MISSING_REQUIRED_OPTION
    - parameters (1113x)
      • INVALID_BOOLEAN, INVALID_INTEGER, INTEGER_OUT_OF_RANGE
    - declarations (131xx)
      • DUPLICATE_NAME, MISSING_LONG_NAME, FORBIDDEN_CHARACTER, INVERSE_ACTION

    spacing leaves room for future additions without reshuffling existing codes.
    """
    # --- option errors (11xxx) ---
    UNKNOWN_OPTION              = 11112
    MISSING_PARAMETER           = 11117
    PARAMETER_COUNT             = 11122
    MISSING_REQUIRED_OPTION     = 11125

    # --- parameter errors (11xxx) ---
    INVALID_BOOLEAN             = 11131
    INVALID_INTEGER             = 11132
    INTEGER_OUT_OF_RANGE        = 11133

    # --- declaration errors (13xxx) ---
    DUPLICATE_NAME              = 13101
    MISSING_LONG_NAME           = 13102
    FORBIDDEN_CHARACTER         = 13103
    INVERSE_ACTION              = 13104

    def normalize(self):
        """
        return a host-normalized string for this code.

        the host application can provide a __codes__ mapping in __main__
        to override numeric ids with friendlier labels. when no mapping
        is present, the numeric value is returned as a string.
        """
        return str(getattr(__import__("__main__"), "__codes__", {}).get(self, self.value))


def _render(fault, palette, /):
    """
    Shared rich rendering: "[ prog — code | title ]", the message, then a hint line.

    Styling is only applied when the fault carries colorful=True; the palette can
    be overridden per key through a __styles__ mapping in __main__.
    """
    main = __import__("__main__")
    styles = defaultdict(str, palette | getattr(main, "__styles__", {}))
    colorful = fault.options.get("colorful", False)

    def text(fragment, style=""):
        if not fragment:
            return Text("")
        if not colorful:
            return Text(str(fragment))
        return Text(str(fragment), styles[style])

    prog = text(getattr(main, "__prog__", fault.options.get("prog", "commandline")), "prog-name")
    parts = ["[ ", prog]
    if code := fault.options.get("code"):
        parts += [" — ", text(code.normalize(), "code")]
    if title := fault.options.get("title"):
        parts += [" | ", text(title.title(), "title")]
    parts.append(" ]")

    renders = [Text.assemble(*parts), text(fault.message, "message")]
    if hint := fault.options.get("hint"):
        renders.append(Text.assemble(text(" → ", "hint-arrow"), text(hint, "hint")))
    return Group(*renders)


class CommandException(Exception):
    """
    recoverable user-input fault.

    options (all optional)
    - code: FaultCode, title: str, hint: str
    - option: the offending option name as typed, index: 1-based argument index
    - prog: program name shown in the header, colorful: bool
    - shell: when True, trigger() prints instead of raising
    """

    def __init__(self, message=Unset, /, **options):
        assert isinstance(message, str | Unset)
        super().__init__(message)
        self.message = message
        self.options = MappingProxyType(options)

    @property
    def code(self):
        return self.options.get("code")

    def __rich__(self):
        return _render(self, {
            "prog-name": "bold #E6E6F0",  # near-white program name
            "code": "bold #00E5FF",  # neon cyan fault code
            "title": "bold #FF4DA6",  # friendly pinky title
            "message": "#C8C8D0",  # soft light gray message
            "hint-arrow": "#9CE19C dim",  # gentle green arrow
            "hint": "italic #9CE19C",  # gentle green hint text
        })

    def __trigger__(self) -> None:
        if not self.options.get("shell"):
            raise self from None
        console.print(self)

    def __replace__(self, *unused, **overrides):
        assert not unused, "unused arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})


class UnknownOptionError(CommandException): ...
class MissingParameterError(CommandException): ...
class ParameterCountError(CommandException): ...
class MissingRequiredOptionError(CommandException): ...
class InvalidBooleanError(CommandException): ...
class InvalidIntegerError(CommandException): ...
class IntegerRangeError(CommandException): ...


class DeclarationError(Exception):
    """
    programming mistake in an option table (never caused by user input).

    these are fatal: the program must not go on to parse arguments. the only
    fix is to correct the declarations.
    """

    def __init__(self, message=Unset, /, **options):
        assert isinstance(message, str | Unset)
        super().__init__(message)
        self.message = message
        self.options = MappingProxyType(options)

    @property
    def code(self):
        return self.options.get("code")

    def __rich__(self):
        return _render(self, {
            "prog-name": "bold #E6E6F0",
            "code": "bold #FFB400",  # amber code: this one is on the developer
            "title": "bold #FF4DA6",
            "message": "#C8C8D0",
            "hint-arrow": "#B8EFAF dim",
            "hint": "italic #B8EFAF",
        })

    def __trigger__(self) -> None:
        if self.options.get("shell"):
            console.print(self)
        raise self from None

    def __replace__(self, *unused, **overrides):
        assert not unused, "unused arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})


class DuplicateNameError(DeclarationError): ...
class MissingLongNameError(DeclarationError): ...
class ForbiddenCharacterError(DeclarationError): ...
class InverseActionError(DeclarationError): ...


class DefinitionExit(ExceptionGroup[DeclarationError]):
    """
    every violation found in one option table, raised together.
    """

    def __new__(cls, exceptions, **options):
        return super().__new__(cls, "ill-specified command line options", tuple(exceptions))

    def __init__(self, exceptions, **options):
        super().__init__("ill-specified command line options", tuple(exceptions))
        self.options = MappingProxyType(options)

    def __rich__(self):
        colorful = self.options.get("colorful", False)
        header = Text(
            "[ ill-specified command line options — unable to parse, fix the declarations ]",
            "bold #FF4DA6" if colorful else "",
        )
        renders = [copy.replace(exception, colorful=colorful) for exception in self.exceptions]
        return Group(header, *renders)

    def __trigger__(self) -> None:
        if self.options.get("shell"):
            console.print(self)
        raise self from None

    def __replace__(self, *unused, **overrides):
        assert not unused, "positional arguments are not allowed"
        return type(self)(self.exceptions, **{**self.options, **overrides})


def trigger(fault, /, **options):
    """
    surface a fault with the given runtime options.

    contract
    - fault must provide __trigger__ and __replace__ methods (see base classes).
    - options are merged into the fault via __replace__(**options) before triggering.
    - CommandException: printed in shell mode, raised otherwise.
    - DeclarationError / DefinitionExit: printed in shell mode, always raised.
    """
    if (
        not hasattr(fault, "__trigger__") or
        not callable(fault.__trigger__) or
        not hasattr(fault, "__replace__") or
        not callable(fault.__replace__)
    ):
        raise TypeError("trigger() argument must have a __trigger__ and __replace__ methods")
    copy.replace(fault, **options).__trigger__()


__all__ = (
    "FaultCode",
    "CommandException",
    "UnknownOptionError",
    "MissingParameterError",
    "ParameterCountError",
    "MissingRequiredOptionError",
    "InvalidBooleanError",
    "InvalidIntegerError",
    "IntegerRangeError",
    "DeclarationError",
    "DuplicateNameError",
    "MissingLongNameError",
    "ForbiddenCharacterError",
    "InverseActionError",
    "DefinitionExit",
    "trigger",
)
