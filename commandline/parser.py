"""
Command-line parsing against a declared option table.

What this module provides
- parse_command_line(options, argv): parse into a fresh Node("CommandLine")
  (or a caller-supplied tree) and return a ParserResult.
- parse_into(config, options, argv): parse into the given tree and return only
  the ParserState.

Algorithm
1. validate the table (declaration bugs raise DefinitionExit, see
   commandline.validation).
2. an empty invocation (program name only) against a table with a required
   option is a usage request: help is shown and the state is exit+error.
3. every option's if_not_found action runs first, so each destination key
   holds its default before any argument is read.
4. each argument is split on its first '=' into a name and a value text; the
   presence of '=' is remembered, so "--opt=" differs from "--opt".
   • unknown names are reported and skipped.
   • a bare switch means "=true" and skips parameter validation.
   • otherwise the value list is checked (count, then every slot); any fault
     suppresses the option's if_found action, leaving the default in place.
   • on success if_found runs and the option is recorded as seen.
5. when the help key is set in the tree, help is shown and required options
   are not checked; otherwise every required option must have been seen.
6. exit = parse error or help requested.

Faults
- user-input faults never stop the pass: they are printed to the fault console
  as they happen (shell mode) and returned in ParserState.faults.
- the engine never terminates the process; the caller decides what to do
  with exit/parse_error.
"""
import difflib
from typing import NamedTuple

from .config import Node
from .faults import *
from .formatting import split
from .help import program_name, show_help
from .utils import *
from .validation import validate_definitions


class ParserState(NamedTuple):
    exit: bool = False
    parse_error: bool = False
    faults: tuple = ()


class ParserResult(NamedTuple):
    config: Node
    state: ParserState


def _syntax(name, option):
    # like the help syntax, but joined with the option's own delimiter
    if option.is_switch:
        return "%s=true" % name
    if not option.parameters:
        return name
    return "%s=%s" % (name, option.delimiter.join("<%s>" % parameter.name.lower() for parameter in option.parameters))


def _value_list(option, values):
    # only a non-empty value text yields entries; single-slot values are never split
    if not values:
        return []
    if len(option.parameters) == 1:
        return [values]
    if len(option.parameters) > 1:
        return split(values, option.delimiter)
    return []


def _validate_parameters(option, name, value_list, position):
    expected = len(option.parameters)
    if expected != len(value_list):
        if expected == 1:
            return [MissingParameterError(
                "%r expects a parameter but none was given" % name,
                title="missing parameter",
                code=FaultCode.MISSING_PARAMETER,
                hint="add a value after '=' (for example: %s)" % _syntax(name, option),
                option=name,
                position=position,
            )]
        given = len(value_list)
        return [ParameterCountError(
            "%r expects %d parameters but %d %s given" % (name, expected, given, "was" if given == 1 else "were"),
            title="wrong number of parameters",
            code=FaultCode.PARAMETER_COUNT,
            hint="separate the values with %r (for example: %s)" % (option.delimiter, _syntax(name, option)),
            option=name,
            position=position,
            expected=expected,
            given=given,
        )]

    faults = []
    for index, (parameter, value) in enumerate(zip(option.parameters, value_list), start=1):
        if (fault := parameter.validate(name, value, index)) is not None:
            faults.append(fault)
    return faults


def parse_into(config, options, argv, /, *, help_key="ShowHelp", console=Unset):
    """
    Parse argv (argv[0] is the program) into `config` and return the ParserState.

    parameters
    - config: destination tree (see commandline.config for the protocol).
    - options: the option table; validated before anything else.
    - argv: the full argument vector, program name first.
    - help_key: tree key whose boolean value means "help was requested".
    - console: rich Console for help output (stdout by default).

    raises
    - DefinitionExit when the option table itself is ill-specified.
    """
    options = tuple(options)
    argv = tuple(argv)
    validate_definitions(options)

    if len(argv) <= 1 and any(option.is_required for option in options):
        show_help(options, argv, console=console)
        return ParserState(True, True)  # required options are missing

    for option in options:
        option.if_not_found.perform(config, option, "", [])

    prog = program_name(argv)
    faults = []

    def report(fault):
        faults.append(fault)
        trigger(fault, shell=True, prog=prog)

    seen = set()
    for position, argument in enumerate(argv[1:], start=1):
        name, separator, values = argument.partition("=")

        for index, option in enumerate(options):
            if option.matches(name):
                break
        else:
            suggestions = difflib.get_close_matches(name, [n for option in options for n in option.names], 3)
            report(UnknownOptionError(
                "invalid option: %s" % name,
                title="unknown option",
                code=FaultCode.UNKNOWN_OPTION,
                hint="did you mean %r? run '%s --help' to see all options" % (suggestions[0], prog)
                if suggestions else "run '%s --help' to see all options" % prog,
                option=name,
                position=position,
                suggestions=tuple(suggestions),
            ))
            continue

        value_list = _value_list(option, values)

        if not separator and option.is_switch:
            # "--switch" is "--switch=true"; validation would flag the missing value
            values = "true"
            value_list = ["true"]
        else:
            failures = _validate_parameters(option, name, value_list, position)
            for fault in failures:
                report(fault)
            if failures:
                continue

        option.if_found.perform(config, option, values, value_list)
        seen.add(index)

    help_requested = config[help_key].value_as_default(False)
    if help_requested:
        # omitting required options is not an error when help was asked for
        show_help(options, argv, console=console)
    else:
        for index, option in enumerate(options):
            if option.is_required and index not in seen:
                report(MissingRequiredOptionError(
                    "missing required option: %s" % option.primary_name,
                    title="missing required option",
                    code=FaultCode.MISSING_REQUIRED_OPTION,
                    hint="add %s to the command line" % _syntax(option.primary_name, option),
                    option=option.primary_name,
                ))

    parse_error = bool(faults)
    return ParserState(parse_error or help_requested, parse_error, tuple(faults))


def parse_command_line(options, argv, /, *, config=Unset, help_key="ShowHelp", console=Unset):
    """
    Parse argv into a configuration tree and return ParserResult(config, state).

    A fresh Node("CommandLine") is created unless `config` is given. The
    result is a new value on every call.
    """
    if config is Unset:
        config = Node("CommandLine")
    state = parse_into(config, options, argv, help_key=help_key, console=console)
    return ParserResult(config, state)


__all__ = (
    "ParserState",
    "ParserResult",
    "parse_into",
    "parse_command_line",
)
