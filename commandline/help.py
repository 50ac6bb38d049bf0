"""
Usage/help text for an option table.

Layout (fixed 80 display columns, tab stop 2)
    Usage: prog --required=<value> [options]

    Options:
      --required=<value>  Description, word-wrapped into the right-hand column
                          on as many lines as needed. [Default: 1]
      --switch            A switch is shown without a parameter list.
        --alias           Secondary long names and short names are indented.

Rules
- the usage synopsis lists the program name, then the full syntax of every
  required option, then "[options]" when at least one option is optional. It
  is wrapped with continuation lines aligned under the first.
- the description column starts right after the widest syntax label, unless
  that would leave fewer than DESCRIPTION_MIN_COLUMNS for descriptions; then
  it starts at DISPLAY_COLUMNS - DESCRIPTION_MIN_COLUMNS and wider labels push
  their description onto the next line.
- a declared default description is appended as "[Default: …]" to the last
  description line when it fits, otherwise on a line of its own.

render_help() is pure and returns the text; show_help() validates the table
and prints it through a rich console.
"""
from pathlib import Path

from rich.console import Console

from .formatting import TabExpander, WordWrapper
from .utils import *
from .validation import validate_definitions

DISPLAY_COLUMNS = 80  # including newline
TAB_STOP = 2
DESCRIPTION_MIN_COLUMNS = DISPLAY_COLUMNS - 36
USAGE_LABEL = "Usage: "


def program_name(argv, /):
    """
    File stem of argv[0] ("/usr/bin/server.py" -> "server"), "" when argv is empty.
    """
    return Path(argv[0]).stem if argv else ""


def syntax_description(name, option, /):
    """
    "--name=<slot1>,<slot2>" (lower-cased slot names), or the bare name for
    options without parameters.
    """
    if not option.parameters:
        return name
    return "%s=%s" % (name, ",".join("<%s>" % parameter.name.lower() for parameter in option.parameters))


def _build_name_to_syntax(options, expander):
    syntax = {}
    for option in options:
        # complete syntax only for the primary name
        primary = option.primary_name
        if option.is_switch:
            syntax[primary] = expander.expand("\t" + primary + "\t")
        else:
            syntax[primary] = expander.expand("\t" + syntax_description(primary, option) + "\t")

        # every other name is indented and omits the parameters
        for name in option.long_names[1:] + option.short_names:
            syntax[name] = expander.expand("\t\t" + name + "\t")
    return syntax


def _usage(options, program, name_to_syntax):
    parts = [program]
    required = [option.primary_name for option in options if option.is_required]
    parts.extend(name_to_syntax[name].strip() for name in required)
    if len(required) < len(options):
        parts.append("[options]")

    column = len(USAGE_LABEL)
    lines = WordWrapper(DISPLAY_COLUMNS - column).wrap_words(" ".join(parts))

    # there is always a first line
    rows = [USAGE_LABEL + lines[0]]
    rows.extend(" " * column + line for line in lines[1:])
    return rows


def _description_lines(option, wrapper):
    lines = wrapper.wrap_words(option.description)
    if not option.default_values_description:
        return lines

    defaults = "[Default: %s]" % option.default_values_description
    last = lines[-1]
    if not last:
        lines[-1] = defaults
    elif len(last) + 1 + len(defaults) + 1 >= wrapper.columns:
        # too long, needs its own line
        lines.append(defaults)
    else:
        lines[-1] = last + " " + defaults
    return lines


def render_help(options, program, /):
    """
    Render usage and option descriptions; returns the text with a trailing newline.

    The table is not validated here (see show_help); it is assumed to be
    well formed.
    """
    options = tuple(options)
    name_to_syntax = _build_name_to_syntax(options, TabExpander(TAB_STOP))
    widest = max(map(len, name_to_syntax.values()), default=0)

    rows = _usage(options, program, name_to_syntax)
    if not options:
        return "\n".join(rows) + "\n"

    rows += ["", "Options:"]

    columns_available = max(DISPLAY_COLUMNS - widest, 0)
    if columns_available < DESCRIPTION_MIN_COLUMNS:
        start = DISPLAY_COLUMNS - DESCRIPTION_MIN_COLUMNS
    else:
        start = widest
    wrapper = WordWrapper(DISPLAY_COLUMNS - start)

    for option in options:
        descriptions = _description_lines(option, wrapper)
        names = option.names
        for index in range(max(len(descriptions), len(names))):
            row = name_to_syntax[names[index]] if index < len(names) else ""
            if index < len(descriptions) and descriptions[index]:
                if len(row) > start:
                    # label too wide: description starts on the next line
                    rows.append(row.rstrip())
                    row = ""
                row = row.ljust(start) + descriptions[index]
            rows.append(row.rstrip())

    return "\n".join(rows) + "\n"


def show_help(options, argv, /, *, console=Unset):
    """
    Validate the table, then print its help text for program_name(argv).

    parameters
    - console: rich Console to print to (stdout by default). Markup, emoji and
      highlighting are off so the layout is written byte for byte.
    """
    options = tuple(options)
    validate_definitions(options)
    if console is Unset:
        console = Console()
    console.out(render_help(options, program_name(argv)), end="", highlight=False)


__all__ = (
    "DISPLAY_COLUMNS",
    "TAB_STOP",
    "DESCRIPTION_MIN_COLUMNS",
    "program_name",
    "syntax_description",
    "render_help",
    "show_help",
)
