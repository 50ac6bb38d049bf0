"""
Text primitives used by the help renderer and the actions.

What this module provides
- TabExpander: replaces tabs with spaces up to the next tab stop, tracking the
  column and resetting it at every newline.
- WordWrapper: greedy, line-oriented word wrapping at a fixed column count.
- split(text, separator): field splitting that keeps empty fields.
- parse_bool(text): the boolean spellings understood by the destination tree.

Notes
- Wrapping does not expand tabs; expand first when the text may contain them.
- Column counts include the implicit newline, so a wrapper built for 80
  columns emits lines of at most 79 characters.
"""
from typing import final


@final
class TabExpander:
    """
    Expand tab characters to the next multiple of a fixed tab stop.

    Examples
    - TabExpander(2).expand("\\tname\\t") -> "  name  "
    - TabExpander(4).expand("ab\\tc")     -> "ab  c"
    """

    __slots__ = ("_tab_stop",)

    def __init__(self, tab_stop: int):
        if not isinstance(tab_stop, int) or isinstance(tab_stop, bool):
            raise TypeError("tab stop must be an integer")
        if tab_stop < 1:
            raise ValueError("tab stop must be a positive integer")
        self._tab_stop = tab_stop

    @property
    def tab_stop(self) -> int:
        return self._tab_stop

    def expand(self, text: str) -> str:
        expanded = []
        column = 0
        for char in text:
            if char == "\t":
                next_tab = (column + self._tab_stop) - (column + self._tab_stop) % self._tab_stop
                expanded.append(" " * (next_tab - column))
                column = next_tab
            else:
                expanded.append(char)
                column = 0 if char == "\n" else column + 1
        return "".join(expanded)


@final
class WordWrapper:
    """
    Greedy word wrapper.

    behavior
    - text is split on newlines first; each segment is wrapped on its own and
      the resulting lines are concatenated in order.
    - a line is cut when the next character would land on the last allowed
      column (columns - 1). the cut happens at the most recent whitespace of
      the current line or, when there is none, right there (hard break).
    - whitespace around each cut is discarded; an input segment's own leading
      blanks on its first line are kept.
    - columns below 2 are clamped to 2.
    """

    __slots__ = ("_columns",)

    def __init__(self, columns: int):
        if not isinstance(columns, int) or isinstance(columns, bool):
            raise TypeError("column count must be an integer")
        self._columns = max(columns, 2)

    @property
    def columns(self) -> int:
        return self._columns

    def wrap_words(self, text: str) -> list[str]:
        lines = []
        for segment in split(text, "\n"):
            self._wrap_line(lines, segment)
        return lines

    def _wrap_line(self, out, text):
        # one column is reserved for the implicit newline
        max_column = self._columns - 1
        line_start = 0
        column = 0
        last_space = None
        index = 0
        while index < len(text):
            if text[index].isspace():
                last_space = index

            if column == max_column:
                if last_space is None:
                    line_end = index
                else:
                    line_end = _skip_trailing_whitespace(text, last_space)
                out.append(text[line_start:max(line_end, line_start)])

                line_start = _skip_leading_whitespace(text, line_end)
                index = line_start
                column = 0
                last_space = None
            else:
                column += 1
                index += 1
        out.append(text[line_start:])


def _skip_trailing_whitespace(text, end):
    while end > 0 and text[end - 1].isspace():
        end -= 1
    return end


def _skip_leading_whitespace(text, start):
    while start < len(text) and text[start].isspace():
        start += 1
    return start


def split(text: str, separator: str) -> list[str]:
    """
    Split text on a single-character separator, keeping empty fields.

    An empty text yields a single empty field, so "a,,b" gives three fields
    and "" gives one.
    """
    if not isinstance(separator, str) or len(separator) != 1:
        raise ValueError("separator must be a single character")
    return text.split(separator)


_TRUTHY = frozenset(("true", "on", "yes", "1"))
_FALSY = frozenset(("false", "off", "no", "0"))


def parse_bool(text: str) -> bool:
    """
    Interpret a boolean spelling (case-insensitive).

    accepted
    - true, on, yes, 1  → True
    - false, off, no, 0 → False

    raises
    - ValueError for anything else; callers validate with BooleanParameter first.
    """
    lowered = text.strip().lower()
    if lowered in _TRUTHY:
        return True
    if lowered in _FALSY:
        return False
    raise ValueError("invalid boolean literal %r" % text)


BOOLEAN_LITERALS = _TRUTHY | _FALSY


__all__ = (
    "TabExpander",
    "WordWrapper",
    "split",
    "parse_bool",
    "BOOLEAN_LITERALS",
)
