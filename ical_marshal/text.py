"""Library for escaping and splitting rfc5545 property values.

Property values reserve the backslash, comma and semi-colon characters. A
comma separates the values of a list (e.g. CATEGORIES) and a semi-colon
separates the fields of a structured value (e.g. REQUEST-STATUS). When one
of these characters appears literally in a value it is escaped with a
backslash.

For example, the structured value:

  2.0;Success\\, sort of;data

Is parsed with `parse_component` into:

  [["2.0"], ["Success, sort of"], ["data"]]

Newlines are not escaped here; that is done by the writer of the content
line, but an escaped newline is decoded by `unescape`.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence

from .const import (
    COMPONENT_DELIMITER,
    ESCAPE,
    ESCAPED_CHARS,
    LIST_DELIMITER,
    NEWLINE,
)

__all__ = [
    "escape",
    "unescape",
    "split_by",
    "parse_list",
    "parse_component",
    "write_list",
    "write_component",
]

_NEWLINE_CHARS = ("n", "N")


def escape(text: str) -> str:
    """Escape all special characters within a property value."""
    for char in ESCAPED_CHARS:
        text = text.replace(char, ESCAPE + char)
    return text


def unescape(text: str, newline: str = NEWLINE) -> str:
    """Unescape all characters escaped with a backslash, including newlines.

    A backslash followed by any character other than "n" or "N" decodes to
    that character. A trailing backslash is dropped.
    """
    result: list[str] = []
    escaped = False
    for char in text:
        if escaped:
            result.append(newline if char in _NEWLINE_CHARS else char)
            escaped = False
        elif char == ESCAPE:
            escaped = True
        else:
            result.append(char)
    return "".join(result)


def _split_pattern(delimiter: str) -> re.Pattern[str]:
    return re.compile(r"\s*(?<!\\)" + re.escape(delimiter) + r"\s*")


def split_by(
    text: str,
    delimiter: str,
    remove_empties: bool = False,
    unescape_each: bool = False,
) -> list[str]:
    """Split a value by a character, honoring escaped delimiters.

    Whitespace around each delimiter is removed. For example:

      split_by("HE\\:LLO::WORLD", ":", False, True)

    Returns:

      ["HE:LLO", "", "WORLD"]
    """
    result = []
    for item in _split_pattern(delimiter).split(text.strip()):
        if remove_empties and not item:
            continue
        if unescape_each:
            item = unescape(item)
        result.append(item)
    return result


def parse_list(text: str) -> list[str]:
    """Parse a comma separated list of values (e.g. "one,two,th\\,ree")."""
    return split_by(text, LIST_DELIMITER, remove_empties=True, unescape_each=True)


def parse_component(text: str) -> list[list[str]]:
    """Parse a structured value (e.g. "one;two,three;four")."""
    return [
        parse_list(field)
        for field in split_by(
            text, COMPONENT_DELIMITER, remove_empties=False, unescape_each=False
        )
    ]


def write_list(values: Iterable[str]) -> str:
    """Escape and join a list of values."""
    return LIST_DELIMITER.join(escape(value) for value in values)


def write_component(fields: Iterable[Sequence[str] | str | None]) -> str:
    """Escape and join the fields of a structured value.

    A field may be a single string, a list of values, or None for an
    empty field.
    """
    result = []
    for field in fields:
        if field is None:
            result.append("")
        elif isinstance(field, str):
            result.append(escape(field))
        else:
            result.append(write_list(field))
    return COMPONENT_DELIMITER.join(result)
