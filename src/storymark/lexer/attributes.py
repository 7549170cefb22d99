"""Attribute sub-parsers for the ``<Story ... />`` directive.

Only two attribute shapes are understood:

- a quoted value attribute: ``of="path"`` or ``of = 'path'``
- a bare boolean flag: ``controls``

Both work on a ``[start, end)`` window of the source (the tag content
between ``<Story`` and ``/>``) so nothing is copied.

Known limitations:
    An ``of=`` that appears inside another attribute's value after a space
    is taken as the target (``<Story title="x of="a/b" />``). The flag search
    is a plain word search, so ``<Story of="who controls this" />`` enables
    the flag.

"""

from __future__ import annotations

_QUOTES = "\"'"


def parse_value_attribute(
    source: str, pos: int, end: int, name: str
) -> tuple[int, int] | None:
    """Parse ``name = "value"`` starting exactly at ``pos``.

    Whitespace is allowed around ``=``. The value runs to the next quote of
    the same kind; it may not extend past ``end``.

    Args:
        source: Source text
        pos: Position where the attribute name is expected
        end: End of the tag content window (exclusive)
        name: Attribute name

    Returns:
        (value_offset, value_length) or None if the text at pos is not a
        complete attribute.
    """
    if not source.startswith(name, pos, end):
        return None

    cursor = pos + len(name)
    while cursor < end and source[cursor].isspace():
        cursor += 1
    if cursor >= end or source[cursor] != "=":
        return None

    cursor += 1
    while cursor < end and source[cursor].isspace():
        cursor += 1
    if cursor >= end or source[cursor] not in _QUOTES:
        return None

    quote = source[cursor]
    value_start = cursor + 1
    close = source.find(quote, value_start, end)
    if close == -1:
        return None
    return value_start, close - value_start


def find_target_attribute(
    source: str, start: int, end: int, name: str = "of"
) -> tuple[int, int] | None:
    """Find the value of attribute ``name`` inside the tag content.

    Candidates are occurrences of ``name`` at the start of the content or
    right after whitespace. The first candidate that parses wins.

    Returns:
        (value_offset, value_length) or None when no candidate parses.
    """
    idx = source.find(name, start, end)
    while idx != -1:
        if idx == start or source[idx - 1].isspace():
            found = parse_value_attribute(source, idx, end, name)
            if found is not None:
                return found
        idx = source.find(name, idx + 1, end)
    return None


def has_flag_attribute(source: str, start: int, end: int, name: str = "controls") -> bool:
    """Check for a bare boolean attribute inside the tag content.

    The word must be delimited on both sides by whitespace or by the
    content boundaries, so ``controlscontrols`` does not count.
    """
    size = len(name)
    idx = source.find(name, start, end)
    while idx != -1:
        after = idx + size
        before_ok = idx == start or source[idx - 1].isspace()
        after_ok = after == end or source[after].isspace()
        if before_ok and after_ok:
            return True
        idx = source.find(name, idx + 1, end)
    return False
