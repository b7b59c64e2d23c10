"""Marker tag scanning.

Tag format::

    <x:ID?trueString|falseString>

``ID`` is one or more digits. Both branches are optional and may not span
a line break. Inside the true-branch ``|`` and ``>`` are written ``||``
and ``>>``; inside the false-branch only ``>`` needs doubling. Anything
that does not fit the format is left alone as literal text.

When the escaped reading of a branch cannot reach a closing ``>`` the
scanner backs off to the last ``>`` it can close on, so ``<x:1?a>>`` is
the tag ``<x:1?a>`` followed by a literal ``>``.
"""

from __future__ import annotations

import re
from typing import Callable, Iterator

from map_marker.escaping import FALSE_STRING_SEPARATOR, TAG_ENDER
from map_marker.types import MarkerTag

TAG_OPENER = "<x:"
TRUE_STRING_SEPARATOR = "?"

_OPENER_PATTERN = re.compile(rf"{re.escape(TAG_OPENER)}([0-9]+)", re.IGNORECASE)
_LINE_BREAK_PATTERN = re.compile(r"[\n\r]")

_DOUBLE_SEPARATOR = FALSE_STRING_SEPARATOR * 2
_DOUBLE_ENDER = TAG_ENDER * 2


class _LineCursor:
    """Line end and last ``>`` of the line under a forward-moving position.

    Each line is measured once, keeping a full scan linear.
    """

    def __init__(self, text: str) -> None:
        self._text = text
        self._line_end = -1
        self._last_ender = -1

    def bounds(self, pos: int) -> tuple[int, int]:
        if pos > self._line_end:
            match = _LINE_BREAK_PATTERN.search(self._text, pos)
            self._line_end = match.start() if match else len(self._text)
            self._last_ender = self._text.rfind(TAG_ENDER, pos, self._line_end)
        return self._line_end, self._last_ender


def _read_branches(
    text: str, start: int, last_ender: int
) -> tuple[str, str, int] | None:
    """Read ``trueString|falseString>`` beginning at ``start``.

    Returns the raw branches and the offset just past the closing ``>``,
    or ``None`` when the line has no ``>`` left to close on.
    """
    if last_ender < start:
        return None

    # True-branch: the longest run of escape pairs and plain characters
    # that still leaves a ">" at or after its end.
    true_end = start
    i = start
    while i <= last_ender:
        true_end = i
        pair = text[i : i + 2]
        if pair == _DOUBLE_SEPARATOR or pair == _DOUBLE_ENDER:
            i += 2
        elif text[i] == FALSE_STRING_SEPARATOR or text[i] == TAG_ENDER:
            break
        else:
            i += 1

    false_start = true_end
    if text[true_end] == FALSE_STRING_SEPARATOR:
        false_start += 1

    # False-branch: ">" runs pair up from their first character, so the
    # first odd-length run ends on the closer. With no odd run, close on
    # the start of the last pair.
    closer = last_ender - 1
    j = false_start
    while j <= last_ender:
        if text[j] != TAG_ENDER:
            j += 1
            continue
        run_end = j
        while run_end <= last_ender and text[run_end] == TAG_ENDER:
            run_end += 1
        if (run_end - j) % 2:
            closer = run_end - 1
            break
        j = run_end

    return text[start:true_end], text[false_start:closer], closer + 1


def _read_tag(
    text: str, match: re.Match[str], cursor: _LineCursor
) -> MarkerTag | None:
    pos = match.end()
    if pos >= len(text):
        return None

    true_string = false_string = None
    if text[pos] == TAG_ENDER:
        end = pos + 1
    elif text[pos] == TRUE_STRING_SEPARATOR:
        _, last_ender = cursor.bounds(pos + 1)
        branches = _read_branches(text, pos + 1, last_ender)
        if branches is None:
            return None
        true_string, false_string, end = branches
    else:
        return None

    # Empty branches count as absent.
    return MarkerTag(
        identifier=match.group(1),
        true_string=true_string or None,
        false_string=false_string or None,
        start=match.start(),
        end=end,
        raw=text[match.start() : end],
    )


def iter_tags(text: str) -> Iterator[MarkerTag]:
    """Yield every well-formed tag in ``text`` in source order."""
    cursor = _LineCursor(text)
    pos = 0
    while True:
        match = _OPENER_PATTERN.search(text, pos)
        if match is None:
            return
        tag = _read_tag(text, match, cursor)
        if tag is None:
            pos = match.start() + 1
            continue
        yield tag
        pos = tag.end


def replace_tags(text: str, resolve: Callable[[MarkerTag], str]) -> str:
    """Replace each tag in ``text`` with ``resolve(tag)``.

    Text outside well-formed tags is returned unchanged.
    """
    parts: list[str] = []
    last_end = 0
    for tag in iter_tags(text):
        parts.append(text[last_end : tag.start])
        parts.append(resolve(tag))
        last_end = tag.end
    parts.append(text[last_end:])
    return "".join(parts)
