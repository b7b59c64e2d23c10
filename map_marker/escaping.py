"""Unescaping helpers for tag branches.

Inside a true-branch both ``|`` and ``>`` are delimiters and are written
doubled (``||``, ``>>``). Inside a false-branch only ``>`` is a delimiter.
Each helper collapses adjacent pairs in one left-to-right pass, so a run
of 2n delimiters becomes n literal characters.
"""

FALSE_STRING_SEPARATOR = "|"
TAG_ENDER = ">"

_DOUBLE_SEPARATOR = FALSE_STRING_SEPARATOR * 2
_DOUBLE_ENDER = TAG_ENDER * 2


def unescape_true(value: str) -> str:
    """Unescape a true-branch: ``||`` -> ``|`` and ``>>`` -> ``>``."""
    return value.replace(_DOUBLE_SEPARATOR, FALSE_STRING_SEPARATOR).replace(
        _DOUBLE_ENDER, TAG_ENDER
    )


def unescape_false(value: str) -> str:
    """Unescape a false-branch: ``>>`` -> ``>``."""
    return value.replace(_DOUBLE_ENDER, TAG_ENDER)
