"""Match criterion implementations.

A renderer holds exactly one criterion. ``MATCH_ALL`` and ``MATCH_NONE``
are the canonical sentinels; every other value selects the tags whose
identifier equals ``str(value)``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from map_marker.errors import CriterionError
from map_marker.protocols import MatchCriterion


@dataclass(frozen=True, slots=True)
class MatchAll:
    """Render every tag's true-branch (useful while building a map)."""

    def matches(self, identifier: str) -> bool:
        return True

    def __repr__(self) -> str:
        return "MATCH_ALL"


@dataclass(frozen=True, slots=True)
class MatchNone:
    """Render every tag's false-branch."""

    def matches(self, identifier: str) -> bool:
        return False

    def __repr__(self) -> str:
        return "MATCH_NONE"


@dataclass(frozen=True, slots=True)
class MatchId:
    """Render the true-branch only for tags carrying ``identifier``.

    ``identifier`` is stored as a string. Integral floats are written
    without the fractional part, so ``MatchId(2.0)`` matches ``<x:2>``.
    """

    identifier: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "identifier", _to_identifier(self.identifier))

    def matches(self, identifier: str) -> bool:
        return self.identifier == identifier


def _to_identifier(value: Any) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


MATCH_ALL = MatchAll()
MATCH_NONE = MatchNone()


def coerce_criterion(value: Any) -> MatchCriterion:
    """Turn a caller-supplied value into a ``MatchCriterion``.

    ``None`` means nothing is selected. Booleans are rejected because
    ``True``/``False`` would otherwise be compared as the strings
    ``"True"``/``"False"`` and silently match nothing.
    """
    if value is None:
        return MATCH_NONE
    if isinstance(value, bool):
        msg = f"boolean criterion {value!r} is ambiguous, use MATCH_ALL or MATCH_NONE"
        raise CriterionError(msg)
    if isinstance(value, MatchCriterion):
        return value
    return MatchId(value)
