"""Data types for marker scanning."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class MarkerTag:
    """A ``<x:...>`` tag found in source text.

    Branch strings are kept exactly as written (still escaped). An empty
    branch is stored as ``None`` so it falls back to its default just like
    an absent one.
    """

    identifier: str  # decimal digits, compared as a string
    true_string: str | None
    false_string: str | None
    start: int  # char offset in source text
    end: int  # char offset (exclusive, slice convention)
    raw: str  # the tag text as it appears in the source
