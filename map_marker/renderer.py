"""Map marker renderer."""

from __future__ import annotations

import logging
from typing import Any, final

from map_marker.criteria import MATCH_NONE, coerce_criterion
from map_marker.escaping import unescape_false, unescape_true
from map_marker.options import RenderOptions
from map_marker.protocols import MatchCriterion
from map_marker.scanner import iter_tags, replace_tags
from map_marker.types import MarkerTag


@final
class MapMarker:
    """Render ``<x:ID?trueString|falseString>`` tags in a map.

    Each tag becomes its true-branch when the current criterion matches
    its identifier, otherwise its false-branch. A missing true-branch
    renders as ``X`` and a missing false-branch as a single space (see
    ``RenderOptions``).

    The source text never changes. ``criterion`` may be reassigned between
    ``render()`` calls; an instance shared between threads must be guarded
    by the caller when one of them reassigns it.

    Usage::

        marker = MapMarker("[<x:1>]-[<x:2>]")
        marker.criterion = 2
        marker.render()  # "[ ]-[X]"
    """

    def __init__(
        self,
        text: str,
        *,
        criterion: Any = MATCH_NONE,
        options: RenderOptions | None = None,
    ) -> None:
        if not isinstance(text, str):
            msg = f"text must be a str, got {type(text).__name__}"
            raise TypeError(msg)
        self._log = logging.getLogger("map_marker")
        self._original = text
        self._criterion = coerce_criterion(criterion)
        self._options = options if options is not None else RenderOptions()

    @property
    def original(self) -> str:
        """The map text that substitutions are performed on."""
        return self._original

    @property
    def options(self) -> RenderOptions:
        return self._options

    @property
    def criterion(self) -> MatchCriterion:
        """The criterion tags are matched against.

        Accepts ``MATCH_ALL``, ``MATCH_NONE`` (or ``None``), any other
        ``MatchCriterion``, or a value compared to tag identifiers as a
        string. In MUD maps this is usually a room vnum.
        """
        return self._criterion

    @criterion.setter
    def criterion(self, value: Any) -> None:
        self._criterion = coerce_criterion(value)
        self._log.debug("Criterion set to %r", self._criterion)

    def resolve(self, tag: MarkerTag) -> str:
        """Return the substitution for ``tag`` under the current criterion."""
        return self._resolve(tag, self._criterion)

    def render(self) -> str:
        """Return the map with every tag replaced.

        The criterion is read once, so a concurrent reassignment never
        mixes two criteria in one result.
        """
        criterion = self._criterion
        count = 0

        def resolve_counted(tag: MarkerTag) -> str:
            nonlocal count
            count += 1
            return self._resolve(tag, criterion)

        rendered = replace_tags(self._original, resolve_counted)
        self._log.debug(
            "Rendered %d tags in %d chars with %r",
            count,
            len(self._original),
            criterion,
        )
        return rendered

    def _resolve(self, tag: MarkerTag, criterion: MatchCriterion) -> str:
        if criterion.matches(tag.identifier):
            if tag.true_string is None:
                return self._options.true_default
            return unescape_true(tag.true_string)

        if tag.false_string is None:
            return self._options.false_default
        return unescape_false(tag.false_string)

    def tags(self) -> list[MarkerTag]:
        """Return every well-formed tag in the map."""
        return list(iter_tags(self._original))

    def mark_ids(self) -> list[str]:
        """Return distinct tag identifiers in first-seen order."""
        seen: dict[str, None] = {}
        for tag in iter_tags(self._original):
            seen.setdefault(tag.identifier, None)
        return list(seen)


def render(
    text: str,
    criterion: Any = MATCH_NONE,
    options: RenderOptions | None = None,
) -> str:
    """Render ``text`` once with the given criterion."""
    return MapMarker(text, criterion=criterion, options=options).render()
