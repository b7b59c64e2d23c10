"""Protocol definitions for the map marker renderer."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class MatchCriterion(Protocol):
    """Decides whether a tag renders its true-branch."""

    def matches(self, identifier: str) -> bool: ...
