"""Exception hierarchy for the map marker renderer.

Rendering itself never raises: malformed tags are left in the output as
literal text. These errors only come from configuring a renderer.
"""


class MapMarkerError(Exception):
    """Base exception for all map marker errors."""


class CriterionError(MapMarkerError, TypeError):
    """Raised when a value cannot be used as a match criterion."""
