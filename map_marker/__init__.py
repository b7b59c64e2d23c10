"""map_marker - render highlight markers embedded in ASCII maps."""

from map_marker.criteria import (
    MATCH_ALL,
    MATCH_NONE,
    MatchAll,
    MatchId,
    MatchNone,
    coerce_criterion,
)
from map_marker.errors import CriterionError, MapMarkerError
from map_marker.escaping import unescape_false, unescape_true
from map_marker.options import RenderOptions
from map_marker.protocols import MatchCriterion
from map_marker.renderer import MapMarker, render
from map_marker.scanner import iter_tags, replace_tags
from map_marker.types import MarkerTag

__all__ = [
    # Renderer
    "MapMarker",
    "render",
    "RenderOptions",
    # Types
    "MarkerTag",
    # Protocols
    "MatchCriterion",
    # Criteria
    "MATCH_ALL",
    "MATCH_NONE",
    "MatchAll",
    "MatchId",
    "MatchNone",
    "coerce_criterion",
    # Scanning
    "iter_tags",
    "replace_tags",
    "unescape_false",
    "unescape_true",
    # Errors
    "CriterionError",
    "MapMarkerError",
]
