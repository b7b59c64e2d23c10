"""Pytest configuration and shared fixtures for map-marker tests."""

import pytest

from map_marker import MapMarker


@pytest.fixture
def room_map() -> str:
    """A small three-room map, one tag per room."""
    return (
        "+---+   +---+   +---+\n"
        "|<x:101?@>|---|<x:102?@>|---|<x:103?@>|\n"
        "+---+   +---+   +---+"
    )


@pytest.fixture
def room_marker(room_map: str) -> MapMarker:
    return MapMarker(room_map)
