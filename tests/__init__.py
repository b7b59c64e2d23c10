"""Test suite for map-marker.

Run tests with:
    pytest tests/
    pytest tests/unit/ -v
"""
