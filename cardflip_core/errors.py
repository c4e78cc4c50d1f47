from __future__ import annotations


class InvalidArgument(ValueError):
    """Raised for an index or pair id outside the current board."""


class InvalidConfig(ValueError):
    """Raised for a grid that cannot hold pairs, or an unknown difficulty preset."""
