"""Error types raised by the matcher and its helpers."""

from __future__ import annotations


class InvalidArgument(ValueError):
    """A collection argument was empty or an index was out of range."""
