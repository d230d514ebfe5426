"""Exceptions raised by the venue finder."""

from __future__ import annotations


class InvalidQueryError(ValueError):
    """A ``find`` argument is not a usable number or is out of range."""


class CatalogError(ValueError):
    """A venue or rating file cannot be turned into records."""
