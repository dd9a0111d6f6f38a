"""Input errors raised by the coverage entry point."""

from __future__ import annotations

__all__ = ["CoverageInputError", "InvalidRectangle", "InvalidRange"]


class CoverageInputError(ValueError):
    """Base class for rejected coverage queries."""


class InvalidRectangle(CoverageInputError):
    """A sensor envelope has inverted, non-finite or non-numeric bounds."""


class InvalidRange(CoverageInputError):
    """The target region has inverted, non-finite or non-numeric bounds."""
