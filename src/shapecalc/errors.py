"""
Exception Taxonomy
==================
All errors raised by shapecalc derive from ShapeError, so callers can catch
the whole family in one place (the CLI does).

Classes:
    ShapeError: Base class.
    InvalidDimension: A numeric shape attribute is not a finite, non-negative real.
    InvalidShapeError: An object lacks the capability an aggregator requires,
        or a shape description cannot be turned into a shape.
    NonFiniteResultError: A total is inf and cannot be rendered as JSON.
"""


class ShapeError(Exception):
    """Base class for all shapecalc errors."""


class InvalidDimension(ShapeError, ValueError):
    """Raised when a shape is constructed with an invalid numeric attribute."""


class InvalidShapeError(ShapeError, TypeError):
    """Raised when an element cannot be used as a shape in the given context."""


class NonFiniteResultError(ShapeError, ValueError):
    """Raised when a total overflowed and cannot be encoded as strict JSON."""
