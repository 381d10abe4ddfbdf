"""
Domain models and value objects.

Contains the ring descriptor, the quadratic integer value and the failure
taxonomy.
"""

from src.core.domain.errors import (
    MAX_ALGEBRAIC_DEGREE,
    AlgebraicDegreeOverflow,
    DivisionByZero,
    InvalidConstruction,
    NativeRangeOverflow,
    NotDivisible,
    QuadraticIntegerError,
)
from src.core.domain.ring import RING_ZPHI, RealQuadraticRing, ring_for
from src.core.domain.quadratic_value import GOLDEN_RATIO, QuadraticValue, make_value

__all__ = [
    # Errors
    "MAX_ALGEBRAIC_DEGREE",
    "QuadraticIntegerError",
    "InvalidConstruction",
    "AlgebraicDegreeOverflow",
    "NotDivisible",
    "DivisionByZero",
    "NativeRangeOverflow",
    # Ring
    "RealQuadraticRing",
    "ring_for",
    "RING_ZPHI",
    # Value
    "QuadraticValue",
    "make_value",
    "GOLDEN_RATIO",
]
