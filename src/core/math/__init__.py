"""
Core math modules

Теоретико-числовые примитивы и проверка native-диапазона целых.
"""

# Native Bounds
from src.core.math.native_bounds import (
    INT64_MAX,
    INT64_MIN,
    NATIVE_INT_BITS,
    ensure_native,
    fits_signed,
    signed_range,
)

# Number Theory
from src.core.math.number_theory import (
    NORM_EUCLIDEAN_REAL_RADICANDS,
    RANDOM_SQUAREFREE_MAX_ATTEMPTS,
    is_squarefree,
    kernel,
    prime_factors,
    random_squarefree,
    squarefree_radicands,
)

__all__ = [
    # Native Bounds — Constants
    "NATIVE_INT_BITS",
    "INT64_MIN",
    "INT64_MAX",
    # Native Bounds — Functions
    "signed_range",
    "fits_signed",
    "ensure_native",
    # Number Theory — Constants
    "NORM_EUCLIDEAN_REAL_RADICANDS",
    "RANDOM_SQUAREFREE_MAX_ATTEMPTS",
    # Number Theory — Functions
    "prime_factors",
    "is_squarefree",
    "kernel",
    "random_squarefree",
    "squarefree_radicands",
]
