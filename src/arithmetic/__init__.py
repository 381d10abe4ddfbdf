"""
Arithmetic engines для квадратичных целых

Точная арифметика, инварианты, порядок и текстовые представления
значений QuadraticValue.
"""

# Arithmetic Engine
from src.arithmetic.engine import (
    add,
    conjugate,
    divide,
    multiply,
    negate,
    remainder,
    subtract,
)

# Invariant Calculator
from src.arithmetic.invariants import (
    absolute_value,
    algebraic_degree,
    angle,
    full_norm,
    full_trace,
    imaginary_part_numeric,
    is_imaginary_part_approximate,
    is_real_part_approximate,
    min_polynomial_coefficients,
    norm,
    real_part_numeric,
    real_part_scaled,
    trace,
)

# Ordering Engine
from src.arithmetic.ordering import (
    compare,
    compare_numeric,
    norm_absolute_key,
    sort_key,
    value_hash,
    values_equal,
)

# Notation
from src.arithmetic.notation import (
    min_polynomial_html,
    min_polynomial_string,
    min_polynomial_tex,
    ring_ascii_label,
    ring_filename_label,
    ring_html_label,
    ring_label,
    ring_tex_label,
    to_alt_string,
    to_ascii_alt_string,
    to_ascii_string,
    to_html_alt_string,
    to_html_string,
    to_plain_string,
    to_tex_alt_string,
    to_tex_string,
    to_tex_string_single_denominator,
)

__all__ = [
    # Arithmetic Engine
    "add",
    "subtract",
    "multiply",
    "divide",
    "remainder",
    "negate",
    "conjugate",
    # Invariant Calculator
    "algebraic_degree",
    "trace",
    "full_trace",
    "norm",
    "full_norm",
    "min_polynomial_coefficients",
    "real_part_numeric",
    "real_part_scaled",
    "imaginary_part_numeric",
    "absolute_value",
    "is_real_part_approximate",
    "is_imaginary_part_approximate",
    "angle",
    # Ordering Engine
    "values_equal",
    "value_hash",
    "compare",
    "compare_numeric",
    "sort_key",
    "norm_absolute_key",
    # Notation — Values
    "to_plain_string",
    "to_ascii_string",
    "to_alt_string",
    "to_ascii_alt_string",
    "to_tex_string",
    "to_tex_string_single_denominator",
    "to_tex_alt_string",
    "to_html_string",
    "to_html_alt_string",
    # Notation — Rings
    "ring_label",
    "ring_ascii_label",
    "ring_tex_label",
    "ring_html_label",
    "ring_filename_label",
    # Notation — Minimal polynomial
    "min_polynomial_string",
    "min_polynomial_tex",
    "min_polynomial_html",
]
