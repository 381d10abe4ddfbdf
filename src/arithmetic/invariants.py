"""
Invariant Calculator — Норма, след, минимальный многочлен и числовые части

Чистые функции над QuadraticValue; кольцо используется только для
радиканда.

ЧИСЛОВЫЕ ЧАСТИ:
    real_part_scaled — floor(x · 2^64) точно в целых (isqrt), без float;
    основа порядка и знака. Float-приближения выводятся из него.

ФОРМУЛЫ:
    trace(x) = 2a / e
    norm(x)  = (a² - d·b²) / e²
    minpoly  = x² - trace·x + norm   (степень 2)

ДВЕ ТОЧНОСТИ:
- trace / norm — native-вариант: точный результат гарантированно помещается
  в signed 64-bit, иначе NativeRangeOverflow (никогда не "заворачивается")
- full_trace / full_norm — произвольная точность, без ограничений
"""

import math
from typing import Final

from src.core.domain.errors import MAX_ALGEBRAIC_DEGREE, AlgebraicDegreeOverflow
from src.core.domain.quadratic_value import QuadraticValue
from src.core.math.native_bounds import NATIVE_INT_BITS, ensure_native

# Коэффициенты минимального многочлена нуля: x
ZERO_MIN_POLYNOMIAL: Final[tuple[int, int, int]] = (0, 1, 0)

# Двоичных разрядов дробной части в точном приближении real_part_scaled
NUMERIC_PRECISION_BITS: Final[int] = 64


# =============================================================================
# СТЕПЕНЬ
# =============================================================================


def algebraic_degree(x: QuadraticValue) -> int:
    """
    Алгебраическая степень значения.

    Returns:
        0 для нуля, 1 для ненулевых рациональных, 2 для иррациональных;
        либо degree_override, если он задан
    """
    return x.algebraic_degree()


# =============================================================================
# СЛЕД / НОРМА
# =============================================================================


def full_trace(x: QuadraticValue) -> int:
    """
    След x + conj(x) = 2a/e с произвольной точностью.

    Examples:
        (1 + √5)/2 → 1; 2 + √14 → 4
    """
    return 2 * x.regular_part // x.denominator


def trace(x: QuadraticValue, bits: int = NATIVE_INT_BITS) -> int:
    """
    След в native-ширине.

    Raises:
        NativeRangeOverflow: Если 2a/e вне signed-диапазона ширины bits
    """
    return ensure_native(full_trace(x), "Trace", bits)


def full_norm(x: QuadraticValue) -> int:
    """
    Норма x × conj(x) = (a² - d·b²)/e² с произвольной точностью.

    Для нулевого значения норма 0; для ненулевых вещественных квадратичных
    целых норма может быть положительной или отрицательной.

    Examples:
        2 + √14 → -10; (1 + √5)/2 → -1
    """
    d = x.ring.radicand
    scaled = x.regular_part * x.regular_part - d * x.surd_part * x.surd_part
    return scaled // (x.denominator * x.denominator)


def norm(x: QuadraticValue, bits: int = NATIVE_INT_BITS) -> int:
    """
    Норма в native-ширине.

    Точное значение вычисляется всегда; если оно не помещается в signed
    целое ширины bits, сигнализируется сбой вместо молчаливого усечения.

    Raises:
        NativeRangeOverflow: Если норма вне signed-диапазона ширины bits
    """
    return ensure_native(full_norm(x), "Norm", bits)


# =============================================================================
# МИНИМАЛЬНЫЙ МНОГОЧЛЕН
# =============================================================================


def min_polynomial_coefficients(x: QuadraticValue) -> tuple[int, int, int]:
    """
    Коэффициенты минимального многочлена по возрастанию степени.

    Returns:
        Степень 2: (norm, -trace, 1)
        Степень 1: (-a, 1, 0)
        Степень 0: (0, 1, 0)

    Raises:
        AlgebraicDegreeOverflow: Значение сообщает степень вне {0, 1, 2}

    Examples:
        (5 + √13)/2 → (3, -5, 1)
    """
    degree = x.algebraic_degree()
    if degree == 0:
        return ZERO_MIN_POLYNOMIAL
    if degree == 1:
        return (-x.regular_part, 1, 0)
    if degree == 2:
        return (full_norm(x), -full_trace(x), 1)

    raise AlgebraicDegreeOverflow(
        f"Excessive algebraic degree {degree} reported by {x.to_ascii_string()}; "
        f"expected at most {MAX_ALGEBRAIC_DEGREE}",
        necessary_degree=degree,
        causing_values=(x,),
    )


# =============================================================================
# ЧИСЛОВЫЕ ЧАСТИ
# =============================================================================


def real_part_scaled(x: QuadraticValue, bits: int = NUMERIC_PRECISION_BITS) -> int:
    """
    floor((a + b√d)/e · 2^bits), вычисленный точно в целых.

    √d не округляется до float: b√d·2^bits берётся через math.isqrt,
    поэтому результат не переполняется и не теряет значащие разряды при
    сокращении больших a и b√d.

    Examples:
        φ, bits=4 → 25  (1.618… · 16 = 25.88…)
    """
    a = x.regular_part
    b = x.surd_part
    # |b|√d·2^bits = √(d·b²·4^bits); d squarefree > 1, корень иррационален при b != 0
    surd_floor = math.isqrt(x.ring.radicand * b * b << (2 * bits))
    if b < 0:
        surd_floor = -surd_floor - 1
    return ((a << bits) + surd_floor) // x.denominator


def real_part_numeric(x: QuadraticValue) -> float:
    """
    Float-приближение (a + √d·b)/e.

    Приближение не используется для равенства и хеширования.

    Raises:
        OverflowError: Само значение вне диапазона float
    """
    return real_part_scaled(x) / (1 << NUMERIC_PRECISION_BITS)


def imaginary_part_numeric(x: QuadraticValue) -> float:
    """Мнимая часть вещественного квадратичного целого всегда ровно 0.0."""
    return 0.0


def absolute_value(x: QuadraticValue) -> float:
    """
    |x| как float.

    Examples:
        1 - √2 → ~0.41421356
    """
    return abs(real_part_numeric(x))


def is_real_part_approximate(x: QuadraticValue) -> bool:
    """Приближена ли вещественная часть: True iff surd_part != 0."""
    return x.surd_part != 0


def is_imaginary_part_approximate(x: QuadraticValue) -> bool:
    """Мнимая часть 0.0 представима точно."""
    return False


def angle(x: QuadraticValue) -> float:
    """
    Аргумент: π для строго отрицательных значений, иначе 0.

    Мнимой оси нет, поэтому других значений не бывает.
    """
    if real_part_scaled(x) < 0:
        return math.pi
    return 0.0
