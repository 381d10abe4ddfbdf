"""
Arithmetic Engine — Точная арифметика целых вещественных квадратичных полей

Операции +, -, ×, точное ÷, остаток, отрицание и сопряжение над
QuadraticValue. Каждая операция возвращает новое значение того же кольца
либо сигнализирует именованный сбой.

ПРАВИЛА ЗАМЫКАНИЯ:
1. Операнды из одного кольца (одинаковый радиканд) комбинируются напрямую
2. Рациональный операнд (b == 0) совместим с любым кольцом
3. Оба операнда иррациональны и радиканды различны →
   AlgebraicDegreeOverflow (истинный результат имеет степень 4)

ДЕЛЕНИЕ:
    x / y = x × conj(y) / N(y), точно в рациональных дробях.
    Частное целое ⇔ обе части целые, либо кольцо содержит half-integers и
    удвоенные части — нечётные целые. Иначе NotDivisible.
    Деление на ноль → DivisionByZero (единственный канонический сбой).

Второй операнд каждой бинарной операции может быть обычным int:
это эквивалентно QuadraticValue(n, 0, x.ring).
"""

import logging
import math
from fractions import Fraction

from src.core.domain.errors import (
    AlgebraicDegreeOverflow,
    DivisionByZero,
    NotDivisible,
)
from src.core.domain.quadratic_value import QuadraticValue
from src.core.domain.ring import RealQuadraticRing

logger = logging.getLogger(__name__)

Operand = QuadraticValue | int


# =============================================================================
# ВСПОМОГАТЕЛЬНЫЕ ФУНКЦИИ
# =============================================================================


def _coerce(x: QuadraticValue, y: Operand) -> QuadraticValue:
    """Приведение int-операнда к рациональному значению кольца x."""
    if isinstance(y, QuadraticValue):
        return y
    if isinstance(y, bool) or not isinstance(y, int):
        raise TypeError(
            f"Operand must be QuadraticValue or int, got {type(y).__name__}"
        )
    return QuadraticValue.make(y, 0, x.ring)


def _check_closure(operation: str, x: QuadraticValue, y: QuadraticValue) -> None:
    """Оба операнда иррациональны и из разных колец → AlgebraicDegreeOverflow."""
    if x.surd_part != 0 and y.surd_part != 0 and x.ring != y.ring:
        error = AlgebraicDegreeOverflow.for_operands(operation, x, y)
        logger.debug("Degree overflow: %s", error)
        raise error


def _common_ring(x: QuadraticValue, y: QuadraticValue) -> RealQuadraticRing:
    """Кольцо результата: кольцо иррационального операнда, иначе кольцо x."""
    if x.surd_part == 0 and y.surd_part != 0:
        return y.ring
    return x.ring


def _to_ring_element(
    regular: Fraction, surd: Fraction, ring: RealQuadraticRing
) -> QuadraticValue | None:
    """
    Целое кольца, равное regular + surd√d, или None если такого нет.

    Целые: обе части целые; либо (только half-integers) удвоенные части —
    целые одной чётности.
    """
    if regular.denominator == 1 and surd.denominator == 1:
        return QuadraticValue.make(regular.numerator, surd.numerator, ring)

    if ring.has_half_integers:
        twice_regular = regular * 2
        twice_surd = surd * 2
        if twice_regular.denominator == 1 and twice_surd.denominator == 1:
            if (twice_regular.numerator - twice_surd.numerator) % 2 == 0:
                return QuadraticValue.make(
                    twice_regular.numerator, twice_surd.numerator, ring, 2
                )
    return None


def _exact_quotient(
    x: QuadraticValue, y: QuadraticValue
) -> tuple[Fraction, Fraction, RealQuadraticRing]:
    """
    Точное частное x / y в дробях (regular, surd) и кольцо результата.

    Предусловие: y != 0 и пара (x, y) прошла проверку замыкания.
    """
    if y.surd_part == 0:
        scale = x.denominator * y.regular_part
        return (
            Fraction(x.regular_part, scale),
            Fraction(x.surd_part, scale),
            x.ring,
        )

    ring = y.ring
    d = ring.radicand
    # x × conj(y): (a1 + b1√d)(a2 - b2√d) / (e1·e2)
    numer_regular = x.regular_part * y.regular_part - d * x.surd_part * y.surd_part
    numer_surd = x.surd_part * y.regular_part - x.regular_part * y.surd_part
    # N(y)·e2² = a2² - d·b2²
    scaled_norm = y.regular_part * y.regular_part - d * y.surd_part * y.surd_part
    # (x × conj(y)) / N(y) = numer · e2² / (e1·e2·scaled_norm)
    scale = x.denominator * scaled_norm
    return (
        Fraction(numer_regular * y.denominator, scale),
        Fraction(numer_surd * y.denominator, scale),
        ring,
    )


# =============================================================================
# УНАРНЫЕ ОПЕРАЦИИ
# =============================================================================


def negate(x: QuadraticValue) -> QuadraticValue:
    """Аддитивное обращение: (-a - b√d) / e."""
    return QuadraticValue.make(-x.regular_part, -x.surd_part, x.ring, x.denominator)


def conjugate(x: QuadraticValue) -> QuadraticValue:
    """
    Сопряжение: (a - b√d) / e.

    Рациональное значение (b == 0) сопряжено самому себе.
    """
    if x.surd_part == 0:
        return x
    return QuadraticValue.make(x.regular_part, -x.surd_part, x.ring, x.denominator)


# =============================================================================
# СЛОЖЕНИЕ / ВЫЧИТАНИЕ
# =============================================================================


def add(x: QuadraticValue, y: Operand) -> QuadraticValue:
    """
    Сумма x + y.

    При разных знаменателях операнд со знаменателем 1 удваивается;
    результат со знаменателем 2 приводится к 1, если обе части чётные.

    Raises:
        AlgebraicDegreeOverflow: Оба операнда иррациональны, кольца различны
        TypeError: y не QuadraticValue и не int

    Examples:
        В Z[√10]: -7 + (-136 + 44√10) = -143 + 44√10
    """
    y = _coerce(x, y)
    _check_closure("Addition", x, y)
    ring = _common_ring(x, y)

    if x.denominator == y.denominator:
        return QuadraticValue.make(
            x.regular_part + y.regular_part,
            x.surd_part + y.surd_part,
            ring,
            x.denominator,
        )

    # Разные знаменатели: один из них 1, другой 2
    x_scale = 2 // x.denominator
    y_scale = 2 // y.denominator
    return QuadraticValue.make(
        x_scale * x.regular_part + y_scale * y.regular_part,
        x_scale * x.surd_part + y_scale * y.surd_part,
        ring,
        2,
    )


def subtract(x: QuadraticValue, y: Operand) -> QuadraticValue:
    """
    Разность x - y = x + (-y).

    Raises:
        AlgebraicDegreeOverflow: Оба операнда иррациональны, кольца различны
    """
    y = _coerce(x, y)
    return add(x, negate(y))


# =============================================================================
# УМНОЖЕНИЕ
# =============================================================================


def multiply(x: QuadraticValue, y: Operand) -> QuadraticValue:
    """
    Произведение x × y по соотношению √d·√d = d.

    Для (a + b√d)/e1 и (c + e√d)/e2 одного кольца:
        regular = a·c + b·e·d, surd = a·e + b·c, denominator = e1·e2
    Знаменатель 4 сокращается до 2 (обе части тогда чётные).

    Raises:
        AlgebraicDegreeOverflow: Оба операнда иррациональны, кольца различны
    """
    y = _coerce(x, y)

    if y.surd_part == 0 and y.denominator == 1:
        return QuadraticValue.make(
            x.regular_part * y.regular_part,
            x.surd_part * y.regular_part,
            x.ring,
            x.denominator,
        )
    if x.surd_part == 0 and x.denominator == 1:
        return QuadraticValue.make(
            y.regular_part * x.regular_part,
            y.surd_part * x.regular_part,
            y.ring,
            y.denominator,
        )

    _check_closure("Multiplication", x, y)

    d = x.ring.radicand
    regular = x.regular_part * y.regular_part + x.surd_part * y.surd_part * d
    surd = x.regular_part * y.surd_part + x.surd_part * y.regular_part
    denom = x.denominator * y.denominator
    if denom == 4:
        regular //= 2
        surd //= 2
        denom = 2
    return QuadraticValue.make(regular, surd, x.ring, denom)


# =============================================================================
# ДЕЛЕНИЕ
# =============================================================================


def divide(x: QuadraticValue, y: Operand) -> QuadraticValue:
    """
    Точное частное x / y.

    Порядок проверок:
    1. y == 0 → DivisionByZero
    2. Рациональное делимое из другого кольца переносится в кольцо делителя
    3. Оба иррациональны, кольца различны → AlgebraicDegreeOverflow
    4. x × conj(y) / N(y) в точных дробях; нецелое частное → NotDivisible

    Raises:
        DivisionByZero: Делитель равен нулю
        AlgebraicDegreeOverflow: Результат степени 4
        NotDivisible: Частное не является целым кольца (несёт дроби)

    Examples:
        (1 - d) / (1 + √d) = 1 - √d для любого squarefree d
    """
    y = _coerce(x, y)

    if y.is_zero():
        logger.debug("Division of %s by zero", x.to_ascii_string())
        raise DivisionByZero(f"Division of {x.to_ascii_string()} by 0 is not defined")

    _check_closure("Division", x, y)

    regular, surd, ring = _exact_quotient(x, y)
    quotient = _to_ring_element(regular, surd, ring)
    if quotient is None:
        error = NotDivisible(x, y, regular, surd, ring)
        logger.debug("Not divisible: %s", error)
        raise error
    return quotient


def remainder(x: QuadraticValue, y: Operand) -> QuadraticValue:
    """
    Остаток x - q·y, где q — частное, округлённое вниз покомпонентно.

    В кольце с half-integers удвоенная regular-часть округляется вниз, а
    удвоенная surd-часть — вниз до той же чётности. Если y делит x
    нацело, результат равен нулю кольца.

    Raises:
        DivisionByZero: Делитель равен нулю
        AlgebraicDegreeOverflow: Оба иррациональны, кольца различны
    """
    y = _coerce(x, y)

    if y.is_zero():
        raise DivisionByZero(
            f"Remainder of {x.to_ascii_string()} modulo 0 is not defined"
        )

    _check_closure("Remainder", x, y)

    regular, surd, ring = _exact_quotient(x, y)
    if _to_ring_element(regular, surd, ring) is not None:
        return QuadraticValue.zero(ring)

    if ring.has_half_integers:
        twice_regular = math.floor(regular * 2)
        twice_surd = math.floor(surd * 2)
        if (twice_regular - twice_surd) % 2 != 0:
            twice_surd -= 1
        quotient = QuadraticValue.make(twice_regular, twice_surd, ring, 2)
    else:
        quotient = QuadraticValue.make(math.floor(regular), math.floor(surd), ring)

    return subtract(x, multiply(quotient, y))
