"""
Tests for Arithmetic Engine

Проверяет:
1. Сложение/вычитание, включая смешанные знаменатели
2. Умножение и приведение знаменателя 4 → 2 → 1
3. Сопряжение и отрицание
4. Точное деление, DivisionByZero, NotDivisible
5. AlgebraicDegreeOverflow при смешивании колец
6. Остаток
"""

import logging
from fractions import Fraction

import pytest

from src.arithmetic import (
    add,
    conjugate,
    divide,
    full_norm,
    multiply,
    negate,
    remainder,
    subtract,
)
from src.core.domain import (
    GOLDEN_RATIO,
    RING_ZPHI,
    AlgebraicDegreeOverflow,
    DivisionByZero,
    NotDivisible,
    QuadraticValue,
    make_value,
    ring_for,
)
from src.core.math import squarefree_radicands


@pytest.fixture
def ring2():
    return ring_for(2)


@pytest.fixture
def ring3():
    return ring_for(3)


@pytest.fixture
def ring7():
    return ring_for(7)


@pytest.fixture
def ring10():
    return ring_for(10)


@pytest.fixture
def sample_values():
    """Набор значений из разных колец, включая полуцелые."""
    return [
        make_value(0, 0, ring_for(2)),
        make_value(3, 2, ring_for(7)),
        make_value(-136, 44, ring_for(10)),
        make_value(5, 0, ring_for(3)),
        make_value(5, 1, ring_for(13), 2),
        make_value(-3, 7, ring_for(17), 2),
        GOLDEN_RATIO,
    ]


# =============================================================================
# ADDITION / SUBTRACTION
# =============================================================================


class TestAddition:
    """Тесты сложения"""

    def test_rational_plus_irrational(self, ring10) -> None:
        """В Z[√10]: -7 + (-136 + 44√10) = -143 + 44√10"""
        x = make_value(-7, 0, ring10)
        y = make_value(-136, 44, ring10)
        assert add(x, y) == make_value(-143, 44, ring10)

    def test_int_operand(self, ring10) -> None:
        """int как второй операнд эквивалентен (n, 0)"""
        assert add(make_value(-136, 44, ring10), -7) == make_value(-143, 44, ring10)

    def test_mixed_denominators(self) -> None:
        """φ + 1 = (3 + √5)/2"""
        result = add(GOLDEN_RATIO, 1)
        assert result == make_value(3, 1, RING_ZPHI, 2)
        assert result.denominator == 2

    def test_halves_reduce(self) -> None:
        """φ + φ = 1 + √5 (знаменатель 1)"""
        result = add(GOLDEN_RATIO, GOLDEN_RATIO)
        assert result.denominator == 1
        assert result == make_value(1, 1, RING_ZPHI)

    def test_zero_identity(self, sample_values) -> None:
        for x in sample_values:
            assert add(x, QuadraticValue.zero(x.ring)) == x

    def test_additive_inverse(self, sample_values) -> None:
        """x + (-x) = 0 кольца x"""
        for x in sample_values:
            result = add(x, negate(x))
            assert result == QuadraticValue.zero(x.ring)
            assert result.is_zero()

    def test_rational_from_other_ring(self, ring2, ring3) -> None:
        """Рациональный операнд совместим с любым кольцом"""
        result = add(make_value(3, 0, ring2), make_value(1, 1, ring3))
        assert result == make_value(4, 1, ring3)
        assert result.ring == ring3

    def test_cross_ring_overflow(self, ring2, ring3) -> None:
        """√2 + √3 имеет степень 4"""
        with pytest.raises(AlgebraicDegreeOverflow, match="degree 4") as exc_info:
            add(make_value(0, 1, ring2), make_value(0, 1, ring3))
        assert exc_info.value.necessary_degree == 4
        assert exc_info.value.max_expected_degree == 2

    def test_operands_unchanged(self, ring7) -> None:
        x = make_value(3, 2, ring7)
        y = make_value(1, 1, ring7)
        add(x, y)
        assert (x.regular_part, x.surd_part) == (3, 2)
        assert (y.regular_part, y.surd_part) == (1, 1)

    def test_non_integer_operand_rejected(self, ring7) -> None:
        x = make_value(3, 2, ring7)
        with pytest.raises(TypeError, match="float"):
            add(x, 1.5)
        with pytest.raises(TypeError, match="bool"):
            add(x, True)


class TestSubtraction:
    """Тесты вычитания"""

    def test_to_rational(self, ring3) -> None:
        """(2 + √3) - (1 + √3) = 1 в любом кольце"""
        result = subtract(make_value(2, 1, ring3), make_value(1, 1, ring3))
        assert result == make_value(1, 0, ring_for(2))

    def test_self_is_zero(self, sample_values) -> None:
        for x in sample_values:
            assert subtract(x, x).is_zero()

    def test_cross_ring_overflow(self, ring2, ring3) -> None:
        with pytest.raises(AlgebraicDegreeOverflow):
            subtract(make_value(1, 1, ring2), make_value(1, 1, ring3))


# =============================================================================
# MULTIPLICATION
# =============================================================================


class TestMultiplication:
    """Тесты умножения"""

    def test_conjugate_pair(self, ring2) -> None:
        """(1 + √2)(1 - √2) = -1"""
        result = multiply(make_value(1, 1, ring2), make_value(1, -1, ring2))
        assert result == make_value(-1, 0, ring2)

    def test_golden_ratio_square(self) -> None:
        """φ² = φ + 1"""
        assert multiply(GOLDEN_RATIO, GOLDEN_RATIO) == add(GOLDEN_RATIO, 1)

    def test_int_factor_reduces_denominator(self) -> None:
        """2φ = 1 + √5"""
        result = multiply(GOLDEN_RATIO, 2)
        assert result == make_value(1, 1, RING_ZPHI)
        assert result.denominator == 1

    def test_one_identity(self, sample_values) -> None:
        for x in sample_values:
            assert multiply(x, QuadraticValue.one(x.ring)) == x
            assert multiply(x, 1) == x

    def test_times_conjugate_is_norm(self, sample_values) -> None:
        """x × conj(x) рационально и равно норме"""
        for x in sample_values:
            product = multiply(x, conjugate(x))
            assert product.surd_part == 0
            assert product == make_value(full_norm(x), 0, x.ring)

    def test_rational_from_other_ring(self, ring2, ring7) -> None:
        result = multiply(make_value(3, 0, ring2), make_value(3, 2, ring7))
        assert result == make_value(9, 6, ring7)
        assert result.ring == ring7

    def test_cross_ring_overflow(self, ring2, ring3) -> None:
        """√2 × √3 не представимо в кольце степени 2"""
        with pytest.raises(AlgebraicDegreeOverflow) as exc_info:
            multiply(make_value(0, 1, ring2), make_value(0, 1, ring3))
        assert exc_info.value.necessary_degree == 4
        assert len(exc_info.value.causing_values) == 2


# =============================================================================
# UNARY
# =============================================================================


class TestUnary:
    """Тесты отрицания и сопряжения"""

    def test_negate(self) -> None:
        assert negate(GOLDEN_RATIO) == make_value(-1, -1, RING_ZPHI, 2)

    def test_conjugate(self, ring7) -> None:
        assert conjugate(make_value(3, 2, ring7)) == make_value(3, -2, ring7)

    def test_conjugate_involution(self, sample_values) -> None:
        for x in sample_values:
            assert conjugate(conjugate(x)) == x

    def test_conjugate_of_rational_is_itself(self, ring3) -> None:
        x = make_value(5, 0, ring3)
        assert conjugate(x) is x


# =============================================================================
# DIVISION
# =============================================================================


class TestDivision:
    """Тесты точного деления"""

    @pytest.mark.parametrize("radicand", squarefree_radicands(2, 100))
    def test_one_minus_d_over_one_plus_root(self, radicand: int) -> None:
        """(1 - d) / (1 + √d) = 1 - √d"""
        ring = ring_for(radicand)
        result = divide(make_value(1 - radicand, 0, ring), make_value(1, 1, ring))
        assert result == make_value(1, -1, ring)

    def test_division_inverts_multiplication(self, ring7) -> None:
        """(17 + 5√7) / (1 + √7) = 3 + 2√7"""
        x = make_value(3, 2, ring7)
        y = make_value(1, 1, ring7)
        assert divide(multiply(x, y), y) == x

    def test_half_integer_quotient(self) -> None:
        """(1 + √5) / 2 = φ"""
        assert divide(make_value(1, 1, RING_ZPHI), 2) == GOLDEN_RATIO

    def test_rational_dividend_from_other_ring(self, ring2, ring3) -> None:
        """6 / (1 + √3) = -3 + 3√3"""
        result = divide(make_value(6, 0, ring2), make_value(1, 1, ring3))
        assert result == make_value(-3, 3, ring3)
        assert result.ring == ring3

    def test_division_by_zero_value(self, ring3) -> None:
        with pytest.raises(DivisionByZero):
            divide(make_value(1, 1, ring3), QuadraticValue.zero(ring3))

    def test_division_by_int_zero(self, ring3) -> None:
        """DivisionByZero также является ZeroDivisionError"""
        with pytest.raises(ZeroDivisionError):
            divide(make_value(1, 1, ring3), 0)

    def test_not_divisible_by_int(self, ring2) -> None:
        """(1 + √2) / 2 не целое в Z[√2]"""
        with pytest.raises(NotDivisible) as exc_info:
            divide(make_value(1, 1, ring2), 2)
        error = exc_info.value
        assert error.fractions == (Fraction(1, 2), Fraction(1, 2))
        assert error.ring == ring2

    def test_not_divisible_in_half_integer_ring(self) -> None:
        """1 / 2 не целое даже в Z[φ]"""
        with pytest.raises(NotDivisible):
            divide(make_value(1, 0, RING_ZPHI), 2)

    def test_not_divisible_by_surd(self, ring2) -> None:
        """1 / √2 = √2/2"""
        with pytest.raises(NotDivisible, match="not divisible") as exc_info:
            divide(make_value(1, 0, ring2), make_value(0, 1, ring2))
        assert exc_info.value.fractions == (Fraction(0), Fraction(1, 2))
        assert exc_info.value.numeric_real_part == pytest.approx(0.70710678, abs=1e-8)

    def test_cross_ring_overflow(self, ring2, ring3) -> None:
        with pytest.raises(AlgebraicDegreeOverflow):
            divide(make_value(0, 1, ring2), make_value(0, 1, ring3))

    def test_zero_checked_before_closure(self, ring2, ring3) -> None:
        """Ноль делителя проверяется первым"""
        with pytest.raises(DivisionByZero):
            divide(make_value(0, 1, ring2), make_value(0, 0, ring3))

    def test_failure_logged(self, ring2, caplog) -> None:
        caplog.set_level(logging.DEBUG, logger="src.arithmetic.engine")
        with pytest.raises(NotDivisible):
            divide(make_value(1, 1, ring2), 2)
        assert "Not divisible" in caplog.text


# =============================================================================
# REMAINDER
# =============================================================================


class TestRemainder:
    """Тесты остатка"""

    def test_rational(self, ring2) -> None:
        assert remainder(make_value(7, 0, ring2), 3) == make_value(1, 0, ring2)
        assert remainder(make_value(-7, 0, ring2), 3) == make_value(2, 0, ring2)

    def test_componentwise_floor(self, ring2) -> None:
        """(5 + 3√2) mod 2 = 1 + √2"""
        assert remainder(make_value(5, 3, ring2), 2) == make_value(1, 1, ring2)

    def test_exact_division_gives_zero(self, ring7) -> None:
        assert remainder(make_value(17, 5, ring7), make_value(1, 1, ring7)).is_zero()

    def test_difference_is_divisible(self) -> None:
        """x - (x mod y) делится на y"""
        ring13 = ring_for(13)
        x = make_value(7, 4, ring13)
        y = make_value(3, 1, ring13)
        r = remainder(x, y)
        assert r == make_value(4, 1, ring13)
        assert divide(subtract(x, r), y) == make_value(15, -3, ring13, 2)

    def test_half_integer_ring(self) -> None:
        """1 mod 2 в Z[φ]: частное округляется до (1 - √5)/2"""
        x = make_value(1, 0, RING_ZPHI)
        r = remainder(x, 2)
        assert r == make_value(0, 1, RING_ZPHI)
        assert divide(subtract(x, r), 2) == make_value(1, -1, RING_ZPHI, 2)

    def test_modulo_zero(self, ring2) -> None:
        with pytest.raises(DivisionByZero):
            remainder(make_value(5, 3, ring2), 0)

    def test_cross_ring_overflow(self, ring2, ring3) -> None:
        with pytest.raises(AlgebraicDegreeOverflow):
            remainder(make_value(1, 1, ring2), make_value(1, 1, ring3))
