"""
Errors — Таксономия сбоев арифметики квадратичных целых

Все сбои локальны, детерминированы и всегда доходят до непосредственного
вызывающего кода. Движок никогда не повторяет операцию и никогда не подменяет
точный результат приближённым float.

Иерархия:
    QuadraticIntegerError
    ├── InvalidConstruction       (ошибка вызывающего при создании значения)
    ├── AlgebraicDegreeOverflow   (результат вне кольца степени 2)
    ├── NotDivisible              (частное не является целым кольца)
    ├── DivisionByZero            (делитель равен нулю)
    └── NativeRangeOverflow       (norm/trace не помещается в native int)
"""

from __future__ import annotations

import math
from fractions import Fraction
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from src.core.domain.quadratic_value import QuadraticValue
    from src.core.domain.ring import RealQuadraticRing


# Максимальная алгебраическая степень, представимая этим движком
MAX_ALGEBRAIC_DEGREE: Final[int] = 2


class QuadraticIntegerError(Exception):
    """Базовый класс всех сбоев арифметики квадратичных целых."""


class InvalidConstruction(QuadraticIntegerError):
    """
    Некорректные параметры при создании кольца или значения.

    Сигнализируется немедленно при конструировании (отсутствующее кольцо,
    знаменатель вне {1, 2}, несовпадение чётности, не-squarefree радиканд).

    Не наследуется от ValueError: pydantic-валидаторы пропускают это
    исключение без оборачивания в ValidationError.
    """


class AlgebraicDegreeOverflow(QuadraticIntegerError, ArithmeticError):
    """
    Результат операции требует алгебраической степени выше 2.

    Ожидаемый, документированный исход смешивания несовместимых колец
    (оба операнда иррациональны, радиканды различны). Вызывающий код может
    эскалировать вычисление в представление степени 4.
    """

    def __init__(
        self,
        message: str,
        necessary_degree: int,
        causing_values: tuple[QuadraticValue, ...] = (),
        max_expected_degree: int = MAX_ALGEBRAIC_DEGREE,
    ):
        super().__init__(message)
        self.necessary_degree = necessary_degree
        self.max_expected_degree = max_expected_degree
        self.causing_values = causing_values

    @classmethod
    def for_operands(
        cls, operation: str, x: QuadraticValue, y: QuadraticValue
    ) -> "AlgebraicDegreeOverflow":
        """
        Сбой для операции над иррациональными значениями из разных колец.

        Необходимая степень равна произведению степеней операндов.
        """
        necessary = x.algebraic_degree() * y.algebraic_degree()
        return cls(
            f"{operation} of {x.to_ascii_string()} from Z[sqrt({x.ring.radicand})] "
            f"and {y.to_ascii_string()} from Z[sqrt({y.ring.radicand})] "
            f"would result in an algebraic integer of degree {necessary}",
            necessary_degree=necessary,
            causing_values=(x, y),
        )


class NotDivisible(QuadraticIntegerError, ArithmeticError):
    """
    Точное частное существует, но не является целым элементом кольца.

    Несёт дробные части частного (regular и surd) для диагностики,
    числовое приближение частного и ограничивающие его целые кольца.
    """

    def __init__(
        self,
        dividend: QuadraticValue,
        divisor: QuadraticValue,
        regular_fraction: Fraction,
        surd_fraction: Fraction,
        ring: RealQuadraticRing,
    ):
        self.dividend = dividend
        self.divisor = divisor
        self.regular_fraction = regular_fraction
        self.surd_fraction = surd_fraction
        self.ring = ring
        super().__init__(
            f"{dividend.to_ascii_string()} is not divisible by "
            f"{divisor.to_ascii_string()}: quotient would be "
            f"{regular_fraction} + {surd_fraction}sqrt({ring.radicand})"
        )

    @property
    def fractions(self) -> tuple[Fraction, Fraction]:
        """Дробные части частного (regular, surd)."""
        return (self.regular_fraction, self.surd_fraction)

    @property
    def numerators(self) -> tuple[int, int]:
        return (self.regular_fraction.numerator, self.surd_fraction.numerator)

    @property
    def denominators(self) -> tuple[int, int]:
        return (self.regular_fraction.denominator, self.surd_fraction.denominator)

    @property
    def numeric_real_part(self) -> float:
        """Числовое приближение несостоявшегося частного."""
        return float(self.regular_fraction) + self.ring.sqrt_approx * float(
            self.surd_fraction
        )

    @property
    def numeric_imaginary_part(self) -> float:
        return 0.0

    def bounding_integers(self) -> tuple[QuadraticValue, ...]:
        """
        Целые кольца, окружающие частное в координатах (regular, surd).

        В кольце с half-integers удвоенные части (A, B) одной чётности
        образуют решётку с базисом (1, 1), (1, -1); в её координатах
        p = (A + B)/2, q = (A - B)/2 берутся четыре комбинации floor/ceil,
        как и в целом случае. Иначе четыре комбинации floor/ceil частей.
        """
        from src.core.domain.quadratic_value import QuadraticValue

        ring = self.ring
        if ring.has_half_integers:
            p = self.regular_fraction + self.surd_fraction
            q = self.regular_fraction - self.surd_fraction
            return tuple(
                QuadraticValue.make(p_i + q_i, p_i - q_i, ring, 2)
                for p_i in (math.floor(p), math.ceil(p))
                for q_i in (math.floor(q), math.ceil(q))
            )

        floor_a = math.floor(self.regular_fraction)
        floor_b = math.floor(self.surd_fraction)
        ceil_a = math.ceil(self.regular_fraction)
        ceil_b = math.ceil(self.surd_fraction)
        return (
            QuadraticValue.make(floor_a, floor_b, ring),
            QuadraticValue.make(ceil_a, floor_b, ring),
            QuadraticValue.make(floor_a, ceil_b, ring),
            QuadraticValue.make(ceil_a, ceil_b, ring),
        )

    def round_towards_zero(self) -> QuadraticValue:
        """Ограничивающее целое с наименьшим абсолютным значением."""
        return min(self.bounding_integers(), key=lambda v: v.absolute_value())

    def round_away_from_zero(self) -> QuadraticValue:
        """Ограничивающее целое с наибольшим абсолютным значением."""
        return max(self.bounding_integers(), key=lambda v: v.absolute_value())


class DivisionByZero(QuadraticIntegerError, ZeroDivisionError):
    """
    Деление на значение, обозначающее ноль.

    Отличается от NotDivisible: дробная диагностика здесь не имеет смысла.
    """


class NativeRangeOverflow(QuadraticIntegerError, OverflowError):
    """
    Точный результат norm/trace не помещается в native signed integer.

    Для значений за пределами native-диапазона используйте full_norm/full_trace.
    """

    def __init__(self, name: str, value: int, bits: int):
        self.value = value
        self.bits = bits
        super().__init__(
            f"{name} {value} exceeds the signed {bits}-bit range; "
            f"use the full-precision variant"
        )
