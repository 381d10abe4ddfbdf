"""
QuadraticValue — Модель целого вещественного квадратичного поля

Immutable Pydantic модель тройки (regular_part, surd_part, denominator) над
кольцом RealQuadraticRing, обозначающей (a + b√d) / denominator.

ИНВАРИАНТЫ (проверяются при создании, InvalidConstruction немедленно):
1. ring присутствует и является RealQuadraticRing
2. denominator ∈ {1, 2}
3. denominator == 2 → a и b одной чётности;
   обе чётные → приводится к (a/2, b/2, 1) в любом кольце;
   обе нечётные → кольцо обязано иметь half-integers
4. (0, 0) — ноль в любом кольце, степень 0
5. b == 0 → рациональное целое, совместимое с любым кольцом

Операции возвращают новые значения; операнды никогда не изменяются.
"""

from typing import Any

from pydantic import BaseModel, Field, model_validator

from src.core.domain.errors import InvalidConstruction
from src.core.domain.ring import RING_ZPHI, RealQuadraticRing


class QuadraticValue(BaseModel):
    """
    Целое вещественного квадратичного поля (a + b√d) / denominator.

    degree_override — явная, задаваемая вызывающим степень, отвязанная от
    структурных (a, b). Используется только в тестовых фикстурах для
    проверки защиты минимального многочлена; не участвует в равенстве,
    хешировании и контракте обмена.
    """

    regular_part: int = Field(..., strict=True, description="Числитель рациональной части (a)")
    surd_part: int = Field(..., strict=True, description="Числитель иррациональной части (b)")
    ring: RealQuadraticRing = Field(..., description="Кольцо значения")
    denominator: int = Field(1, strict=True, description="Знаменатель: 1 или 2")
    degree_override: int | None = Field(
        None, description="Явная алгебраическая степень (только для фикстур)"
    )

    model_config = {"frozen": True}  # Immutable

    @model_validator(mode="before")
    @classmethod
    def normalize_representation(cls, data: Any) -> Any:
        """
        Проверка инвариантов и приведение к наименьшему знаменателю.

        Нецелые компоненты пропускаются дальше: их отклоняет strict-валидация
        полей pydantic (ValidationError).
        """
        if not isinstance(data, dict):
            return data

        ring = data.get("ring")
        if ring is None:
            raise InvalidConstruction("Quadratic value requires a ring, got None")
        if not isinstance(ring, RealQuadraticRing):
            raise InvalidConstruction(
                f"Quadratic value requires a RealQuadraticRing, got {type(ring).__name__}"
            )

        a = data.get("regular_part")
        b = data.get("surd_part")
        denom = data.get("denominator", 1)
        if not all(type(v) is int for v in (a, b, denom)):
            return data

        if denom not in (1, 2):
            raise InvalidConstruction(
                f"Denominator must be 1 or 2, got {denom} for ({a}, {b}) "
                f"in ring with radicand {ring.radicand}"
            )

        if denom == 2:
            if (a - b) % 2 != 0:
                raise InvalidConstruction(
                    f"Parity of regular part {a} must match parity of surd part {b} "
                    f"when denominator is 2"
                )
            if a % 2 == 0:
                a //= 2
                b //= 2
                denom = 1
            elif not ring.has_half_integers:
                raise InvalidConstruction(
                    f"({a} + {b}sqrt({ring.radicand}))/2 is not an algebraic integer: "
                    f"radicand {ring.radicand} is not 1 mod 4"
                )

        return {**data, "regular_part": a, "surd_part": b, "denominator": denom}

    # =========================================================================
    # CONSTRUCTORS
    # =========================================================================

    @classmethod
    def make(
        cls,
        regular_part: int,
        surd_part: int,
        ring: RealQuadraticRing,
        denominator: int = 1,
    ) -> "QuadraticValue":
        """Позиционный конструктор: (regular_part + surd_part√d) / denominator."""
        return cls(
            regular_part=regular_part,
            surd_part=surd_part,
            ring=ring,
            denominator=denominator,
        )

    @classmethod
    def from_theta(cls, m: int, n: int, ring: RealQuadraticRing) -> "QuadraticValue":
        """
        Значение m + nθ, где θ = (1 + √d)/2.

        Для колец без half-integers θ не является целым кольца:
        допустимы только чётные n.

        Examples:
            m=-2, n=1 в Z[φ] → (-3 + √5)/2
        """
        return cls.make(2 * m + n, n, ring, 2)

    @classmethod
    def from_phi(cls, m: int, n: int) -> "QuadraticValue":
        """Значение m + nφ в Z[φ], φ = (1 + √5)/2 — золотое сечение."""
        return cls.from_theta(m, n, RING_ZPHI)

    @classmethod
    def zero(cls, ring: RealQuadraticRing) -> "QuadraticValue":
        return cls.make(0, 0, ring)

    @classmethod
    def one(cls, ring: RealQuadraticRing) -> "QuadraticValue":
        return cls.make(1, 0, ring)

    # =========================================================================
    # STRUCTURE
    # =========================================================================

    def algebraic_degree(self) -> int:
        """
        Алгебраическая степень: 0 для нуля, 1 для рациональных, 2 иначе.

        Если задан degree_override, возвращается он.
        """
        if self.degree_override is not None:
            return self.degree_override
        if self.surd_part == 0:
            return 0 if self.regular_part == 0 else 1
        return 2

    def is_zero(self) -> bool:
        return self.regular_part == 0 and self.surd_part == 0

    def is_rational(self) -> bool:
        return self.surd_part == 0

    def with_degree_override(self, degree: int) -> "QuadraticValue":
        """Копия значения с явной (возможно некорректной) степенью."""
        return self.model_copy(update={"degree_override": degree})

    # =========================================================================
    # ARITHMETIC OPERATORS
    # =========================================================================

    def __add__(self, other: Any) -> "QuadraticValue":
        if not _is_operand(other):
            return NotImplemented
        from src.arithmetic.engine import add

        return add(self, other)

    def __radd__(self, other: Any) -> "QuadraticValue":
        if not _is_operand(other):
            return NotImplemented
        from src.arithmetic.engine import add

        return add(self, other)

    def __sub__(self, other: Any) -> "QuadraticValue":
        if not _is_operand(other):
            return NotImplemented
        from src.arithmetic.engine import subtract

        return subtract(self, other)

    def __rsub__(self, other: Any) -> "QuadraticValue":
        if not _is_operand(other):
            return NotImplemented
        from src.arithmetic.engine import add, negate

        return add(negate(self), other)

    def __mul__(self, other: Any) -> "QuadraticValue":
        if not _is_operand(other):
            return NotImplemented
        from src.arithmetic.engine import multiply

        return multiply(self, other)

    def __rmul__(self, other: Any) -> "QuadraticValue":
        if not _is_operand(other):
            return NotImplemented
        from src.arithmetic.engine import multiply

        return multiply(self, other)

    def __truediv__(self, other: Any) -> "QuadraticValue":
        if not _is_operand(other):
            return NotImplemented
        from src.arithmetic.engine import divide

        return divide(self, other)

    def __rtruediv__(self, other: Any) -> "QuadraticValue":
        if not _is_operand(other):
            return NotImplemented
        from src.arithmetic.engine import divide

        return divide(QuadraticValue.make(other, 0, self.ring), self)

    def __mod__(self, other: Any) -> "QuadraticValue":
        if not _is_operand(other):
            return NotImplemented
        from src.arithmetic.engine import remainder

        return remainder(self, other)

    def __neg__(self) -> "QuadraticValue":
        from src.arithmetic.engine import negate

        return negate(self)

    def __pos__(self) -> "QuadraticValue":
        return self

    # =========================================================================
    # EQUALITY / ORDER
    # =========================================================================

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, QuadraticValue):
            return NotImplemented
        from src.arithmetic.ordering import values_equal

        return values_equal(self, other)

    def __hash__(self) -> int:
        from src.arithmetic.ordering import value_hash

        return value_hash(self)

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, QuadraticValue):
            return NotImplemented
        from src.arithmetic.ordering import compare

        return compare(self, other) < 0

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, QuadraticValue):
            return NotImplemented
        from src.arithmetic.ordering import compare

        return compare(self, other) <= 0

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, QuadraticValue):
            return NotImplemented
        from src.arithmetic.ordering import compare

        return compare(self, other) > 0

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, QuadraticValue):
            return NotImplemented
        from src.arithmetic.ordering import compare

        return compare(self, other) >= 0

    # =========================================================================
    # NUMERIC / TEXT
    # =========================================================================

    def __float__(self) -> float:
        from src.arithmetic.invariants import real_part_numeric

        return real_part_numeric(self)

    def absolute_value(self) -> float:
        from src.arithmetic.invariants import absolute_value

        return absolute_value(self)

    def to_ascii_string(self) -> str:
        from src.arithmetic.notation import to_ascii_string

        return to_ascii_string(self)

    def __str__(self) -> str:
        from src.arithmetic.notation import to_plain_string

        return to_plain_string(self)

    def __repr__(self) -> str:
        return (
            f"QuadraticValue(regular_part={self.regular_part}, "
            f"surd_part={self.surd_part}, denominator={self.denominator}, "
            f"radicand={self.ring.radicand})"
        )


def _is_operand(other: Any) -> bool:
    if isinstance(other, bool):
        return False
    return isinstance(other, (int, QuadraticValue))


def make_value(
    regular_part: int,
    surd_part: int,
    ring: RealQuadraticRing,
    denominator: int = 1,
) -> QuadraticValue:
    """
    Создание значения (regular_part + surd_part√d) / denominator.

    Raises:
        InvalidConstruction: Отсутствующее кольцо, знаменатель вне {1, 2},
            несовпадение чётности или полуцелое значение вне кольца с
            half-integers
        pydantic.ValidationError: Нецелые компоненты
    """
    return QuadraticValue.make(regular_part, surd_part, ring, denominator)


# Золотое сечение φ = (1 + √5)/2
GOLDEN_RATIO = QuadraticValue.make(1, 1, RING_ZPHI, 2)
