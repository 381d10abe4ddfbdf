"""
RealQuadraticRing — Дескриптор кольца целых вещественного квадратичного поля

Immutable Pydantic модель, идентифицирующая кольцо O_Q(√d) по squarefree
радиканду d > 1. Один экземпляр на радиканд разделяется по ссылке всеми
значениями этого кольца (см. ring_for).

ИНВАРИАНТЫ:
1. radicand > 1 и squarefree (иначе InvalidConstruction)
2. has_half_integers <=> d ≡ 1 (mod 4)
3. Равенство и хеш определяются только radicand
4. sqrt_approx — кэшированное приближение √d, не является авторитетным
"""

import math
from functools import lru_cache

from pydantic import BaseModel, Field, PrivateAttr, field_validator

from src.core.domain.errors import InvalidConstruction
from src.core.math.number_theory import NORM_EUCLIDEAN_REAL_RADICANDS, is_squarefree


class RealQuadraticRing(BaseModel):
    """
    Кольцо целых поля Q(√d) для squarefree d > 1.

    Для d ≡ 1 (mod 4) кольцо содержит "половинные" целые (a + b√d)/2
    с a, b одной чётности; иначе кольцо равно Z[√d].
    """

    radicand: int = Field(..., description="Squarefree радиканд d > 1")

    model_config = {"frozen": True}  # Immutable

    _sqrt_approx: float = PrivateAttr(default=0.0)

    @field_validator("radicand")
    @classmethod
    def validate_radicand(cls, v: int) -> int:
        """Проверка d > 1 и squarefree."""
        if v == 1:
            raise InvalidConstruction(
                "Radicand 1 does not define a quadratic ring: sqrt(1) is rational"
            )
        if v < 1:
            raise InvalidConstruction(
                f"Radicand {v} is not positive; real quadratic rings need d > 1"
            )
        if not is_squarefree(v):
            raise InvalidConstruction(f"Radicand {v} is not squarefree")
        return v

    def model_post_init(self, __context) -> None:
        self._sqrt_approx = math.sqrt(self.radicand)

    @property
    def has_half_integers(self) -> bool:
        """True если d ≡ 1 (mod 4)."""
        return self.radicand % 4 == 1

    @property
    def sqrt_approx(self) -> float:
        """Кэшированное float-приближение √d."""
        return self._sqrt_approx

    @property
    def discriminant(self) -> int:
        """
        Дискриминант поля: d для колец с half-integers, иначе 4d.

        Например, 5 для Z[φ] и 8 для Z[√2].
        """
        if self.has_half_integers:
            return self.radicand
        return 4 * self.radicand

    @property
    def is_norm_euclidean(self) -> bool:
        """Является ли кольцо евклидовым относительно |нормы|."""
        return self.radicand in NORM_EUCLIDEAN_REAL_RADICANDS

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, RealQuadraticRing):
            return NotImplemented
        return self.radicand == other.radicand

    def __hash__(self) -> int:
        return hash(("RealQuadraticRing", self.radicand))

    def __str__(self) -> str:
        from src.arithmetic.notation import ring_label

        return ring_label(self)

    def __repr__(self) -> str:
        return f"RealQuadraticRing(radicand={self.radicand})"


@lru_cache(maxsize=None)
def ring_for(radicand: int) -> RealQuadraticRing:
    """
    Разделяемый экземпляр кольца для радиканда.

    Повторные вызовы с тем же радикандом возвращают тот же объект.

    Raises:
        InvalidConstruction: Если радиканд не > 1 или не squarefree
    """
    return RealQuadraticRing(radicand=radicand)


# Кольцо Z[φ] золотого сечения
RING_ZPHI = ring_for(5)
