"""
Ordering Engine — Равенство, хеширование и полный порядок

РАВЕНСТВО:
    Одинаковые denominator и пара (a, b), а также одинаковое кольцо,
    если значение иррационально. Знаменатель — часть идентичности значения.
    Рациональные значения (b == 0) равны независимо от кольца.

ХЕШ:
    Согласован с равенством: радиканд участвует только при b != 0.
    Хеш кортежа целых не сталкивается на типичных случайных значениях.

ПОРЯДОК:
    По точному целому приближению floor(x · 2^64), по возрастанию; float
    не используется, поэтому порядок определён для частей любой величины.
    Значения с совпадающим приближением, но структурно различные,
    упорядочиваются детерминированно по (denominator, a, b, радиканд).
    Порядок строится как сравнение ключей-кортежей, поэтому он транзитивен;
    compare(x, y) == 0 тогда и только тогда, когда values_equal(x, y).
"""

from src.arithmetic.invariants import full_norm, real_part_scaled
from src.core.domain.quadratic_value import QuadraticValue

SortKey = tuple[int, int, int, int, int]


def _identity_radicand(x: QuadraticValue) -> int:
    """Радиканд для идентичности: 0 для рациональных значений."""
    return x.ring.radicand if x.surd_part != 0 else 0


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


# =============================================================================
# РАВЕНСТВО / ХЕШ
# =============================================================================


def values_equal(x: QuadraticValue, y: QuadraticValue) -> bool:
    """
    Структурное равенство значений.

    Examples:
        3 в Z[√2] == 3 в Z[√7]
        √2 в Z[√2] != √3 в Z[√3]
    """
    if x.regular_part != y.regular_part or x.surd_part != y.surd_part:
        return False
    if x.denominator != y.denominator:
        return False
    if x.surd_part == 0:
        return True
    return x.ring == y.ring


def value_hash(x: QuadraticValue) -> int:
    """Хеш, согласованный с values_equal."""
    return hash((x.regular_part, x.surd_part, x.denominator, _identity_radicand(x)))


# =============================================================================
# ПОРЯДОК
# =============================================================================


def sort_key(x: QuadraticValue) -> SortKey:
    """
    Ключ естественного порядка.

    Первая компонента — точное целое приближение floor(x · 2^64),
    остальные — детерминированный tie-break по структуре значения.
    """
    return (
        real_part_scaled(x),
        x.denominator,
        x.regular_part,
        x.surd_part,
        _identity_radicand(x),
    )


def compare(x: QuadraticValue, y: QuadraticValue) -> int:
    """
    Естественный порядок: -1, 0 или 1.

    Значения из разных колец и с разными знаменателями сравнимы.
    """
    key_x = sort_key(x)
    key_y = sort_key(y)
    if key_x < key_y:
        return -1
    if key_x > key_y:
        return 1
    return 0


def compare_numeric(x: QuadraticValue, y: QuadraticValue) -> int:
    """
    Явный числовой компаратор: только по приближению floor(x · 2^64).

    Для наборов с попарно различными приближениями даёт тот же порядок,
    что и compare.
    """
    return _sign(real_part_scaled(x) - real_part_scaled(y))


def norm_absolute_key(x: QuadraticValue) -> tuple[int, SortKey]:
    """
    Ключ сортировки по |норме|, с естественным порядком как tie-break.

    Examples:
        sorted(values, key=norm_absolute_key)
    """
    return (abs(full_norm(x)), sort_key(x))
