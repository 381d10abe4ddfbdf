"""
Number Theory — Теоретико-числовые примитивы для колец Z[√d]

Используются фабрикой колец (проверка squarefree) и построителями тестовых
фикстур (случайные squarefree радиканды).

ИНВАРИАНТ: модуль не хранит глобального генератора случайных чисел.
Источник случайности всегда передаётся явно (random.Random), поэтому
фикстуры воспроизводимы по seed, а арифметический движок детерминирован.
"""

import random
from typing import Final

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Радиканды d > 0, для которых O_Q(√d) является норм-евклидовым кольцом
NORM_EUCLIDEAN_REAL_RADICANDS: Final[tuple[int, ...]] = (
    2, 3, 5, 6, 7, 11, 13, 17, 19, 21, 29, 33, 37, 41, 57, 73,
)

# Верхняя граница попыток при выборке случайного squarefree числа
RANDOM_SQUAREFREE_MAX_ATTEMPTS: Final[int] = 10_000


# =============================================================================
# РАЗЛОЖЕНИЕ
# =============================================================================


def prime_factors(num: int) -> list[int]:
    """
    Простые множители числа с кратностями, по возрастанию.

    Знак игнорируется; для 0 и ±1 возвращается пустой список.

    Examples:
        >>> prime_factors(60)
        [2, 2, 3, 5]
        >>> prime_factors(-98)
        [2, 7, 7]
    """
    n = abs(num)
    factors: list[int] = []
    if n < 2:
        return factors

    while n % 2 == 0:
        factors.append(2)
        n //= 2

    p = 3
    while p * p <= n:
        while n % p == 0:
            factors.append(p)
            n //= p
        p += 2

    if n > 1:
        factors.append(n)
    return factors


def is_squarefree(num: int) -> bool:
    """
    Не делится ли num на квадрат простого числа.

    0 не считается squarefree; ±1 считается.

    Examples:
        >>> is_squarefree(10)
        True
        >>> is_squarefree(12)
        False
    """
    if num == 0:
        return False
    factors = prime_factors(num)
    return len(factors) == len(set(factors))


def kernel(num: int) -> int:
    """
    Ядро (радикал) числа: произведение различных простых делителей.

    Знак сохраняется, kernel(0) == 0.

    Examples:
        >>> kernel(72)
        6
        >>> kernel(-50)
        -10
    """
    if num == 0:
        return 0
    result = 1
    for p in set(prime_factors(num)):
        result *= p
    return result if num > 0 else -result


# =============================================================================
# СЛУЧАЙНЫЕ ФИКСТУРЫ
# =============================================================================


def random_squarefree(bound: int, rng: random.Random) -> int:
    """
    Случайное squarefree число d в диапазоне 2 <= d < bound.

    Args:
        bound: Исключающая верхняя граница (> 2)
        rng: Явный источник случайности (seedable)

    Returns:
        Squarefree число >= 2

    Raises:
        ValueError: Если bound <= 2
        RuntimeError: Если за RANDOM_SQUAREFREE_MAX_ATTEMPTS попыток
            не найдено подходящего числа
    """
    if bound <= 2:
        raise ValueError(f"bound must be > 2, got {bound}")

    for _ in range(RANDOM_SQUAREFREE_MAX_ATTEMPTS):
        candidate = rng.randrange(2, bound)
        if is_squarefree(candidate):
            return candidate

    raise RuntimeError(
        f"No squarefree number below {bound} found after "
        f"{RANDOM_SQUAREFREE_MAX_ATTEMPTS} attempts"
    )


def squarefree_radicands(start: int, stop: int) -> list[int]:
    """
    Все squarefree d в [start, stop), пригодные как радиканды (d >= 2).

    Examples:
        >>> squarefree_radicands(2, 12)
        [2, 3, 5, 6, 7, 10, 11]
    """
    return [d for d in range(max(start, 2), stop) if is_squarefree(d)]
