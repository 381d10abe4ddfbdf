"""
Native Bounds — Защита от молчаливого переполнения native-целых

Python int не переполняется, но потребители норм и следов часто ожидают
результат фиксированной ширины (signed 64-bit). Модуль даёт единственный
допустимый способ проверить, что точный результат помещается в native-ширину.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат никогда не усекается и не "заворачивается" по модулю 2^bits
2. Выход за диапазон → NativeRangeOverflow с точным значением в сообщении
3. Все проверки детерминированы
"""

from typing import Final

from src.core.domain.errors import NativeRangeOverflow

# =============================================================================
# ШИРИНА NATIVE-ЦЕЛЫХ
# =============================================================================

# Ширина native-результата norm/trace (signed)
NATIVE_INT_BITS: Final[int] = 64

INT64_MIN: Final[int] = -(2**63)
INT64_MAX: Final[int] = 2**63 - 1


# =============================================================================
# ДИАПАЗОНЫ
# =============================================================================


def signed_range(bits: int = NATIVE_INT_BITS) -> tuple[int, int]:
    """
    Диапазон signed-целого заданной ширины.

    Args:
        bits: Ширина в битах (>= 2)

    Returns:
        (min_value, max_value) включительно

    Raises:
        ValueError: Если bits < 2

    Examples:
        >>> signed_range(8)
        (-128, 127)
    """
    if bits < 2:
        raise ValueError(f"bits must be >= 2, got {bits}")
    return (-(2 ** (bits - 1)), 2 ** (bits - 1) - 1)


def fits_signed(value: int, bits: int = NATIVE_INT_BITS) -> bool:
    """
    Помещается ли value в signed-целое ширины bits.

    Examples:
        >>> fits_signed(2**63 - 1)
        True
        >>> fits_signed(2**63)
        False
    """
    low, high = signed_range(bits)
    return low <= value <= high


def ensure_native(value: int, name: str, bits: int = NATIVE_INT_BITS) -> int:
    """
    Возвращает value, если он помещается в native-ширину.

    Args:
        value: Точный результат
        name: Имя величины (для сообщения об ошибке)
        bits: Native-ширина (default: NATIVE_INT_BITS)

    Returns:
        value без изменений

    Raises:
        NativeRangeOverflow: Если value вне signed-диапазона
    """
    if not fits_signed(value, bits):
        raise NativeRangeOverflow(name, value, bits)
    return value
