"""
Tests for Number Theory primitives

Проверяет разложение, squarefree-проверку, ядро числа и
воспроизводимую выборку случайных squarefree радикандов.
"""

import random

import pytest

from src.core.math.number_theory import (
    RANDOM_SQUAREFREE_MAX_ATTEMPTS,
    is_squarefree,
    kernel,
    prime_factors,
    random_squarefree,
    squarefree_radicands,
)


class TestPrimeFactors:
    """Тесты разложения на простые"""

    def test_composite(self) -> None:
        assert prime_factors(60) == [2, 2, 3, 5]
        assert prime_factors(97 * 89) == [89, 97]

    def test_sign_ignored(self) -> None:
        assert prime_factors(-98) == [2, 7, 7]

    @pytest.mark.parametrize("num", [0, 1, -1])
    def test_trivial(self, num: int) -> None:
        assert prime_factors(num) == []


class TestSquarefree:
    """Тесты is_squarefree и kernel"""

    @pytest.mark.parametrize("num", [1, 2, 3, 5, 6, 10, 30, -7])
    def test_squarefree(self, num: int) -> None:
        assert is_squarefree(num)

    @pytest.mark.parametrize("num", [0, 4, 12, 18, 50, -8])
    def test_not_squarefree(self, num: int) -> None:
        assert not is_squarefree(num)

    def test_kernel(self) -> None:
        assert kernel(72) == 6
        assert kernel(-50) == -10
        assert kernel(0) == 0
        assert kernel(1) == 1

    def test_squarefree_radicands(self) -> None:
        assert squarefree_radicands(2, 12) == [2, 3, 5, 6, 7, 10, 11]
        assert squarefree_radicands(-5, 4) == [2, 3]


class TestRandomSquarefree:
    """Тесты случайной выборки"""

    def test_in_range_and_squarefree(self) -> None:
        rng = random.Random(42)
        for _ in range(200):
            d = random_squarefree(100, rng)
            assert 2 <= d < 100
            assert is_squarefree(d)

    def test_reproducible_by_seed(self) -> None:
        first = [random_squarefree(1000, random.Random(7)) for _ in range(5)]
        second = [random_squarefree(1000, random.Random(7)) for _ in range(5)]
        assert first == second

    def test_bound_too_small(self) -> None:
        with pytest.raises(ValueError, match="bound must be > 2"):
            random_squarefree(2, random.Random(0))

    def test_exhausted_attempts(self) -> None:
        """Источник, выдающий только квадраты, исчерпывает попытки"""

        class SquaresOnly(random.Random):
            def randrange(self, start, stop=None, step=1):
                return 4

        with pytest.raises(RuntimeError, match=str(RANDOM_SQUAREFREE_MAX_ATTEMPTS)):
            random_squarefree(5, SquaresOnly())
