"""
Тесты для модуля Sequences

Проверяемые инварианты:
1. Начальные значения Lucas / Fibonacci / Dying Rabbits
2. Линейная рекуррентность для всех элементов после начальных
3. Детерминизм: повторный вызов даёт ту же последовательность
4. Возвращаемые списки независимы (нет скрытого состояния)
"""

import pytest

from bens_number_theory.math.safeguards import InvalidArgument
from bens_number_theory.math.sequences import (
    DYING_RABBITS_LIFESPAN,
    dying_rabbits_sequence,
    fibonacci_sequence,
    lucas_sequence,
)

# =============================================================================
# ТЕСТЫ: Lucas
# =============================================================================


class TestLucasSequence:
    """Тесты lucas_sequence"""

    def test_short_lengths(self) -> None:
        assert lucas_sequence(0) == []
        assert lucas_sequence(1) == [2]
        assert lucas_sequence(2) == [2, 1]

    def test_first_terms(self) -> None:
        assert lucas_sequence(5) == [2, 1, 3, 4, 7]
        assert lucas_sequence(10) == [2, 1, 3, 4, 7, 11, 18, 29, 47, 76]

    def test_recurrence(self) -> None:
        terms = lucas_sequence(200)
        assert len(terms) == 200
        for i in range(2, 200):
            assert terms[i] == terms[i - 1] + terms[i - 2]

    def test_relation_to_fibonacci(self) -> None:
        """L(n) = F(n-1) + F(n+1)"""
        lucas = lucas_sequence(60)
        fib = fibonacci_sequence(62)
        for n in range(1, 60):
            assert lucas[n] == fib[n - 1] + fib[n + 1]

    def test_negative_rejected(self) -> None:
        with pytest.raises(InvalidArgument):
            lucas_sequence(-1)


# =============================================================================
# ТЕСТЫ: Fibonacci
# =============================================================================


class TestFibonacciSequence:
    """Тесты fibonacci_sequence"""

    def test_short_lengths(self) -> None:
        assert fibonacci_sequence(0) == []
        assert fibonacci_sequence(1) == [0]
        assert fibonacci_sequence(2) == [0, 1]

    def test_first_terms(self) -> None:
        assert fibonacci_sequence(5) == [0, 1, 1, 2, 3]
        assert fibonacci_sequence(10) == [0, 1, 1, 2, 3, 5, 8, 13, 21, 34]

    def test_big_values(self) -> None:
        """F(100) не помещается в 64 бита"""
        assert fibonacci_sequence(101)[-1] == 354224848179261915075

    def test_non_integer_rejected(self) -> None:
        with pytest.raises(InvalidArgument):
            fibonacci_sequence(3.0)


# =============================================================================
# ТЕСТЫ: Dying Rabbits
# =============================================================================


class TestDyingRabbitsSequence:
    """Тесты dying_rabbits_sequence"""

    def test_first_terms(self) -> None:
        assert dying_rabbits_sequence(0) == []
        assert dying_rabbits_sequence(1) == [1]
        assert dying_rabbits_sequence(5) == [1, 1, 1, 2, 3]

    def test_prefix_follows_fibonacci(self) -> None:
        """До продолжительности жизни кролики не умирают"""
        terms = dying_rabbits_sequence(DYING_RABBITS_LIFESPAN)
        fib = fibonacci_sequence(DYING_RABBITS_LIFESPAN)
        assert terms[0] == 1
        assert terms[1:] == fib[1:]

    def test_first_deaths(self) -> None:
        assert dying_rabbits_sequence(16) == [
            1, 1, 1, 2, 3, 5, 8, 13, 21, 34, 55, 89, 144, 232, 375, 606,
        ]

    def test_lagged_recurrence(self) -> None:
        terms = dying_rabbits_sequence(80)
        for i in range(DYING_RABBITS_LIFESPAN, 80):
            assert terms[i] == terms[i - 1] + terms[i - 2] - terms[i - DYING_RABBITS_LIFESPAN]

    def test_negative_rejected(self) -> None:
        with pytest.raises(InvalidArgument):
            dying_rabbits_sequence(-5)


# =============================================================================
# ТЕСТЫ: Детерминизм
# =============================================================================


class TestDeterminism:
    """Генераторы не хранят состояние между вызовами"""

    @pytest.mark.parametrize(
        "generator", [lucas_sequence, fibonacci_sequence, dying_rabbits_sequence]
    )
    def test_repeated_calls_identical(self, generator) -> None:
        assert generator(40) == generator(40)

    @pytest.mark.parametrize(
        "generator", [lucas_sequence, fibonacci_sequence, dying_rabbits_sequence]
    )
    def test_returned_list_is_independent(self, generator) -> None:
        first = generator(10)
        first.append(-1)
        first[0] = 999
        assert generator(10) == generator(10)
        assert len(generator(10)) == 10
        assert generator(10)[0] != 999
