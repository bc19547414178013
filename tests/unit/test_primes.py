"""
Тесты для модуля Primes

Проверяет:
1. generate_primes: решето, границы, количество простых
2. is_prime / is_prime_list: пробное деление, отрицательные и граничные значения
3. is_prime_lazy: fixed-width u128 семейство
4. lucas_lehmer / is_mersenne_prime
"""

import pytest

from bens_number_theory.math.primes import (
    generate_primes,
    is_mersenne_prime,
    is_prime,
    is_prime_lazy,
    is_prime_list,
    lucas_lehmer,
)
from bens_number_theory.math.safeguards import U128_MAX, FixedWidthOverflow, InvalidArgument

I32_MAX = 2**31 - 1
I32_MIN = -(2**31)

# =============================================================================
# ТЕСТЫ: generate_primes
# =============================================================================


class TestGeneratePrimes:
    """Тесты generate_primes"""

    def test_small_limit(self) -> None:
        assert generate_primes(10) == [2, 3, 5, 7]

    def test_up_to_hundred(self) -> None:
        assert generate_primes(100) == [
            2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47, 53, 59, 61, 67, 71, 73, 79,
            83, 89, 97,
        ]

    def test_limit_is_inclusive(self) -> None:
        assert generate_primes(2) == [2]
        assert generate_primes(3) == [2, 3]
        assert generate_primes(97)[-1] == 97

    def test_no_primes_below_two(self) -> None:
        assert generate_primes(0) == []
        assert generate_primes(1) == []

    def test_no_duplicates(self) -> None:
        assert generate_primes(20) == [2, 3, 5, 7, 11, 13, 17, 19]
        assert generate_primes(30) == [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]

    @pytest.mark.parametrize(
        "limit, count",
        [(10_000, 1229), (100_000, 9592), (1_000_000, 78498)],
    )
    def test_prime_counts(self, limit: int, count: int) -> None:
        assert len(generate_primes(limit)) == count

    def test_negative_limit_rejected(self) -> None:
        with pytest.raises(InvalidArgument, match="limit must be non-negative"):
            generate_primes(-10)


# =============================================================================
# ТЕСТЫ: is_prime / is_prime_list
# =============================================================================


class TestIsPrime:
    """Тесты is_prime"""

    def test_basic(self) -> None:
        assert is_prime(9) is False
        assert is_prime(11) is True

    @pytest.mark.parametrize("n", [2, 3, 5, 7, 13, 97, 7919, 104729])
    def test_primes(self, n: int) -> None:
        assert is_prime(n)

    @pytest.mark.parametrize("n", [0, 1, 4, 6, 9, 25, 49, 7917, 104730])
    def test_non_primes(self, n: int) -> None:
        assert not is_prime(n)

    @pytest.mark.parametrize("n", [-1, -2, -7, I32_MIN])
    def test_negative_numbers(self, n: int) -> None:
        assert not is_prime(n)

    def test_mersenne_i32_max(self) -> None:
        """2^31 - 1 простое"""
        assert is_prime(I32_MAX)

    def test_agrees_with_sieve(self) -> None:
        primes = set(generate_primes(2000))
        for n in range(-5, 2001):
            assert is_prime(n) == (n in primes)

    @pytest.mark.parametrize("n", [17, 19, 23, 97, 131, 7919])
    def test_primes_with_composite_isqrt(self, n: int) -> None:
        """isqrt(n) составное: 17 -> 4, 97 -> 9, 7919 -> 88"""
        assert is_prime(n)

    def test_agrees_with_sieve_up_to_ten_thousand(self) -> None:
        primes = set(generate_primes(10_000))
        mismatches = [n for n in range(10_001) if is_prime(n) != (n in primes)]
        assert mismatches == []

    def test_large_input_needs_no_sieve(self) -> None:
        """Пробное деление без решета до isqrt(n): составное с малым делителем"""
        assert is_prime(3 * 10**30 + 3) is False
        assert is_prime(1_000_000_007) is True


class TestIsPrimeList:
    """Тесты is_prime_list"""

    def test_small_list(self) -> None:
        primes = [2, 3, 5, 7]
        assert is_prime_list(9, primes) is False
        assert is_prime_list(11, primes) is True

    def test_large_list(self) -> None:
        primes = generate_primes(100)
        assert is_prime_list(97, primes) is True
        assert is_prime_list(99, primes) is False
        assert is_prime_list(101, primes) is True

    def test_large_input(self) -> None:
        primes = generate_primes(1000)
        assert is_prime_list(997, primes) is True
        assert is_prime_list(1001, primes) is False

    def test_negative_numbers(self) -> None:
        primes = [2, 3, 5, 7]
        assert is_prime_list(-7, primes) is False
        assert is_prime_list(-11, primes) is False

    def test_list_too_short_to_prove(self) -> None:
        """Список, не покрывающий isqrt(n), не доказывает простоту"""
        primes = [2, 3, 5, 7]
        assert is_prime_list(I32_MAX, primes) is False
        assert is_prime_list(I32_MIN, primes) is False

    def test_n_in_list(self) -> None:
        assert is_prime_list(7, [2, 3, 5, 7]) is True

    def test_empty_list(self) -> None:
        assert is_prime_list(2, []) is True
        assert is_prime_list(5, []) is False


# =============================================================================
# ТЕСТЫ: is_prime_lazy (u128)
# =============================================================================


class TestIsPrimeLazy:
    """Тесты is_prime_lazy"""

    @pytest.mark.parametrize("n", [2, 3, 5, 7, 13])
    def test_prime_numbers(self, n: int) -> None:
        assert is_prime_lazy(n)

    @pytest.mark.parametrize("n", [0, 1, 4, 6, 8, 9, 10, 12, 14, 15])
    def test_non_prime_numbers(self, n: int) -> None:
        assert not is_prime_lazy(n)

    def test_large_prime_numbers(self) -> None:
        assert is_prime_lazy(1_000_000_007)
        assert is_prime_lazy(1_000_000_009)

    def test_out_of_range(self) -> None:
        with pytest.raises(FixedWidthOverflow):
            is_prime_lazy(U128_MAX + 1)
        with pytest.raises(InvalidArgument):
            is_prime_lazy(-3)


# =============================================================================
# ТЕСТЫ: Mersenne
# =============================================================================


class TestMersenne:
    """Тесты lucas_lehmer / is_mersenne_prime"""

    def test_lucas_lehmer_exponents(self) -> None:
        exponents = [p for p in generate_primes(130) if lucas_lehmer(p)]
        assert exponents == [2, 3, 5, 7, 13, 17, 19, 31, 61, 89, 107, 127]

    def test_lucas_lehmer_accepts_prime_with_composite_isqrt(self) -> None:
        assert lucas_lehmer(17) is True
        assert lucas_lehmer(23) is False

    def test_lucas_lehmer_requires_prime_exponent(self) -> None:
        with pytest.raises(InvalidArgument, match="p must be prime"):
            lucas_lehmer(4)

    @pytest.mark.parametrize("m", [3, 7, 31, 127, 8191, 131071, 524287, I32_MAX])
    def test_mersenne_primes(self, m: int) -> None:
        assert is_mersenne_prime(m)

    @pytest.mark.parametrize("m", [-1, 0, 1, 2, 5, 8, 15, 63, 2047])
    def test_not_mersenne_primes(self, m: int) -> None:
        """2047 = 23 · 89; 5 простое, но 6 не степень двойки"""
        assert not is_mersenne_prime(m)
