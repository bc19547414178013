"""
Primes: Primality Testing & Prime Generation

- generate_primes: решето Эратосфена, все простые p <= limit
- is_prime_list: пробное деление на заданный возрастающий список простых
- is_prime: пробное деление нечётными делителями до isqrt(n)
- is_prime_lazy: fixed-width (u128) пробное деление нечётными делителями
- lucas_lehmer / is_mersenne_prime: простые Мерсенна 2^p - 1

Модуль не используется оценщиками констант.
"""

import math
from collections.abc import Sequence

from bens_number_theory.logging_utils import get_logger
from bens_number_theory.math.safeguards import (
    InvalidArgument,
    validate_integer,
    validate_non_negative_int,
    validate_u128,
)

logger = get_logger(__name__)


# =============================================================================
# ГЕНЕРАЦИЯ
# =============================================================================


def generate_primes(limit: int) -> list[int]:
    """
    Все простые числа p <= limit в порядке возрастания (решето Эратосфена).

    Args:
        limit: Верхняя граница (включительно), >= 0

    Returns:
        Список простых; пустой для limit < 2

    Raises:
        InvalidArgument: Если limit < 0 или не целое

    Examples:
        >>> generate_primes(10)
        [2, 3, 5, 7]
        >>> generate_primes(1)
        []
    """
    limit = validate_non_negative_int(limit, "limit")
    if limit < 2:
        return []

    sieve = bytearray([1]) * (limit + 1)
    sieve[0] = sieve[1] = 0
    for p in range(2, math.isqrt(limit) + 1):
        if sieve[p]:
            sieve[p * p :: p] = bytes(len(range(p * p, limit + 1, p)))

    primes = [p for p in range(limit + 1) if sieve[p]]
    logger.debug("generate_primes(%d): %d primes", limit, len(primes))
    return primes


# =============================================================================
# ПРОВЕРКИ
# =============================================================================


def is_prime_list(n: int, primes: Sequence[int]) -> bool:
    """
    Проверка простоты пробным делением на возрастающий список простых.

    Проверка завершается успешно, как только очередное простое превышает
    isqrt(n), либо когда список исчерпан и покрывает isqrt(n). Если список
    слишком короткий, чтобы доказать простоту, возвращается False.

    Args:
        n: Проверяемое число
        primes: Возрастающий список простых (обычно generate_primes)

    Returns:
        True если n доказуемо простое по данному списку

    Examples:
        >>> is_prime_list(9, [2, 3, 5, 7])
        False
        >>> is_prime_list(11, [2, 3, 5, 7])
        True
    """
    n = validate_integer(n, "n")
    if n < 2:
        return False

    root = math.isqrt(n)
    for p in primes:
        if p > root:
            return True
        if n % p == 0:
            return n == p

    # Список исчерпан: простота доказана только если он покрыл isqrt(n)
    covered = primes[-1] if primes else 1
    return covered >= root


def _trial_division(n: int) -> bool:
    """Пробное деление на 2 и нечётные числа до isqrt(n), память O(1)."""
    if n < 2:
        return False
    if n == 2:
        return True
    if n % 2 == 0:
        return False

    for divisor in range(3, math.isqrt(n) + 1, 2):
        if n % divisor == 0:
            return False
    return True


def is_prime(n: int) -> bool:
    """
    Проверка простоты пробным делением до isqrt(n).

    Args:
        n: Проверяемое целое (любого знака)

    Returns:
        True если n простое; False для n < 2

    Examples:
        >>> is_prime(9)
        False
        >>> is_prime(97)
        True
    """
    n = validate_integer(n, "n")
    return _trial_division(n)


def is_prime_lazy(n: int) -> bool:
    """
    Fixed-width проверка простоты для u128: деление на 2 и нечётные числа.

    Args:
        n: Целое 0 <= n <= U128_MAX

    Returns:
        True если n простое

    Raises:
        InvalidArgument: Если n < 0 или не целое
        FixedWidthOverflow: Если n > U128_MAX
    """
    n = validate_u128(n, "n")
    return _trial_division(n)


# =============================================================================
# MERSENNE
# =============================================================================


def lucas_lehmer(p: int) -> bool:
    """
    Тест Люка–Лемера: является ли 2^p - 1 простым.

    s_0 = 4, s_{k+1} = s_k^2 - 2 (mod 2^p - 1); 2^p - 1 простое тогда
    и только тогда, когда s_{p-2} == 0. Для p == 2 ответ True (3 простое).

    Args:
        p: Простой показатель

    Returns:
        True если 2^p - 1 - простое Мерсенна

    Raises:
        InvalidArgument: Если p не простое
    """
    p = validate_integer(p, "p")
    if not is_prime(p):
        raise InvalidArgument(f"p must be prime, got {p}")
    if p == 2:
        return True

    mersenne = (1 << p) - 1
    s = 4
    for _ in range(p - 2):
        s = (s * s - 2) % mersenne
    return s == 0


def is_mersenne_prime(m: int) -> bool:
    """
    Проверка, является ли m простым Мерсенна (m = 2^p - 1, p и m простые).

    Args:
        m: Проверяемое целое

    Returns:
        True для 3, 7, 31, 127, 8191, ...

    Examples:
        >>> is_mersenne_prime(31)
        True
        >>> is_mersenne_prime(15)
        False
    """
    m = validate_integer(m, "m")
    if m < 3:
        return False

    # m + 1 должно быть степенью двойки
    if (m + 1) & m:
        return False

    exponent = (m + 1).bit_length() - 1
    return is_prime(exponent) and lucas_lehmer(exponent)
