"""
Perfect Numbers: Divisors & Euclid–Euler Generation

- divisors / all_divisors: делители n (без n / включая n)
- is_perfect_number: сумма собственных делителей равна n
- generate_even_perfect_numbers: теорема Евклида–Эйлера,
  2^(p-1) (2^p - 1) для простых Мерсенна 2^p - 1
"""

import math

from bens_number_theory.math.primes import generate_primes, lucas_lehmer
from bens_number_theory.math.safeguards import validate_non_negative_int, validate_positive_int


def all_divisors(n: int) -> list[int]:
    """
    Все положительные делители n по возрастанию (включая 1 и n).

    Args:
        n: Положительное целое

    Returns:
        Отсортированный список без повторов

    Raises:
        InvalidArgument: Если n < 1 или не целое

    Examples:
        >>> all_divisors(10)
        [1, 2, 5, 10]
        >>> all_divisors(20)
        [1, 2, 4, 5, 10, 20]
    """
    n = validate_positive_int(n, "n")

    found: set[int] = set()
    for i in range(1, math.isqrt(n) + 1):
        if n % i == 0:
            found.add(i)
            found.add(n // i)
    return sorted(found)


def divisors(n: int) -> list[int]:
    """
    Собственные делители n по возрастанию (все делители, кроме самого n).

    Args:
        n: Положительное целое

    Returns:
        Отсортированный список; пустой для n == 1

    Raises:
        InvalidArgument: Если n < 1 или не целое

    Examples:
        >>> divisors(10)
        [1, 2, 5]
        >>> divisors(28)
        [1, 2, 4, 7, 14]
    """
    return all_divisors(n)[:-1]


def is_perfect_number(n: int) -> bool:
    """
    Проверка совершенности: сумма собственных делителей равна n.

    Args:
        n: Положительное целое

    Returns:
        True для 6, 28, 496, 8128, ...

    Raises:
        InvalidArgument: Если n < 1 или не целое
    """
    return sum(divisors(n)) == n


def generate_even_perfect_numbers(limit: int) -> list[int]:
    """
    Чётные совершенные числа по теореме Евклида–Эйлера.

    Для каждого простого p <= limit, такого что 2^p - 1 простое
    (тест Люка–Лемера), возвращается 2^(p-1) (2^p - 1).

    Args:
        limit: Верхняя граница показателя p (включительно)

    Returns:
        Возрастающий список чётных совершенных чисел

    Raises:
        InvalidArgument: Если limit < 0 или не целое

    Examples:
        >>> generate_even_perfect_numbers(7)
        [6, 28, 496, 8128]
    """
    limit = validate_non_negative_int(limit, "limit")
    return [
        (1 << (p - 1)) * ((1 << p) - 1)
        for p in generate_primes(limit)
        if lucas_lehmer(p)
    ]
