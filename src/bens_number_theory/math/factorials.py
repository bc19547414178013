"""
Factorials: Arbitrary-Precision & Fixed-Width Factorial Engine

Два явно разделённых семейства функций:
- Arbitrary-precision (factorial, factorial_list): неограниченное n,
  используется оценщиками констант, где (4n)! быстро выходит за любую
  фиксированную разрядность
- Fixed-width u128 (factorial_u128, factorial_list_u128): результат обязан
  помещаться в беззнаковое 128-битное целое, n <= FACTORIAL_U128_MAX_N

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. factorial(0) == factorial(1) == 1
2. factorial(n) == n * factorial(n - 1) для n >= 2
3. Вычисление итеративное (running product), глубина стека не растёт с n
4. n < 0 → InvalidArgument
"""

from typing import Final

from bens_number_theory.logging_utils import get_logger
from bens_number_theory.math.safeguards import (
    U128_MAX,
    FixedWidthOverflow,
    validate_non_negative_int,
)

logger = get_logger(__name__)

# =============================================================================
# FIXED-WIDTH ПАРАМЕТРЫ
# =============================================================================

# Наибольшее n, для которого n! <= U128_MAX (34! ~ 2.95e38, 35! ~ 1.03e40)
FACTORIAL_U128_MAX_N: Final[int] = 34


# =============================================================================
# ARBITRARY-PRECISION
# =============================================================================


def factorial(n: int) -> int:
    """
    Точный факториал n! для неограниченного n.

    Args:
        n: Неотрицательное целое

    Returns:
        n!

    Raises:
        InvalidArgument: Если n < 0 или n не целое

    Examples:
        >>> factorial(0)
        1
        >>> factorial(5)
        120
        >>> factorial(10)
        3628800
    """
    n = validate_non_negative_int(n, "n")

    result = 1
    for k in range(2, n + 1):
        result *= k
    return result


def factorial_list(n: int) -> list[int]:
    """
    Список факториалов [1!, 2!, ..., n!].

    Каждый следующий элемент получается одним умножением предыдущего.

    Args:
        n: Неотрицательное целое (длина списка)

    Returns:
        Список длины n; пустой для n == 0

    Raises:
        InvalidArgument: Если n < 0 или n не целое

    Examples:
        >>> factorial_list(5)
        [1, 2, 6, 24, 120]
    """
    n = validate_non_negative_int(n, "n")

    result: list[int] = []
    running = 1
    for k in range(1, n + 1):
        running *= k
        result.append(running)

    logger.debug("factorial_list(%d): largest value has %d bits", n, running.bit_length())
    return result


# =============================================================================
# FIXED-WIDTH (u128)
# =============================================================================


def _validate_u128_factorial_input(n: int) -> int:
    n = validate_non_negative_int(n, "n")
    if n > FACTORIAL_U128_MAX_N:
        raise FixedWidthOverflow(
            f"{n}! does not fit in u128 (max n = {FACTORIAL_U128_MAX_N})"
        )
    return n


def factorial_u128(n: int) -> int:
    """
    Факториал n! в диапазоне u128.

    Args:
        n: Целое 0 <= n <= FACTORIAL_U128_MAX_N

    Returns:
        n! (гарантированно <= U128_MAX)

    Raises:
        InvalidArgument: Если n < 0 или n не целое
        FixedWidthOverflow: Если n > FACTORIAL_U128_MAX_N
    """
    n = _validate_u128_factorial_input(n)

    result = 1
    for k in range(2, n + 1):
        result *= k

    if result > U128_MAX:
        raise FixedWidthOverflow(f"{n}! does not fit in u128")
    return result


def factorial_list_u128(n: int) -> list[int]:
    """
    Список факториалов [1!, ..., n!] в диапазоне u128.

    Args:
        n: Целое 0 <= n <= FACTORIAL_U128_MAX_N

    Returns:
        Список длины n

    Raises:
        InvalidArgument: Если n < 0 или n не целое
        FixedWidthOverflow: Если n > FACTORIAL_U128_MAX_N
    """
    n = _validate_u128_factorial_input(n)
    return [factorial_u128(k) for k in range(1, n + 1)]
