"""
Sequences: Linear Recurrence Integer Sequences

Генераторы целочисленных последовательностей произвольной точности:
- Lucas: L(0)=2, L(1)=1, L(n)=L(n-1)+L(n-2)
- Fibonacci: F(0)=0, F(1)=1, F(n)=F(n-1)+F(n-2)
- Dying Rabbits: кролики Фибоначчи с конечной продолжительностью жизни
  (каждая пара умирает через DYING_RABBITS_LIFESPAN поколений)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Возвращается новый список длины ровно n (append-only, индекс 0 = первый член)
2. Нет скрытого состояния: одинаковое n → одинаковая последовательность
3. n < 0 → InvalidArgument
"""

from typing import Final

from bens_number_theory.logging_utils import get_logger
from bens_number_theory.math.safeguards import validate_non_negative_int

logger = get_logger(__name__)

# =============================================================================
# ПАРАМЕТРЫ ПОСЛЕДОВАТЕЛЬНОСТЕЙ
# =============================================================================

LUCAS_SEED: Final[tuple[int, int]] = (2, 1)

FIBONACCI_SEED: Final[tuple[int, int]] = (0, 1)

# Лаг рекуррентности Dying Rabbits: s[i] = s[i-1] + s[i-2] - s[i-13]
DYING_RABBITS_LIFESPAN: Final[int] = 13


# =============================================================================
# ОБЩАЯ РЕКУРРЕНТНОСТЬ
# =============================================================================


def _additive_recurrence(seed: tuple[int, int], n: int) -> list[int]:
    """Первые n членов последовательности x[i] = x[i-1] + x[i-2]."""
    terms = list(seed[:n])
    while len(terms) < n:
        terms.append(terms[-1] + terms[-2])
    return terms


# =============================================================================
# LUCAS / FIBONACCI
# =============================================================================


def lucas_sequence(n: int) -> list[int]:
    """
    Первые n чисел Люка.

    Args:
        n: Длина последовательности (>= 0)

    Returns:
        [L(0), ..., L(n-1)]

    Raises:
        InvalidArgument: Если n < 0 или n не целое

    Examples:
        >>> lucas_sequence(0)
        []
        >>> lucas_sequence(1)
        [2]
        >>> lucas_sequence(5)
        [2, 1, 3, 4, 7]
    """
    n = validate_non_negative_int(n, "n")
    return _additive_recurrence(LUCAS_SEED, n)


def fibonacci_sequence(n: int) -> list[int]:
    """
    Первые n чисел Фибоначчи.

    Args:
        n: Длина последовательности (>= 0)

    Returns:
        [F(0), ..., F(n-1)]

    Raises:
        InvalidArgument: Если n < 0 или n не целое

    Examples:
        >>> fibonacci_sequence(5)
        [0, 1, 1, 2, 3]
    """
    n = validate_non_negative_int(n, "n")
    return _additive_recurrence(FIBONACCI_SEED, n)


# =============================================================================
# DYING RABBITS
# =============================================================================


def _dying_rabbits_term(i: int, terms: list[int]) -> int:
    if i == 0:
        return 1
    if i < DYING_RABBITS_LIFESPAN:
        # Последний элемент fibonacci_sequence(i + 1), то есть F(i)
        return fibonacci_sequence(i + 1)[-1]
    return terms[-1] + terms[-2] - terms[-DYING_RABBITS_LIFESPAN]


def dying_rabbits_sequence(n: int) -> list[int]:
    """
    Последовательность Dying Rabbits длины n.

    Первые DYING_RABBITS_LIFESPAN членов совпадают с Фибоначчи (со сдвигом:
    s[0] = 1, s[i] = F(i) для 1 <= i <= 12). Далее пары, прожившие
    DYING_RABBITS_LIFESPAN поколений, вычитаются:

        s[i] = s[i-1] + s[i-2] - s[i-13]

    Args:
        n: Длина последовательности (>= 0)

    Returns:
        Список из n целых

    Raises:
        InvalidArgument: Если n < 0 или n не целое

    Examples:
        >>> dying_rabbits_sequence(5)
        [1, 1, 1, 2, 3]
    """
    n = validate_non_negative_int(n, "n")

    terms: list[int] = []
    for i in range(n):
        terms.append(_dying_rabbits_term(i, terms))

    logger.debug("dying_rabbits_sequence(%d) generated", n)
    return terms
