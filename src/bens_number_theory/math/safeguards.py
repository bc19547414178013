"""
Safeguards: Argument Validation & Exact Rational Glue

Модуль обеспечивает корректность входов и точность всех рациональных операций:
- Таксономия ошибок (InvalidArgument, FixedWidthOverflow)
- Валидация целочисленных аргументов (тип, знак, диапазон fixed-width)
- Построение точных рациональных значений (fractions.Fraction)
- Точное обращение дроби p/q -> q/p (перестановка числителя и знаменателя)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Float никогда не попадает в точную арифметику (to_rational отвергает float)
2. Знаменатель всегда > 0, знак хранится только в числителе
3. reciprocal: буквальная перестановка, без приближений и корней
4. Все ошибки выбрасываются на границе функции, без fallback значений
"""

import numbers
from fractions import Fraction
from typing import Final

# =============================================================================
# FIXED-WIDTH ГРАНИЦЫ
# =============================================================================

# Максимальное значение беззнакового 128-битного целого
U128_MAX: Final[int] = 2**128 - 1


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidArgument(ValueError):
    """
    Нарушение предусловия функции.

    Примеры: отрицательный аргумент factorial, n_terms = 0 для оценки π,
    неположительное k для approx_sqrt, float вместо целого.
    """

    pass


class FixedWidthOverflow(OverflowError):
    """
    Результат не помещается в fixed-width (u128) представление.

    Возникает только в fixed-width семействе функций. Arbitrary-precision
    ядро переполнений не имеет.
    """

    pass


# =============================================================================
# ВАЛИДАЦИЯ ЦЕЛЫХ
# =============================================================================


def is_integer_value(value: object) -> bool:
    """
    Проверка, является ли значение целым (но не bool).

    Args:
        value: Проверяемое значение

    Returns:
        True для int и других numbers.Integral, False для bool/float/Fraction
    """
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def validate_integer(value: object, name: str) -> int:
    """
    Валидация, что значение целое.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        value как int

    Raises:
        InvalidArgument: Если value не целое (float, bool, str, ...)
    """
    if not is_integer_value(value):
        raise InvalidArgument(f"{name} must be an integer, got {value!r}")
    return int(value)


def validate_non_negative_int(value: object, name: str) -> int:
    """
    Валидация, что значение неотрицательное целое.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        value как int

    Raises:
        InvalidArgument: Если value не целое или value < 0

    Examples:
        >>> validate_non_negative_int(5, "n")
        5
        >>> validate_non_negative_int(-1, "n")  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        InvalidArgument: n must be non-negative, got -1
    """
    n = validate_integer(value, name)
    if n < 0:
        raise InvalidArgument(f"{name} must be non-negative, got {n}")
    return n


def validate_positive_int(value: object, name: str) -> int:
    """
    Валидация, что значение положительное целое (>= 1).

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        value как int

    Raises:
        InvalidArgument: Если value не целое или value < 1
    """
    n = validate_integer(value, name)
    if n < 1:
        raise InvalidArgument(f"{name} must be >= 1, got {n}")
    return n


def validate_u128(value: object, name: str) -> int:
    """
    Валидация, что значение помещается в u128.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        value как int

    Raises:
        InvalidArgument: Если value не целое или отрицательное
        FixedWidthOverflow: Если value > U128_MAX
    """
    n = validate_non_negative_int(value, name)
    if n > U128_MAX:
        raise FixedWidthOverflow(f"{name} does not fit in u128, got {n}")
    return n


# =============================================================================
# ТОЧНЫЕ РАЦИОНАЛЬНЫЕ ЗНАЧЕНИЯ
# =============================================================================


def to_rational(value: object, name: str = "value") -> Fraction:
    """
    Построение точного рационального значения.

    Целое превращается в дробь со знаменателем 1, Fraction возвращается
    как есть. Float отвергается: точная арифметика не принимает
    приближённых значений.

    Args:
        value: int или Fraction
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        Fraction в несократимом виде

    Raises:
        InvalidArgument: Если value не int и не Fraction

    Examples:
        >>> to_rational(7)
        Fraction(7, 1)
        >>> to_rational(Fraction(6, 4))
        Fraction(3, 2)
    """
    if isinstance(value, Fraction):
        return value
    if is_integer_value(value):
        return Fraction(int(value))
    raise InvalidArgument(f"{name} must be an int or Fraction, got {value!r}")


def reciprocal(value: object) -> Fraction:
    """
    Точное обращение дроби: p/q -> q/p.

    Числитель и знаменатель переставляются буквально, знак переносится
    в новый числитель, так что знаменатель остаётся положительным.
    Несократимость сохраняется автоматически (gcd(p, q) = 1).

    Args:
        value: int или Fraction (ненулевое)

    Returns:
        1 / value как Fraction

    Raises:
        InvalidArgument: Если value == 0 или не рациональное

    Examples:
        >>> reciprocal(Fraction(3, 7))
        Fraction(7, 3)
        >>> reciprocal(Fraction(-3, 7))
        Fraction(-7, 3)
        >>> reciprocal(5)
        Fraction(1, 5)
    """
    frac = to_rational(value)
    if frac.numerator == 0:
        raise InvalidArgument("reciprocal of zero is undefined")

    if frac.numerator < 0:
        return Fraction(-frac.denominator, -frac.numerator)
    return Fraction(frac.denominator, frac.numerator)
