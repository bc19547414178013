"""
Constants: Exact Rational Estimators of Mathematical Constants

Модуль оценивает математические константы точными рациональными числами:
- approx_sqrt: метод Ньютона для √k с фиксированным числом итераций
- Ramanujan–Sato series для π (RamanujanSatoEstimator, estimate_pi_ratio)
- Золотое сечение φ как отношение соседних чисел Люка (golden_ratio)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все промежуточные и итоговые значения - fractions.Fraction (без float)
2. Обращение суммы ряда - точная перестановка p/q -> q/p (safeguards.reciprocal)
3. n_terms = 0 → InvalidArgument (нет деления на пустую сумму)
4. Результат детерминирован и зависит только от аргументов и конфигурации

ФОРМУЛЫ:
    1/π = A × Σ_{i>=0} B_i × C_i

    A   = 2√2 / 9801,  √2 ≈ approx_sqrt(2, 10)
    B_i = (4i)! (1103 + 26390 i) / (4^(4i) (i!)^4)
    C_i = 1 / 99^(4i)

    π ≈ 1 / (A × Σ_{i=0}^{n_terms-1} B_i C_i)

    φ ≈ L(n-1) / L(n-2)
"""

from fractions import Fraction
from typing import Final

from pydantic import BaseModel, Field

from bens_number_theory.logging_utils import get_logger
from bens_number_theory.math.factorials import factorial
from bens_number_theory.math.safeguards import (
    InvalidArgument,
    reciprocal,
    to_rational,
    validate_integer,
    validate_non_negative_int,
    validate_positive_int,
)
from bens_number_theory.math.sequences import lucas_sequence

logger = get_logger(__name__)

# =============================================================================
# RAMANUJAN–SATO ПАРАМЕТРЫ
# =============================================================================

# Подкоренное значение в множителе A = 2√2 / 9801
SQRT_SEED_DEFAULT: Final[int] = 2

# Число итераций Ньютона для √2 в множителе A.
# Значение 10 закреплено: от него зависят точные числитель и знаменатель результата
SQRT_ITERATIONS_DEFAULT: Final[int] = 10

SCALE_NUMERATOR: Final[int] = 2
SCALE_DENOMINATOR: Final[int] = 9801

TERM_CONSTANT: Final[int] = 1103
TERM_SLOPE: Final[int] = 26390

# Основания степеней 4^(4i) и 99^(4i)
FACTORIAL_POWER_BASE: Final[int] = 4
GEOMETRIC_BASE: Final[int] = 99


# =============================================================================
# SQUARE ROOT (NEWTON)
# =============================================================================


def approx_sqrt(k: int | Fraction, iterations: int) -> Fraction:
    """
    Рациональное приближение √k методом Ньютона.

    x_0 = k, x_{i+1} = (x_i + k / x_i) / 2, ровно `iterations` шагов
    (без проверки сходимости по допуску).

    Args:
        k: Положительное int или Fraction
        iterations: Число итераций (>= 0); 0 возвращает само k

    Returns:
        x_iterations как Fraction

    Raises:
        InvalidArgument: Если k <= 0, k не рациональное или iterations < 0

    Examples:
        >>> approx_sqrt(2, 1)
        Fraction(3, 2)
        >>> approx_sqrt(2, 3)
        Fraction(577, 408)
        >>> approx_sqrt(4, 0)
        Fraction(4, 1)
    """
    target = to_rational(k, "k")
    if target <= 0:
        raise InvalidArgument(f"k must be positive, got {target}")
    iterations = validate_non_negative_int(iterations, "iterations")

    approx = target
    for _ in range(iterations):
        approx = (approx + target / approx) / 2
    return approx


# =============================================================================
# π: RAMANUJAN–SATO SERIES
# =============================================================================


class RamanujanSatoConfig(BaseModel):
    """
    Конфигурация оценщика π.

    Immutable модель (frozen=True). Значения по умолчанию воспроизводят
    закреплённый результат estimate_pi_ratio(1).
    """

    sqrt_seed: int = Field(
        default=SQRT_SEED_DEFAULT, gt=0, description="Подкоренное значение в множителе A"
    )
    sqrt_iterations: int = Field(
        default=SQRT_ITERATIONS_DEFAULT,
        ge=1,
        description="Итерации Ньютона для √sqrt_seed (точность множителя A)",
    )

    model_config = {"frozen": True}  # Immutable


class RamanujanSatoEstimator:
    """
    Оценщик π по ряду Рамануджана–Сато.

    Каждый дополнительный член ряда добавляет примерно 8 верных
    десятичных знаков. Стоимость растёт вместе с (4i)!, поэтому вызывающий
    код ограничивает её только через n_terms.
    """

    def __init__(self, config: RamanujanSatoConfig | None = None):
        """
        Args:
            config: конфигурация (опционально, используется default)
        """
        self.config = config or RamanujanSatoConfig()

    def scale_factor(self) -> Fraction:
        """
        Множитель A = 2√2 / 9801 (√2 через approx_sqrt).

        Returns:
            A как Fraction
        """
        root = approx_sqrt(self.config.sqrt_seed, self.config.sqrt_iterations)
        return SCALE_NUMERATOR * root / SCALE_DENOMINATOR

    def term(self, i: int) -> Fraction:
        """
        Член ряда B_i × C_i.

        Args:
            i: Индекс члена (>= 0)

        Returns:
            (4i)! (1103 + 26390 i) / (4^(4i) (i!)^4 99^(4i))

        Raises:
            InvalidArgument: Если i < 0
        """
        i = validate_non_negative_int(i, "i")

        b_top = factorial(4 * i) * (TERM_CONSTANT + TERM_SLOPE * i)
        b_bottom = FACTORIAL_POWER_BASE ** (4 * i) * factorial(i) ** 4
        b_i = Fraction(b_top, b_bottom)
        c_i = Fraction(1, GEOMETRIC_BASE ** (4 * i))
        return b_i * c_i

    def partial_sum(self, n_terms: int) -> Fraction:
        """
        Частичная сумма Σ_{i=0}^{n_terms-1} B_i C_i.

        Args:
            n_terms: Число членов (>= 1)

        Returns:
            Сумма как Fraction

        Raises:
            InvalidArgument: Если n_terms < 1
        """
        n_terms = validate_positive_int(n_terms, "n_terms")

        total = Fraction(0)
        for i in range(n_terms):
            total += self.term(i)
        return total

    def estimate(self, n_terms: int) -> Fraction:
        """
        Оценка π = 1 / (A × Σ B_i C_i).

        Args:
            n_terms: Число членов ряда (>= 1)

        Returns:
            Точное рациональное приближение π

        Raises:
            InvalidArgument: Если n_terms < 1 или не целое
        """
        total = self.partial_sum(n_terms)
        result = reciprocal(self.scale_factor() * total)

        logger.debug(
            "Ramanujan-Sato estimate: n_terms=%d, numerator_bits=%d, denominator_bits=%d",
            n_terms,
            result.numerator.bit_length(),
            result.denominator.bit_length(),
        )
        return result


def estimate_pi_ratio(n_terms: int) -> Fraction:
    """
    Точное рациональное приближение π по n_terms членам ряда Рамануджана–Сато.

    Args:
        n_terms: Число членов ряда (>= 1)

    Returns:
        Fraction, десятичное разложение которого приближает π

    Raises:
        InvalidArgument: Если n_terms < 1 или не целое

    Examples:
        >>> str(estimate_pi_ratio(1)).startswith("158853645")
        True
        >>> str(estimate_pi_ratio(1)).endswith("899151951")
        True
    """
    return RamanujanSatoEstimator().estimate(n_terms)


# =============================================================================
# φ: GOLDEN RATIO
# =============================================================================


def golden_ratio(n: int) -> Fraction:
    """
    Приближение золотого сечения отношением соседних чисел Люка.

    Для n >= 2 возвращается L(n-1) / L(n-2) из lucas_sequence(n).
    Знаменатель никогда не равен нулю: L(0) = 2, дальше числа Люка
    положительны.

    Args:
        n: Длина последовательности Люка

    Returns:
        Fraction(0) для n < 2, иначе L(n-1) / L(n-2)

    Raises:
        InvalidArgument: Если n не целое

    Examples:
        >>> golden_ratio(1)
        Fraction(0, 1)
        >>> golden_ratio(2)
        Fraction(1, 2)
        >>> golden_ratio(5)
        Fraction(7, 4)
    """
    n = validate_integer(n, "n")
    if n < 2:
        return Fraction(0)

    lucas = lucas_sequence(n)
    numerator = lucas[-1]
    denominator = lucas[-2]
    return Fraction(numerator, denominator)
