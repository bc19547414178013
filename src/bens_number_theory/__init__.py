"""
bens_number_theory: exact number-theory utilities.

Простые числа, факториалы, совершенные числа, целочисленные последовательности
и точные рациональные оценки π и золотого сечения.
"""

import logging

from bens_number_theory.logging_utils import PACKAGE_LOGGER_NAME, configure_logging
from bens_number_theory.math import (
    FixedWidthOverflow,
    InvalidArgument,
    RamanujanSatoConfig,
    RamanujanSatoEstimator,
    all_divisors,
    approx_sqrt,
    divisors,
    dying_rabbits_sequence,
    estimate_pi_ratio,
    factorial,
    factorial_list,
    factorial_list_u128,
    factorial_u128,
    fibonacci_sequence,
    generate_even_perfect_numbers,
    generate_primes,
    golden_ratio,
    is_mersenne_prime,
    is_perfect_number,
    is_prime,
    is_prime_lazy,
    is_prime_list,
    lucas_lehmer,
    lucas_sequence,
)

logging.getLogger(PACKAGE_LOGGER_NAME).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # Exceptions
    "FixedWidthOverflow",
    "InvalidArgument",
    # Logging
    "configure_logging",
    # Factorials
    "factorial",
    "factorial_list",
    "factorial_list_u128",
    "factorial_u128",
    # Sequences
    "dying_rabbits_sequence",
    "fibonacci_sequence",
    "lucas_sequence",
    # Constants
    "RamanujanSatoConfig",
    "RamanujanSatoEstimator",
    "approx_sqrt",
    "estimate_pi_ratio",
    "golden_ratio",
    # Primes
    "generate_primes",
    "is_mersenne_prime",
    "is_prime",
    "is_prime_lazy",
    "is_prime_list",
    "lucas_lehmer",
    # Perfect numbers
    "all_divisors",
    "divisors",
    "generate_even_perfect_numbers",
    "is_perfect_number",
]
