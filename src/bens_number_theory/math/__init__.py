"""
Math modules для bens_number_theory

Точная целочисленная и рациональная арифметика: факториалы, последовательности,
оценки констант, простые и совершенные числа.
"""

# Safeguards
from bens_number_theory.math.safeguards import (
    # Fixed-width границы
    U128_MAX,
    # Exceptions
    FixedWidthOverflow,
    InvalidArgument,
    # Validation
    is_integer_value,
    validate_integer,
    validate_non_negative_int,
    validate_positive_int,
    validate_u128,
    # Rational glue
    reciprocal,
    to_rational,
)

# Factorials
from bens_number_theory.math.factorials import (
    FACTORIAL_U128_MAX_N,
    factorial,
    factorial_list,
    factorial_list_u128,
    factorial_u128,
)

# Sequences
from bens_number_theory.math.sequences import (
    DYING_RABBITS_LIFESPAN,
    dying_rabbits_sequence,
    fibonacci_sequence,
    lucas_sequence,
)

# Constants
from bens_number_theory.math.constants import (
    SQRT_ITERATIONS_DEFAULT,
    RamanujanSatoConfig,
    RamanujanSatoEstimator,
    approx_sqrt,
    estimate_pi_ratio,
    golden_ratio,
)

# Primes
from bens_number_theory.math.primes import (
    generate_primes,
    is_mersenne_prime,
    is_prime,
    is_prime_lazy,
    is_prime_list,
    lucas_lehmer,
)

# Perfect numbers
from bens_number_theory.math.perfect_numbers import (
    all_divisors,
    divisors,
    generate_even_perfect_numbers,
    is_perfect_number,
)

__all__ = [
    # Safeguards - Constants
    "U128_MAX",
    # Safeguards - Exceptions
    "FixedWidthOverflow",
    "InvalidArgument",
    # Safeguards - Validation
    "is_integer_value",
    "validate_integer",
    "validate_non_negative_int",
    "validate_positive_int",
    "validate_u128",
    # Safeguards - Rational glue
    "reciprocal",
    "to_rational",
    # Factorials
    "FACTORIAL_U128_MAX_N",
    "factorial",
    "factorial_list",
    "factorial_list_u128",
    "factorial_u128",
    # Sequences
    "DYING_RABBITS_LIFESPAN",
    "dying_rabbits_sequence",
    "fibonacci_sequence",
    "lucas_sequence",
    # Constants - Types
    "RamanujanSatoConfig",
    "RamanujanSatoEstimator",
    # Constants - Functions
    "SQRT_ITERATIONS_DEFAULT",
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
