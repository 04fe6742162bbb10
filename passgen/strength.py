"""
passgen.strength

Strength estimates for a generation request (not for a concrete password):
- get_password_strength(...): percentage on a 20-100 scale (0 for length <= 1)
- estimate_entropy_bits(...): length * log2(pool_size)
- strength_label(percent): human readable band
"""

import math

from .errors import check_length
from .models import MAX_LENGTH, MAX_POOL_SIZE, GenerationRequest

# floor for any non-trivial password, and the share of the scale above it
BASELINE = 20.0
SCALE = 80.0


def get_password_strength(
    length: int,
    with_symbols: bool,
    with_digits: bool,
    with_uppercase: bool,
    with_lowercase: bool,
) -> float:
    """
    Strength percentage of passwords generated with these rules.

    The keyspace `length ** pool_size` is compared (logarithmically) to
    `255 ** 94`, the largest keyspace reachable with every class enabled at
    the maximum length, and mapped onto 20..100.
    """
    check_length(length)
    if length <= 1:
        return 0.0

    pool_size = GenerationRequest(
        length, with_symbols, with_digits, with_uppercase, with_lowercase
    ).pool_size()

    # exact integers, so neither side can overflow a float
    a = length ** pool_size
    b = MAX_LENGTH ** MAX_POOL_SIZE
    return BASELINE + SCALE * math.log(a, b)


def estimate_entropy_bits(
    length: int,
    with_symbols: bool,
    with_digits: bool,
    with_uppercase: bool,
    with_lowercase: bool,
) -> float:
    check_length(length)
    pool_size = GenerationRequest(
        length, with_symbols, with_digits, with_uppercase, with_lowercase
    ).pool_size()
    if length == 0 or pool_size == 0:
        return 0.0
    return length * math.log2(pool_size)


def strength_label(percent: float) -> str:
    if percent < 20:
        return "Very Weak"
    elif percent < 40:
        return "Weak"
    elif percent < 60:
        return "Fair"
    elif percent < 80:
        return "Strong"
    return "Excellent"
