import math
from itertools import product

import pytest

from passgen.strength import get_password_strength, estimate_entropy_bits, strength_label
from passgen.generator import Generator
from passgen.errors import InvalidLength


def test_short_passwords_have_no_strength():
    for flags in product([True, False], repeat=4):
        assert get_password_strength(0, *flags) == 0.0
        assert get_password_strength(1, *flags) == 0.0


def test_all_classes_length_ten():
    expected = 20 + 80 * math.log(10) / math.log(255)
    assert get_password_strength(10, True, True, True, True) == pytest.approx(expected)
    assert get_password_strength(10, True, True, True, True) == pytest.approx(53.24, abs=0.01)


def test_max_length_all_classes_is_full_strength():
    assert get_password_strength(255, True, True, True, True) == pytest.approx(100.0)


def test_pin_strength():
    # 10 digits out of 94 characters
    expected = 20 + 80 * (10 * math.log(5)) / (94 * math.log(255))
    assert get_password_strength(5, False, True, False, False) == pytest.approx(expected)


def test_no_class_enabled_is_the_floor():
    assert get_password_strength(10, False, False, False, False) == 20.0


def test_strength_in_range_and_monotonic():
    for flags in product([True, False], repeat=4):
        previous = 0.0
        for length in range(256):
            pct = get_password_strength(length, *flags)
            assert 0.0 <= pct <= 100.0 + 1e-9
            assert pct >= previous
            previous = pct


def test_more_classes_is_stronger():
    lower_only = get_password_strength(16, False, False, False, True)
    lower_upper = get_password_strength(16, False, False, True, True)
    everything = get_password_strength(16, True, True, True, True)
    assert lower_only < lower_upper < everything


def test_generator_delegates():
    gen = Generator()
    assert gen.get_password_strength(12, True, False, True, True) == get_password_strength(12, True, False, True, True)


def test_invalid_length():
    with pytest.raises(InvalidLength):
        get_password_strength(256, True, True, True, True)
    with pytest.raises(InvalidLength):
        estimate_entropy_bits(-3, True, True, True, True)


def test_entropy_bits():
    assert estimate_entropy_bits(0, True, True, True, True) == 0.0
    assert estimate_entropy_bits(10, False, False, False, False) == 0.0
    assert estimate_entropy_bits(16, True, True, True, True) == pytest.approx(16 * math.log2(94))
    assert estimate_entropy_bits(4, False, True, False, False) == pytest.approx(4 * math.log2(10))


def test_labels():
    assert strength_label(0.0) == "Very Weak"
    assert strength_label(20.0) == "Weak"
    assert strength_label(53.2) == "Fair"
    assert strength_label(79.9) == "Strong"
    assert strength_label(100.0) == "Excellent"
