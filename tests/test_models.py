from passgen.models import (
    SYMBOLS, DIGITS, LOWERCASE, UPPERCASE, MAX_POOL_SIZE, CharRule, GenerationRequest,
)


def test_alphabet_sizes():
    assert len(SYMBOLS) == 32
    assert len(DIGITS) == 10
    assert len(LOWERCASE) == 26
    assert len(UPPERCASE) == 26
    assert MAX_POOL_SIZE == 94
    assert CharRule.SYMBOL.alphabet == SYMBOLS


def test_enabled_rules_follow_class_order():
    req = GenerationRequest(8, with_symbols=True, with_digits=True, with_uppercase=True)
    assert req.enabled_rules() == [CharRule.SYMBOL, CharRule.DIGIT, CharRule.LOWER, CharRule.UPPER]
    assert req.pool_size() == 94


def test_fixed_types():
    assert GenerationRequest.pin(4).enabled_rules() == [CharRule.DIGIT]
    assert GenerationRequest.pin(4).pool_size() == 10
    assert GenerationRequest.random(4).pool_size() == 94
    assert GenerationRequest(4, False, False, False, False).enabled_rules() == []
