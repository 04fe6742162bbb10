"""
passgen.models
Character alphabets, per-position rules and the generation request.
"""

import string
from dataclasses import dataclass
from enum import Enum
from typing import List

SYMBOLS = string.punctuation  # the 32 printable ASCII punctuation characters
LOWERCASE = string.ascii_lowercase
UPPERCASE = string.ascii_uppercase
DIGITS = string.digits

MIN_LENGTH = 0
MAX_LENGTH = 255
MAX_POOL_SIZE = len(SYMBOLS) + len(DIGITS) + len(UPPERCASE) + len(LOWERCASE)


class CharRule(Enum):
    """Which pool a single password position draws from."""

    SYMBOL = "symbol"
    DIGIT = "digit"
    LOWER = "lower"
    UPPER = "upper"

    @property
    def alphabet(self) -> str:
        return _ALPHABETS[self]


_ALPHABETS = {
    CharRule.SYMBOL: SYMBOLS,
    CharRule.DIGIT: DIGITS,
    CharRule.LOWER: LOWERCASE,
    CharRule.UPPER: UPPERCASE,
}

# distribution order: symbols, digits, lowercase, uppercase
RULE_ORDER = (CharRule.SYMBOL, CharRule.DIGIT, CharRule.LOWER, CharRule.UPPER)


@dataclass(frozen=True)
class GenerationRequest:
    length: int
    with_symbols: bool = False
    with_digits: bool = False
    with_uppercase: bool = False
    with_lowercase: bool = True

    @classmethod
    def random(cls, length: int) -> "GenerationRequest":
        return cls(length, True, True, True, True)

    @classmethod
    def pin(cls, length: int) -> "GenerationRequest":
        return cls(length, with_digits=True, with_lowercase=False)

    def enabled_rules(self) -> List[CharRule]:
        flags = {
            CharRule.SYMBOL: self.with_symbols,
            CharRule.DIGIT: self.with_digits,
            CharRule.LOWER: self.with_lowercase,
            CharRule.UPPER: self.with_uppercase,
        }
        return [rule for rule in RULE_ORDER if flags[rule]]

    def pool_size(self) -> int:
        return sum(len(rule.alphabet) for rule in self.enabled_rules())
