"""
passgen.generator
Rule-balanced password generator backed by the OS entropy source.
"""

import logging
from collections import Counter, deque
from secrets import SystemRandom
from typing import Deque, Iterable, List, Optional

from .errors import NoClassEnabled, check_length
from .models import CharRule, GenerationRequest
from . import strength

log = logging.getLogger(__name__)

PLACEMENTS = ("front_back", "uniform")


class Generator:
    """
    Generate passwords where every enabled character class is spread evenly.

    `placement` picks how the evenly distributed rules are reordered:
    "front_back" inserts each rule at the front or back of the result on a
    coin flip, "uniform" applies a full uniform shuffle. Both keep the same
    number of positions per class.

    The random source is owned by the instance. `SystemRandom` reads
    os.urandom and cannot be seeded; an injected `rng` is only meant for
    tests and must not be shared across threads without a lock.
    """

    def __init__(self, placement: str = "front_back", rng: Optional[SystemRandom] = None):
        if placement not in PLACEMENTS:
            raise ValueError(f"placement must be one of {PLACEMENTS}, got {placement!r}")
        self.placement = placement
        self._rng = rng or SystemRandom()
        self._pools = {rule: tuple(rule.alphabet) for rule in CharRule}

    def generate_password(
        self,
        length: int,
        with_symbols: bool,
        with_digits: bool,
        with_uppercase: bool,
        with_lowercase: bool,
    ) -> str:
        return self.generate(
            GenerationRequest(length, with_symbols, with_digits, with_uppercase, with_lowercase)
        )

    def generate(self, request: GenerationRequest) -> str:
        check_length(request.length)
        if request.length == 0:
            return ""

        rules = self.distribute_rules(request)
        placed = self.place_rules(rules)
        return self.fill_password(placed)

    def get_password_strength(
        self,
        length: int,
        with_symbols: bool,
        with_digits: bool,
        with_uppercase: bool,
        with_lowercase: bool,
    ) -> float:
        return strength.get_password_strength(
            length, with_symbols, with_digits, with_uppercase, with_lowercase
        )

    def distribute_rules(self, request: GenerationRequest) -> List[CharRule]:
        """
        Round-robin the enabled rules over `request.length` positions.

        With k enabled classes each one gets floor(length / k) or
        ceil(length / k) positions, earlier classes taking the remainder.
        """
        queue = deque(request.enabled_rules())
        if not queue and request.length > 0:
            raise NoClassEnabled()

        distributed = []
        for _ in range(request.length):
            rule = queue.popleft()
            distributed.append(rule)
            queue.append(rule)

        log.debug(
            "distributed %d positions over %d classes: %s",
            request.length,
            len(queue),
            {rule.value: n for rule, n in Counter(distributed).items()},
        )
        return distributed

    def place_rules(self, rules: Iterable[CharRule]) -> List[CharRule]:
        if self.placement == "uniform":
            shuffled = list(rules)
            self._rng.shuffle(shuffled)
            return shuffled

        placed: Deque[CharRule] = deque()
        for rule in rules:
            if self._rng.getrandbits(1):
                placed.appendleft(rule)
            else:
                placed.append(rule)
        return list(placed)

    def fill_password(self, rules: Iterable[CharRule]) -> str:
        return "".join(self._rng.choice(self._pools[rule]) for rule in rules)


def generate_password(
    length: int = 10,
    with_symbols: bool = True,
    with_digits: bool = True,
    with_uppercase: bool = True,
    with_lowercase: bool = True,
    placement: str = "front_back",
) -> str:
    """
    One-off helper: a fresh Generator per call, so nothing random is shared
    at module level.
    """
    return Generator(placement=placement).generate_password(
        length, with_symbols, with_digits, with_uppercase, with_lowercase
    )
