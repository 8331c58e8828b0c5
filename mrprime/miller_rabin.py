# mrprime/miller_rabin.py
# Miller–Rabin probable-prime test with injected randomness
# - n-1 = d * 2^s decomposition
# - uniform witness draw from [2, n-3]
# - strong-probable-prime round per witness (gmpy2 powmod)

from __future__ import annotations
import logging, operator, random
from typing import Optional, Protocol, Tuple

import gmpy2

from .errors import DegenerateRange, InvalidCandidate, InvalidRoundCount

log = logging.getLogger(__name__)

DEFAULT_ROUNDS = 10


class RandomSource(Protocol):
    def randrange(self, start: int, stop: int = ..., step: int = ...) -> int: ...


# ---------- Argument checks ----------

def check_rounds(rounds) -> int:
    """Return rounds as an int, raising InvalidRoundCount unless it is >= 1."""
    try:
        r = operator.index(rounds)
    except TypeError:
        raise InvalidRoundCount(rounds) from None
    if r <= 0:
        raise InvalidRoundCount(rounds)
    return r

def check_candidate(num) -> int:
    try:
        return operator.index(num)
    except TypeError:
        raise InvalidCandidate(num) from None

# ---------- Building blocks ----------

def decompose(num: int) -> Tuple[int, int]:
    """Split num-1 into (d, s) with num-1 == d * 2**s and d odd."""
    num = check_candidate(num)
    if num < 2:
        raise DegenerateRange(num, 2)
    d = num - 1
    s = 0
    while d % 2 == 0:
        d //= 2
        s += 1
    return d, s

def draw_witness(num: int, rng: RandomSource) -> int:
    """Uniform witness in [2, num-3]; needs num >= 5."""
    num = check_candidate(num)
    if num < 5:
        raise DegenerateRange(num, 5)
    return 2 + rng.randrange(num - 4)

def survives_witness(num: int, witness: int, d: int, s: int) -> bool:
    """
    One strong round for base `witness`.
    False means `witness` proves num composite; True means the round passed.
    """
    x = gmpy2.powmod(witness, d, num)
    if x == 1 or x == num - 1:
        return True
    for _ in range(s - 1):
        x = gmpy2.powmod(x, 2, num)
        if x == 1:
            # nontrivial square root of 1
            return False
        if x == num - 1:
            break
    return x == num - 1

# ---------- Public predicate ----------

def is_probably_prime(num: int, rounds: int = DEFAULT_ROUNDS,
                      rng: Optional[RandomSource] = None) -> bool:
    """
    Miller–Rabin test. True means num is a strong probable prime after
    `rounds` random witnesses (error <= 4**-rounds); False is always certain.

    `rng` is any object with randrange(); a fresh random.Random() is used
    when it is omitted.
    """
    rounds = check_rounds(rounds)
    num = check_candidate(num)

    if num == 2 or num == 3:
        return True
    if num % 2 == 0 or num <= 1:
        return False

    if rng is None:
        rng = random.Random()

    d, s = decompose(num)
    for i in range(rounds):
        a = draw_witness(num, rng)
        if not survives_witness(num, a, d, s):
            log.debug("composite n_bits=%d round=%d witness=%d", num.bit_length(), i + 1, a)
            return False
    log.debug("probable_prime n_bits=%d rounds=%d", num.bit_length(), rounds)
    return True
