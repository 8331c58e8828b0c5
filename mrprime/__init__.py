from .errors import (
    ConfigError,
    DegenerateRange,
    InvalidCandidate,
    InvalidRoundCount,
    PrimalityError,
)
from .miller_rabin import (
    DEFAULT_ROUNDS,
    decompose,
    draw_witness,
    is_probably_prime,
    survives_witness,
)
__all__ = [
    "DEFAULT_ROUNDS", "decompose", "draw_witness", "is_probably_prime", "survives_witness",
    "ConfigError", "DegenerateRange", "InvalidCandidate", "InvalidRoundCount", "PrimalityError",
]
