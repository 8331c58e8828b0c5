# mrprime/analysis.py — strong liars and false-positive rates

from __future__ import annotations
import csv, logging, random
from dataclasses import dataclass
from typing import List, Optional, Sequence

import numpy as np

from .errors import DegenerateRange
from .miller_rabin import (
    RandomSource, check_candidate, check_rounds, decompose, is_probably_prime, survives_witness,
)

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class RateRow:
    rounds: int
    observed: float
    bound: float


def error_bound(rounds: int) -> float:
    """Worst-case false-positive probability 4**-rounds."""
    return 4.0 ** -check_rounds(rounds)

def _check_odd_range(num: int) -> int:
    num = check_candidate(num)
    if num < 5 or num % 2 == 0:
        raise DegenerateRange(num, 5)
    return num

def is_strong_liar(num: int, witness: int) -> bool:
    """True when `witness` lets odd num >= 5 pass a round."""
    num = _check_odd_range(num)
    if not 2 <= witness <= num - 3:
        raise ValueError(f"witness must lie in [2, {num - 3}], got {witness}")
    d, s = decompose(num)
    return survives_witness(num, witness, d, s)

def strong_liars(num: int) -> List[int]:
    """
    Every base in the witness range [2, num-3] that does not expose num.
    For a prime this is the whole range.
    """
    num = _check_odd_range(num)
    d, s = decompose(num)
    return [a for a in range(2, num - 2) if survives_witness(num, a, d, s)]

def false_positive_rate(num: int, rounds: int, runs: int,
                        rng: Optional[RandomSource] = None) -> float:
    """Fraction of `runs` independent tests of num that answer True."""
    rounds = check_rounds(rounds)
    if runs <= 0:
        raise ValueError("runs must be positive")
    rng = rng if rng is not None else random.Random()
    outcomes = np.fromiter(
        (is_probably_prime(num, rounds, rng) for _ in range(runs)),
        dtype=bool, count=runs,
    )
    return float(outcomes.mean())

def rate_table(num: int, max_rounds: int, runs: int,
               rng: Optional[RandomSource] = None) -> List[RateRow]:
    max_rounds = check_rounds(max_rounds)
    rng = rng if rng is not None else random.Random()
    rows = []
    for r in range(1, max_rounds + 1):
        observed = false_positive_rate(num, r, runs, rng)
        rows.append(RateRow(rounds=r, observed=observed, bound=error_bound(r)))
        log.info("rate n_bits=%d rounds=%d observed=%.6f bound=%.6g",
                 check_candidate(num).bit_length(), r, observed, rows[-1].bound)
    return rows

def write_rate_csv(rows: Sequence[RateRow], path: str) -> None:
    with open(path, "w", newline="") as f:
        w = csv.writer(f)
        w.writerow(("rounds", "observed", "bound"))
        for row in rows:
            w.writerow((row.rounds, f"{row.observed:.6f}", f"{row.bound:.6g}"))

def plot_rates(rows: Sequence[RateRow], path: str, num: int) -> None:
    """Semilog plot of observed rate vs the 4**-r bound, saved to `path`."""
    import matplotlib
    matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    r = np.array([row.rounds for row in rows])
    observed = np.array([row.observed for row in rows])
    bound = np.array([row.bound for row in rows])

    fig, ax = plt.subplots(figsize=(7, 5))
    ax.semilogy(r, bound, "--", label="bound 4^-r")
    # zero rates cannot sit on a log axis
    mask = observed > 0
    ax.semilogy(r[mask], observed[mask], "o-", label="observed")
    ax.set_xlabel("rounds")
    ax.set_ylabel("false-positive rate")
    ax.set_title(f"Miller–Rabin false positives (n={num})")
    ax.legend()
    fig.tight_layout()
    fig.savefig(path)
    plt.close(fig)
