# mrprime/suite.py — accuracy suite cross-checked against sympy.isprime

from __future__ import annotations
import csv, logging, random
from dataclasses import asdict, dataclass, field, fields
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from sympy import isprime, nextprime

from .miller_rabin import RandomSource, check_rounds, is_probably_prime

log = logging.getLogger(__name__)

# hand-picked; the composites include Carmichael numbers and base-2 strong pseudoprimes
FIXTURES: Tuple[Tuple[int, str], ...] = (
    (2, "prime"), (3, "prime"), (97, "prime"), (211, "prime"),
    # 3*13*19*23*3041*22741 and 223*47581*207263141
    (1_178_615_158_383, "other"), (2_199_178_615_158_383, "other"),
    (-7, "other"), (0, "other"), (1, "other"), (4, "other"), (9, "other"), (91, "other"),
    (561, "other"), (1105, "other"), (1729, "other"), (2465, "other"),
    (2821, "other"), (6601, "other"), (8911, "other"), (41041, "other"),
    (2047, "other"), (3277, "other"), (4033, "other"), (4681, "other"),
    (3_215_031_751, "other"),
)

DIGIT_SIZES = (2, 4, 6, 9, 12, 16, 24, 40)
PER_SIZE = 3


@dataclass
class CaseResult:
    n: int
    digits: int
    expect: str
    verdict: bool
    ok: bool
    reason: str = ""


@dataclass
class SuiteReport:
    rounds: int
    results: List[CaseResult] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def passed(self) -> int:
        return sum(1 for r in self.results if r.ok)

    @property
    def failed(self) -> int:
        return self.total - self.passed

    @property
    def failures(self) -> List[CaseResult]:
        return [r for r in self.results if not r.ok]

    @property
    def by_expect(self) -> Dict[str, List[int]]:
        by: Dict[str, List[int]] = {}
        for r in self.results:
            by.setdefault(r.expect, [0, 0])
            by[r.expect][0 if r.ok else 1] += 1
        return by

    def summary_lines(self) -> Iterator[str]:
        yield "=== SUMMARY ==="
        yield f"Total: {self.total} | PASS: {self.passed} | FAIL: {self.failed} | rounds: {self.rounds}"
        for k, (p, f) in sorted(self.by_expect.items()):
            yield f"  {k:10s}  PASS {p:3d}  FAIL {f:3d}"

    def write_failures(self, path: str) -> int:
        """Write failing cases as CSV; returns the number of rows written."""
        rows = self.failures
        with open(path, "w", newline="") as f:
            w = csv.DictWriter(f, fieldnames=[fl.name for fl in fields(CaseResult)])
            w.writeheader()
            for r in rows:
                w.writerow(asdict(r))
        return len(rows)


# ---- random cases ----

def rand_k_digit(k: int, rng: RandomSource) -> int:
    lo = 10 ** (k - 1)
    return lo + rng.randrange(9 * lo)

def rand_prime(k: int, rng: RandomSource) -> int:
    return int(nextprime(rand_k_digit(k, rng)))

def rand_semiprime(k: int, rng: RandomSource) -> int:
    k1 = max(1, k // 2)
    k2 = max(1, k - k1)
    return rand_prime(k1, rng) * rand_prime(k2, rng)

def rand_composite(k: int, rng: RandomSource) -> int:
    # odd so the even fast path is not what answers
    n = rand_k_digit(max(1, k - 4), rng) | 1
    n *= (2 * rng.randrange(1, 500) + 1)
    if isprime(n):
        n *= 3
    return n

def generate_cases(rng: RandomSource,
                   digit_sizes: Sequence[int] = DIGIT_SIZES,
                   per_size: int = PER_SIZE) -> List[Tuple[int, str]]:
    jobs = list(FIXTURES)
    for k in digit_sizes:
        for _ in range(per_size):
            jobs.append((rand_prime(k, rng), "prime"))
            jobs.append((rand_semiprime(k, rng), "semiprime"))
            jobs.append((rand_composite(k, rng), "other"))
    return jobs

# ---- checks ----

def run_case(n: int, expect: str, rounds: int, rng: RandomSource) -> CaseResult:
    verdict = is_probably_prime(n, rounds, rng)
    truth = isprime(n)
    if verdict == truth:
        ok, reason = True, ""
    elif truth:
        ok, reason = False, "prime reported composite"
    else:
        ok, reason = False, "composite reported probably prime"
    if truth != (expect == "prime"):
        ok, reason = False, f"fixture mislabelled (isprime={truth})"
    return CaseResult(n=n, digits=len(str(abs(n))), expect=expect,
                      verdict=verdict, ok=ok, reason=reason)

def run_suite(rounds: int = 20, rng: Optional[RandomSource] = None,
              digit_sizes: Sequence[int] = DIGIT_SIZES,
              per_size: int = PER_SIZE) -> SuiteReport:
    rounds = check_rounds(rounds)
    rng = rng if rng is not None else random.Random()
    report = SuiteReport(rounds=rounds)
    for n, expect in generate_cases(rng, digit_sizes, per_size):
        res = run_case(n, expect, rounds, rng)
        report.results.append(res)
        if not res.ok:
            log.warning("suite_fail n=%d expect=%s reason=%s", n, expect, res.reason)
    log.info("suite_done total=%d pass=%d fail=%d", report.total, report.passed, report.failed)
    return report
