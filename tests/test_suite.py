from __future__ import annotations

import csv
import random

from sympy import isprime

from mrprime.suite import (
    FIXTURES,
    CaseResult,
    SuiteReport,
    generate_cases,
    rand_composite,
    rand_prime,
    rand_semiprime,
    run_case,
    run_suite,
)


def test_fixture_labels_match_sympy():
    for n, expect in FIXTURES:
        assert isprime(n) == (expect == "prime"), n

def test_random_generators(rng):
    for k in (2, 5, 12):
        assert isprime(rand_prime(k, rng))
        assert not isprime(rand_semiprime(k, rng))
        c = rand_composite(k, rng)
        assert c % 2 == 1
        assert not isprime(c)

def test_generate_cases_is_seeded():
    a = generate_cases(random.Random(5), (3, 9), 2)
    b = generate_cases(random.Random(5), (3, 9), 2)
    assert a == b
    assert len(a) == len(FIXTURES) + 2 * 2 * 3

def test_suite_passes():
    report = run_suite(rounds=20, rng=random.Random(11), digit_sizes=(3, 8, 20), per_size=2)
    assert report.total == len(FIXTURES) + 3 * 2 * 3
    assert report.failed == 0
    assert report.passed == report.total
    assert set(report.by_expect) == {"prime", "semiprime", "other"}
    lines = list(report.summary_lines())
    assert lines[0] == "=== SUMMARY ==="
    assert "FAIL: 0" in lines[1]

def test_mislabelled_case_fails(rng):
    res = run_case(91, "prime", 10, rng)
    assert res.ok is False
    assert res.verdict is False
    assert res.reason.startswith("fixture mislabelled")

def test_write_failures(tmp_path):
    report = SuiteReport(rounds=1, results=[
        CaseResult(n=97, digits=2, expect="prime", verdict=True, ok=True),
        CaseResult(n=2047, digits=4, expect="other", verdict=True, ok=False,
                   reason="composite reported probably prime"),
    ])
    out = tmp_path / "fail.csv"
    assert report.write_failures(str(out)) == 1
    with open(out, newline="") as f:
        rows = list(csv.DictReader(f))
    assert rows == [{
        "n": "2047", "digits": "4", "expect": "other", "verdict": "True",
        "ok": "False", "reason": "composite reported probably prime",
    }]
    assert report.by_expect == {"prime": [1, 0], "other": [0, 1]}

def test_demo_composites_are_fixtures_and_pass():
    for n in (1_178_615_158_383, 2_199_178_615_158_383):
        assert (n, "other") in FIXTURES
        res = run_case(n, "other", 20, random.Random(3))
        assert res.ok is True
        assert res.verdict is False
