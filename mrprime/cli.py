"""Command-line harness: mrprime {check,demo,rates,suite}."""

from __future__ import annotations
import argparse, logging, sys
from typing import Iterable, List, Optional

from . import analysis, suite
from .config import Settings
from .demo import demo_lines, format_line
from .errors import PrimalityError
from .logs import configure_logging
from .miller_rabin import RandomSource, check_rounds, is_probably_prime

log = logging.getLogger(__name__)


def check_one(n: int, rounds: int, rng: RandomSource) -> bool:
    result = is_probably_prime(n, rounds, rng)
    log.info("check n_bits=%d rounds=%d verdict=%s", n.bit_length(), rounds, result)
    print(format_line(n, result))
    return result

def _stdin_ints(lines: Iterable[str]):
    """Yield (value, None) for integer lines and (None, raw) for junk."""
    for line in lines:
        line = line.strip()
        if not line:
            continue
        try:
            yield int(line, 10), None
        except ValueError:
            yield None, line

# ---- subcommands ----

def cmd_check(args, settings: Settings) -> int:
    rounds = check_rounds(settings.rounds)
    rng = settings.make_rng()
    rc = 0
    if args.N:
        for n in args.N:
            check_one(n, rounds, rng)
        return rc
    for n, junk in _stdin_ints(sys.stdin):
        if junk is not None:
            print(f"# skip: {junk}", file=sys.stderr)
            log.warning("skip line=%r", junk)
            rc |= 1
            continue
        check_one(n, rounds, rng)
    return rc

def cmd_demo(args, settings: Settings) -> int:
    rounds = check_rounds(settings.rounds)
    for line in demo_lines(settings.make_rng(), rounds):
        print(line)
    return 0

def cmd_rates(args, settings: Settings) -> int:
    rows = analysis.rate_table(args.N, args.max_rounds, args.runs, settings.make_rng())
    print(f"n={args.N}")
    print(f"  {'rounds':>6s}  {'observed':>10s}  {'bound':>10s}")
    for row in rows:
        print(f"  {row.rounds:6d}  {row.observed:10.6f}  {row.bound:10.3g}")
    if args.out:
        analysis.write_rate_csv(rows, args.out)
        print(f"Wrote {args.out} with {len(rows)} rows.")
    if args.plot:
        analysis.plot_rates(rows, args.plot, args.N)
        print(f"Wrote {args.plot}")
    return 0

def cmd_suite(args, settings: Settings) -> int:
    report = suite.run_suite(rounds=settings.rounds, rng=settings.make_rng())
    for line in report.summary_lines():
        print(line)
    if report.failed:
        if args.out:
            report.write_failures(args.out)
            print(f"\nWrote details for {report.failed} failures to {args.out}")
        return 1
    print("\nNo failures recorded.")
    return 0

# ---- parser ----

def _positive_int(raw: str) -> int:
    v = int(raw)
    if v <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {raw}")
    return v

def build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--log-level", default=None, type=str.upper,
                        choices=("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"),
                        help="override MRPRIME_LOG_LEVEL")
    common.add_argument("--log-file", default=None, help="append log records to this file")
    common.add_argument("--seed", type=int, default=None, help="rng seed for reproducibility")

    ap = argparse.ArgumentParser(prog="mrprime", description="Miller–Rabin probable-prime test")
    sub = ap.add_subparsers(dest="command", required=True)

    p = sub.add_parser("check", parents=[common], help="test integers from argv or stdin")
    p.add_argument("N", nargs="*", type=int, help="integers to test (stdin when omitted)")
    p.add_argument("--rounds", type=int, default=None, help="trial rounds (default 10)")
    p.set_defaults(func=cmd_check)

    p = sub.add_parser("demo", parents=[common], help="run the demonstration lists")
    p.add_argument("--rounds", type=int, default=None, help="rounds for the small numbers")
    p.set_defaults(func=cmd_demo)

    p = sub.add_parser("rates", parents=[common], help="measure false-positive rates for N")
    p.add_argument("N", type=int)
    p.add_argument("--max-rounds", type=int, default=6)
    p.add_argument("--runs", type=_positive_int, default=1000)
    p.add_argument("--out", default=None, help="write the table as CSV")
    p.add_argument("--plot", default=None, help="save a PNG plot")
    p.set_defaults(func=cmd_rates, rounds=None)

    p = sub.add_parser("suite", parents=[common], help="cross-check against sympy.isprime")
    p.add_argument("--rounds", type=int, default=None, help="trial rounds (default 20)")
    p.add_argument("--out", default=None, help="CSV file for failing cases")
    p.set_defaults(func=cmd_suite)
    return ap

def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        settings = Settings.from_env()
        if args.command == "suite" and args.rounds is None:
            args.rounds = 20
        settings = settings.override(rounds=args.rounds, seed=args.seed,
                                     log_level=args.log_level, log_path=args.log_file)
        configure_logging(settings.level, settings.log_path)
        return args.func(args, settings)
    except PrimalityError as e:
        print(f"error: {type(e).__name__}: {e}", file=sys.stderr)
        return 2

if __name__ == "__main__":
    raise SystemExit(main())
