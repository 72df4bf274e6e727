"""CLI entry point — python -m topfortunes."""

import argparse
import sys

from .config import default_k, default_strategy
from .log import log, set_verbose
from .selectors import STRATEGIES
from .source import IOFailure, read_input, write_output


def _positive_int(value: str) -> int:
    try:
        k = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {value!r}")
    if k < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1: {k}")
    return k


def cmd_select(args):
    from .run import run

    text = read_input(args.input)
    result = run(text, args.k, args.strategy)
    write_output(result.entries(), args.output)
    log(result.stats.summary())
    return result


def cmd_bench(args):
    from .run import benchmark, results_agree

    text = read_input(args.input)
    results = benchmark(text, args.k, args.strategy or list(STRATEGIES))

    print(f"\n  {'strategy':<10} {'selected':>9} {'seconds':>9}")
    for r in results:
        print(f"  {r.stats.strategy:<10} {r.stats.selected:>9d} {r.stats.elapsed:>9.3f}")

    if not results_agree(results):
        print("\n  Strategies disagree on the selection!", file=sys.stderr)
        sys.exit(1)
    return results


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="topfortunes",
        description="Pick the top-K scored submissions and write them as a fortune file",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="cmd")

    # select
    p_select = sub.add_parser("select", help="Write the top-K records as fortunes")
    p_select.add_argument("input", help="Corpus path, URL, or - for stdin")
    p_select.add_argument("--output", "-o", default="-", help="Output path (default: stdout)")
    p_select.add_argument("-k", type=_positive_int, default=default_k(), help="How many records to keep")
    p_select.add_argument("--strategy", default=default_strategy(), choices=list(STRATEGIES))

    # bench
    p_bench = sub.add_parser("bench", help="Time every selection strategy on one corpus")
    p_bench.add_argument("input", help="Corpus path, URL, or - for stdin")
    p_bench.add_argument("-k", type=_positive_int, default=default_k())
    p_bench.add_argument("--strategy", action="append", choices=list(STRATEGIES),
                         help="Strategy to include (repeatable, default: all)")

    args = parser.parse_args(argv)

    if args.verbose:
        set_verbose(True)

    if not args.cmd:
        parser.print_help()
        return

    # A default from config.json or the environment bypasses argparse choices
    if args.cmd == "select" and args.strategy not in STRATEGIES:
        parser.error(f"unknown strategy {args.strategy!r}; choose from {', '.join(STRATEGIES)}")

    try:
        if args.cmd == "select":
            cmd_select(args)
        elif args.cmd == "bench":
            cmd_bench(args)
    except IOFailure as e:
        print(f"  Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
