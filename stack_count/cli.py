"""Command-line entry point: count interleavings and inspect the trace."""

from __future__ import annotations

import argparse
import json
import logging
import sys

from . import constants
from .api import format_node, describe_step
from .errors import StackCountError
from .run import run
from .run_types import EnumeratorConfig


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="stack-count",
        description="Count valid push/pop interleavings with a replayable trace",
    )
    parser.add_argument("n", type=int, help="Number of pushes (and pops)")
    parser.add_argument("--trace", "-t", action="store_true",
                        help="Print every trace event")
    parser.add_argument("--tree", action="store_true",
                        help="Print the depth-grouped call nodes")
    parser.add_argument("--step", "-s", type=int, default=None,
                        help="Replay cursor position (clamped to the trace)")
    parser.add_argument("--json", action="store_true",
                        help="Print result, trace and memo as JSON")
    parser.add_argument("--record-failures", action="store_true",
                        help="Also trace and memoize infeasible calls")
    parser.add_argument("--int-bits", type=int,
                        default=constants.DEFAULT_INT_BITS,
                        help="Signed integer width for overflow checks "
                             "(0 disables the check, default: 64)")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Log progress and print run statistics")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")

    config = EnumeratorConfig(
        int_bits=args.int_bits or None,
        record_failures=args.record_failures,
        verbose=args.verbose,
    )
    try:
        result = run(args.n, config)
    except (StackCountError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
        return 0

    print(f"n = {result.n}: {result.result} valid interleavings")

    if args.trace:
        print("═══ Trace ═══")
        for event in result.trace:
            print(f"  {event}")

    controller = result.replay()
    cursor = None
    if args.step is not None:
        controller.jump_to(args.step)
        cursor = controller.position()
        print(describe_step(controller.current(), cursor, len(controller)))

    if args.tree:
        print("═══ Tree ═══")
        for depth, nodes in result.tree(cursor).items():
            print(f"  depth {depth:<3} " + "  ".join(format_node(n) for n in nodes))

    return 0


if __name__ == "__main__":
    sys.exit(main())
