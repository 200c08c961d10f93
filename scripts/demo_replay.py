"""Demo: step through the trace of a small run, printing the node view at each step."""

import sys

from stack_count.api import describe_step, format_node
from stack_count.run import run
from stack_count.run_types import EnumeratorConfig


def _show_tree(result, cursor):
    for depth, nodes in result.tree(cursor).items():
        print(f"    depth {depth}: " + "  ".join(format_node(n) for n in nodes))


def main():
    n = int(sys.argv[1]) if len(sys.argv) > 1 else 2

    print("=" * 60)
    print(f"MODE 1: faithful (infeasible calls silent), n = {n}")
    print("=" * 60)
    result = run(n, EnumeratorConfig(verbose=True))
    controller = result.replay()
    while True:
        print(describe_step(controller.current(), controller.position(), len(controller)))
        _show_tree(result, controller.position())
        if controller.at_end():
            break
        controller.step_forward()

    print()
    print("=" * 60)
    print(f"MODE 2: record failures, n = {n}")
    print("=" * 60)
    run(n, EnumeratorConfig(record_failures=True, verbose=True))


if __name__ == "__main__":
    main()
