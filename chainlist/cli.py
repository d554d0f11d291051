"""
chainlist Command-Line Interface (CLI)

Exposes the linked list through two subcommands:
- run:   build a list, apply a sequence of operations and print the result
- bench: time every list operation over growing inputs and write a CSV

Usage examples:
    python -m chainlist.cli run push_front=1 push_back=3 insert=1,2 remove=0
    python -m chainlist.cli run --values 0,1,2,3,4,5 remove=3 remove=3
    python -m chainlist.cli bench --path report.csv --base-input 50 --rounds 4
"""

import argparse
import logging
import sys

from .datastructures import LinkedList
from .bench import benchmark

logger = logging.getLogger(__name__)


# -------------------------------------------------------------------
# Operation parsing
# -------------------------------------------------------------------

# name -> number of integer arguments it takes
OPERATION_ARITY = {
    "push_front": 1,
    "push_back": 1,
    "pop_front": 0,
    "pop_back": 0,
    "insert": 2,
    "remove": 1,
    "get": 1,
    "set": 2,
}


def parse_operation(text):
    """Parse ``name`` or ``name=a[,b]`` into ``(name, [ints])``.

    Raises:
        ValueError: on an unknown operation, wrong argument count or a
            non-integer argument.
    """
    name, _, raw = text.partition("=")
    if name not in OPERATION_ARITY:
        raise ValueError(f"unknown operation {name!r}")
    args = [int(a) for a in raw.split(",")] if raw else []
    if len(args) != OPERATION_ARITY[name]:
        raise ValueError(f"{name} takes {OPERATION_ARITY[name]} argument(s), got {len(args)}")
    return name, args


def parse_values(text):
    """Parse a comma-separated list of integers for --values."""
    try:
        return [int(v) for v in text.split(",") if v.strip()]
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer list: {text!r}")


def apply_operation(lst, name, args):
    """Apply one parsed operation to *lst* and return what it produced (or None)."""
    if name == "push_front":
        lst.push_front(args[0])
    elif name == "push_back":
        lst.push_back(args[0])
    elif name == "pop_front":
        return lst.pop_front()
    elif name == "pop_back":
        return lst.pop_back()
    elif name == "insert":
        lst.insert(args[0], args[1])
    elif name == "remove":
        return lst.remove(args[0])
    elif name == "get":
        return lst[args[0]]
    elif name == "set":
        lst[args[0]] = args[1]
    return None


# -------------------------------------------------------------------
# Command handlers
# -------------------------------------------------------------------

def cmd_run(args, parser):
    """Build a list from --values and apply each operation in order."""
    lst = LinkedList(args.values or [])
    for text in args.ops:
        try:
            name, op_args = parse_operation(text)
            result = apply_operation(lst, name, op_args)
        except (ValueError, IndexError) as e:
            parser.error(f"{text}: {e}")
        logger.debug("%s -> %r, list is now %r", text, result, lst.to_py())
        if name in ("pop_front", "pop_back", "remove", "get"):
            print(f"{text}: {result}")
    print(lst.to_py())


def cmd_bench(args, parser):
    """Run the benchmark suite and write the CSV report."""
    try:
        rows = benchmark.run_benchmarks(
            args.path,
            base_input=args.base_input,
            rounds=args.rounds,
            iterations=args.iterations,
            seed=args.seed,
        )
    except ValueError as e:
        parser.error(str(e))
    print(f"Wrote {len(rows)} rows to {args.path}")


# -------------------------------------------------------------------
# CLI parser setup
# -------------------------------------------------------------------
def build_parser():
    """Build the argparse command-line parser with subcommands."""
    p = argparse.ArgumentParser(prog="python -m chainlist.cli", description="Singly linked list CLI")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    s = sub.add_parser("run", help="Apply list operations and print the result")
    s.add_argument("--values", type=parse_values, default=[], help="Initial list contents, e.g. 0,1,2")
    s.add_argument("ops", nargs="*", help="Operations, e.g. push_front=1 insert=1,2 pop_back")
    s.set_defaults(func=cmd_run)

    s = sub.add_parser("bench", help="Benchmark list operations to CSV")
    s.add_argument("--path", default=benchmark.OUTPUT_CSV)
    s.add_argument("--base-input", type=int, default=benchmark.DEFAULT_BASE_INPUT)
    s.add_argument("--rounds", type=int, default=benchmark.DEFAULT_ROUNDS)
    s.add_argument("--iterations", type=int, default=benchmark.DEFAULT_ITERATIONS)
    s.add_argument("--seed", type=int, default=None)
    s.set_defaults(func=cmd_bench)

    return p


# -------------------------------------------------------------------
# Entry point
# -------------------------------------------------------------------
def main(argv=None):
    """CLI entry point when invoked via `python -m chainlist.cli`."""
    argv = sys.argv[1:] if argv is None else argv
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    args.func(args, parser)


if __name__ == "__main__":
    main()
