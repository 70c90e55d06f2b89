"""Print command-line arguments."""

import argparse
import sys
from collections.abc import Iterable


def join_args(args: Iterable[str], sep: str = " ") -> str:
    """Join the arguments with ``sep`` between them."""
    return sep.join(args)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="echo", description="Print the arguments.")
    parser.add_argument("-n", action="store_true", help="omit trailing newline")
    parser.add_argument("-s", default=" ", metavar="SEP", help="separator")
    parser.add_argument("args", nargs=argparse.REMAINDER)
    return parser


def main(argv: list[str] | None = None) -> int:
    """Print the arguments separated by ``-s`` and, unless ``-n``, a newline."""
    options = _parser().parse_args(sys.argv[1:] if argv is None else argv)
    sys.stdout.write(join_args(options.args, options.s))
    if not options.n:
        sys.stdout.write("\n")
    return 0


def main_hello(argv: list[str] | None = None) -> int:
    """Print a greeting."""
    greeting = join_args(("Hello,", "世界"))
    sys.stdout.write(greeting + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())