"""The command that prints the operations sorting its arguments."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from pushswap.parsing import ParseError, parse_numbers, split_arguments
from pushswap.sorter import Sorter
from pushswap.stack import Operation, Stack


def _print_operation(operation: Operation) -> None:
    sys.stdout.write(f"{operation}\n")


def main(argv: Sequence[str] | None = None) -> int:
    """Sort the integers given as arguments, printing one operation a line."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        if not argv:
            raise ParseError()
        numbers = parse_numbers(split_arguments(argv))
    except ParseError:
        sys.stderr.write("Error\n")
        return 1
    Sorter(Stack(numbers), Stack(), _print_operation).sort()
    return 0


if __name__ == "__main__":
    sys.exit(main())