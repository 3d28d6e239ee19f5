"""The command that checks whether a list of operations sorts its arguments."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator, Sequence
from typing import TextIO

from pushswap.parsing import checker_arguments, parse_numbers
from pushswap.stack import Operation, Stack, apply_operation

_CHUNK_SIZE = 65536


def execute(line: str, stack_a: Stack, stack_b: Stack) -> None:
    """Carry out the operation named on one line of input.

    Everything from the first newline on is ignored. A line that does not
    name an operation exactly raises ValueError.
    """
    name = line.partition("\n")[0]
    if name not in {op.value for op in Operation}:
        raise ValueError(f"unknown instruction: {name!r}")
    apply_operation(name, stack_a, stack_b)


def run_checker(numbers: Iterable[int], lines: Iterable[str]) -> bool:
    """Apply every line to a stack holding numbers, top first.

    Returns True when stack a ends up sorted and stack b empty. Lines are
    applied one at a time, so a bad line raises before later ones are read.
    """
    stack_a = Stack(numbers)
    stack_b = Stack()
    for line in lines:
        execute(line, stack_a, stack_b)
    return stack_a.is_sorted() and not stack_b


def _read_lines(stream: TextIO) -> Iterator[str]:
    """Yield the lines of stream, each with its newline if it had one."""
    pending = ""
    while True:
        chunk = stream.read(_CHUNK_SIZE)
        if not chunk:
            break
        pending += chunk
        *complete, pending = pending.split("\n")
        for line in complete:
            yield line + "\n"
    if pending:
        yield pending


def main(argv: Sequence[str] | None = None) -> int:
    """Read operations from standard input and report OK or KO."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        numbers = parse_numbers(checker_arguments(argv))
        result = run_checker(numbers, _read_lines(sys.stdin))
    except ValueError:
        sys.stderr.write("Error\n")
        return 1
    sys.stdout.write("OK\n" if result else "KO\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())