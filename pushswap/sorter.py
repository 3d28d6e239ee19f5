"""Sorting stack a with the fewest practical operations."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from pushswap.stack import Operation, Stack, apply_operation

Emitter = Callable[[Operation], None]


def _discard(_operation: Operation) -> None:
    return None


def rotation_plan(stack: Stack, index: int) -> tuple[int, int]:
    """How to bring the value at index to the top of the stack.

    Returns (direction, rotations): direction 1 means rotate, -1 means
    reverse rotate, and 0 (with no rotations) means the index is out of
    range.
    """
    size = len(stack)
    if index < 0 or index >= size:
        return 0, 0
    if index <= size // 2:
        return 1, index
    return -1, size - index


def range_threshold(size: int) -> int:
    """The initial upper bound of the window of values sent to stack b."""
    return int(size * 0.048 + 10)


class Sorter:
    """Sorts stack a in place, reporting every operation to emit."""

    def __init__(
        self, stack_a: Stack, stack_b: Stack, emit: Emitter | None = None
    ) -> None:
        self.stack_a = stack_a
        self.stack_b = stack_b
        self._emit = emit if emit is not None else _discard

    def _run(self, operation: Operation) -> None:
        if operation is Operation.PA and not self.stack_b:
            return
        if operation is Operation.PB and not self.stack_a:
            return
        apply_operation(operation, self.stack_a, self.stack_b)
        self._emit(operation)

    def sort(self) -> None:
        """Sort stack a, choosing a strategy by its size."""
        if self.stack_a.is_sorted():
            return
        size = len(self.stack_a)
        if size <= 5:
            strategies = {
                2: self.sort_two,
                3: self.sort_three,
                4: self.sort_four,
                5: self.sort_five,
            }
            strategy = strategies.get(size)
            if strategy is not None:
                strategy()
            return
        self.range_sort()

    def sort_two(self) -> None:
        """Sort a stack of exactly two values."""
        if len(self.stack_a) != 2:
            return
        first, second = self.stack_a
        if first > second:
            self._run(Operation.SA)

    def sort_three(self) -> None:
        """Sort a stack of exactly three values."""
        if len(self.stack_a) != 3:
            return
        a, b, c = self.stack_a
        if a < b and b > c and a < c:
            self._run(Operation.SA)
            self._run(Operation.RA)
        elif a < b and b > c and a > c:
            self._run(Operation.RRA)
        elif a > b and b < c and a < c:
            self._run(Operation.SA)
        elif a > b and b < c and a > c:
            self._run(Operation.RA)
        elif a > b and b > c:
            self._run(Operation.SA)
            self._run(Operation.RRA)

    def _minimum_to_b(self) -> None:
        direction, rotations = rotation_plan(
            self.stack_a, self.stack_a.min_index()
        )
        operation = Operation.RA if direction == 1 else Operation.RRA
        for _ in range(rotations):
            self._run(operation)
        self._run(Operation.PB)

    def sort_four(self) -> None:
        """Sort a stack of exactly four values."""
        if len(self.stack_a) != 4:
            return
        self._minimum_to_b()
        self.sort_three()
        self._run(Operation.PA)

    def sort_five(self) -> None:
        """Sort a stack of exactly five values."""
        if len(self.stack_a) != 5:
            return
        self._minimum_to_b()
        self.sort_four()
        self._run(Operation.PA)

    def _move_to_b(self) -> None:
        stack_a = self.stack_a
        threshold = range_threshold(len(stack_a))
        min_range = 0
        rotation_count = 0
        while stack_a:
            current = stack_a.top
            if current > threshold:
                if len(stack_a) != 1:
                    self._run(Operation.RA)
                    rotation_count += 1
                    if rotation_count >= len(stack_a):
                        rotation_count = 0
                        threshold += 1
            else:
                self._run(Operation.PB)
                if current < min_range:
                    self._run(Operation.RB)
                threshold += 1
                min_range += 1
                rotation_count = 0
            if len(stack_a) == 1 and stack_a.top > threshold:
                break

    def _move_to_a(self) -> None:
        stack_b = self.stack_b
        while stack_b:
            largest = stack_b.max_value()
            position = stack_b.position(largest)
            operation = (
                Operation.RRB if position >= len(stack_b) // 2 else Operation.RB
            )
            while stack_b.top != largest:
                self._run(operation)
            self._run(Operation.PA)

    def range_sort(self) -> None:
        """Sort a large stack by sending windows of values to b and back."""
        self._move_to_b()
        self._move_to_a()


def sort_numbers(values: Iterable[int]) -> list[Operation]:
    """The operations that sort values, given top of the stack first."""
    operations: list[Operation] = []
    Sorter(Stack(values), Stack(), operations.append).sort()
    return operations