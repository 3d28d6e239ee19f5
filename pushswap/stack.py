"""Stacks of integers and the eleven operations defined on a pair of them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from enum import Enum


class Stack:
    """A stack of integers. Iteration runs from the top to the bottom."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._items: deque[int] = deque(values)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Stack):
            return NotImplemented
        return self._items == other._items

    def __repr__(self) -> str:
        return f"Stack({list(self._items)!r})"

    @property
    def top(self) -> int:
        """The value on top of the stack."""
        if not self._items:
            raise IndexError("top of an empty stack")
        return self._items[0]

    def push(self, value: int) -> None:
        """Put a value on top of the stack."""
        self._items.appendleft(value)

    def pop(self) -> int:
        """Remove and return the value on top of the stack."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.popleft()

    def swap(self) -> None:
        """Exchange the two top values; does nothing with fewer than two."""
        if len(self._items) > 1:
            first = self._items.popleft()
            second = self._items.popleft()
            self._items.appendleft(first)
            self._items.appendleft(second)

    def rotate(self) -> None:
        """Move the top value to the bottom."""
        if len(self._items) > 1:
            self._items.rotate(-1)

    def reverse_rotate(self) -> None:
        """Move the bottom value to the top."""
        if len(self._items) > 1:
            self._items.rotate(1)

    def is_sorted(self) -> bool:
        """True when values never decrease from top to bottom."""
        items = list(self._items)
        return all(a <= b for a, b in zip(items, items[1:]))

    def max_value(self) -> int:
        """The largest value held."""
        if not self._items:
            raise ValueError("max_value of an empty stack")
        return max(self._items)

    def min_index(self) -> int:
        """Distance from the top of the first occurrence of the smallest value."""
        if not self._items:
            raise ValueError("min_index of an empty stack")
        smallest = min(self._items)
        return self._items.index(smallest)

    def position(self, value: int) -> int:
        """Distance from the top of the first occurrence of value."""
        try:
            return self._items.index(value)
        except ValueError:
            raise ValueError(f"{value} is not in the stack") from None


class Operation(str, Enum):
    """The instructions that act on stacks a and b."""

    SA = "sa"
    SB = "sb"
    SS = "ss"
    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"

    def __str__(self) -> str:
        return self.value


def _push_across(source: Stack, target: Stack) -> None:
    if source:
        target.push(source.pop())


def apply_operation(operation: Operation | str, stack_a: Stack, stack_b: Stack) -> None:
    """Carry out one operation on the pair of stacks.

    A name that is not an operation raises ValueError.
    """
    op = Operation(operation)
    if op is Operation.SA:
        stack_a.swap()
    elif op is Operation.SB:
        stack_b.swap()
    elif op is Operation.SS:
        stack_a.swap()
        stack_b.swap()
    elif op is Operation.PA:
        _push_across(stack_b, stack_a)
    elif op is Operation.PB:
        _push_across(stack_a, stack_b)
    elif op is Operation.RA:
        stack_a.rotate()
    elif op is Operation.RB:
        stack_b.rotate()
    elif op is Operation.RR:
        stack_a.rotate()
        stack_b.rotate()
    elif op is Operation.RRA:
        stack_a.reverse_rotate()
    elif op is Operation.RRB:
        stack_b.reverse_rotate()
    else:
        stack_a.reverse_rotate()
        stack_b.reverse_rotate()