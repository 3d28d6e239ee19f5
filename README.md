# pushswap

Sort a list of integers using only a small set of operations on two stacks,
`a` and `b`, and check whether a given sequence of operations sorts a list.

## The operations

| Name  | Effect                                        |
|-------|-----------------------------------------------|
| `sa`  | swap the top two elements of `a`              |
| `sb`  | swap the top two elements of `b`              |
| `ss`  | `sa` and `sb` together                        |
| `pa`  | move the top of `b` onto `a`                  |
| `pb`  | move the top of `a` onto `b`                  |
| `ra`  | rotate `a` up: its top element goes to bottom |
| `rb`  | rotate `b` up                                 |
| `rr`  | `ra` and `rb` together                        |
| `rra` | rotate `a` down: its bottom goes to top       |
| `rrb` | rotate `b` down                               |
| `rrr` | `rra` and `rrb` together                      |

Swaps and rotations of a stack with fewer than two elements, and pushes from
an empty stack, change nothing.

## Installation

```
pip install .
```

## Sorting

Give the numbers as arguments, either separately or as quoted,
space-separated strings; all arguments are joined and split on spaces. The
first number is the top of stack `a`.

```
push-swap 3 2 1
push-swap "4 67 3 87 23"
```

The operations that sort the list are printed one per line; nothing is
printed for a list that is already sorted. Lists of up to five numbers use
dedicated routines, larger ones a range-based strategy.

The command prints `Error` to standard error and exits with status 1 when
there are no numbers, when a word is not an optional sign followed by digits,
when a number lies outside the 32-bit signed range, or when two of the
numbers after the first are equal (the first number is not compared with the
others).

## Checking

```
push-swap 3 2 1 | push-swap-checker 3 2 1
```

The checker takes the numbers the same way, except that a single argument is
split on spaces while several arguments are taken as they are. It reads
operations from standard input, one per line, applies them and prints `OK` if
stack `a` ends up sorted with `b` empty, or `KO` otherwise. An unknown
operation or invalid numbers print `Error` to standard error with exit
status 1.

## Library use

```python
from pushswap.sorter import sort_numbers
from pushswap.checker import run_checker

operations = sort_numbers([5, 1, 4, 2, 3])
print(run_checker([5, 1, 4, 2, 3], operations))  # True
```

- `pushswap.stack`: `Stack`, the `Operation` enum and `apply_operation`,
  which applies one operation to a pair of stacks (an unknown name raises
  `ValueError`).
- `pushswap.parsing`: `parse_int`, `is_valid_number`, `has_duplicate`,
  `split_words`, `split_arguments`, `checker_arguments` and `parse_numbers`;
  invalid input raises `ParseError`, a subclass of `ValueError`.
- `pushswap.sorter`: `Sorter`, which sorts stack `a` and reports each
  operation to a callback, plus `sort_numbers`, `rotation_plan` and
  `range_threshold`.
- `pushswap.checker`: `execute` and `run_checker`.

## Running the tests

```
pip install .[test]
pytest
```