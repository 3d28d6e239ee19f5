"""Reading the numbers to sort from command-line arguments."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_WHITESPACE = frozenset("\t\n\v\f\r ")
_DIGITS = frozenset("0123456789")


class ParseError(ValueError):
    """Raised when the arguments do not describe a valid list of integers."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def parse_int(text: str) -> int:
    """Read a 32-bit signed integer from the start of text.

    Leading whitespace and one sign are accepted. At least one digit must
    follow, and the value must fit in 32 bits; otherwise ParseError is
    raised. Reading stops at the first character that is not a digit.
    """
    rest = text.lstrip("".join(_WHITESPACE))
    negative = False
    if rest[:1] in ("-", "+"):
        negative = rest[0] == "-"
        rest = rest[1:]
    if not rest or rest[0] not in _DIGITS:
        raise ParseError()
    value = 0
    for char in rest:
        if char not in _DIGITS:
            break
        value = value * 10 + int(char)
        if (not negative and value > INT_MAX) or (negative and -value < INT_MIN):
            raise ParseError()
    return -value if negative else value


def split_words(text: str, separator: str) -> list[str]:
    """Split text on a single separator character, dropping empty words."""
    if len(separator) != 1:
        raise ValueError("separator must be a single character")
    return [word for word in text.split(separator) if word]


def is_valid_number(text: str) -> bool:
    """True when text is an optional sign followed only by digits.

    An empty string is not valid; a lone sign is.
    """
    if not text:
        return False
    body = text[1:] if text[0] in ("-", "+") else text
    return all(char in _DIGITS for char in body)


def has_duplicate(args: Sequence[str]) -> bool:
    """True when two arguments after the first hold the same integer.

    The first argument takes no part in the comparison. Each argument is
    read with parse_int, so an unreadable one raises ParseError.
    """
    seen: set[int] = set()
    for arg in args[1:]:
        value = parse_int(arg)
        if value in seen:
            return True
        seen.add(value)
    return False


def split_arguments(argv: Iterable[str]) -> list[str]:
    """Join every argument with spaces and split the result into words."""
    return split_words(" ".join(argv), " ")


def checker_arguments(argv: Sequence[str]) -> list[str]:
    """Arguments as the checker reads them.

    A single argument is split on spaces; several are taken as they are.
    """
    if not argv:
        return []
    if len(argv) == 1:
        return split_words(argv[0], " ")
    return list(argv)


def parse_numbers(args: Sequence[str]) -> list[int]:
    """Turn argument words into integers, top of the stack first.

    Raises ParseError when there are no words, when a duplicate is found,
    or when a word is not a valid integer.
    """
    if not args or has_duplicate(args):
        raise ParseError()
    if not all(is_valid_number(arg) for arg in args):
        raise ParseError()
    return [parse_int(arg) for arg in args]