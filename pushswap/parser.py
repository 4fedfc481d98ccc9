"""Reading the command-line arguments into a list of integers."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_DIGITS = frozenset("0123456789")
_WHITESPACE = frozenset(" \t\n\v\f\r")


class ParseError(ValueError):
    """Raised when the arguments are not a valid list of distinct integers."""


def split_words(text: str, sep: str = " ") -> list[str]:
    """Split ``text`` on ``sep``, dropping empty pieces."""
    return [word for word in text.split(sep) if word]


def check_digit(text: str) -> bool:
    """True when ``text`` is an optional sign followed by one or more digits."""
    body = text[1:] if text[:1] in ("-", "+") else text
    return bool(body) and all(ch in _DIGITS for ch in body)


def parse_int(text: str) -> int:
    """Read a leading integer from ``text``.

    Leading whitespace and one sign are accepted; reading stops at the
    first non-digit. A value outside the 32-bit signed range raises
    :class:`ParseError`.
    """
    pos = 0
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    result = 0
    while pos < len(text) and text[pos] in _DIGITS:
        result = result * 10 + int(text[pos])
        if not INT_MIN <= result * sign <= INT_MAX:
            raise ParseError(f"integer out of range: {text!r}")
        pos += 1
    return result * sign


def has_duplicates(values: Iterable[int]) -> bool:
    """True when some value occurs more than once."""
    seen: set[int] = set()
    for value in values:
        if value in seen:
            return True
        seen.add(value)
    return False


def _tokens(arg: str) -> list[str]:
    if not arg:
        raise ParseError("empty argument")
    return split_words(arg, " ") if " " in arg else [arg]


def count_total_numbers(args: Sequence[str]) -> int:
    """Count the numbers the arguments hold; an empty argument is an error."""
    return sum(len(_tokens(arg)) for arg in args)


def _parse_token(token: str) -> int:
    if not check_digit(token):
        raise ParseError(f"not an integer: {token!r}")
    return parse_int(token)


def parse_args(args: Sequence[str]) -> list[int]:
    """Turn the arguments into integers, top of the stack first.

    An argument holding spaces is split into several numbers. Invalid
    numbers, empty arguments and repeated values raise :class:`ParseError`.
    """
    values = [_parse_token(token) for arg in args for token in _tokens(arg)]
    if has_duplicates(values):
        raise ParseError("duplicate values")
    return values