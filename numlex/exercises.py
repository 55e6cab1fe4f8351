"""Small text and arithmetic exercises."""

import re
from typing import IO, AnyStr

_CHUNK = 8192
_BLANK_RUN = re.compile(" +")


def copy_stream(source: IO[AnyStr], target: IO[AnyStr]) -> int:
    """Copy everything from ``source`` to ``target``; return the amount copied."""
    copied = 0
    while chunk := source.read(_CHUNK):
        target.write(chunk)
        copied += len(chunk)
    return copied


def count_characters(text: str) -> int:
    """Number of characters in ``text``."""
    return len(text)


def count_lines(text: str) -> int:
    """Number of newline characters in ``text``."""
    return text.count("\n")


def count_blanks(text: str) -> int:
    """Number of spaces and tabs in ``text``."""
    return sum(1 for ch in text if ch in " \t")


def squeeze_blanks(text: str) -> str:
    """Replace every run of one or more spaces with a single space."""
    return _BLANK_RUN.sub(" ", text)


def hello_world() -> str:
    """The classic greeting, with its newline."""
    return "Hello World!\n"


def escape_sequences_demo() -> str:
    """Text showing quotes, tabs and newlines inside strings."""
    return (
        "Hello, world without a new line"
        "Hello, world with a new line\n"
        'A string with "quoted text" inside of it \n\n'
        "Tabbed\tColumn\tHeadings\n"
        "The\tquick\tbrown\n"
        "fox\tjumps\tover\n"
        "the\tlazy\tdog.\n\n"
        "A line of the text that \nspans three lines \nand completes the line\n\n"
    )


def quotient_and_remainder(m: int, n: int) -> tuple[int, int]:
    """Integer division truncating toward zero, with the matching remainder.

    The remainder takes the sign of ``m``. Raises ZeroDivisionError when ``n`` is 0.
    """
    if n == 0:
        raise ZeroDivisionError("integer division by zero")
    quotient = abs(m) // abs(n)
    if (m < 0) != (n < 0):
        quotient = -quotient
    return quotient, m - quotient * n