"""Count the numeric literals in a text, by kind."""

import argparse
import sys
from collections.abc import Iterator
from dataclasses import dataclass

from numlex.float_fsm import classify_float
from numlex.integer_fsm import classify_integer
from numlex.states import State

MAX_WORD_LENGTH = 30
DEFAULT_INPUT = "test_FSM.txt"

_SEPARATORS = frozenset(" \t\n\v\f\r,")


def _states(*names: str) -> frozenset[State]:
    return frozenset(State[name] for name in names)


_SIGNED_DECIMAL = _states(
    "STATE_DECIMAL_P", "STATE_DECIMAL_P_L", "STATE_DECIMAL_P_LL",
    "STATE_DECIMAL_M", "STATE_DECIMAL_M_L", "STATE_DECIMAL_M_LL",
    "STATE_ZERO_P", "STATE_ZERO_P_L", "STATE_ZERO_P_LL",
    "STATE_ZERO_M", "STATE_ZERO_M_L", "STATE_ZERO_M_LL",
    "STATE_DECIMAL", "STATE_DECIMAL_L", "STATE_DECIMAL_LL",
    "STATE_ZERO", "STATE_ZERO_L", "STATE_ZERO_LL",
)
_UNSIGNED_DECIMAL = _states(
    "STATE_DECIMAL_P_U", "STATE_DECIMAL_P_U_L", "STATE_DECIMAL_P_U_LL",
    "STATE_DECIMAL_P_L_U", "STATE_DECIMAL_P_LL_U",
    "STATE_ZERO_P_U", "STATE_ZERO_P_U_L", "STATE_ZERO_P_U_LL",
    "STATE_ZERO_P_L_U", "STATE_ZERO_P_LL_U",
    "STATE_DECIMAL_U", "STATE_DECIMAL_U_L", "STATE_DECIMAL_U_LL",
    "STATE_DECIMAL_L_U", "STATE_DECIMAL_LL_U",
    "STATE_ZERO_U", "STATE_ZERO_U_L", "STATE_ZERO_U_LL",
    "STATE_ZERO_L_U", "STATE_ZERO_LL_U",
)
_OCTAL = _states(
    "STATE_OCTAL", "STATE_OCTAL_U", "STATE_OCTAL_U_L", "STATE_OCTAL_U_LL",
    "STATE_OCTAL_L", "STATE_OCTAL_L_U", "STATE_OCTAL_LL", "STATE_OCTAL_LL_U",
)
_HEX = _states(
    "STATE_HEX", "STATE_HEX_U", "STATE_HEX_U_L", "STATE_HEX_U_LL",
    "STATE_HEX_L", "STATE_HEX_L_U", "STATE_HEX_LL", "STATE_HEX_LL_U",
)
_DOUBLE = _states(
    "F_STATE_DIGIT_POINT", "F_STATE_DIGIT_POINT_L",
    "F_STATE_SIGN_DIGIT_POINT", "F_STATE_SIGN_DIGIT_POINT_L",
    "F_STATE_ALLPOINT_DIGIT", "F_STATE_ALLPOINT_DIGIT_L",
    "F_STATE_E_DIGIT", "F_STATE_E_DIGIT_L",
    "F_STATE_E_SIGN_DIGIT", "F_STATE_E_SIGN_DIGIT_L",
)
_FLOAT = _states(
    "F_STATE_DIGIT_POINT_F", "F_STATE_SIGN_DIGIT_POINT_F",
    "F_STATE_ALLPOINT_DIGIT_F", "F_STATE_E_DIGIT_F", "F_STATE_E_SIGN_DIGIT_F",
)


def classify(word: str) -> State:
    """Classify a word as an integer literal, falling back to floating point."""
    state = classify_integer(word)
    if state in (State.STATE_ERROR, State.F_STATE_ERROR):
        state = classify_float(word)
    return state


@dataclass
class LiteralCounts:
    """Tallies of recognised literals by kind."""

    decimal: int = 0
    floating_point: int = 0
    whole: int = 0
    unsigned: int = 0
    octal: int = 0
    hexadecimal: int = 0
    float_typed: int = 0

    def add(self, state: State) -> None:
        """Count one word that the recognisers left in ``state``."""
        if state in _SIGNED_DECIMAL:
            self.decimal += 1
            self.whole += 1
        elif state in _UNSIGNED_DECIMAL:
            self.decimal += 1
            self.whole += 1
            self.unsigned += 1
        elif state in _OCTAL:
            self.decimal += 1
            self.whole += 1
            self.octal += 1
            self.unsigned += 1
        elif state in _HEX:
            self.decimal += 1
            self.whole += 1
            self.hexadecimal += 1
            self.unsigned += 1
        elif state in _DOUBLE:
            self.floating_point += 1
            self.whole += 1
        elif state in _FLOAT:
            self.floating_point += 1
            self.whole += 1
            self.float_typed += 1

    def report(self) -> str:
        """The counters as a printable block of text."""
        return (
            "\nCounters:\n"
            f"Decimal constants: {self.decimal}\n"
            f"Floating-point constants: {self.floating_point}\n"
            f"Whole constants (all systems): {self.whole}\n"
            f"Unsigned numbers: {self.unsigned}\n"
            f"Octal numbers: {self.octal}\n"
            f"Hexadecimal numbers: {self.hexadecimal}\n"
            f"Float numbers: {self.float_typed}\n"
        )


class WordTooLongError(ValueError):
    """A word reached the maximum word length.

    ``counts`` holds what was counted before the long word, when known.
    """

    def __init__(self, word: str, counts: LiteralCounts | None = None) -> None:
        super().__init__("Word exceeds maximum length!")
        self.word = word
        self.counts = counts


def split_words(text: str) -> Iterator[str]:
    """Yield the words of ``text``, split on whitespace and commas.

    Raises WordTooLongError when a word grows past the maximum length.
    """
    word: list[str] = []
    for ch in text:
        if ch in _SEPARATORS:
            if word:
                yield "".join(word)
                word = []
        elif len(word) < MAX_WORD_LENGTH - 1:
            word.append(ch)
        else:
            raise WordTooLongError("".join(word) + ch)
    if word:
        yield "".join(word)


def count_literals(text: str) -> LiteralCounts:
    """Count every literal in ``text``."""
    counts = LiteralCounts()
    try:
        for word in split_words(text):
            counts.add(classify(word))
    except WordTooLongError as exc:
        exc.counts = counts
        raise
    return counts


def main(argv: list[str] | None = None) -> int:
    """Count the literals in a file and print the counters."""
    parser = argparse.ArgumentParser(description="Count numeric literals in a file.")
    parser.add_argument("path", nargs="?", default=DEFAULT_INPUT)
    args = parser.parse_args(argv)

    try:
        with open(args.path, encoding="latin-1") as handle:
            text = handle.read()
    except OSError as exc:
        print(f"Error opening file: {exc.strerror}", file=sys.stderr)
        return 1

    try:
        counts = count_literals(text)
    except WordTooLongError as exc:
        print("Word exceeds maximum length! ")
        counts = exc.counts if exc.counts is not None else LiteralCounts()

    print(counts.report(), end="")
    return 0