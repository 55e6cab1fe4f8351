"""Recogniser for integer literals: decimal, octal and hexadecimal, with suffixes."""

from collections.abc import Callable

from numlex.states import State

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def is_decimal_digit(ch: str) -> bool:
    """True for the non-zero ASCII digits 1 to 9."""
    return "1" <= ch <= "9"


def is_octal_digit(ch: str) -> bool:
    """True for the ASCII digits 0 to 7."""
    return "0" <= ch <= "7"


def is_hex_digit(ch: str) -> bool:
    """True for a single ASCII hexadecimal digit, in either case."""
    return ch in _HEX_DIGITS


def _is_digit_or_zero(ch: str) -> bool:
    return is_decimal_digit(ch) or ch == "0"


# A rule matches either one exact character or a character class.
_Matcher = str | Callable[[str], bool]

# For each state, rules tried in order. A state with no rules, or an input no
# rule matches, leads to the error state.
_RULES: dict[State, tuple[tuple[_Matcher, State], ...]] = {
    State.STATE_START: (
        ("+", State.STATE_SIGN_P),
        ("-", State.STATE_SIGN_M),
        (is_decimal_digit, State.STATE_DECIMAL),
        ("0", State.STATE_ZERO),
    ),
    State.STATE_SIGN_P: (
        (is_decimal_digit, State.STATE_DECIMAL_P),
        ("0", State.STATE_ZERO_P),
    ),
    State.STATE_SIGN_M: (
        (is_decimal_digit, State.STATE_DECIMAL_M),
        ("0", State.STATE_ZERO_M),
    ),
    # Positive decimal.
    State.STATE_DECIMAL_P: (
        (_is_digit_or_zero, State.STATE_DECIMAL_P),
        ("u", State.STATE_DECIMAL_P_U),
        ("l", State.STATE_DECIMAL_P_L),
    ),
    State.STATE_DECIMAL_P_U: (("l", State.STATE_DECIMAL_P_U_L),),
    State.STATE_DECIMAL_P_U_L: (("l", State.STATE_DECIMAL_P_U_LL),),
    State.STATE_DECIMAL_P_L: (
        ("u", State.STATE_DECIMAL_P_L_U),
        ("l", State.STATE_DECIMAL_P_LL),
    ),
    State.STATE_DECIMAL_P_LL: (("u", State.STATE_DECIMAL_P_LL_U),),
    # Negative decimal: no unsigned suffix.
    State.STATE_DECIMAL_M: (
        (_is_digit_or_zero, State.STATE_DECIMAL_M),
        ("l", State.STATE_DECIMAL_M_L),
    ),
    State.STATE_DECIMAL_M_L: (("l", State.STATE_DECIMAL_M_LL),),
    # Unsigned decimal.
    State.STATE_DECIMAL: (
        (_is_digit_or_zero, State.STATE_DECIMAL),
        ("u", State.STATE_DECIMAL_U),
        ("l", State.STATE_DECIMAL_L),
    ),
    State.STATE_DECIMAL_U: (("l", State.STATE_DECIMAL_U_L),),
    State.STATE_DECIMAL_U_L: (("l", State.STATE_DECIMAL_U_LL),),
    State.STATE_DECIMAL_L: (
        ("u", State.STATE_DECIMAL_L_U),
        ("l", State.STATE_DECIMAL_LL),
    ),
    State.STATE_DECIMAL_LL: (("u", State.STATE_DECIMAL_LL_U),),
    # Positive zero.
    State.STATE_ZERO_P: (
        ("u", State.STATE_ZERO_P_U),
        ("l", State.STATE_ZERO_P_L),
    ),
    State.STATE_ZERO_P_U: (("l", State.STATE_ZERO_P_U_L),),
    State.STATE_ZERO_P_U_L: (("l", State.STATE_ZERO_P_U_LL),),
    State.STATE_ZERO_P_L: (
        ("u", State.STATE_ZERO_P_L_U),
        ("l", State.STATE_ZERO_P_LL),
    ),
    # "+0llu" is reported with the positive-decimal state.
    State.STATE_ZERO_P_LL: (("u", State.STATE_DECIMAL_P_LL_U),),
    # Negative zero.
    State.STATE_ZERO_M: (("l", State.STATE_ZERO_M_L),),
    State.STATE_ZERO_M_L: (("l", State.STATE_ZERO_M_LL),),
    # Unsigned zero, and the octal and hexadecimal prefixes it starts.
    State.STATE_ZERO: (
        ("x", State.STATE_HEX_PREFIX),
        (is_octal_digit, State.STATE_OCTAL),
        ("u", State.STATE_ZERO_U),
        ("l", State.STATE_ZERO_L),
    ),
    State.STATE_ZERO_U: (("l", State.STATE_ZERO_U_L),),
    State.STATE_ZERO_U_L: (("l", State.STATE_ZERO_U_LL),),
    State.STATE_ZERO_L: (
        ("u", State.STATE_ZERO_L_U),
        ("l", State.STATE_ZERO_LL),
    ),
    State.STATE_ZERO_LL: (("u", State.STATE_ZERO_LL_U),),
    # Octal.
    State.STATE_OCTAL: (
        (is_octal_digit, State.STATE_OCTAL),
        ("u", State.STATE_OCTAL_U),
        ("l", State.STATE_OCTAL_L),
    ),
    State.STATE_OCTAL_U: (("l", State.STATE_OCTAL_U_L),),
    State.STATE_OCTAL_U_L: (("l", State.STATE_OCTAL_U_LL),),
    State.STATE_OCTAL_L: (
        ("u", State.STATE_OCTAL_L_U),
        ("l", State.STATE_OCTAL_LL),
    ),
    State.STATE_OCTAL_LL: (("u", State.STATE_OCTAL_LL_U),),
    # Hexadecimal.
    State.STATE_HEX_PREFIX: ((is_hex_digit, State.STATE_HEX),),
    State.STATE_HEX: (
        (is_hex_digit, State.STATE_HEX),
        ("u", State.STATE_HEX_U),
        ("l", State.STATE_HEX_L),
    ),
    State.STATE_HEX_U: (("l", State.STATE_HEX_U_L),),
    State.STATE_HEX_U_L: (("l", State.STATE_HEX_U_LL),),
    State.STATE_HEX_L: (
        ("u", State.STATE_HEX_L_U),
        ("l", State.STATE_HEX_LL),
    ),
    State.STATE_HEX_LL: (("u", State.STATE_HEX_LL_U),),
}


def _fold(ch: str) -> str:
    return ch.lower() if ch.isascii() else ch


def _matches(matcher: _Matcher, ch: str) -> bool:
    if isinstance(matcher, str):
        return matcher == ch
    return matcher(ch)


def _step(state: State, ch: str) -> State:
    for matcher, target in _RULES.get(state, ()):
        if _matches(matcher, ch):
            return target
    return State.STATE_ERROR


def classify_integer(word: str) -> State:
    """Run the integer recogniser over ``word`` and return its final state.

    Letters are compared case-insensitively. Reading stops at a NUL character.
    An empty word leaves the recogniser in its start state.
    """
    state = State.STATE_START
    for ch in word.split("\0", 1)[0]:
        state = _step(state, _fold(ch))
    return state