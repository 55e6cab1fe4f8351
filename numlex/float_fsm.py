"""Recogniser for floating-point literals."""

from numlex.states import State

_DIGIT = "digit"

# For each state, where each input leads. A missing state or input means error.
_TRANSITIONS: dict[State, dict[str, State]] = {
    State.F_STATE_START: {
        "+": State.F_STATE_SIGN,
        "-": State.F_STATE_SIGN,
        _DIGIT: State.F_STATE_DIGIT,
        ".": State.F_STATE_POINT,
    },
    State.F_STATE_SIGN: {
        _DIGIT: State.F_STATE_SIGN_DIGIT,
        ".": State.F_STATE_POINT,
    },
    State.F_STATE_DIGIT: {
        _DIGIT: State.F_STATE_DIGIT,
        ".": State.F_STATE_DIGIT_POINT,
        "e": State.F_STATE_E,
    },
    State.F_STATE_DIGIT_POINT: {
        _DIGIT: State.F_STATE_ALLPOINT_DIGIT,
        "e": State.F_STATE_E,
        "l": State.F_STATE_DIGIT_POINT_L,
        "f": State.F_STATE_DIGIT_POINT_F,
    },
    State.F_STATE_SIGN_DIGIT: {
        _DIGIT: State.F_STATE_SIGN_DIGIT,
        ".": State.F_STATE_SIGN_DIGIT_POINT,
        "e": State.F_STATE_E,
    },
    State.F_STATE_POINT: {
        _DIGIT: State.F_STATE_ALLPOINT_DIGIT,
        "e": State.F_STATE_E,
        "f": State.F_STATE_POINT_F,
        "l": State.F_STATE_POINT_L,
    },
    State.F_STATE_SIGN_DIGIT_POINT: {
        _DIGIT: State.F_STATE_ALLPOINT_DIGIT,
        "e": State.F_STATE_E,
        "f": State.F_STATE_SIGN_DIGIT_POINT_F,
        "l": State.F_STATE_SIGN_DIGIT_POINT_L,
    },
    State.F_STATE_ALLPOINT_DIGIT: {
        _DIGIT: State.F_STATE_ALLPOINT_DIGIT,
        "f": State.F_STATE_ALLPOINT_DIGIT_F,
        "l": State.F_STATE_ALLPOINT_DIGIT_L,
        "e": State.F_STATE_E,
    },
    State.F_STATE_E: {
        _DIGIT: State.F_STATE_E_DIGIT,
        "-": State.F_STATE_E_SIGN,
        "+": State.F_STATE_E_SIGN,
    },
    State.F_STATE_E_DIGIT: {
        _DIGIT: State.F_STATE_E_DIGIT,
        "f": State.F_STATE_E_DIGIT_F,
        "l": State.F_STATE_E_DIGIT_L,
    },
    State.F_STATE_E_SIGN: {
        _DIGIT: State.F_STATE_E_SIGN_DIGIT,
    },
    State.F_STATE_E_SIGN_DIGIT: {
        _DIGIT: State.F_STATE_E_SIGN_DIGIT,
        "f": State.F_STATE_E_SIGN_DIGIT_F,
        "l": State.F_STATE_E_SIGN_DIGIT_L,
    },
}


def is_digit(ch: str) -> bool:
    """True for the ASCII digits 0 to 9."""
    return "0" <= ch <= "9"


def _fold(ch: str) -> str:
    return ch.lower() if ch.isascii() else ch


def _step(state: State, ch: str) -> State:
    moves = _TRANSITIONS.get(state)
    if moves is None:
        return State.F_STATE_ERROR
    if is_digit(ch) and _DIGIT in moves:
        return moves[_DIGIT]
    return moves.get(ch, State.F_STATE_ERROR)


def classify_float(word: str) -> State:
    """Run the floating-point recogniser over ``word`` and return its final state.

    Letters are compared case-insensitively. Reading stops at a NUL character.
    """
    state = State.F_STATE_START
    for ch in word.split("\0", 1)[0]:
        state = _step(state, _fold(ch))
    return state