"""States of the integer and floating-point literal recognisers."""

from enum import IntEnum, auto


class State(IntEnum):
    """Every state either recogniser can stop in.

    Integer states come first, starting at 6. The floating-point states
    follow them in the same numbering.
    """

    STATE_START = 6
    STATE_SIGN_P = auto()  # +
    STATE_SIGN_M = auto()  # -
    STATE_DECIMAL_P = auto()  # +d
    STATE_DECIMAL_P_U = auto()  # +du
    STATE_DECIMAL_P_U_L = auto()  # +dul
    STATE_DECIMAL_P_U_LL = auto()  # +dull
    STATE_DECIMAL_P_L = auto()  # +dl
    STATE_DECIMAL_P_L_U = auto()  # +dlu
    STATE_DECIMAL_P_LL = auto()  # +dll
    STATE_DECIMAL_P_LL_U = auto()  # +dllu
    STATE_DECIMAL_M = auto()  # -d
    STATE_DECIMAL_M_L = auto()  # -dl
    STATE_DECIMAL_M_LL = auto()  # -dll
    STATE_ZERO_P = auto()  # +0
    STATE_ZERO_P_U = auto()  # +0u
    STATE_ZERO_P_U_L = auto()  # +0ul
    STATE_ZERO_P_U_LL = auto()  # +0ull
    STATE_ZERO_P_L = auto()  # +0l
    STATE_ZERO_P_L_U = auto()  # +0lu
    STATE_ZERO_P_LL = auto()  # +0ll
    STATE_ZERO_P_LL_U = auto()  # +0llu
    STATE_ZERO_M = auto()  # -0
    STATE_ZERO_M_L = auto()  # -0l
    STATE_ZERO_M_LL = auto()  # -0ll
    STATE_DECIMAL = auto()  # d
    STATE_DECIMAL_U = auto()  # du
    STATE_DECIMAL_U_L = auto()  # dul
    STATE_DECIMAL_U_LL = auto()  # dull
    STATE_DECIMAL_L = auto()  # dl
    STATE_DECIMAL_L_U = auto()  # dlu
    STATE_DECIMAL_LL = auto()  # dll
    STATE_DECIMAL_LL_U = auto()  # dllu
    STATE_ZERO = auto()  # 0
    STATE_ZERO_U = auto()  # 0u
    STATE_ZERO_U_L = auto()  # 0ul
    STATE_ZERO_U_LL = auto()  # 0ull
    STATE_ZERO_L = auto()  # 0l
    STATE_ZERO_L_U = auto()  # 0lu
    STATE_ZERO_LL = auto()  # 0ll
    STATE_ZERO_LL_U = auto()  # 0llu
    STATE_OCTAL = auto()  # 0o
    STATE_OCTAL_U = auto()  # 0ou
    STATE_OCTAL_U_L = auto()  # 0oul
    STATE_OCTAL_U_LL = auto()  # 0oull
    STATE_OCTAL_L = auto()  # 0ol
    STATE_OCTAL_L_U = auto()  # 0olu
    STATE_OCTAL_LL = auto()  # 0oll
    STATE_OCTAL_LL_U = auto()  # 0ollu
    STATE_HEX_PREFIX = auto()  # 0x
    STATE_HEX = auto()  # 0xz
    STATE_HEX_U = auto()  # 0xzu
    STATE_HEX_U_L = auto()  # 0xzul
    STATE_HEX_U_LL = auto()  # 0xzull
    STATE_HEX_L = auto()  # 0xzl
    STATE_HEX_L_U = auto()  # 0xzlu
    STATE_HEX_LL = auto()  # 0xzll
    STATE_HEX_LL_U = auto()  # 0xzllu
    STATE_ERROR = auto()
    F_STATE_START = auto()
    F_STATE_SIGN = auto()  # +/-
    F_STATE_SIGN_DIGIT = auto()  # +/-d
    F_STATE_DIGIT = auto()  # d
    F_STATE_DIGIT_POINT = auto()  # d.
    F_STATE_DIGIT_POINT_F = auto()  # d.f
    F_STATE_DIGIT_POINT_L = auto()  # d.l
    F_STATE_POINT = auto()  # .
    F_STATE_POINT_F = auto()  # .f
    F_STATE_POINT_L = auto()  # .l
    F_STATE_SIGN_DIGIT_POINT = auto()  # +/-d.
    F_STATE_SIGN_DIGIT_POINT_F = auto()  # +/-d.f
    F_STATE_SIGN_DIGIT_POINT_L = auto()  # +/-d.l
    F_STATE_ALLPOINT_DIGIT = auto()  # *.d
    F_STATE_ALLPOINT_DIGIT_F = auto()  # *.df
    F_STATE_ALLPOINT_DIGIT_L = auto()  # *.dl
    F_STATE_E = auto()  # *e
    F_STATE_E_DIGIT = auto()  # *ed
    F_STATE_E_DIGIT_F = auto()  # *edf
    F_STATE_E_DIGIT_L = auto()  # *edl
    F_STATE_E_SIGN = auto()  # *e+/-
    F_STATE_E_SIGN_DIGIT = auto()  # *e+/-d
    F_STATE_E_SIGN_DIGIT_F = auto()  # *e+/-df
    F_STATE_E_SIGN_DIGIT_L = auto()  # *e+/-dl
    F_STATE_ERROR = auto()