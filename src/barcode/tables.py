"""
EAN-13 symbol tables.

Pattern codes are the four module widths of a digit (space, bar, space, bar
for the left half; bar, space, bar, space for the right half) written as a
decimal number, e.g. 3211 for three modules of space, two of bar, one, one.
"""

from collections.abc import Mapping
from types import MappingProxyType

PARITY_L = "L"
PARITY_G = "G"
PARITY_R = "R"

# Left half: pattern code -> (digit, parity)
LG_CODES: Mapping[int, tuple[int, str]] = MappingProxyType(
    {
        3211: (0, PARITY_L), 1123: (0, PARITY_G),
        2221: (1, PARITY_L), 1222: (1, PARITY_G),
        2122: (2, PARITY_L), 2212: (2, PARITY_G),
        1411: (3, PARITY_L), 1141: (3, PARITY_G),
        1132: (4, PARITY_L), 2311: (4, PARITY_G),
        1231: (5, PARITY_L), 1321: (5, PARITY_G),
        1114: (6, PARITY_L), 4111: (6, PARITY_G),
        1312: (7, PARITY_L), 2131: (7, PARITY_G),
        1213: (8, PARITY_L), 3121: (8, PARITY_G),
        3112: (9, PARITY_L), 2113: (9, PARITY_G),
    }
)

# Right half: pattern code -> digit (always R parity)
R_CODES: Mapping[int, int] = MappingProxyType(
    {
        3211: 0,
        2221: 1,
        2122: 2,
        1411: 3,
        1132: 4,
        1231: 5,
        1114: 6,
        1312: 7,
        1213: 8,
        3112: 9,
    }
)

# Parity string of the left half -> implied leading digit
PARITY_LEADING_DIGIT: Mapping[str, int] = MappingProxyType(
    {
        "LLLLLL": 0,
        "LLGLGG": 1,
        "LLGGLG": 2,
        "LLGGGL": 3,
        "LGLLGG": 4,
        "LGGLLG": 5,
        "LGGGLL": 6,
        "LGLGLG": 7,
        "LGLGGL": 8,
        "LGGLGL": 9,
    }
)

_DIGIT_CODES: Mapping[tuple[int, str], int] = MappingProxyType(
    {
        **{value: code for code, value in LG_CODES.items()},
        **{(digit, PARITY_R): code for code, digit in R_CODES.items()},
    }
)

_LEADING_DIGIT_PARITY: Mapping[int, str] = MappingProxyType(
    {digit: parity for parity, digit in PARITY_LEADING_DIGIT.items()}
)


def encode_digit(digit: int, parity: str) -> int:
    """
    Get the pattern code for a digit in the given parity.

    Raises:
        KeyError: If the digit/parity pair has no encoding
    """
    return _DIGIT_CODES[(digit, parity)]


def parity_for_leading_digit(digit: int) -> str:
    """Get the left-half parity string that encodes a leading digit."""
    return _LEADING_DIGIT_PARITY[digit]


def pattern_widths(code: int) -> tuple[int, int, int, int]:
    """Split a pattern code into its four module widths."""
    return (code // 1000, code // 100 % 10, code // 10 % 10, code % 10)
