"""Conversion between integers and Roman numerals."""

from itertools import groupby

_NUMERALS = (
    (1000, "M"),
    (900, "CM"),
    (500, "D"),
    (400, "CD"),
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
)

_VALUES = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}

# Each numeral that may be written before a larger one, and what it may precede.
_SUBTRACTIVE = {"I": "VX", "X": "LC", "C": "DM"}


class InvalidRomanError(ValueError):
    """Raised when a string is not a well-formed Roman numeral."""

    def __init__(self, numeral: str = "") -> None:
        super().__init__("invalid Roman numeral")
        self.numeral = numeral


def int_to_roman(n: int) -> str:
    """Return the Roman numeral for ``n``, or ``""`` outside 1..3999."""
    if not 1 <= n <= 3999:
        return ""
    parts = []
    for value, symbol in _NUMERALS:
        count, n = divmod(n, value)
        parts.append(symbol * count)
    return "".join(parts)


def roman_to_int(s: str) -> int:
    """Parse a Roman numeral in any letter case.

    Raises InvalidRomanError for empty input, unknown characters, bad
    repetitions (IIII, VV) and bad subtractive pairs (IL, IXI).
    """
    if not s:
        raise InvalidRomanError(s)
    numeral = s.upper()
    _validate(numeral)
    values = [_VALUES[ch] for ch in numeral]
    return sum(
        -current if current < following else current
        for current, following in zip(values, values[1:] + [0])
    )


def _validate(numeral: str) -> None:
    if any(ch not in _VALUES for ch in numeral):
        raise InvalidRomanError(numeral)

    for ch, run in groupby(numeral):
        length = sum(1 for _ in run)
        if (ch in "VLD" and length > 1) or (ch in "IXCM" and length > 3):
            raise InvalidRomanError(numeral)

    for current_ch, next_ch, after_ch in zip(numeral, numeral[1:], numeral[2:] + " "):
        current = _VALUES[current_ch]
        if current >= _VALUES[next_ch]:
            continue
        if next_ch not in _SUBTRACTIVE.get(current_ch, ""):
            raise InvalidRomanError(numeral)
        # After a subtractive pair the next numeral must be smaller than its
        # first member: IXI is not allowed.
        if _VALUES.get(after_ch, 0) >= current:
            raise InvalidRomanError(numeral)