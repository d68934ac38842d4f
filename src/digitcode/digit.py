"""
Digit value type.

A Digit is one of exactly ten base-10 symbols. There is no invalid Digit:
construction from anything other than '0'..'9' fails instead.
"""

from enum import Enum
from functools import total_ordering
from typing import Optional

from digitcode.errors import InvalidDigit


@total_ordering
class Digit(Enum):
    """
    A single decimal digit.

    The enum value is the numeric value, so ``Digit.SEVEN.value == 7``.

    Members are ordered by numeric value and are safe to use as dict keys
    or table indexes.
    """

    ZERO = 0
    ONE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9

    def __lt__(self, other):
        if not isinstance(other, Digit):
            return NotImplemented
        return self.value < other.value

    @property
    def char(self) -> str:
        """ASCII character for this digit ('0'..'9')."""
        return chr(ord("0") + self.value)

    @classmethod
    def parse_char(cls, c: str, position: Optional[int] = None) -> "Digit":
        """
        Parse a single ASCII character into a Digit.

        Args:
            c: Character to parse
            position: Optional index of the character in its source text,
                reported in the error

        Returns:
            The matching Digit

        Raises:
            InvalidDigit: If c is not exactly one character in '0'..'9'
        """
        # str.isdigit() also accepts non-ASCII digits such as '٣'
        if len(c) != 1 or not "0" <= c <= "9":
            raise InvalidDigit(c, position)
        return cls(ord(c) - ord("0"))
