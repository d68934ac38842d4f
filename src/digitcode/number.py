"""
Canonical Number

The language of the whole package: every decoder builds one,
every encoder reads one.
"""

from dataclasses import dataclass, field
from typing import Iterable, Tuple

from digitcode.digit import Digit


@dataclass(frozen=True)
class CanonicalNumber:
    """
    A non-negative decimal number as two digit sequences.

    Properties:
        integer:
            Integer-part digits, most significant first
        fractional:
            Fractional-part digits, first digit after the separator first

    Either part may be empty. Digits are stored exactly as parsed:
    no leading or trailing zeros are added or removed.

    IMPORTANT:
        This object is immutable (frozen=True).
        Sequences passed in are frozen into tuples.
    """

    integer: Tuple[Digit, ...] = field(default_factory=tuple)
    fractional: Tuple[Digit, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "integer", tuple(self.integer))
        object.__setattr__(self, "fractional", tuple(self.fractional))

    @property
    def has_fraction(self) -> bool:
        return bool(self.fractional)

    def digits(self) -> Tuple[Digit, ...]:
        """All digits, integer part first."""
        return self.integer + self.fractional

    @classmethod
    def from_values(cls, integer: Iterable[int] = (), fractional: Iterable[int] = ()) -> "CanonicalNumber":
        """Build a number from plain ints, e.g. ``from_values([4, 2], [3, 5])``."""
        return cls(
            integer=tuple(Digit(v) for v in integer),
            fractional=tuple(Digit(v) for v in fractional),
        )
