"""
Render one CanonicalNumber in all four encodings.

The field order (decimal, BCD, Aiken, Stibitz) is fixed and is the
column order of batch output.
"""

from dataclasses import dataclass

from digitcode.codes import Encoding, encode
from digitcode.number import CanonicalNumber


@dataclass(frozen=True)
class Conversion:
    """
    The four renderings of a single number.

    Properties:
        decimal: e.g. "4 2 . 3 5"
        bcd: e.g. "0100 0010 . 0011 0101"
        aiken: e.g. "0100 0010 . 0011 1011"
        stibitz: e.g. "0111 0101 . 0110 1000"
    """

    decimal: str
    bcd: str
    aiken: str
    stibitz: str

    def to_line(self) -> str:
        """Tab-separated batch output line (without newline)."""
        return "\t".join((self.decimal, self.bcd, self.aiken, self.stibitz))


def convert(number: CanonicalNumber) -> Conversion:
    return Conversion(
        decimal=encode(Encoding.DECIMAL, number),
        bcd=encode(Encoding.BCD, number),
        aiken=encode(Encoding.AIKEN, number),
        stibitz=encode(Encoding.STIBITZ, number),
    )
