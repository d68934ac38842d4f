"""
Code tables, decoders and encoders.

Every encoding is a fixed 10-entry table of codewords indexed by digit value:

    digit  decimal  BCD (8421)  Aiken (2421)  Stibitz (Excess-3)
      0       0       0000         0000          0011
      1       1       0001         0001          0100
      2       2       0010         0010          0101
      3       3       0011         0011          0110
      4       4       0100         0100          0111
      5       5       0101         1011          1000
      6       6       0110         1100          1001
      7       7       0111         1101          1010
      8       8       1000         1110          1011
      9       9       1001         1111          1100

ARCHITECTURAL RULE:
    There is one generic encoder (format_code) and one generic decoder
    (parse_code). Codeword width comes from the table, so parse_code also
    reads space-separated decimal ("4 2 . 3 5"). Per-encoding functions only
    bind a table. parse_decimal has its own scanner because it works per
    character and reports InvalidDigit rather than InvalidCodeword.

Rendered form:
    Codewords are joined by single spaces. A non-empty fractional part is
    preceded by a lone "." token:

        42.35 -> "4 2 . 3 5"
              -> "0100 0010 . 0011 0101"   (BCD)
"""

import re
from enum import Enum
from typing import Callable, Dict, List, Sequence, Tuple

from digitcode.digit import Digit
from digitcode.errors import InvalidCodeword, UnknownEncoding
from digitcode.number import CanonicalNumber


class Encoding(Enum):
    """The closed set of supported encodings. Values are the batch names."""

    DECIMAL = "decimal"
    BCD = "bcd"
    AIKEN = "aiken"
    STIBITZ = "stibitz"

    @classmethod
    def from_name(cls, name: str) -> "Encoding":
        """Exact, case-sensitive lookup by batch name."""
        try:
            return cls(name)
        except ValueError:
            raise UnknownEncoding(name) from None


CodeTable = Tuple[str, ...]

CODE_TABLES: Dict[Encoding, CodeTable] = {
    Encoding.DECIMAL: ("0", "1", "2", "3", "4", "5", "6", "7", "8", "9"),
    Encoding.BCD: ("0000", "0001", "0010", "0011", "0100", "0101", "0110", "0111", "1000", "1001"),
    Encoding.AIKEN: ("0000", "0001", "0010", "0011", "0100", "1011", "1100", "1101", "1110", "1111"),
    Encoding.STIBITZ: ("0011", "0100", "0101", "0110", "0111", "1000", "1001", "1010", "1011", "1100"),
}

# Accepted on input; only OUTPUT_SEPARATOR is ever rendered.
SEPARATORS = (".", ",")
OUTPUT_SEPARATOR = "."

_SEPARATOR_SPLIT_RE = re.compile(r"([.,])")


def _inverse(table: CodeTable) -> Dict[str, Digit]:
    return {codeword: Digit(value) for value, codeword in enumerate(table)}


_INVERSE_TABLES: Dict[Encoding, Dict[str, Digit]] = {
    encoding: _inverse(table) for encoding, table in CODE_TABLES.items()
}


# ---------------------------------------------------------------------------
# Encoding (CanonicalNumber -> text)
# ---------------------------------------------------------------------------

def format_code(number: CanonicalNumber, table: Sequence[str]) -> str:
    """
    Render a number through a 10-entry codeword table.

    Args:
        number: Number to render
        table: Codewords indexed by digit value

    Returns:
        Space-joined codewords, with a "." token before the fractional
        part when there is one
    """
    tokens = [table[d.value] for d in number.integer]
    if number.fractional:
        tokens.append(OUTPUT_SEPARATOR)
        tokens.extend(table[d.value] for d in number.fractional)
    return " ".join(tokens)


def format_decimal(number: CanonicalNumber) -> str:
    return format_code(number, CODE_TABLES[Encoding.DECIMAL])


def format_bcd(number: CanonicalNumber) -> str:
    return format_code(number, CODE_TABLES[Encoding.BCD])


def format_aiken(number: CanonicalNumber) -> str:
    return format_code(number, CODE_TABLES[Encoding.AIKEN])


def format_stibitz(number: CanonicalNumber) -> str:
    return format_code(number, CODE_TABLES[Encoding.STIBITZ])


# ---------------------------------------------------------------------------
# Decoding (text -> CanonicalNumber)
# ---------------------------------------------------------------------------

def parse_decimal(text: str) -> CanonicalNumber:
    """
    Parse a decimal digit string such as "42.35" or "42,35".

    Only the first "." or "," is a separator. Any later separator is
    treated as an ordinary character and therefore rejected.

    Raises:
        InvalidDigit: On the first character that is not a digit,
            with its position in text
    """
    integer: List[Digit] = []
    fractional: List[Digit] = []
    target = integer

    for position, c in enumerate(text):
        if target is integer and c in SEPARATORS:
            target = fractional
            continue
        target.append(Digit.parse_char(c, position))

    return CanonicalNumber(integer=tuple(integer), fractional=tuple(fractional))


def _split_codewords(text: str, encoding: Encoding) -> List[str]:
    """
    Break code text into codeword and separator tokens.

    Accepts both the rendered form ("0100 0010 . 0011") and the compact
    form ("01000010.0011").
    """
    width = len(CODE_TABLES[encoding][0])
    tokens: List[str] = []
    for chunk in text.split():
        for run in _SEPARATOR_SPLIT_RE.split(chunk):
            if not run:
                continue
            if run in SEPARATORS:
                tokens.append(run)
                continue
            if len(run) % width:
                raise InvalidCodeword(run, encoding.value)
            tokens.extend(run[i:i + width] for i in range(0, len(run), width))
    return tokens


def parse_code(text: str, encoding: Encoding) -> CanonicalNumber:
    """
    Parse codeword text by reverse lookup in the encoding's table.

    Args:
        text: Codewords, space separated or run together
        encoding: Which table to decode with

    Returns:
        CanonicalNumber

    Raises:
        InvalidCodeword: If a token is not in the table, a run does not
            split into whole codewords, or a second separator appears
    """
    inverse = _INVERSE_TABLES[encoding]
    integer: List[Digit] = []
    fractional: List[Digit] = []
    target = integer

    for token in _split_codewords(text, encoding):
        if token in SEPARATORS:
            if target is fractional:
                raise InvalidCodeword(token, encoding.value)
            target = fractional
            continue
        digit = inverse.get(token)
        if digit is None:
            raise InvalidCodeword(token, encoding.value)
        target.append(digit)

    return CanonicalNumber(integer=tuple(integer), fractional=tuple(fractional))


def parse_bcd(text: str) -> CanonicalNumber:
    return parse_code(text, Encoding.BCD)


def parse_aiken(text: str) -> CanonicalNumber:
    return parse_code(text, Encoding.AIKEN)


def parse_stibitz(text: str) -> CanonicalNumber:
    return parse_code(text, Encoding.STIBITZ)


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------

DECODERS: Dict[Encoding, Callable[[str], CanonicalNumber]] = {
    Encoding.DECIMAL: parse_decimal,
    Encoding.BCD: parse_bcd,
    Encoding.AIKEN: parse_aiken,
    Encoding.STIBITZ: parse_stibitz,
}

ENCODERS: Dict[Encoding, Callable[[CanonicalNumber], str]] = {
    Encoding.DECIMAL: format_decimal,
    Encoding.BCD: format_bcd,
    Encoding.AIKEN: format_aiken,
    Encoding.STIBITZ: format_stibitz,
}


def decode(encoding: Encoding, text: str) -> CanonicalNumber:
    return DECODERS[encoding](text)


def encode(encoding: Encoding, number: CanonicalNumber) -> str:
    return ENCODERS[encoding](number)


__all__ = [
    "Encoding",
    "CODE_TABLES",
    "SEPARATORS",
    "OUTPUT_SEPARATOR",
    "format_code",
    "format_decimal",
    "format_bcd",
    "format_aiken",
    "format_stibitz",
    "parse_code",
    "parse_decimal",
    "parse_bcd",
    "parse_aiken",
    "parse_stibitz",
    "decode",
    "encode",
]
