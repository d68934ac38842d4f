"""
Line-oriented batch driver.

Input, one record per line:

    <encoding> <value>

Output, one line per record:

    decimal<TAB>bcd<TAB>aiken<TAB>stibitz

ARCHITECTURAL RULE:
    Fail fast. The first bad line raises and nothing after it is written.
    There is no per-line recovery.
"""

import logging
import re
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, TextIO

from digitcode.codes import Encoding, decode
from digitcode.conversion import Conversion, convert
from digitcode.errors import MalformedRecord
from digitcode.serialization import conversion_to_json, conversion_to_yaml

logger = logging.getLogger(__name__)

# ASCII only: U+00A0 and other Unicode spaces stay inside tokens.
_ASCII_WHITESPACE_RE = re.compile(r"[ \t\n\r\f]+")


@dataclass(frozen=True)
class Record:
    """
    One parsed input line.

    Properties:
        line_number: 1-based position in the input
        encoding: Encoding the value is written in
        value: Value token, still undecoded
    """

    line_number: int
    encoding: Encoding
    value: str


def parse_record(line: str, line_number: int) -> Record:
    """
    Split a batch line into encoding and value.

    Tokens after the second are ignored.

    Raises:
        MalformedRecord: If the line has fewer than two tokens
        UnknownEncoding: If the first token is not an encoding name
    """
    parts = [p for p in _ASCII_WHITESPACE_RE.split(line) if p]
    if len(parts) < 2:
        raise MalformedRecord(line_number, line.rstrip("\r\n"))
    return Record(line_number=line_number, encoding=Encoding.from_name(parts[0]), value=parts[1])


def process_line(line: str, line_number: int) -> Conversion:
    record = parse_record(line, line_number)
    number = decode(record.encoding, record.value)
    logger.debug("line %d: %s %r -> %s", line_number, record.encoding.value, record.value, number)
    return convert(number)


def _render_yaml(c: Conversion) -> str:
    return "---\n" + conversion_to_yaml(c)


OUTPUT_RENDERERS: Dict[str, Callable[[Conversion], str]] = {
    "tsv": lambda c: c.to_line() + "\n",
    "json": lambda c: conversion_to_json(c) + "\n",
    "yaml": _render_yaml,
}


def run_batch(lines: Iterable[str], out: TextIO, output_format: str = "tsv") -> int:
    """
    Convert every line and write the results in input order.

    Args:
        lines: Input lines (a text stream works)
        out: Destination stream
        output_format: "tsv", "json" or "yaml"

    Returns:
        Number of records written

    Raises:
        ValueError: If output_format is not a known format
        DigitCodeError: From the first line that fails, after all earlier
            lines have been written
    """
    if output_format not in OUTPUT_RENDERERS:
        raise ValueError(
            f"unknown output format {output_format!r}, expected one of {sorted(OUTPUT_RENDERERS)}"
        )
    render = OUTPUT_RENDERERS[output_format]
    count = 0
    for line_number, line in enumerate(lines, start=1):
        out.write(render(process_line(line, line_number)))
        count += 1
    logger.info("converted %d record(s)", count)
    return count
