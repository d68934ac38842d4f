#!/usr/bin/env python3
"""
Demo: Convert a few numbers through all four encodings.

Shows the TSV batch output and the JSON/YAML record forms.
"""

import io

from digitcode.batch import run_batch
from digitcode.codes import parse_decimal
from digitcode.conversion import convert
from digitcode.serialization import conversion_to_json, conversion_to_yaml


SAMPLE_INPUT = """\
decimal 42.35
decimal 44,51
decimal 7
bcd 01000010.00110101
aiken 0100.1011
stibitz 0111.0110
"""


def main():
    print("=" * 80)
    print("BATCH OUTPUT (decimal / BCD / Aiken / Stibitz)")
    print("=" * 80)

    out = io.StringIO()
    run_batch(io.StringIO(SAMPLE_INPUT), out)
    for line in out.getvalue().splitlines():
        print(line.replace("\t", "  |  "))

    conversion = convert(parse_decimal("42.35"))

    print("\nJSON RECORD:")
    print("-" * 80)
    print(conversion_to_json(conversion))

    print("\nYAML RECORD:")
    print("-" * 80)
    print(conversion_to_yaml(conversion))


if __name__ == "__main__":
    main()
