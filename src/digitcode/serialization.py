"""
Serialization helpers for CanonicalNumber and Conversion records.

Numbers are stored as plain digit strings, which keeps the structure
stable, explicit and lossless:

    {"integer": "42", "fractional": "35"}
"""
from __future__ import annotations

import json
from typing import Any, Dict

import yaml

from digitcode.conversion import Conversion
from digitcode.digit import Digit
from digitcode.number import CanonicalNumber


def _digits_to_str(digits) -> str:
    return "".join(d.char for d in digits)


def _digits_from_str(s: Any, key: str) -> tuple:
    if not isinstance(s, str):
        # YAML reads unquoted 42 as an int and 042 as octal; digits must stay text.
        raise TypeError(f"{key!r} must be a digit string, got {type(s).__name__}")
    return tuple(Digit.parse_char(c, i) for i, c in enumerate(s))


def number_to_dict(n: CanonicalNumber) -> Dict[str, Any]:
    return {"integer": _digits_to_str(n.integer), "fractional": _digits_to_str(n.fractional)}


def number_from_dict(d: Dict[str, Any]) -> CanonicalNumber:
    return CanonicalNumber(
        integer=_digits_from_str(d.get("integer", ""), "integer"),
        fractional=_digits_from_str(d.get("fractional", ""), "fractional"),
    )


def number_to_json(n: CanonicalNumber) -> str:
    return json.dumps(number_to_dict(n), sort_keys=True)


def number_from_json(s: str) -> CanonicalNumber:
    return number_from_dict(json.loads(s))


def number_to_yaml(n: CanonicalNumber) -> str:
    return yaml.safe_dump(number_to_dict(n))


def number_from_yaml(s: str) -> CanonicalNumber:
    return number_from_dict(yaml.safe_load(s))


def conversion_to_dict(c: Conversion) -> Dict[str, Any]:
    return {
        "decimal": c.decimal,
        "bcd": c.bcd,
        "aiken": c.aiken,
        "stibitz": c.stibitz,
    }


def conversion_from_dict(d: Dict[str, Any]) -> Conversion:
    return Conversion(decimal=d["decimal"], bcd=d["bcd"], aiken=d["aiken"], stibitz=d["stibitz"])


def conversion_to_json(c: Conversion) -> str:
    return json.dumps(conversion_to_dict(c), sort_keys=True)


def conversion_to_yaml(c: Conversion) -> str:
    return yaml.safe_dump(conversion_to_dict(c), sort_keys=True)
