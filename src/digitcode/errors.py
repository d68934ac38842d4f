"""Error hierarchy for digit code conversion."""

from typing import Optional


class DigitCodeError(Exception):
    """Base exception for all conversion errors."""


class MalformedRecord(DigitCodeError):
    """A batch line does not carry both an encoding and a value."""

    def __init__(self, line_number: int, line: str) -> None:
        self.line_number = line_number
        self.line = line
        super().__init__(f"line {line_number}: malformed record {line!r}")


class UnknownEncoding(DigitCodeError):
    """The encoding name is not one of the recognized encodings."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"unknown encoding {name!r}")


class InvalidDigit(DigitCodeError):
    """A character outside '0'..'9' was found where a decimal digit was expected."""

    def __init__(self, char: str, position: Optional[int] = None) -> None:
        self.char = char
        self.position = position
        if position is None:
            message = f"invalid digit {char!r}"
        else:
            message = f"invalid digit {char!r} at position {position}"
        super().__init__(message)


class InvalidCodeword(DigitCodeError):
    """A token is not a codeword of the relevant code table."""

    def __init__(self, token: str, encoding: str) -> None:
        self.token = token
        self.encoding = encoding
        super().__init__(f"invalid {encoding} codeword {token!r}")


class UsageError(DigitCodeError):
    """The program was invoked with command-line arguments or bad settings."""
