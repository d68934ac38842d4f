"""
Command-line entry point.

    digitcode < input.txt
    python -m digitcode < input.txt

Exit status:
    0  all lines converted
    1  a line failed (malformed record, unknown encoding, bad digit/codeword)
    2  usage error (any argument given, or invalid DIGITCODE_* setting)
"""

import argparse
import logging
import sys
from typing import List, Optional

from pydantic import ValidationError

from digitcode.batch import run_batch
from digitcode.config import Settings
from digitcode.errors import DigitCodeError, UsageError

logger = logging.getLogger("digitcode")

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises UsageError instead of exiting."""

    def error(self, message):
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    # No options at all, not even -h: every argument is a usage error.
    return _ArgumentParser(
        prog="digitcode",
        description="Convert decimal/bcd/aiken/stibitz values read from stdin",
        add_help=False,
    )


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    try:
        parser.parse_args(argv)
        settings = Settings()
    except UsageError as e:
        sys.stderr.write(parser.format_usage())
        sys.stderr.write(f"digitcode: error: {e}\n")
        return EXIT_USAGE
    except ValidationError as e:
        sys.stderr.write(f"digitcode: error: invalid configuration\n{e}\n")
        return EXIT_USAGE

    logging.basicConfig(
        level=settings.log_level,
        stream=sys.stderr,
        format="%(name)s: %(levelname)s: %(message)s",
    )

    try:
        run_batch(sys.stdin, sys.stdout, output_format=settings.output_format)
    except DigitCodeError as e:
        # Written directly so DIGITCODE_LOG_LEVEL cannot silence it.
        sys.stderr.write(f"digitcode: error: {type(e).__name__}: {e}\n")
        logger.debug("batch aborted", exc_info=True)
        return EXIT_FAILURE
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
