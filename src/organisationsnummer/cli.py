"""
Command line interface for organisationsnummer.

Usage:
    organisationsnummer 556016-0680
    organisationsnummer --json 5561034249 121212121212
    python -m organisationsnummer 559244-0001
"""

import argparse
import json
import logging
import sys
from typing import Optional

from organisationsnummer.config import normalize_log_level, settings
from organisationsnummer.organisationsnummer import InvalidInputError, Organisationsnummer

logger = logging.getLogger(__name__)


def describe(org: Organisationsnummer) -> dict:
    """Collect the derived values of a parsed organisationsnummer."""
    formatted = org.format()
    return {
        "long_format": formatted.long,
        "short_format": formatted.short,
        "type": org.type(),
        "vat_number": org.vat_number(),
        "is_personnummer": org.is_personnummer(),
    }


def log_level(value: str) -> str:
    try:
        return normalize_log_level(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="organisationsnummer",
        description="Validate and format Swedish organization numbers",
    )
    parser.add_argument(
        "numbers",
        nargs="+",
        metavar="ORGANISATIONSNUMMER",
        help="Organization number(s) to check",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print one JSON object per number",
    )
    parser.add_argument(
        "--log-level",
        type=log_level,
        default=settings.log_level,
        help=f"Logging level (default: {settings.log_level})",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    exit_code = 0
    for number in args.numbers:
        try:
            org = Organisationsnummer.parse(number)
        except InvalidInputError as e:
            logger.error(f"{number}: {e}")
            if args.json:
                print(json.dumps({"input": number, "valid": False}, ensure_ascii=False))
            else:
                print(f"{number}: invalid organization number provided")
            exit_code = 1
            continue

        if args.json:
            print(json.dumps({"input": number, "valid": True, **describe(org)}, ensure_ascii=False))
        else:
            print(
                f"The company with organization number {org.format().long} "
                f"is a {org.type()} and the vat number is {org.vat_number()}"
            )

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
