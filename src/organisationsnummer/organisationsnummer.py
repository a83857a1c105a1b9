"""
Swedish organisationsnummer (organization number) parsing and validation.

Format: NNNNNN-NNNN (10 digits), optionally prefixed with 16
- First digit: Organization type (see ORGANIZATION_TYPES)
- Digits 3-4: >= 20 (to distinguish from personnummer)
- Digits 1-2: >= 10 (no leading zero)
- Last digit: Luhn checksum

Sole proprietorships (enskild firma) have no organisationsnummer of their own
and use the owner's personnummer. Anything that parses as a personnummer is
therefore treated as one.
"""

import logging
import random
import re
from dataclasses import dataclass
from typing import Optional

from organisationsnummer.luhn import luhn_checksum, luhn_valid
from organisationsnummer.personnummer import Personnummer, PersonnummerError

logger = logging.getLogger(__name__)


ORGANISATIONSNUMMER_PATTERN = re.compile(
    r"^(\d{2})?(\d{2})(\d{2})(\d{2})([-+]?)(\d{3})(\d)$", re.ASCII
)

# The only century prefix allowed in front of an organisationsnummer
ALLOWED_PREFIX = 16

VAT_COUNTRY_CODE = "SE"
VAT_SUFFIX = "01"

ORGANIZATION_TYPES = {
    "0": "Enskild firma",
    "1": "Dödsbon",
    "2": "Stat, landsting, kommun eller församling",
    "3": "Utländska företag som bedriver näringsverksamhet eller äger fastigheter i Sverige",
    "5": "Aktiebolag",
    "6": "Enkelt bolag",
    "7": "Ekonomisk förening eller bostadsrättsförening",
    "8": "Ideella förening och stiftelse",
    "9": "Handelsbolag, kommanditbolag och enkelt bolag",
}

UNKNOWN_TYPE = "Okänt"


class InvalidInputError(ValueError):
    """Raised when a string is not a valid organisationsnummer."""

    pass


@dataclass(frozen=True)
class FormattedOrganisationsnummer:
    """Long (NNNNNN-NNNN) and short (NNNNNNNNNN) organisationsnummer formats."""

    long: str
    short: str


def _group_value(match: re.Match, group: int) -> int:
    value = match.group(group)
    assert value is not None and value.isdigit(), f"non-digit capture {value!r}"
    return int(value)


def _match_structure(value: str) -> str:
    """
    Match the organisationsnummer structure and return the normalized digits.

    Raises InvalidInputError on any structural violation.
    """
    match = ORGANISATIONSNUMMER_PATTERN.match(value)
    if not match:
        logger.debug(f"Rejected {value!r}: does not match organisationsnummer format")
        raise InvalidInputError("Invalid organisationsnummer format")

    # May only be prefixed with 16
    if match.group(1) is not None and _group_value(match, 1) != ALLOWED_PREFIX:
        logger.debug(f"Rejected {value!r}: prefix {match.group(1)} is not allowed")
        raise InvalidInputError("Invalid organisationsnummer format")

    # Digits 3-4 must be >= 20
    if _group_value(match, 3) < 20:
        logger.debug(f"Rejected {value!r}: digits 3-4 below 20")
        raise InvalidInputError("Invalid organisationsnummer format")

    # Digits 1-2 may not start with a leading zero
    if _group_value(match, 2) < 10:
        logger.debug(f"Rejected {value!r}: leading zero")
        raise InvalidInputError("Invalid organisationsnummer format")

    return "".join(match.group(i) for i in (2, 3, 4, 6, 7))


@dataclass(frozen=True)
class Organisationsnummer:
    """
    A parsed, valid organisationsnummer.

    Holds either the normalized 10 digits of a plain organisationsnummer or
    the Personnummer of a sole proprietor, never both. Use parse() to create
    instances.
    """

    digits: Optional[str] = None
    delegate: Optional[Personnummer] = None

    def __post_init__(self):
        if (self.digits is None) == (self.delegate is None):
            raise ValueError("Exactly one of digits and delegate must be set")

    @classmethod
    def parse(cls, value: str) -> "Organisationsnummer":
        """
        Parse a Swedish organisationsnummer.

        Accepts formats:
        - NNNNNN-NNNN
        - NNNNNNNNNN
        - 16NNNNNN-NNNN (with prefix)
        - 16NNNNNNNNNN (with prefix)
        - any valid personnummer (enskild firma)

        Raises InvalidInputError if the value is not a valid organisationsnummer.
        """
        if not isinstance(value, str):
            raise InvalidInputError(f"Expected a string, got {type(value).__name__}")

        try:
            return cls(delegate=Personnummer.parse(value))
        except PersonnummerError:
            pass

        # Surrounding whitespace is tolerated, as in Personnummer.parse
        digits = _match_structure(value.strip())

        # Luhn checksum must be valid
        if not luhn_valid(digits):
            logger.debug(f"Rejected {value!r}: invalid checksum")
            raise InvalidInputError("Invalid organisationsnummer checksum")

        return cls(digits=digits)

    def valid(self) -> bool:
        """
        Always True.

        An Organisationsnummer can only be created from a valid number; this
        mirrors Personnummer.valid().
        """
        return True

    def _canonical(self) -> str:
        if self.delegate is not None:
            return self.delegate.format().long[2:].replace("-", "")
        return self.digits

    def format(self) -> FormattedOrganisationsnummer:
        """
        Format as NNNNNN-NNNN (long) and NNNNNNNNNN (short).

        A personnummer held by someone aged 100 or more is written with '+'
        on its own, but an organisationsnummer always uses '-'.
        """
        number = self._canonical()
        return FormattedOrganisationsnummer(
            long=f"{number[:6]}-{number[6:]}",
            short=number,
        )

    def format_number(self, separator: bool = True) -> str:
        """Format with or without separator."""
        formatted = self.format()
        return formatted.long if separator else formatted.short

    def type(self) -> str:
        """Get the organization type."""
        first = "0" if self.delegate is not None else self.digits[0]
        return ORGANIZATION_TYPES.get(first, UNKNOWN_TYPE)

    def vat_number(self) -> str:
        """Get the Swedish VAT number, SE + 10 digits + 01."""
        return f"{VAT_COUNTRY_CODE}{self._canonical()}{VAT_SUFFIX}"

    def is_personnummer(self) -> bool:
        """Check if this is the personnummer of a sole proprietor."""
        return self.delegate is not None

    def personnummer(self) -> Personnummer:
        """
        Get the Personnummer.

        Raises PersonnummerError for a plain organisationsnummer, since its
        digits never form a valid personnummer.
        """
        if self.delegate is not None:
            return self.delegate
        return Personnummer.parse(self.digits)

    def __str__(self) -> str:
        return self.format().long


def parse(value: str) -> Organisationsnummer:
    """Same as Organisationsnummer.parse()."""
    return Organisationsnummer.parse(value)


def valid(value: str) -> bool:
    """Check if a value is a valid organisationsnummer."""
    try:
        Organisationsnummer.parse(value)
    except InvalidInputError:
        return False
    return True


def generate_organisationsnummer(
    org_type: str = "5",
    group_number: int = 56,
    rng: Optional[random.Random] = None,
) -> str:
    """
    Generate a valid organisationsnummer for testing purposes.

    Args:
        org_type: Organization type digit, 1-9 (default: '5' for Aktiebolag)
        group_number: Digits 3-4 (20-99, default: 56)
        rng: Random source, for reproducible output

    Returns:
        A valid organisationsnummer in NNNNNNNNNN format
    """
    if len(org_type) != 1 or org_type not in "123456789":
        raise ValueError("Organization type must be a single digit 1-9")
    if not 20 <= group_number <= 99:
        raise ValueError("Group number must be between 20 and 99")

    rng = rng or random.Random()

    # Build first 9 digits
    first_nine = (
        f"{org_type}{rng.randint(0, 9)}{group_number:02d}"
        f"{rng.randint(0, 99):02d}{rng.randint(0, 999):03d}"
    )

    return f"{first_nine}{luhn_checksum(first_nine)}"
