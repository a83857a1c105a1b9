"""
organisationsnummer - Swedish organization number validation

Parses, validates, classifies and formats Swedish organisationsnummer,
including sole proprietorships registered under a personnummer.
"""

from organisationsnummer.luhn import luhn_checksum, luhn_valid
from organisationsnummer.personnummer import (
    FormattedPersonnummer,
    Personnummer,
    PersonnummerError,
)
from organisationsnummer.organisationsnummer import (
    ORGANIZATION_TYPES,
    FormattedOrganisationsnummer,
    InvalidInputError,
    Organisationsnummer,
    generate_organisationsnummer,
    parse,
    valid,
)

__version__ = "0.1.0"

__all__ = [
    # Organisationsnummer
    "parse",
    "valid",
    "Organisationsnummer",
    "FormattedOrganisationsnummer",
    "InvalidInputError",
    "ORGANIZATION_TYPES",
    "generate_organisationsnummer",
    # Personnummer
    "Personnummer",
    "FormattedPersonnummer",
    "PersonnummerError",
    # Luhn
    "luhn_checksum",
    "luhn_valid",
]
