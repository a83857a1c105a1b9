"""
Swedish personnummer (personal identity number) validation and parsing.

Format: YYMMDD-XXXX or YYYYMMDD-XXXX
- First 6/8 digits: birth date
- 7th-9th digits: birth number (odd for male, even for female)
- 10th digit: Luhn checksum

Coordination numbers (samordningsnummer) add 60 to the day.
A '+' separator marks a person who is 100 years or older.

Sole proprietorships (enskild firma) are registered under the owner's
personnummer, which is why organisationsnummer parsing tries this first.
"""

import re
from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from organisationsnummer.luhn import luhn_checksum


PERSONNUMMER_PATTERN = re.compile(
    r"^(\d{2})?(\d{2})(\d{2})(\d{2})([-+]?)(\d{3})(\d)$", re.ASCII
)


class PersonnummerError(ValueError):
    """Raised when a string is not a valid personnummer."""

    pass


@dataclass(frozen=True)
class FormattedPersonnummer:
    """Long (YYYYMMDD-XXXX) and short (YYMMDD-XXXX) personnummer formats."""

    long: str
    short: str


@dataclass(frozen=True)
class Personnummer:
    """Parsed personnummer information."""

    normalized: str  # 12-digit format: YYYYMMDDXXXX
    birth_date: date
    gender: str  # 'M' or 'F'
    is_coordination: bool  # True if samordningsnummer
    # Date the number was parsed against; ages and the +/- separator use it
    reference_date: Optional[date] = field(default=None, compare=False, repr=False)

    @classmethod
    def parse(cls, pnr: str, today: Optional[date] = None) -> "Personnummer":
        """
        Validate and parse a Swedish personnummer.

        Accepts formats:
        - YYMMDD-XXXX
        - YYMMDD+XXXX
        - YYMMDDXXXX
        - YYYYMMDD-XXXX
        - YYYYMMDDXXXX

        Raises PersonnummerError if the string is not a valid personnummer.
        """
        if not isinstance(pnr, str):
            raise PersonnummerError(f"Expected a string, got {type(pnr).__name__}")

        today = today or date.today()

        # Surrounding whitespace is tolerated; the pattern itself is anchored
        match = PERSONNUMMER_PATTERN.match(pnr.strip())
        if not match:
            raise PersonnummerError("Invalid personnummer format")

        century, year_short, month_str, day_str, separator, birth_number, check = (
            match.groups()
        )

        # Normalize to 12 digits
        if century is None:
            # Standard rule: 00-current = 2000s, otherwise 1900s
            if int(year_short) <= today.year % 100:
                century = "20"
            else:
                century = "19"

            if separator == "+":
                # '+' means born more than 100 years ago
                century = "19" if century == "20" else "18"

        normalized = f"{century}{year_short}{month_str}{day_str}{birth_number}{check}"

        year = int(century + year_short)
        month = int(month_str)
        day = int(day_str)

        # Check for coordination number (day + 60)
        is_coordination = day > 60
        if is_coordination:
            day -= 60

        try:
            birth_date = date(year, month, day)
        except ValueError as e:
            raise PersonnummerError(f"Invalid birth date in personnummer: {e}") from e

        if birth_date > today:
            raise PersonnummerError("Birth date in personnummer is in the future")

        # Validate Luhn checksum (on 10-digit format: YYMMDDXXX)
        if int(check) != luhn_checksum(normalized[2:11]):
            raise PersonnummerError("Invalid personnummer checksum")

        # Determine gender (9th digit: odd = male, even = female)
        gender = "M" if int(birth_number[2]) % 2 == 1 else "F"

        return cls(
            normalized=normalized,
            birth_date=birth_date,
            gender=gender,
            is_coordination=is_coordination,
            reference_date=today,
        )

    def valid(self) -> bool:
        """A parsed personnummer is always valid."""
        return True

    def get_age(self, today: Optional[date] = None) -> int:
        """Age in whole years, by default on the date the number was parsed."""
        today = today or self.reference_date or date.today()
        had_birthday = (today.month, today.day) >= (
            self.birth_date.month,
            self.birth_date.day,
        )
        return today.year - self.birth_date.year - (0 if had_birthday else 1)

    def format(self, today: Optional[date] = None) -> FormattedPersonnummer:
        """
        Format as YYYYMMDD-XXXX (long) and YYMMDD-XXXX (short).

        The short form uses '+' instead of '-' for people aged 100 or more.
        """
        separator = "+" if self.get_age(today) >= 100 else "-"
        return FormattedPersonnummer(
            long=f"{self.normalized[:8]}-{self.normalized[8:]}",
            short=f"{self.normalized[2:8]}{separator}{self.normalized[8:]}",
        )

    def __str__(self) -> str:
        return self.format().long
