"""
Luhn (mod 10) checksum used by Swedish identity numbers.

Both organisationsnummer and personnummer carry a Luhn check digit as their
last digit, computed over the ten-digit form (no century, no separator).
"""


def luhn_checksum(digits: str) -> int:
    """
    Calculate Luhn checksum digit.

    The Luhn algorithm, as applied to Swedish numbers:
    1. Double every digit at an even (zero-based) position
    2. If doubling results in > 9, subtract 9
    3. Sum all digits
    4. Checksum is (10 - (sum % 10)) % 10

    Over the first nine digits this yields the expected check digit. Over a
    complete number, check digit included, it yields 0 exactly when the
    number is valid.
    """
    total = 0
    for i, digit in enumerate(digits):
        d = int(digit)
        if i % 2 == 0:
            d *= 2
            if d > 9:
                d -= 9
        total += d
    return (10 - (total % 10)) % 10


def luhn_valid(digits: str) -> bool:
    """Check a complete number, check digit included."""
    return luhn_checksum(digits) == 0
