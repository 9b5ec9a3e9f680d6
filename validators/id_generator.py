"""
ID number generator

Builds checksum-valid identifiers from their fields, for test fixtures and
seed data. Output always passes validate() by construction.
"""
import random
from typing import Optional

from .checksum import compute_check_digit
from .models import IdentityFields


# Legacy digit 11; fixtures use 8 unless told otherwise
DEFAULT_FILLER_DIGIT = 8

# field name -> (minimum, maximum, zero-padded width)
FIELD_RANGES = {
    "year": (0, 99, 2),
    "month": (1, 12, 2),
    "day": (1, 31, 2),
    "sequence_block": (0, 9999, 4),
    "citizenship_digit": (0, 9, 1),
    "filler_digit": (0, 9, 1),
}


def _format_field(name: str, value: int) -> str:
    low, high, width = FIELD_RANGES[name]
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if value < low or value > high:
        raise ValueError(f"{name} must be between {low} and {high}, got {value}")
    return str(value).zfill(width)


def generate(
    year: int,
    month: int,
    day: int,
    sequence_block: int,
    citizenship_digit: int,
    filler_digit: int = DEFAULT_FILLER_DIGIT,
) -> str:
    """
    Generate a valid 13-digit ID number

    Args:
        year: two-digit birth year (0-99)
        month: birth month (1-12)
        day: birth day (1-31, not checked against the month)
        sequence_block: 0-9999; 5000 and above reads as male
        citizenship_digit: 0 citizen, 1 permanent resident
        filler_digit: legacy digit 11

    Returns:
        str: 12 field digits followed by the Luhn check digit

    Raises:
        ValueError: a field is out of range
    """
    base = (
        _format_field("year", year)
        + _format_field("month", month)
        + _format_field("day", day)
        + _format_field("sequence_block", sequence_block)
        + _format_field("citizenship_digit", citizenship_digit)
        + _format_field("filler_digit", filler_digit)
    )
    return base + str(compute_check_digit(base))


def generate_from_fields(fields: IdentityFields) -> str:
    """Re-encode extracted fields; the stored checksum digit is recomputed"""
    return generate(
        fields.year,
        fields.month,
        fields.day,
        fields.sequence_block,
        fields.citizenship_digit,
        fields.filler_digit,
    )


def random_identifier(rng: Optional[random.Random] = None, **overrides) -> str:
    """
    Random valid ID number

    Pass a seeded random.Random for reproducible fixtures. Any field of
    generate() can be pinned through keyword arguments. Days are drawn from
    1-28 so the result is also a real calendar date.
    """
    rng = rng or random.Random()
    unknown = set(overrides) - set(FIELD_RANGES)
    if unknown:
        raise ValueError(f"unknown field(s): {', '.join(sorted(unknown))}")

    values = {
        "year": rng.randint(0, 99),
        "month": rng.randint(1, 12),
        "day": rng.randint(1, 28),
        "sequence_block": rng.randint(0, 9999),
        "citizenship_digit": rng.randint(0, 1),
        "filler_digit": DEFAULT_FILLER_DIGIT,
    }
    values.update(overrides)
    return generate(**values)
