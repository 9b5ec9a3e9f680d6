"""
South African ID number validator

[Validation strategy]
- Normalize: strip spaces and hyphens only
- Structure: exactly 13 ASCII digits, otherwise rejected before any slicing
- Date: month 01-12, day 01-31 (no month-length check unless strict=True)
- Checksum: Luhn over the first 12 digits must equal the 13th

Stages run in that order and the first failure decides the error kind.
Bad input is reported through ValidationResult, never raised.
"""
import re
from datetime import date
from typing import Optional

from .base_validator import BaseValidator, normalize
from .checksum import verify_check_digit
from .id_info import (
    Gender,
    birth_date,
    days_in_month,
    describe,
    gender_from_sequence,
    resolve_birth_year,
    IdentityInfo,
)
from .models import (
    FIELD_LAYOUT,
    ID_LENGTH,
    ErrorKind,
    IdentityFields,
    ValidationResult,
)


ID_PATTERN = re.compile(r'[0-9]{13}')
DIGITS_PATTERN = re.compile(r'[0-9]*')


def check_structure(digits: str) -> Optional[ErrorKind]:
    """None if the normalized string is 13 ASCII digits"""
    if ID_PATTERN.fullmatch(digits):
        return None
    if DIGITS_PATTERN.fullmatch(digits) and len(digits) != ID_LENGTH:
        return ErrorKind.INVALID_LENGTH
    return ErrorKind.INVALID_FORMAT


def extract_fields(digits: str) -> IdentityFields:
    """Slice a 13-digit string into its fields (no validation)"""
    values = {
        name: int(digits[start:end])
        for name, (start, end) in FIELD_LAYOUT.items()
    }
    return IdentityFields(**values)


def check_date(fields: IdentityFields, strict: bool = False,
               today: Optional[date] = None) -> Optional[ErrorKind]:
    """
    Bounds-check month and day

    With strict=True the day is also checked against the month's length,
    using the century pivot from id_info for February in leap years.
    """
    if fields.month < 1 or fields.month > 12:
        return ErrorKind.INVALID_MONTH
    if fields.day < 1 or fields.day > 31:
        return ErrorKind.INVALID_DAY
    if strict:
        year = resolve_birth_year(fields.year, today)
        if fields.day > days_in_month(year, fields.month):
            return ErrorKind.INVALID_DATE
    return None


def validate(value: str, strict: bool = False,
             today: Optional[date] = None) -> ValidationResult:
    """
    Validate a raw ID number

    Args:
        value: user input, separators allowed (non-str input is INVALID_FORMAT)
        strict: also reject days past the end of the month
        today: reference date for the century pivot (strict mode only)

    Returns:
        ValidationResult with the extracted fields on success, or the
        first failing stage's ErrorKind
    """
    if not isinstance(value, str):
        return ValidationResult(is_valid=False, id_number="", error=ErrorKind.INVALID_FORMAT)

    digits = normalize(value)

    error = check_structure(digits)
    if error is not None:
        return ValidationResult(is_valid=False, id_number=digits, error=error)

    fields = extract_fields(digits)

    error = check_date(fields, strict=strict, today=today)
    if error is not None:
        return ValidationResult(is_valid=False, id_number=digits, error=error)

    if not verify_check_digit(digits):
        return ValidationResult(
            is_valid=False, id_number=digits, error=ErrorKind.CHECKSUM_MISMATCH
        )

    return ValidationResult(is_valid=True, id_number=digits, fields=fields)


def is_valid(value: str, strict: bool = False) -> bool:
    return validate(value, strict=strict).is_valid


class SAIDValidator(BaseValidator):
    """South African ID number validator"""

    def __init__(self, strict: bool = False):
        self.strict = strict

    def validate(self, value: str, context: str = "") -> bool:
        """Basic format check (13 digits, plausible month/day)"""
        if not isinstance(value, str):
            return False
        digits = self.normalize(value)
        if check_structure(digits) is not None:
            return False
        return check_date(extract_fields(digits), strict=self.strict) is None

    def verify_checksum(self, value: str) -> bool:
        """Luhn check of the 13th digit"""
        if not isinstance(value, str):
            return False
        return verify_check_digit(self.normalize(value))

    def validate_full(self, value: str) -> ValidationResult:
        """Full validation (format + date + checksum)"""
        return validate(value, strict=self.strict)

    def extract(self, value: str) -> Optional[IdentityFields]:
        """Fields of a valid ID number, None otherwise"""
        return self.validate_full(value).fields

    def get_birth_date(self, value: str, today: Optional[date] = None) -> Optional[date]:
        """
        Birth date of a valid ID number

        None when the number is invalid or names a day that does not exist.
        """
        fields = self.extract(value)
        if fields is None:
            return None
        try:
            return birth_date(fields, today)
        except ValueError:
            return None

    def get_gender(self, value: str) -> Optional[Gender]:
        fields = self.extract(value)
        if fields is None:
            return None
        return gender_from_sequence(fields.sequence_block)

    def describe(self, value: str, today: Optional[date] = None) -> Optional[IdentityInfo]:
        result = self.validate_full(value)
        if not result.is_valid:
            return None
        return describe(result.id_number, result.fields, today)
