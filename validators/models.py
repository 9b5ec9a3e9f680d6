"""
Identity number value types

[Layout] 13 digits, fixed offsets

    YYMMDD SSSS C A Z
    |      |    | | +- checksum digit (12)
    |      |    | +--- filler / legacy race digit (11)
    |      |    +----- citizenship digit (10)
    |      +---------- sequence block (6-9)
    +----------------- birth date (0-5)
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional


ID_LENGTH = 13

# (start, end) slices into the normalized digit string
FIELD_LAYOUT = {
    "year": (0, 2),
    "month": (2, 4),
    "day": (4, 6),
    "sequence_block": (6, 10),
    "citizenship_digit": (10, 11),
    "filler_digit": (11, 12),
    "checksum_digit": (12, 13),
}


class ErrorKind(str, Enum):
    """Why an identifier was rejected"""

    INVALID_LENGTH = "invalid_length"
    INVALID_FORMAT = "invalid_format"
    INVALID_MONTH = "invalid_month"
    INVALID_DAY = "invalid_day"
    INVALID_DATE = "invalid_date"
    CHECKSUM_MISMATCH = "checksum_mismatch"

    @property
    def is_format_error(self) -> bool:
        return self in (ErrorKind.INVALID_LENGTH, ErrorKind.INVALID_FORMAT)


ERROR_MESSAGES = {
    ErrorKind.INVALID_LENGTH: "ID number must be exactly 13 digits",
    ErrorKind.INVALID_FORMAT: "ID number may only contain digits, spaces and hyphens",
    ErrorKind.INVALID_MONTH: "Birth month must be between 01 and 12",
    ErrorKind.INVALID_DAY: "Birth day must be between 01 and 31",
    ErrorKind.INVALID_DATE: "Birth day does not exist in that month",
    ErrorKind.CHECKSUM_MISMATCH: "Check digit does not match",
}


@dataclass(frozen=True)
class IdentityFields:
    """Fields sliced out of a 13-digit identifier"""

    year: int
    month: int
    day: int
    sequence_block: int
    citizenship_digit: int
    filler_digit: int
    checksum_digit: int

    @property
    def birth_date_digits(self) -> str:
        return f"{self.year:02d}{self.month:02d}{self.day:02d}"

    def to_dict(self) -> dict:
        return {
            "year": self.year,
            "month": self.month,
            "day": self.day,
            "sequence_block": self.sequence_block,
            "citizenship_digit": self.citizenship_digit,
            "filler_digit": self.filler_digit,
            "checksum_digit": self.checksum_digit,
        }


@dataclass(frozen=True)
class ValidationResult:
    """
    Outcome of validate()

    Exactly one of `fields` (valid) or `error` (invalid) is set.
    """

    is_valid: bool
    id_number: str
    fields: Optional[IdentityFields] = None
    error: Optional[ErrorKind] = None

    @property
    def message(self) -> str:
        if self.error is None:
            return "Valid ID number"
        return ERROR_MESSAGES[self.error]

    def __bool__(self) -> bool:
        return self.is_valid
