"""
Identity number interpretation

Conventional meanings layered over the raw fields. None of this affects
validity: the codec treats the sequence block and citizenship digit as
opaque numbers.
"""
import calendar
from dataclasses import dataclass, asdict
from datetime import date
from enum import Enum
from typing import Optional

from .models import IdentityFields


# Sequence blocks at or above this value are registered male
GENDER_THRESHOLD = 5000


class Gender(str, Enum):
    FEMALE = "Female"
    MALE = "Male"

    @property
    def code(self) -> str:
        """Single-character form used by registration records"""
        return self.value[0]


class Citizenship(str, Enum):
    CITIZEN = "Citizen"
    PERMANENT_RESIDENT = "Permanent resident"
    UNKNOWN = "Unknown"


def gender_from_sequence(sequence_block: int) -> Gender:
    if sequence_block >= GENDER_THRESHOLD:
        return Gender.MALE
    return Gender.FEMALE


def citizenship_status(digit: int) -> Citizenship:
    if digit == 0:
        return Citizenship.CITIZEN
    if digit == 1:
        return Citizenship.PERMANENT_RESIDENT
    return Citizenship.UNKNOWN


def resolve_birth_year(two_digit_year: int, today: Optional[date] = None) -> int:
    """
    Four-digit birth year from the two-digit field

    Years up to the current two-digit year are taken as this century,
    anything later as the previous one (e.g. in 2026: 26 -> 2026, 27 -> 1927).
    """
    today = today or date.today()
    century = today.year - today.year % 100
    if two_digit_year <= today.year % 100:
        return century + two_digit_year
    return century - 100 + two_digit_year


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def birth_date(fields: IdentityFields, today: Optional[date] = None) -> date:
    """
    Calendar birth date

    Raises:
        ValueError: the day does not exist in that month (e.g. 31 April)
    """
    return date(resolve_birth_year(fields.year, today), fields.month, fields.day)


def birth_date_string(fields: IdentityFields, today: Optional[date] = None) -> str:
    """
    YYYY-MM-DD built from the digits alone

    Unlike birth_date() this never fails, so 31 April comes out as "1990-04-31".
    """
    year = resolve_birth_year(fields.year, today)
    return f"{year:04d}-{fields.month:02d}-{fields.day:02d}"


def age_on(born: date, today: date) -> int:
    before_birthday = (today.month, today.day) < (born.month, born.day)
    return today.year - born.year - int(before_birthday)


@dataclass(frozen=True)
class IdentityInfo:
    """Human-readable view of an identifier"""

    id_number: str
    date_of_birth: Optional[str]
    gender: Gender
    citizenship: Citizenship
    age: Optional[int]

    def to_dict(self) -> dict:
        data = asdict(self)
        data["gender"] = self.gender.value
        data["citizenship"] = self.citizenship.value
        return data


def describe(id_number: str, fields: IdentityFields, today: Optional[date] = None) -> IdentityInfo:
    """
    Interpret a validated identifier

    Date of birth and age are left empty when the day does not exist in the
    month, which the default (lax) validation lets through.
    """
    today = today or date.today()
    try:
        born = birth_date(fields, today)
    except ValueError:
        born = None

    return IdentityInfo(
        id_number=id_number,
        date_of_birth=born.isoformat() if born else None,
        gender=gender_from_sequence(fields.sequence_block),
        citizenship=citizenship_status(fields.citizenship_digit),
        age=age_on(born, today) if born else None,
    )
