"""
ID number validator tests
- Normalization
- Structural / date / checksum stages and their order
- Strict date mode
- SAIDValidator class interface
"""
import unittest
from datetime import date

from validators import (
    ErrorKind,
    Gender,
    SAIDValidator,
    check_structure,
    compute_check_digit,
    extract_fields,
    is_valid,
    luhn_checksum,
    normalize,
    validate,
    verify_check_digit,
)


TODAY = date(2026, 10, 19)


class TestNormalize(unittest.TestCase):
    """Separator stripping"""

    def test_strips_spaces_and_hyphens(self):
        self.assertEqual(normalize("800101 4321-087"), "8001014321087")
        self.assertEqual(normalize(" 800101\t4321087 "), "8001014321087")

    def test_leaves_other_characters(self):
        self.assertEqual(normalize("80.0101/4321087"), "80.0101/4321087")

    def test_idempotent(self):
        samples = ["", "800101 4321 087", "--  --", "ab-c d", "8001014321087"]
        for value in samples:
            once = normalize(value)
            self.assertEqual(normalize(once), once)


class TestChecksum(unittest.TestCase):
    """Luhn check digit"""

    def test_known_check_digits(self):
        # Positions 1,3,5,7,9,11 doubled: sum 33 -> check digit 7
        self.assertEqual(compute_check_digit("800101432108"), 7)
        self.assertEqual(compute_check_digit("900101500908"), 6)
        self.assertEqual(compute_check_digit("000101000000"), 6)

    def test_verify(self):
        self.assertTrue(verify_check_digit("8001014321087"))
        self.assertFalse(verify_check_digit("8001014321085"))
        self.assertFalse(verify_check_digit("800101432108"))
        self.assertFalse(verify_check_digit("80010143210a7"))

    def test_base_must_be_twelve_digits(self):
        with self.assertRaises(ValueError):
            compute_check_digit("80010143210")
        with self.assertRaises(ValueError):
            compute_check_digit("80010143210x")

    def test_matches_standard_card_luhn(self):
        # 4111 1111 1111 1111, odd-length payload padded on the left
        self.assertEqual(luhn_checksum("0411111111111111"), 1)
        with self.assertRaises(ValueError):
            luhn_checksum("41x1")

    def test_single_digit_substitution_detected(self):
        base = "800101432108"
        original = compute_check_digit(base)
        for position in range(12):
            for replacement in "0123456789":
                if replacement == base[position]:
                    continue
                altered = base[:position] + replacement + base[position + 1:]
                self.assertNotEqual(
                    compute_check_digit(altered), original,
                    f"substitution at {position} -> {replacement} not detected"
                )


class TestStructure(unittest.TestCase):
    """13-digit shape check"""

    def test_accepts_thirteen_digits(self):
        self.assertIsNone(check_structure("8001014321087"))

    def test_wrong_length(self):
        self.assertEqual(check_structure("800101432108"), ErrorKind.INVALID_LENGTH)
        self.assertEqual(check_structure("80010143210877"), ErrorKind.INVALID_LENGTH)
        self.assertEqual(check_structure(""), ErrorKind.INVALID_LENGTH)

    def test_non_digits(self):
        self.assertEqual(check_structure("800101432108A"), ErrorKind.INVALID_FORMAT)
        self.assertEqual(check_structure("80010143210８7"), ErrorKind.INVALID_FORMAT)
        self.assertEqual(check_structure("800101.432108"), ErrorKind.INVALID_FORMAT)

    def test_format_errors_grouped(self):
        self.assertTrue(ErrorKind.INVALID_LENGTH.is_format_error)
        self.assertTrue(ErrorKind.INVALID_FORMAT.is_format_error)
        self.assertFalse(ErrorKind.CHECKSUM_MISMATCH.is_format_error)


class TestExtractFields(unittest.TestCase):

    def test_fixed_offsets(self):
        fields = extract_fields("9001015009086")
        self.assertEqual(fields.year, 90)
        self.assertEqual(fields.month, 1)
        self.assertEqual(fields.day, 1)
        self.assertEqual(fields.sequence_block, 5009)
        self.assertEqual(fields.citizenship_digit, 0)
        self.assertEqual(fields.filler_digit, 8)
        self.assertEqual(fields.checksum_digit, 6)
        self.assertEqual(fields.birth_date_digits, "900101")

    def test_does_not_validate(self):
        fields = extract_fields("9913324321085")
        self.assertEqual(fields.month, 13)
        self.assertEqual(fields.day, 32)


class TestValidate(unittest.TestCase):
    """Orchestrated validation"""

    def test_valid_number(self):
        result = validate("8001014321087")
        self.assertTrue(result.is_valid)
        self.assertTrue(result)
        self.assertIsNone(result.error)
        self.assertEqual(result.id_number, "8001014321087")
        self.assertEqual(result.fields.sequence_block, 4321)
        self.assertEqual(result.message, "Valid ID number")

    def test_separators_allowed(self):
        self.assertTrue(is_valid("800101 4321 087"))
        self.assertTrue(is_valid("800101-4321-08-7"))

    def test_listed_literal_fails_checksum(self):
        # 800101432108 yields check digit 7, so both 5 and 6 are rejected
        self.assertEqual(validate("8001014321085").error, ErrorKind.CHECKSUM_MISMATCH)
        self.assertEqual(validate("8001014321086").error, ErrorKind.CHECKSUM_MISMATCH)

    def test_checksum_mismatch_has_no_fields(self):
        result = validate("8001014321086")
        self.assertFalse(result)
        self.assertIsNone(result.fields)
        self.assertEqual(result.message, "Check digit does not match")

    def test_short_and_long_input(self):
        self.assertEqual(validate("12345678901").error, ErrorKind.INVALID_LENGTH)
        self.assertEqual(validate("800101432108").error, ErrorKind.INVALID_LENGTH)
        self.assertEqual(validate("80010143210877").error, ErrorKind.INVALID_LENGTH)
        self.assertTrue(validate("12345678901").error.is_format_error)

    def test_letters_rejected(self):
        self.assertEqual(validate("80010A4321087").error, ErrorKind.INVALID_FORMAT)

    def test_month_bounds(self):
        self.assertEqual(validate("9013014321085").error, ErrorKind.INVALID_MONTH)
        self.assertEqual(validate("9000014321085").error, ErrorKind.INVALID_MONTH)

    def test_day_bounds(self):
        self.assertEqual(validate("9001004321085").error, ErrorKind.INVALID_DAY)
        self.assertEqual(validate("9001324321085").error, ErrorKind.INVALID_DAY)

    def test_month_checked_before_day(self):
        self.assertEqual(validate("9913324321085").error, ErrorKind.INVALID_MONTH)

    def test_non_string_input_reported_not_raised(self):
        for value in (None, 8001014321087, b"8001014321087", ["8001014321087"]):
            result = validate(value)
            self.assertFalse(result, repr(value))
            self.assertEqual(result.error, ErrorKind.INVALID_FORMAT)
            self.assertEqual(result.id_number, "")
            self.assertIsNone(result.fields)
        self.assertFalse(is_valid(None))

    def test_extreme_fields(self):
        self.assertTrue(is_valid("0001010000089"))
        self.assertTrue(is_valid("9912319999196"))

    def test_day_not_checked_against_month_by_default(self):
        # 31 April
        self.assertTrue(is_valid("9004315009087"))


class TestStrictMode(unittest.TestCase):
    """Opt-in calendar check"""

    def test_rejects_impossible_day(self):
        result = validate("9004315009087", strict=True, today=TODAY)
        self.assertEqual(result.error, ErrorKind.INVALID_DATE)

    def test_leap_day(self):
        # 00 -> 2000 (leap), 01 -> 2001 (not leap)
        self.assertTrue(validate("0002295009084", strict=True, today=TODAY))
        self.assertEqual(
            validate("0102295009082", strict=True, today=TODAY).error,
            ErrorKind.INVALID_DATE,
        )

    def test_real_dates_still_pass(self):
        self.assertTrue(validate("8001014321087", strict=True, today=TODAY))

    def test_bounds_errors_unchanged(self):
        self.assertEqual(
            validate("9013014321085", strict=True, today=TODAY).error,
            ErrorKind.INVALID_MONTH,
        )


class TestSAIDValidator(unittest.TestCase):
    """Class interface"""

    def setUp(self):
        self.validator = SAIDValidator()

    def test_validate_is_format_only(self):
        # checksum is wrong but format and date are fine
        self.assertTrue(self.validator.validate("8001014321085"))
        self.assertFalse(self.validator.validate("9013014321085"))
        self.assertFalse(self.validator.validate("12345"))

    def test_verify_checksum(self):
        self.assertTrue(self.validator.verify_checksum("800101-4321-087"))
        self.assertFalse(self.validator.verify_checksum("8001014321085"))

    def test_validate_full(self):
        self.assertTrue(self.validator.validate_full("8809031234087"))
        self.assertEqual(
            self.validator.validate_full("8809031234088").error,
            ErrorKind.CHECKSUM_MISMATCH,
        )

    def test_extract(self):
        self.assertEqual(self.validator.extract("8809031234087").day, 3)
        self.assertIsNone(self.validator.extract("8809031234088"))

    def test_birth_date_and_gender(self):
        self.assertEqual(
            self.validator.get_birth_date("8809031234087", today=TODAY),
            date(1988, 9, 3),
        )
        self.assertEqual(self.validator.get_gender("8809031234087"), Gender.FEMALE)
        self.assertEqual(self.validator.get_gender("9001015009086"), Gender.MALE)
        self.assertIsNone(self.validator.get_gender("9001015009087"))

    def test_birth_date_of_impossible_day(self):
        self.assertIsNone(self.validator.get_birth_date("9004315009087", today=TODAY))

    def test_non_string_input(self):
        self.assertFalse(self.validator.validate(None))
        self.assertFalse(self.validator.verify_checksum(None))
        self.assertIsNone(self.validator.extract(None))
        self.assertIsNone(self.validator.get_gender(8001014321087))

    def test_strict_instance(self):
        strict = SAIDValidator(strict=True)
        self.assertFalse(strict.validate("9004315009087"))
        self.assertFalse(strict.validate_full("9004315009087"))

    def test_describe(self):
        info = self.validator.describe("9001015009086", today=TODAY)
        self.assertEqual(info.date_of_birth, "1990-01-01")
        self.assertEqual(info.age, 36)
        self.assertIsNone(self.validator.describe("9001015009087"))


if __name__ == "__main__":
    unittest.main(verbosity=2)
