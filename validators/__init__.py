"""
Validator package

[Usage]
    from validators import validate, generate

    result = validate("800101 4321 087")
    if result:
        print(result.fields.sequence_block)

    id_number = generate(90, 1, 1, 5009, 0)

[Class interface]
    from validators import SAIDValidator

    validator = SAIDValidator(strict=True)
    validator.validate_full(value)
"""
from .base_validator import BaseValidator, normalize
from .checksum import compute_check_digit, luhn_checksum, verify_check_digit
from .models import (
    ERROR_MESSAGES,
    FIELD_LAYOUT,
    ID_LENGTH,
    ErrorKind,
    IdentityFields,
    ValidationResult,
)
from .sa_id_validator import (
    SAIDValidator,
    check_date,
    check_structure,
    extract_fields,
    is_valid,
    validate,
)
from .id_generator import (
    DEFAULT_FILLER_DIGIT,
    generate,
    generate_from_fields,
    random_identifier,
)
from .id_info import (
    Citizenship,
    Gender,
    IdentityInfo,
    birth_date,
    birth_date_string,
    citizenship_status,
    describe,
    gender_from_sequence,
    resolve_birth_year,
)

__all__ = [
    # ============================================
    # Codec
    # ============================================
    'normalize',
    'validate',
    'is_valid',
    'generate',
    'generate_from_fields',
    'random_identifier',
    'SAIDValidator',
    'BaseValidator',

    # ============================================
    # Stages (exported for tests and tooling)
    # ============================================
    'check_structure',
    'extract_fields',
    'check_date',
    'compute_check_digit',
    'verify_check_digit',
    'luhn_checksum',

    # ============================================
    # Types
    # ============================================
    'ErrorKind',
    'ERROR_MESSAGES',
    'FIELD_LAYOUT',
    'ID_LENGTH',
    'IdentityFields',
    'ValidationResult',
    'DEFAULT_FILLER_DIGIT',

    # ============================================
    # Interpretation
    # ============================================
    'Gender',
    'Citizenship',
    'IdentityInfo',
    'gender_from_sequence',
    'citizenship_status',
    'resolve_birth_year',
    'birth_date',
    'birth_date_string',
    'describe',
]
