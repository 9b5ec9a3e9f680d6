"""
Luhn checksum for identity numbers

[Algorithm]
1. Walk the payload digits left to right (0-indexed)
2. Double every digit at an odd position; subtract 9 when the result exceeds 9
3. Sum everything
4. Check digit = (10 - sum % 10) % 10

For a 12-digit payload the doubled positions are 1, 3, 5, 7, 9, 11, which is
ordinary Luhn counted from the check digit on the right.
"""

PAYLOAD_LENGTH = 12


def luhn_sum(payload: str) -> int:
    """Weighted digit sum of a payload (check digit excluded)"""
    total = 0
    for i, ch in enumerate(payload):
        d = int(ch)
        if i % 2 == 1:
            d *= 2
            if d > 9:
                d -= 9
        total += d
    return total


def luhn_checksum(payload: str) -> int:
    """
    Check digit for an arbitrary digit string.

    The doubling parity is anchored at the left, so callers must pass a
    payload of even length to get standard Luhn.
    """
    if not payload.isdigit():
        raise ValueError(f"payload must contain digits only: {payload!r}")
    return (10 - luhn_sum(payload) % 10) % 10


def compute_check_digit(base: str) -> int:
    """
    Check digit for a 12-digit identifier base

    Args:
        base: first twelve digits of the identifier

    Returns:
        int: value of the 13th digit

    Raises:
        ValueError: base is not exactly 12 ASCII digits
    """
    if len(base) != PAYLOAD_LENGTH or not base.isascii() or not base.isdigit():
        raise ValueError(f"base must be {PAYLOAD_LENGTH} digits: {base!r}")
    return luhn_checksum(base)


def verify_check_digit(digits: str) -> bool:
    """True if the 13th digit matches the value computed from the first 12"""
    if len(digits) != PAYLOAD_LENGTH + 1 or not digits.isascii() or not digits.isdigit():
        return False
    return compute_check_digit(digits[:PAYLOAD_LENGTH]) == int(digits[PAYLOAD_LENGTH])
