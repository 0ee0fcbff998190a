"""
Checksum validation utilities for EAN-13 codes.
"""

from collections.abc import Sequence

EAN13_LENGTH = 13

# Position weights, leading digit first
EAN13_WEIGHTS = (1, 3, 1, 3, 1, 3, 1, 3, 1, 3, 1, 3, 1)


def is_checksum_valid(digits: Sequence[int]) -> bool:
    """
    Check the weighted sum of a full 13-digit number.

    The number is valid when sum(digit * weight) is divisible by 10.
    """
    if len(digits) != EAN13_LENGTH:
        return False
    total = sum(digit * weight for digit, weight in zip(digits, EAN13_WEIGHTS))
    return total % 10 == 0


def calculate_ean13_checksum(code: str) -> int:
    """
    Calculate EAN-13 checksum digit.

    Algorithm:
    1. Multiply digits at odd positions (1, 3, 5, ...) by 1
    2. Multiply digits at even positions (2, 4, 6, ...) by 3
    3. Sum all results
    4. Checksum = (10 - (sum mod 10)) mod 10
    """
    if len(code) < 12:
        raise ValueError("Code must have at least 12 digits for EAN-13")

    total = 0
    for digit, weight in zip(code[:12], EAN13_WEIGHTS):
        if not digit.isdigit():
            raise ValueError(f"Invalid character in code: {digit}")
        total += int(digit) * weight

    return (10 - (total % 10)) % 10


def validate_ean13_checksum(code: str) -> bool:
    """
    Validate EAN-13 checksum.

    Args:
        code: 13-digit EAN code

    Returns:
        True if checksum is valid
    """
    if len(code) != EAN13_LENGTH:
        return False
    if not code.isdigit():
        return False

    return is_checksum_valid([int(c) for c in code])


def is_valid_ean13(code: str) -> tuple[bool, str]:
    """
    Validate an EAN-13 string completely.

    Args:
        code: Barcode string

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not code.isdigit():
        return False, "Code contains non-numeric characters"

    if len(code) != EAN13_LENGTH:
        return False, f"Unsupported code length: {len(code)}"

    if not validate_ean13_checksum(code):
        return False, "Invalid EAN-13 checksum"

    return True, ""
