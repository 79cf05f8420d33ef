"""Validation utilities for Bracketeer.

This module provides reusable numeric validation with consistent error handling.
"""

# Bracketeer
# Copyright (C) 2025  Bracketeer developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import math
from decimal import Decimal
from typing import Any, Optional, Union

from bracketeer.exceptions import ValidationError

Number = Union[int, float, Decimal]


class ValidationResult:
    """Result of a validation operation.

    Attributes:
        is_valid: Whether the validation passed
        error_message: Human-readable error message if invalid
        sanitized_value: Cleaned/normalized value if valid
    """

    def __init__(
        self,
        is_valid: bool,
        error_message: Optional[str] = None,
        sanitized_value: Any = None,
    ):
        self.is_valid = is_valid
        self.error_message = error_message
        self.sanitized_value = sanitized_value

    def __bool__(self) -> bool:
        """Allow using result in boolean context: if result: ..."""
        return self.is_valid

    def __repr__(self) -> str:
        if self.is_valid:
            return f"ValidationResult(VALID, {self.sanitized_value!r})"
        return f"ValidationResult(INVALID, {self.error_message!r})"


# ========== Numeric Validation ==========


def validate_number(value: Any, field_name: str = "value") -> ValidationResult:
    """Validate that a value is a finite real number.

    Booleans are rejected even though Python treats them as integers.
    Negative values are accepted.

    Args:
        value: Value to validate
        field_name: Name used in the error message

    Returns:
        ValidationResult with validation status

    Example:
        >>> bool(validate_number(12.5))
        True
        >>> validate_number(float("nan")).error_message
        'value must be a finite number, got nan'
    """
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        return ValidationResult(
            is_valid=False,
            error_message=f"{field_name} must be a number, got {type(value).__name__}",
        )

    if isinstance(value, Decimal):
        finite = value.is_finite()
    else:
        finite = math.isfinite(value)

    if not finite:
        return ValidationResult(
            is_valid=False,
            error_message=f"{field_name} must be a finite number, got {value}",
        )

    return ValidationResult(is_valid=True, sanitized_value=value)


def ensure_finite(value: Any, field_name: str = "value") -> Number:
    """Validate a number and raise if it is not finite.

    Args:
        value: Value to validate
        field_name: Name used in the error message

    Returns:
        The value unchanged

    Raises:
        ValidationError: If the value is NaN, infinite or not numeric
    """
    result = validate_number(value, field_name)
    if not result.is_valid:
        raise ValidationError(result.error_message)
    return value


def ensure_non_negative_int(value: Any, field_name: str = "value") -> int:
    """Validate a count such as a number of participants.

    Raises:
        ValidationError: If the value is not an integer or is negative
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(
            f"{field_name} must be an integer, got {type(value).__name__}"
        )
    if value < 0:
        raise ValidationError(f"{field_name} must not be negative, got {value}")
    return value
