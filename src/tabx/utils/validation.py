"""Validation utilities for TabX.

This module provides reusable validation functions with consistent error handling.
"""

# TabX
# Copyright (C) 2025  TabX developers
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

from typing import Any, Optional

from tabx.constants import MAX_SPEAKER_SCORE, MIN_SPEAKER_SCORE


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


# ========== Name Validation ==========


def validate_name(name: Optional[str], required: bool = True) -> ValidationResult:
    """Validate a display name (participant, team, adjudicator or room).

    Debate team names carry digits and punctuation ("Oxford A", "LSE 2"),
    so only emptiness is checked.

    Args:
        name: Name to validate
        required: Whether name is required

    Returns:
        ValidationResult with the stripped name as sanitized value
    """
    if name is None or not str(name).strip():
        if required:
            return ValidationResult(
                is_valid=False,
                error_message="Name is required",
            )
        return ValidationResult(is_valid=True, sanitized_value=None)

    return ValidationResult(is_valid=True, sanitized_value=str(name).strip())


# ========== Score Validation ==========


def validate_speaker_score(
    score: Any,
    min_score: int = MIN_SPEAKER_SCORE,
    max_score: int = MAX_SPEAKER_SCORE,
) -> ValidationResult:
    """Validate a single speaker score.

    Args:
        score: Score value to validate; must be an integer (bools rejected)
        min_score: Lowest accepted score (inclusive)
        max_score: Highest accepted score (inclusive)

    Returns:
        ValidationResult with the integer score as sanitized value
    """
    if isinstance(score, bool) or not isinstance(score, int):
        return ValidationResult(
            is_valid=False,
            error_message=f"Score must be an integer: {score!r}",
        )

    if score < min_score or score > max_score:
        return ValidationResult(
            is_valid=False,
            error_message=f"Score must be {min_score}-{max_score}: {score}",
        )

    return ValidationResult(is_valid=True, sanitized_value=score)


def validate_positive_integer(
    value: Any, field_name: str = "Value", allow_zero: bool = False
) -> ValidationResult:
    """Validate that a value is a positive integer.

    Args:
        value: Value to validate
        field_name: Name of the field for error messages
        allow_zero: Whether zero is allowed

    Returns:
        ValidationResult with validation status
    """
    try:
        int_value = int(value)
    except (ValueError, TypeError):
        return ValidationResult(
            is_valid=False,
            error_message=f"{field_name} must be a number",
        )

    if int_value < 0 or (int_value == 0 and not allow_zero):
        return ValidationResult(
            is_valid=False,
            error_message=f"{field_name} must be positive",
        )

    return ValidationResult(is_valid=True, sanitized_value=int_value)
