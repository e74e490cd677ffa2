"""Validation utilities for Club Ranking.

This module provides reusable validation functions with consistent error handling.
Set-score checks used by the result model live here as well.
"""

# Club Ranking
# Copyright (C) 2025  Club Ranking developers
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
import re
from typing import Any, Optional, Tuple

from clubranking.constants import DEFAULT_RATING, SETS_PER_MATCH, VALID_SET_SCORES


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
        sanitized_value: Optional[str] = None,
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


def validate_name(name: Optional[str]) -> ValidationResult:
    """Validate a player name.

    Any non-blank name is accepted; surrounding whitespace is stripped.

    Args:
        name: Name to validate

    Returns:
        ValidationResult with validation status
    """
    if name is None or not str(name).strip():
        return ValidationResult(
            is_valid=False,
            error_message="Name is required",
        )
    return ValidationResult(is_valid=True, sanitized_value=str(name).strip())


# ========== Rating Validation ==========


def is_finite_number(value: Any) -> bool:
    """Whether ``value`` is a finite number (numeric strings included).

    Booleans are not numbers here.
    """
    if value is None or isinstance(value, bool):
        return False
    try:
        return math.isfinite(float(value))
    except (TypeError, ValueError):
        return False


def coerce_rating(value: Any, default: int = DEFAULT_RATING) -> int:
    """Return ``value`` as an int rating, or ``default`` when it is unusable.

    Missing values, non-numbers, NaN and infinities all fall back to the
    default.
    """
    if not is_finite_number(value):
        return default
    return int(round(float(value)))


# ========== Result Validation ==========

# Two integers separated by "-", an en dash or ":", e.g. "3-0" or "2 : 1"
_RESULT_PATTERN = re.compile(r"^\s*(\d+)\s*[-–:]\s*(\d+)\s*$")


def is_valid_score_pair(score_a: Any, score_b: Any) -> bool:
    """Check that two set counts form a complete match result."""
    for score in (score_a, score_b):
        if isinstance(score, bool) or not isinstance(score, int):
            return False
        if score not in VALID_SET_SCORES:
            return False
    return score_a + score_b == SETS_PER_MATCH


def split_result(raw: Optional[str]) -> Optional[Tuple[int, int]]:
    """Split result text such as "2-1" into valid set counts.

    Args:
        raw: Result text typed by a user

    Returns:
        ``(score_a, score_b)`` when both form a complete match, else None
    """
    if raw is None:
        return None
    match = _RESULT_PATTERN.match(str(raw))
    if not match:
        return None
    score_a, score_b = int(match.group(1)), int(match.group(2))
    if not is_valid_score_pair(score_a, score_b):
        return None
    return score_a, score_b
