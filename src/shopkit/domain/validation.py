"""Range and type validators for prices, usernames, and user input.

All validators accept unchecked input (for example values decoded from
JSON) and never raise: wrong types are reported as invalid.
"""

from __future__ import annotations

import math
from numbers import Real
from typing import Any

from shopkit.domain.outcome import RuleError, ValidationOutcome

USERNAME_MIN_LENGTH = 5
USERNAME_MAX_LENGTH = 15

INPUT_MIN_USERNAME = 3
INPUT_MAX_USERNAME = 255
INPUT_MIN_AGE = 18
INPUT_MAX_AGE = 100


def is_real_number(value: Any) -> bool:
    """Check whether *value* is a real number. ``bool`` does not count."""
    return isinstance(value, Real) and not isinstance(value, bool)


def is_finite_number(value: Any) -> bool:
    """Check whether *value* is a real number other than NaN or an infinity."""
    return is_real_number(value) and math.isfinite(value)


def is_price_in_range(price: Any, min_price: float, max_price: float) -> bool:
    """Check ``min_price <= price <= max_price``, both ends inclusive.

    NaN, infinities, and non-numbers are never in range.

    Examples:
        >>> is_price_in_range(0, 0, 100)
        True
        >>> is_price_in_range(float("nan"), 0, 100)
        False
    """
    if not is_finite_number(price):
        return False
    return min_price <= price <= max_price


def is_valid_username(
    username: Any,
    *,
    min_length: int = USERNAME_MIN_LENGTH,
    max_length: int = USERNAME_MAX_LENGTH,
) -> bool:
    """Check that *username* is a string whose length is within bounds."""
    if not isinstance(username, str):
        return False
    return min_length <= len(username) <= max_length


def check_username(
    username: Any,
    *,
    min_length: int = INPUT_MIN_USERNAME,
    max_length: int = INPUT_MAX_USERNAME,
) -> RuleError | None:
    """Return a RuleError describing why *username* is invalid, or None."""
    if not isinstance(username, str):
        return RuleError(
            code="INVALID_USERNAME",
            message="Invalid username: must be a string",
            field="username",
        )
    if len(username) < min_length:
        return RuleError(
            code="INVALID_USERNAME",
            message=f"Invalid username: must be at least {min_length} characters",
            field="username",
        )
    if len(username) > max_length:
        return RuleError(
            code="INVALID_USERNAME",
            message=f"Invalid username: must be at most {max_length} characters",
            field="username",
        )
    return None


def check_age(
    age: Any,
    *,
    min_age: int = INPUT_MIN_AGE,
    max_age: int = INPUT_MAX_AGE,
) -> RuleError | None:
    """Return a RuleError describing why *age* is invalid, or None."""
    if not is_finite_number(age):
        return RuleError(code="INVALID_AGE", message="Invalid age: must be a number", field="age")
    if age < min_age:
        return RuleError(
            code="INVALID_AGE",
            message=f"Invalid age: must be at least {min_age}",
            field="age",
        )
    if age > max_age:
        return RuleError(
            code="INVALID_AGE",
            message=f"Invalid age: must be at most {max_age}",
            field="age",
        )
    return None


def validate_user_input(
    username: Any,
    age: Any,
    *,
    min_username: int = INPUT_MIN_USERNAME,
    max_username: int = INPUT_MAX_USERNAME,
    min_age: int = INPUT_MIN_AGE,
    max_age: int = INPUT_MAX_AGE,
) -> ValidationOutcome:
    """Validate a username/age pair.

    Every failing field contributes its own "Invalid <field>" message, so a
    pair that fails on both fields mentions both.

    Examples:
        >>> str(validate_user_input("sam", 20))
        'Validation successful'
        >>> validate_user_input("", 2).ok
        False
    """
    errors = [
        err
        for err in (
            check_username(username, min_length=min_username, max_length=max_username),
            check_age(age, min_age=min_age, max_age=max_age),
        )
        if err is not None
    ]
    return ValidationOutcome.from_errors(errors)
