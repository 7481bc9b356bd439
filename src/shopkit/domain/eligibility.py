"""Eligibility rules gated on age, country, and the calendar.

Clock-dependent rules take the moment to judge as an argument; nothing in
this module reads the system clock.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date, datetime, time
from typing import Any

from shopkit.domain.outcome import RuleError
from shopkit.domain.validation import is_finite_number

LEGAL_DRIVING_AGES: dict[str, int] = {
    "US": 16,
    "UK": 17,
}

OPENS_AT = time(8, 0)
CLOSES_AT = time(20, 0)

SEASONAL_MONTH = 12
SEASONAL_DAY = 25
SEASONAL_RATE = 0.2


def can_drive(
    age: Any,
    country_code: str,
    *,
    legal_ages: Mapping[str, int] | None = None,
) -> bool | RuleError:
    """Check whether someone of *age* may drive in *country_code*.

    An unrecognized country or a non-numeric age is an error, not a refusal.

    Examples:
        >>> can_drive(16, "US")
        True
        >>> can_drive(16, "UK")
        False
        >>> str(can_drive(18, "NG"))
        'Invalid country code: NG'
    """
    if not is_finite_number(age):
        return RuleError(code="INVALID_AGE", message="Invalid age: must be a number", field="age")
    table = LEGAL_DRIVING_AGES if legal_ages is None else legal_ages
    minimum = table.get(country_code)
    if minimum is None:
        return RuleError(
            code="INVALID_COUNTRY",
            message=f"Invalid country code: {country_code}",
            field="country_code",
        )
    return age >= minimum


def _minute_of(moment: datetime | time) -> time:
    clock = moment.time() if isinstance(moment, datetime) else moment
    return clock.replace(second=0, microsecond=0, tzinfo=None)


def is_online(
    current_time: datetime | time,
    *,
    opens_at: time = OPENS_AT,
    closes_at: time = CLOSES_AT,
) -> bool:
    """Check whether the store is open at *current_time*.

    The window is inclusive at minute resolution: with the defaults, 08:00
    and 20:00 are open while 07:59 and 20:01 are not.
    """
    return opens_at <= _minute_of(current_time) <= closes_at


def get_discount(
    current_date: date | datetime,
    *,
    month: int = SEASONAL_MONTH,
    day: int = SEASONAL_DAY,
    rate: float = SEASONAL_RATE,
) -> float:
    """Return the seasonal discount *rate* on the given calendar day, else 0."""
    if current_date.month == month and current_date.day == day:
        return rate
    return 0.0

