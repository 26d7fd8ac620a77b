"""
Time Utilities

Backend policy:
- Store/query in database as UTC (naive) timestamps.
- Stay lengths are counted in whole nights.
"""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Optional, Union

from viaggia.common.errors import ValidationError

UTC = timezone.utc


def utc_now() -> datetime:
    """Return current UTC time (timezone-aware)."""
    return datetime.now(UTC)


def utc_now_naive() -> datetime:
    """Return current UTC time without tzinfo, as stored in the database."""
    return utc_now().replace(tzinfo=None)


def ensure_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """
    Ensure a datetime is UTC-aware.

    Naive values are treated as UTC; aware values are converted.
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)


def to_utc_naive(dt: Optional[datetime]) -> Optional[datetime]:
    """Convert a datetime to naive UTC for database storage/query."""
    aware = ensure_utc(dt)
    if aware is None:
        return None
    return aware.replace(tzinfo=None)


def stay_nights(
    check_in: Union[date, datetime],
    check_out: Union[date, datetime],
) -> int:
    """
    Number of nights billed for a stay.

    A same-day turnaround shorter than 24h still counts as one night.

    Raises:
        ValidationError: check_out is not after check_in
    """
    if check_in is None or check_out is None:
        raise ValidationError(
            message="Check-in and check-out dates are required",
            code="missing_stay_dates",
        )
    if check_out <= check_in:
        raise ValidationError(
            message="Check-out must be after check-in",
            code="invalid_stay_dates",
            details={"check_in": str(check_in), "check_out": str(check_out)},
        )
    return max((check_out - check_in).days, 1)
