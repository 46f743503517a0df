"""Calendar helpers shared by the period decomposer and payment plans."""

from __future__ import annotations

import calendar
from datetime import date, datetime
from typing import Tuple, Union

from dateutil.relativedelta import relativedelta
from pandas import NaT, Timestamp

DATE_FMT = "%Y-%m-%d"
COMPACT_FMT = "%Y%m%d"

DateLike = Union[str, date, datetime, Timestamp]


def to_date(date_like: DateLike) -> date:
    """
    Convert a string, datetime or Timestamp to a plain calendar date.
    Accepts 'YYYY-MM-DD' and 'YYYYMMDD' string formats.
    """
    if date_like is NaT:
        raise ValueError("NaT is not a valid calendar date")
    if isinstance(date_like, Timestamp):
        return date_like.date()
    if isinstance(date_like, datetime):
        return date_like.date()
    if isinstance(date_like, date):
        return date_like
    if isinstance(date_like, str):
        for fmt in (DATE_FMT, COMPACT_FMT):
            try:
                return datetime.strptime(date_like.strip(), fmt).date()
            except ValueError:
                continue
        raise ValueError(f"Unsupported date string format: {date_like!r}")
    raise TypeError(f"Unsupported type for date: {type(date_like)}")


def last_day_of_month(year: int, month: int) -> int:
    """Day number of the final day of the month (28 to 31)."""
    return calendar.monthrange(year, month)[1]


def shift_month(year: int, month: int, months: int) -> Tuple[int, int]:
    """Return (year, month) after moving ``months`` calendar months."""
    index = month - 1 + months
    return year + index // 12, index % 12 + 1


def months_spanned(start: date, end: date) -> int:
    """Count of distinct calendar months touched by [start, end], inclusive."""
    return (end.year - start.year) * 12 + (end.month - start.month) + 1


def add_months(dt: DateLike, months: int) -> date:
    """Add calendar months, clamping to the month end when the day is missing."""
    return to_date(dt) + relativedelta(months=months)
