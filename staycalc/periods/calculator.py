"""Decompose a stay into monthly and half-month billing periods.

A month touched by a stay is billed either at the monthly rate (FULL,
weight 1) or at exactly half of it (HALF, weight 0.5):

- a stay confined to one month is HALF when it starts on day 16 or later
  or ends on day 15 or earlier, unless it runs from the 1st to the last
  day, which is always FULL;
- across several months the first month is HALF only when the stay
  starts on day 16 or later, the last month only when it ends on day 15
  or earlier, and every month in between is FULL.
"""

from __future__ import annotations

import logging
import math
from decimal import Decimal
from typing import List

from staycalc.utils.date import DateLike, last_day_of_month, shift_month
from staycalc.utils.money import Number, to_money

from .types import PeriodEntry, PeriodKind, PeriodResult, StayInterval

logger = logging.getLogger(__name__)

FIRST_HALF_LAST_DAY = 15
SECOND_HALF_FIRST_DAY = 16


def _entry(year, month, start_day, end_day, kind, monthly, biweekly) -> PeriodEntry:
    amount = monthly if kind is PeriodKind.FULL else biweekly
    return PeriodEntry(year, month, start_day, end_day, kind, amount)


def _single_month(stay: StayInterval, monthly: Decimal, biweekly: Decimal) -> PeriodEntry:
    year, month = stay.check_in.year, stay.check_in.month
    start, end = stay.check_in.day, stay.check_out.day
    last = last_day_of_month(year, month)

    if start == 1 and end == last:
        kind = PeriodKind.FULL
    elif start >= SECOND_HALF_FIRST_DAY or end <= FIRST_HALF_LAST_DAY:
        kind = PeriodKind.HALF
    else:
        kind = PeriodKind.FULL
    return _entry(year, month, start, end, kind, monthly, biweekly)


def _multi_month(
    stay: StayInterval, monthly: Decimal, biweekly: Decimal
) -> List[PeriodEntry]:
    n_months = stay.months_spanned
    entries: List[PeriodEntry] = []

    for i in range(n_months):
        year, month = shift_month(stay.check_in.year, stay.check_in.month, i)
        last = last_day_of_month(year, month)

        if i == 0:
            start, end = stay.check_in.day, last
            if start >= SECOND_HALF_FIRST_DAY:
                kind = PeriodKind.HALF
            else:
                # day 1 is a whole month; days 2-15 are still charged as one
                kind = PeriodKind.FULL
        elif i == n_months - 1:
            start, end = 1, stay.check_out.day
            if end <= FIRST_HALF_LAST_DAY:
                kind = PeriodKind.HALF
            else:
                kind = PeriodKind.FULL
        else:
            start, end, kind = 1, last, PeriodKind.FULL

        logger.debug("Month %02d/%s days %s-%s billed as %s", month, year, start, end, kind.value)
        entries.append(_entry(year, month, start, end, kind, monthly, biweekly))

    return entries


def decompose_stay(stay: StayInterval, monthly_price: Number) -> PeriodResult:
    """Price ``stay`` at ``monthly_price`` per calendar month."""
    monthly = to_money(monthly_price)
    biweekly = monthly / 2

    if stay.months_spanned == 1:
        entries = [_single_month(stay, monthly, biweekly)]
    else:
        entries = _multi_month(stay, monthly, biweekly)

    total = sum((e.amount for e in entries), Decimal("0"))
    periods = sum((e.weight for e in entries), Decimal("0"))
    result = PeriodResult(
        total_price=total,
        number_of_periods=periods,
        entries=tuple(entries),
        monthly_equivalent=math.ceil(periods),
    )
    logger.debug(
        "Stay %s -> %s: %s periods, total %s, %s monthly payments",
        stay.check_in,
        stay.check_out,
        periods,
        total,
        result.monthly_equivalent,
    )
    return result


def calculate_booking_periods(
    check_in: DateLike, check_out: DateLike, monthly_price: Number
) -> PeriodResult:
    """
    Compute the billing periods and total price of a stay.

    Args:
        check_in: First day of the stay (date, datetime, Timestamp or ISO string)
        check_out: Last day of the stay; must be after check_in
        monthly_price: Rate for one full calendar month, non-negative

    Returns:
        PeriodResult with total price, period count, per-month entries
        and the number of monthly payments (period count rounded up)

    Raises:
        InvalidStayError: check_out is not after check_in
        InvalidRateError: monthly_price is negative, non-finite or not numeric
    """
    return decompose_stay(StayInterval.from_dates(check_in, check_out), monthly_price)
