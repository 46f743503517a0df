"""
Value types produced by the period decomposer.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import List, Optional, Tuple

import pandas as pd

from staycalc.errors import InvalidStayError
from staycalc.utils.date import DateLike, last_day_of_month, months_spanned, to_date


class PeriodKind(Enum):
    """Billing units a month can be charged as."""

    FULL = "FULL"
    HALF = "HALF"

    @property
    def weight(self) -> Decimal:
        return Decimal("1") if self is PeriodKind.FULL else Decimal("0.5")


@dataclass(frozen=True)
class StayInterval:
    """Check-in and check-out dates of a stay; check-out must be later."""

    check_in: date
    check_out: date

    def __post_init__(self):
        if self.check_out <= self.check_in:
            raise InvalidStayError(
                f"check_out {self.check_out} must be after check_in {self.check_in}"
            )

    @classmethod
    def from_dates(cls, check_in: DateLike, check_out: DateLike) -> "StayInterval":
        return cls(to_date(check_in), to_date(check_out))

    @property
    def nights(self) -> int:
        return (self.check_out - self.check_in).days

    @property
    def months_spanned(self) -> int:
        return months_spanned(self.check_in, self.check_out)


@dataclass(frozen=True)
class PeriodEntry:
    """One calendar month of a stay and what it is billed."""

    year: int
    month: int
    start_day: int
    end_day: int
    kind: PeriodKind
    amount: Decimal

    @property
    def weight(self) -> Decimal:
        return self.kind.weight

    @property
    def last_day(self) -> int:
        return last_day_of_month(self.year, self.month)

    @property
    def covers_whole_month(self) -> bool:
        return self.start_day == 1 and self.end_day == self.last_day

    @property
    def label(self) -> str:
        from .labels import describe_entry

        return describe_entry(self)


@dataclass(frozen=True)
class PeriodResult:
    """Aggregate price and breakdown of a stay.

    Attributes:
        total_price: Sum of every entry amount
        number_of_periods: Sum of entry weights, in steps of 0.5
        entries: One entry per calendar month touched, chronological
        monthly_equivalent: Ceiling of number_of_periods; the count of
            monthly installments a payment plan schedules
    """

    total_price: Decimal
    number_of_periods: Decimal
    entries: Tuple[PeriodEntry, ...]
    monthly_equivalent: int

    def __post_init__(self):
        if self.monthly_equivalent != math.ceil(self.number_of_periods):
            raise ValueError(
                f"monthly_equivalent {self.monthly_equivalent} does not match "
                f"{self.number_of_periods} periods"
            )

    @property
    def breakdown(self) -> List[str]:
        """Entry lines in the default style and currency."""
        from .labels import render_breakdown

        return render_breakdown(self.entries)

    def to_frame(self, style: Optional[str] = None) -> pd.DataFrame:
        """Return entries as a DataFrame, one row per month."""
        from .labels import DEFAULT_STYLE, describe_entry

        if style is None:
            style = DEFAULT_STYLE

        rows = [
            {
                "year": e.year,
                "month": e.month,
                "start_day": e.start_day,
                "end_day": e.end_day,
                "kind": e.kind.value,
                "weight": e.weight,
                "amount": e.amount,
                "label": describe_entry(e, style),
            }
            for e in self.entries
        ]
        columns = ["year", "month", "start_day", "end_day", "kind", "weight", "amount", "label"]
        return pd.DataFrame(rows, columns=columns)
