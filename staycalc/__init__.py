"""Booking period and pricing calculator for monthly room rentals.

Key modules:
- periods: Decomposes a stay into full-month and half-month billing periods
- payments: Monthly payment plans built from a priced stay
- utils: Date coercion, month arithmetic and decimal money helpers
"""

from .errors import BookingPeriodError, InvalidRateError, InvalidStayError
from .payments import (
    PaymentDue,
    PaymentStatus,
    PaymentType,
    generate_payment_plan,
    payment_plan_frame,
    plan_total,
)
from .periods import (
    PeriodEntry,
    PeriodKind,
    PeriodResult,
    StayInterval,
    calculate_booking_periods,
    decompose_stay,
    format_amount,
    render_breakdown,
)
from .utils.date import last_day_of_month

__version__ = "1.0.0"

__all__ = [
    "__version__",
    "calculate_booking_periods",
    "decompose_stay",
    "StayInterval",
    "PeriodEntry",
    "PeriodKind",
    "PeriodResult",
    "render_breakdown",
    "format_amount",
    "generate_payment_plan",
    "payment_plan_frame",
    "plan_total",
    "PaymentDue",
    "PaymentType",
    "PaymentStatus",
    "last_day_of_month",
    "BookingPeriodError",
    "InvalidStayError",
    "InvalidRateError",
]
