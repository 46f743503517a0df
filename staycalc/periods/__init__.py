# Re-export period components
from .calculator import calculate_booking_periods, decompose_stay
from .labels import (
    LabelStyle,
    describe_entry,
    format_amount,
    get_label_style,
    register_label_style,
    render_breakdown,
)
from .types import PeriodEntry, PeriodKind, PeriodResult, StayInterval
