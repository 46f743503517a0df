"""Human-readable rendering of period breakdowns."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, Iterable, List

from staycalc.utils.money import round_cents

from .types import PeriodEntry, PeriodKind

DEFAULT_STYLE = "en"
DEFAULT_CURRENCY = "€"


@dataclass(frozen=True)
class LabelStyle:
    """Phrases used to describe a billed month."""

    full_month: str
    days: str
    half_month: str
    month: str


_REGISTRY: Dict[str, LabelStyle] = {
    "EN": LabelStyle(
        full_month="full month", days="days", half_month="half-month", month="month"
    ),
    "PT": LabelStyle(
        full_month="mês completo", days="dias", half_month="quinzena", month="mês"
    ),
}


def get_label_style(name: str) -> LabelStyle:
    """Return the registered label style for ``name``."""
    key = name.upper()
    try:
        return _REGISTRY[key]
    except KeyError as exc:
        raise ValueError(f"Unsupported label style: {name}") from exc


def register_label_style(name: str, style: LabelStyle) -> None:
    """Register a custom label style."""
    key = name.upper()
    if key in _REGISTRY:
        raise ValueError(f"Label style '{name}' already registered")
    _REGISTRY[key] = style


def format_amount(amount: Decimal, currency: str = DEFAULT_CURRENCY) -> str:
    """Currency-prefixed amount with two decimals, e.g. '€1250.00'."""
    return f"{currency}{round_cents(amount):.2f}"


def describe_entry(entry: PeriodEntry, style: str = DEFAULT_STYLE) -> str:
    """
    Label a month of a stay.

    Whole months read 'full month 02/2024'; anything else names its day
    range and whether it was billed as a half-month or a full month,
    e.g. 'days 16–31/01 (half-month)'.
    """
    phrases = get_label_style(style)
    if entry.kind is PeriodKind.FULL and entry.covers_whole_month:
        return f"{phrases.full_month} {entry.month:02d}/{entry.year}"
    kind = phrases.half_month if entry.kind is PeriodKind.HALF else phrases.month
    return (
        f"{phrases.days} {entry.start_day}–{entry.end_day}/{entry.month:02d} ({kind})"
    )


def render_breakdown(
    entries: Iterable[PeriodEntry],
    style: str = DEFAULT_STYLE,
    currency: str = DEFAULT_CURRENCY,
) -> List[str]:
    """Return one '<label>: <amount>' line per entry, in order."""
    return [
        f"{describe_entry(e, style)}: {format_amount(e.amount, currency)}"
        for e in entries
    ]
