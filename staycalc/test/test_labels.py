"""
Unit tests for breakdown rendering and tabular export
"""
from datetime import date
from decimal import Decimal

import pytest

from staycalc import PeriodEntry, PeriodKind, calculate_booking_periods, format_amount, render_breakdown
from staycalc.periods import labels
from staycalc.periods import LabelStyle, describe_entry, get_label_style, register_label_style


class TestDescribeEntry:
    def test_whole_month(self):
        entry = PeriodEntry(2024, 2, 1, 29, PeriodKind.FULL, Decimal("1000"))
        assert describe_entry(entry) == "full month 02/2024"
        assert describe_entry(entry, "pt") == "mês completo 02/2024"

    def test_half_month(self):
        entry = PeriodEntry(2024, 1, 16, 31, PeriodKind.HALF, Decimal("500"))
        assert describe_entry(entry) == "days 16–31/01 (half-month)"
        assert describe_entry(entry, "PT") == "dias 16–31/01 (quinzena)"

    def test_partial_month_charged_in_full(self):
        entry = PeriodEntry(2024, 3, 5, 20, PeriodKind.FULL, Decimal("1000"))
        assert entry.label == "days 5–20/03 (month)"
        assert describe_entry(entry, "pt") == "dias 5–20/03 (mês)"


class TestRenderBreakdown:
    def test_lines_follow_entry_order(self):
        result = calculate_booking_periods(date(2024, 1, 16), date(2024, 2, 15), 1000)
        assert result.breakdown == [
            "days 16–31/01 (half-month): €500.00",
            "days 1–15/02 (half-month): €500.00",
        ]

    def test_style_and_currency(self):
        result = calculate_booking_periods(date(2024, 1, 1), date(2024, 2, 29), 850)
        assert render_breakdown(result.entries, style="pt", currency="R$") == [
            "mês completo 01/2024: R$850.00",
            "mês completo 02/2024: R$850.00",
        ]

    def test_amounts_round_half_up(self):
        result = calculate_booking_periods("2024-01-16", "2024-01-31", Decimal("999.99"))
        assert result.breakdown == ["days 16–31/01 (half-month): €500.00"]

    def test_format_amount(self):
        assert format_amount(Decimal("1234.5")) == "€1234.50"
        assert format_amount(Decimal("0"), "$") == "$0.00"

    def test_negative_zero_rate_renders_as_zero(self):
        result = calculate_booking_periods(date(2024, 1, 16), date(2024, 1, 31), -0.0)
        assert result.breakdown == ["days 16–31/01 (half-month): €0.00"]

    def test_rate_beyond_default_decimal_precision(self):
        result = calculate_booking_periods(date(2024, 1, 1), date(2024, 1, 31), Decimal("1E+27"))
        assert result.breakdown == ["full month 01/2024: €1" + "0" * 27 + ".00"]
        assert format_amount(Decimal("123456789012345678901234567890.125")) == (
            "€123456789012345678901234567890.13"
        )


class TestLabelRegistry:
    def test_unknown_style(self):
        with pytest.raises(ValueError):
            get_label_style("klingon")

    def test_duplicate_registration(self):
        with pytest.raises(ValueError):
            register_label_style("en", get_label_style("en"))

    def test_custom_style(self, monkeypatch):
        monkeypatch.setattr(labels, "_REGISTRY", dict(labels._REGISTRY))
        register_label_style(
            "es-test", LabelStyle(full_month="mes completo", days="días", half_month="quincena", month="mes")
        )
        entry = PeriodEntry(2024, 1, 16, 31, PeriodKind.HALF, Decimal("500"))
        assert describe_entry(entry, "ES-TEST") == "días 16–31/01 (quincena)"


class TestResultFrame:
    def test_one_row_per_month(self):
        result = calculate_booking_periods(date(2023, 11, 20), date(2024, 1, 10), 1000)
        frame = result.to_frame()

        assert list(frame.columns) == [
            "year", "month", "start_day", "end_day", "kind", "weight", "amount", "label",
        ]
        assert len(frame) == 3
        assert frame["kind"].tolist() == ["HALF", "FULL", "HALF"]
        assert sum(frame["amount"]) == result.total_price
        assert frame["label"].iloc[1] == "full month 12/2023"

    def test_localized_labels(self):
        result = calculate_booking_periods(date(2024, 1, 1), date(2024, 1, 31), 1000)
        assert result.to_frame(style="pt")["label"].tolist() == ["mês completo 01/2024"]

    def test_default_style_matches_breakdown(self):
        result = calculate_booking_periods(date(2024, 1, 16), date(2024, 1, 31), Decimal("1E+27"))
        frame = result.to_frame()
        assert frame["label"].tolist() == ["days 16–31/01 (half-month)"]
        assert frame["amount"].iloc[0] == Decimal("5E+26")
