"""Monthly payment plans derived from a period result."""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import List, Optional, Sequence

import pandas as pd

from staycalc.periods.types import PeriodKind, PeriodResult
from staycalc.utils.date import DateLike, add_months, to_date
from staycalc.utils.money import Number, to_money

from .types import PaymentDue, PaymentType

logger = logging.getLogger(__name__)


def priced_monthly_rate(result: PeriodResult) -> Decimal:
    """Recover the monthly rate a result was priced with."""
    if not result.entries:
        raise ValueError("PeriodResult has no entries to derive a monthly rate from")
    entry = result.entries[0]
    return entry.amount if entry.kind is PeriodKind.FULL else entry.amount * 2


def generate_payment_plan(
    result: PeriodResult,
    start_date: DateLike,
    monthly_amount: Optional[Number] = None,
    include_deposit: bool = True,
) -> List[PaymentDue]:
    """
    Build the monthly installments (and security deposit) for a booking.

    Args:
        result: Priced stay; its monthly_equivalent sets the installment count
        start_date: Due date of the first installment and of the deposit
        monthly_amount: Installment amount (defaults to the priced monthly rate)
        include_deposit: Append a deposit equal to one installment

    Returns:
        Installments in due-date order, followed by the deposit
    """
    start = to_date(start_date)
    if monthly_amount is None:
        amount = priced_monthly_rate(result)
    else:
        amount = to_money(monthly_amount, "monthly_amount")

    plan = [
        PaymentDue(
            payment_type=PaymentType.MONTHLY,
            amount=amount,
            due_date=add_months(start, i),
            sequence=i + 1,
        )
        for i in range(result.monthly_equivalent)
    ]
    if include_deposit:
        plan.append(
            PaymentDue(
                payment_type=PaymentType.DEPOSIT,
                amount=amount,
                due_date=start,
                sequence=0,
            )
        )

    logger.debug(
        "Payment plan from %s: %s installments of %s, deposit=%s",
        start,
        result.monthly_equivalent,
        amount,
        include_deposit,
    )
    return plan


def plan_total(
    plan: Sequence[PaymentDue], payment_type: Optional[PaymentType] = None
) -> Decimal:
    """Sum plan amounts, optionally restricted to one payment type."""
    return sum(
        (p.amount for p in plan if payment_type is None or p.payment_type is payment_type),
        Decimal("0"),
    )


def payment_plan_frame(plan: Sequence[PaymentDue]) -> pd.DataFrame:
    """Return the plan as a DataFrame, one row per payment."""
    columns = ["sequence", "payment_type", "due_date", "amount", "status"]
    rows = [
        {
            "sequence": p.sequence,
            "payment_type": p.payment_type.value,
            "due_date": p.due_date,
            "amount": p.amount,
            "status": p.status.value,
        }
        for p in plan
    ]
    return pd.DataFrame(rows, columns=columns)
