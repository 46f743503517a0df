"""
Payment records generated from a priced stay.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum


class PaymentType(Enum):
    """Kinds of payment due for a booking."""

    MONTHLY = "monthly"
    DEPOSIT = "deposit"


class PaymentStatus(Enum):
    """Lifecycle of a payment record."""

    PENDING = "pending"
    PAID = "paid"
    REFUNDED = "refunded"


@dataclass(frozen=True)
class PaymentDue:
    """A single amount owed on a due date.

    Monthly installments are numbered from 1; the deposit carries sequence 0.
    """

    payment_type: PaymentType
    amount: Decimal
    due_date: date
    sequence: int
    status: PaymentStatus = PaymentStatus.PENDING
