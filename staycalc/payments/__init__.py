# Re-export payment plan components
from .schedule import (
    generate_payment_plan,
    payment_plan_frame,
    plan_total,
    priced_monthly_rate,
)
from .types import PaymentDue, PaymentStatus, PaymentType
