"""
Payment Domain Model

Aggregates computed over payment rows.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field


class PaymentStatistics(BaseModel):
    """Payment totals over an optional date window (active payments only)"""

    # Window bounds, None means open-ended
    start_date: Optional[datetime] = Field(None, description="Window Start")
    end_date: Optional[datetime] = Field(None, description="Window End")
    total_payments: int = Field(0, description="Number of Payments")
    total_amount: Decimal = Field(Decimal("0"), description="Sum of Amounts")
    completed_payments: int = Field(0, description="Completed Payments")
    pending_payments: int = Field(0, description="Pending Payments")
    failed_payments: int = Field(0, description="Failed Payments")
    refunded_payments: int = Field(0, description="Refunded Payments")
    # 0 when the window holds no payments
    average_payment_amount: Decimal = Field(Decimal("0"), description="Mean Amount")
