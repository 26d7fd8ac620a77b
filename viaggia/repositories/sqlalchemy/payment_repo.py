"""
Payment Repository SQLAlchemy Implementation

Provides concrete database operation implementation for Payment data.
"""

import logging
from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy import select

from viaggia.common.time import to_utc_naive, utc_now_naive
from viaggia.config import get_settings
from viaggia.db.models import Payment
from viaggia.domain.constants import PaymentStatus
from viaggia.domain.payment import PaymentStatistics
from viaggia.repositories.payment_repo import PaymentRepository
from viaggia.repositories.sqlalchemy.generic_repo import SQLAlchemyRepository

logger = logging.getLogger(__name__)


class SQLAlchemyPaymentRepository(SQLAlchemyRepository[Payment], PaymentRepository):
    """
    Payment Repository SQLAlchemy Implementation

    All reads are restricted to active payments.
    """

    model = Payment

    async def _list(self, *criteria) -> list[Payment]:
        stmt = (
            select(Payment)
            .where(Payment.is_active.is_(True), *criteria)
            .order_by(Payment.payment_date.desc(), Payment.id.desc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_by_user(
        self, user_id: int, page: int = 1, page_size: Optional[int] = None
    ) -> list[Payment]:
        """
        List a User's payments, newest first

        Args:
            user_id: Paying user
            page: 1-based page number
            page_size: Rows per page, defaults to PAYMENT_PAGE_SIZE
        """
        if page_size is None:
            page_size = get_settings().PAYMENT_PAGE_SIZE
        page = max(page, 1)
        stmt = (
            select(Payment)
            .where(Payment.user_id == user_id, Payment.is_active.is_(True))
            .order_by(Payment.payment_date.desc(), Payment.id.desc())
            .offset((page - 1) * page_size)
            .limit(page_size)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_by_reservation(self, reservation_id: int) -> list[Payment]:
        """List payments of a Reservation, newest first"""
        return await self._list(Payment.reservation_id == reservation_id)

    async def get_by_stripe_intent_id(self, intent_id: str) -> Optional[Payment]:
        """Get Payment by Stripe payment intent ID"""
        result = await self.session.execute(
            select(Payment)
            .where(
                Payment.stripe_payment_intent_id == intent_id,
                Payment.is_active.is_(True),
            )
            .limit(1)
        )
        return result.scalar_one_or_none()

    async def list_by_status(self, status: str) -> list[Payment]:
        """List payments in a status"""
        return await self._list(Payment.status == status)

    async def list_by_date_range(
        self, start_date: datetime, end_date: datetime
    ) -> list[Payment]:
        """List payments dated within [start_date, end_date]"""
        return await self._list(
            Payment.payment_date >= to_utc_naive(start_date),
            Payment.payment_date <= to_utc_naive(end_date),
        )

    async def total_completed_by_user(self, user_id: int) -> Decimal:
        """Sum of a User's completed payments"""
        result = await self.session.execute(
            select(Payment.amount).where(
                Payment.user_id == user_id,
                Payment.status == PaymentStatus.COMPLETED.value,
                Payment.is_active.is_(True),
            )
        )
        return sum(result.scalars().all(), Decimal("0"))

    async def list_refundable(self) -> list[Payment]:
        """List completed, not yet refunded Stripe payments"""
        return await self._list(
            Payment.status == PaymentStatus.COMPLETED.value,
            Payment.refunded_at.is_(None),
            Payment.stripe_payment_intent_id.is_not(None),
            Payment.stripe_payment_intent_id != "",
        )

    async def update_status(
        self, payment_id: int, status: str, failure_reason: Optional[str] = None
    ) -> bool:
        """
        Stage a status change

        Moving to Refunded stamps refunded_at. Returns False when the payment
        is missing or inactive.
        """
        payment = await self.get_by_id(payment_id)
        if payment is None:
            logger.info("Payment %s not found, status not updated", payment_id)
            return False

        payment.status = status
        if failure_reason is not None:
            payment.failure_reason = failure_reason
        if status == PaymentStatus.REFUNDED.value and payment.refunded_at is None:
            payment.refunded_at = utc_now_naive()
        logger.info("Payment %s status -> %s", payment_id, status)
        return True

    async def get_statistics(
        self,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None,
    ) -> PaymentStatistics:
        """Aggregate totals over an optional date window"""
        stmt = select(Payment).where(Payment.is_active.is_(True))
        if start_date is not None:
            stmt = stmt.where(Payment.payment_date >= to_utc_naive(start_date))
        if end_date is not None:
            stmt = stmt.where(Payment.payment_date <= to_utc_naive(end_date))
        result = await self.session.execute(stmt)
        payments = list(result.scalars().all())

        total = sum((p.amount for p in payments), Decimal("0"))
        by_status = {s.value: 0 for s in PaymentStatus}
        for p in payments:
            if p.status in by_status:
                by_status[p.status] += 1

        return PaymentStatistics(
            start_date=start_date,
            end_date=end_date,
            total_payments=len(payments),
            total_amount=total,
            completed_payments=by_status[PaymentStatus.COMPLETED.value],
            pending_payments=by_status[PaymentStatus.PENDING.value],
            failed_payments=by_status[PaymentStatus.FAILED.value],
            refunded_payments=by_status[PaymentStatus.REFUNDED.value],
            average_payment_amount=total / len(payments) if payments else Decimal("0"),
        )
