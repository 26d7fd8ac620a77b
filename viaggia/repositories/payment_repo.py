"""
Payment Repository Interface

Defines the data access interface for Payments.
"""

from abc import abstractmethod
from datetime import datetime
from decimal import Decimal
from typing import Optional

from viaggia.db.models import Payment
from viaggia.domain.payment import PaymentStatistics
from viaggia.repositories.base import Repository


class PaymentRepository(Repository[Payment]):
    """Payment Repository Interface"""

    @abstractmethod
    async def list_by_user(
        self, user_id: int, page: int = 1, page_size: Optional[int] = None
    ) -> list[Payment]:
        """List a User's payments, newest first (Pagination)"""
        pass

    @abstractmethod
    async def list_by_reservation(self, reservation_id: int) -> list[Payment]:
        """List payments of a Reservation, newest first"""
        pass

    @abstractmethod
    async def get_by_stripe_intent_id(self, intent_id: str) -> Optional[Payment]:
        """Get Payment by Stripe payment intent ID"""
        pass

    @abstractmethod
    async def list_by_status(self, status: str) -> list[Payment]:
        """List payments in a status"""
        pass

    @abstractmethod
    async def list_by_date_range(
        self, start_date: datetime, end_date: datetime
    ) -> list[Payment]:
        """List payments dated within [start_date, end_date]"""
        pass

    @abstractmethod
    async def total_completed_by_user(self, user_id: int) -> Decimal:
        """Sum of a User's completed payments"""
        pass

    @abstractmethod
    async def list_refundable(self) -> list[Payment]:
        """List completed, not yet refunded Stripe payments"""
        pass

    @abstractmethod
    async def update_status(
        self, payment_id: int, status: str, failure_reason: Optional[str] = None
    ) -> bool:
        """Stage a status change; False when missing or inactive"""
        pass

    @abstractmethod
    async def get_statistics(
        self,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None,
    ) -> PaymentStatistics:
        """Aggregate totals over an optional date window"""
        pass
