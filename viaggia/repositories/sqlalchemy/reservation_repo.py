"""
Reservation Repository SQLAlchemy Implementation

Provides concrete database operation implementation for Reservation data.
"""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import selectinload, with_loader_criteria

from viaggia.db.models import Companion, Reservation
from viaggia.repositories.reservation_repo import ReservationRepository
from viaggia.repositories.sqlalchemy.generic_repo import SQLAlchemyRepository


class SQLAlchemyReservationRepository(
    SQLAlchemyRepository[Reservation], ReservationRepository
):
    """
    Reservation Repository SQLAlchemy Implementation
    """

    model = Reservation

    async def _list_where(self, criterion, include_inactive: bool) -> list[Reservation]:
        stmt = self._scoped(
            select(Reservation)
            .where(criterion)
            .options(selectinload(Reservation.hotel), selectinload(Reservation.user)),
            include_inactive,
        ).order_by(Reservation.start_date, Reservation.id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_by_hotel(
        self, hotel_id: int, include_inactive: bool = False
    ) -> list[Reservation]:
        """List reservations of a Hotel"""
        return await self._list_where(Reservation.hotel_id == hotel_id, include_inactive)

    async def list_by_user(
        self, user_id: int, include_inactive: bool = False
    ) -> list[Reservation]:
        """List reservations made by a User"""
        return await self._list_where(Reservation.user_id == user_id, include_inactive)

    async def get_with_companions(
        self, id: int, include_inactive: bool = False
    ) -> Optional[Reservation]:
        """Get Reservation with companions eagerly loaded"""
        stmt = (
            select(Reservation)
            .where(Reservation.id == id)
            .execution_options(populate_existing=True)
            .options(selectinload(Reservation.companions))
        )
        if not include_inactive:
            stmt = stmt.where(Reservation.is_active.is_(True)).options(
                with_loader_criteria(Companion, Companion.is_active.is_(True))
            )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_companions(
        self, reservation_id: int, include_inactive: bool = False
    ) -> list[Companion]:
        """List companions of a Reservation"""
        stmt = self._scoped(
            select(Companion).where(Companion.reservation_id == reservation_id),
            include_inactive,
            model=Companion,
        ).order_by(Companion.id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
