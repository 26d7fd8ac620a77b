"""
Hotel Repository SQLAlchemy Implementation

Provides concrete database operation implementation for Hotel data.
"""

import logging
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.orm import selectinload, with_loader_criteria

from viaggia.db.models import Commodity, Hotel, HotelDate, HotelRoomType, Media
from viaggia.repositories.hotel_repo import HotelRepository
from viaggia.repositories.sqlalchemy.generic_repo import SQLAlchemyRepository
from viaggia.repositories.sqlalchemy.review_repo import SQLAlchemyReviewRepository

logger = logging.getLogger(__name__)


class SQLAlchemyHotelRepository(SQLAlchemyRepository[Hotel], HotelRepository):
    """
    Hotel Repository SQLAlchemy Implementation
    """

    model = Hotel

    async def cnpj_exists(self, cnpj: str, include_inactive: bool = True) -> bool:
        """Check if a CNPJ is already registered"""
        stmt = self._scoped(select(Hotel.id).where(Hotel.cnpj == cnpj), include_inactive)
        result = await self.session.execute(stmt.limit(1))
        return result.first() is not None

    async def get_by_name(
        self, name: str, include_inactive: bool = False
    ) -> Optional[Hotel]:
        """Get Hotel by name (case-insensitive)"""
        stmt = self._scoped(
            select(Hotel).where(func.lower(Hotel.name) == name.lower()),
            include_inactive,
        )
        result = await self.session.execute(stmt.order_by(Hotel.id).limit(1))
        return result.scalar_one_or_none()

    async def get_with_details(
        self, id: int, include_inactive: bool = False
    ) -> Optional[Hotel]:
        """
        Get Hotel with room types, media and amenities eagerly loaded

        Child collections follow the same include_inactive rule as the hotel
        and are reloaded even when already present in the session.
        """
        stmt = (
            select(Hotel)
            .where(Hotel.id == id)
            .execution_options(populate_existing=True)
            .options(
                selectinload(Hotel.room_types),
                selectinload(Hotel.medias),
                selectinload(Hotel.commodities).selectinload(Commodity.custom_commodities),
            )
        )
        if not include_inactive:
            stmt = stmt.where(Hotel.is_active.is_(True)).options(
                *(
                    with_loader_criteria(child, child.is_active.is_(True))
                    for child in (HotelRoomType, Media, Commodity)
                )
            )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def _list_children(self, child, hotel_id: int, include_inactive: bool) -> list:
        stmt = self._scoped(
            select(child).where(child.hotel_id == hotel_id),
            include_inactive,
            model=child,
        ).order_by(child.id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_room_types(
        self, hotel_id: int, include_inactive: bool = False
    ) -> list[HotelRoomType]:
        """List room types of a Hotel"""
        return await self._list_children(HotelRoomType, hotel_id, include_inactive)

    async def list_dates(
        self, hotel_id: int, include_inactive: bool = False
    ) -> list[HotelDate]:
        """List availability windows of a Hotel"""
        return await self._list_children(HotelDate, hotel_id, include_inactive)

    async def list_media(
        self, hotel_id: int, include_inactive: bool = False
    ) -> list[Media]:
        """List media of a Hotel"""
        return await self._list_children(Media, hotel_id, include_inactive)

    async def list_by_owner(
        self, user_id: int, include_inactive: bool = False
    ) -> list[Hotel]:
        """List Hotels owned by a service provider"""
        stmt = self._scoped(
            select(Hotel).where(Hotel.user_id == user_id), include_inactive
        ).order_by(Hotel.id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def refresh_average_rating(self, hotel_id: int) -> Optional[float]:
        """
        Recompute the cached average rating from active reviews

        Returns:
            Optional[float]: New average, None when the hotel is missing
        """
        hotel = await self.session.get(Hotel, hotel_id)
        if hotel is None:
            logger.info("Hotel %s not found, rating not refreshed", hotel_id)
            return None

        reviews = SQLAlchemyReviewRepository(self.session)
        hotel.average_rating = await reviews.average_rating(hotel_id)
        return hotel.average_rating
