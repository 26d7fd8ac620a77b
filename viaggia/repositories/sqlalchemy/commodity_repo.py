"""
Commodity Repository SQLAlchemy Implementations

Provides concrete database operation implementation for hotel amenities and
custom services.
"""

from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.orm import selectinload, with_loader_criteria

from viaggia.db.models import Commodity, CustomCommodity, Hotel
from viaggia.repositories.commodity_repo import (
    CommodityRepository,
    CustomCommodityRepository,
)
from viaggia.repositories.sqlalchemy.generic_repo import SQLAlchemyRepository


class SQLAlchemyCommodityRepository(SQLAlchemyRepository[Commodity], CommodityRepository):
    """
    Commodity Repository SQLAlchemy Implementation
    """

    model = Commodity

    def _detailed(self, stmt, include_inactive: bool):
        stmt = stmt.execution_options(populate_existing=True).options(
            selectinload(Commodity.hotel),
            selectinload(Commodity.custom_commodities),
        ).order_by(Commodity.id).limit(1)
        if include_inactive:
            return stmt
        return stmt.where(Commodity.is_active.is_(True)).options(
            with_loader_criteria(CustomCommodity, CustomCommodity.is_active.is_(True))
        )

    async def get_by_hotel_id(
        self, hotel_id: int, include_inactive: bool = False
    ) -> Optional[Commodity]:
        """Get the amenity record of a Hotel"""
        stmt = self._detailed(
            select(Commodity).where(Commodity.hotel_id == hotel_id), include_inactive
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_hotel_name(
        self, hotel_name: str, include_inactive: bool = False
    ) -> Optional[Commodity]:
        """Get the amenity record of a Hotel by the hotel's name"""
        stmt = select(Commodity).join(Hotel, Commodity.hotel_id == Hotel.id).where(
            func.lower(Hotel.name) == hotel_name.lower()
        )
        if not include_inactive:
            stmt = stmt.where(Hotel.is_active.is_(True))
        result = await self.session.execute(self._detailed(stmt, include_inactive))
        return result.scalar_one_or_none()


class SQLAlchemyCustomCommodityRepository(
    SQLAlchemyRepository[CustomCommodity], CustomCommodityRepository
):
    """
    Custom Commodity Repository SQLAlchemy Implementation
    """

    model = CustomCommodity

    async def list_by_commodity(
        self, commodity_id: int, include_inactive: bool = False
    ) -> list[CustomCommodity]:
        """List custom services attached to an amenity record"""
        stmt = self._scoped(
            select(CustomCommodity)
            .where(CustomCommodity.commodity_id == commodity_id)
            .options(selectinload(CustomCommodity.hotel)),
            include_inactive,
        ).order_by(CustomCommodity.id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_by_hotel(
        self, hotel_id: int, include_inactive: bool = False
    ) -> list[CustomCommodity]:
        """List custom services of a Hotel"""
        stmt = self._scoped(
            select(CustomCommodity).where(CustomCommodity.hotel_id == hotel_id),
            include_inactive,
        ).order_by(CustomCommodity.id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
