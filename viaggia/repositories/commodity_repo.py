"""
Commodity Repository Interfaces

Defines the data access interfaces for hotel amenities and custom services.
"""

from abc import abstractmethod
from typing import Optional

from viaggia.db.models import Commodity, CustomCommodity
from viaggia.repositories.base import Repository


class CommodityRepository(Repository[Commodity]):
    """Commodity Repository Interface"""

    @abstractmethod
    async def get_by_hotel_id(
        self, hotel_id: int, include_inactive: bool = False
    ) -> Optional[Commodity]:
        """Get the amenity record of a Hotel"""
        pass

    @abstractmethod
    async def get_by_hotel_name(
        self, hotel_name: str, include_inactive: bool = False
    ) -> Optional[Commodity]:
        """Get the amenity record of a Hotel by the hotel's name"""
        pass


class CustomCommodityRepository(Repository[CustomCommodity]):
    """Custom Commodity Repository Interface"""

    @abstractmethod
    async def list_by_commodity(
        self, commodity_id: int, include_inactive: bool = False
    ) -> list[CustomCommodity]:
        """List custom services attached to an amenity record"""
        pass

    @abstractmethod
    async def list_by_hotel(
        self, hotel_id: int, include_inactive: bool = False
    ) -> list[CustomCommodity]:
        """List custom services of a Hotel"""
        pass
