"""
Hotel Repository Interface

Defines the data access interface for Hotels and their catalogue rows.
"""

from abc import abstractmethod
from typing import Optional

from viaggia.db.models import Hotel, HotelDate, HotelRoomType, Media
from viaggia.repositories.base import Repository


class HotelRepository(Repository[Hotel]):
    """Hotel Repository Interface"""

    @abstractmethod
    async def cnpj_exists(self, cnpj: str, include_inactive: bool = True) -> bool:
        """Check if a CNPJ (tax ID) is already registered"""
        pass

    @abstractmethod
    async def get_by_name(
        self, name: str, include_inactive: bool = False
    ) -> Optional[Hotel]:
        """Get Hotel by name (case-insensitive)"""
        pass

    @abstractmethod
    async def get_with_details(
        self, id: int, include_inactive: bool = False
    ) -> Optional[Hotel]:
        """Get Hotel with room types, media and amenities eagerly loaded"""
        pass

    @abstractmethod
    async def list_room_types(
        self, hotel_id: int, include_inactive: bool = False
    ) -> list[HotelRoomType]:
        """List room types of a Hotel"""
        pass

    @abstractmethod
    async def list_dates(
        self, hotel_id: int, include_inactive: bool = False
    ) -> list[HotelDate]:
        """List availability windows of a Hotel"""
        pass

    @abstractmethod
    async def list_media(
        self, hotel_id: int, include_inactive: bool = False
    ) -> list[Media]:
        """List media of a Hotel"""
        pass

    @abstractmethod
    async def list_by_owner(
        self, user_id: int, include_inactive: bool = False
    ) -> list[Hotel]:
        """List Hotels owned by a service provider"""
        pass

    @abstractmethod
    async def refresh_average_rating(self, hotel_id: int) -> Optional[float]:
        """Recompute and stage the cached average rating"""
        pass
