"""
Package Repository Interface

Defines the data access interface for Packages.
"""

from abc import abstractmethod
from datetime import datetime
from typing import Optional

from viaggia.db.models import Media, Package, PackageDate
from viaggia.repositories.base import Repository


class PackageRepository(Repository[Package]):
    """Package Repository Interface"""

    @abstractmethod
    async def list_dates(
        self, package_id: int, include_inactive: bool = False
    ) -> list[PackageDate]:
        """List departure windows of a Package"""
        pass

    @abstractmethod
    async def list_media(
        self, package_id: int, include_inactive: bool = False
    ) -> list[Media]:
        """List media of a Package"""
        pass

    @abstractmethod
    async def get_with_details(
        self, id: int, include_inactive: bool = False
    ) -> Optional[Package]:
        """Get Package with hotel, dates and media eagerly loaded"""
        pass

    @abstractmethod
    async def search(
        self, destination: str, start_date: datetime, end_date: datetime
    ) -> list[Package]:
        """Search active packages by destination/hotel name and date overlap"""
        pass

    @abstractmethod
    async def get_hotel_id_by_name(self, hotel_name: str) -> Optional[int]:
        """Resolve an active Hotel ID by name (case-insensitive)"""
        pass
