"""
Review Repository Interface

Defines the data access interface for Reviews.
"""

from abc import abstractmethod
from typing import Optional

from viaggia.db.models import Review
from viaggia.repositories.base import Repository


class ReviewRepository(Repository[Review]):
    """Review Repository Interface"""

    @abstractmethod
    async def list_by_hotel(
        self, hotel_id: int, include_inactive: bool = False
    ) -> list[Review]:
        """List reviews of a Hotel with their authors"""
        pass

    @abstractmethod
    async def get_with_author(
        self, id: int, include_inactive: bool = False
    ) -> Optional[Review]:
        """Get Review with its author eagerly loaded"""
        pass

    @abstractmethod
    async def average_rating(self, hotel_id: int) -> float:
        """Mean rating over active reviews, 0.0 when there are none"""
        pass
