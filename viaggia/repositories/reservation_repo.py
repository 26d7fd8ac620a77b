"""
Reservation Repository Interface

Defines the data access interface for Reservations and Companions.
"""

from abc import abstractmethod
from typing import Optional

from viaggia.db.models import Companion, Reservation
from viaggia.repositories.base import Repository


class ReservationRepository(Repository[Reservation]):
    """Reservation Repository Interface"""

    @abstractmethod
    async def list_by_hotel(
        self, hotel_id: int, include_inactive: bool = False
    ) -> list[Reservation]:
        """List reservations of a Hotel"""
        pass

    @abstractmethod
    async def list_by_user(
        self, user_id: int, include_inactive: bool = False
    ) -> list[Reservation]:
        """List reservations made by a User"""
        pass

    @abstractmethod
    async def get_with_companions(
        self, id: int, include_inactive: bool = False
    ) -> Optional[Reservation]:
        """Get Reservation with companions eagerly loaded"""
        pass

    @abstractmethod
    async def list_companions(
        self, reservation_id: int, include_inactive: bool = False
    ) -> list[Companion]:
        """List companions of a Reservation"""
        pass
