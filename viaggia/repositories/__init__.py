"""
Data Access Layer Module Initialization
"""

from viaggia.repositories.base import Repository, SoftDeletable
from viaggia.repositories.user_repo import UserRepository
from viaggia.repositories.hotel_repo import HotelRepository
from viaggia.repositories.review_repo import ReviewRepository
from viaggia.repositories.reservation_repo import ReservationRepository
from viaggia.repositories.payment_repo import PaymentRepository
from viaggia.repositories.package_repo import PackageRepository
from viaggia.repositories.commodity_repo import (
    CommodityRepository,
    CustomCommodityRepository,
)

__all__ = [
    "Repository",
    "SoftDeletable",
    "UserRepository",
    "HotelRepository",
    "ReviewRepository",
    "ReservationRepository",
    "PaymentRepository",
    "PackageRepository",
    "CommodityRepository",
    "CustomCommodityRepository",
]
