"""
SQLAlchemy Repository Implementation Module Initialization
"""

from viaggia.repositories.sqlalchemy.generic_repo import SQLAlchemyRepository
from viaggia.repositories.sqlalchemy.user_repo import SQLAlchemyUserRepository
from viaggia.repositories.sqlalchemy.hotel_repo import SQLAlchemyHotelRepository
from viaggia.repositories.sqlalchemy.review_repo import SQLAlchemyReviewRepository
from viaggia.repositories.sqlalchemy.reservation_repo import SQLAlchemyReservationRepository
from viaggia.repositories.sqlalchemy.payment_repo import SQLAlchemyPaymentRepository
from viaggia.repositories.sqlalchemy.package_repo import SQLAlchemyPackageRepository
from viaggia.repositories.sqlalchemy.commodity_repo import (
    SQLAlchemyCommodityRepository,
    SQLAlchemyCustomCommodityRepository,
)

__all__ = [
    "SQLAlchemyRepository",
    "SQLAlchemyUserRepository",
    "SQLAlchemyHotelRepository",
    "SQLAlchemyReviewRepository",
    "SQLAlchemyReservationRepository",
    "SQLAlchemyPaymentRepository",
    "SQLAlchemyPackageRepository",
    "SQLAlchemyCommodityRepository",
    "SQLAlchemyCustomCommodityRepository",
]
