"""
Database Module Initialization
"""

from viaggia.db.session import get_db, init_db, seed_roles, AsyncSessionLocal
from viaggia.db.unit_of_work import commit_unit_of_work
from viaggia.db.models import (
    Base,
    SoftDeleteMixin,
    Role,
    User,
    UserRole,
    Hotel,
    HotelRoomType,
    HotelDate,
    Package,
    PackageDate,
    Media,
    Reservation,
    Companion,
    BillingAddress,
    Payment,
    Review,
    Commodity,
    CustomCommodity,
)

__all__ = [
    "get_db",
    "init_db",
    "seed_roles",
    "AsyncSessionLocal",
    "commit_unit_of_work",
    "Base",
    "SoftDeleteMixin",
    "Role",
    "User",
    "UserRole",
    "Hotel",
    "HotelRoomType",
    "HotelDate",
    "Package",
    "PackageDate",
    "Media",
    "Reservation",
    "Companion",
    "BillingAddress",
    "Payment",
    "Review",
    "Commodity",
    "CustomCommodity",
]
