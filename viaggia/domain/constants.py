"""
Domain Constants

Status and role vocabularies stored as plain strings in the database.
"""

from enum import Enum


class RoleName(str, Enum):
    """Account roles seeded at init_db"""

    CLIENT = "CLIENT"
    SERVICE_PROVIDER = "SERVICE_PROVIDER"
    ATTENDANT = "ATTENDANT"
    ADMIN = "ADMIN"

    @classmethod
    def values(cls) -> list[str]:
        return [member.value for member in cls]


class PaymentStatus(str, Enum):
    """Payment lifecycle as mirrored from Stripe"""

    PENDING = "Pending"
    COMPLETED = "Completed"
    FAILED = "Failed"
    REFUNDED = "Refunded"


class ReservationStatus(str, Enum):
    """Reservation lifecycle"""

    PENDING = "Pending"
    CONFIRMED = "Confirmed"
    CANCELLED = "Cancelled"
