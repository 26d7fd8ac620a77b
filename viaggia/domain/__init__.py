"""
Domain Module Initialization
"""

from viaggia.domain.constants import PaymentStatus, ReservationStatus, RoleName
from viaggia.domain.payment import PaymentStatistics

__all__ = [
    "PaymentStatus",
    "ReservationStatus",
    "RoleName",
    "PaymentStatistics",
]
