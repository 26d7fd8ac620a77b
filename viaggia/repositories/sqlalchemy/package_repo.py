"""
Package Repository SQLAlchemy Implementation

Provides concrete database operation implementation for Package data.
"""

import logging
from datetime import datetime
from typing import Optional

from sqlalchemy import and_, func, or_, select
from sqlalchemy.orm import selectinload, with_loader_criteria

from viaggia.common.time import to_utc_naive
from viaggia.db.models import Hotel, Media, Package, PackageDate
from viaggia.repositories.package_repo import PackageRepository
from viaggia.repositories.sqlalchemy.generic_repo import SQLAlchemyRepository

logger = logging.getLogger(__name__)


class SQLAlchemyPackageRepository(SQLAlchemyRepository[Package], PackageRepository):
    """
    Package Repository SQLAlchemy Implementation

    Reactivating a package also reactivates its departure dates.
    """

    model = Package

    async def list_dates(
        self, package_id: int, include_inactive: bool = False
    ) -> list[PackageDate]:
        """List departure windows of a Package"""
        stmt = self._scoped(
            select(PackageDate).where(PackageDate.package_id == package_id),
            include_inactive,
            model=PackageDate,
        ).order_by(PackageDate.start_date, PackageDate.id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_media(
        self, package_id: int, include_inactive: bool = False
    ) -> list[Media]:
        """List media of a Package"""
        stmt = self._scoped(
            select(Media).where(Media.package_id == package_id),
            include_inactive,
            model=Media,
        ).order_by(Media.id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    def _with_details(self, stmt, include_inactive: bool):
        # Reload collections already held by the session
        stmt = stmt.execution_options(populate_existing=True).options(
            selectinload(Package.hotel),
            selectinload(Package.package_dates),
            selectinload(Package.medias),
        )
        if include_inactive:
            return stmt
        return stmt.where(Package.is_active.is_(True)).options(
            with_loader_criteria(PackageDate, PackageDate.is_active.is_(True)),
            with_loader_criteria(Media, Media.is_active.is_(True)),
        )

    async def get_with_details(
        self, id: int, include_inactive: bool = False
    ) -> Optional[Package]:
        """Get Package with hotel, dates and media eagerly loaded"""
        stmt = self._with_details(select(Package).where(Package.id == id), include_inactive)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def search(
        self, destination: str, start_date: datetime, end_date: datetime
    ) -> list[Package]:
        """
        Search active packages

        A package matches when its destination or its hotel's name contains
        ``destination`` (case-insensitive) and one of its active dates
        overlaps [start_date, end_date].
        """
        start = to_utc_naive(start_date)
        end = to_utc_naive(end_date)
        stmt = (
            select(Package)
            .outerjoin(Hotel, Package.hotel_id == Hotel.id)
            .where(
                or_(
                    Package.destination.icontains(destination, autoescape=True),
                    Hotel.name.icontains(destination, autoescape=True),
                ),
                Package.package_dates.any(
                    and_(
                        PackageDate.is_active.is_(True),
                        PackageDate.start_date <= end,
                        PackageDate.end_date >= start,
                    )
                ),
            )
            .order_by(Package.id)
        )
        result = await self.session.execute(self._with_details(stmt, False))
        packages = list(result.scalars().all())
        logger.debug("Package search '%s' matched %d package(s)", destination, len(packages))
        return packages

    async def reactivate(self, id: int) -> bool:
        """Stage is_active=True on the package and all of its dates"""
        if not await super().reactivate(id):
            return False
        result = await self.session.execute(
            select(PackageDate).where(PackageDate.package_id == id)
        )
        for package_date in result.scalars().all():
            package_date.is_active = True
        return True

    async def get_hotel_id_by_name(self, hotel_name: str) -> Optional[int]:
        """Resolve an active Hotel ID by name (case-insensitive)"""
        result = await self.session.execute(
            select(Hotel.id)
            .where(func.lower(Hotel.name) == hotel_name.lower(), Hotel.is_active.is_(True))
            .order_by(Hotel.id)
            .limit(1)
        )
        return result.scalar_one_or_none()
