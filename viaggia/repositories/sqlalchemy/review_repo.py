"""
Review Repository SQLAlchemy Implementation

Provides concrete database operation implementation for Review data.
"""

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import selectinload

from viaggia.db.models import Review
from viaggia.repositories.review_repo import ReviewRepository
from viaggia.repositories.sqlalchemy.generic_repo import SQLAlchemyRepository

logger = logging.getLogger(__name__)


class SQLAlchemyReviewRepository(SQLAlchemyRepository[Review], ReviewRepository):
    """
    Review Repository SQLAlchemy Implementation
    """

    model = Review

    async def list_by_hotel(
        self, hotel_id: int, include_inactive: bool = False
    ) -> list[Review]:
        """List reviews of a Hotel with their authors, newest first"""
        stmt = self._scoped(
            select(Review)
            .where(Review.hotel_id == hotel_id)
            .options(selectinload(Review.user)),
            include_inactive,
        ).order_by(Review.created_at.desc(), Review.id.desc())
        result = await self.session.execute(stmt)
        reviews = list(result.scalars().all())
        logger.debug("Loaded %d review(s) for hotel %s", len(reviews), hotel_id)
        return reviews

    async def get_with_author(
        self, id: int, include_inactive: bool = False
    ) -> Optional[Review]:
        """Get Review with its author eagerly loaded"""
        stmt = self._scoped(
            select(Review).where(Review.id == id).options(selectinload(Review.user)),
            include_inactive,
        )
        result = await self.session.execute(stmt)
        review = result.scalar_one_or_none()
        if review is None:
            logger.debug("Review %s not found", id)
        return review

    async def average_rating(self, hotel_id: int) -> float:
        """Mean rating over active reviews, 0.0 when there are none"""
        result = await self.session.execute(
            select(Review.rating).where(
                Review.hotel_id == hotel_id, Review.is_active.is_(True)
            )
        )
        ratings = list(result.scalars().all())
        if not ratings:
            return 0.0
        return sum(ratings) / len(ratings)
