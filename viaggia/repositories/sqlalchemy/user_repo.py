"""
User Repository SQLAlchemy Implementation

Provides concrete database operation implementation for User data.
"""

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import selectinload

from viaggia.common.errors import ConflictError, ValidationError
from viaggia.db.models import Role, User, UserRole
from viaggia.repositories.sqlalchemy.generic_repo import SQLAlchemyRepository
from viaggia.repositories.user_repo import UserRepository

logger = logging.getLogger(__name__)


class SQLAlchemyUserRepository(SQLAlchemyRepository[User], UserRepository):
    """
    User Repository SQLAlchemy Implementation

    E-mail and CPF existence checks see inactive accounts too, since the
    unique constraints on those columns do.
    """

    model = User

    async def email_exists(self, email: str, include_inactive: bool = True) -> bool:
        """Check if an e-mail is already registered"""
        stmt = self._scoped(select(User.id).where(User.email == email), include_inactive)
        result = await self.session.execute(stmt.limit(1))
        return result.first() is not None

    async def cpf_exists(self, cpf: Optional[str], include_inactive: bool = True) -> bool:
        """Check if a CPF is already registered"""
        if not cpf:
            return False
        stmt = self._scoped(select(User.id).where(User.cpf == cpf), include_inactive)
        result = await self.session.execute(stmt.limit(1))
        return result.first() is not None

    async def get_by_email(
        self, email: str, include_inactive: bool = False
    ) -> Optional[User]:
        """Get User by e-mail"""
        stmt = self._scoped(select(User).where(User.email == email), include_inactive)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_with_roles(
        self, id: int, include_inactive: bool = False
    ) -> Optional[User]:
        """Get User with roles eagerly loaded"""
        stmt = self._scoped(
            select(User)
            .where(User.id == id)
            .execution_options(populate_existing=True)
            .options(selectinload(User.user_roles).selectinload(UserRole.role)),
            include_inactive,
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_role_names(self, user_id: int) -> list[str]:
        """Get names of the active roles assigned to a User"""
        stmt = (
            select(Role.name)
            .join(UserRole, UserRole.role_id == Role.id)
            .where(UserRole.user_id == user_id, Role.is_active.is_(True))
            .order_by(Role.name)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create_with_role(self, user: User, role_name: str) -> User:
        """
        Stage a new User together with its role assignment

        Args:
            user: New (transient) User
            role_name: Name of an active Role, e.g. "CLIENT"

        Returns:
            User: The staged user

        Raises:
            ValidationError: The role does not exist
            ConflictError: The e-mail or CPF is already registered
        """
        if user is None:
            raise ValueError("user must not be None")

        result = await self.session.execute(
            select(Role).where(Role.name == role_name, Role.is_active.is_(True))
        )
        role = result.scalar_one_or_none()
        if role is None:
            logger.warning("Role %s not found, user %s not created", role_name, user.email)
            raise ValidationError(
                message=f"Role '{role_name}' does not exist",
                code="invalid_role",
                details={"role": role_name},
            )

        if await self.email_exists(user.email):
            logger.warning("E-mail %s already registered", user.email)
            raise ConflictError(
                message="E-mail already registered",
                code="email_taken",
                details={"email": user.email},
            )
        if await self.cpf_exists(user.cpf):
            logger.warning("CPF already registered for new user %s", user.email)
            raise ConflictError(message="CPF already registered", code="cpf_taken")

        self.session.add(user)
        user.user_roles.append(UserRole(role=role))
        return user
