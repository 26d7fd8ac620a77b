"""
User Repository Interface

Defines the data access interface for Users.
"""

from abc import abstractmethod
from typing import Optional

from viaggia.db.models import User
from viaggia.repositories.base import Repository


class UserRepository(Repository[User]):
    """User Repository Interface"""

    @abstractmethod
    async def email_exists(self, email: str, include_inactive: bool = True) -> bool:
        """Check if an e-mail is already registered"""
        pass

    @abstractmethod
    async def cpf_exists(self, cpf: Optional[str], include_inactive: bool = True) -> bool:
        """Check if a CPF is already registered (False for None)"""
        pass

    @abstractmethod
    async def get_by_email(
        self, email: str, include_inactive: bool = False
    ) -> Optional[User]:
        """Get User by e-mail"""
        pass

    @abstractmethod
    async def get_with_roles(
        self, id: int, include_inactive: bool = False
    ) -> Optional[User]:
        """Get User with roles eagerly loaded"""
        pass

    @abstractmethod
    async def get_role_names(self, user_id: int) -> list[str]:
        """Get names of the roles assigned to a User"""
        pass

    @abstractmethod
    async def create_with_role(self, user: User, role_name: str) -> User:
        """Stage a new User together with its role assignment"""
        pass
