"""
User Service Interface
======================

Capability interface for user management. Consumers resolve it from the
container by this class and never depend on a concrete implementation.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from userapp.domain.models.user import User


class UserService(ABC):
    """Abstract user management capability."""

    @abstractmethod
    def create_user(
        self,
        name: str,
        email: str,
        age: Optional[int] = None,
        id: Optional[str] = None,
    ) -> User:
        """
        Create a user.

        Args:
            name: Display name
            email: Email address, unique across users
            age: Optional age
            id: Optional identifier, generated when omitted

        Returns:
            Created user entity

        Raises:
            ValueError: If input validation fails
            DuplicateUserError: If the email is already in use
        """
        pass

    @abstractmethod
    def get_user(self, user_id: str) -> Optional[User]:
        """Get a user by ID, None if unknown."""
        pass

    @abstractmethod
    def get_user_by_email(self, email: str) -> Optional[User]:
        """Get a user by email address, None if unknown."""
        pass

    @abstractmethod
    def list_users(self, limit: Optional[int] = None) -> List[User]:
        """List users, newest first."""
        pass

    @abstractmethod
    def update_user(
        self,
        user_id: str,
        name: Optional[str] = None,
        email: Optional[str] = None,
        age: Optional[int] = None,
    ) -> User:
        """
        Update the given fields of a user. Fields left as None are unchanged.

        Raises:
            ValueError: If input validation fails
            UserNotFoundError: If no user with that ID exists
            DuplicateUserError: If the new email belongs to another user
        """
        pass

    @abstractmethod
    def delete_user(self, user_id: str) -> bool:
        """Delete a user. Returns False if the user did not exist."""
        pass

    @abstractmethod
    def count_users(self) -> int:
        """Count stored users."""
        pass
