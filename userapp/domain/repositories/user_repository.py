"""
User Repository Interface
=========================

Abstract interface for user data access.
Implementations should be in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from userapp.domain.models.user import User


class UserRepository(ABC):
    """
    Abstract repository for user persistence operations.

    This interface defines the contract for user data access.
    Concrete implementations should be in the infrastructure layer.
    """

    @abstractmethod
    def create(self, user: User) -> User:
        """
        Create a new user.

        Args:
            user: User entity to create

        Returns:
            Created user entity
        """
        pass

    @abstractmethod
    def update(self, user: User) -> User:
        """
        Update an existing user.

        Args:
            user: User entity with updated data

        Returns:
            Updated user entity

        Raises:
            UserNotFoundError: If no user with that ID exists
        """
        pass

    @abstractmethod
    def find_by_id(self, user_id: str) -> Optional[User]:
        """
        Find a user by its ID.

        Args:
            user_id: Unique user identifier

        Returns:
            User entity if found, None otherwise
        """
        pass

    @abstractmethod
    def find_by_email(self, email: str) -> Optional[User]:
        """
        Find a user by email address.

        Args:
            email: Normalized (lower-case) email address

        Returns:
            User entity if found, None otherwise
        """
        pass

    @abstractmethod
    def find_all(self, limit: Optional[int] = None) -> List[User]:
        """
        Find all users, newest first.

        Args:
            limit: Maximum number of users to return (None for all)

        Returns:
            List of user entities
        """
        pass

    @abstractmethod
    def delete(self, user_id: str) -> bool:
        """
        Delete a user.

        Args:
            user_id: Unique user identifier

        Returns:
            True if user was found and deleted, False otherwise
        """
        pass

    @abstractmethod
    def exists(self, user_id: str) -> bool:
        """Check if a user exists."""
        pass

    @abstractmethod
    def count(self) -> int:
        """Count stored users."""
        pass
