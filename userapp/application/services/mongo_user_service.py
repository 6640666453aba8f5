"""
Mongo User Service
==================

UserService implementation on top of a UserRepository. This is the concrete
class registered in the container under the UserService capability.
"""
import logging
import uuid
from typing import List, Optional

from userapp.core.exceptions import DuplicateUserError, UserNotFoundError
from userapp.domain.models.user import User, normalize_email, normalize_name, validate_age
from userapp.domain.repositories.user_repository import UserRepository
from userapp.domain.services.user_service import UserService

logger = logging.getLogger(__name__)


class MongoUserService(UserService):
    """
    Application service for user operations.

    Validates input and delegates persistence to the repository.
    """

    def __init__(self, user_repository: UserRepository):
        """
        Initialize service with repository.

        Args:
            user_repository: Repository for user persistence
        """
        self._repository = user_repository

    def create_user(
        self,
        name: str,
        email: str,
        age: Optional[int] = None,
        id: Optional[str] = None,
    ) -> User:
        name = normalize_name(name)
        email = normalize_email(email)
        age = validate_age(age)

        if id is not None:
            id = id.strip()
            if not id:
                raise ValueError("User ID cannot be blank")
        user_id = id or uuid.uuid4().hex

        if self._repository.find_by_email(email):
            raise DuplicateUserError(email)

        user = self._repository.create(User(id=user_id, name=name, email=email, age=age))
        logger.info("User %s created", user.id)
        return user

    def get_user(self, user_id: str) -> Optional[User]:
        return self._repository.find_by_id(user_id)

    def get_user_by_email(self, email: str) -> Optional[User]:
        return self._repository.find_by_email(normalize_email(email))

    def list_users(self, limit: Optional[int] = None) -> List[User]:
        if limit is not None and limit < 1:
            raise ValueError("limit must be a positive integer")
        return self._repository.find_all(limit=limit)

    def update_user(
        self,
        user_id: str,
        name: Optional[str] = None,
        email: Optional[str] = None,
        age: Optional[int] = None,
    ) -> User:
        user = self._repository.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)

        if name is not None:
            user.update_name(name)
        if email is not None:
            new_email = normalize_email(email)
            if new_email != user.email:
                owner = self._repository.find_by_email(new_email)
                if owner and owner.id != user.id:
                    raise DuplicateUserError(new_email)
            user.update_email(new_email)
        if age is not None:
            user.update_age(age)

        updated = self._repository.update(user)
        logger.info("User %s updated", user_id)
        return updated

    def delete_user(self, user_id: str) -> bool:
        deleted = self._repository.delete(user_id)
        if deleted:
            logger.info("User %s deleted", user_id)
        return deleted

    def count_users(self) -> int:
        return self._repository.count()
