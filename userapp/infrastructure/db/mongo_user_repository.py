"""
MongoDB User Repository
=======================

Concrete implementation of UserRepository using MongoDB.
"""
import logging
from typing import List, Optional
from pymongo import ASCENDING, DESCENDING, ReturnDocument
from pymongo.collection import Collection
from pymongo.errors import DuplicateKeyError

from userapp.core.exceptions import DuplicateUserError, UserNotFoundError
from userapp.domain.models.user import User
from userapp.domain.repositories.user_repository import UserRepository
from userapp.domain.constants.user_fields import UserFields
from userapp.utils.datetime_utils import now

logger = logging.getLogger(__name__)


class MongoUserRepository(UserRepository):
    """
    MongoDB implementation of UserRepository.

    Handles all user persistence operations using MongoDB.
    """

    def __init__(self, collection: Collection):
        """Initialize repository with a MongoDB collection."""
        self._collection = collection
        self._collection.create_index([(UserFields.ID, ASCENDING)], unique=True)
        self._collection.create_index([(UserFields.EMAIL, ASCENDING)], unique=True)

    def _to_entity(self, doc: dict) -> User:
        """Convert MongoDB document to User entity."""
        return User(
            id=doc[UserFields.ID],
            name=doc[UserFields.NAME],
            email=doc[UserFields.EMAIL],
            age=doc.get(UserFields.AGE),
            created_at=doc.get(UserFields.CREATED_AT, now()),
            updated_at=doc.get(UserFields.UPDATED_AT, now()),
        )

    def _to_document(self, user: User) -> dict:
        """Convert User entity to MongoDB document."""
        return {
            UserFields.ID: user.id,
            UserFields.NAME: user.name,
            UserFields.EMAIL: user.email,
            UserFields.AGE: user.age,
            UserFields.CREATED_AT: user.created_at,
            UserFields.UPDATED_AT: user.updated_at,
        }

    def create(self, user: User) -> User:
        """Create a new user."""
        user.created_at = now()
        user.updated_at = user.created_at

        try:
            self._collection.insert_one(self._to_document(user))
        except DuplicateKeyError:
            raise DuplicateUserError(user.email) from None
        logger.debug("Inserted user %s", user.id)
        return user

    def update(self, user: User) -> User:
        """Update an existing user."""
        user.updated_at = now()

        doc = self._to_document(user)
        try:
            result = self._collection.find_one_and_update(
                {UserFields.ID: user.id},
                {"$set": {k: v for k, v in doc.items() if k not in (UserFields.ID, UserFields.CREATED_AT)}},
                return_document=ReturnDocument.AFTER,
            )
        except DuplicateKeyError:
            raise DuplicateUserError(user.email) from None

        if not result:
            raise UserNotFoundError(user.id)

        return self._to_entity(result)

    def find_by_id(self, user_id: str) -> Optional[User]:
        """Find a user by its ID."""
        doc = self._collection.find_one({UserFields.ID: user_id})
        if not doc:
            return None
        return self._to_entity(doc)

    def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email address."""
        doc = self._collection.find_one({UserFields.EMAIL: email})
        if not doc:
            return None
        return self._to_entity(doc)

    def find_all(self, limit: Optional[int] = None) -> List[User]:
        """Find all users, newest first."""
        cursor = self._collection.find({}).sort(UserFields.CREATED_AT, DESCENDING)
        if limit:
            cursor = cursor.limit(limit)
        return [self._to_entity(doc) for doc in cursor]

    def delete(self, user_id: str) -> bool:
        """Delete a user."""
        result = self._collection.delete_one({UserFields.ID: user_id})
        return result.deleted_count > 0

    def exists(self, user_id: str) -> bool:
        """Check if a user exists."""
        count = self._collection.count_documents({UserFields.ID: user_id}, limit=1)
        return count > 0

    def count(self) -> int:
        return self._collection.count_documents({})
