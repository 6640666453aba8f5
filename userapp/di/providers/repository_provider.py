from typing import TYPE_CHECKING
from userapp.domain.repositories.user_repository import UserRepository
from userapp.infrastructure.db.mongo_user_repository import MongoUserRepository
from .database_provider import MONGO_CLIENT

if TYPE_CHECKING:
    from ..container import DIContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""

    @staticmethod
    def register(container: "DIContainer") -> None:
        """
        Register all repository implementations.
        Gets database client from database provider and creates repository instances.
        """
        mongo_client = container.get(MONGO_CLIENT)

        # Domain interfaces -> Infrastructure implementations
        container.register_singleton(
            UserRepository,
            MongoUserRepository(mongo_client.get_collection(container.settings.users_collection))
        )
