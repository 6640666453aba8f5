from typing import TYPE_CHECKING
from userapp.domain.repositories.user_repository import UserRepository
from userapp.domain.services.user_service import UserService
from userapp.application.services.mongo_user_service import MongoUserService

if TYPE_CHECKING:
    from ..base_container import BaseContainer


def provide_user_service(container: "BaseContainer") -> UserService:
    """Factory for the UserService capability."""
    return MongoUserService(user_repository=container.get(UserRepository))


class UserProvider:
    """User service provider - registers user-related services"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register user service.
        Built eagerly so a construction error surfaces during startup.
        """
        container.register_factory(UserService, lambda: provide_user_service(container))
        container.get(UserService)
