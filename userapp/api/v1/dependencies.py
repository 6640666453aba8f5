"""
Dependency Container
====================

FastAPI dependencies backed by the DI container.
Routers obtain singleton services through these functions.
"""
from userapp.domain.services.user_service import UserService
from userapp.di.container import get_container


def get_user_service() -> UserService:
    """
    Get user service instance (singleton).

    Returns:
        UserService instance
    """
    container = get_container()
    return container.get(UserService)
