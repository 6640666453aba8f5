"""
Providers Package
=================

Dependency injection providers for registering dependencies.
"""
from .database_provider import DatabaseProvider
from .repository_provider import RepositoryProvider
from .user_provider import UserProvider, provide_user_service

__all__ = [
    "DatabaseProvider",
    "RepositoryProvider",
    "UserProvider",
    "provide_user_service",
]
