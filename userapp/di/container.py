# Standard library imports
import logging
import threading
from enum import Enum
from typing import Optional

# Local application imports
from userapp.core.config import Settings, get_settings
from userapp.core.exceptions import StartupFailure
from userapp.utils.datetime_utils import set_timezone
from .base_container import BaseContainer
from .providers import (
    DatabaseProvider,
    RepositoryProvider,
    UserProvider,
)

logger = logging.getLogger(__name__)


class ContainerState(str, Enum):
    UNINITIALIZED = "uninitialized"
    RUNNING = "running"
    CLOSED = "closed"


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.

    Registration order is important:
    1. Database connections (DatabaseProvider)
    2. Repositories (RepositoryProvider) - depends on database
    3. Services (UserProvider) - depend on repositories
    """

    def __init__(self, settings: Settings) -> None:
        super().__init__()
        self.settings = settings
        self._state = ContainerState.UNINITIALIZED

    @property
    def state(self) -> ContainerState:
        return self._state

    @property
    def is_running(self) -> bool:
        return self._state is ContainerState.RUNNING

    def setup(self) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: database → repositories → services

        On any failure the partially built container is closed, releasing
        whatever was acquired, and StartupFailure is raised.
        """
        if self._state is not ContainerState.UNINITIALIZED:
            raise StartupFailure(f"Container cannot be set up from state '{self._state.value}'")

        try:
            set_timezone(self.settings.timezone)

            # Step 1: Register database connections (foundation)
            DatabaseProvider.register(self)

            # Step 2: Register repositories (depends on database)
            RepositoryProvider.register(self)

            # Step 3: Register services (depends on repositories)
            UserProvider.register(self)
        except Exception as e:
            self.close()
            if isinstance(e, StartupFailure):
                raise
            raise StartupFailure(f"Failed to initialize services: {e}") from e

        self._state = ContainerState.RUNNING

    def close(self) -> None:
        super().close()
        self._state = ContainerState.CLOSED


# Global container instance (singleton pattern)
_container: Optional[DIContainer] = None
_container_lock = threading.Lock()


def build_container(settings: Optional[Settings] = None) -> DIContainer:
    """
    Build the global DI container once and return it.

    The container is published only after setup succeeded, so a failed
    startup leaves no partial registrations behind.

    Args:
        settings: Settings to build from (defaults to get_settings())

    Returns:
        DIContainer instance with all dependencies registered

    Raises:
        StartupFailure: If configuration or any service construction fails
    """
    global _container
    if _container is not None:
        return _container

    with _container_lock:
        # Double-check after acquiring the lock (another thread might have built it)
        if _container is not None:
            return _container

        if settings is None:
            settings = get_settings()

        logger.info("Building DI container for %s", settings.app_name)
        container = DIContainer(settings)
        container.setup()
        _container = container
        logger.info(
            "DI container running with %d registrations",
            len(container.registrations()),
        )
        return _container


def get_container() -> DIContainer:
    """
    Get the global DI container instance (singleton pattern)

    Returns:
        DIContainer instance with all dependencies registered
    """
    if _container is not None:
        return _container
    return build_container()


def peek_container() -> Optional[DIContainer]:
    """Return the global container if one is published, without building it."""
    return _container


def shutdown_container() -> None:
    """Close and forget the global container. Safe to call repeatedly."""
    global _container
    with _container_lock:
        container, _container = _container, None
    if container is not None:
        logger.info("Shutting down DI container")
        container.close()
