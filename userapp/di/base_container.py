# Standard library imports
import logging
import threading
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Type, TypeVar, Union

from userapp.core.exceptions import DuplicateRegistrationError, ServiceNotRegisteredError

logger = logging.getLogger(__name__)

TypeVarType = TypeVar('TypeVarType')

Interface = Union[Type, str]


def interface_name(interface: Interface) -> str:
    """Readable name for a capability identity (class name or string key)."""
    if isinstance(interface, type):
        return interface.__name__
    return str(interface)


@dataclass(frozen=True)
class ServiceRegistration:
    """Immutable binding of a capability identity to its singleton instance."""
    interface: Interface
    instance: Any
    registered_at: float = field(default_factory=time.time)

    @property
    def name(self) -> str:
        return interface_name(self.interface)


class BaseContainer:
    """Base dependency injection container with core functionality"""

    def __init__(self) -> None:
        self._registrations: Dict[Interface, ServiceRegistration] = {}
        self._factories: Dict[Interface, Callable[[], Any]] = {}
        self._cleanups: List[Callable[[], None]] = []
        # Re-entrant: a factory may resolve its own dependencies from the container
        self._lock = threading.RLock()
        self._closed = False

    def register_singleton(self, interface: Union[Type[TypeVarType], str], instance: TypeVarType) -> None:
        """Register a singleton instance (supports both types and string keys)"""
        with self._lock:
            if interface in self._registrations or interface in self._factories:
                raise DuplicateRegistrationError(interface)
            self._registrations[interface] = ServiceRegistration(interface, instance)
        logger.debug("Registered %s -> %s", interface_name(interface), type(instance).__name__)

    def register_factory(self, interface: Union[Type[TypeVarType], str], factory: Callable[[], TypeVarType]) -> None:
        """Register a factory function; its result becomes the singleton on first lookup"""
        with self._lock:
            if interface in self._registrations or interface in self._factories:
                raise DuplicateRegistrationError(interface)
            self._factories[interface] = factory

    def get(self, interface: Union[Type[TypeVarType], str]) -> TypeVarType:
        """Get the instance registered for the requested type or string key"""
        registration = self._registrations.get(interface)
        if registration is not None:
            return registration.instance

        with self._lock:
            # Another thread may have built it while we waited for the lock
            registration = self._registrations.get(interface)
            if registration is not None:
                return registration.instance

            factory = self._factories.get(interface)
            if factory is None:
                raise ServiceNotRegisteredError(interface)

            instance = factory()
            del self._factories[interface]
            self._registrations[interface] = ServiceRegistration(interface, instance)
            logger.debug("Constructed %s -> %s", interface_name(interface), type(instance).__name__)
            return instance

    def is_registered(self, interface: Interface) -> bool:
        return interface in self._registrations or interface in self._factories

    def registrations(self) -> List[ServiceRegistration]:
        """Snapshot of the registrations built so far, in registration order"""
        with self._lock:
            return list(self._registrations.values())

    def register_cleanup(self, callback: Callable[[], None]) -> None:
        """Register a callback run on close(), in reverse registration order"""
        with self._lock:
            self._cleanups.append(callback)

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Run cleanup callbacks and drop all registrations. Idempotent."""
        with self._lock:
            if self._closed:
                return
            self._closed = True
            cleanups = list(reversed(self._cleanups))
            self._cleanups.clear()

            for callback in cleanups:
                try:
                    callback()
                except Exception:
                    # Keep releasing the remaining resources
                    logger.exception("Cleanup callback %r failed", callback)

            self._registrations.clear()
            self._factories.clear()
