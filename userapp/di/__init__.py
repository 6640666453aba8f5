"""
Dependency Injection
====================

Explicit, hand-wired service container.
"""
from .base_container import BaseContainer, ServiceRegistration
from .container import (
    ContainerState,
    DIContainer,
    build_container,
    get_container,
    peek_container,
    shutdown_container,
)

__all__ = [
    "BaseContainer",
    "ServiceRegistration",
    "ContainerState",
    "DIContainer",
    "build_container",
    "get_container",
    "peek_container",
    "shutdown_container",
]
