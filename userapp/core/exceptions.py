"""
Exceptions
==========

Error taxonomy for the service.

- StartupFailure: anything that goes wrong while loading configuration or
  wiring the container. Aborts the process, never retried.
- ContainerError: misuse of the dependency container itself.
- RuntimeCapabilityError: raised by registered services while serving.
"""


class StartupFailure(Exception):
    """Container initialization or capability construction failed."""


class ConfigurationError(StartupFailure):
    """Required configuration is missing or malformed."""


class ContainerError(Exception):
    """Base class for dependency container errors."""


class DuplicateRegistrationError(ContainerError):
    """A capability identity was registered twice."""

    def __init__(self, interface) -> None:
        self.interface = interface
        super().__init__(f"Registration already exists for {interface!r}")


class ServiceNotRegisteredError(ContainerError, LookupError):
    """No registration exists for the requested capability."""

    def __init__(self, interface) -> None:
        self.interface = interface
        super().__init__(f"No registration found for {interface!r}")


class RuntimeCapabilityError(Exception):
    """Base class for errors raised by services during normal operation."""


class UserNotFoundError(RuntimeCapabilityError):
    """The requested user does not exist."""

    def __init__(self, user_id: str) -> None:
        self.user_id = user_id
        super().__init__(f"User '{user_id}' not found")


class DuplicateUserError(RuntimeCapabilityError):
    """Another user already uses the given email address."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(f"User with email '{email}' already exists")
