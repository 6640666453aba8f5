"""
User Model
==========

Domain model representing a user in the system.
This is a pure domain object with no infrastructure dependencies.
"""
from datetime import datetime
from typing import Optional
from dataclasses import dataclass, field

from userapp.utils.datetime_utils import now

MIN_AGE = 0
MAX_AGE = 150


def normalize_name(name: Optional[str]) -> str:
    if not name or not name.strip():
        raise ValueError("User name cannot be empty")
    return name.strip()


def normalize_email(email: Optional[str]) -> str:
    if not email or not email.strip():
        raise ValueError("User email cannot be empty")
    email = email.strip().lower()
    if "@" not in email:
        raise ValueError(f"Invalid email address '{email}'")
    return email


def validate_age(age: Optional[int]) -> Optional[int]:
    if age is None:
        return None
    if isinstance(age, bool) or not isinstance(age, int):
        raise ValueError("User age must be an integer")
    if not MIN_AGE <= age <= MAX_AGE:
        raise ValueError(f"User age must be between {MIN_AGE} and {MAX_AGE}")
    return age


@dataclass
class User:
    """
    User domain model.

    Represents a user with its profile attributes.
    This model is independent of any persistence mechanism.
    """
    id: str
    name: str
    email: str
    age: Optional[int] = None
    created_at: datetime = field(default_factory=lambda: now())
    updated_at: datetime = field(default_factory=lambda: now())

    def update_name(self, new_name: str) -> None:
        """Update user name."""
        self.name = normalize_name(new_name)
        self.updated_at = now()

    def update_email(self, new_email: str) -> None:
        """Update user email."""
        self.email = normalize_email(new_email)
        self.updated_at = now()

    def update_age(self, new_age: Optional[int]) -> None:
        """Update user age."""
        self.age = validate_age(new_age)
        self.updated_at = now()
