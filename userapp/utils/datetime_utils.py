"""
Centralized DateTime Utilities
==============================

Provides consistent datetime handling across the entire application.
The application timezone is set once at startup with set_timezone().

Functions:
- set_timezone(): Select the application timezone (defaults to UTC)
- now(): Returns timezone-aware datetime object
"""
import logging
from datetime import datetime, timezone as dt_timezone, tzinfo
from typing import Optional
import zoneinfo

logger = logging.getLogger(__name__)

_app_timezone: tzinfo = dt_timezone.utc


def set_timezone(tz_str: Optional[str]) -> tzinfo:
    """
    Set the application timezone.
    Falls back to UTC if the name is empty or unknown.

    Args:
        tz_str: IANA timezone name (e.g. "UTC", "Europe/Berlin")

    Returns:
        The timezone now in effect
    """
    global _app_timezone

    if not tz_str or tz_str.upper() == "UTC":
        _app_timezone = dt_timezone.utc
        return _app_timezone

    try:
        _app_timezone = zoneinfo.ZoneInfo(tz_str)
    except (zoneinfo.ZoneInfoNotFoundError, ValueError):
        logger.warning("Invalid timezone '%s', falling back to UTC", tz_str)
        _app_timezone = dt_timezone.utc
    return _app_timezone


def now() -> datetime:
    """
    Get current datetime with application-configured timezone.

    Returns:
        timezone-aware datetime object
    """
    return datetime.now(_app_timezone)

