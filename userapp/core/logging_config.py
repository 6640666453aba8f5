"""Logging setup shared by the CLI entry point and the server."""
import logging
import sys
from typing import Optional, Union

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: Union[int, str] = "INFO", format_string: Optional[str] = None) -> None:
    """
    Configure the root logger with a single stream handler.

    Safe to call more than once; later calls only adjust the level.

    Args:
        level: Log level name or number
        format_string: Custom format string (optional)
    """
    if isinstance(level, str):
        level = level.upper()
        # uvicorn's TRACE has no stdlib counterpart
        if level == "TRACE":
            level = "DEBUG"
        level = logging.getLevelName(level)
        if not isinstance(level, int):
            level = logging.INFO

    root = logging.getLogger()
    root.setLevel(level)

    # Don't add handlers if they already exist
    if root.handlers:
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    root.addHandler(handler)
