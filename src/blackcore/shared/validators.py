# src/blackcore/shared/validators.py
"""
Input Validation Utilities - Configuration Value Checks

Pure predicates used by the Settings field validators.

Files that USE this module:
- blackcore.config.settings (uses validation functions in Settings field validators)

Files that this module USES:
- None (pure utility functions)
"""
import logging
from typing import Union

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


def validate_log_level(level: Union[str, int]) -> bool:
    """
    Validate a logging level name or number.

    Args:
        level: Level name such as "info" (case-insensitive) or a numeric level

    Returns:
        True if valid, False otherwise
    """
    if isinstance(level, bool):
        return False
    if isinstance(level, int):
        return level >= logging.NOTSET
    if not level:
        return False
    return level.strip().upper() in LOG_LEVELS


def validate_positive_int(value: int) -> bool:
    """Return True if value is an int greater than zero."""
    return isinstance(value, int) and not isinstance(value, bool) and value > 0
