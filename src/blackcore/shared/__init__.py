# src/blackcore/shared/__init__.py
"""
Shared Utilities - Cross-cutting Concerns

This package contains shared utilities used across all layers:
- Argument preconditions
- Configuration validation
- Logging configuration
"""

from blackcore.shared.preconditions import (
    check_argument,
    check_finite_number,
    is_number,
    to_decimal,
)
from blackcore.shared.validators import validate_log_level, validate_positive_int
from blackcore.shared.logging_conf import setup_logging

__all__ = [
    "check_argument",
    "check_finite_number",
    "is_number",
    "to_decimal",
    "validate_log_level",
    "validate_positive_int",
    "setup_logging",
]
