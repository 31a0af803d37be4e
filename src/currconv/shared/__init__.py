# src/currconv/shared/__init__.py
"""
Shared Utilities - Cross-cutting Concerns

This package contains shared utilities used across all layers:
- Validation
- Logging configuration
"""

from currconv.shared.validators import (
    parse_amount,
    validate_currency_code,
    validate_log_level,
)

__all__ = [
    "parse_amount",
    "validate_currency_code",
    "validate_log_level",
]
