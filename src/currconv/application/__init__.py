# src/currconv/application/__init__.py
"""
Application Layer - Use Cases and Services

This package contains application services that orchestrate domain logic.
No direct I/O dependencies - the rate table is passed in by the caller.
"""

from currconv.application.converter import (
    ALLOWED_CURRENCIES,
    AMOUNT_MAX,
    AMOUNT_MIN,
    convert,
    convert_or_raise,
)

__all__ = [
    "ALLOWED_CURRENCIES",
    "AMOUNT_MIN",
    "AMOUNT_MAX",
    "convert",
    "convert_or_raise",
]
