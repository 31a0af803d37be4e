# src/currconv/domain/__init__.py
"""
Domain Layer - Pure Business Objects

This package contains domain models and business rules.
No dependencies on infrastructure or external systems.
"""

from currconv.domain.models import (
    ConversionResult,
    Converted,
    RateTable,
    Rejected,
)
from currconv.domain.errors import (
    DomainError,
    InvalidConversionError,
    RateTableError,
)

__all__ = [
    "RateTable",
    "ConversionResult",
    "Converted",
    "Rejected",
    "DomainError",
    "InvalidConversionError",
    "RateTableError",
]
