# src/currconv/domain/errors.py
"""
Domain Errors - Business Logic Exceptions

This module defines domain-specific exceptions that represent
business rule violations and malformed rate data.
"""


class DomainError(Exception):
    """Base exception for domain errors."""
    pass


class InvalidConversionError(DomainError):
    """Raised when a conversion request is rejected (amount, currency or rate)."""
    pass


class RateTableError(DomainError):
    """Raised when rate data is malformed or cannot be read."""
    pass
