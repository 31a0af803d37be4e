# src/currconv/adapters/persistence/__init__.py
"""
Persistence Adapters - Data Storage

This package contains adapters for reading rate data:
- File-based rate snapshots (JSON)
"""

from currconv.adapters.persistence.rates_file import (
    DEFAULT_RATES_FILE,
    load_rate_table,
    parse_rate_table,
)

__all__ = [
    "DEFAULT_RATES_FILE",
    "load_rate_table",
    "parse_rate_table",
]
