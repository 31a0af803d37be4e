# src/currconv/adapters/__init__.py
"""
Adapters Layer - External Interfaces

This package contains all adapters for external systems:
- Persistence (rate snapshot files)
"""

__all__ = []
