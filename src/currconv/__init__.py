# src/currconv/__init__.py
"""
currconv - Offline Currency Converter

Converts an amount between two whitelisted currencies using a static
snapshot of exchange rates loaded once from a JSON data file.
"""

__version__ = "1.0.0"
