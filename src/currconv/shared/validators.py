# src/currconv/shared/validators.py
"""
Input Validation Utilities - Data Validation

This module provides input validation functions for the converter's
outer layers. It validates currency codes found in rate files, amounts
typed on the command line and logging configuration values.

Files that USE this module:
- currconv.config.settings (uses validate_log_level in Settings field validators)
- currconv.adapters.persistence.rates_file (uses validate_currency_code for file keys)
- currconv.app (uses parse_amount for the AMOUNT argument)

Files that this module USES:
- None (pure utility functions)
"""
import logging
import math
import re
from typing import Optional


_CURRENCY_CODE_RE = re.compile(r"[A-Z]{3}")


def validate_currency_code(code: str) -> bool:
    """
    Validate ISO-style currency code format.

    Args:
        code: Currency code to validate

    Returns:
        True if code is exactly three uppercase ASCII letters, False otherwise
    """
    if not isinstance(code, str):
        return False

    return bool(_CURRENCY_CODE_RE.fullmatch(code))


def parse_amount(value: str) -> Optional[float]:
    """
    Parse a numeric amount string.

    Range checks are left to the converter; this only rejects text
    that is not a finite number.

    Args:
        value: String value to parse

    Returns:
        Parsed float, or None if the text is not a finite number
    """
    if not value:
        return None

    try:
        num_val = float(value.strip())
    except ValueError:
        return None

    if not math.isfinite(num_val):
        return None
    return num_val


def validate_log_level(name: str) -> bool:
    """
    Validate a logging level name (e.g. "INFO", "debug").

    Args:
        name: Level name to validate

    Returns:
        True if logging knows the level, False otherwise
    """
    if not name:
        return False

    return isinstance(logging.getLevelName(name.upper()), int)
