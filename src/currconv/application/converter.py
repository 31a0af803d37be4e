# src/currconv/application/converter.py
"""
Converter - Validate-then-Convert Business Logic

This module contains the single conversion operation of the application.
A request is checked against the allowed amount range, the fixed currency
whitelist and the rate table, and only then converted:

    value = amount * (rate(target) / rate(source))

Every failure is reported as a Rejected result; nothing is raised for
invalid input unless the caller asks for it via convert_or_raise().

Files that USE this module:
- currconv.app (converts the amount given on the command line)
- tests.test_converter (unit tests)

Files that this module USES:
- currconv.domain.models (RateTable, Converted, Rejected)
"""
from __future__ import annotations  # Enable postponed evaluation of annotations

import logging  # Standard library logging
import math  # Finite checks for rates and results

from currconv.domain.models import ConversionResult, Converted, RateTable, Rejected

log = logging.getLogger(__name__)


AMOUNT_MIN = 0.0
AMOUNT_MAX = 10000.0

# Policy whitelist, independent of which currencies the rate table defines
ALLOWED_CURRENCIES = frozenset({"USD", "CAD", "GBP", "EUR", "CHF", "INR", "AUD"})


def _reject(amount: float, source: str, target: str, reason: str) -> Rejected:
    log.debug("Rejected conversion %r %r -> %r: %s", amount, source, target, reason)
    return Rejected(amount=amount, source=source, target=target, reason=reason)


def convert(amount: float, source: str, target: str, table: RateTable) -> ConversionResult:
    """
    Convert an amount from one currency to another.

    Checks, in order:
    1. AMOUNT_MIN <= amount <= AMOUNT_MAX (both bounds inclusive)
    2. source and target are in ALLOWED_CURRENCIES (exact match)
    3. both codes resolve to a rate in the table
    4. the source rate is non-zero and both rates are finite

    Args:
        amount: Amount in source currency
        source: Source currency code (e.g. "USD")
        target: Target currency code (e.g. "CAD")
        table: Rate snapshot to convert with

    Returns:
        Converted with the resulting value, or Rejected with a reason
    """
    # NaN fails both comparisons and lands here too
    if not (AMOUNT_MIN <= amount <= AMOUNT_MAX):
        return _reject(amount, source, target, f"amount outside [{AMOUNT_MIN:g}, {AMOUNT_MAX:g}]")

    for code in (source, target):
        if code not in ALLOWED_CURRENCIES:
            return _reject(amount, source, target, f"currency {code!r} is not allowed")

    source_rate = table.get_rate(source)
    target_rate = table.get_rate(target)
    for code, rate in ((source, source_rate), (target, target_rate)):
        if rate is None:
            return _reject(amount, source, target, f"no rate for {code!r} in table")

    if not (math.isfinite(source_rate) and math.isfinite(target_rate)):
        log.warning("Non-finite rate in table: %s=%r, %s=%r", source, source_rate, target, target_rate)
        return _reject(amount, source, target, "non-finite rate in table")

    if source_rate == 0:
        log.warning("Zero rate for %s in table (base=%s)", source, table.get_base_code())
        return _reject(amount, source, target, f"zero rate for {source!r} in table")

    value = amount * (target_rate / source_rate)
    if not math.isfinite(value):
        return _reject(amount, source, target, "result is not a finite number")

    return Converted(amount=amount, source=source, target=target, value=value)


def convert_or_raise(amount: float, source: str, target: str, table: RateTable) -> float:
    """
    Same as convert(), but returns the value directly.

    Raises:
        InvalidConversionError: If the request is rejected
    """
    return convert(amount, source, target, table).unwrap()
