# src/currconv/domain/models.py
"""
Domain Models - Pure Business Objects

This module contains domain models representing core business concepts:
- The exchange rate snapshot (RateTable)
- The outcome of a conversion request (Converted / Rejected)

Files that USE this module:
- currconv.application.converter (reads RateTable, returns conversion results)
- currconv.adapters.persistence.rates_file (builds RateTable from JSON)
- currconv.app (prints or reports conversion results)
- tests.* (tests use domain models for test data)

Files that this module USES:
- currconv.domain.errors (RateTableError, InvalidConversionError)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from dataclasses import dataclass, field  # Decorator for creating data classes
from numbers import Real  # Abstract numeric type for rate values
from types import MappingProxyType  # Read-only view over the rates dict
from typing import ClassVar, Mapping, Optional, Union  # Type hints

from currconv.domain.errors import InvalidConversionError, RateTableError


BASE_RATE = 1.0


@dataclass(frozen=True)
class RateTable:
    """
    Immutable snapshot of exchange rates relative to a base currency.

    Attributes:
        base: Base currency code (implicit rate 1.0)
        rates: Currency code -> units of that currency per 1 unit of base
        date: Snapshot date as given by the data source, if any
    """
    base: str
    rates: Mapping[str, float] = field(default_factory=dict)
    date: Optional[str] = None

    def __post_init__(self) -> None:
        if not isinstance(self.base, str) or not self.base:
            raise RateTableError(f"Base currency must be a non-empty string, got {self.base!r}")

        frozen = {}
        for code, rate in dict(self.rates).items():
            if not isinstance(code, str):
                raise RateTableError(f"Currency code must be a string, got {code!r}")
            # bool is a Real subclass; a True/False rate is always a data error
            if isinstance(rate, bool) or not isinstance(rate, Real):
                raise RateTableError(f"Rate for {code} must be numeric, got {rate!r}")
            if rate < 0:
                raise RateTableError(f"Rate for {code} must not be negative, got {rate!r}")
            frozen[code] = float(rate)

        object.__setattr__(self, "rates", MappingProxyType(frozen))

    def __hash__(self) -> int:
        return hash((self.base, frozenset(self.rates.items()), self.date))

    def get_rate(self, code: str) -> Optional[float]:
        """
        Look up the rate for a currency code.

        The base currency always resolves to 1.0, whether or not the
        source data lists it.

        Returns:
            Rate as float, or None if the code is unknown
        """
        if code == self.base:
            return BASE_RATE
        return self.rates.get(code)

    def get_base_code(self) -> str:
        return self.base

    def has_code(self, code: str) -> bool:
        return code == self.base or code in self.rates

    def codes(self) -> frozenset:
        """All currency codes this table can resolve, base included."""
        return frozenset(self.rates) | {self.base}


@dataclass(frozen=True)
class Converted:
    """
    Successful conversion.

    Attributes:
        amount: Amount requested, in source currency
        source: Source currency code
        target: Target currency code
        value: Converted amount, in target currency
    """
    ok: ClassVar[bool] = True

    amount: float
    source: str
    target: str
    value: float

    def unwrap(self) -> float:
        return self.value


@dataclass(frozen=True)
class Rejected:
    """
    Rejected conversion request.

    All rejection causes share this one type. ``reason`` is a human
    readable diagnostic and is not meant to be branched on.
    """
    ok: ClassVar[bool] = False

    amount: float
    source: str
    target: str
    reason: str

    def unwrap(self) -> float:
        raise InvalidConversionError(
            f"Invalid conversion request {self.amount!r} {self.source!r} -> {self.target!r}: {self.reason}"
        )


ConversionResult = Union[Converted, Rejected]
