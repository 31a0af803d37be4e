# src/currconv/adapters/persistence/rates_file.py
"""
Rates File - Offline Exchange Rate Snapshot Loading

This module reads a JSON snapshot of exchange rates and turns it into an
immutable RateTable. The file is read once at startup; the converter never
touches the filesystem.

Expected layout:

    {"base": "USD", "date": "2021-11-07", "rates": {"CAD": 1.246, "EUR": 0.862}}

A snapshot is bundled with the package and used when no path is given.

Files that USE this module:
- currconv.app (loads the table before converting)
- tests.test_rates_file (unit tests)

Files that this module USES:
- currconv.domain.models (RateTable built from the file)
- currconv.domain.errors (RateTableError for malformed data)
- currconv.shared.validators (validate_currency_code for file keys)
"""
from __future__ import annotations

import json
import logging
import math
from pathlib import Path
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from currconv.domain.errors import RateTableError
from currconv.domain.models import RateTable
from currconv.shared.validators import validate_currency_code

log = logging.getLogger(__name__)


DEFAULT_RATES_FILE = Path(__file__).resolve().parent.parent.parent / "data" / "rates.json"


class RatesFileSchema(BaseModel):
    """Schema of the on-disk rate snapshot."""
    model_config = ConfigDict(extra="ignore")

    base: str
    date: Optional[str] = None
    rates: Dict[str, float] = Field(..., min_length=1)

    @field_validator("base")
    @classmethod
    def validate_base(cls, v: str) -> str:
        if not validate_currency_code(v):
            raise ValueError(f"invalid base currency code {v!r}")
        return v

    @field_validator("rates")
    @classmethod
    def validate_rates(cls, v: Dict[str, float]) -> Dict[str, float]:
        for code, rate in v.items():
            if not validate_currency_code(code):
                raise ValueError(f"invalid currency code {code!r}")
            # Zero is kept; the converter refuses to divide by it
            if not math.isfinite(rate) or rate < 0:
                raise ValueError(f"invalid rate for {code}: {rate!r}")
        return v


def parse_rate_table(data: Any) -> RateTable:
    """
    Build a RateTable from already-decoded JSON data.

    Args:
        data: Decoded JSON document (normally a dict)

    Returns:
        RateTable for the snapshot

    Raises:
        RateTableError: If the document does not match the expected layout
    """
    try:
        parsed = RatesFileSchema.model_validate(data)
    except ValidationError as e:
        raise RateTableError(f"Malformed rate data: {e}") from e

    table = RateTable(base=parsed.base, rates=parsed.rates, date=parsed.date)

    if parsed.rates.get(parsed.base, 1.0) != 1.0:
        log.warning(
            "Base currency %s listed with rate %s, ignoring (base is always 1.0)",
            parsed.base, parsed.rates[parsed.base],
        )

    return table


def load_rate_table(path: Optional[Union[str, Path]] = None) -> RateTable:
    """
    Load a rate snapshot from a JSON file.

    Args:
        path: Path to the JSON file (defaults to the bundled snapshot)

    Returns:
        RateTable built from the file

    Raises:
        RateTableError: If the file cannot be read, is not UTF-8 JSON,
            or does not match the expected layout
    """
    p = Path(path) if path is not None else DEFAULT_RATES_FILE

    try:
        with p.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        log.error("Cannot read rates file %s: %s", p, e)
        raise RateTableError(f"Cannot read rates file {p}: {e}") from e
    except json.JSONDecodeError as e:
        log.error("Rates file %s is not valid JSON: %s", p, e)
        raise RateTableError(f"Rates file {p} is not valid JSON: {e}") from e
    except UnicodeDecodeError as e:
        log.error("Rates file %s is not valid UTF-8: %s", p, e)
        raise RateTableError(f"Rates file {p} is not valid UTF-8: {e}") from e

    try:
        table = parse_rate_table(data)
    except RateTableError:
        log.error("Rates file %s has an unexpected layout", p)
        raise

    log.info(
        "Loaded rate table from %s: base=%s, date=%s, currencies=%d",
        p, table.base, table.date, len(table.codes()),
    )
    return table
