# tests/test_validators.py
"""
Validator Tests - Unit Tests for Input Validation Utilities

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- currconv.shared.validators (validation functions for testing)
- pytest (testing framework)
"""
import pytest  # Testing framework for writing and running tests

from currconv.shared.validators import (
    parse_amount,  # Parse CLI amount text
    validate_currency_code,  # Check 3-letter uppercase codes
    validate_log_level,  # Check logging level names
)


class TestValidateCurrencyCode:
    @pytest.mark.parametrize("code", ["USD", "JPY", "XAU"])
    def test_valid(self, code):
        assert validate_currency_code(code)

    @pytest.mark.parametrize("code", ["", "usd", "US", "USDT", "U1D", " USD", "USD\n", None, 840])
    def test_invalid(self, code):
        assert not validate_currency_code(code)


class TestParseAmount:
    def test_plain_numbers(self):
        assert parse_amount("100") == 100.0
        assert parse_amount("0") == 0.0
        assert parse_amount("10000.5") == 10000.5
        assert parse_amount(" 42.25 ") == 42.25

    def test_negative_is_parsed(self):
        # range checks belong to the converter
        assert parse_amount("-5") == -5.0

    @pytest.mark.parametrize("text", ["", "abc", "1,000", "nan", "inf", "-inf"])
    def test_rejected(self, text):
        assert parse_amount(text) is None


class TestValidateLogLevel:
    @pytest.mark.parametrize("name", ["DEBUG", "info", "Warning", "ERROR", "CRITICAL"])
    def test_valid(self, name):
        assert validate_log_level(name)

    @pytest.mark.parametrize("name", ["", "VERBOSE", "loud"])
    def test_invalid(self, name):
        assert not validate_log_level(name)
