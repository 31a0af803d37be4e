# tests/test_settings.py
"""
Settings Tests - Unit Tests for Environment-driven Configuration

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- currconv.config.settings (Settings under test)
- pydantic (ValidationError)
- pytest (testing framework)
"""
from pathlib import Path  # Path comparisons

import pytest  # Testing framework for writing and running tests
from pydantic import ValidationError  # Raised on invalid settings

from currconv.config.settings import Settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for name in ("RATES_FILE", "LOG_LEVEL", "LOG_FILE", "LOG_DIR", "CURRCONV_LOG_CONSOLE",
                 "LOG_MAX_BYTES", "LOG_BACKUP_COUNT"):
        monkeypatch.delenv(name, raising=False)
    # keep a developer's .env out of the picture
    monkeypatch.chdir(tmp_path)


class TestSettings:
    def test_defaults(self):
        s = Settings()

        assert s.rates_file is None
        assert s.log_level == "WARNING"
        assert s.log_file is None
        assert s.log_dir is None
        assert s.log_console is True
        assert s.log_max_bytes == 10 * 1024 * 1024
        assert s.log_backup_count == 5

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("RATES_FILE", "/tmp/rates.json")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("CURRCONV_LOG_CONSOLE", "false")

        s = Settings()

        assert s.rates_file == Path("/tmp/rates.json")
        assert s.log_level == "DEBUG"
        assert s.log_console is False

    def test_from_dotenv(self, tmp_path):
        (tmp_path / ".env").write_text("LOG_LEVEL=error\nLOG_BACKUP_COUNT=2\n", encoding="utf-8")

        s = Settings()

        assert s.log_level == "ERROR"
        assert s.log_backup_count == 2

    def test_invalid_log_level(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "LOUD")
        with pytest.raises(ValidationError, match="Invalid LOG_LEVEL"):
            Settings()

    def test_negative_backup_count(self, monkeypatch):
        monkeypatch.setenv("LOG_BACKUP_COUNT", "-1")
        with pytest.raises(ValidationError):
            Settings()
