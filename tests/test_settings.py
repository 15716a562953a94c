"""
Settings Tests - Unit Tests for Environment Configuration

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- blackcore.config.settings (Settings under test)
- blackcore.shared.validators (validation predicates)
- pydantic (ValidationError)
- pytest (testing framework)
"""
import logging  # Numeric log levels

import pytest  # Testing framework for writing and running tests
from pydantic import ValidationError  # Raised for invalid settings

from blackcore.config.settings import Settings
from blackcore.shared.validators import validate_log_level, validate_positive_int

ENV_VARS = [
    "BLACKCORE_DEFAULT_CODE",
    "BLACKCORE_LOG_LEVEL",
    "BLACKCORE_LOG_FILE",
    "BLACKCORE_LOG_DIR",
    "BLACKCORE_LOG_STDOUT",
    "BLACKCORE_LOG_MAX_BYTES",
    "BLACKCORE_LOG_BACKUP_COUNT",
]


@pytest.fixture
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestSettings:
    def test_defaults(self, clean_env):
        s = Settings(_env_file=None)
        assert s.default_code == "ratoshis"
        assert s.log_level == "WARNING"
        assert s.log_file is None
        assert s.log_dir is None
        assert s.log_stdout is True
        assert s.log_max_bytes == 10 * 1024 * 1024
        assert s.log_backup_count == 5

    def test_from_environment(self, clean_env):
        clean_env.setenv("BLACKCORE_DEFAULT_CODE", "mBLK")
        clean_env.setenv("BLACKCORE_LOG_LEVEL", "debug")
        clean_env.setenv("BLACKCORE_LOG_STDOUT", "false")
        s = Settings(_env_file=None)
        assert s.default_code == "mBLK"
        assert s.log_level == "DEBUG"
        assert s.log_stdout is False

    def test_from_env_file(self, clean_env, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("BLACKCORE_DEFAULT_CODE=uBLK\n", encoding="utf-8")
        s = Settings(_env_file=env_file)
        assert s.default_code == "uBLK"

    def test_unknown_default_code(self, clean_env):
        clean_env.setenv("BLACKCORE_DEFAULT_CODE", "BTC")
        with pytest.raises(ValidationError, match="BLACKCORE_DEFAULT_CODE"):
            Settings(_env_file=None)

    def test_invalid_log_level(self, clean_env):
        clean_env.setenv("BLACKCORE_LOG_LEVEL", "LOUD")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_invalid_log_max_bytes(self, clean_env):
        clean_env.setenv("BLACKCORE_LOG_MAX_BYTES", "0")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_field_names_accepted(self, clean_env):
        s = Settings(_env_file=None, default_code="BLK")
        assert s.default_code == "BLK"


class TestValidators:
    def test_validate_log_level(self):
        assert validate_log_level("info")
        assert validate_log_level(" Warning ")
        assert validate_log_level(logging.DEBUG)
        assert not validate_log_level("")
        assert not validate_log_level("verbose")
        assert not validate_log_level(True)

    def test_validate_positive_int(self):
        assert validate_positive_int(1)
        assert not validate_positive_int(0)
        assert not validate_positive_int(True)
