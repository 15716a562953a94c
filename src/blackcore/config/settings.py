# src/blackcore/config/settings.py
"""
Settings - Pydantic-based Configuration Management

Environment-driven settings for the blackcore command-line tool: the default
output denomination and logging destinations. The denomination table itself
is fixed and is not configurable.

Files that USE this module:
- blackcore.app (logging setup and default output code)
- tests.test_settings (unit tests)

Files that this module USES:
- blackcore.domain.denominations (is_known_code for default_code)
- blackcore.shared.validators (validation functions for settings)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from typing import Optional  # Type hints for optional values

from pydantic import Field, field_validator  # Data validation and field configuration
from pydantic_settings import BaseSettings, SettingsConfigDict  # Settings management with Pydantic

from blackcore.domain.denominations import DENOMINATIONS, is_known_code
from blackcore.shared.validators import validate_log_level, validate_positive_int


class Settings(BaseSettings):
    """Settings loaded from BLACKCORE_* environment variables or a .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # --- Conversion ---
    default_code: str = Field(default="ratoshis", alias="BLACKCORE_DEFAULT_CODE")

    # --- Logging ---
    log_level: str = Field(default="WARNING", alias="BLACKCORE_LOG_LEVEL")
    log_file: Optional[str] = Field(default=None, alias="BLACKCORE_LOG_FILE")
    log_dir: Optional[str] = Field(default=None, alias="BLACKCORE_LOG_DIR")
    log_stdout: bool = Field(default=True, alias="BLACKCORE_LOG_STDOUT")
    log_max_bytes: int = Field(default=10 * 1024 * 1024, alias="BLACKCORE_LOG_MAX_BYTES")  # 10MB
    log_backup_count: int = Field(default=5, alias="BLACKCORE_LOG_BACKUP_COUNT", ge=0)

    @field_validator("default_code")
    @classmethod
    def validate_default_code(cls, v: str) -> str:
        """Validate that the default output code is a known denomination."""
        if not is_known_code(v):
            known = ", ".join(DENOMINATIONS)
            raise ValueError(f"BLACKCORE_DEFAULT_CODE must be one of: {known}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate and normalize the logging level name."""
        if not validate_log_level(v):
            raise ValueError(f"Invalid BLACKCORE_LOG_LEVEL: {v!r}")
        return v.strip().upper()

    @field_validator("log_max_bytes")
    @classmethod
    def validate_log_max_bytes(cls, v: int) -> int:
        if not validate_positive_int(v):
            raise ValueError("BLACKCORE_LOG_MAX_BYTES must be a positive integer")
        return v


# Global settings instance
settings = Settings()
