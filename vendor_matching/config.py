"""Configuration management using Pydantic BaseSettings."""
from pathlib import Path
from typing import Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable overrides."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Scoring configuration override (JSON, any subset of the defaults)
    scoring_config_path: Optional[Path] = Field(default=None, alias="SCORING_CONFIG_PATH")

    # Service detail field resolution
    detail_field_similarity_min: int = Field(default=88, alias="DETAIL_FIELD_SIMILARITY_MIN")

    # Logging
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_dir: Path = Field(default_factory=lambda: Path("./logs"), alias="LOG_DIR")

    # Batch job output
    out_dir: Path = Field(default_factory=lambda: Path("./out"), alias="OUT_DIR")


# Global settings instance
settings = Settings()
