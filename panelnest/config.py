"""Configuration management for panelnest."""

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="PANELNEST_",
        extra="ignore",
    )

    # Paths
    output_dir: Path = Field(default=Path("output"), description="Output directory for CSV/DXF files")

    # Stock sheet (mm), 2440x1220 is the common plywood/MDF board
    sheet_width: float = Field(default=2440.0, description="Stock sheet width in mm")
    sheet_height: float = Field(default=1220.0, description="Stock sheet height in mm")

    # Classification
    thickness_threshold: float = Field(default=50.0, description="Objects thinner than this (mm) are panels")
    strict_validation: bool = Field(default=False, description="Reject negative or non-finite extents")

    # Export
    dxf_precision: int = Field(default=2, description="Decimal places for DXF coordinates")


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def configure(settings: Optional[Settings]) -> None:
    """Override global settings (None resets to environment defaults)."""
    global _settings
    _settings = settings
