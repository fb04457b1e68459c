"""
Configuration settings for Grid Layout Service

Uses pydantic-settings for environment variable management with .env file support.
"""

from typing import List, Optional
from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # Grid defaults (applied when a request omits a value)
    DEFAULT_COLUMN_COUNT: int = 2
    DEFAULT_INSET: float = 10.0
    DEFAULT_CELL_SPACING: float = 10.0
    DEFAULT_ITEM_COUNT: int = 31
    DEFAULT_CONTAINER_WIDTH: float = 300.0
    MAX_ITEM_COUNT: int = 1000

    # Palette
    PALETTE_SEED: Optional[int] = None  # Fixed seed gives reproducible colours

    # Render hints passed through to the host
    CELL_CORNER_RADIUS: float = 5.0
    BACKGROUND_COLOR: str = "#AAAAAA"  # light gray

    # Server config
    HOST: str = "0.0.0.0"
    PORT: int = 8095

    # CORS
    CORS_ORIGINS: List[str] = ["*"]

    # Logging
    LOG_LEVEL: str = "INFO"

    @field_validator("LOG_LEVEL", mode="after")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """logging only accepts upper-case level names."""
        return v.strip().upper()

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True


settings = Settings()
