"""
Kernel configuration.

Centralized settings read from NUMERICS_* environment variables.
"""

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Kernel settings"""

    model_config = SettingsConfigDict(
        env_prefix="NUMERICS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Fuzzy comparison defaults used by compare()
    TOLERANCE: float = 0.001
    TOL_TYPE: str = "relative"  # relative, absolute or sigfigs

    # Laplace expansion is O(n!); warn above this dimension
    LAPLACE_WARN_DIM: int = 8

    # Logging
    LOG_LEVEL: str = "WARNING"
    LOG_FORMAT: str = "text"  # json or text
    LOG_FILE: Optional[str] = None


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


# Global settings instance
settings = get_settings()
