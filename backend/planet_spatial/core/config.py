"""Application settings and shared engine configuration.

This module provides Pydantic-based settings management that loads
configuration from environment variables or a .env file. Settings include
the default tile size, the strict world-bounds switch, the spatial
reference identifier reported to tile schema consumers, the highest
published zoom level, and the log level.

Example:
    Settings can be accessed via the cached get_settings() function:
        >>> from planet_spatial.core.config import get_settings
        >>> settings = get_settings()
        >>> print(settings.tile_size)

    Environment variables can override defaults:
        >>> TILE_SIZE=256
        >>> STRICT_BOUNDS=true
        >>> LOG_LEVEL=DEBUG
"""

import functools

import pydantic
import pydantic_settings


class Settings(pydantic_settings.BaseSettings):
    """Runtime configuration pulled from environment variables or defaults.

    All settings can be overridden via environment variables or .env file.

    Attributes:
        tile_size: Tile edge length in pixels for the shared engine.
        strict_bounds: Reject meters outside the projected world when True.
        srs: Spatial reference system identifier of the tile pyramid.
        max_zoom: Highest zoom level published in tile schemas.
        log_level: Name of the logging level for the package logger.
        allow_origins: List of allowed CORS origins (["*"] allows all).

    Example:
        Create settings with custom values:
            >>> settings = Settings(tile_size=256, strict_bounds=True)

        Or use environment variables:
            >>> export TILE_SIZE=256
            >>> settings = Settings()  # Loads from environment
    """

    tile_size: int = pydantic.Field(default=512, gt=0)
    strict_bounds: bool = False
    srs: str = "EPSG:3857"
    max_zoom: int = pydantic.Field(default=30, ge=0, le=30)
    log_level: str = "INFO"
    allow_origins: list[str] = ["*"]

    model_config = pydantic_settings.SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )


@functools.lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Settings are loaded from environment variables or .env file and cached
    for the lifetime of the process. Subsequent calls return the same
    cached instance.

    Returns:
        Settings instance with all configuration values populated.

    Example:
        The settings are cached, so multiple calls return the same instance:
            >>> settings1 = get_settings()
            >>> settings2 = get_settings()
            >>> assert settings1 is settings2  # Same instance
    """
    return Settings()
