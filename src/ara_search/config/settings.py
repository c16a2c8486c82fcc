"""
Application settings using pydantic-settings.

All configuration loaded from environment variables with sensible defaults.
"""

from pathlib import Path
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings with environment variable support.
    
    Load from .env file or ARA_SEARCH_* environment variables.
    """
    
    # Fixture collections (domains.json, controls.json, registry.json, static_pages.json)
    data_dir: Path = Path(__file__).parent.parent / "catalog" / "data"
    
    # URL building
    standard_version: str = "v1.0"
    
    # Command palette
    palette_preview_size: int = 6  # Idle preview, static pages only
    palette_result_limit: int = 12  # Cap applied after grouping
    
    # Description previews
    description_preview_length: int = 120  # Palette rows
    search_preview_length: int = 200  # Full-page search rows
    
    # Deep linking
    deep_link_scroll_delay: float = 0.1  # Seconds before scroll-into-view
    
    # Logging
    log_level: str = "INFO"
    log_file: Optional[Path] = None
    
    model_config = SettingsConfigDict(
        env_prefix="ARA_SEARCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


# Global settings instance
settings = Settings()
