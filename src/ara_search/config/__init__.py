"""Config package: environment settings and per-surface engine configuration."""

from ara_search.config.settings import Settings, settings
from ara_search.config.surfaces import (
    SurfaceConfig,
    IDLE_EMPTY,
    IDLE_PREVIEW,
    IDLE_ALL,
    global_search_config,
    palette_config,
    control_library_config,
    registry_config,
)

__all__ = [
    "Settings",
    "settings",
    "SurfaceConfig",
    "IDLE_EMPTY",
    "IDLE_PREVIEW",
    "IDLE_ALL",
    "global_search_config",
    "palette_config",
    "control_library_config",
    "registry_config",
]
