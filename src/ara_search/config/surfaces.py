"""
Per-surface engine configuration.

Each search surface instantiates the same engine with its own type
precedence, truncation limit and idle-query behavior.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from ara_search.config.settings import Settings, settings as default_settings
from ara_search.exceptions import ConfigurationError
from ara_search.schemas.records import RecordType


# What a blank query produces
IDLE_EMPTY = "empty"  # No results until the user types
IDLE_PREVIEW = "preview"  # Fixed preview of the static-page catalog
IDLE_ALL = "all"  # No text constraint, facets still apply

IDLE_POLICIES = (IDLE_EMPTY, IDLE_PREVIEW, IDLE_ALL)


@dataclass(frozen=True)
class SurfaceConfig:
    """Engine configuration for one search surface."""
    
    name: str
    type_order: Tuple[RecordType, ...]
    result_limit: Optional[int] = None  # None = unbounded
    idle_policy: str = IDLE_EMPTY
    preview_size: int = 0
    
    def __post_init__(self):
        if not self.type_order:
            raise ConfigurationError(f"Surface '{self.name}' declares no record types")
        if self.idle_policy not in IDLE_POLICIES:
            raise ConfigurationError(
                f"Unknown idle policy '{self.idle_policy}' (expected one of {IDLE_POLICIES})"
            )
        if self.result_limit is not None and self.result_limit < 1:
            raise ConfigurationError(f"Result limit must be positive, got {self.result_limit}")
        if self.preview_size < 0:
            raise ConfigurationError(f"Preview size must be >= 0, got {self.preview_size}")


def global_search_config() -> SurfaceConfig:
    """Full-page search: three entity types, unbounded, empty until typed."""
    return SurfaceConfig(
        name="search",
        type_order=(RecordType.DOMAIN, RecordType.CONTROL, RecordType.REGISTRY),
    )


def palette_config(settings: Optional[Settings] = None) -> SurfaceConfig:
    """Command palette: all four types, capped, static-page preview when idle."""
    settings = settings or default_settings
    return SurfaceConfig(
        name="palette",
        type_order=(
            RecordType.DOMAIN,
            RecordType.CONTROL,
            RecordType.REGISTRY,
            RecordType.PAGE,
        ),
        result_limit=settings.palette_result_limit,
        idle_policy=IDLE_PREVIEW,
        preview_size=settings.palette_preview_size,
    )


def control_library_config() -> SurfaceConfig:
    return SurfaceConfig(
        name="control-library",
        type_order=(RecordType.CONTROL,),
        idle_policy=IDLE_ALL,
    )


def registry_config() -> SurfaceConfig:
    return SurfaceConfig(
        name="registry",
        type_order=(RecordType.REGISTRY,),
        idle_policy=IDLE_ALL,
    )
