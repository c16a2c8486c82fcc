"""The four search surfaces built on SearchEngine."""

from ara_search.surfaces.base import FilterSurface
from ara_search.surfaces.control_library import ControlLibrary
from ara_search.surfaces.registry import RegistryBrowser
from ara_search.surfaces.global_search import GlobalSearch, parse_record_type
from ara_search.surfaces.palette import CommandPalette, PaletteStatus

__all__ = [
    "FilterSurface",
    "ControlLibrary",
    "RegistryBrowser",
    "GlobalSearch",
    "parse_record_type",
    "CommandPalette",
    "PaletteStatus",
]
