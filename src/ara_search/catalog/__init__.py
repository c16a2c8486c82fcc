"""Static fixture collections and their loader."""

from ara_search.catalog.loader import (
    Catalog,
    load_catalog,
    load_domains,
    load_controls,
    load_registry,
    load_static_pages,
)

__all__ = [
    "Catalog",
    "load_catalog",
    "load_domains",
    "load_controls",
    "load_registry",
    "load_static_pages",
]
