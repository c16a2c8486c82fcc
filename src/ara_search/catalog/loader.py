"""
Fixture loader for the static ARA collections.

Reads the JSON collections once and validates them into frozen pydantic
records. This is the only place in the package that touches the filesystem.
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Type, TypeVar

from loguru import logger
from pydantic import BaseModel, TypeAdapter, ValidationError

from ara_search.config import settings
from ara_search.exceptions import FixtureLoadError
from ara_search.schemas.records import (
    ControlRecord,
    DomainRecord,
    RegistryRecord,
    StaticPageRecord,
)


DOMAINS_FILE = "domains.json"
CONTROLS_FILE = "controls.json"
REGISTRY_FILE = "registry.json"
STATIC_PAGES_FILE = "static_pages.json"

ModelT = TypeVar("ModelT", bound=BaseModel)


def _read_collection(path: Path, model: Type[ModelT]) -> List[ModelT]:
    """
    Read a JSON array and validate each element.
    
    Args:
        path: JSON file containing a list of objects
        model: Record model to validate against
        
    Returns:
        Records in file order
    """
    path = Path(path)
    if not path.exists():
        raise FixtureLoadError(f"Fixture not found: {path}")
    
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise FixtureLoadError(f"Invalid JSON in {path}: {e}") from e
    
    try:
        records = TypeAdapter(List[model]).validate_python(data)
    except ValidationError as e:
        raise FixtureLoadError(
            f"{path.name} failed validation ({e.error_count()} errors): {e}"
        ) from e
    
    logger.debug(f"Loaded {len(records)} {model.__name__} records from {path}")
    return records


def load_domains(data_dir: Optional[Path] = None) -> List[DomainRecord]:
    return _read_collection(Path(data_dir or settings.data_dir) / DOMAINS_FILE, DomainRecord)


def load_controls(data_dir: Optional[Path] = None) -> List[ControlRecord]:
    return _read_collection(Path(data_dir or settings.data_dir) / CONTROLS_FILE, ControlRecord)


def load_registry(data_dir: Optional[Path] = None) -> List[RegistryRecord]:
    return _read_collection(Path(data_dir or settings.data_dir) / REGISTRY_FILE, RegistryRecord)


def load_static_pages(data_dir: Optional[Path] = None) -> List[StaticPageRecord]:
    return _read_collection(
        Path(data_dir or settings.data_dir) / STATIC_PAGES_FILE, StaticPageRecord
    )


@dataclass(frozen=True)
class Catalog:
    """The four read-only collections, loaded together."""
    domains: List[DomainRecord]
    controls: List[ControlRecord]
    registry: List[RegistryRecord]
    static_pages: List[StaticPageRecord]
    
    def get_control(self, control_id: str) -> Optional[ControlRecord]:
        for control in self.controls:
            if control.id == control_id:
                return control
        return None
    
    def get_domain(self, domain_id: int) -> Optional[DomainRecord]:
        for domain in self.domains:
            if domain.id == domain_id:
                return domain
        return None
    
    def get_registry_entry(self, certification_id: str) -> Optional[RegistryRecord]:
        for entry in self.registry:
            if entry.certification_id == certification_id:
                return entry
        return None


def load_catalog(data_dir: Optional[Path] = None) -> Catalog:
    """
    Load every collection from a fixture directory.
    
    Args:
        data_dir: Directory holding the JSON collections (defaults to settings.data_dir)
        
    Returns:
        Catalog with all four collections
    """
    data_dir = Path(data_dir or settings.data_dir)
    catalog = Catalog(
        domains=load_domains(data_dir),
        controls=load_controls(data_dir),
        registry=load_registry(data_dir),
        static_pages=load_static_pages(data_dir),
    )
    logger.info(
        f"Loaded catalog from {data_dir}: {len(catalog.domains)} domains, "
        f"{len(catalog.controls)} controls, {len(catalog.registry)} registry entries, "
        f"{len(catalog.static_pages)} pages"
    )
    return catalog
