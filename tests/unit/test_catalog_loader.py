"""
Unit tests for the fixture loader.
"""

import json
import pytest

from ara_search.catalog.loader import (
    load_catalog,
    load_controls,
    load_domains,
    load_registry,
    load_static_pages,
)
from ara_search.exceptions import FixtureLoadError


class TestPackagedCatalog:
    """Test the fixture collections shipped with the package"""
    
    def test_collection_sizes(self, catalog):
        assert len(catalog.domains) == 13
        assert len(catalog.controls) == 50
        assert len(catalog.static_pages) == 14
        assert len(catalog.registry) >= 10
    
    def test_ids_unique(self, catalog):
        control_ids = [c.id for c in catalog.controls]
        registry_ids = [r.certification_id for r in catalog.registry]
        assert len(control_ids) == len(set(control_ids))
        assert len(registry_ids) == len(set(registry_ids))
    
    def test_controls_reference_known_domains(self, catalog):
        domain_ids = {d.id for d in catalog.domains}
        assert all(c.domain_id in domain_ids for c in catalog.controls)
    
    def test_lookups(self, catalog):
        assert catalog.get_control("ACR-7.01").title == "Prompt Injection Resistance"
        assert catalog.get_control("ACR-99.99") is None
        assert catalog.get_domain(7).title == "Adversarial Robustness"
        assert catalog.get_registry_entry("ARA-2026-00142").organization.startswith("Meridian")
    
    def test_static_pages_declaration_order(self, catalog):
        titles = [p.title for p in catalog.static_pages[:3]]
        assert titles == ["Home", "Standard Overview", "ARA Standard v1.0"]


class TestLoaderErrors:
    """Test malformed fixture handling"""
    
    def test_missing_file(self, tmp_path):
        with pytest.raises(FixtureLoadError, match="not found"):
            load_domains(tmp_path)
    
    def test_invalid_json(self, tmp_path):
        (tmp_path / "controls.json").write_text("{not json")
        with pytest.raises(FixtureLoadError, match="Invalid JSON"):
            load_controls(tmp_path)
    
    def test_validation_failure(self, tmp_path):
        (tmp_path / "registry.json").write_text(json.dumps([{"certificationId": "X"}]))
        with pytest.raises(FixtureLoadError, match="failed validation"):
            load_registry(tmp_path)
    
    def test_custom_directory(self, tmp_path):
        pages = [{"title": "Only", "description": "One page", "url": "/only"}]
        (tmp_path / "static_pages.json").write_text(json.dumps(pages))
        loaded = load_static_pages(tmp_path)
        assert [p.url for p in loaded] == ["/only"]
    
    def test_load_catalog_requires_every_collection(self, tmp_path):
        (tmp_path / "domains.json").write_text("[]")
        with pytest.raises(FixtureLoadError):
            load_catalog(tmp_path)
