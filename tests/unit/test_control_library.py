"""
Unit tests for the ACR library surface.
"""

import pytest

from ara_search.exceptions import ConfigurationError
from ara_search.surfaces import ControlLibrary


@pytest.fixture
def library(catalog):
    return ControlLibrary(catalog.controls, catalog.domains)


@pytest.fixture
def sample_library(sample_controls, sample_domains):
    return ControlLibrary(sample_controls, sample_domains)


class TestFiltering:
    """Test query and facet state"""
    
    def test_idle_shows_everything(self, library, catalog):
        assert len(library.visible) == len(catalog.controls)
        assert library.summary() == f"Showing {len(catalog.controls)} of {len(catalog.controls)} controls"
        assert not library.has_active_filters
    
    def test_domain_and_level(self, library):
        library.set_facet("domain", 7)
        library.set_facet("level", "L3")
        assert library.visible_ids == ["ACR-7.03", "ACR-7.05", "ACR-7.10", "ACR-7.15"]
        assert library.has_active_filters
    
    def test_summary_counts_against_library(self, library, catalog):
        library.set_query("adversarial")
        assert library.summary() == f"Showing 6 of {len(catalog.controls)} controls"
    
    def test_facet_none_removes(self, library, catalog):
        library.set_facet("method", "CM")
        assert library.facet("method") == "CM"
        library.set_facet("method", None)
        assert library.facet("method") is None
        assert len(library.visible) == len(catalog.controls)
    
    def test_unknown_facet(self, library):
        with pytest.raises(ConfigurationError):
            library.set_facet("industry", "Retail")
    
    def test_clear_filters(self, library, catalog):
        library.set_query("drift")
        library.set_facet("min_risk", 9)
        library.clear_filters()
        assert library.query == ""
        assert not library.has_active_filters
        assert len(library.visible) == len(catalog.controls)


class TestExpansion:
    """Test expand/collapse against filtering"""
    
    def test_toggle_survives_filtering(self, sample_library):
        sample_library.toggle("ACR-1.01")
        sample_library.set_facet("domain", 2)
        assert "ACR-1.01" not in sample_library.visible_ids
        assert sample_library.is_expanded("ACR-1.01")
        
        sample_library.set_facet("domain", None)
        assert sample_library.is_expanded("ACR-1.01")
    
    def test_expand_all_uses_visible(self, sample_library):
        sample_library.set_facet("domain", 1)
        sample_library.expand_all()
        assert sample_library.expansion.snapshot() == {"ACR-1.01", "ACR-1.02"}
    
    def test_expand_all_replaces(self, sample_library):
        sample_library.toggle("ACR-2.01")
        sample_library.set_facet("domain", 1)
        sample_library.expand_all()
        assert not sample_library.is_expanded("ACR-2.01")
    
    def test_collapse_all(self, sample_library):
        sample_library.expand_all()
        sample_library.collapse_all()
        assert len(sample_library.expansion) == 0


class TestDeepLink:
    """Test fragment handling at mount"""
    
    def test_fragment_expands_control(self, catalog, scheduler, fake_element):
        library = ControlLibrary(
            catalog.controls,
            fragment="#ACR-7.01",
            scheduler=scheduler,
            locate=lambda _: fake_element,
        )
        assert library.expansion.snapshot() == {"ACR-7.01"}
        scheduler.run_all()
        assert fake_element.scroll_calls == [("smooth", "start")]
    
    def test_unmount_cancels_scroll(self, catalog, scheduler, fake_element):
        library = ControlLibrary(
            catalog.controls,
            fragment="ACR-7.01",
            scheduler=scheduler,
            locate=lambda _: fake_element,
        )
        library.unmount()
        scheduler.run_all()
        assert fake_element.scroll_calls == []


class TestLookups:
    """Test related controls and domain options"""
    
    def test_related_controls(self, library):
        related = library.related_controls("ACR-7.01")
        assert [ref for ref, _ in related] == ["ACR-7.03", "ACR-6.02"]
        assert all(record is not None for _, record in related)
    
    def test_dangling_reference(self, sample_library):
        related = dict(sample_library.related_controls("ACR-1.02"))
        assert related["ACR-1.01"].title == "Boundary Declaration"
        assert related["ACR-9.99"] is None
    
    def test_unknown_control(self, sample_library):
        assert sample_library.get("ACR-3.01") is None
        assert sample_library.related_controls("ACR-3.01") == []
    
    def test_domain_options_sorted(self, library):
        options = library.domain_options()
        assert options[0] == (1, "01 — Autonomy Scope")
        assert options[6] == (7, "07 — Adversarial Robustness")
        assert [i for i, _ in options] == sorted(i for i, _ in options)
