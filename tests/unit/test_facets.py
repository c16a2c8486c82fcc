"""
Unit tests for facet predicates.
"""

import itertools
import pytest

from ara_search.exceptions import ConfigurationError
from ara_search.schemas.records import RecordType
from ara_search.search.facets import (
    EqualsFacet,
    FacetFilter,
    control_library_facets,
    registry_facets,
)
from ara_search.search.indexer import build_corpus


@pytest.fixture
def control_records(catalog):
    return build_corpus(controls=catalog.controls)


@pytest.fixture
def registry_records(catalog):
    return build_corpus(registry=catalog.registry)


@pytest.fixture
def control_filter():
    return FacetFilter(control_library_facets())


@pytest.fixture
def registry_filter():
    return FacetFilter(registry_facets())


class TestControlFacets:
    """Test control library facets"""
    
    def test_domain_and_level_scenario(self, control_filter, control_records):
        results = control_filter.apply(control_records, {"domain": 7, "level": "L3"})
        ids = [r.id for r in results]
        
        assert ids
        assert all(i.startswith("ACR-7.") for i in ids)
        assert all(r.source.level_applicability.L3 for r in results)
        assert "ACR-7.05" in ids
        assert "ACR-7.15" in ids
        assert "ACR-7.01" not in ids
        assert "ACR-1.01" not in ids
    
    def test_domain_from_string(self, control_filter, control_records):
        as_int = control_filter.apply(control_records, {"domain": 7})
        as_str = control_filter.apply(control_records, {"domain": "7"})
        assert [r.id for r in as_int] == [r.id for r in as_str]
    
    def test_non_numeric_domain_never_matches(self, control_filter, control_records):
        assert control_filter.apply(control_records, {"domain": "seven"}) == []
    
    def test_unknown_level_never_matches(self, control_filter, control_records):
        assert control_filter.apply(control_records, {"level": "L4"}) == []
    
    def test_level_is_case_insensitive(self, control_filter, control_records):
        upper = control_filter.apply(control_records, {"level": "L2"})
        lower = control_filter.apply(control_records, {"level": "l2"})
        assert [r.id for r in upper] == [r.id for r in lower]
    
    def test_method(self, control_filter, control_records):
        results = control_filter.apply(control_records, {"method": "cm"})
        assert results
        assert all(r.source.evaluation_method.value == "CM" for r in results)
    
    def test_classification(self, control_filter, control_records):
        results = control_filter.apply(control_records, {"classification": "conditional"})
        assert results
        assert all(r.source.classification.value == "Conditional" for r in results)
    
    def test_risk_floor_inclusive(self, control_filter, control_records):
        results = control_filter.apply(control_records, {"min_risk": 9})
        weights = {r.source.risk_weight for r in results}
        assert 9 in weights
        assert min(weights) >= 9
    
    def test_risk_floor_sentinel_disables(self, control_filter, control_records):
        assert len(control_filter.apply(control_records, {"min_risk": None})) == len(control_records)
        assert len(control_filter.apply(control_records, {"min_risk": ""})) == len(control_records)
    
    def test_risk_floor_zero_is_a_real_filter(self, control_filter, control_records):
        # Every weight is >= 0, so this still matches all, but as an active predicate
        assert control_filter.active({"min_risk": 0}) == {"min_risk": 0}
        assert len(control_filter.apply(control_records, {"min_risk": 0})) == len(control_records)


class TestRegistryFacets:
    """Test registry facets"""
    
    def test_level(self, registry_filter, registry_records):
        results = registry_filter.apply(registry_records, {"level": "L3"})
        assert results
        assert all(r.source.certification_level.value == "L3" for r in results)
    
    def test_industry_exact(self, registry_filter, registry_records):
        results = registry_filter.apply(registry_records, {"industry": "Healthcare"})
        assert len(results) == 2
        assert registry_filter.apply(registry_records, {"industry": "Health"}) == []
    
    def test_status_case_insensitive(self, registry_filter, registry_records):
        results = registry_filter.apply(registry_records, {"status": "revoked"})
        assert [r.id for r in results] == ["ARA-2025-00093"]
    
    def test_monitoring(self, registry_filter, registry_records):
        results = registry_filter.apply(registry_records, {"monitoring": "Non-Compliant"})
        assert {r.id for r in results} == {"ARA-2026-00196", "ARA-2025-00093"}
    
    def test_unknown_status_never_matches(self, registry_filter, registry_records):
        assert registry_filter.apply(registry_records, {"status": "Pending Review"}) == []


class TestMonotonicity:
    """Adding a facet never increases the result count"""
    
    CONTROL_VALUES = {
        "domain": 7,
        "level": "L2",
        "method": "AT",
        "classification": "Blocking",
        "min_risk": 8,
    }
    
    def test_control_facets(self, control_filter, control_records):
        names = list(self.CONTROL_VALUES)
        for size in range(len(names)):
            for subset in itertools.combinations(names, size):
                base = {n: self.CONTROL_VALUES[n] for n in subset}
                base_count = len(control_filter.apply(control_records, base))
                for extra in names:
                    if extra in base:
                        continue
                    more = dict(base, **{extra: self.CONTROL_VALUES[extra]})
                    assert len(control_filter.apply(control_records, more)) <= base_count


class TestFacetFilter:
    """Test facet set behavior"""
    
    def test_unknown_facet_name(self, control_filter, control_records):
        with pytest.raises(ConfigurationError, match="Unknown facet"):
            control_filter.apply(control_records, {"industry": "Retail"})
    
    def test_duplicate_names_rejected(self):
        facet = EqualsFacet("level", RecordType.REGISTRY, "certification_level")
        with pytest.raises(ConfigurationError, match="Duplicate"):
            FacetFilter([facet, facet])
    
    def test_never_touches_other_types(self, catalog):
        corpus = build_corpus(controls=catalog.controls, registry=catalog.registry)
        results = FacetFilter(registry_facets()).apply(corpus, {"level": "L3"})
        controls = [r for r in results if r.type == RecordType.CONTROL]
        assert len(controls) == len(catalog.controls)
    
    def test_no_active_facets_returns_input(self, control_filter, control_records):
        assert control_filter.apply(control_records, {}) == control_records
