"""
pytest configuration and shared fixtures.
"""

import pytest
from typing import List

from ara_search.catalog import Catalog, load_catalog
from ara_search.navigation.scheduler import CooperativeScheduler
from ara_search.schemas.records import (
    ControlRecord,
    DomainRecord,
    RegistryRecord,
    StaticPageRecord,
)
from ara_search.schemas.results import SearchableRecord
from ara_search.search.indexer import build_corpus


@pytest.fixture(scope="session")
def catalog() -> Catalog:
    """The packaged fixture collections"""
    return load_catalog()


@pytest.fixture(scope="session")
def full_corpus(catalog) -> List[SearchableRecord]:
    """Domains, controls and registry (global search corpus)"""
    return build_corpus(catalog.domains, catalog.controls, catalog.registry)


@pytest.fixture(scope="session")
def palette_corpus(catalog) -> List[SearchableRecord]:
    """Full corpus plus the static page catalog"""
    return build_corpus(
        catalog.domains, catalog.controls, catalog.registry, catalog.static_pages
    )


def make_control(control_id: str, domain_id: int, **overrides) -> ControlRecord:
    """Small control record for synthetic corpora"""
    data = {
        "id": control_id,
        "title": f"Control {control_id}",
        "description": "Generic control description.",
        "domainId": domain_id,
        "domain": f"Domain Name {domain_id}",
        "evaluationMethod": "AT",
        "classification": "Blocking",
        "riskWeight": 5,
        "levelApplicability": {"L1": True, "L2": True, "L3": True},
        "relatedControls": [],
        "versionIntroduced": "1.0",
    }
    data.update(overrides)
    return ControlRecord.model_validate(data)


@pytest.fixture
def control_factory():
    """Factory for synthetic control records"""
    return make_control


@pytest.fixture
def sample_domains() -> List[DomainRecord]:
    """Two domains declared out of id order"""
    return [
        DomainRecord(id=2, slug="second", title="Second Domain", short_title="Second",
                     summary="Covers the second thing.", acr_count=1),
        DomainRecord(id=1, slug="first", title="First Domain", short_title="First",
                     summary="Covers the first thing.", acr_count=2),
    ]


@pytest.fixture
def sample_controls() -> List[ControlRecord]:
    return [
        make_control("ACR-1.01", 1, title="Boundary Declaration", riskWeight=9),
        make_control("ACR-1.02", 1, title="Delegation Scope", evaluationMethod="HS",
                     levelApplicability={"L1": False, "L2": True, "L3": True},
                     relatedControls=["ACR-1.01", "ACR-9.99"]),
        make_control("ACR-2.01", 2, title="Traceability", classification="Conditional",
                     riskWeight=3, levelApplicability={"L1": True, "L2": False, "L3": False}),
    ]


@pytest.fixture
def sample_registry() -> List[RegistryRecord]:
    return [
        RegistryRecord.model_validate({
            "certificationId": "ARA-2026-00001",
            "organization": "Acme Corp",
            "systemName": "Widget Agent",
            "scopeStatement": "Widget ordering.",
            "certificationLevel": "L1",
            "certificationStatus": "Active",
            "monitoringStatus": "Compliant",
            "industry": "Retail",
            "category": "Agent",
            "issueDate": "2026-01-01",
            "expiryDate": "2027-01-01",
        }),
        RegistryRecord.model_validate({
            "certificationId": "ARA-2026-00002",
            "organization": "Globex",
            "systemName": "Dispatch Planner",
            "scopeStatement": "Fleet dispatch.",
            "certificationLevel": "L2",
            "certificationStatus": "Suspended",
            "monitoringStatus": "Warning",
            "industry": "Logistics",
            "category": "Multi-Agent",
            "issueDate": "2026-02-01",
            "expiryDate": "2027-02-01",
            "revocationHistory": [
                {"date": "2026-05-01", "action": "Suspended", "reason": "Latency breach."}
            ],
        }),
    ]


@pytest.fixture
def sample_pages() -> List[StaticPageRecord]:
    return [
        StaticPageRecord(title=f"Page {i}", description=f"Description {i}", url=f"/p{i}")
        for i in range(1, 9)
    ]


@pytest.fixture
def sample_corpus(sample_domains, sample_controls, sample_registry, sample_pages):
    return build_corpus(sample_domains, sample_controls, sample_registry, sample_pages)


@pytest.fixture
def scheduler() -> CooperativeScheduler:
    return CooperativeScheduler()


class FakeElement:
    """Stands in for a DOM element that can be scrolled into view"""

    def __init__(self):
        self.scroll_calls = []

    def scroll_into_view(self, behavior: str = "smooth", block: str = "start") -> None:
        self.scroll_calls.append((behavior, block))


@pytest.fixture
def fake_element() -> FakeElement:
    return FakeElement()
