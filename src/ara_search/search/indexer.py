"""
Record indexer: normalizes the source collections into one corpus.

Pure functions of their inputs. Dangling references (e.g. a related
control id with no record) are passed through untouched.
"""

from typing import Iterable, List, Optional

from loguru import logger

from ara_search.config import Settings, settings as default_settings
from ara_search.schemas.records import (
    ControlRecord,
    DomainRecord,
    RecordType,
    RegistryRecord,
    StaticPageRecord,
)
from ara_search.schemas.results import SearchableRecord
from ara_search.utils.text import casefold


def domain_url(domain: DomainRecord, version: str = "v1.0") -> str:
    return f"/standard/{version}/domains/{domain.slug}"


def control_url(control_id: str, version: str = "v1.0") -> str:
    return f"/standard/{version}/acr/{control_id}"


def registry_url(certification_id: str) -> str:
    return f"/registry/verify/{certification_id}"


def index_domain(domain: DomainRecord, version: str = "v1.0") -> SearchableRecord:
    return SearchableRecord(
        id=str(domain.id),
        type=RecordType.DOMAIN,
        url=domain_url(domain, version),
        title=f"Domain {domain.id} — {domain.title}",
        description=domain.summary,
        meta=f"{domain.acr_count} ACRs",
        searchable_text=(
            casefold(domain.title),
            casefold(domain.summary),
            f"domain {domain.id}",
        ),
        source=domain,
    )


def index_control(control: ControlRecord, version: str = "v1.0") -> SearchableRecord:
    return SearchableRecord(
        id=control.id,
        type=RecordType.CONTROL,
        url=control_url(control.id, version),
        title=f"{control.id} — {control.title}",
        description=control.description,
        meta=control.domain_name,
        searchable_text=(
            casefold(control.id),
            casefold(control.title),
            casefold(control.description),
            casefold(control.domain_name),
        ),
        source=control,
    )


def index_registry_entry(entry: RegistryRecord) -> SearchableRecord:
    return SearchableRecord(
        id=entry.certification_id,
        type=RecordType.REGISTRY,
        url=registry_url(entry.certification_id),
        title=f"{entry.organization} — {entry.system_name}",
        description=entry.scope_statement,
        meta=entry.certification_level.value,
        searchable_text=(
            casefold(entry.certification_id),
            casefold(entry.organization),
            casefold(entry.system_name),
            casefold(entry.scope_statement),
        ),
        source=entry,
    )


def index_static_page(page: StaticPageRecord) -> SearchableRecord:
    return SearchableRecord(
        id=page.url,
        type=RecordType.PAGE,
        url=page.url,
        title=page.title,
        description=page.description,
        searchable_text=(casefold(page.title), casefold(page.description)),
        source=page,
    )


def build_corpus(
    domains: Iterable[DomainRecord] = (),
    controls: Iterable[ControlRecord] = (),
    registry: Iterable[RegistryRecord] = (),
    static_pages: Optional[Iterable[StaticPageRecord]] = None,
    settings: Optional[Settings] = None,
) -> List[SearchableRecord]:
    """
    Build one flat corpus from the source collections.
    
    Order is deterministic: domains by ascending id, then controls,
    registry entries and static pages in declaration order.
    
    Args:
        domains: Domain records
        controls: Control records
        registry: Registry records
        static_pages: Page catalog (palette only; None to omit)
        settings: Settings providing the standard version for URLs
        
    Returns:
        List of SearchableRecord
    """
    version = (settings or default_settings).standard_version
    
    corpus: List[SearchableRecord] = []
    corpus.extend(index_domain(d, version) for d in sorted(domains, key=lambda d: d.id))
    corpus.extend(index_control(c, version) for c in controls)
    corpus.extend(index_registry_entry(r) for r in registry)
    if static_pages is not None:
        corpus.extend(index_static_page(p) for p in static_pages)
    
    logger.debug(f"Indexed corpus of {len(corpus)} records")
    return corpus
