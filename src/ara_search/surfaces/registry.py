"""
Certification registry surface: free text plus level, industry,
certification status and monitoring status facets, and verify lookup.
"""

from typing import Any, Dict, List, Optional, Sequence

from loguru import logger

from ara_search.config import Settings, registry_config
from ara_search.exceptions import RecordNotFoundError
from ara_search.navigation.deep_link import ElementLocator
from ara_search.navigation.scheduler import Scheduler
from ara_search.schemas.records import RegistryRecord
from ara_search.search.facets import registry_facets
from ara_search.search.indexer import build_corpus, registry_url
from ara_search.surfaces.base import FilterSurface


REGISTRY_BASE_URL = "https://arastandard.org"


class RegistryBrowser(FilterSurface):
    """Filterable list of certified systems with detail disclosure."""
    
    noun = "certified systems"
    
    def __init__(
        self,
        entries: Sequence[RegistryRecord],
        fragment: Optional[str] = None,
        scheduler: Optional[Scheduler] = None,
        locate: Optional[ElementLocator] = None,
        settings: Optional[Settings] = None,
    ):
        self.entries = list(entries)
        super().__init__(
            build_corpus(registry=self.entries, settings=settings),
            registry_config(),
            registry_facets(),
            fragment=fragment,
            scheduler=scheduler,
            locate=locate,
            settings=settings,
        )
    
    def industries(self) -> List[str]:
        """Distinct industries, sorted, for the industry facet"""
        return sorted({entry.industry for entry in self.entries})
    
    def find(self, certification_id: str) -> Optional[RegistryRecord]:
        """Case-insensitive exact lookup of a (trimmed) certification id"""
        wanted = (certification_id or "").strip().casefold()
        if not wanted:
            return None
        for entry in self.entries:
            if entry.certification_id.casefold() == wanted:
                return entry
        return None
    
    def verify_lookup(self, certification_id: str) -> Optional[str]:
        """
        Resolve a typed certification id to its verification URL.
        
        Returns:
            URL to navigate to, or None if no entry matches
        """
        entry = self.find(certification_id)
        if entry is None:
            logger.warning(f"Verify lookup found no entry for {certification_id!r}")
            return None
        return registry_url(entry.certification_id)
    
    def verification(self, certification_id: str) -> Dict[str, Any]:
        """
        Verification record for one certification.
        
        Raises:
            RecordNotFoundError: if no entry has this exact id
        """
        entry = next(
            (e for e in self.entries if e.certification_id == certification_id), None
        )
        if entry is None:
            raise RecordNotFoundError(certification_id, kind="certification")
        
        return {
            "certificationId": entry.certification_id,
            "status": entry.certification_status.value,
            "verified": entry.is_verified,
            "organization": entry.organization,
            "systemName": entry.system_name,
            "certificationLevel": entry.certification_level.value,
            "category": entry.category.value,
            "issueDate": entry.issue_date,
            "expiryDate": entry.expiry_date,
            "monitoringStatus": entry.monitoring_status.value,
            "scopeStatement": entry.scope_statement,
            "industry": entry.industry,
            "versionCertifiedUnder": entry.version_certified_under,
            "registryUrl": f"{REGISTRY_BASE_URL}{registry_url(entry.certification_id)}",
        }
