"""
ACR library surface: free text plus domain, level, evaluation method,
classification and minimum risk weight facets.
"""

from typing import Iterable, List, Optional, Sequence, Tuple

from ara_search.config import Settings, control_library_config
from ara_search.navigation.deep_link import ElementLocator
from ara_search.navigation.scheduler import Scheduler
from ara_search.schemas.records import ControlRecord, DomainRecord
from ara_search.search.facets import control_library_facets
from ara_search.search.indexer import build_corpus
from ara_search.surfaces.base import FilterSurface


class ControlLibrary(FilterSurface):
    """
    Filterable, expandable list of controls.
    
    Facets: domain (id), level (L1/L2/L3), method (AT/HS/EI/CM),
    classification (Blocking/Conditional), min_risk (inclusive floor).
    """
    
    noun = "controls"
    
    def __init__(
        self,
        controls: Sequence[ControlRecord],
        domains: Iterable[DomainRecord] = (),
        fragment: Optional[str] = None,
        scheduler: Optional[Scheduler] = None,
        locate: Optional[ElementLocator] = None,
        settings: Optional[Settings] = None,
    ):
        self.controls = list(controls)
        self.domains = sorted(domains, key=lambda d: d.id)
        self._by_id = {control.id: control for control in self.controls}
        
        super().__init__(
            build_corpus(controls=self.controls, settings=settings),
            control_library_config(),
            control_library_facets(),
            fragment=fragment,
            scheduler=scheduler,
            locate=locate,
            settings=settings,
        )
    
    def get(self, control_id: str) -> Optional[ControlRecord]:
        return self._by_id.get(control_id)
    
    def related_controls(self, control_id: str) -> List[Tuple[str, Optional[ControlRecord]]]:
        """
        Resolve a control's related ids against the library.
        
        Dangling references resolve to None so presentation can show
        them as not yet defined.
        
        Args:
            control_id: Control whose references to resolve
            
        Returns:
            (related id, record or None) in declaration order; empty if
            the control itself is unknown
        """
        control = self.get(control_id)
        if control is None:
            return []
        return [(ref, self._by_id.get(ref)) for ref in control.related_controls]
    
    def domain_options(self) -> List[Tuple[int, str]]:
        """Domain filter options, e.g. (7, "07 — Adversarial Robustness")"""
        return [
            (domain.id, f"{domain.id:02d} — {domain.short_title or domain.title}")
            for domain in self.domains
        ]
