"""
Shared state for the facet filter surfaces (control library, registry).

Owns the query state, the expansion set and the deep-link synchronizer;
every mutation recomputes the result view before returning.
"""

from typing import Any, List, Optional, Sequence

from loguru import logger

from ara_search.config import Settings, SurfaceConfig, settings as default_settings
from ara_search.navigation.deep_link import DeepLinkSynchronizer, ElementLocator
from ara_search.navigation.expansion import ExpansionSet
from ara_search.navigation.scheduler import Scheduler
from ara_search.schemas.results import ResultView, SearchableRecord, SourceRecord
from ara_search.search.engine import QueryState, SearchEngine
from ara_search.search.facets import Facet


class FilterSurface:
    """Free text + conjunctive facets + expand/collapse over one record type."""
    
    noun = "records"
    
    def __init__(
        self,
        corpus: Sequence[SearchableRecord],
        config: SurfaceConfig,
        facets: Sequence[Facet],
        fragment: Optional[str] = None,
        scheduler: Optional[Scheduler] = None,
        locate: Optional[ElementLocator] = None,
        settings: Optional[Settings] = None,
    ):
        self.settings = settings or default_settings
        self.engine = SearchEngine(corpus, config, facets)
        self.state = QueryState()
        self.expansion = ExpansionSet()
        self.view: ResultView = self.engine.view(self.state)
        
        # Mount: the fragment is read exactly once
        self.deep_link = DeepLinkSynchronizer(
            fragment,
            self.expansion,
            scheduler=scheduler,
            locate=locate,
            delay=self.settings.deep_link_scroll_delay,
        )
        self.deep_link.run()
    
    def _recompute(self) -> ResultView:
        self.view = self.engine.view(self.state)
        return self.view
    
    # Query and facets
    
    @property
    def query(self) -> str:
        return self.state.query
    
    def set_query(self, query: str) -> ResultView:
        self.state.query = query or ""
        return self._recompute()
    
    def set_facet(self, name: str, value: Any) -> ResultView:
        """
        Set or clear (value=None) one facet.
        
        Raises:
            ConfigurationError: if the surface has no facet of that name
        """
        self.engine.validate_facet(name)
        if value is None:
            self.state.facets.pop(name, None)
        else:
            self.state.facets[name] = value
        return self._recompute()
    
    def facet(self, name: str) -> Any:
        return self.state.facets.get(name)
    
    def clear_filters(self) -> ResultView:
        self.state.clear()
        logger.debug(f"[{self.engine.config.name}] filters cleared")
        return self._recompute()
    
    @property
    def has_active_filters(self) -> bool:
        return self.state.has_active_filters
    
    # Results
    
    @property
    def visible(self) -> List[SourceRecord]:
        """Source records currently passing query and facets"""
        return [record.source for record in self.view.ordered]
    
    @property
    def visible_ids(self) -> List[str]:
        return self.view.ids()
    
    def summary(self) -> str:
        return self.view.summary(self.noun, of_corpus=True)
    
    # Expansion
    
    def toggle(self, record_id: str) -> bool:
        return self.expansion.toggle(record_id)
    
    def is_expanded(self, record_id: str) -> bool:
        return self.expansion.is_expanded(record_id)
    
    def expand_all(self) -> None:
        """Expand exactly the currently visible records"""
        self.expansion.replace(self.visible_ids)
    
    def collapse_all(self) -> None:
        self.expansion.clear()
    
    def unmount(self) -> None:
        self.deep_link.dispose()
