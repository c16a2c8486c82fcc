"""
Parameterized search engine shared by every surface.

Each surface instantiates SearchEngine with its own corpus, field
extractor, facet set and SurfaceConfig. `view(state)` is a pure function
of QueryState and the corpus, recomputed eagerly on every mutation.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from loguru import logger

from ara_search.config.surfaces import IDLE_ALL, IDLE_PREVIEW, SurfaceConfig
from ara_search.schemas.records import RecordType
from ara_search.schemas.results import ResultView, SearchableRecord
from ara_search.search.assembler import assemble
from ara_search.search.evaluator import FieldsFn, QueryEvaluator
from ara_search.search.facets import Facet, FacetFilter, is_unset
from ara_search.utils.text import is_blank


@dataclass
class QueryState:
    """Mutable per-surface query input: free text plus facet values."""
    query: str = ""
    facets: Dict[str, Any] = field(default_factory=dict)
    
    @property
    def has_active_filters(self) -> bool:
        return bool(self.query) or any(not is_unset(v) for v in self.facets.values())
    
    def clear(self) -> None:
        self.query = ""
        self.facets = {}


class SearchEngine:
    """
    Query Evaluator -> Facet Filter -> Result Assembler over a fixed corpus.
    """
    
    def __init__(
        self,
        corpus: Sequence[SearchableRecord],
        config: SurfaceConfig,
        facets: Sequence[Facet] = (),
        fields_fn: Optional[FieldsFn] = None,
    ):
        """
        Initialize engine.
        
        Args:
            corpus: Indexed records; never mutated
            config: Surface type order, limit and idle policy
            facets: Facets this surface offers
            fields_fn: Field extractor for free-text matching
        """
        self.corpus = tuple(corpus)
        self.config = config
        self.evaluator = QueryEvaluator(fields_fn)
        self.facet_filter = FacetFilter(facets)
        
        # Records the surface can show at all
        self._surface_records = [r for r in self.corpus if r.type in config.type_order]
        
        logger.debug(
            f"Engine '{config.name}': {len(self._surface_records)} records, "
            f"facets={self.facet_filter.names}"
        )
    
    @property
    def facet_names(self) -> List[str]:
        return self.facet_filter.names
    
    @property
    def corpus_size(self) -> int:
        return len(self._surface_records)
    
    def validate_facet(self, name: str) -> None:
        self.facet_filter.validate({name: None})
    
    def idle_view(self, query: str = "") -> ResultView:
        """Result for a blank query under the surface's idle policy"""
        if self.config.idle_policy == IDLE_PREVIEW:
            pages = [r for r in self._surface_records if r.type == RecordType.PAGE]
            preview = pages[: self.config.preview_size]
            return ResultView(
                query=query,
                groups={RecordType.PAGE: preview},
                counts={RecordType.PAGE: len(preview)},
                ordered=preview,
                total=len(preview),
                corpus_size=self.corpus_size,
            )
        return assemble(
            [],
            self.config.type_order,
            query=query,
            corpus_size=self.corpus_size,
        )
    
    def view(self, state: QueryState) -> ResultView:
        """
        Run the full pipeline for a query state.
        
        Args:
            state: Current query text and facet values
            
        Returns:
            ResultView for the surface
        """
        self.facet_filter.validate(state.facets)
        
        if is_blank(state.query) and self.config.idle_policy != IDLE_ALL:
            return self.idle_view(state.query)
        
        matches = self.evaluator.evaluate(self._surface_records, state.query)
        matches = self.facet_filter.apply(matches, state.facets)
        result = assemble(
            matches,
            self.config.type_order,
            limit=self.config.result_limit,
            query=state.query,
            corpus_size=self.corpus_size,
        )
        
        logger.debug(
            f"[{self.config.name}] query={state.query!r} facets={state.facets} "
            f"-> {result.shown}/{result.total}"
        )
        return result
    
    def search(self, query: str = "", **facets: Any) -> ResultView:
        """One-shot convenience: build a QueryState and return its view"""
        return self.view(QueryState(query=query, facets=dict(facets)))
