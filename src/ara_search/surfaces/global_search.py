"""
Full-page search across domains, controls and registry entries.

Nothing is shown until the user types. A type tab narrows the listed
results; per-type counts always describe the unfiltered result set.
"""

from typing import Dict, List, Optional, Sequence, Union
from urllib.parse import parse_qs

from ara_search.config import Settings, global_search_config, settings as default_settings
from ara_search.exceptions import ConfigurationError
from ara_search.schemas.records import RecordType
from ara_search.schemas.results import ResultView, SearchableRecord
from ara_search.search.engine import QueryState, SearchEngine
from ara_search.utils.text import preview


ALL_TYPES = "all"


def parse_record_type(value: Union[str, RecordType, None]) -> Optional[RecordType]:
    """
    Parse a tab value: "all"/None, a type value ("acr") or a label ("ACR").
    
    Raises:
        ConfigurationError: for names that are not record types
    """
    if value is None or isinstance(value, RecordType):
        return value
    if value.casefold() == ALL_TYPES:
        return None
    for record_type in RecordType:
        if value.casefold() in (record_type.value, record_type.label.casefold()):
            return record_type
    raise ConfigurationError(f"Unknown record type: {value!r}")


class GlobalSearch:
    """Search page state: query, type tab and the current result view."""
    
    def __init__(
        self,
        corpus: Sequence[SearchableRecord],
        initial_query: str = "",
        settings: Optional[Settings] = None,
    ):
        self.settings = settings or default_settings
        self.engine = SearchEngine(corpus, global_search_config())
        self.state = QueryState(query=initial_query or "")
        self.type_filter: Optional[RecordType] = None
        self.view: ResultView = self.engine.view(self.state)
    
    @classmethod
    def from_query_string(
        cls,
        corpus: Sequence[SearchableRecord],
        query_string: str,
        settings: Optional[Settings] = None,
    ) -> "GlobalSearch":
        """Seed the query from a `q=` parameter (e.g. "q=Meridian")"""
        params = parse_qs(query_string.lstrip("?"))
        initial = params.get("q", [""])[0]
        return cls(corpus, initial_query=initial, settings=settings)
    
    @property
    def query(self) -> str:
        return self.state.query
    
    def set_query(self, query: str) -> ResultView:
        self.state.query = query or ""
        self.view = self.engine.view(self.state)
        return self.view
    
    def set_type_filter(self, value: Union[str, RecordType, None]) -> None:
        self.type_filter = parse_record_type(value)
    
    @property
    def results(self) -> List[SearchableRecord]:
        """Results listed under the active tab"""
        if self.type_filter is None:
            return list(self.view.ordered)
        return list(self.view.groups.get(self.type_filter, []))
    
    @property
    def counts(self) -> Dict[RecordType, int]:
        """Counts per type with at least one match, in precedence order"""
        return {t: n for t, n in self.view.counts.items() if n}
    
    @property
    def total(self) -> int:
        return self.view.total
    
    def tabs(self) -> List[str]:
        """Tab labels, e.g. ["All (8)", "Domain (1)", "ACR (7)"]"""
        labels = [f"All ({self.total})"]
        labels.extend(f"{t.label} ({n})" for t, n in self.counts.items())
        return labels
    
    def row(self, record: SearchableRecord) -> Dict[str, Optional[str]]:
        """Display projection for one result"""
        return {
            "type": record.type.label,
            "title": record.title,
            "description": preview(
                record.description, self.settings.search_preview_length, suffix=""
            ),
            "url": record.url,
            "meta": record.meta,
        }
