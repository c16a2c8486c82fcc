"""
Searchable record and result view models.

SearchableRecord is the uniform shape the indexer produces from every
source collection; ResultView is what a surface renders after one
pipeline pass.
"""

from typing import Dict, List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

from ara_search.schemas.records import (
    ControlRecord,
    DomainRecord,
    RecordType,
    RegistryRecord,
    StaticPageRecord,
)


SourceRecord = Union[DomainRecord, ControlRecord, RegistryRecord, StaticPageRecord]


class SearchableRecord(BaseModel):
    """
    One indexed record of any type.
    
    `searchable_text` holds the case-folded fields eligible for substring
    matching; `source` keeps the original record for facets and detail views.
    """
    model_config = ConfigDict(frozen=True)
    
    id: str = Field(..., description="Stable record identifier")
    type: RecordType
    url: str = Field(..., description="Navigation target")
    title: str
    description: str
    meta: Optional[str] = None
    searchable_text: Tuple[str, ...] = ()
    source: SourceRecord


class ResultView(BaseModel):
    """
    Output of one pipeline pass for a surface.
    
    `groups` and `counts` cover every match; `ordered` is the flattened
    list after truncation. `total` is the pre-truncation match count and
    `corpus_size` the size of the corpus the surface searched.
    """
    query: str = ""
    groups: Dict[RecordType, List[SearchableRecord]] = Field(default_factory=dict)
    counts: Dict[RecordType, int] = Field(default_factory=dict)
    ordered: List[SearchableRecord] = Field(default_factory=list)
    total: int = 0
    corpus_size: int = 0
    
    @property
    def shown(self) -> int:
        """Number of records actually listed (post-truncation)"""
        return len(self.ordered)
    
    @property
    def truncated(self) -> bool:
        return self.shown < self.total
    
    @property
    def is_empty(self) -> bool:
        return not self.ordered
    
    def ids(self) -> List[str]:
        return [record.id for record in self.ordered]
    
    def summary(self, noun: str = "results", of_corpus: bool = False) -> str:
        """
        Human-readable count line.
        
        Args:
            noun: What is being counted
            of_corpus: Compare against the whole corpus instead of all matches
            
        Returns:
            e.g. "Showing 12 of 31 results"
        """
        denominator = self.corpus_size if of_corpus else self.total
        return f"Showing {self.shown} of {denominator} {noun}"
