"""
Free-text query evaluation.

A record matches when the case-folded query is a substring of any of its
searchable fields. No ranking, no fuzzy matching.
"""

from typing import Callable, Iterable, List, Optional, Sequence

from ara_search.schemas.results import SearchableRecord
from ara_search.utils.text import casefold, is_blank


FieldsFn = Callable[[SearchableRecord], Sequence[str]]


def default_fields(record: SearchableRecord) -> Sequence[str]:
    """Fields precomputed by the indexer for the record's type"""
    return record.searchable_text


class QueryEvaluator:
    """
    Substring matcher over a field extractor.
    
    A blank query places no text constraint and returns every record;
    surfaces decide separately what an idle query displays.
    """
    
    def __init__(self, fields_fn: Optional[FieldsFn] = None):
        """
        Initialize evaluator.
        
        Args:
            fields_fn: Returns the case-folded fields to match for a record
        """
        self.fields_fn = fields_fn or default_fields
    
    def matches(self, record: SearchableRecord, needle: str) -> bool:
        return any(needle in field for field in self.fields_fn(record))
    
    def evaluate(
        self,
        corpus: Iterable[SearchableRecord],
        query: str
    ) -> List[SearchableRecord]:
        """
        Filter corpus by query, preserving corpus order.
        
        Args:
            corpus: Records to search
            query: Raw user query
            
        Returns:
            Matching records (a subset of corpus)
        """
        if is_blank(query):
            return list(corpus)
        
        needle = casefold(query)
        return [record for record in corpus if self.matches(record, needle)]


def evaluate(
    corpus: Iterable[SearchableRecord],
    query: str,
    fields_fn: Optional[FieldsFn] = None
) -> List[SearchableRecord]:
    """Convenience wrapper around QueryEvaluator.evaluate"""
    return QueryEvaluator(fields_fn).evaluate(corpus, query)
