"""
Search pipeline components.
"""

from ara_search.search.indexer import build_corpus
from ara_search.search.evaluator import QueryEvaluator, evaluate
from ara_search.search.facets import (
    Facet,
    EqualsFacet,
    FlagFacet,
    MinimumFacet,
    FacetFilter,
    control_library_facets,
    registry_facets,
)
from ara_search.search.assembler import assemble
from ara_search.search.engine import QueryState, SearchEngine

__all__ = [
    "build_corpus",
    "QueryEvaluator",
    "evaluate",
    "Facet",
    "EqualsFacet",
    "FlagFacet",
    "MinimumFacet",
    "FacetFilter",
    "control_library_facets",
    "registry_facets",
    "assemble",
    "QueryState",
    "SearchEngine",
]
