"""
Result assembly: grouping, counting and truncation.
"""

from typing import Dict, Iterable, List, Optional, Sequence

from ara_search.schemas.records import RecordType
from ara_search.schemas.results import ResultView, SearchableRecord


def assemble(
    matches: Iterable[SearchableRecord],
    type_order: Sequence[RecordType],
    limit: Optional[int] = None,
    query: str = "",
    corpus_size: int = 0,
) -> ResultView:
    """
    Group matches by type and flatten them in type-precedence order.
    
    Groups keep corpus order. Truncation applies to the flattened list
    only; groups, counts and total describe every match. Records whose
    type is not in type_order are not part of the surface and are dropped.
    
    Args:
        matches: Records that passed query and facets
        type_order: Group precedence for the flattened list
        limit: Maximum entries in `ordered` (None = unbounded)
        query: Query that produced the matches
        corpus_size: Size of the searched corpus, for summaries
        
    Returns:
        ResultView
    """
    groups: Dict[RecordType, List[SearchableRecord]] = {t: [] for t in type_order}
    for record in matches:
        if record.type in groups:
            groups[record.type].append(record)
    
    ordered = [record for t in type_order for record in groups[t]]
    total = len(ordered)
    if limit is not None:
        ordered = ordered[:limit]
    
    return ResultView(
        query=query,
        groups=groups,
        counts={t: len(records) for t, records in groups.items()},
        ordered=ordered,
        total=total,
        corpus_size=corpus_size,
    )
