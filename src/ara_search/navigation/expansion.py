"""
Expand/collapse membership for detail disclosure.

Membership is independent of filtering: filters change which records are
visible, never which ids are expanded.
"""

from typing import Iterable, Iterator, FrozenSet


class ExpansionSet:
    """Set of expanded record ids owned by one surface."""
    
    def __init__(self, ids: Iterable[str] = ()):
        self._ids = set(ids)
    
    def toggle(self, record_id: str) -> bool:
        """
        Flip membership of one id.
        
        Returns:
            True if the id is expanded after the call
        """
        if record_id in self._ids:
            self._ids.discard(record_id)
            return False
        self._ids.add(record_id)
        return True
    
    def replace(self, ids: Iterable[str]) -> None:
        """Set membership to exactly `ids`"""
        self._ids = set(ids)
    
    def clear(self) -> None:
        self._ids = set()
    
    def is_expanded(self, record_id: str) -> bool:
        return record_id in self._ids
    
    def snapshot(self) -> FrozenSet[str]:
        return frozenset(self._ids)
    
    def __contains__(self, record_id: object) -> bool:
        return record_id in self._ids
    
    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._ids))
    
    def __len__(self) -> int:
        return len(self._ids)
    
    def __repr__(self) -> str:
        return f"ExpansionSet({sorted(self._ids)})"
