"""
Facet predicates for the filter surfaces.

A facet is an independent predicate over one field of one record type.
Active facets combine conjunctively with each other and with the text
query. None (or an empty string) is the "no filter" sentinel and disables the
facet; values that can never occur simply never match.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Sequence

from ara_search.exceptions import ConfigurationError
from ara_search.schemas.records import RecordType
from ara_search.schemas.results import SearchableRecord, SourceRecord


_NEVER = object()  # Coerced value that matches nothing


def is_unset(value: Any) -> bool:
    """None and the empty string both disable a facet"""
    return value is None or value == ""


def _plain(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


def _upper(value: Any) -> Any:
    value = _plain(value)
    return value.upper() if isinstance(value, str) else value


def _to_int(value: Any) -> Any:
    """Parse integers from external strings; anything unparseable never matches"""
    value = _plain(value)
    if isinstance(value, bool):
        return _NEVER
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        return _NEVER


class Facet(ABC):
    """
    Base facet bound to one record type and one source field.
    
    Records of other types are never touched by the facet.
    """
    
    def __init__(self, name: str, record_type: RecordType, field: str, label: str = ""):
        self.name = name
        self.record_type = record_type
        self.field = field
        self.label = label or name
    
    def matches(self, record: SearchableRecord, value: Any) -> bool:
        if is_unset(value) or record.type != self.record_type:
            return True
        return self.test(record.source, value)
    
    @abstractmethod
    def test(self, source: SourceRecord, value: Any) -> bool:
        """Evaluate the predicate for an active (non-None) value"""
    
    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r}, {self.record_type.value}.{self.field})"


class EqualsFacet(Facet):
    """field == value, optionally case-insensitive or with value coercion"""
    
    def __init__(
        self,
        name: str,
        record_type: RecordType,
        field: str,
        label: str = "",
        ignore_case: bool = False,
        coerce: Optional[Callable[[Any], Any]] = None
    ):
        super().__init__(name, record_type, field, label)
        self.ignore_case = ignore_case
        self.coerce = coerce or _plain
    
    def test(self, source: SourceRecord, value: Any) -> bool:
        expected = self.coerce(value)
        if expected is _NEVER:
            return False
        actual = _plain(getattr(source, self.field))
        if self.ignore_case and isinstance(expected, str) and isinstance(actual, str):
            return actual.casefold() == expected.casefold()
        return actual == expected


class FlagFacet(Facet):
    """Per-level applicability: source.<field>.applies(value)"""
    
    def test(self, source: SourceRecord, value: Any) -> bool:
        level = _upper(value)
        if not isinstance(level, str):
            return False
        return getattr(source, self.field).applies(level)


class MinimumFacet(Facet):
    """field >= floor (inclusive)"""
    
    def test(self, source: SourceRecord, value: Any) -> bool:
        floor = _to_int(value)
        if floor is _NEVER:
            return False
        return getattr(source, self.field) >= floor


def control_library_facets() -> List[Facet]:
    return [
        EqualsFacet("domain", RecordType.CONTROL, "domain_id", "Domain", coerce=_to_int),
        FlagFacet("level", RecordType.CONTROL, "level_applicability", "Level"),
        EqualsFacet("method", RecordType.CONTROL, "evaluation_method", "Eval Method", coerce=_upper),
        EqualsFacet(
            "classification", RecordType.CONTROL, "classification", "Classification",
            ignore_case=True,
        ),
        MinimumFacet("min_risk", RecordType.CONTROL, "risk_weight", "Min Risk Weight"),
    ]


def registry_facets() -> List[Facet]:
    return [
        EqualsFacet("level", RecordType.REGISTRY, "certification_level", "Level", coerce=_upper),
        EqualsFacet("industry", RecordType.REGISTRY, "industry", "Industry"),
        EqualsFacet(
            "status", RecordType.REGISTRY, "certification_status", "Status",
            ignore_case=True,
        ),
        EqualsFacet(
            "monitoring", RecordType.REGISTRY, "monitoring_status", "Monitoring",
            ignore_case=True,
        ),
    ]


class FacetFilter:
    """A surface's fixed set of facets, applied conjunctively."""
    
    def __init__(self, facets: Sequence[Facet] = ()):
        self.facets: Dict[str, Facet] = {}
        for facet in facets:
            if facet.name in self.facets:
                raise ConfigurationError(f"Duplicate facet name: {facet.name}")
            self.facets[facet.name] = facet
    
    @property
    def names(self) -> List[str]:
        return list(self.facets)
    
    def validate(self, active: Mapping[str, Any]) -> None:
        unknown = [name for name in active if name not in self.facets]
        if unknown:
            raise ConfigurationError(
                f"Unknown facet(s) {unknown}; surface defines {self.names}"
            )
    
    def active(self, values: Mapping[str, Any]) -> Dict[str, Any]:
        """Drop sentinel values, keeping only enabled predicates"""
        return {name: value for name, value in values.items() if not is_unset(value)}
    
    def apply(
        self,
        records: Iterable[SearchableRecord],
        values: Mapping[str, Any]
    ) -> List[SearchableRecord]:
        """
        Keep records satisfying every active facet.
        
        Args:
            records: Candidate records (order preserved)
            values: Facet name -> value (None disables)
            
        Returns:
            Filtered records
        """
        self.validate(values)
        enabled = [(self.facets[name], value) for name, value in self.active(values).items()]
        if not enabled:
            return list(records)
        return [
            record for record in records
            if all(facet.matches(record, value) for facet, value in enabled)
        ]
