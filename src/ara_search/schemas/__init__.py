"""Schemas package exports"""

from ara_search.schemas.records import (
    RecordType,
    CertificationLevel,
    EvaluationMethod,
    Classification,
    CertificationStatus,
    MonitoringStatus,
    SystemCategory,
    RevocationAction,
    LevelApplicability,
    DomainRecord,
    ControlRecord,
    RevocationEvent,
    RegistryRecord,
    StaticPageRecord,
)
from ara_search.schemas.results import (
    SourceRecord,
    SearchableRecord,
    ResultView,
)

__all__ = [
    "RecordType",
    "CertificationLevel",
    "EvaluationMethod",
    "Classification",
    "CertificationStatus",
    "MonitoringStatus",
    "SystemCategory",
    "RevocationAction",
    "LevelApplicability",
    "DomainRecord",
    "ControlRecord",
    "RevocationEvent",
    "RegistryRecord",
    "StaticPageRecord",
    "SourceRecord",
    "SearchableRecord",
    "ResultView",
]
