"""
Source record schemas for the ARA Standard collections.

Pydantic models for domains, controls (ACRs), registry entries and the
static page catalog. Field aliases follow the camelCase keys of the
fixture JSON; models are frozen since the corpus never changes at runtime.
"""

from enum import Enum
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class RecordType(str, Enum):
    """Entity type tag carried by every searchable record."""
    DOMAIN = "domain"
    CONTROL = "acr"
    REGISTRY = "registry"
    PAGE = "page"
    
    @property
    def label(self) -> str:
        """Display label used by result lists and tab filters."""
        return _TYPE_LABELS[self]


_TYPE_LABELS = {
    RecordType.DOMAIN: "Domain",
    RecordType.CONTROL: "ACR",
    RecordType.REGISTRY: "Registry",
    RecordType.PAGE: "Page",
}


class CertificationLevel(str, Enum):
    L1 = "L1"
    L2 = "L2"
    L3 = "L3"


class EvaluationMethod(str, Enum):
    AT = "AT"  # Automated Testing
    HS = "HS"  # Human Simulation
    EI = "EI"  # Evidence Inspection
    CM = "CM"  # Continuous Monitoring
    
    @property
    def label(self) -> str:
        return _METHOD_LABELS[self]


_METHOD_LABELS = {
    EvaluationMethod.AT: "Automated Testing",
    EvaluationMethod.HS: "Human Simulation",
    EvaluationMethod.EI: "Evidence Inspection",
    EvaluationMethod.CM: "Continuous Monitoring",
}


class Classification(str, Enum):
    BLOCKING = "Blocking"
    CONDITIONAL = "Conditional"


class CertificationStatus(str, Enum):
    ACTIVE = "Active"
    CONDITIONAL = "Conditional"
    SUSPENDED = "Suspended"
    EXPIRED = "Expired"
    REVOKED = "Revoked"


class MonitoringStatus(str, Enum):
    COMPLIANT = "Compliant"
    WARNING = "Warning"
    NON_COMPLIANT = "Non-Compliant"
    PENDING = "Pending"


class SystemCategory(str, Enum):
    AGENT = "Agent"
    MULTI_AGENT = "Multi-Agent"
    PHYSICAL = "Physical"
    HYBRID = "Hybrid"


class RevocationAction(str, Enum):
    SUSPENDED = "Suspended"
    REVOKED = "Revoked"
    REINSTATED = "Reinstated"


class FixtureModel(BaseModel):
    """Base for fixture records: camelCase aliases, immutable."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class LevelApplicability(FixtureModel):
    """Three independent per-level applicability flags."""
    L1: bool = Field(False, alias="L1")
    L2: bool = Field(False, alias="L2")
    L3: bool = Field(False, alias="L3")
    
    def applies(self, level: str) -> bool:
        """
        Check applicability for a level name.
        
        Unknown level names (anything outside L1/L2/L3) never apply.
        """
        if level not in ("L1", "L2", "L3"):
            return False
        return getattr(self, level)


class DomainRecord(FixtureModel):
    """A thematic grouping of controls."""
    id: int = Field(..., ge=1)
    slug: str
    title: str
    short_title: str = ""
    summary: str
    acr_count: int = Field(0, ge=0)
    applicability: LevelApplicability = Field(default_factory=LevelApplicability)
    risk_rationale: str = ""
    version_introduced: str = "1.0"


class ControlRecord(FixtureModel):
    """An Autonomous Control Requirement (ACR)."""
    id: str = Field(..., pattern=r"^ACR-\d+\.\d+$")
    title: str
    description: str
    domain_id: int = Field(..., ge=1)
    domain_name: str = Field(..., alias="domain")
    evaluation_method: EvaluationMethod
    classification: Classification
    risk_weight: int = Field(..., ge=0, le=10)
    level_applicability: LevelApplicability
    evidence_requirements: Tuple[str, ...] = ()
    related_controls: Tuple[str, ...] = ()  # May reference undefined ids
    version_introduced: str = "1.0"


class RevocationEvent(FixtureModel):
    date: str
    action: RevocationAction
    reason: str


class RegistryRecord(FixtureModel):
    """A certified system in the public registry."""
    certification_id: str
    organization: str
    system_name: str
    scope_statement: str
    certification_level: CertificationLevel
    certification_status: CertificationStatus
    monitoring_status: MonitoringStatus
    industry: str
    category: SystemCategory
    version_certified_under: str = "1.0"
    issue_date: str
    expiry_date: str
    revocation_history: Tuple[RevocationEvent, ...] = ()
    
    @property
    def is_verified(self) -> bool:
        """Active and Conditional certifications verify as valid."""
        return self.certification_status in (
            CertificationStatus.ACTIVE,
            CertificationStatus.CONDITIONAL,
        )


class StaticPageRecord(FixtureModel):
    """Entry of the fixed page catalog shown by the command palette."""
    title: str
    description: str
    url: str
