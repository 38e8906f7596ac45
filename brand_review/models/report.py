from datetime import datetime
from types import MappingProxyType
from typing import Dict, Literal, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator
from pydantic.alias_generators import to_camel

from brand_review.models.rules import Severity

INTERNAL_LABEL = "Internal (tone / technical / BU / legal)"
EXTERNAL_LABEL = "External (market / culture / ESG)"
ASSET_LABEL = "Asset fit (presentation / image / social)"

Bucket = Literal["internal", "external", "asset"]
Area = Literal[
    "Internal (tone / technical / BU / legal)",
    "External (market / culture / ESG)",
    "Asset fit (presentation / image / social)",
]
RiskLevel = Literal["green", "yellow", "red"]

AREA_LABELS: Dict[str, str] = {
    "internal": INTERNAL_LABEL,
    "external": EXTERNAL_LABEL,
    "asset": ASSET_LABEL,
}


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class Issue(_Record):
    id: Optional[str] = None
    area: Area
    phrase: str = ""
    penalty: int = Field(ge=0)
    severity: Severity
    message: str
    suggestion: str = ""

    @property
    def key(self) -> str:
        # ids are only unique per category; fall back to the phrase when absent
        return self.id or self.phrase


class Scores(_Record):
    internal: int = Field(ge=0, le=100)
    external: int = Field(ge=0, le=100)
    asset: int = Field(ge=0, le=100)
    total: int = Field(ge=0, le=100)


class Penalties(_Record):
    internal: int = Field(ge=0)
    external: int = Field(ge=0)
    asset: int = Field(ge=0)


class Evaluation(_Record):
    scores: Scores
    issues: Tuple[Issue, ...]
    penalties: Penalties


class Approval(_Record):
    approver: str
    risk_level: RiskLevel
    risk_label: str
    total_score: int


class Parameters(_Record):
    business_unit: str
    country: str
    asset_type: str
    content_type: str


class Statistics(_Record):
    total_issues: int
    by_severity: Mapping[str, int]
    by_area: Mapping[str, int]

    @field_validator("by_severity", "by_area", mode="after")
    @classmethod
    def _read_only(cls, v: Mapping[str, int]) -> Mapping[str, int]:
        return MappingProxyType(dict(v))

    @field_serializer("by_severity", "by_area")
    def _as_dict(self, v: Mapping[str, int]) -> Dict[str, int]:
        return dict(v)


class Analysis(_Record):
    timestamp: datetime
    parameters: Parameters
    original_content: str
    scores: Scores
    penalties: Penalties
    issues: Tuple[Issue, ...]
    approval: Approval
    suggested_rewrite: str
    statistics: Statistics
    rules_version: Optional[str] = None


class HistoryEntry(_Record):
    timestamp: datetime
    parameters: Parameters
    scores: Scores
    issue_count: int
    approval: Approval


class ScoreDelta(_Record):
    total: int
    internal: int
    external: int
    asset: int


class Comparison(_Record):
    score_difference: ScoreDelta
    issue_count_difference: int
    new_issues: Tuple[Issue, ...]
    resolved_issues: Tuple[Issue, ...]
