from __future__ import annotations
from datetime import date
from typing import Dict, Literal, Optional, Tuple

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

Severity = Literal["critical", "warning", "info"]


class _RuleModel(BaseModel):
    # rule documents keep camelCase keys; rule objects are read-only once loaded
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class Rule(_RuleModel):
    id: Optional[str] = None
    phrase: str = Field(min_length=1)
    penalty: int = Field(ge=0)
    severity: Severity
    message: str
    suggestion: str = ""

    @field_validator("phrase")
    @classmethod
    def _lower_phrase(cls, v: str) -> str:
        return v.lower()


class BusinessUnitRule(_RuleModel):
    """Fires once when none of the required terms appears in the text."""
    id: Optional[str] = None
    required: Tuple[str, ...] = Field(validation_alias=AliasChoices("required", "requiredTerms"))
    penalty: int = Field(ge=0)
    severity: Severity
    message: str
    suggestion: str = ""

    @field_validator("required")
    @classmethod
    def _lower_terms(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        return tuple(t.lower() for t in v)


class ContentTypeRule(_RuleModel):
    """Disclaimer requirement for a content type."""
    requires_disclaimer: bool = False
    disclaimer_keywords: Tuple[str, ...] = ()
    penalty: int = Field(ge=0)
    severity: Severity
    message: str
    suggestion: str = ""

    @field_validator("disclaimer_keywords")
    @classmethod
    def _lower_keywords(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        return tuple(k.lower() for k in v)


class RuleSet(_RuleModel):
    version: str
    last_updated: date
    brand_tone: Tuple[Rule, ...] = ()
    legal_claims: Tuple[Rule, ...] = ()
    sustainability: Tuple[Rule, ...] = ()
    technical: Tuple[Rule, ...] = ()
    cultural: Dict[str, Tuple[Rule, ...]] = Field(default_factory=dict)
    business_units: Dict[str, BusinessUnitRule] = Field(default_factory=dict)
    asset_types: Dict[str, Tuple[Rule, ...]] = Field(default_factory=dict)
    content_type_rules: Dict[str, ContentTypeRule] = Field(default_factory=dict)

    def summary(self) -> dict:
        return {
            "version": self.version,
            "lastUpdated": self.last_updated.isoformat(),
            "countries": sorted(self.cultural),
            "businessUnits": sorted(self.business_units),
            "assetTypes": sorted(self.asset_types),
            "contentTypes": sorted(self.content_type_rules),
            "ruleCount": self.rule_count(),
        }

    def rule_count(self) -> int:
        flat = len(self.brand_tone) + len(self.legal_claims) + len(self.sustainability) + len(self.technical)
        nested = sum(len(v) for v in self.cultural.values()) + sum(len(v) for v in self.asset_types.values())
        return flat + nested + len(self.business_units) + len(self.content_type_rules)
