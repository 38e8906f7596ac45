from __future__ import annotations
from typing import List, Optional, Sequence, Tuple

from brand_review.models.report import AREA_LABELS, Evaluation, Issue, Penalties, Scores
from brand_review.models.rules import BusinessUnitRule, ContentTypeRule, Rule, RuleSet

Check = Tuple[int, List[Issue]]


def phrase_issues(rules: Sequence[Rule], text: str, bucket: str) -> Check:
    """Literal substring check of every rule phrase against lower-cased text."""
    penalty = 0
    issues: List[Issue] = []
    for rule in rules:
        if rule.phrase in text:
            penalty += rule.penalty
            issues.append(Issue(
                id=rule.id,
                area=AREA_LABELS[bucket],
                phrase=rule.phrase,
                penalty=rule.penalty,
                severity=rule.severity,
                message=rule.message,
                suggestion=rule.suggestion,
            ))
    return penalty, issues


def business_unit_issues(rule: Optional[BusinessUnitRule], text: str) -> Check:
    if rule is None or any(term in text for term in rule.required):
        return 0, []
    issue = Issue(
        id=rule.id,
        area=AREA_LABELS["internal"],
        phrase="",
        penalty=rule.penalty,
        severity=rule.severity,
        message=rule.message,
        suggestion=rule.suggestion,
    )
    return rule.penalty, [issue]


def disclaimer_issues(rule: Optional[ContentTypeRule], text: str) -> Check:
    if rule is None or not rule.requires_disclaimer:
        return 0, []
    if any(keyword in text for keyword in rule.disclaimer_keywords):
        return 0, []
    issue = Issue(
        id=None,
        area=AREA_LABELS["external"],
        phrase="",
        penalty=rule.penalty,
        severity=rule.severity,
        message=rule.message,
        suggestion=rule.suggestion,
    )
    return rule.penalty, [issue]


def bucket_score(penalty: int) -> int:
    return max(0, 100 - penalty)


def compute_scores(penalties: Penalties) -> Scores:
    internal = bucket_score(penalties.internal)
    external = bucket_score(penalties.external)
    asset = bucket_score(penalties.asset)
    # a sum of integers over 3 never lands on .5, so round() is exact here
    total = round((internal + external + asset) / 3)
    return Scores(internal=internal, external=external, asset=asset, total=total)


def evaluate(
    rule_set: RuleSet,
    text: str,
    business_unit: str,
    country: str,
    asset_type: str,
    content_type: str,
) -> Evaluation:
    """
    Run every applicable rule category over `text` in a fixed order:
    brand tone, legal claims, sustainability, technical, cultural,
    business unit, asset type, content-type disclaimer.
    Issue order follows that sequence.
    """
    lower = text.lower()
    checks: List[Tuple[str, Check]] = [
        ("internal", phrase_issues(rule_set.brand_tone, lower, "internal")),
        ("internal", phrase_issues(rule_set.legal_claims, lower, "internal")),
        ("external", phrase_issues(rule_set.sustainability, lower, "external")),
        ("internal", phrase_issues(rule_set.technical, lower, "internal")),
        ("external", phrase_issues(rule_set.cultural.get(country, ()), lower, "external")),
        ("internal", business_unit_issues(rule_set.business_units.get(business_unit), lower)),
        ("asset", phrase_issues(rule_set.asset_types.get(asset_type, ()), lower, "asset")),
        ("external", disclaimer_issues(rule_set.content_type_rules.get(content_type), lower)),
    ]

    sums = {"internal": 0, "external": 0, "asset": 0}
    issues: List[Issue] = []
    for bucket, (penalty, found) in checks:
        sums[bucket] += penalty
        issues.extend(found)

    penalties = Penalties(**sums)
    return Evaluation(scores=compute_scores(penalties), issues=tuple(issues), penalties=penalties)
