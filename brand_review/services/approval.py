from __future__ import annotations
from typing import Sequence

from brand_review.core.config import GREEN_THRESHOLD, YELLOW_THRESHOLD
from brand_review.models.report import Approval, Issue

DEFAULT_APPROVER = "BU owner / brand"
ESCALATION_APPROVER = "Regulatory / Sustainability / Brand"
SUSTAINABILITY_APPROVER = "Sustainability lead"
LEGAL_APPROVER = "Regulatory / legal"
BRAND_APPROVER = "Brand owner"

RISK_LABELS = {
    "green": "aligned with brand, light review",
    "yellow": "partially aligned, 1–2 approvers",
    "red": "misaligned, escalate",
}


def risk_level(total_score: int) -> str:
    if total_score >= GREEN_THRESHOLD:
        return "green"
    if total_score >= YELLOW_THRESHOLD:
        return "yellow"
    return "red"


def resolve_approval(total_score: int, issues: Sequence[Issue]) -> Approval:
    level = risk_level(total_score)
    approver = ESCALATION_APPROVER if level == "red" else DEFAULT_APPROVER

    # later issues override earlier ones; a sustainability topic ends the scan
    for issue in issues:
        msg = issue.message.lower()
        if "regulatory" in msg or "legally" in msg:
            approver = LEGAL_APPROVER
        if "greenwashing" in msg or "sustainability" in msg:
            approver = SUSTAINABILITY_APPROVER
            break
        if "Asset fit" in issue.area:
            approver = BRAND_APPROVER

    return Approval(
        approver=approver,
        risk_level=level,
        risk_label=RISK_LABELS[level],
        total_score=total_score,
    )
