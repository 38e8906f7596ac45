# tests/test_approval.py
import pytest

from brand_review.models.report import ASSET_LABEL, EXTERNAL_LABEL, INTERNAL_LABEL, Issue
from brand_review.services.approval import resolve_approval


def _issue(message: str, area: str = INTERNAL_LABEL) -> Issue:
    return Issue(id=None, area=area, phrase="", penalty=1, severity="info", message=message, suggestion="")


@pytest.mark.parametrize("score,level", [(100, "green"), (85, "green"), (84, "yellow"),
                                         (70, "yellow"), (69, "red"), (0, "red")])
def test_risk_tier_boundaries(score, level):
    approval = resolve_approval(score, [])
    assert approval.risk_level == level
    assert approval.total_score == score


def test_default_and_escalation_approvers():
    assert resolve_approval(90, []).approver == "BU owner / brand"
    assert resolve_approval(75, []).approver == "BU owner / brand"
    red = resolve_approval(50, [])
    assert red.approver == "Regulatory / Sustainability / Brand"
    assert red.risk_label == "misaligned, escalate"


def test_sustainability_issue_stops_scan():
    issues = [
        _issue("Wording can look like GREENWASHING."),
        _issue("Regulatory exposure."),
        _issue("Logo misuse.", area=ASSET_LABEL),
    ]
    assert resolve_approval(60, issues).approver == "Sustainability lead"


def test_later_issues_override_earlier_ones():
    legal_then_asset = [_issue("Not legally sound."), _issue("Tiny logo.", area=ASSET_LABEL)]
    asset_then_legal = [_issue("Tiny logo.", area=ASSET_LABEL), _issue("Regulatory best practice.")]
    assert resolve_approval(80, legal_then_asset).approver == "Brand owner"
    assert resolve_approval(80, asset_then_legal).approver == "Regulatory / legal"


def test_override_before_early_exit():
    issues = [
        _issue("Coal imagery.", area=ASSET_LABEL),
        _issue("Clashes with sustainability positioning.", area=EXTERNAL_LABEL),
        _issue("Regulatory."),
    ]
    assert resolve_approval(80, issues).approver == "Sustainability lead"
