from __future__ import annotations
import logging
import threading
from datetime import datetime, timezone
from typing import Dict, List, Optional, Sequence, Tuple

from pydantic import ValidationError

from brand_review.core.config import HISTORY_LIMIT, UNSPECIFIED
from brand_review.core.errors import EmptyContentError, FormatError, NoAnalysisError
from brand_review.models.report import (
    Analysis, Comparison, HistoryEntry, Issue, Parameters, ScoreDelta, Statistics,
)
from brand_review.services.approval import resolve_approval
from brand_review.services.repository import RuleRepository
from brand_review.services.rewrite import annotate

log = logging.getLogger("analyze")

SEVERITIES = ("critical", "warning", "info")


def calculate_statistics(issues: Sequence[Issue]) -> Statistics:
    by_severity: Dict[str, int] = {s: 0 for s in SEVERITIES}
    by_area: Dict[str, int] = {}
    for issue in issues:
        by_severity[issue.severity] += 1
        by_area[issue.area] = by_area.get(issue.area, 0) + 1
    return Statistics(total_issues=len(issues), by_severity=by_severity, by_area=by_area)


def find_new_issues(old: Sequence[Issue], new: Sequence[Issue]) -> Tuple[Issue, ...]:
    """Issues in `new` whose id (or phrase, when id is absent) is not in `old`."""
    seen = {i.key for i in old}
    return tuple(i for i in new if i.key not in seen)


class Analyzer:
    """
    Runs evaluation -> approval -> rewrite for a piece of content and keeps
    the last analysis plus a bounded, newest-first history of summaries.
    """

    def __init__(self, repository: RuleRepository, history_limit: int = HISTORY_LIMIT):
        self.repository = repository
        # never more than HISTORY_LIMIT entries
        self.history_limit = min(history_limit, HISTORY_LIMIT)
        self._lock = threading.Lock()
        self._last: Optional[Analysis] = None
        self._history: List[HistoryEntry] = []

    def analyze(
        self,
        content: str,
        business_unit: str = UNSPECIFIED,
        country: str = UNSPECIFIED,
        asset_type: str = UNSPECIFIED,
        content_type: str = UNSPECIFIED,
    ) -> Analysis:
        if not content or not content.strip():
            raise EmptyContentError("Content is required for analysis")

        evaluation = self.repository.evaluate(content, business_unit, country, asset_type, content_type)
        approval = resolve_approval(evaluation.scores.total, evaluation.issues)
        rewrite = annotate(content, evaluation.issues)

        analysis = Analysis(
            timestamp=datetime.now(timezone.utc),
            parameters=Parameters(
                business_unit=business_unit,
                country=country,
                asset_type=asset_type,
                content_type=content_type,
            ),
            original_content=content,
            scores=evaluation.scores,
            penalties=evaluation.penalties,
            issues=evaluation.issues,
            approval=approval,
            suggested_rewrite=rewrite,
            statistics=calculate_statistics(evaluation.issues),
            rules_version=self.repository.version,
        )
        log.info(
            "Analysis done bu=%s country=%s score=%d issues=%d risk=%s",
            business_unit, country, analysis.scores.total, len(analysis.issues), approval.risk_level,
        )

        with self._lock:
            self._last = analysis
            self._add_to_history(analysis)
        return analysis

    def _add_to_history(self, analysis: Analysis) -> None:
        entry = HistoryEntry(
            timestamp=analysis.timestamp,
            parameters=analysis.parameters,
            scores=analysis.scores,
            issue_count=len(analysis.issues),
            approval=analysis.approval,
        )
        self._history.insert(0, entry)
        del self._history[self.history_limit:]

    def get_last(self) -> Optional[Analysis]:
        return self._last

    def get_history(self) -> List[HistoryEntry]:
        with self._lock:
            return list(self._history)

    def clear_history(self) -> None:
        with self._lock:
            self._history.clear()

    def compare(self, a: Analysis, b: Analysis) -> Comparison:
        """Deltas are b minus a; new issues are in b only, resolved ones in a only."""
        return Comparison(
            score_difference=ScoreDelta(
                total=b.scores.total - a.scores.total,
                internal=b.scores.internal - a.scores.internal,
                external=b.scores.external - a.scores.external,
                asset=b.scores.asset - a.scores.asset,
            ),
            issue_count_difference=len(b.issues) - len(a.issues),
            new_issues=find_new_issues(a.issues, b.issues),
            resolved_issues=find_new_issues(b.issues, a.issues),
        )

    def serialize(self, analysis: Optional[Analysis] = None) -> str:
        data = analysis or self._last
        if data is None:
            raise NoAnalysisError("No analysis to export")
        return data.model_dump_json(by_alias=True, indent=2)

    def deserialize(self, text: str) -> Analysis:
        try:
            analysis = Analysis.model_validate_json(text)
        except ValidationError as e:
            raise FormatError("Invalid analysis format") from e
        with self._lock:
            self._last = analysis
        return analysis
