from __future__ import annotations
import re
from typing import Sequence

from brand_review.models.report import Issue


def marker(suggestion: str) -> str:
    return f" [→ {suggestion}]"


def annotate(original_text: str, issues: Sequence[Issue]) -> str:
    """
    Insert a suggestion marker after every case-insensitive occurrence of each
    issue phrase. Issues are applied in order against the text as annotated so
    far, so a later phrase may also match inside an earlier marker.
    """
    updated = original_text
    for issue in issues:
        if not issue.phrase:
            continue
        pattern = re.compile(re.escape(issue.phrase), re.IGNORECASE)
        tail = marker(issue.suggestion)
        # callable replacement keeps backslashes in suggestions literal
        updated = pattern.sub(lambda m: m.group(0) + tail, updated)
    return updated
