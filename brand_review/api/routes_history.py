from fastapi import APIRouter, Depends

from brand_review.api.deps import get_analyzer
from brand_review.services.analyze import Analyzer

router = APIRouter(tags=["history"])


@router.get("/history")
def history(analyzer: Analyzer = Depends(get_analyzer)):
    return [h.model_dump(mode="json", by_alias=True) for h in analyzer.get_history()]


@router.delete("/history")
def clear_history(analyzer: Analyzer = Depends(get_analyzer)):
    analyzer.clear_history()
    return {"status": "cleared"}
