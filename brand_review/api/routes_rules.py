from fastapi import APIRouter, Depends, HTTPException

from brand_review.api.deps import get_analyzer
from brand_review.core.errors import NotLoadedError
from brand_review.services.analyze import Analyzer

router = APIRouter(tags=["rules"])


@router.get("/rules")
def rules(analyzer: Analyzer = Depends(get_analyzer)):
    try:
        return analyzer.repository.rules.summary()
    except NotLoadedError as e:
        raise HTTPException(status_code=503, detail=str(e))
