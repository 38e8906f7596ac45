from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import Response

from brand_review.api.deps import get_analyzer
from brand_review.core.errors import FormatError, NoAnalysisError
from brand_review.services.analyze import Analyzer

router = APIRouter(tags=["export"])


@router.get("/export")
def export(analyzer: Analyzer = Depends(get_analyzer)):
    last = analyzer.get_last()
    try:
        payload = analyzer.serialize(last)
    except NoAnalysisError as e:
        raise HTTPException(status_code=404, detail=str(e))
    stamp = last.timestamp.strftime("%Y-%m-%dT%H-%M-%S")
    filename = f"brand-analysis-{stamp}.json"
    return Response(
        content=payload,
        media_type="application/json",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.post("/import")
async def import_analysis(request: Request, analyzer: Analyzer = Depends(get_analyzer)):
    body = await request.body()
    try:
        analysis = analyzer.deserialize(body.decode("utf-8", errors="replace"))
    except FormatError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return analysis.model_dump(mode="json", by_alias=True)
