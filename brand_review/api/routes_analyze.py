from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from brand_review.api.deps import get_analyzer
from brand_review.core.config import DEFAULT_PARAMETERS
from brand_review.core.errors import EmptyContentError, NotLoadedError
from brand_review.models.report import Analysis
from brand_review.services.analyze import Analyzer
from brand_review.services.samples import SAMPLES

router = APIRouter(tags=["analyze"])


class AnalyzeRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    content: str
    business_unit: str = Field(default=DEFAULT_PARAMETERS["businessUnit"])
    country: str = Field(default=DEFAULT_PARAMETERS["country"])
    asset_type: str = Field(default=DEFAULT_PARAMETERS["assetType"])
    content_type: str = Field(default=DEFAULT_PARAMETERS["contentType"])


class CompareRequest(BaseModel):
    a: Analysis
    b: Analysis


@router.post("/analyze")
def analyze(req: AnalyzeRequest, analyzer: Analyzer = Depends(get_analyzer)):
    try:
        analysis = analyzer.analyze(
            req.content,
            business_unit=req.business_unit,
            country=req.country,
            asset_type=req.asset_type,
            content_type=req.content_type,
        )
    except EmptyContentError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except NotLoadedError as e:
        raise HTTPException(status_code=503, detail=str(e))
    return analysis.model_dump(mode="json", by_alias=True)


@router.get("/analysis/last")
def last_analysis(analyzer: Analyzer = Depends(get_analyzer)):
    analysis = analyzer.get_last()
    if analysis is None:
        raise HTTPException(status_code=404, detail="No analysis yet")
    return analysis.model_dump(mode="json", by_alias=True)


@router.post("/compare")
def compare(req: CompareRequest, analyzer: Analyzer = Depends(get_analyzer)):
    return analyzer.compare(req.a, req.b).model_dump(mode="json", by_alias=True)


@router.get("/samples")
def samples():
    return SAMPLES
