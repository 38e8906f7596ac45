import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from brand_review.api.routes_analyze import router as analyze_router
from brand_review.api.routes_export import router as export_router
from brand_review.api.routes_history import router as history_router
from brand_review.api.routes_rules import router as rules_router
from brand_review.api.routes_upload import router as upload_router
from brand_review.core import config
from brand_review.middleware.limits import BodySizeLimitMiddleware
from brand_review.services.analyze import Analyzer
from brand_review.services.repository import RuleRepository

log = logging.getLogger("main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    repository = RuleRepository()
    await repository.aload(config.RULES_URL or config.RULES_PATH)
    app.state.analyzer = Analyzer(repository, history_limit=config.HISTORY_LIMIT)
    log.info("Brand review ready (rules %s)", repository.version)
    yield


app = FastAPI(title="BrandReview", lifespan=lifespan)

app.add_middleware(BodySizeLimitMiddleware)


@app.get("/health")
def health():
    return {"status": "ok"}


app.include_router(rules_router)
app.include_router(analyze_router)
app.include_router(history_router)
app.include_router(export_router)
app.include_router(upload_router)
