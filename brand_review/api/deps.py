from fastapi import Request

from brand_review.services.analyze import Analyzer


def get_analyzer(request: Request) -> Analyzer:
    return request.app.state.analyzer
