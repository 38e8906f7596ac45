from starlette.requests import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse
from brand_review.core import config


class BodySizeLimitMiddleware(BaseHTTPMiddleware):
    """Rejects uploads and analysis payloads above MAX_UPLOAD_BYTES."""

    async def dispatch(self, request: Request, call_next):
        cl = request.headers.get("content-length")
        try:
            too_large = cl is not None and int(cl) > config.MAX_UPLOAD_BYTES
        except ValueError:
            return JSONResponse({"detail": "Bad Content-Length"}, status_code=400)
        if too_large:
            return JSONResponse({"detail": "Payload too large"}, status_code=413)
        return await call_next(request)
