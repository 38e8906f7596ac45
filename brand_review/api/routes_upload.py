import logging
import os
from fastapi import APIRouter, UploadFile, File, HTTPException
from brand_review.core.config import DEFAULT_PARAMETERS
from brand_review.services.extract import extract_text, infer_asset_type, infer_content_type
from brand_review.utils.storage import spooled_upload

router = APIRouter(tags=["upload"])
log = logging.getLogger("upload")


@router.post("/upload")
async def upload(file: UploadFile = File(...)):
    filename = file.filename or ""
    async with spooled_upload(file) as path:
        try:
            content = extract_text(path)
        except ValueError as e:
            raise HTTPException(status_code=415, detail=str(e))
    log.info("Extracted %d chars from %s", len(content), filename)
    # fall back to the analyze default so the response can be posted to /analyze as-is
    asset_type = infer_asset_type(os.path.splitext(filename)[1]) or DEFAULT_PARAMETERS["assetType"]
    return {
        "filename": filename,
        "content": content,
        "assetType": asset_type,
        "contentType": infer_content_type(filename),
    }
