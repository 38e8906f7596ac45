import logging
import os
import tempfile
from contextlib import asynccontextmanager
from typing import AsyncIterator

import magic
from fastapi import HTTPException, UploadFile

from brand_review.core import config

log = logging.getLogger("upload")


def _check_extension(filename: str) -> str:
    ext = os.path.splitext(filename)[1].lower()
    if ext not in config.ALLOWED_EXTENSIONS:
        allowed = ", ".join(sorted(config.ALLOWED_EXTENSIONS))
        raise HTTPException(status_code=400, detail=f"Only {allowed} allowed")
    return ext


@asynccontextmanager
async def spooled_upload(file: UploadFile) -> AsyncIterator[str]:
    """
    Write the upload to a temporary file carrying its extension, check its
    MIME type and yield the path. The file is removed on exit.
    """
    ext = _check_extension(file.filename or "")
    fd, tmp_path = tempfile.mkstemp(suffix=ext)
    try:
        with os.fdopen(fd, "wb") as tmp:
            while True:
                chunk = await file.read(1 << 20)  # 1 MB
                if not chunk:
                    break
                tmp.write(chunk)

        file_mime = magic.Magic(mime=True).from_file(tmp_path)
        if file_mime not in config.MIME_ALLOW[ext]:
            raise HTTPException(status_code=400, detail=f"Unexpected MIME type: {file_mime} for {ext}")
        yield tmp_path
    finally:
        try:
            os.remove(tmp_path)
        except FileNotFoundError:
            log.warning("Temporary upload %s already removed", tmp_path)
