# app/upload_router.py
import logging
import random
import shutil
import time
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Request, UploadFile, File, HTTPException

from app.config import UPLOAD_DIR

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["upload"])


def random_filename(original: str) -> str:
    """<epoch millis>-<random><original extension>, e.g. 1729330000000-48213377.png"""
    ext = Path(original or "").suffix.lower()
    return f"{int(time.time() * 1000)}-{random.randint(0, 10 ** 9)}{ext}"


@router.post("/upload")
def upload_file(request: Request, file: Optional[UploadFile] = File(None)):
    if file is None or not file.filename:
        raise HTTPException(status_code=400, detail="No file uploaded")

    filename = random_filename(file.filename)
    dest = UPLOAD_DIR / filename
    try:
        with dest.open("wb") as fh:
            shutil.copyfileobj(file.file, fh)
    except OSError:
        logger.exception("Could not store upload %s", dest)
        raise HTTPException(status_code=500, detail="Failed to store file")
    finally:
        file.file.close()

    logger.info("Stored upload %s as %s", file.filename, filename)
    return {"publicUrl": f"{request.base_url}uploads/{filename}"}
