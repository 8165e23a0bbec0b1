"""
File upload endpoint.

Accepts one image per request under the multipart field "file" and stores
it through the configured backend (local disk or S3).
"""

import logging
from typing import Optional
from fastapi import APIRouter, Depends, File, Form, UploadFile
from starlette.concurrency import run_in_threadpool

from sitecms.core.config import Settings
from sitecms.core.deps import get_settings, get_storage
from sitecms.core.errors import ServiceUnavailable, ValidationFailed
from sitecms.core.storage import StorageBackend, StorageError
from sitecms.schemas.image import UploadResponse

router = APIRouter(tags=["Uploads"])
logger = logging.getLogger(__name__)

ALLOWED_IMAGE_TYPES = {
    "image/jpeg",
    "image/png",
    "image/gif",
    "image/webp",
    "image/svg+xml",
    "image/avif",
}

READ_CHUNK_SIZE = 1024 * 1024


async def read_upload(file: UploadFile, max_bytes: int) -> bytes:
    """
    Read an uploaded file into memory, refusing anything over max_bytes.

    Raises:
        ValidationFailed (400): If the file exceeds the limit
    """
    chunks = []
    total = 0
    while True:
        chunk = await file.read(READ_CHUNK_SIZE)
        if not chunk:
            break
        total += len(chunk)
        if total > max_bytes:
            raise ValidationFailed(f"File too large. Maximum size is {max_bytes // (1024 * 1024)} MB")
        chunks.append(chunk)
    return b"".join(chunks)


@router.post("/upload", response_model=UploadResponse)
async def upload_file(
    file: Optional[UploadFile] = File(None),
    category: Optional[str] = Form(None),
    storage: Optional[StorageBackend] = Depends(get_storage),
    settings: Settings = Depends(get_settings)
):
    """
    Upload an image.

    Returns the public URL, the backend-assigned file name/key, and the
    category hint the caller sent (default "general"). Register the image
    with POST /api/images afterwards.

    Raises:
        400: No file, not an image, or over the size limit
        503: Storage backend not configured or failing
    """
    if file is None or not file.filename:
        raise ValidationFailed("No file uploaded")

    if file.content_type not in ALLOWED_IMAGE_TYPES:
        raise ValidationFailed(f"Only image files are allowed. Received: {file.content_type}")

    content = await read_upload(file, settings.max_upload_bytes)

    if storage is None:
        raise ServiceUnavailable("Upload storage is not configured")

    try:
        stored = await run_in_threadpool(storage.save, content, file.filename, file.content_type)
    except StorageError as e:
        raise ServiceUnavailable("Upload storage is unavailable", details=str(e))

    logger.info(f"Uploaded {file.filename} ({len(content)} bytes) to {storage.name}: {stored.url}")

    return UploadResponse(
        url=stored.url,
        filename=stored.id,
        id=stored.id,
        category=category or "general",
    )
