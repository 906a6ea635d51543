# =============================================================================
# app/routers/upload.py - Image Upload
# =============================================================================
# Accepts one image, validates it, and forwards it to Cloudinary.
# Nothing is stored locally and failed uploads are not retried.
# =============================================================================

import logging

from fastapi import APIRouter, Depends, Request
from starlette.datastructures import UploadFile

from app.auth import CurrentUser
from app.config import settings
from app.dependencies import get_cloudinary_client
from app.exceptions import (
    AssetUploadError,
    BackendNotConfiguredError,
    FileTooLargeError,
    InvalidFileTypeError,
    MissingFileError,
)
from lib.cloudinary_client import CloudinaryClient

logger = logging.getLogger(__name__)

router = APIRouter()


# Multipart body documented by hand: the form is parsed inside the handler
UPLOAD_REQUEST_BODY = {
    "requestBody": {
        "required": True,
        "content": {
            "multipart/form-data": {
                "schema": {
                    "type": "object",
                    "properties": {"image": {"type": "string", "format": "binary"}},
                    "required": ["image"],
                }
            }
        },
    }
}


@router.post("", openapi_extra=UPLOAD_REQUEST_BODY)
async def upload_image(
    request: Request,
    user: CurrentUser,
    host: CloudinaryClient | None = Depends(get_cloudinary_client),
):
    """
    Upload an image to the asset host.

    This endpoint:
    1. Validates the file (present, image/* type, size limit)
    2. Uploads it to Cloudinary with automatic quality and format
    3. Returns the hosted URL, public id and dimensions

    The multipart body is only read once the caller is authenticated;
    a File() parameter would be parsed before CurrentUser resolves.
    """
    async with request.form(max_files=1) as form:
        # =====================================================================
        # 1. Validate File
        # =====================================================================

        image = form.get("image")
        if not isinstance(image, UploadFile):
            raise MissingFileError()

        content_type = image.content_type or ""
        if not content_type.startswith("image/"):
            raise InvalidFileTypeError(content_type or None)

        content = await image.read()
        size_bytes = len(content)
        if size_bytes > settings.max_upload_size_bytes:
            raise FileTooLargeError(size_bytes / (1024 * 1024), settings.MAX_UPLOAD_SIZE_MB)

        logger.info(f"Processing upload: {image.filename} ({size_bytes} bytes, {content_type})")

    # =========================================================================
    # 2. Upload to Cloudinary
    # =========================================================================

    if host is None:
        raise BackendNotConfiguredError("Cloudinary")

    try:
        return host.upload_image(content, content_type)
    except Exception as e:
        logger.error(f"Cloudinary upload error: {e}")
        raise AssetUploadError(str(e) or "Failed to upload image")
