# =============================================================================
# lib/cloudinary_client.py - Cloudinary Asset Host Wrapper
# =============================================================================
# Uploads images to Cloudinary and asks it to pick quality and format
# automatically. Credentials travel with every call instead of through
# cloudinary.config(), so the SDK's global configuration stays untouched.
#
# Usage:
#   from lib.cloudinary_client import CloudinaryClient
#   host = CloudinaryClient.from_settings(settings)
#   asset = host.upload_image(content, "image/png")
# =============================================================================

from __future__ import annotations

import base64
import logging
from typing import Any

import cloudinary.uploader

logger = logging.getLogger(__name__)

# Let Cloudinary choose compression and output format per browser
AUTO_OPTIMIZE = [
    {"quality": "auto"},
    {"fetch_format": "auto"},
]


def to_data_uri(content: bytes, mimetype: str) -> str:
    """Encode raw bytes as a base64 data URI Cloudinary accepts as a file."""
    encoded = base64.b64encode(content).decode("ascii")
    return f"data:{mimetype};base64,{encoded}"


class CloudinaryClient:
    """Credentials plus target folder for Cloudinary uploads."""

    def __init__(self, cloud_name: str, api_key: str, api_secret: str, folder: str):
        self.cloud_name = cloud_name
        self.api_key = api_key
        self.api_secret = api_secret
        self.folder = folder

    @classmethod
    def from_settings(cls, settings: Any) -> CloudinaryClient | None:
        """Return a client, or None when the credential triple is incomplete."""
        if not settings.has_cloudinary_credentials:
            logger.warning("Cloudinary credentials missing; image uploads are disabled")
            return None

        return cls(
            cloud_name=settings.CLOUDINARY_CLOUD_NAME,
            api_key=settings.CLOUDINARY_API_KEY,
            api_secret=settings.CLOUDINARY_API_SECRET,
            folder=settings.CLOUDINARY_FOLDER,
        )

    def upload_image(self, content: bytes, mimetype: str) -> dict[str, Any]:
        """
        Upload one image.

        Returns:
            {"url", "public_id", "width", "height"} of the hosted asset

        Raises:
            Whatever the Cloudinary SDK raises; callers decide the response.
        """
        result = cloudinary.uploader.upload(
            to_data_uri(content, mimetype),
            folder=self.folder,
            resource_type="auto",
            transformation=AUTO_OPTIMIZE,
            cloud_name=self.cloud_name,
            api_key=self.api_key,
            api_secret=self.api_secret,
        )

        logger.info(f"Uploaded image to Cloudinary: {result.get('public_id')}")
        return {
            "url": result.get("secure_url"),
            "public_id": result.get("public_id"),
            "width": result.get("width"),
            "height": result.get("height"),
        }
