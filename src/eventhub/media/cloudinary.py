# eventhub/media/cloudinary.py
from __future__ import annotations

import io
import logging
from typing import Optional

import cloudinary.exceptions
import cloudinary.uploader

from eventhub import config
from eventhub.errors import UploadError

logger = logging.getLogger(__name__)


class CloudinaryUploader:
    """Image uploads through the Cloudinary SDK, with credentials passed per call."""

    def __init__(
        self,
        cloud_name: Optional[str],
        api_key: Optional[str],
        api_secret: Optional[str],
        folder: str = "EventHub",
    ) -> None:
        self.cloud_name = cloud_name
        self.api_key = api_key
        self.api_secret = api_secret
        self.folder = folder

    @classmethod
    def from_config(cls) -> "CloudinaryUploader":
        return cls(
            cloud_name=config.CLOUDINARY_CLOUD_NAME,
            api_key=config.CLOUDINARY_API_KEY,
            api_secret=config.CLOUDINARY_API_SECRET,
            folder=config.CLOUDINARY_FOLDER,
        )

    def upload(self, data: bytes, filename: str = "upload") -> str:
        """Upload raw image bytes and return the hosted `secure_url`."""
        if not (self.cloud_name and self.api_key and self.api_secret):
            raise UploadError("Cloudinary credentials are not set")

        try:
            result = cloudinary.uploader.upload(
                io.BytesIO(data),
                folder=self.folder,
                resource_type="image",
                cloud_name=self.cloud_name,
                api_key=self.api_key,
                api_secret=self.api_secret,
            )
        except cloudinary.exceptions.Error as e:
            logger.error("Cloudinary upload of %s failed: %s", filename, e)
            raise UploadError(f"Image upload failed: {e}") from e

        url = result.get("secure_url") if isinstance(result, dict) else None
        if not url:
            raise UploadError("Image upload failed: no secure_url in response")
        logger.info("uploaded %s to %s", filename, url)
        return url
