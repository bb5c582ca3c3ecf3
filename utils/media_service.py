# utils/media_service.py
import io
from typing import NamedTuple

import cloudinary
import cloudinary.uploader
from flask import current_app

UPLOAD_FOLDER = "user_uploads"


class MediaUploadError(Exception):
    """Cloudinary rejected the upload or could not be reached."""


class MediaUpload(NamedTuple):
    url: str
    public_id: str


def init_media(app):
    cloudinary.config(
        cloud_name=app.config.get("CLOUDINARY_CLOUD_NAME"),
        api_key=app.config.get("CLOUDINARY_API_KEY"),
        api_secret=app.config.get("CLOUDINARY_API_SECRET"),
        secure=True,
    )
    if not app.config.get("CLOUDINARY_CLOUD_NAME"):
        app.logger.warning("CLOUDINARY_CLOUD_NAME is not set; image uploads will fail")


def upload_image(data: bytes) -> MediaUpload:
    """
    Upload raw image bytes to Cloudinary and block until it answers.
    Returns the public https URL plus the public_id Cloudinary assigned.
    Raises MediaUploadError on any provider or network failure.
    """
    try:
        result = cloudinary.uploader.upload(
            io.BytesIO(data),
            folder=UPLOAD_FOLDER,
            resource_type="auto",
        )
    except Exception as e:
        raise MediaUploadError(str(e)) from e

    current_app.logger.debug("Uploaded image public_id=%s", result.get("public_id"))
    return MediaUpload(url=result["secure_url"], public_id=result["public_id"])
