# controllers/user_controller.py
import time
from datetime import datetime, timezone
from typing import Optional

from flask import current_app

from db.database import get_store
from models.user import REQUIRED_FIELDS, UserRecord
from utils.media_service import upload_image


class UserRequestError(Exception):
    """Client-side problem with a request; carries the HTTP status to answer with."""

    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def validate_submission(fields: dict, image: Optional[bytes]):
    """
    Fields first, in REQUIRED_FIELDS order, then the image.
    Stops at the first problem instead of collecting all of them.
    """
    for field in REQUIRED_FIELDS:
        if not fields.get(field):
            raise UserRequestError(f"{field} is required")

    if not image:
        raise UserRequestError("Image is required")


def _now_iso() -> str:
    # e.g. 2024-05-01T10:20:30.123Z
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def build_record(fields: dict, image_url: str, image_public_id: str) -> dict:
    user_id = str(int(time.time() * 1000))
    record = {"id": user_id}
    record.update(fields)
    # system-derived values always win over submitted ones
    record.update(
        id=user_id,
        fatherNic=fields.get("fatherCnic") or None,
        imageUrl=image_url,
        imagePublicId=image_public_id,
        createdAt=_now_iso(),
    )
    return UserRecord(**record).to_dict()


# ---- Main controller ----
def create_user(fields: dict, image: Optional[bytes]) -> dict:
    """
    Validates the submission, uploads the image, then appends the record.
    May raise UserRequestError (400), MediaUploadError, or an OSError from
    the store write. An image uploaded before a failed write stays hosted.
    """
    validate_submission(fields, image)

    uploaded = upload_image(image)
    user = build_record(fields, uploaded.url, uploaded.public_id)

    get_store().append(user)
    current_app.logger.info("Created user id=%s cnic=%s", user["id"], user["cnic"])
    return user


def get_user(cnic: str) -> dict:
    user = get_store().find_by_cnic(cnic)
    if user is None:
        raise UserRequestError("User not found", status_code=404)
    return user
