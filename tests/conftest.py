# tests/conftest.py
import io

import pytest

from app import create_app
from utils.media_service import MediaUpload

VALID_FIELDS = {
    "country": "PK",
    "city": "Lahore",
    "course": "CS101",
    "proficiency": "beginner",
    "fullName": "A B",
    "fatherName": "C D",
    "email": "a@b.com",
    "cnic": "12345",
    "phone": "0300",
    "dob": "2000-01-01",
    "gender": "M",
    "qualification": "BS",
    "hasLaptop": "yes",
}


class FakeUploader:
    """Stands in for Cloudinary; remembers what it was asked to upload."""

    def __init__(self):
        self.calls = []
        self.error = None

    def __call__(self, data):
        if self.error is not None:
            raise self.error
        self.calls.append(data)
        n = len(self.calls)
        return MediaUpload(
            url=f"https://res.cloudinary.com/demo/image/upload/user_uploads/img{n}.jpg",
            public_id=f"user_uploads/img{n}",
        )


@pytest.fixture
def data_file(tmp_path):
    return tmp_path / "data.json"


@pytest.fixture
def uploader(monkeypatch):
    fake = FakeUploader()
    monkeypatch.setattr("controllers.user_controller.upload_image", fake)
    return fake


@pytest.fixture
def app(data_file, uploader):
    app = create_app({
        "TESTING": True,
        "DATA_FILE": str(data_file),
        "CLOUDINARY_CLOUD_NAME": "demo",
        "CLOUDINARY_API_KEY": "key",
        "CLOUDINARY_API_SECRET": "secret",
    })
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def jpeg_bytes():
    # JPEG SOI marker followed by ~10KB of padding
    return b"\xff\xd8\xff\xe0" + b"\x00" * 10 * 1024


@pytest.fixture
def make_form(jpeg_bytes):
    def _make(fields=None, image=True, mimetype="image/jpeg", payload=None):
        form = dict(VALID_FIELDS if fields is None else fields)
        if image:
            body = jpeg_bytes if payload is None else payload
            form["image"] = (io.BytesIO(body), "photo.jpg", mimetype)
        return form
    return _make
