from __future__ import annotations

import cloudinary.exceptions
import pytest

from eventhub.errors import UploadError
from eventhub.media.cloudinary import CloudinaryUploader


def _uploader(**overrides):
    kwargs = dict(cloud_name="demo", api_key="123456", api_secret="s3cr3t", folder="EventHub")
    kwargs.update(overrides)
    return CloudinaryUploader(**kwargs)


def test_upload_returns_secure_url(fake_cloudinary):
    calls = fake_cloudinary(
        lambda file, options: {"secure_url": "https://res.cloudinary.com/demo/image/upload/v1/EventHub/cover.png"}
    )

    url = _uploader().upload(b"png-bytes", filename="cover.png")

    assert url == "https://res.cloudinary.com/demo/image/upload/v1/EventHub/cover.png"
    assert calls[0]["file"].read() == b"png-bytes"
    opts = calls[0]["options"]
    assert opts["folder"] == "EventHub"
    assert opts["resource_type"] == "image"
    assert opts["cloud_name"] == "demo"
    assert opts["api_key"] == "123456"
    assert opts["api_secret"] == "s3cr3t"


def test_upload_sdk_error_becomes_upload_error(fake_cloudinary):
    def mapper(file, options):
        raise cloudinary.exceptions.AuthorizationRequired("Invalid Signature")

    fake_cloudinary(mapper)

    with pytest.raises(UploadError) as exc:
        _uploader().upload(b"png-bytes")
    assert "Invalid Signature" in str(exc.value)


def test_upload_without_secure_url(fake_cloudinary):
    fake_cloudinary(lambda file, options: {"public_id": "EventHub/cover"})

    with pytest.raises(UploadError):
        _uploader().upload(b"png-bytes")


def test_upload_requires_credentials(fake_cloudinary):
    calls = fake_cloudinary(lambda file, options: {"secure_url": "https://x"})

    with pytest.raises(UploadError):
        _uploader(api_secret=None).upload(b"png-bytes")
    assert calls == []
