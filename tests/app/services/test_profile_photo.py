"""Testes da decodificação de data URL e do path da foto."""

from __future__ import annotations

import base64

import pytest

from app.services.profile_photo import (
    build_photo_path,
    decode_photo_data_url,
    extension_for_mime,
)
from utils.errors import PayloadTooLargeError, RequestValidationError


def _data_url(content: bytes, mime: str) -> str:
    return f"data:{mime};base64,{base64.b64encode(content).decode()}"


def test_decode_valid_png() -> None:
    photo = decode_photo_data_url(_data_url(b"png-bytes", "image/png"), max_bytes=1024)

    assert photo.content == b"png-bytes"
    assert photo.mime_type == "image/png"
    assert photo.extension == "png"


@pytest.mark.parametrize(
    "data_url",
    [
        "",
        "image/png;base64,AAAA",
        "data:image/png,AAAA",
        "data:image/png;base64,@@@not-base64@@@",
    ],
)
def test_malformed_data_url(data_url: str) -> None:
    with pytest.raises(RequestValidationError) as exc_info:
        decode_photo_data_url(data_url, max_bytes=1024)

    assert exc_info.value.message == "Invalid image data format"


def test_content_over_limit() -> None:
    with pytest.raises(PayloadTooLargeError) as exc_info:
        decode_photo_data_url(_data_url(b"x" * 11, "image/jpeg"), max_bytes=10)

    assert exc_info.value.status_code == 413
    assert exc_info.value.message == "Photo too large. Please choose an image under 10MB."


def test_content_at_limit_is_accepted() -> None:
    photo = decode_photo_data_url(_data_url(b"x" * 10, "image/jpeg"), max_bytes=10)

    assert len(photo.content) == 10


@pytest.mark.parametrize(
    ("mime", "extension"),
    [
        ("image/jpeg", "jpg"),
        ("image/PNG", "png"),
        ("image/webp", "webp"),
        ("image/gif", "gif"),
        ("image/heic", "jpg"),
    ],
)
def test_extension_for_mime(mime: str, extension: str) -> None:
    assert extension_for_mime(mime) == extension


def test_build_photo_path_sanitizes_hint() -> None:
    path = build_photo_path("u1", "png", "my photo/../x!", now_ms=1700000000000)

    assert path == "users/u1/my_photo____x_-1700000000000.png"


def test_build_photo_path_default_hint() -> None:
    assert build_photo_path("u1", "jpg", None, now_ms=5) == "users/u1/profile-5.jpg"
