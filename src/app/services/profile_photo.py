"""Decodificação e nomeação de fotos de perfil enviadas como data URL."""

from __future__ import annotations

import base64
import binascii
import re
import time
from dataclasses import dataclass

from utils.errors import PayloadTooLargeError, RequestValidationError

_DATA_URL_PATTERN = re.compile(r"^data:(.*?);base64,(.*)$", re.DOTALL)
_HINT_UNSAFE_CHARS = re.compile(r"[^a-z0-9\-]", re.IGNORECASE)

_MIME_EXTENSIONS = {
    "image/jpeg": "jpg",
    "image/jpg": "jpg",
    "image/png": "png",
    "image/gif": "gif",
    "image/webp": "webp",
}
DEFAULT_EXTENSION = "jpg"
DEFAULT_FILE_HINT = "profile"
PHOTO_TOO_LARGE_MESSAGE = "Photo too large. Please choose an image under 10MB."


@dataclass(frozen=True, slots=True)
class DecodedPhoto:
    """Foto decodificada pronta para upload."""

    content: bytes
    mime_type: str
    extension: str


def decode_photo_data_url(data_url: str, *, max_bytes: int) -> DecodedPhoto:
    """Decodifica `data:<mime>;base64,<dados>`.

    Raises:
        RequestValidationError: data URL malformada ou base64 inválido
        PayloadTooLargeError: conteúdo decodificado acima de `max_bytes`
    """
    match = _DATA_URL_PATTERN.match(data_url or "")
    if match is None:
        raise RequestValidationError("Invalid image data format")

    mime_type = match.group(1) or "application/octet-stream"
    try:
        content = base64.b64decode(match.group(2), validate=True)
    except (binascii.Error, ValueError) as exc:
        raise RequestValidationError(
            "Invalid image data format", details="Image payload is not valid base64"
        ) from exc

    if len(content) > max_bytes:
        raise PayloadTooLargeError(PHOTO_TOO_LARGE_MESSAGE)

    return DecodedPhoto(
        content=content,
        mime_type=mime_type,
        extension=extension_for_mime(mime_type),
    )


def extension_for_mime(mime_type: str) -> str:
    """Extensão do arquivo a partir do MIME; desconhecido vira jpg."""
    return _MIME_EXTENSIONS.get(mime_type.lower(), DEFAULT_EXTENSION)


def build_photo_path(
    user_id: str,
    extension: str,
    file_name_hint: str | None = None,
    *,
    now_ms: int | None = None,
) -> str:
    """Monta `users/<userId>/<hint>-<epoch ms>.<ext>` com hint higienizado."""
    hint = _HINT_UNSAFE_CHARS.sub("_", file_name_hint or DEFAULT_FILE_HINT)
    timestamp = now_ms if now_ms is not None else int(time.time() * 1000)
    return f"users/{user_id}/{hint}-{timestamp}.{extension}"
