"""Serviços de aplicação.

Unidades puras e reutilizáveis (sem IO direto).
Implementações concretas de IO ficam em app/infra/.
"""

from app.services.payload_sanitizer import dropped_fields, has_persistable_fields, sanitize_payload
from app.services.profile_photo import DecodedPhoto, build_photo_path, decode_photo_data_url

__all__ = [
    "DecodedPhoto",
    "build_photo_path",
    "decode_photo_data_url",
    "dropped_fields",
    "has_persistable_fields",
    "sanitize_payload",
]
