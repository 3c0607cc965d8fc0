"""Use cases de onboarding: conclusão (metadata + perfil) e foto de perfil."""

from __future__ import annotations

import logging
from contextlib import nullcontext
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Any

from app.domain.entity_fields import OWNER_FIELD, PROFILE_TABLES, EntityType
from app.observability import get_correlation_id
from app.services.payload_sanitizer import has_persistable_fields
from app.services.profile_photo import build_photo_path, decode_photo_data_url
from app.use_cases.profiles import sanitize_profile

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping
    from contextlib import AbstractContextManager

    from app.protocols import DataStoreProtocol

logger = logging.getLogger(__name__)


class OnboardingStep(StrEnum):
    """Etapas da conclusão de onboarding, na ordem em que rodam."""

    METADATA = "metadata"
    PROFILE = "profile"


@dataclass(slots=True)
class OnboardingResult:
    """Resultado da conclusão de onboarding."""

    metadata_updated: bool = False
    profile_updated: bool = False
    updated_user_metadata: dict[str, Any] | None = None
    profile_data: dict[str, Any] | None = None

    def as_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {
            "success": True,
            "metadataUpdated": self.metadata_updated,
            "profileUpdated": self.profile_updated,
        }
        if self.updated_user_metadata is not None:
            body["updatedUserMetadata"] = self.updated_user_metadata
        if self.profile_data is not None:
            body["profileData"] = self.profile_data
        return body


class CompleteOnboardingUseCase:
    """Atualiza metadata do usuário e faz upsert do perfil inicial.

    Cada parte só roda quando o mapeamento correspondente não é vazio.
    Falha na metadata interrompe antes do perfil. `guard` envolve cada
    etapa (a rota traduz a falha com a mensagem da etapa).
    """

    def __init__(self, data_store: DataStoreProtocol) -> None:
        self._data_store = data_store

    async def execute(
        self,
        user_id: str,
        *,
        metadata: Mapping[str, Any] | None,
        profile: Mapping[str, Any] | None,
        profile_type: EntityType,
        guard: Callable[[OnboardingStep], AbstractContextManager[Any]] | None = None,
    ) -> OnboardingResult:
        step_guard = guard or _unguarded
        result = OnboardingResult()

        if metadata:
            with step_guard(OnboardingStep.METADATA):
                result.updated_user_metadata = await self._data_store.update_user_metadata(
                    user_id, dict(metadata)
                )
            result.metadata_updated = True

        if profile:
            sanitized = sanitize_profile(profile, profile_type, user_id)
            if has_persistable_fields(sanitized):
                with step_guard(OnboardingStep.PROFILE):
                    result.profile_data = await self._data_store.upsert_row(
                        PROFILE_TABLES[profile_type], sanitized, on_conflict=OWNER_FIELD
                    )
                result.profile_updated = True

        logger.info(
            "onboarding_completed",
            extra={
                "component": "onboarding",
                "profile_type": str(profile_type),
                "metadata_updated": result.metadata_updated,
                "profile_updated": result.profile_updated,
                "correlation_id": get_correlation_id(),
            },
        )
        return result


def _unguarded(step: OnboardingStep) -> AbstractContextManager[Any]:
    return nullcontext()


class UploadProfilePhotoUseCase:
    """Decodifica a data URL, envia ao storage e devolve URL pública."""

    def __init__(self, data_store: DataStoreProtocol, *, bucket: str, max_bytes: int) -> None:
        self._data_store = data_store
        self._bucket = bucket
        self._max_bytes = max_bytes

    async def execute(
        self,
        user_id: str,
        data_url: str,
        file_name_hint: str | None = None,
    ) -> dict[str, Any]:
        """Faz upload da foto.

        Returns:
            `{"url": <url pública>, "path": <path no bucket>}`
        """
        photo = decode_photo_data_url(data_url, max_bytes=self._max_bytes)
        path = build_photo_path(user_id, photo.extension, file_name_hint)
        stored_path = await self._data_store.upload_file(
            self._bucket, path, photo.content, content_type=photo.mime_type
        )
        url = self._data_store.public_url(self._bucket, stored_path)
        logger.info(
            "profile_photo_uploaded",
            extra={
                "component": "onboarding",
                "size_bytes": len(photo.content),
                "extension": photo.extension,
                "correlation_id": get_correlation_id(),
            },
        )
        return {"url": url, "path": stored_path}
