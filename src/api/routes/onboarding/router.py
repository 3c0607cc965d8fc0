"""Rotas de onboarding: conclusão e upload de foto de perfil."""

from __future__ import annotations

from typing import Annotated, Any, Literal

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, Field

from api.routes._errors import collaborator_errors
from app.bootstrap.dependencies import get_data_store
from app.domain.entity_fields import EntityType
from app.protocols import DataStoreProtocol
from app.use_cases import CompleteOnboardingUseCase, OnboardingStep, UploadProfilePhotoUseCase
from config.settings import get_supabase_settings
from utils.errors import RequestValidationError

router = APIRouter()

DataStore = Annotated[DataStoreProtocol, Depends(get_data_store)]

_STEP_FAILURES = {
    OnboardingStep.METADATA: "Failed to update user metadata",
    OnboardingStep.PROFILE: "Failed to upsert profile",
}


class CompleteOnboardingRequest(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    user_id: str | None = Field(default=None, alias="userId")
    metadata: dict[str, Any] | None = None
    profile: dict[str, Any] | None = None
    profile_type: Literal["customer", "contractor"] = Field(default="customer", alias="profileType")


class UploadProfilePhotoRequest(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    user_id: str | None = Field(default=None, alias="userId")
    data_url: str | None = Field(default=None, alias="dataUrl")
    file_name_hint: str | None = Field(default=None, alias="fileNameHint")


@router.post("/onboarding/complete")
async def complete_onboarding(
    body: CompleteOnboardingRequest, data_store: DataStore
) -> dict[str, Any]:
    """Atualiza metadata de auth e grava o perfil inicial."""
    if not body.user_id:
        raise RequestValidationError("userId is required")

    result = await CompleteOnboardingUseCase(data_store).execute(
        body.user_id,
        metadata=body.metadata,
        profile=body.profile,
        profile_type=EntityType(body.profile_type),
        guard=lambda step: collaborator_errors(_STEP_FAILURES[step]),
    )
    return result.as_dict()


@router.post("/onboarding/upload-profile-photo")
async def upload_profile_photo(
    body: UploadProfilePhotoRequest, data_store: DataStore
) -> dict[str, Any]:
    if not body.user_id:
        raise RequestValidationError("Invalid request: userId is required")
    if not body.data_url:
        raise RequestValidationError("Invalid request: dataUrl is required")

    supabase_settings = get_supabase_settings()
    use_case = UploadProfilePhotoUseCase(
        data_store,
        bucket=supabase_settings.profile_photos_bucket,
        max_bytes=supabase_settings.max_photo_bytes,
    )
    with collaborator_errors("Failed to upload photo to storage"):
        uploaded = await use_case.execute(body.user_id, body.data_url, body.file_name_hint)
    return {"success": True, **uploaded}
