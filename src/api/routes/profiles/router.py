"""Rotas de perfil: upsert e leitura por `user_id`.

Mesmo par de rotas para clientes (`/customers`) e prestadores
(`/contractors`), montado por `_register_profile_routes`.
"""

from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, Field

from api.routes._errors import collaborator_errors
from app.bootstrap.dependencies import get_data_store
from app.domain.entity_fields import OWNER_FIELD, PROFILE_TABLES, EntityType
from app.protocols import DataStoreProtocol
from app.use_cases import SaveProfileUseCase
from utils.errors import RequestValidationError

router = APIRouter()

DataStore = Annotated[DataStoreProtocol, Depends(get_data_store)]


class SaveProfileRequest(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    user_id: str | None = Field(default=None, alias="userId")
    profile: dict[str, Any] | None = None


def _register_profile_routes(prefix: str, entity_type: EntityType) -> None:
    label = entity_type.value.capitalize()

    async def save_profile(body: SaveProfileRequest, data_store: DataStore) -> dict[str, Any]:
        if not body.user_id or body.profile is None:
            raise RequestValidationError(
                "Invalid request payload", details="userId and profile are required"
            )
        with collaborator_errors(f"Failed to upsert {entity_type.value} profile"):
            row = await SaveProfileUseCase(data_store).execute(
                entity_type, body.user_id, body.profile
            )
        return {"success": True, "profile": row}

    async def get_profile(user_id: str, data_store: DataStore) -> dict[str, Any]:
        with collaborator_errors(
            f"Failed to fetch {entity_type.value} profile",
            not_found=f"{label} profile not found",
        ):
            row = await data_store.fetch_one(PROFILE_TABLES[entity_type], OWNER_FIELD, user_id)
        return {"success": True, "profile": row}

    router.add_api_route(
        f"{prefix}/profile",
        save_profile,
        methods=["POST"],
        name=f"save_{entity_type.value}_profile",
    )
    router.add_api_route(
        f"{prefix}/profile/{{user_id}}",
        get_profile,
        methods=["GET"],
        name=f"get_{entity_type.value}_profile",
    )


_register_profile_routes("/customers", EntityType.CUSTOMER)
_register_profile_routes("/contractors", EntityType.CONTRACTOR)
