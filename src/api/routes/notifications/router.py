"""Rotas de notificações in-app (tabela `notifications`)."""

from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel, ConfigDict, Field

from api.routes._errors import collaborator_errors
from app.bootstrap.dependencies import get_data_store
from app.domain.notifications import is_valid_notification_type
from app.protocols import DataStoreProtocol
from utils.errors import RequestValidationError

router = APIRouter()

DataStore = Annotated[DataStoreProtocol, Depends(get_data_store)]

NOTIFICATIONS_TABLE = "notifications"
DEFAULT_LIST_LIMIT = 50


class SendNotificationRequest(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    user_id: str | None = Field(default=None, alias="userId")
    type: str | None = None
    title: str | None = None
    message: str | None = None
    data: dict[str, Any] | None = None
    action_url: str | None = Field(default=None, alias="actionUrl")


@router.post("/notifications/send")
async def send_notification(body: SendNotificationRequest, data_store: DataStore) -> dict[str, Any]:
    """Persiste notificação; tipo fora do conjunto fechado não chega ao store."""
    if not (body.user_id and body.type and body.title and body.message):
        raise RequestValidationError("Missing required notification fields")
    if not is_valid_notification_type(body.type):
        raise RequestValidationError("Invalid notification type")

    row = {
        "user_id": body.user_id,
        "type": body.type,
        "title": body.title,
        "message": body.message,
        "metadata": body.data,
        "action_url": body.action_url,
    }
    with collaborator_errors("Failed to create notification"):
        notification = await data_store.insert_row(NOTIFICATIONS_TABLE, row)
    return {"success": True, "notification": notification}


@router.get("/notifications/{user_id}")
async def list_notifications(
    user_id: str,
    data_store: DataStore,
    limit: Annotated[int, Query(gt=0)] = DEFAULT_LIST_LIMIT,
) -> dict[str, Any]:
    with collaborator_errors("Failed to fetch notifications"):
        rows = await data_store.fetch_many(NOTIFICATIONS_TABLE, "user_id", user_id, limit=limit)
    return {"success": True, "notifications": rows}
