"""Envio de push notification pelo dispatcher configurado.

Falhas de entrega voltam com 200 e `success: false`; só request
malformado vira 400.
"""

from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, Field

from app.bootstrap.dependencies import get_push_dispatcher
from app.domain.push import PushMessage, PushTarget
from app.protocols import PushDispatcherProtocol
from utils.errors import RequestValidationError

router = APIRouter()

Dispatcher = Annotated[PushDispatcherProtocol, Depends(get_push_dispatcher)]


class PushTargetBody(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    recipient: str | None = Field(default=None, alias="userId")
    device_token: str | None = Field(default=None, alias="deviceToken")
    platform: str | None = None

    def to_target(self) -> PushTarget:
        return PushTarget(recipient=self.device_token or self.recipient or "", platform=self.platform)


class PushContentBody(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    title: str | None = None
    body: str | None = None
    data: dict[str, Any] | None = None
    url: str | None = None
    sound: str | None = None
    badge: int | None = None

    def to_message(self) -> PushMessage:
        return PushMessage(
            title=self.title or "",
            body=self.body or "",
            data=self.data or {},
            deep_link_url=self.url,
            sound=self.sound or "default",
            badge=self.badge,
        )


class SendPushRequest(PushTargetBody, PushContentBody):
    pass


class BulkPushRequest(PushContentBody):
    targets: list[PushTargetBody] = Field(default_factory=list)


@router.post("/push/send")
async def send_push(body: SendPushRequest, dispatcher: Dispatcher) -> dict[str, Any]:
    result = await dispatcher.send(body.to_target(), body.to_message())
    return result.as_dict()


@router.post("/push/bulk")
async def send_bulk_push(body: BulkPushRequest, dispatcher: Dispatcher) -> dict[str, Any]:
    """Um envio por destinatário; devolve contagem agregada."""
    if not body.targets:
        raise RequestValidationError("targets must not be empty")
    result = await dispatcher.send_bulk(
        [target.to_target() for target in body.targets], body.to_message()
    )
    return result.as_dict()
