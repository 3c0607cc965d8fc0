"""Criação de scheduled job a partir de orçamento aceito."""

from __future__ import annotations

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, Field

from api.routes._errors import collaborator_errors
from app.bootstrap.dependencies import get_data_store
from app.domain.entity_fields import SCHEDULED_JOB_REQUIRED_FIELDS, EntityType
from app.observability import get_correlation_id
from app.protocols import DataStoreProtocol
from app.services.payload_sanitizer import dropped_fields, sanitize_payload
from utils.errors import RequestValidationError

logger = logging.getLogger(__name__)

router = APIRouter()

DataStore = Annotated[DataStoreProtocol, Depends(get_data_store)]

SCHEDULED_JOBS_TABLE = "scheduled_jobs"


class CreateFromQuoteRequest(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    scheduled_job: dict[str, Any] | None = Field(default=None, alias="scheduledJob")


@router.post("/scheduling/create-from-quote")
async def create_from_quote(body: CreateFromQuoteRequest, data_store: DataStore) -> dict[str, Any]:
    """Insere scheduled job (insert, não upsert: quote_id não é único)."""
    if body.scheduled_job is None:
        raise RequestValidationError("scheduledJob payload is required")

    dropped = dropped_fields(body.scheduled_job, EntityType.SCHEDULED_JOB)
    if dropped:
        logger.warning(
            "payload_fields_dropped",
            extra={
                "component": "scheduling",
                "entity_type": EntityType.SCHEDULED_JOB.value,
                "dropped_fields": dropped,
                "correlation_id": get_correlation_id(),
            },
        )

    sanitized = sanitize_payload(body.scheduled_job, EntityType.SCHEDULED_JOB)
    if not all(sanitized.get(field) for field in SCHEDULED_JOB_REQUIRED_FIELDS):
        raise RequestValidationError("Missing required fields for scheduled job")

    with collaborator_errors("Failed to create scheduled job"):
        row = await data_store.insert_row(SCHEDULED_JOBS_TABLE, sanitized)
    logger.info(
        "scheduled_job_created",
        extra={"scheduled_job_id": row.get("id"), "correlation_id": get_correlation_id()},
    )
    return {"success": True, "scheduledJob": row}
