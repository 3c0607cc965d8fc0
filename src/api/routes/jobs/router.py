"""Rotas de job request: detalhes, localização e mudança de status."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Annotated, Any

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, Field

from api.routes._errors import collaborator_errors
from app.bootstrap.dependencies import get_data_store
from app.domain.job_status import is_valid_job_status, normalize_job_status
from app.protocols import DataStoreProtocol
from utils.errors import RequestValidationError

router = APIRouter()

DataStore = Annotated[DataStoreProtocol, Depends(get_data_store)]

JOB_REQUESTS_TABLE = "job_requests"
JOB_NOT_FOUND = "Job not found"


class UpdateJobStatusRequest(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    job_request_id: str | None = Field(default=None, alias="jobRequestId")
    status: str | None = None


def build_job_details(row: dict[str, Any]) -> dict[str, Any]:
    """Visão do job para montagem de orçamento, com defaults de exibição."""
    return {
        "id": row.get("id"),
        "title": row.get("title") or "Untitled Job",
        "description": row.get("description") or "",
        "location": row.get("address") or row.get("location") or "Location TBD",
        "address": row.get("address"),
        "date": row.get("preferred_date") or datetime.now(UTC).date().isoformat(),
        "time": row.get("preferred_time") or "09:00:00",
        "urgency": row.get("urgency") or "medium",
        "category": row.get("category") or "general",
        "budget_min": row.get("budget_min"),
        "budget_max": row.get("budget_max"),
        "customer_name": row.get("customer_name") or "Customer",
        "customer_id": row.get("customer_id"),
        "customer_email": row.get("customer_email"),
        "customer_phone": row.get("customer_phone"),
        "status": row.get("status"),
    }


@router.get("/jobs/{job_id}/details")
async def get_job_details(job_id: str, data_store: DataStore) -> dict[str, Any]:
    with collaborator_errors("Failed to fetch job details", not_found=JOB_NOT_FOUND):
        row = await data_store.fetch_one(JOB_REQUESTS_TABLE, "id", job_id)
    return {"success": True, "job": build_job_details(row)}


@router.get("/jobs/{job_id}/location")
async def get_job_location(job_id: str, data_store: DataStore) -> dict[str, Any]:
    with collaborator_errors("Failed to fetch job location", not_found=JOB_NOT_FOUND):
        row = await data_store.fetch_one(
            JOB_REQUESTS_TABLE, "id", job_id, columns="id, address, location"
        )
    full_address = row.get("address") or row.get("location") or ""
    return {
        "success": True,
        "jobId": row.get("id"),
        "address": row.get("address"),
        "location": row.get("location"),
        "fullAddress": full_address.strip(),
    }


@router.post("/jobs/update-status")
async def update_job_status(body: UpdateJobStatusRequest, data_store: DataStore) -> dict[str, Any]:
    """Atualiza status do job; `in_progress` é aceito como `in-progress`."""
    if not body.job_request_id or not body.status:
        raise RequestValidationError("jobRequestId and status are required")

    status = normalize_job_status(body.status)
    if not is_valid_job_status(status):
        raise RequestValidationError(f'Invalid status "{body.status}"')

    with collaborator_errors("Failed to update job status"):
        row = await data_store.update_row(
            JOB_REQUESTS_TABLE,
            "id",
            body.job_request_id,
            {"status": status},
            columns="id, status",
        )
    return {"success": True, "jobRequest": row}
