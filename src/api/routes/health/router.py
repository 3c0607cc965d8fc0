"""Endpoints de health check."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any, Literal

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

router = APIRouter()

SERVICE_NAME = "dandee-gateway"


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    message: str
    service: str
    timestamp: str
    version: str = "1.0.0"


@dataclass(frozen=True, slots=True)
class DependencyCheck:
    """Resultado de checagem de dependência."""

    status: Literal["ok", "degraded", "failed"]
    error: str | None = None

    def as_dict(self) -> dict[str, Any]:
        return {"status": self.status, "error": self.error}


@router.get("/health", response_model=HealthResponse)
@router.get("/api/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness probe, sempre 200 enquanto o processo responde."""
    return HealthResponse(
        status="OK",
        message="Dandee API server is running",
        service=SERVICE_NAME,
        timestamp=datetime.now(UTC).isoformat(),
    )


@router.get("/ready")
async def readiness_check(request: Request) -> JSONResponse:
    """Readiness probe: informa quais colaboradores foram configurados.

    Só o data store é crítico; pagamentos e push ausentes degradam.
    """
    state = request.app.state
    data_store_check = _configured(getattr(state, "data_store", None), missing="failed")
    payments_check = _configured(getattr(state, "payments_gateway", None), missing="degraded")
    push_check = _check_push(getattr(state, "push_dispatcher", None))

    ready = data_store_check.status == "ok"
    payload = {
        "status": "ready" if ready else "not_ready",
        "checks": {
            "data_store": data_store_check.as_dict(),
            "payments": payments_check.as_dict(),
            "push": push_check.as_dict(),
        },
        "timestamp": datetime.now(UTC).isoformat(),
    }
    return JSONResponse(content=payload, status_code=200 if ready else 503)


def _configured(client: Any | None, *, missing: Literal["degraded", "failed"]) -> DependencyCheck:
    if client is None:
        return DependencyCheck(status=missing, error="not_configured")
    return DependencyCheck(status="ok")


def _check_push(dispatcher: Any | None) -> DependencyCheck:
    if dispatcher is None or not dispatcher.is_configured():
        return DependencyCheck(status="degraded", error="not_configured")
    return DependencyCheck(status="ok")
