"""Entrypoint do gateway Dandee.

Inicializa o bootstrap e expõe a aplicação ASGI (FastAPI).

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 8080

Uso (desenvolvimento):
    uvicorn app.app:app --reload --host 0.0.0.0 --port 8080
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from api.error_handlers import register_error_handlers
from api.routes import create_api_router
from app.bootstrap import initialize_app, validate_runtime_settings
from app.bootstrap.clients import (
    create_data_store,
    create_payments_gateway,
    create_push_dispatcher,
)
from app.observability import (
    CORRELATION_ID_HEADER,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)
from config.logging import get_logger
from config.settings import get_base_settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Awaitable, Callable

    from starlette.responses import Response

# Inicializar logging ANTES de qualquer import que use logger
initialize_app()

logger = get_logger(__name__)

SERVICE = "dandee-gateway"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Gerencia ciclo de vida da aplicação.

    Startup:
    - Valida configurações
    - Cria clientes (Supabase, Stripe, push) uma única vez

    Shutdown:
    - Fecha o dispatcher de push (pool APNs)
    """
    logger.info("app_starting", extra={"service": SERVICE})
    validate_runtime_settings()
    app.state.data_store = None
    app.state.payments_gateway = None
    app.state.push_dispatcher = None

    try:
        app.state.data_store = create_data_store()
    except Exception as exc:
        logger.warning("data_store_not_ready", extra={"error_type": type(exc).__name__})

    try:
        app.state.payments_gateway = create_payments_gateway()
    except Exception as exc:
        logger.warning("payments_gateway_not_ready", extra={"error_type": type(exc).__name__})

    try:
        app.state.push_dispatcher = create_push_dispatcher()
    except Exception as exc:
        logger.warning("push_dispatcher_not_ready", extra={"error_type": type(exc).__name__})

    yield

    logger.info("app_shutting_down", extra={"service": SERVICE})
    dispatcher = getattr(app.state, "push_dispatcher", None)
    if dispatcher is not None:
        try:
            await dispatcher.shutdown()
        except Exception as exc:
            logger.warning("push_shutdown_failed", extra={"error_type": type(exc).__name__})


async def correlation_id_middleware(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    """Propaga `x-correlation-id` (ou gera um) para logs e resposta."""
    token = set_correlation_id(request.headers.get(CORRELATION_ID_HEADER))
    try:
        response = await call_next(request)
        response.headers[CORRELATION_ID_HEADER] = get_correlation_id()
        return response
    finally:
        reset_correlation_id(token)


def create_app() -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    Returns:
        Aplicação FastAPI configurada.
    """
    fastapi_app = FastAPI(
        title="Dandee Gateway",
        description="Backend do app Dandee: pagamentos, perfis, jobs e push",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    # App mobile e web chamam de origens variadas
    fastapi_app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    fastapi_app.middleware("http")(correlation_id_middleware)

    register_error_handlers(fastapi_app)
    fastapi_app.include_router(create_api_router())

    logger.info("app_configured", extra={"service": SERVICE})

    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execução direta."""
    import uvicorn

    settings = get_base_settings()
    logger.info("server_starting", extra={"host": settings.host, "port": settings.port})
    uvicorn.run(
        "app.app:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development and settings.debug,
    )


if __name__ == "__main__":
    main()
