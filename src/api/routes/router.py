"""Agregador de rotas: registra todos os routers por área.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router())
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.health.router import router as health_router
from api.routes.jobs.router import router as jobs_router
from api.routes.notifications.router import router as notifications_router
from api.routes.onboarding.router import router as onboarding_router
from api.routes.payments.connect import router as connect_router
from api.routes.payments.intents import router as intents_router
from api.routes.payments.records import router as payment_records_router
from api.routes.profiles.router import router as profiles_router
from api.routes.push.router import router as push_router
from api.routes.reviews.router import router as reviews_router
from api.routes.scheduling.router import router as scheduling_router

API_PREFIX = "/api"


def create_api_router() -> APIRouter:
    """Cria router principal com todos os sub-routers registrados.

    Returns:
        APIRouter configurado com todos os endpoints.
    """
    api_router = APIRouter()

    # Health checks (/health e /ready na raiz, /api/health para o app)
    api_router.include_router(health_router, tags=["health"])

    # Stripe
    api_router.include_router(intents_router, prefix=API_PREFIX, tags=["payments"])
    api_router.include_router(connect_router, prefix=API_PREFIX, tags=["connect"])

    # Supabase
    api_router.include_router(onboarding_router, prefix=API_PREFIX, tags=["onboarding"])
    api_router.include_router(profiles_router, prefix=API_PREFIX, tags=["profiles"])
    api_router.include_router(jobs_router, prefix=API_PREFIX, tags=["jobs"])
    api_router.include_router(scheduling_router, prefix=API_PREFIX, tags=["scheduling"])
    api_router.include_router(notifications_router, prefix=API_PREFIX, tags=["notifications"])
    api_router.include_router(payment_records_router, prefix=API_PREFIX, tags=["payments"])
    api_router.include_router(reviews_router, prefix=API_PREFIX, tags=["reviews"])

    # Push
    api_router.include_router(push_router, prefix=API_PREFIX, tags=["push"])

    return api_router
