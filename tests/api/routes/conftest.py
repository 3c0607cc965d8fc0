"""Fixtures das rotas: app real com fakes em `app.state`.

ASGITransport não executa o lifespan, então os clientes são colocados
direto no state. Para simular colaborador ausente, o teste zera o
atributo (`app.state.data_store = None`) antes da chamada.
"""

from __future__ import annotations

from collections.abc import AsyncIterator

import httpx
import pytest
from fastapi import FastAPI

from app.app import create_app
from tests.fakes.fake_data_store import FakeDataStore
from tests.fakes.fake_payments_gateway import FakePaymentsGateway
from tests.fakes.fake_push import ScriptedPushDispatcher


@pytest.fixture
def data_store() -> FakeDataStore:
    return FakeDataStore()


@pytest.fixture
def payments_gateway() -> FakePaymentsGateway:
    return FakePaymentsGateway()


@pytest.fixture
def push_dispatcher() -> ScriptedPushDispatcher:
    return ScriptedPushDispatcher()


@pytest.fixture
def app(
    data_store: FakeDataStore,
    payments_gateway: FakePaymentsGateway,
    push_dispatcher: ScriptedPushDispatcher,
) -> FastAPI:
    fastapi_app = create_app()
    fastapi_app.state.data_store = data_store
    fastapi_app.state.payments_gateway = payments_gateway
    fastapi_app.state.push_dispatcher = push_dispatcher
    return fastapi_app


@pytest.fixture
async def client(app: FastAPI) -> AsyncIterator[httpx.AsyncClient]:
    transport = httpx.ASGITransport(app=app, raise_app_exceptions=False)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as http_client:
        yield http_client
