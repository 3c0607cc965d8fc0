"""Avaliações recebidas por prestador."""

from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Depends

from api.routes._errors import collaborator_errors
from app.bootstrap.dependencies import get_data_store
from app.protocols import DataStoreProtocol

router = APIRouter()

DataStore = Annotated[DataStoreProtocol, Depends(get_data_store)]

REVIEWS_TABLE = "reviews"


@router.get("/reviews/contractor/{contractor_id}")
async def list_contractor_reviews(contractor_id: str, data_store: DataStore) -> list[dict[str, Any]]:
    with collaborator_errors("Failed to fetch reviews"):
        return await data_store.fetch_many(REVIEWS_TABLE, "contractor_id", contractor_id)
