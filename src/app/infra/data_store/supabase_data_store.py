"""Data store sobre o cliente admin do Supabase.

O SDK é síncrono: cada chamada roda em thread via asyncio.to_thread.
Erros do SDK viram DataStoreError; `.single()` sem linha (PGRST116)
vira RowNotFoundError.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any

from app.observability import get_correlation_id
from app.protocols.data_store import DataStoreProtocol, Row
from utils.errors import DataStoreError, RowNotFoundError

if TYPE_CHECKING:
    from supabase import Client as SupabaseClient

logger = logging.getLogger(__name__)

_COMPONENT = "supabase_data_store"
NO_ROWS_ERROR_CODE = "PGRST116"
STORAGE_CACHE_CONTROL = "3600"


class SupabaseDataStore(DataStoreProtocol):
    """Implementação do DataStoreProtocol usando supabase-py."""

    __slots__ = ("_client",)

    def __init__(self, client: SupabaseClient) -> None:
        self._client = client

    # ──────────────────────────────────────────────────────────────────────
    # Auth admin
    # ──────────────────────────────────────────────────────────────────────

    async def update_user_metadata(self, user_id: str, metadata: dict[str, Any]) -> dict[str, Any]:
        response = await self._run(
            "update_user_metadata",
            self._client.auth.admin.update_user_by_id,
            user_id,
            {"user_metadata": metadata},
        )
        user = getattr(response, "user", None)
        updated = getattr(user, "user_metadata", None)
        return dict(updated) if updated else dict(metadata)

    # ──────────────────────────────────────────────────────────────────────
    # Linhas
    # ──────────────────────────────────────────────────────────────────────

    async def upsert_row(self, table: str, row: Row, *, on_conflict: str) -> Row:
        query = self._client.table(table).upsert(row, on_conflict=on_conflict)
        response = await self._run("upsert_row", query.execute, table=table)
        return _first_row(response, table)

    async def insert_row(self, table: str, row: Row) -> Row:
        query = self._client.table(table).insert(row)
        response = await self._run("insert_row", query.execute, table=table)
        return _first_row(response, table)

    async def update_row(
        self,
        table: str,
        key: str,
        value: Any,
        fields: Row,
        *,
        columns: str = "*",
    ) -> Row:
        query = self._client.table(table).update(fields).eq(key, value)
        response = await self._run("update_row", query.execute, table=table)
        return _project(_first_row(response, table), columns)

    async def fetch_one(self, table: str, key: str, value: Any, *, columns: str = "*") -> Row:
        query = self._client.table(table).select(columns).eq(key, value).single()
        response = await self._run("fetch_one", query.execute, table=table)
        data = getattr(response, "data", None)
        if not data:
            raise RowNotFoundError(f"No row in {table}", code=NO_ROWS_ERROR_CODE)
        return dict(data)

    async def fetch_many(
        self,
        table: str,
        key: str,
        value: Any,
        *,
        limit: int | None = None,
    ) -> list[Row]:
        query = self._client.table(table).select("*").eq(key, value).order("created_at", desc=True)
        if limit is not None:
            query = query.limit(limit)
        response = await self._run("fetch_many", query.execute, table=table)
        return [dict(row) for row in getattr(response, "data", None) or []]

    # ──────────────────────────────────────────────────────────────────────
    # Storage
    # ──────────────────────────────────────────────────────────────────────

    async def upload_file(
        self,
        bucket: str,
        path: str,
        content: bytes,
        *,
        content_type: str,
    ) -> str:
        storage = self._client.storage.from_(bucket)
        response = await self._run(
            "upload_file",
            storage.upload,
            path,
            content,
            {
                "content-type": content_type,
                "cache-control": STORAGE_CACHE_CONTROL,
                "upsert": "true",
            },
        )
        return getattr(response, "path", None) or path

    def public_url(self, bucket: str, path: str) -> str:
        try:
            url = self._client.storage.from_(bucket).get_public_url(path)
        except Exception as exc:
            raise _wrap_error("public_url", exc) from exc
        if not url:
            raise DataStoreError("Failed to generate public URL for uploaded photo")
        return str(url)

    # ──────────────────────────────────────────────────────────────────────
    # Internos
    # ──────────────────────────────────────────────────────────────────────

    async def _run(self, action: str, func: Any, *args: Any, table: str | None = None) -> Any:
        try:
            return await asyncio.to_thread(func, *args)
        except Exception as exc:
            error = _wrap_error(action, exc)
            if not isinstance(error, RowNotFoundError):
                logger.error(
                    "supabase_call_failed",
                    extra={
                        "component": _COMPONENT,
                        "action": action,
                        "table": table,
                        "error_type": type(exc).__name__,
                        "error_code": error.code,
                        "correlation_id": get_correlation_id(),
                    },
                )
            raise error from exc


def _wrap_error(action: str, exc: Exception) -> DataStoreError:
    code = getattr(exc, "code", None)
    message = getattr(exc, "message", None) or str(exc) or f"Supabase {action} failed"
    if code == NO_ROWS_ERROR_CODE:
        return RowNotFoundError(message, code=code)
    return DataStoreError(message, code=str(code) if code is not None else None)


def _first_row(response: Any, table: str) -> Row:
    data = getattr(response, "data", None)
    if isinstance(data, list):
        if not data:
            raise RowNotFoundError(f"No row in {table}", code=NO_ROWS_ERROR_CODE)
        return dict(data[0])
    if isinstance(data, dict):
        return dict(data)
    raise RowNotFoundError(f"No row in {table}", code=NO_ROWS_ERROR_CODE)


def _project(row: Row, columns: str) -> Row:
    if columns.strip() == "*":
        return row
    wanted = [column.strip() for column in columns.split(",") if column.strip()]
    return {column: row.get(column) for column in wanted}
