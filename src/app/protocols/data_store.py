"""Protocolo do data store (linhas, auth admin e storage).

Implementação: Supabase (service role). Falhas sobem como DataStoreError;
lookup por identificador sem linha sobe RowNotFoundError.
"""

from __future__ import annotations

from typing import Any, Protocol

Row = dict[str, Any]


class DataStoreProtocol(Protocol):
    """Contrato do data store usado pelas rotas."""

    async def update_user_metadata(self, user_id: str, metadata: dict[str, Any]) -> dict[str, Any]:
        """Atualiza `user_metadata` do usuário no auth.

        Returns:
            Metadata efetivamente gravada.
        """
        ...

    async def upsert_row(self, table: str, row: Row, *, on_conflict: str) -> Row:
        """Upsert de uma linha, retornando a linha gravada."""
        ...

    async def insert_row(self, table: str, row: Row) -> Row:
        """Insere linha e retorna a linha gravada."""
        ...

    async def update_row(self, table: str, key: str, value: Any, fields: Row, *, columns: str = "*") -> Row:
        """Atualiza a linha onde `key == value`.

        Raises:
            RowNotFoundError: nenhuma linha corresponde ao filtro.
        """
        ...

    async def fetch_one(self, table: str, key: str, value: Any, *, columns: str = "*") -> Row:
        """Busca exatamente uma linha onde `key == value`.

        Raises:
            RowNotFoundError: nenhuma linha corresponde ao filtro.
        """
        ...

    async def fetch_many(
        self,
        table: str,
        key: str,
        value: Any,
        *,
        limit: int | None = None,
    ) -> list[Row]:
        """Lista linhas onde `key == value`, mais recentes primeiro (`created_at` desc)."""
        ...

    async def upload_file(
        self,
        bucket: str,
        path: str,
        content: bytes,
        *,
        content_type: str,
    ) -> str:
        """Envia arquivo (upsert) e retorna o path gravado."""
        ...

    def public_url(self, bucket: str, path: str) -> str:
        """URL pública do arquivo no bucket."""
        ...
