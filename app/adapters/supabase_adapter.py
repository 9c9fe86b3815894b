"""
Concrete implementation of UserPort using the Supabase Python client.
"""

from typing import Any

from supabase import Client

from app.domain.models import UserRecord
from app.ports.user_port import UserPort


class SupabaseAdapter(UserPort):
    """All user table I/O goes through the Supabase REST client."""

    def __init__(self, client: Client, table: str = "users") -> None:
        self._client = client
        self._table = table

    # ── Users ─────────────────────────────────────────────────

    async def upsert_user(self, record: UserRecord) -> dict[str, Any]:
        row = record.to_row()
        # Single round-trip upsert on the primary key; re-syncs overwrite fields
        result = (
            self._client.table(self._table)
            .upsert(row, on_conflict="id")
            .execute()
        )
        # PostgREST returns the written row unless representation is disabled
        if result and result.data:
            return result.data[0]
        return row
