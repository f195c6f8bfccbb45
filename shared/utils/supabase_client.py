"""
Supabase Table Adapter
Filtered select/insert/update/delete against one PostgREST table

All failures are raised as members of the persistence taxonomy in
shared.utils.errors, so callers never look at raw PostgREST error codes.
"""

import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import httpx
import structlog
from postgrest.exceptions import APIError
from supabase import AsyncClient, acreate_client

from shared.utils.errors import (
    PersistenceError,
    RecordNotFound,
    StoreError,
    UniqueConflict,
    ValidationFailed,
)

logger = structlog.get_logger(__name__)

# PostgreSQL / PostgREST error codes
UNIQUE_VIOLATION = "23505"
NO_ROWS_MATCHED = "PGRST116"
REJECTED_VALUE_CODES = {
    "22P02",  # invalid_text_representation
    "22003",  # numeric_value_out_of_range
    "23502",  # not_null_violation
    "23514",  # check_violation
}

_UNIQUE_KEY_PATTERN = re.compile(r"Key \((?P<field>[^)]+)\)=")


@dataclass(frozen=True)
class Mutation:
    """Rows affected by an update or delete, as returned by the store"""
    records: List[Dict[str, Any]] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.records)


def translate_error(exc: Exception) -> PersistenceError:
    """Map a PostgREST or transport exception to the persistence taxonomy"""
    if isinstance(exc, APIError):
        code = exc.code or ""
        detail = f"{code}: {exc.message} ({exc.details})"

        if code == UNIQUE_VIOLATION:
            match = _UNIQUE_KEY_PATTERN.search(exc.details or "")
            return UniqueConflict(
                "Unique constraint violated",
                field=match.group("field") if match else None,
                detail=detail,
            )
        if code == NO_ROWS_MATCHED:
            return RecordNotFound("No row matched", detail=detail)
        if code in REJECTED_VALUE_CODES:
            return ValidationFailed(exc.message or "Invalid value", detail=detail)
        return StoreError("Store reported an error", detail=detail)

    if isinstance(exc, httpx.HTTPError):
        return StoreError("Store unreachable", detail=f"{type(exc).__name__}: {exc}")

    return StoreError("Unexpected store failure", detail=repr(exc))


class SupabaseTable:
    """Persistence adapter bound to a single table"""

    def __init__(self, client: AsyncClient, table: str):
        self.client = client
        self.table = table

    async def _execute(self, query, operation: str) -> List[Dict[str, Any]]:
        try:
            response = await query.execute()
        except (APIError, httpx.HTTPError) as e:
            error = translate_error(e)
            logger.debug(
                "Store call failed",
                table=self.table,
                operation=operation,
                error_type=type(error).__name__,
            )
            raise error from e
        return list(response.data or [])

    async def select(self, filters: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        """Return all rows matching the equality filters"""
        query = self.client.table(self.table).select("*")
        for column, value in (filters or {}).items():
            query = query.eq(column, value)
        return await self._execute(query, "select")

    async def insert(self, record: Dict[str, Any]) -> Dict[str, Any]:
        """Insert one row and return it as stored"""
        query = self.client.table(self.table).insert(record)
        rows = await self._execute(query, "insert")
        if not rows:
            raise StoreError("Insert returned no record", detail=f"table={self.table}")
        return rows[0]

    async def update(self, record_id: Any, changes: Dict[str, Any]) -> Mutation:
        """Update the row with the given id and return the affected rows"""
        query = self.client.table(self.table).update(changes).eq("id", record_id)
        return Mutation(records=await self._execute(query, "update"))

    async def delete(self, record_id: Any) -> Mutation:
        """Delete the row with the given id and return the deleted rows"""
        query = self.client.table(self.table).delete().eq("id", record_id)
        return Mutation(records=await self._execute(query, "delete"))


async def create_table_store(url: str, key: str, table: str) -> SupabaseTable:
    """Create an async Supabase client and bind an adapter to ``table``"""
    client = await acreate_client(url, key)
    logger.info("Supabase client initialized", table=table, url=url[:20] + "...")
    return SupabaseTable(client, table)
