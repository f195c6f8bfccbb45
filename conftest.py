"""
Pytest fixtures shared by the service test suites
"""

from typing import Any, Callable, Dict, Iterable, List, Optional
from uuid import uuid4

import pytest

from shared.utils.errors import UniqueConflict, ValidationFailed
from shared.utils.supabase_client import Mutation


class InMemoryTable:
    """
    In-memory stand-in for SupabaseTable.

    Assigns string ids, enforces the configured unique columns and records
    every call so tests can assert that no store call was made. With
    ``valid_id`` set, ids it rejects fail like an unparseable uuid would.
    """

    def __init__(self, unique: Iterable[str] = (), valid_id: Optional[Callable[[Any], bool]] = None):
        self.rows: List[Dict[str, Any]] = []
        self.unique = tuple(unique)
        self.calls: List[str] = []
        self.fail_with: Optional[Exception] = None
        self.valid_id = valid_id

    def _record_call(self, operation: str):
        self.calls.append(operation)
        if self.fail_with is not None:
            raise self.fail_with

    def _check_id(self, record_id: Any):
        if self.valid_id is not None and not self.valid_id(record_id):
            raise ValidationFailed(
                "invalid input syntax for type uuid",
                detail=f'22P02: invalid input syntax for type uuid: "{record_id}"',
            )

    def _check_unique(self, record: Dict[str, Any], ignore_id: Any = None):
        for column in self.unique:
            if column not in record:
                continue
            for row in self.rows:
                if row["id"] != ignore_id and row.get(column) == record[column]:
                    raise UniqueConflict(
                        "Unique constraint violated",
                        field=column,
                        detail=f"Key ({column})=({record[column]}) already exists.",
                    )

    def _matching(self, filters: Dict[str, Any]) -> List[Dict[str, Any]]:
        return [
            row for row in self.rows
            if all(str(row.get(column)) == str(value) for column, value in filters.items())
        ]

    def seed(self, **record) -> Dict[str, Any]:
        row = {"id": record.pop("id", str(uuid4())), **record}
        self.rows.append(row)
        return dict(row)

    async def select(self, filters: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        self._record_call("select")
        if filters and "id" in filters:
            self._check_id(filters["id"])
        return [dict(row) for row in self._matching(filters or {})]

    async def insert(self, record: Dict[str, Any]) -> Dict[str, Any]:
        self._record_call("insert")
        self._check_unique(record)
        row = {"id": str(uuid4()), **record}
        self.rows.append(row)
        return dict(row)

    async def update(self, record_id: Any, changes: Dict[str, Any]) -> Mutation:
        self._record_call("update")
        self._check_id(record_id)
        self._check_unique(changes, ignore_id=record_id)
        matched = self._matching({"id": record_id})
        for row in matched:
            row.update(changes)
        return Mutation(records=[dict(row) for row in matched])

    async def delete(self, record_id: Any) -> Mutation:
        self._record_call("delete")
        self._check_id(record_id)
        matched = self._matching({"id": record_id})
        self.rows = [row for row in self.rows if row not in matched]
        return Mutation(records=[dict(row) for row in matched])


@pytest.fixture
def make_store():
    """Factory for in-memory table stores"""
    def _make(unique: Iterable[str] = (), valid_id: Optional[Callable[[Any], bool]] = None) -> InMemoryTable:
        return InMemoryTable(unique=unique, valid_id=valid_id)
    return _make


@pytest.fixture
def supabase_env() -> Dict[str, str]:
    """Store settings used by every resource service test app"""
    return {
        "supabase_url": "https://test-project.supabase.co",
        "supabase_anon_key": "test-anon-key",
    }
