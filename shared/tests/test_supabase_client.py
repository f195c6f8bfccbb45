"""
Tests for the Supabase table adapter
"""

from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest
from postgrest.exceptions import APIError

from shared.utils.errors import RecordNotFound, StoreError, UniqueConflict, ValidationFailed
from shared.utils.supabase_client import Mutation, SupabaseTable, translate_error


def api_error(code, message="error", details=None):
    return APIError({"message": message, "code": code, "hint": None, "details": details})


def mock_query(data=None, error=None):
    """Chainable PostgREST query mock whose execute() resolves to ``data``"""
    query = MagicMock()
    query.eq.return_value = query
    if error is not None:
        query.execute = AsyncMock(side_effect=error)
    else:
        query.execute = AsyncMock(return_value=MagicMock(data=data))
    return query


@pytest.fixture
def client():
    return MagicMock()


class TestTranslateError:
    def test_unique_violation_names_field(self):
        error = translate_error(api_error(
            "23505",
            'duplicate key value violates unique constraint "customers_email_key"',
            "Key (email)=(ada@example.com) already exists.",
        ))

        assert isinstance(error, UniqueConflict)
        assert error.field == "email"
        assert "23505" in error.detail

    def test_unique_violation_without_key_detail(self):
        error = translate_error(api_error("23505"))

        assert isinstance(error, UniqueConflict)
        assert error.field is None

    def test_no_rows(self):
        assert isinstance(translate_error(api_error("PGRST116")), RecordNotFound)

    @pytest.mark.parametrize("code", ["22P02", "22003", "23502", "23514"])
    def test_rejected_values(self, code):
        assert isinstance(translate_error(api_error(code)), ValidationFailed)

    def test_other_codes_are_store_errors(self):
        error = translate_error(api_error("23503", "foreign key violation"))

        assert type(error) is StoreError
        assert "foreign key violation" in error.detail

    def test_transport_failure(self):
        error = translate_error(httpx.ConnectError("connection refused"))

        assert type(error) is StoreError
        assert error.detail.startswith("ConnectError")


class TestSupabaseTable:
    @pytest.mark.asyncio
    async def test_select_applies_filters(self, client):
        query = mock_query(data=[{"id": 1, "status": "pending"}])
        client.table.return_value.select.return_value = query
        table = SupabaseTable(client, "orders")

        rows = await table.select({"customer_id": "c1", "status": "pending"})

        assert rows == [{"id": 1, "status": "pending"}]
        client.table.assert_called_with("orders")
        client.table.return_value.select.assert_called_once_with("*")
        query.eq.assert_any_call("customer_id", "c1")
        query.eq.assert_any_call("status", "pending")

    @pytest.mark.asyncio
    async def test_select_without_filters(self, client):
        query = mock_query(data=None)
        client.table.return_value.select.return_value = query

        assert await SupabaseTable(client, "products").select() == []
        query.eq.assert_not_called()

    @pytest.mark.asyncio
    async def test_insert_returns_stored_row(self, client):
        query = mock_query(data=[{"id": 7, "name": "Ada"}])
        client.table.return_value.insert.return_value = query

        created = await SupabaseTable(client, "customers").insert({"name": "Ada"})

        assert created == {"id": 7, "name": "Ada"}
        client.table.return_value.insert.assert_called_once_with({"name": "Ada"})

    @pytest.mark.asyncio
    async def test_insert_without_returned_row(self, client):
        client.table.return_value.insert.return_value = mock_query(data=[])

        with pytest.raises(StoreError):
            await SupabaseTable(client, "customers").insert({"name": "Ada"})

    @pytest.mark.asyncio
    async def test_update_reports_affected_rows(self, client):
        query = mock_query(data=[{"id": 3, "stock": 5}])
        client.table.return_value.update.return_value = query

        mutation = await SupabaseTable(client, "products").update(3, {"stock": 5})

        assert mutation == Mutation(records=[{"id": 3, "stock": 5}])
        assert mutation.count == 1
        query.eq.assert_called_once_with("id", 3)

    @pytest.mark.asyncio
    async def test_delete_with_no_match(self, client):
        client.table.return_value.delete.return_value = mock_query(data=[])

        mutation = await SupabaseTable(client, "orders").delete(99)

        assert mutation.count == 0

    @pytest.mark.asyncio
    async def test_api_error_translated(self, client):
        client.table.return_value.insert.return_value = mock_query(
            error=api_error("23505", "duplicate", "Key (name)=(Widget) already exists.")
        )

        with pytest.raises(UniqueConflict) as exc_info:
            await SupabaseTable(client, "products").insert({"name": "Widget"})

        assert exc_info.value.field == "name"

    @pytest.mark.asyncio
    async def test_transport_error_translated(self, client):
        client.table.return_value.select.return_value = mock_query(
            error=httpx.ReadTimeout("timed out")
        )

        with pytest.raises(StoreError):
            await SupabaseTable(client, "customers").select()
