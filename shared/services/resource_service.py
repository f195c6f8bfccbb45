"""
Resource service contract

List/get/create/update/delete over one collection. Store outcomes are
translated to HTTP responses here and nowhere else:

    ValidationFailed    -> 400
    RecordNotFound      -> 404
    UniqueConflict      -> 409
    IntegrityViolation  -> 500 (logged as a data integrity problem)
    StoreError          -> 500
"""

from typing import Any, Dict, List, Optional, Protocol

import structlog
from fastapi import HTTPException

from shared.utils.app import INTERNAL_ERROR_BODY
from shared.utils.errors import (
    IntegrityViolation,
    PersistenceError,
    RecordNotFound,
    UniqueConflict,
    ValidationFailed,
)
from shared.utils.supabase_client import Mutation

logger = structlog.get_logger(__name__)


class TableStore(Protocol):
    """Capability a resource service needs from its persistence adapter"""

    async def select(self, filters: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]: ...

    async def insert(self, record: Dict[str, Any]) -> Dict[str, Any]: ...

    async def update(self, record_id: Any, changes: Dict[str, Any]) -> Mutation: ...

    async def delete(self, record_id: Any) -> Mutation: ...


class ResourceService:
    """Uniform CRUD contract over a single collection"""

    def __init__(
        self,
        store: TableStore,
        entity: str,
        conflict_messages: Optional[Dict[str, str]] = None,
    ):
        self.store = store
        self.entity = entity
        self.conflict_messages = conflict_messages or {}

    async def list(self, filters: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        """Return every record matching the equality filters; unset or empty filters are dropped"""
        predicates = {column: value for column, value in (filters or {}).items() if value not in (None, "")}
        try:
            return await self.store.select(predicates)
        except PersistenceError as e:
            raise self._to_http(e, "list") from e

    async def get(self, record_id: Any) -> Dict[str, Any]:
        try:
            rows = await self.store.select({"id": record_id})
            return self._single(rows)
        except ValidationFailed as e:
            # Only the id is filtered on, so an id the store cannot parse matches nothing
            raise self._not_found() from e
        except PersistenceError as e:
            raise self._to_http(e, "get", record_id) from e

    async def create(self, record: Dict[str, Any]) -> Dict[str, Any]:
        try:
            created = await self.store.insert(record)
        except PersistenceError as e:
            raise self._to_http(e, "create") from e

        logger.info(f"{self.entity} created", record_id=created.get("id"))
        return created

    async def update(self, record_id: Any, changes: Dict[str, Any]) -> Dict[str, Any]:
        """Apply a partial update; ``changes`` holds only the fields the client sent"""
        if not changes:
            raise HTTPException(status_code=400, detail={"error": "No fields provided to update"})

        try:
            mutation = await self.store.update(record_id, changes)
            updated = self._single(mutation.records)
        except ValidationFailed as e:
            if not await self._accepts_id(record_id):
                raise self._not_found() from e
            raise self._to_http(e, "update", record_id) from e
        except PersistenceError as e:
            raise self._to_http(e, "update", record_id) from e

        logger.info(f"{self.entity} updated", record_id=record_id, fields=sorted(changes))
        return updated

    async def delete(self, record_id: Any) -> Dict[str, Any]:
        try:
            mutation = await self.store.delete(record_id)
            deleted = self._single(mutation.records)
        except ValidationFailed as e:
            raise self._not_found() from e
        except PersistenceError as e:
            raise self._to_http(e, "delete", record_id) from e

        logger.info(f"{self.entity} deleted", record_id=record_id)
        return {
            "message": f"{self.entity} deleted successfully",
            f"deleted{self.entity}": deleted,
        }

    async def _accepts_id(self, record_id: Any) -> bool:
        """Whether the store can filter on ``record_id`` at all"""
        try:
            await self.store.select({"id": record_id})
        except ValidationFailed:
            return False
        except PersistenceError:
            return True
        return True

    def _not_found(self) -> HTTPException:
        return HTTPException(status_code=404, detail={"message": f"{self.entity} not found"})

    def _single(self, rows: List[Dict[str, Any]]) -> Dict[str, Any]:
        if not rows:
            raise RecordNotFound(f"{self.entity} not found")
        if len(rows) > 1:
            raise IntegrityViolation(f"Multiple {self.entity} rows share one id", count=len(rows))
        return rows[0]

    def _to_http(self, error: PersistenceError, operation: str, record_id: Any = None) -> HTTPException:
        if isinstance(error, RecordNotFound):
            return self._not_found()

        if isinstance(error, ValidationFailed):
            logger.info("Store rejected input", entity=self.entity, operation=operation, detail=error.detail)
            return HTTPException(status_code=400, detail={"error": f"Invalid {self.entity.lower()} data"})

        if isinstance(error, UniqueConflict):
            if error.field in self.conflict_messages:
                message = self.conflict_messages[error.field]
            elif error.field:
                message = f"{self.entity} with this {error.field} already exists"
            else:
                message = f"{self.entity} already exists"
            return HTTPException(status_code=409, detail={"error": message})

        if isinstance(error, IntegrityViolation):
            logger.error(
                "Data integrity violation",
                entity=self.entity,
                operation=operation,
                record_id=record_id,
                matched_rows=error.count,
            )
        else:
            logger.error(
                f"Failed to {operation} {self.entity.lower()}",
                record_id=record_id,
                error=error.message,
                detail=error.detail,
            )
        return HTTPException(status_code=500, detail=INTERNAL_ERROR_BODY)
