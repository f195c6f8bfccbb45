"""
Persistence error taxonomy

Every failure the store adapter can report is one of the exceptions below.
Resource services catch these types and never inspect raw PostgREST codes.
"""

from typing import Optional


class PersistenceError(Exception):
    """Base class for all store adapter failures"""

    def __init__(self, message: str, detail: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.detail = detail


class ValidationFailed(PersistenceError):
    """The store rejected a value (bad type, null in a required column, check constraint)"""


class RecordNotFound(PersistenceError):
    """No row matched a point lookup or a by-id mutation"""


class UniqueConflict(PersistenceError):
    """A unique constraint was violated"""

    def __init__(self, message: str, field: Optional[str] = None, detail: Optional[str] = None):
        super().__init__(message, detail)
        self.field = field


class IntegrityViolation(PersistenceError):
    """More than one row matched a by-id lookup or mutation"""

    def __init__(self, message: str, count: int):
        super().__init__(message, detail=f"matched rows: {count}")
        self.count = count


class StoreError(PersistenceError):
    """Any other store or transport failure"""
