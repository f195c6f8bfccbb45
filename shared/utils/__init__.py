"""
Shared utilities

This package contains common utilities used across all microservices.
"""

from .errors import (
    PersistenceError,
    ValidationFailed,
    RecordNotFound,
    UniqueConflict,
    IntegrityViolation,
    StoreError,
)
from .logger import setup_logging
from .config import BaseServiceSettings, ServiceSettings, load_settings
from .supabase_client import Mutation, SupabaseTable, create_table_store

__all__ = [
    "PersistenceError",
    "ValidationFailed",
    "RecordNotFound",
    "UniqueConflict",
    "IntegrityViolation",
    "StoreError",
    "setup_logging",
    "BaseServiceSettings",
    "ServiceSettings",
    "load_settings",
    "Mutation",
    "SupabaseTable",
    "create_table_store",
]
