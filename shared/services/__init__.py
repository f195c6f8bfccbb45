"""
Service contracts shared by the resource services
"""

from .resource_service import ResourceService, TableStore
from .resource_app import create_resource_app, get_resource_service

__all__ = ["ResourceService", "TableStore", "create_resource_app", "get_resource_service"]
