"""
Customer Service - FastAPI Application
CRUD over the customers collection
"""

from typing import Optional

from fastapi import FastAPI

from shared.services import TableStore, create_resource_app
from shared.utils.server import serve
from services.customer_service.config import CustomerServiceSettings
from services.customer_service.routes import router


def create_app(
    settings: Optional[CustomerServiceSettings] = None,
    store: Optional[TableStore] = None,
) -> FastAPI:
    """Create the Customer Service application"""
    return create_resource_app(
        settings or CustomerServiceSettings(),
        title="Customer Service",
        description="Customer records for the shop backend",
        table="customers",
        entity="Customer",
        router=router,
        store=store,
        conflict_messages={"email": "Email already exists"},
    )


def run():
    serve(CustomerServiceSettings, create_app)


if __name__ == "__main__":
    run()
