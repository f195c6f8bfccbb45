"""
Order Service - FastAPI Application
CRUD over the orders collection
"""

from typing import Optional

from fastapi import FastAPI

from shared.services import TableStore, create_resource_app
from shared.utils.server import serve
from services.order_service.config import OrderServiceSettings
from services.order_service.routes import router


def create_app(
    settings: Optional[OrderServiceSettings] = None,
    store: Optional[TableStore] = None,
) -> FastAPI:
    """Create the Order Service application"""
    return create_resource_app(
        settings or OrderServiceSettings(),
        title="Order Service",
        description="Orders placed against the shop backend",
        table="orders",
        entity="Order",
        router=router,
        store=store,
    )


def run():
    serve(OrderServiceSettings, create_app)


if __name__ == "__main__":
    run()
