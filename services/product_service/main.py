"""
Product Service - FastAPI Application
CRUD over the products collection
"""

from typing import Optional

from fastapi import FastAPI

from shared.services import TableStore, create_resource_app
from shared.utils.server import serve
from services.product_service.config import ProductServiceSettings
from services.product_service.routes import router


def create_app(
    settings: Optional[ProductServiceSettings] = None,
    store: Optional[TableStore] = None,
) -> FastAPI:
    """Create the Product Service application"""
    return create_resource_app(
        settings or ProductServiceSettings(),
        title="Product Service",
        description="Product catalog and stock levels for the shop backend",
        table="products",
        entity="Product",
        router=router,
        store=store,
        conflict_messages={"name": "Product name already exists"},
    )


def run():
    serve(ProductServiceSettings, create_app)


if __name__ == "__main__":
    run()
