"""
Product catalog routes
"""

from fastapi import APIRouter, Depends

from shared.services import ResourceService, get_resource_service
from services.product_service.models import ProductCreate, ProductUpdate

router = APIRouter()


@router.get("")
async def list_products(service: ResourceService = Depends(get_resource_service)):
    """List all products"""
    return await service.list()


@router.get("/{product_id}")
async def get_product(product_id: str, service: ResourceService = Depends(get_resource_service)):
    """Get product details"""
    return await service.get(product_id)


@router.post("", status_code=201)
async def create_product(
    product_data: ProductCreate,
    service: ResourceService = Depends(get_resource_service)
):
    """Create a new product; stock defaults to 0"""
    return await service.create(product_data.to_record())


@router.put("/{product_id}")
async def update_product(
    product_id: str,
    update_data: ProductUpdate,
    service: ResourceService = Depends(get_resource_service)
):
    """Update product information"""
    return await service.update(product_id, update_data.model_dump(exclude_unset=True))


@router.delete("/{product_id}")
async def delete_product(product_id: str, service: ResourceService = Depends(get_resource_service)):
    """Delete a product"""
    return await service.delete(product_id)
