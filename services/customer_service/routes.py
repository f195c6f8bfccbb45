"""
Customer management routes
"""

from fastapi import APIRouter, Depends

from shared.services import ResourceService, get_resource_service
from services.customer_service.models import CustomerCreate, CustomerUpdate

router = APIRouter()


@router.get("")
async def list_customers(service: ResourceService = Depends(get_resource_service)):
    """List all customers"""
    return await service.list()


@router.get("/{customer_id}")
async def get_customer(customer_id: str, service: ResourceService = Depends(get_resource_service)):
    """Get customer details"""
    return await service.get(customer_id)


@router.post("", status_code=201)
async def create_customer(
    customer_data: CustomerCreate,
    service: ResourceService = Depends(get_resource_service)
):
    """Create a new customer"""
    return await service.create(customer_data.to_record())


@router.put("/{customer_id}")
async def update_customer(
    customer_id: str,
    update_data: CustomerUpdate,
    service: ResourceService = Depends(get_resource_service)
):
    """Update customer information"""
    return await service.update(customer_id, update_data.model_dump(exclude_unset=True))


@router.delete("/{customer_id}")
async def delete_customer(customer_id: str, service: ResourceService = Depends(get_resource_service)):
    """Delete a customer"""
    return await service.delete(customer_id)
