"""
Order management routes
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from shared.services import ResourceService, get_resource_service
from services.order_service.models import OrderCreate, OrderStatusUpdate

router = APIRouter()


@router.get("")
async def list_orders(
    customer_id: Optional[str] = Query(None, alias="customerId", description="Only orders of this customer"),
    status: Optional[str] = Query(None, description="Only orders in this status"),
    service: ResourceService = Depends(get_resource_service)
):
    """List orders, optionally filtered by customer and status"""
    return await service.list({"customer_id": customer_id, "status": status})


@router.get("/{order_id}")
async def get_order(order_id: str, service: ResourceService = Depends(get_resource_service)):
    """Get order details"""
    return await service.get(order_id)


@router.post("", status_code=201)
async def create_order(
    order_data: OrderCreate,
    service: ResourceService = Depends(get_resource_service)
):
    """Create a new order"""
    return await service.create(order_data.to_record())


@router.patch("/{order_id}/status")
async def update_order_status(
    order_id: str,
    update_data: OrderStatusUpdate,
    service: ResourceService = Depends(get_resource_service)
):
    """Change the status of an order"""
    return await service.update(order_id, update_data.model_dump(exclude_unset=True))


@router.delete("/{order_id}")
async def delete_order(order_id: str, service: ResourceService = Depends(get_resource_service)):
    """Delete an order"""
    return await service.delete(order_id)
