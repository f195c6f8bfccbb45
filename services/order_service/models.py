"""
Order request schemas

``customer_id`` is stored as given; it is not checked against the
customer service. ``status`` is a free-form string.
"""

from typing import Optional, Union

from pydantic import BaseModel, Field, field_validator

from shared.schemas import NonNegativeNumber

DEFAULT_ORDER_STATUS = "pending"


class OrderCreate(BaseModel):
    """Schema for creating a new order"""
    customer_id: Union[int, str] = Field(..., description="Owning customer's id")
    total_amount: NonNegativeNumber = Field(..., description="Order total")
    status: Optional[str] = Field(None, description="Order status, defaults to pending")

    @field_validator("customer_id")
    @classmethod
    def validate_customer_id(cls, v):
        if isinstance(v, str) and not v.strip():
            raise ValueError("customer_id must not be empty")
        return v

    def to_record(self) -> dict:
        """Store representation; a missing or empty status becomes pending"""
        record = self.model_dump()
        record["status"] = record["status"] or DEFAULT_ORDER_STATUS
        return record


class OrderStatusUpdate(BaseModel):
    """Schema for the status-only order update"""
    status: str = Field(..., min_length=1, description="New order status")
