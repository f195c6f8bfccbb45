"""
Product request schemas

Numeric fields accept anything that coerces to a finite, non-negative
number (``12``, ``12.5``, ``"12.5"``).
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from shared.schemas import NonNegativeNumber, reject_null


class ProductCreate(BaseModel):
    """Schema for creating a new product"""
    name: str = Field(..., min_length=1, description="Product name")
    description: Optional[str] = Field(None, description="Free-form description")
    price: NonNegativeNumber = Field(..., description="Unit price")
    stock: NonNegativeNumber = Field(0, description="Units in stock")

    def to_record(self) -> dict:
        """Store representation; an omitted description is left to the column default"""
        return self.model_dump(exclude=None if "description" in self.model_fields_set else {"description"})


class ProductUpdate(BaseModel):
    """Schema for updating product information; only fields sent are applied"""
    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    price: Optional[NonNegativeNumber] = None
    stock: Optional[NonNegativeNumber] = None

    @field_validator("name", "price", "stock")
    @classmethod
    def validate_not_null(cls, v, info):
        return reject_null(v, info.field_name)
