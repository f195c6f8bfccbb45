"""
Customer request schemas
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from shared.schemas import reject_null


class CustomerCreate(BaseModel):
    """Schema for creating a new customer"""
    name: str = Field(..., min_length=1, description="Customer name")
    email: str = Field(..., min_length=1, description="Customer email, unique per customer")
    address: Optional[str] = Field(None, description="Postal address")

    def to_record(self) -> dict:
        """Store representation; an omitted address is left to the column default"""
        return self.model_dump(exclude=None if "address" in self.model_fields_set else {"address"})


class CustomerUpdate(BaseModel):
    """Schema for updating customer information; only fields sent are applied"""
    name: Optional[str] = Field(None, min_length=1)
    email: Optional[str] = Field(None, min_length=1)
    address: Optional[str] = None

    @field_validator("name", "email")
    @classmethod
    def validate_not_null(cls, v, info):
        return reject_null(v, info.field_name)
