"""
Field types shared by the resource schemas
"""

from typing import Annotated, Union

from pydantic import Field

# Accepts ints, floats and numeric strings; integers keep their integer form
NonNegativeNumber = Union[
    Annotated[int, Field(ge=0)],
    Annotated[float, Field(ge=0, allow_inf_nan=False)],
]


def reject_null(value, field_name: str):
    """Fields that are required on create may be omitted on update, but not nulled"""
    if value is None:
        raise ValueError(f"{field_name} cannot be null")
    return value
