# invoicing/models/items.py

from typing import Optional

from pydantic import Field, field_validator

from invoicing.models.base import CamelModel, reject_null


class ItemIn(CamelModel):
    """Catalog entry used as a template for invoice lines."""

    name: str = Field(..., min_length=1)
    hsn_code: str = Field(..., min_length=1, description="HSN/SAC tax classification code")
    selling_price: float = Field(..., ge=0)
    cost_price: float = Field(..., ge=0)
    tax_rate: float = Field(..., ge=0, le=100)
    description: Optional[str] = None


class ItemUpdate(CamelModel):
    name: Optional[str] = Field(default=None, min_length=1)
    hsn_code: Optional[str] = Field(default=None, min_length=1)
    selling_price: Optional[float] = Field(default=None, ge=0)
    cost_price: Optional[float] = Field(default=None, ge=0)
    tax_rate: Optional[float] = Field(default=None, ge=0, le=100)
    description: Optional[str] = None

    @field_validator("name", "hsn_code", "selling_price", "cost_price", "tax_rate")
    @classmethod
    def _not_null(cls, value):
        return reject_null(value)


class ItemOut(CamelModel):
    id: int
    name: str
    hsn_code: str
    selling_price: float
    cost_price: float
    tax_rate: float
    description: Optional[str] = None
