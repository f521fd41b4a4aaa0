# invoicing/models/customers.py

from typing import Optional

from pydantic import EmailStr, Field, field_validator

from invoicing.models.base import CamelModel, reject_null


class CustomerIn(CamelModel):
    name: str = Field(..., min_length=1)
    email: EmailStr
    phone: str = Field(..., min_length=1)
    address: str = Field(..., min_length=1)


class CustomerUpdate(CamelModel):
    name: Optional[str] = Field(default=None, min_length=1)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(default=None, min_length=1)
    address: Optional[str] = Field(default=None, min_length=1)

    @field_validator("name", "email", "phone", "address")
    @classmethod
    def _not_null(cls, value):
        return reject_null(value)


class CustomerOut(CamelModel):
    id: int
    name: str
    email: str
    phone: str
    address: str
