# invoicing/models/company.py

from typing import Optional

from pydantic import EmailStr, Field

from invoicing.models.base import CamelModel

SETTINGS_ID = 1


class CompanySettingsIn(CamelModel):
    company_name: str = Field(..., min_length=1)
    company_address: str = Field(..., min_length=1)
    company_phone: str = Field(..., min_length=1)
    company_email: EmailStr
    # May hold a data: URL with the whole image, so no length limit.
    logo_url: Optional[str] = None
    tax_percentage: float = Field(..., ge=0, le=100)


class CompanySettingsOut(CamelModel):
    id: int = SETTINGS_ID
    company_name: str
    company_address: str
    company_phone: str
    company_email: str
    logo_url: Optional[str] = None
    tax_percentage: float
