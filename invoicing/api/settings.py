# invoicing/api/settings.py

from fastapi import APIRouter, Depends

from invoicing.db.store import SettingsStore
from invoicing.dependencies import get_settings_store
from invoicing.models.company import CompanySettingsIn, CompanySettingsOut

router = APIRouter(prefix="/api/settings", tags=["settings"])


@router.get("", response_model=CompanySettingsOut)
def get_company_settings(
    store: SettingsStore = Depends(get_settings_store),
) -> CompanySettingsOut:
    """
    The company profile printed on invoices; defaults are stored on first read.
    """
    return store.get()


@router.post("", response_model=CompanySettingsOut)
def update_company_settings(
    payload: CompanySettingsIn,
    store: SettingsStore = Depends(get_settings_store),
) -> CompanySettingsOut:
    return store.update(payload)
