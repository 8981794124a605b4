from fastapi import Depends

from app.core.cache import Revalidation
from app.core.database import Store, get_store
from app.services.auth_service import AuthService
from app.services.data_service import DataService
from app.services.invoice_actions import InvoiceActions


def get_revalidation() -> Revalidation:
    return Revalidation()


def get_data_service(store: Store = Depends(get_store)) -> DataService:
    return DataService(store)


def get_invoice_actions(
    store: Store = Depends(get_store),
    revalidation: Revalidation = Depends(get_revalidation),
) -> InvoiceActions:
    return InvoiceActions(store, revalidation)


def get_auth_service(store: Store = Depends(get_store)) -> AuthService:
    return AuthService(store)


def parse_page(value) -> int:
    """Page numbers are 1-indexed; anything unparseable or below 1 is page 1."""
    try:
        page = int(value)
    except (TypeError, ValueError):
        return 1
    return max(page, 1)
