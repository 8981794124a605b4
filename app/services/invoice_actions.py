import datetime
import logging
from typing import Any, Dict, List, Mapping, Optional, Tuple

from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError

from app.core.cache import Revalidation
from app.core.database import Store
from app.core.errors import ErrorKind
from app.repositories.invoice_repository import InvoiceRepository
from app.schemas.invoices import ActionState, InvoiceFormInput
from app.utils.money import to_cents

logger = logging.getLogger(__name__)

INVOICES_PATH = "/dashboard/invoices"

FIELD_MESSAGES = {
    "customerId": "Please select a customer.",
    "amount": "Please enter an amount greater than $0.",
    "status": "Please select an invoice status.",
}


def validate_invoice_form(form: Mapping[str, Any]) -> Tuple[Optional[InvoiceFormInput], Optional[Dict[str, List[str]]]]:
    """Parse untrusted form fields. Returns (data, None) or (None, field errors)."""
    try:
        data = InvoiceFormInput.model_validate({
            "customerId": form.get("customerId"),
            "amount": form.get("amount"),
            "status": form.get("status"),
        })
        return data, None
    except ValidationError as exc:
        errors: Dict[str, List[str]] = {}
        for error in exc.errors():
            field = str(error["loc"][0])
            message = FIELD_MESSAGES.get(field, error["msg"])
            if message not in errors.setdefault(field, []):
                errors[field].append(message)
        return None, errors


class InvoiceActions:
    """Write side of the dashboard.

    Failures come back as ``ActionState`` values rather than exceptions so the
    form can be re-rendered with field or banner messages.
    """

    def __init__(self, store: Store, revalidation: Revalidation):
        self.store = store
        self.revalidation = revalidation

    async def create_invoice(self, form: Mapping[str, Any]) -> ActionState:
        data, errors = validate_invoice_form(form)
        if errors:
            return ActionState(
                errors=errors,
                message="Missing Fields. Failed to Create Invoice.",
                kind=ErrorKind.VALIDATION_FAILED,
            )

        amount_in_cents = to_cents(data.amount)
        date = datetime.datetime.now(datetime.timezone.utc).date()

        try:
            invoice_id = await self.store.run(
                InvoiceRepository.create, data.customer_id, amount_in_cents, data.status, date
            )
        except SQLAlchemyError as exc:
            logger.error(f"Database Error: {exc}")
            return ActionState(
                message="Database Error: Failed to create invoice.",
                kind=ErrorKind.STORE_WRITE_FAILED,
            )

        logger.info(f"Created invoice {invoice_id}")
        self.revalidation.revalidate_path(INVOICES_PATH)
        return ActionState(redirect_to=INVOICES_PATH)

    async def update_invoice(self, invoice_id: str, form: Mapping[str, Any]) -> ActionState:
        data, errors = validate_invoice_form(form)
        if errors:
            return ActionState(
                errors=errors,
                message="Missing Fields. Failed to update invoice.",
                kind=ErrorKind.VALIDATION_FAILED,
            )

        amount_in_cents = to_cents(data.amount)

        try:
            # An unknown id updates nothing and is not reported
            await self.store.run(
                InvoiceRepository.update, invoice_id, data.customer_id, amount_in_cents, data.status
            )
        except SQLAlchemyError as exc:
            logger.error(f"Database Error: {exc}")
            return ActionState(
                message="Database Error: Failed to update invoice.",
                kind=ErrorKind.STORE_WRITE_FAILED,
            )

        self.revalidation.revalidate_path(INVOICES_PATH)
        return ActionState(redirect_to=INVOICES_PATH)

    async def delete_invoice(self, invoice_id: str) -> ActionState:
        try:
            deleted = await self.store.run(InvoiceRepository.delete, invoice_id)
        except SQLAlchemyError as exc:
            logger.error(f"Database Error: {exc}")
            return ActionState(
                message="Database Error: Failed to delete invoice.",
                kind=ErrorKind.STORE_WRITE_FAILED,
            )

        if not deleted:
            logger.warning(f"Delete requested for unknown invoice {invoice_id}")
            return ActionState(
                message="Database Error: Failed to delete invoice.",
                kind=ErrorKind.NOT_FOUND,
            )

        self.revalidation.revalidate_path(INVOICES_PATH)
        return ActionState(message="Invoice deleted successfully.")
