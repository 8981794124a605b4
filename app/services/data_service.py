import asyncio
import logging
import math
from contextlib import contextmanager
from typing import Iterator, List

from sqlalchemy.exc import SQLAlchemyError

from app.core.database import Store
from app.core.errors import FetchError, InvalidStatusError, NotFoundError
from app.models import INVOICE_STATUSES
from app.repositories.customer_repository import CustomerRepository
from app.repositories.filters import InvoiceSearch
from app.repositories.invoice_repository import ITEMS_PER_PAGE, InvoiceRepository
from app.repositories.revenue_repository import RevenueRepository
from app.schemas.customers import CustomerField, CustomerTableRow
from app.schemas.dashboard import CardData, LatestInvoice, Revenue
from app.schemas.invoices import InvoiceForm, InvoiceTableRow
from app.utils.formatting import format_currency
from app.utils.money import from_cents

logger = logging.getLogger(__name__)


@contextmanager
def translate_store_errors(message: str) -> Iterator[None]:
    """Log a store failure in full and re-raise it as a generic FetchError."""
    try:
        yield
    except SQLAlchemyError as exc:
        logger.error(f"Database Error: {exc}")
        raise FetchError(message) from None


class DataService:
    """Read side of the dashboard. Every method is a query plus shaping."""

    def __init__(self, store: Store):
        self.store = store

    async def fetch_revenue(self) -> List[Revenue]:
        with translate_store_errors("Failed to fetch revenue data."):
            rows = await self.store.run(RevenueRepository.list_all)
        return [Revenue(month=row.month, revenue=row.revenue) for row in rows]

    async def fetch_latest_invoices(self) -> List[LatestInvoice]:
        with translate_store_errors("Failed to fetch the latest invoices."):
            rows = await self.store.run(InvoiceRepository.list_latest, 5)
        return [
            LatestInvoice(
                id=row.id,
                name=row.name,
                email=row.email,
                image_url=row.image_url,
                amount=format_currency(row.amount),
            )
            for row in rows
        ]

    async def fetch_card_data(self) -> CardData:
        """Invoice count, customer count and status totals, queried concurrently.

        If any of the three queries fails the whole call fails.
        """
        with translate_store_errors("Failed to fetch card data."):
            number_of_invoices, number_of_customers, totals = await asyncio.gather(
                self.store.run(InvoiceRepository.count),
                self.store.run(CustomerRepository.count),
                self.store.run(InvoiceRepository.totals_by_status),
            )
        return CardData(
            number_of_invoices=number_of_invoices,
            number_of_customers=number_of_customers,
            total_paid_invoices=format_currency(totals.paid),
            total_pending_invoices=format_currency(totals.pending),
        )

    async def fetch_filtered_invoices(self, query: str, current_page: int) -> List[InvoiceTableRow]:
        offset = (current_page - 1) * ITEMS_PER_PAGE
        search = InvoiceSearch(query)
        with translate_store_errors("Failed to fetch invoices."):
            rows = await self.store.run(InvoiceRepository.list_filtered, search, offset)
        return [
            InvoiceTableRow(
                id=row.id,
                customer_id=row.customer_id,
                name=row.name,
                email=row.email,
                image_url=row.image_url,
                date=row.date,
                amount=row.amount,
                status=row.status,
            )
            for row in rows
        ]

    async def fetch_invoices_pages(self, query: str) -> int:
        search = InvoiceSearch(query)
        with translate_store_errors("Failed to fetch total number of invoices."):
            count = await self.store.run(InvoiceRepository.count_filtered, search)
        return math.ceil(count / ITEMS_PER_PAGE)

    async def fetch_invoice_by_id(self, invoice_id: str) -> InvoiceForm:
        with translate_store_errors("Failed to fetch invoice."):
            row = await self.store.run(InvoiceRepository.get_by_id, invoice_id)

        if row is None:
            raise NotFoundError(f"Invoice with id {invoice_id} not found")
        if row.status not in INVOICE_STATUSES:
            logger.error(f"Invoice {invoice_id} has invalid status {row.status!r}")
            raise InvalidStatusError(f"Invalid status: {row.status}")

        return InvoiceForm(
            id=row.id,
            customer_id=row.customer_id,
            amount=from_cents(row.amount),
            status=row.status,
        )

    async def fetch_customers(self) -> List[CustomerField]:
        with translate_store_errors("Failed to fetch all customers."):
            rows = await self.store.run(CustomerRepository.list_fields)
        return [CustomerField(id=row.id, name=row.name) for row in rows]

    async def fetch_filtered_customers(self, query: str) -> List[CustomerTableRow]:
        with translate_store_errors("Failed to fetch customer table."):
            rows = await self.store.run(CustomerRepository.list_filtered_with_totals, query or "")
        return [
            CustomerTableRow(
                id=row.id,
                name=row.name,
                email=row.email,
                image_url=row.image_url,
                total_invoices=row.total_invoices,
                total_pending=format_currency(row.total_pending),
                total_paid=format_currency(row.total_paid),
            )
            for row in rows
        ]
