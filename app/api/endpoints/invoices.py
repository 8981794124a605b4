import asyncio
import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import RedirectResponse

from app.api.deps import get_data_service, get_invoice_actions, get_revalidation, parse_page
from app.api.templating import templates
from app.core.cache import Revalidation, no_store
from app.services.auth_service import require_user
from app.services.data_service import DataService
from app.services.invoice_actions import INVOICES_PATH, InvoiceActions
from app.utils.formatting import generate_pagination

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("")
async def list_invoices(
    request: Request,
    query: str = "",
    page: str = "1",
    user: dict = Depends(require_user),
    data: DataService = Depends(get_data_service),
):
    current_page = parse_page(page)

    total_pages, invoices = await asyncio.gather(
        data.fetch_invoices_pages(query),
        data.fetch_filtered_invoices(query, current_page),
    )
    response = templates.TemplateResponse(
        request,
        "invoices/list.html",
        {
            "user": user,
            "invoices": invoices,
            "query": query,
            "current_page": current_page,
            "total_pages": total_pages,
            "pages": generate_pagination(current_page, total_pages),
        },
    )
    return no_store(response)


@router.get("/create")
async def create_invoice_page(
    request: Request,
    user: dict = Depends(require_user),
    data: DataService = Depends(get_data_service),
):
    customers = await data.fetch_customers()
    return templates.TemplateResponse(
        request,
        "invoices/form.html",
        {"user": user, "customers": customers, "invoice": None, "values": {}, "state": None},
    )


@router.post("/create")
async def create_invoice(
    request: Request,
    user: dict = Depends(require_user),
    data: DataService = Depends(get_data_service),
    actions: InvoiceActions = Depends(get_invoice_actions),
    revalidation: Revalidation = Depends(get_revalidation),
):
    form = await request.form()
    state = await actions.create_invoice(form)
    if state.redirect_to:
        return revalidation.apply(RedirectResponse(state.redirect_to, status_code=303))

    customers = await data.fetch_customers()
    return templates.TemplateResponse(
        request,
        "invoices/form.html",
        {"user": user, "customers": customers, "invoice": None, "values": dict(form), "state": state},
    )


@router.get("/{invoice_id}/edit")
async def edit_invoice_page(
    request: Request,
    invoice_id: str,
    user: dict = Depends(require_user),
    data: DataService = Depends(get_data_service),
):
    invoice, customers = await asyncio.gather(
        data.fetch_invoice_by_id(invoice_id),
        data.fetch_customers(),
    )
    values = {"customerId": invoice.customer_id, "amount": invoice.amount, "status": invoice.status}
    response = templates.TemplateResponse(
        request,
        "invoices/form.html",
        {"user": user, "customers": customers, "invoice": invoice, "values": values, "state": None},
    )
    return no_store(response)


@router.post("/{invoice_id}/edit")
async def update_invoice(
    request: Request,
    invoice_id: str,
    user: dict = Depends(require_user),
    data: DataService = Depends(get_data_service),
    actions: InvoiceActions = Depends(get_invoice_actions),
    revalidation: Revalidation = Depends(get_revalidation),
):
    form = await request.form()
    state = await actions.update_invoice(invoice_id, form)
    if state.redirect_to:
        return revalidation.apply(RedirectResponse(state.redirect_to, status_code=303))

    invoice, customers = await asyncio.gather(
        data.fetch_invoice_by_id(invoice_id),
        data.fetch_customers(),
    )
    return templates.TemplateResponse(
        request,
        "invoices/form.html",
        {"user": user, "customers": customers, "invoice": invoice, "values": dict(form), "state": state},
    )


@router.post("/{invoice_id}/delete")
async def delete_invoice(
    invoice_id: str,
    user: dict = Depends(require_user),
    actions: InvoiceActions = Depends(get_invoice_actions),
    revalidation: Revalidation = Depends(get_revalidation),
):
    state = await actions.delete_invoice(invoice_id)
    if not state.ok:
        logger.warning(f"Delete of invoice {invoice_id} failed: {state.message}")
    return revalidation.apply(RedirectResponse(INVOICES_PATH, status_code=303))
