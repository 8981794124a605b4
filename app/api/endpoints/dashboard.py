import asyncio

from fastapi import APIRouter, Depends, Request

from app.api.deps import get_data_service
from app.api.templating import templates
from app.core.cache import no_store
from app.services.auth_service import require_user
from app.services.data_service import DataService
from app.utils.formatting import generate_y_axis

router = APIRouter()


@router.get("")
async def overview(
    request: Request,
    user: dict = Depends(require_user),
    data: DataService = Depends(get_data_service),
):
    revenue, latest_invoices, cards = await asyncio.gather(
        data.fetch_revenue(),
        data.fetch_latest_invoices(),
        data.fetch_card_data(),
    )
    response = templates.TemplateResponse(
        request,
        "dashboard/overview.html",
        {
            "user": user,
            "revenue": revenue,
            "y_axis": generate_y_axis(revenue),
            "latest_invoices": latest_invoices,
            "cards": cards,
        },
    )
    return no_store(response)
