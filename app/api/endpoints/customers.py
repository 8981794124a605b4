from fastapi import APIRouter, Depends, Request

from app.api.deps import get_data_service
from app.api.templating import templates
from app.core.cache import no_store
from app.services.auth_service import require_user
from app.services.data_service import DataService

router = APIRouter()


@router.get("")
async def list_customers(
    request: Request,
    query: str = "",
    user: dict = Depends(require_user),
    data: DataService = Depends(get_data_service),
):
    customers = await data.fetch_filtered_customers(query)
    response = templates.TemplateResponse(
        request,
        "customers/list.html",
        {"user": user, "customers": customers, "query": query},
    )
    return no_store(response)
