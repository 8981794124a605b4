import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import RedirectResponse

from app.api.deps import get_auth_service
from app.api.templating import templates
from app.services.auth_service import AuthService, current_user

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/", include_in_schema=False)
async def home():
    return RedirectResponse("/dashboard", status_code=303)


@router.get("/login")
async def login_page(request: Request):
    if current_user(request):
        return RedirectResponse("/dashboard", status_code=303)
    return templates.TemplateResponse(request, "login.html", {"error": None, "email": ""})


@router.post("/login")
async def login(request: Request, auth: AuthService = Depends(get_auth_service)):
    form = await request.form()
    error = await auth.authenticate(request.session, form)
    if error:
        return templates.TemplateResponse(
            request,
            "login.html",
            {"error": error, "email": form.get("email") or ""},
            status_code=401,
        )
    return RedirectResponse("/dashboard", status_code=303)


@router.post("/logout")
async def logout(request: Request):
    AuthService.sign_out(request.session)
    return RedirectResponse("/login", status_code=303)
