import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import RedirectResponse
from starlette.middleware.sessions import SessionMiddleware

from app.api.router import api_router
from app.api.templating import templates
from app.core.config import Settings, settings as default_settings
from app.core.database import Store
from app.core.errors import DashboardError, NotFoundError
from app.services.auth_service import LoginRequired

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings
    configure_logging(settings.LOG_LEVEL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        store = Store(settings.database_url, echo=settings.SQL_ECHO)
        store.create_all()
        app.state.store = store
        logger.info(f"Store ready ({store.engine.url.render_as_string(hide_password=True)})")
        try:
            yield
        finally:
            store.dispose()

    app = FastAPI(title="Invoice Dashboard", lifespan=lifespan)
    app.state.settings = settings

    app.add_middleware(SessionMiddleware, secret_key=settings.SECRET_KEY, same_site="lax")

    @app.exception_handler(LoginRequired)
    async def login_required_handler(request: Request, exc: LoginRequired):
        return RedirectResponse("/login", status_code=303)

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError):
        return templates.TemplateResponse(
            request, "not_found.html", {"message": "Could not find the requested invoice."}, status_code=404
        )

    @app.exception_handler(DashboardError)
    async def dashboard_error_handler(request: Request, exc: DashboardError):
        return templates.TemplateResponse(
            request, "error.html", {"message": exc.message}, status_code=500
        )

    app.include_router(api_router)
    return app


app = create_app()
