from fastapi import APIRouter
from app.api.endpoints import auth, customers, dashboard, invoices

api_router = APIRouter()
api_router.include_router(auth.router, tags=["auth"])
api_router.include_router(dashboard.router, prefix="/dashboard", tags=["dashboard"])
api_router.include_router(invoices.router, prefix="/dashboard/invoices", tags=["invoices"])
api_router.include_router(customers.router, prefix="/dashboard/customers", tags=["customers"])
