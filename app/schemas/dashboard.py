from pydantic import BaseModel
from typing import List


class Revenue(BaseModel):
    month: str
    revenue: int


class LatestInvoice(BaseModel):
    """One row of the latest-invoices panel; amount is already formatted"""
    id: str
    name: str
    email: str
    image_url: str
    amount: str


class CardData(BaseModel):
    number_of_invoices: int
    number_of_customers: int
    total_paid_invoices: str
    total_pending_invoices: str


class YAxis(BaseModel):
    labels: List[str]
    top_label: int
