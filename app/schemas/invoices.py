import datetime
from typing import Annotated, Dict, List, Literal, Optional

from pydantic import BaseModel, Field, StringConstraints

from app.core.errors import ErrorKind
from app.utils.money import MAX_AMOUNT

InvoiceStatus = Literal["pending", "paid"]


class InvoiceTableRow(BaseModel):
    id: str
    customer_id: str
    name: str
    email: str
    image_url: str
    date: datetime.date
    amount: int  # cents
    status: str


class InvoiceForm(BaseModel):
    """An invoice as loaded into the edit form; amount is in currency units"""
    id: str
    customer_id: str
    amount: float
    status: InvoiceStatus


class InvoiceFormInput(BaseModel):
    customer_id: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)] = Field(alias="customerId")
    amount: float = Field(gt=0, le=MAX_AMOUNT, allow_inf_nan=False)
    status: InvoiceStatus


class ActionState(BaseModel):
    """Outcome of a form action.

    Validation failures fill ``errors`` per form field; store failures only set
    ``message``. A successful create/update carries ``redirect_to``.
    """
    errors: Optional[Dict[str, List[str]]] = None
    message: Optional[str] = None
    kind: Optional[ErrorKind] = None
    redirect_to: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.kind is None
