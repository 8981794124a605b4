from .user import User
from .customer import Customer
from .invoice import Invoice, INVOICE_STATUSES
from .revenue import Revenue

__all__ = [
    "User",
    "Customer",
    "Invoice",
    "INVOICE_STATUSES",
    "Revenue",
]
