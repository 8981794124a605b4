import datetime
from typing import Any, List, Optional

from sqlalchemy import case, func
from sqlalchemy.orm import Session

from app.models import Customer, Invoice
from app.repositories.filters import InvoiceSearch

ITEMS_PER_PAGE = 6


class InvoiceRepository:
    @staticmethod
    def list_latest(db: Session, limit: int = 5) -> List[Any]:
        return (
            db.query(
                Invoice.id,
                Invoice.amount,
                Customer.name,
                Customer.email,
                Customer.image_url,
            )
            .join(Customer, Invoice.customer_id == Customer.id)
            .order_by(Invoice.date.desc(), Invoice.id)
            .limit(limit)
            .all()
        )

    @staticmethod
    def count(db: Session) -> int:
        return db.query(func.count(Invoice.id)).scalar() or 0

    @staticmethod
    def totals_by_status(db: Session) -> Any:
        """Sum of paid and of pending amounts, in one pass over invoices."""
        return (
            db.query(
                func.coalesce(func.sum(case((Invoice.status == "paid", Invoice.amount), else_=0)), 0).label("paid"),
                func.coalesce(func.sum(case((Invoice.status == "pending", Invoice.amount), else_=0)), 0).label("pending"),
            )
            .filter(Invoice.status.in_(["paid", "pending"]))
            .one()
        )

    @staticmethod
    def list_filtered(db: Session, search: InvoiceSearch, offset: int, limit: int = ITEMS_PER_PAGE) -> List[Any]:
        return (
            db.query(
                Invoice.id,
                Invoice.customer_id,
                Invoice.amount,
                Invoice.date,
                Invoice.status,
                Customer.name,
                Customer.email,
                Customer.image_url,
            )
            .join(Customer, Invoice.customer_id == Customer.id)
            .filter(search.open_filter())
            .order_by(Invoice.date.desc(), Invoice.id)
            .offset(offset)
            .limit(limit)
            .all()
        )

    @staticmethod
    def count_filtered(db: Session, search: InvoiceSearch) -> int:
        return (
            db.query(func.count(Invoice.id))
            .join(Customer, Invoice.customer_id == Customer.id)
            .filter(search.exact_filter())
            .scalar()
            or 0
        )

    @staticmethod
    def get_by_id(db: Session, invoice_id: str) -> Optional[Any]:
        return (
            db.query(Invoice.id, Invoice.customer_id, Invoice.amount, Invoice.status)
            .filter(Invoice.id == invoice_id)
            .first()
        )

    @staticmethod
    def create(db: Session, customer_id: str, amount: int, status: str, date: datetime.date) -> str:
        invoice = Invoice(customer_id=customer_id, amount=amount, status=status, date=date)
        db.add(invoice)
        db.commit()
        return invoice.id

    @staticmethod
    def update(db: Session, invoice_id: str, customer_id: str, amount: int, status: str) -> int:
        updated = (
            db.query(Invoice)
            .filter(Invoice.id == invoice_id)
            .update(
                {"customer_id": customer_id, "amount": amount, "status": status},
                synchronize_session=False,
            )
        )
        db.commit()
        return updated

    @staticmethod
    def delete(db: Session, invoice_id: str) -> int:
        deleted = db.query(Invoice).filter(Invoice.id == invoice_id).delete(synchronize_session=False)
        db.commit()
        return deleted
