from typing import Any, List

from sqlalchemy import case, func, or_
from sqlalchemy.orm import Session

from app.models import Customer, Invoice


class CustomerRepository:
    @staticmethod
    def count(db: Session) -> int:
        return db.query(func.count(Customer.id)).scalar() or 0

    @staticmethod
    def list_fields(db: Session) -> List[Any]:
        return db.query(Customer.id, Customer.name).order_by(Customer.name.asc()).all()

    @staticmethod
    def list_filtered_with_totals(db: Session, query: str) -> List[Any]:
        """Customers matching ``query`` with their invoice count and per-status totals."""
        pending = func.coalesce(func.sum(case((Invoice.status == "pending", Invoice.amount), else_=0)), 0)
        paid = func.coalesce(func.sum(case((Invoice.status == "paid", Invoice.amount), else_=0)), 0)
        return (
            db.query(
                Customer.id,
                Customer.name,
                Customer.email,
                Customer.image_url,
                func.count(Invoice.id).label("total_invoices"),
                pending.label("total_pending"),
                paid.label("total_paid"),
            )
            .outerjoin(Invoice, Invoice.customer_id == Customer.id)
            .filter(
                or_(
                    Customer.name.icontains(query, autoescape=True),
                    Customer.email.icontains(query, autoescape=True),
                )
            )
            .group_by(Customer.id, Customer.name, Customer.email, Customer.image_url)
            .order_by(Customer.name.asc())
            .all()
        )
