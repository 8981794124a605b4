import uuid

from sqlalchemy import CheckConstraint, Column, Date, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from app.core.database import Base

INVOICE_STATUSES = ("pending", "paid")


class Invoice(Base):
    __tablename__ = "invoices"
    __table_args__ = (
        CheckConstraint("status IN ('pending', 'paid')", name="ck_invoices_status"),
    )

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    customer_id = Column(String(36), ForeignKey("customers.id"), nullable=False, index=True)
    amount = Column(Integer, nullable=False)  # cents
    status = Column(String(16), nullable=False, index=True)
    date = Column(Date, nullable=False, index=True)

    customer = relationship("Customer", back_populates="invoices")
