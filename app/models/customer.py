import uuid

from sqlalchemy import Column, String
from sqlalchemy.orm import relationship

from app.core.database import Base


class Customer(Base):
    __tablename__ = "customers"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String(255), nullable=False, index=True)
    email = Column(String(255), nullable=False)
    image_url = Column(String(255), nullable=False, default="")

    invoices = relationship("Invoice", back_populates="customer")
