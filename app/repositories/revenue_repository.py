from typing import Any, List

from sqlalchemy import case
from sqlalchemy.orm import Session

from app.models import Revenue
from app.utils.formatting import MONTHS


class RevenueRepository:
    @staticmethod
    def list_all(db: Session) -> List[Any]:
        # Calendar order; labels that are not month abbreviations sort last
        month_order = case({month: index for index, month in enumerate(MONTHS)}, value=Revenue.month, else_=len(MONTHS))
        return db.query(Revenue.month, Revenue.revenue).order_by(month_order, Revenue.month).all()
