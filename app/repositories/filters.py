import datetime
import math
from typing import List, Optional

from sqlalchemy import and_, or_
from sqlalchemy.sql.elements import ColumnElement

from app.models import Customer, Invoice

DATE_FORMATS = ("%b %d, %Y", "%m/%d/%Y")


def parse_number(query: str) -> Optional[float]:
    text = query.strip()
    if not text or "_" in text:
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def parse_date(query: str) -> Optional[datetime.date]:
    text = query.strip()
    if not text:
        return None
    try:
        return datetime.datetime.fromisoformat(text).date()
    except ValueError:
        pass
    for fmt in DATE_FORMATS:
        try:
            return datetime.datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    return None


class InvoiceSearch:
    """Builds the OR-combined predicate behind the invoice search box.

    Text terms always apply. The amount and date terms are appended only when
    the query parses as a number or a date.
    """

    def __init__(self, query: str = ""):
        self.query = query or ""
        self.number = parse_number(self.query)
        self.date = parse_date(self.query)

    def _text_clauses(self) -> List[ColumnElement]:
        return [
            Customer.name.icontains(self.query, autoescape=True),
            Customer.email.icontains(self.query, autoescape=True),
        ]

    def _status_clause(self) -> ColumnElement:
        return Invoice.status.icontains(self.query, autoescape=True)

    def open_clauses(self) -> List[ColumnElement]:
        """Listing terms: amount (in cents) and date are lower bounds."""
        clauses = self._text_clauses()
        if self.number is not None:
            clauses.append(Invoice.amount >= self.number)
        if self.date is not None:
            clauses.append(Invoice.date >= self.date)
        clauses.append(self._status_clause())
        return clauses

    def exact_clauses(self) -> List[ColumnElement]:
        """Page-count terms: amount (in currency units) and date must match exactly."""
        clauses = self._text_clauses()
        if self.number is not None:
            cents = self.number * 100
            clauses.append(and_(Invoice.amount >= cents, Invoice.amount <= cents))
        if self.date is not None:
            clauses.append(and_(Invoice.date >= self.date, Invoice.date <= self.date))
        clauses.append(self._status_clause())
        return clauses

    def open_filter(self) -> ColumnElement:
        return or_(*self.open_clauses())

    def exact_filter(self) -> ColumnElement:
        return or_(*self.exact_clauses())
