import datetime
from decimal import Decimal
from typing import Iterable, List, Union

from app.schemas.dashboard import YAxis
from app.utils.money import round_money

DateLike = Union[datetime.date, datetime.datetime, str]

MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def format_currency(cents: int) -> str:
    """Format integer cents as US dollars, e.g. 123456 -> '$1,234.56'."""
    value = round_money(Decimal(int(cents or 0)) / 100)
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.2f}"


def format_date_to_local(value: DateLike) -> str:
    """Format a date as 'Jan 5, 2024'."""
    if isinstance(value, str):
        value = datetime.date.fromisoformat(value[:10])
    return f"{MONTHS[value.month - 1]} {value.day}, {value.year}"


def generate_y_axis(revenue: Iterable) -> YAxis:
    """Y-axis labels for the revenue chart, in $1K steps from the highest month down to $0K."""
    values = [row.revenue for row in revenue]
    highest = max(values) if values else 0
    top_label = -(-highest // 1000) * 1000
    labels = [f"${i // 1000}K" for i in range(top_label, -1, -1000)]
    return YAxis(labels=labels, top_label=top_label)


def generate_pagination(current_page: int, total_pages: int) -> List[Union[int, str]]:
    # Show every page when there are few of them
    if total_pages <= 7:
        return list(range(1, total_pages + 1))

    if current_page <= 3:
        return [1, 2, 3, "...", total_pages - 1, total_pages]

    if current_page >= total_pages - 2:
        return [1, 2, "...", total_pages - 2, total_pages - 1, total_pages]

    return [1, "...", current_page - 1, current_page, current_page + 1, "...", total_pages]
