# app/utils/money.py

from decimal import Decimal, ROUND_HALF_UP

# Largest amount whose cents still fit a 32-bit Integer column
MAX_AMOUNT = 21474836.47


def to_cents(amount) -> int:
    """Currency units -> integer cents, the way amounts are stored."""
    return int(round(float(amount) * 100))


def from_cents(cents: int) -> float:
    return cents / 100


def round_money(x) -> Decimal:
    return Decimal(str(x or "0")).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
