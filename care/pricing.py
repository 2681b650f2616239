"""
Booking totals.

A total is the per-unit rate times the quantity, rounded half up to a
whole currency unit.  The quantity goes through its decimal string so
binary float noise in the multiplication cannot move the result.
"""
from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from django.conf import settings

# Upper bound of the PositiveIntegerField `total` columns on every backend
MAX_TOTAL = 2_147_483_647


def compute_total(rate: int, quantity: int | float) -> int:
    amount = Decimal(rate) * Decimal(str(quantity))
    return int(amount.quantize(Decimal('1'), rounding=ROUND_HALF_UP))


def total_fits(rate: int, quantity: int | float) -> bool:
    """Whether ``rate * quantity`` still rounds into a storable total."""
    return quantity * rate < MAX_TOTAL


def nurse_rate_per_hour() -> int:
    return settings.NURSE_RATE_PER_HOUR


def subscription_rate_per_day() -> int:
    return settings.SUBSCRIPTION_RATE_PER_DAY


def ambulance_rate_per_km() -> int:
    return settings.AMBULANCE_RATE_PER_KM
