"""Balance projection package."""

from billbalance.projection.calendar import days_in_month, is_leap_year, modulo
from billbalance.projection.projector import PaymentManager

__all__ = ["PaymentManager", "days_in_month", "is_leap_year", "modulo"]
