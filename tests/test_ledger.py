"""Tests for lookup, adjustment, ordering and formatting of payments."""

import pytest
from decimal import Decimal

from pydantic import ValidationError

from billbalance.ledger import (
    PaymentNotFoundError,
    adjust_payment,
    find_payment,
    format_payment_line,
    format_payment_list,
    payment_sort_key,
    sort_payments,
)
from billbalance.models import Payment


PHONE = Payment(name="Phone", amount=Decimal("10.00"), day_paid=28)
WATER = Payment(name="Water", amount=Decimal("20.00"), day_paid=3)


class TestSorting:
    """Tests for name ordering."""

    def test_payments_are_sorted(self):
        """Test sorting by name regardless of insertion order."""
        assert sort_payments([WATER, PHONE]) == [PHONE, WATER]

    def test_sorted_input_is_unchanged(self):
        """Test an already ordered list comes back in the same order."""
        gym = Payment(name="Gym", amount=Decimal("5"), day_paid=1)
        ordered = [gym, PHONE, WATER]
        result = sort_payments(ordered)
        assert result == ordered
        assert all(a is b for a, b in zip(result, ordered))
        assert result is not ordered

    def test_sort_key(self):
        """Test the key is just the name."""
        assert payment_sort_key(PHONE) == "Phone"


class TestFindPayment:
    """Tests for lookup by name."""

    def test_find_existing(self):
        """Test finding a payment by name."""
        assert find_payment([PHONE, WATER], "Water") is WATER

    def test_find_missing(self):
        """Test lookup failure raises not found."""
        with pytest.raises(PaymentNotFoundError, match="Gas not found"):
            find_payment([PHONE, WATER], "Gas")


class TestAdjustPayment:
    """Tests for adjusting a payment by name."""

    def test_adjust_amount_only(self):
        """Test only the supplied field changes."""
        result = adjust_payment([PHONE, WATER], "Phone", amount=Decimal("12.50"))
        assert result[0] == Payment(name="Phone", amount=Decimal("12.50"), day_paid=28)
        assert result[1] is WATER

    def test_adjust_day_only(self):
        """Test changing only the day paid."""
        result = adjust_payment([PHONE, WATER], "Water", day_paid=7)
        assert result[1].day_paid == 7
        assert result[1].amount == Decimal("20.00")

    def test_adjust_both_fields(self):
        """Test changing amount and day together."""
        result = adjust_payment([PHONE], "Phone", amount=Decimal("0"), day_paid=1)
        assert result == [Payment(name="Phone", amount=Decimal("0"), day_paid=1)]

    def test_adjust_strips_name(self):
        """Test surrounding whitespace in the requested name is ignored."""
        result = adjust_payment([PHONE, WATER], "  Phone ", amount=Decimal("5"))
        assert result[0] == Payment(name="Phone", amount=Decimal("5"), day_paid=28)
        assert find_payment(result, "Phone\t") is result[0]

    def test_adjust_nothing_supplied(self):
        """Test an adjustment with no fields leaves the payment as is."""
        assert adjust_payment([PHONE, WATER], "Phone") == [PHONE, WATER]

    def test_adjust_does_not_mutate_input(self):
        """Test the original list is untouched."""
        payments = [PHONE, WATER]
        adjust_payment(payments, "Phone", amount=Decimal("99"))
        assert payments == [PHONE, WATER]

    def test_adjust_missing_payment(self):
        """Test adjusting an unknown name raises not found."""
        with pytest.raises(PaymentNotFoundError) as exc_info:
            adjust_payment([PHONE, WATER], "Gas", amount=Decimal("1"))
        assert exc_info.value.name == "Gas"
        assert str(exc_info.value) == "Gas not found"

    def test_adjust_revalidates(self):
        """Test out-of-range updates are rejected by the model."""
        with pytest.raises(ValidationError):
            adjust_payment([PHONE], "Phone", day_paid=30)


class TestFormatting:
    """Tests for list output."""

    def test_name_only(self):
        """Test the default layout."""
        assert format_payment_line(PHONE) == "Phone"

    def test_with_amount(self):
        """Test the amount layout."""
        assert format_payment_line(PHONE, show_amount=True) == "Phone £10.00"

    def test_with_day_paid(self):
        """Test the day-paid layout."""
        assert format_payment_line(PHONE, show_day_paid=True) == "Phone, day_paid: 28"

    def test_with_both(self):
        """Test amount and day together."""
        line = format_payment_line(PHONE, show_amount=True, show_day_paid=True)
        assert line == "Phone £10.00, day paid: 28"

    def test_custom_currency(self):
        """Test the currency symbol is configurable."""
        assert format_payment_line(WATER, show_amount=True, currency_symbol="$") == "Water $20.00"

    def test_list_is_sorted(self):
        """Test the list comes out in name order."""
        assert format_payment_list([WATER, PHONE], show_amount=True) == [
            "Phone £10.00",
            "Water £20.00",
        ]
