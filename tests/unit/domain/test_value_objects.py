"""Tests for Money and OrderItem value objects."""

from decimal import Decimal

import pydantic
import pytest

from ordering.domain import Money, OrderItem, create_money, create_order_item
from ordering.shared.errors import ValidationError


class TestCreateMoney:
    """create_money returns a Result instead of raising."""

    def test_valid_money(self):
        result = create_money(1000, "JPY")

        assert result.is_ok()
        assert result.value.amount == Decimal("1000")
        assert result.value.currency == "JPY"

    def test_zero_amount_is_allowed(self):
        result = create_money(0, "USD")

        assert result.is_ok()
        assert result.value.is_zero()

    def test_numeric_string_is_coerced_to_decimal(self):
        result = create_money("19.99", "EUR")

        assert result.is_ok()
        assert result.value.amount == Decimal("19.99")

    def test_negative_amount_fails(self):
        result = create_money(-1, "JPY")

        assert result.is_err()
        assert isinstance(result.error, ValidationError)
        assert "greater than or equal to 0" in result.error.message

    @pytest.mark.parametrize("currency", ["jpy", "JP", "JPYY", "J1Y", ""])
    def test_malformed_currency_fails(self, currency):
        result = create_money(100, currency)

        assert result.is_err()
        assert "pattern" in result.error.message

    def test_only_first_violation_is_reported(self):
        result = create_money(-1, "bad")

        assert result.is_err()
        assert "greater than or equal to 0" in result.error.message
        assert "pattern" not in result.error.message


class TestMoney:
    """Money arithmetic and immutability."""

    def test_add_same_currency(self):
        total = Money(amount=100, currency="JPY") + Money(amount=250, currency="JPY")

        assert total == Money(amount=350, currency="JPY")

    def test_add_different_currencies_raises(self):
        with pytest.raises(ValueError, match="different currencies"):
            Money(amount=1, currency="JPY") + Money(amount=1, currency="USD")

    def test_multiply(self):
        assert Money(amount=1000, currency="JPY").multiply(3).amount == Decimal("3000")

    def test_is_frozen(self):
        money = Money(amount=1, currency="JPY")

        with pytest.raises(pydantic.ValidationError):
            money.amount = Decimal("2")

    def test_equality_is_by_value(self):
        assert Money(amount="10.0", currency="USD") == Money(amount=Decimal("10.0"), currency="USD")

    def test_str(self):
        assert str(Money(amount=5, currency="USD")) == "5 USD"


class TestCreateOrderItem:
    """OrderItem bounds: non-empty product id, quantity 1..100."""

    def test_valid_item(self, jpy):
        result = create_order_item("p1", 2, jpy)

        assert result.is_ok()
        assert result.value.subtotal() == Money(amount=2000, currency="JPY")

    def test_raw_money_mapping_is_validated(self):
        result = create_order_item("p1", 1, {"amount": 10, "currency": "usd"})

        assert result.is_err()
        assert "pattern" in result.error.message

    def test_empty_product_id_fails(self, jpy):
        result = create_order_item("", 1, jpy)

        assert result.is_err()
        assert "at least 1 character" in result.error.message

    @pytest.mark.parametrize("quantity", [1, 50, 100])
    def test_quantity_within_bounds(self, jpy, quantity):
        assert create_order_item("p1", quantity, jpy).is_ok()

    def test_zero_quantity_fails(self, jpy):
        result = create_order_item("p1", 0, jpy)

        assert result.is_err()
        assert "greater than or equal to 1" in result.error.message

    def test_quantity_over_limit_fails(self, jpy):
        result = create_order_item("p1", 101, jpy)

        assert result.is_err()
        assert "less than or equal to 100" in result.error.message

    def test_fractional_quantity_fails(self, jpy):
        result = create_order_item("p1", 1.5, jpy)

        assert result.is_err()
        assert "valid integer" in result.error.message

    def test_boolean_quantity_fails(self, jpy):
        result = create_order_item("p1", True, jpy)

        assert result.is_err()
        assert isinstance(result.error, ValidationError)
        assert "valid integer" in result.error.message

    def test_numeric_string_quantity_fails(self, jpy):
        result = create_order_item("p1", "7", jpy)

        assert result.is_err()
        assert isinstance(result.error, ValidationError)
        assert "valid integer" in result.error.message

    def test_item_is_frozen(self, jpy):
        item = OrderItem(product_id="p1", quantity=1, unit_price=jpy)

        with pytest.raises(pydantic.ValidationError):
            item.quantity = 5
