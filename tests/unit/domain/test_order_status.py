"""Tests for the OrderStatus tagged union and its factory."""

from datetime import datetime

import pydantic
import pytest

from ordering.domain.entities import (
    Cancelled,
    Delivered,
    Draft,
    OrderStatusAdapter,
    OrderStatusFactory,
    Placed,
    Shipped,
    is_draft,
    is_placed,
    is_shipped,
)


class TestOrderStatusFactory:

    def test_draft_stamps_clock(self, clock):
        status = OrderStatusFactory(clock).draft()

        assert isinstance(status, Draft)
        assert status.type == "DRAFT"
        assert status.created_at == clock.now

    def test_placed(self, clock):
        result = OrderStatusFactory(clock).placed("payment-456")

        assert result.is_ok()
        assert isinstance(result.value, Placed)
        assert result.value.payment_id == "payment-456"
        assert result.value.placed_at == clock.now

    def test_placed_requires_payment_id(self, clock):
        result = OrderStatusFactory(clock).placed("")

        assert result.is_err()
        assert result.error.type == "ValidationError"
        assert "at least 1 character" in result.error.message

    def test_shipped(self, clock):
        result = OrderStatusFactory(clock).shipped("TRACK123")

        assert result.is_ok()
        assert isinstance(result.value, Shipped)
        assert result.value.tracking_code == "TRACK123"

    def test_shipped_requires_tracking_code(self, clock):
        assert OrderStatusFactory(clock).shipped("").is_err()

    def test_delivered(self, clock):
        result = OrderStatusFactory(clock).delivered()

        assert result.is_ok()
        assert isinstance(result.value, Delivered)
        assert result.value.delivered_at == clock.now

    def test_cancelled(self, clock):
        result = OrderStatusFactory(clock).cancelled("Customer request")

        assert result.is_ok()
        assert isinstance(result.value, Cancelled)
        assert result.value.reason == "Customer request"

    def test_cancelled_reason_needs_five_characters(self, clock):
        result = OrderStatusFactory(clock).cancelled("nope")

        assert result.is_err()
        assert "at least 5 characters" in result.error.message

    def test_cancelled_reason_of_exactly_five_characters(self, clock):
        assert OrderStatusFactory(clock).cancelled("Oops!").is_ok()

    def test_draft_requires_aware_clock(self):
        with pytest.raises(pydantic.ValidationError, match="timezone"):
            OrderStatusFactory(lambda: datetime(2026, 1, 1)).draft()

    def test_naive_clock_is_rejected(self):
        result = OrderStatusFactory(lambda: datetime(2026, 1, 1)).placed("payment-1")

        assert result.is_err()
        assert "timezone" in result.error.message


class TestTaggedUnion:

    def test_discriminator_selects_variant(self, clock):
        status = OrderStatusAdapter.validate_python(
            {"type": "SHIPPED", "shipped_at": clock.now, "tracking_code": "T-1"}
        )

        assert isinstance(status, Shipped)
        assert is_shipped(status)
        assert not is_placed(status)

    def test_fields_of_other_variants_are_rejected(self, clock):
        with pytest.raises(pydantic.ValidationError):
            OrderStatusAdapter.validate_python(
                {"type": "DRAFT", "created_at": clock.now, "tracking_code": "T-1"}
            )

    def test_unknown_type_is_rejected(self, clock):
        with pytest.raises(pydantic.ValidationError):
            OrderStatusAdapter.validate_python({"type": "LOST", "lost_at": clock.now})

    def test_type_guards(self, clock):
        draft = OrderStatusFactory(clock).draft()

        assert is_draft(draft)
        assert not is_placed(draft)
        assert not is_shipped(draft)
