"""Tests for the shared document layout."""

from datetime import datetime, timezone

from rootx.domain.model.order import OrderStatus
from rootx.domain.model.product import Product
from rootx.domain.model.value_objects import Money
from rootx.infrastructure.documents import (
    order_from_document,
    product_from_document,
    product_to_document,
)
from tests.fakes import WIDGET_ID


def _order_doc(**overrides):
    doc = {
        "_id": "64b7f0c2a1b2c3d4e5f6aaaa",
        "products": [
            {"productId": WIDGET_ID, "title": "Widget", "code": "W-1", "price": 80, "quantity": 2},
        ],
        "customerName": "Mitu",
        "totalValue": 9999,
        "deliveryCharge": 60,
        "status": "processing",
        "createdAt": "2024-05-01T10:30:00.000Z",
    }
    doc.update(overrides)
    return doc


class TestOrderDocuments:

    def test_total_is_derived_not_read(self):
        order = order_from_document(_order_doc())
        assert order.total_value == Money.of("160")

    def test_trailing_z_timestamp(self):
        order = order_from_document(_order_doc())
        assert order.created_at == datetime(2024, 5, 1, 10, 30, tzinfo=timezone.utc)

    def test_naive_timestamp_is_utc(self):
        order = order_from_document(_order_doc(createdAt="2024-05-01T10:30:00"))
        assert order.created_at.tzinfo == timezone.utc

    def test_missing_optional_fields(self):
        doc = _order_doc()
        del doc["status"]
        del doc["deliveryCharge"]
        order = order_from_document(doc)
        assert order.status is OrderStatus.PENDING
        assert order.delivery_charge == Money.zero()
        assert order.items[0].color == ""
        assert order.items[0].size is None


class TestProductDocuments:

    def test_wire_shape(self):
        product = Product.create(code="W-1", title="Widget", price=Money.of("100"))
        doc = product_to_document(product)
        assert doc["_id"] == product.id
        assert doc["price"] == 100
        assert doc["priceAfterDiscount"] is None
        assert doc["sizes"] == ["S", "M", "L", "XL", "XXL"]
        assert "imageUrl" in doc

    def test_missing_sizes_get_defaults(self):
        product = product_from_document(
            {"_id": WIDGET_ID, "code": "W-1", "title": "Widget", "price": 10.5}
        )
        assert product.price == Money.of("10.5")
        assert product.sizes == ["S", "M", "L", "XL", "XXL"]
        assert product.categories == []
