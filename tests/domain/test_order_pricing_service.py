"""Unit tests for the OrderPricingService and its precedence rules."""

from decimal import Decimal

import pytest

from rootx.domain.exceptions import NotFoundError, ValidationError
from rootx.domain.model.cart import CartLine, CustomerInfo
from rootx.domain.model.value_objects import Money, Quantity
from rootx.domain.service.order_pricing_service import (
    OrderPricingService,
    normalize_color,
    parse_delivery_charge,
    resolve_category,
    resolve_image_url,
    resolve_unit_price,
)
from tests.fakes import (
    GADGET_ID,
    MISSING_ID,
    SCARF_ID,
    WIDGET_ID,
    FakeProductRepository,
    default_catalog,
    make_product,
)


def _service() -> tuple[OrderPricingService, FakeProductRepository]:
    repo = FakeProductRepository(default_catalog())
    return OrderPricingService(repo), repo


class TestUnitPrice:

    def test_discount_wins(self):
        product = make_product(price="100", discount="80")
        assert resolve_unit_price(product) == Money.of("80")

    def test_zero_discount_still_wins(self):
        product = make_product(price="100", discount="0")
        assert resolve_unit_price(product) == Money.zero()

    def test_list_price_without_discount(self):
        assert resolve_unit_price(make_product(price="100")) == Money.of("100")


class TestLinePrecedence:

    def test_category_from_cart(self):
        product = make_product(categories=["Gifts"])
        line = CartLine(product_id=WIDGET_ID, category="Jewellery")
        assert resolve_category(line, product) == "Jewellery"

    def test_category_falls_back_to_first_product_category(self):
        product = make_product(categories=["Gifts", "Clothing"])
        assert resolve_category(CartLine(product_id=WIDGET_ID), product) == "Gifts"

    def test_category_absent(self):
        assert resolve_category(CartLine(product_id=WIDGET_ID), make_product()) is None

    def test_image_from_cart(self):
        product = make_product(image_url="p.png")
        line = CartLine(product_id=WIDGET_ID, image_url="c.png")
        assert resolve_image_url(line, product) == "c.png"

    def test_image_falls_back_to_product(self):
        product = make_product(image_url="p.png")
        assert resolve_image_url(CartLine(product_id=WIDGET_ID), product) == "p.png"

    def test_image_empty_when_nobody_has_one(self):
        assert resolve_image_url(CartLine(product_id=WIDGET_ID), make_product()) == ""

    @pytest.mark.parametrize("raw, expected", [(None, ""), ("  Red ", "Red"), (7, "7")])
    def test_color(self, raw, expected):
        assert normalize_color(raw) == expected


class TestDeliveryCharge:

    @pytest.mark.parametrize("raw", [None, "", 0, "0"])
    def test_free_delivery(self, raw):
        assert parse_delivery_charge(raw) == Money.zero()

    def test_numeric_string(self):
        assert parse_delivery_charge("60") == Money.of("60")

    def test_garbage_rejected(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            parse_delivery_charge("free")

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            parse_delivery_charge(-5)


class TestPriceOrder:

    def test_discounted_line_and_total(self):
        service, _ = _service()
        order = service.price_order([CartLine(product_id=WIDGET_ID, quantity=2)])

        line = order.items[0]
        assert line.unit_price == Money.of("80")
        assert line.quantity == Quantity(2)
        assert order.total_value == Money.of("160")

    def test_total_is_exact_sum(self):
        service, _ = _service()
        order = service.price_order([
            CartLine(product_id=WIDGET_ID, quantity=3),
            CartLine(product_id=GADGET_ID),
            CartLine(product_id=SCARF_ID, quantity="2"),
        ])
        # 3*80 + 1*250 + 2*40.50
        assert order.total_value.amount == Decimal("571.00")

    def test_lines_keep_input_order(self):
        service, _ = _service()
        order = service.price_order([
            CartLine(product_id=SCARF_ID),
            CartLine(product_id=WIDGET_ID),
            CartLine(product_id=GADGET_ID),
        ])
        assert [i.code for i in order.items] == ["S-1", "W-1", "G-1"]

    def test_snapshot_fields(self):
        service, _ = _service()
        order = service.price_order([
            CartLine(
                product_id=WIDGET_ID,
                size="M",
                color="  Red ",
                custom_fields={"engraving": "A"},
            )
        ])
        line = order.items[0]
        assert line.product_id == WIDGET_ID
        assert line.title == "Widget"
        assert line.code == "W-1"
        assert line.size == "M"
        assert line.color == "Red"
        assert line.image_url == "w.png"
        assert line.category == "Gifts"
        assert line.custom_fields == {"engraving": "A"}

    def test_missing_size_stored_as_none(self):
        service, _ = _service()
        order = service.price_order([CartLine(product_id=GADGET_ID, size="")])
        assert order.items[0].size is None
        assert order.items[0].color == ""

    @pytest.mark.parametrize("raw", [0, "abc", None])
    def test_quantity_defaults(self, raw):
        service, _ = _service()
        order = service.price_order([CartLine(product_id=GADGET_ID, quantity=raw)])
        assert order.items[0].quantity == Quantity(1)
        assert order.total_value == Money.of("250")

    def test_customer_info_applied(self):
        service, _ = _service()
        order = service.price_order(
            [CartLine(product_id=GADGET_ID)],
            CustomerInfo(
                customer_name=" Nadia ",
                address="Road 5",
                color=" Green ",
                delivery_charge="60",
                custom_fields={"source": "facebook"},
            ),
        )
        assert order.customer.customer_name == "Nadia"
        assert order.customer.address == "Road 5"
        assert order.color == "Green"
        assert order.delivery_charge == Money.of("60")
        assert order.custom_fields == {"source": "facebook"}
        assert order.total_value == Money.of("250")

    def test_one_lookup_per_distinct_product(self):
        service, repo = _service()
        service.price_order([
            CartLine(product_id=WIDGET_ID),
            CartLine(product_id=GADGET_ID),
            CartLine(product_id=WIDGET_ID, quantity=4),
        ])
        assert sorted(repo.lookups) == sorted([WIDGET_ID, GADGET_ID])


class TestPriceOrderValidation:

    @pytest.mark.parametrize("cart", [None, []])
    def test_empty_cart_rejected_before_catalog_access(self, cart):
        service, repo = _service()
        with pytest.raises(ValidationError, match="Products are required"):
            service.price_order(cart)
        assert repo.lookups == []

    @pytest.mark.parametrize("bad_id", [None, "not-an-id", 12])
    def test_invalid_product_id(self, bad_id):
        service, repo = _service()
        with pytest.raises(ValidationError, match="Invalid productId"):
            service.price_order([CartLine(product_id=WIDGET_ID), CartLine(product_id=bad_id)])
        assert repo.lookups == []

    def test_unknown_product(self):
        service, _ = _service()
        with pytest.raises(NotFoundError, match=MISSING_ID):
            service.price_order([CartLine(product_id=WIDGET_ID), CartLine(product_id=MISSING_ID)])

    def test_bad_delivery_charge_rejected_before_catalog_access(self):
        service, repo = _service()
        with pytest.raises(ValidationError):
            service.price_order(
                [CartLine(product_id=WIDGET_ID)], CustomerInfo(delivery_charge="abc")
            )
        assert repo.lookups == []
