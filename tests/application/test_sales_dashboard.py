"""Tests for the sales dashboard rollups and the color list."""

from datetime import datetime, timezone

import pytest

from rootx.application.manage_colors import AddColorHandler, ListColorsHandler
from rootx.application.sales_dashboard import SalesDashboardHandler, months_before
from rootx.domain.exceptions import ValidationError
from rootx.domain.model.order import Order, OrderLineItem
from rootx.domain.model.value_objects import Money, Quantity
from tests.fakes import WIDGET_ID, FakeColorRepository, FakeOrderRepository


def _order(total: str, created_at: datetime, delivery: str = "0") -> Order:
    item = OrderLineItem(
        product_id=WIDGET_ID,
        title="Widget",
        code="W-1",
        unit_price=Money.of(total),
        quantity=Quantity(1),
    )
    order = Order.create(items=[item], delivery_charge=Money.of(delivery))
    order.created_at = created_at
    return order


def _repo(*orders: Order) -> FakeOrderRepository:
    repo = FakeOrderRepository()
    for order in orders:
        repo.save(order)
    return repo


def _utc(year: int, month: int, day: int = 15) -> datetime:
    return datetime(year, month, day, 12, 0, tzinfo=timezone.utc)


class TestTotals:

    def test_empty(self):
        totals = SalesDashboardHandler(FakeOrderRepository()).totals()
        assert totals.total == Money.zero()
        assert totals.order_count == 0

    def test_sums_order_values_without_delivery(self):
        repo = _repo(
            _order("100", _utc(2024, 1), delivery="60"),
            _order("40.50", _utc(2024, 2)),
        )
        totals = SalesDashboardHandler(repo).totals()
        assert totals.total == Money.of("140.50")
        assert totals.order_count == 2


class TestMonthly:

    def test_groups_last_six_months_ascending(self):
        now = _utc(2024, 6, 20)
        repo = _repo(
            _order("10", _utc(2024, 6, 1)),
            _order("15", _utc(2024, 6, 2)),
            _order("20", _utc(2024, 3)),
            _order("30", _utc(2024, 1, 25)),
            _order("99", _utc(2023, 12)),
        )
        rows = SalesDashboardHandler(repo).monthly(now=now)

        assert [(r.year, r.month) for r in rows] == [(2024, 1), (2024, 3), (2024, 6)]
        assert rows[-1].total == Money.of("25")
        assert rows[-1].order_count == 2

    def test_cutoff_is_same_day_five_months_back(self):
        now = _utc(2024, 6, 20)
        repo = _repo(_order("30", _utc(2024, 1, 10)))
        assert SalesDashboardHandler(repo).monthly(now=now) == []

    def test_crosses_year_boundary(self):
        now = _utc(2024, 2, 10)
        repo = _repo(_order("5", _utc(2023, 11)), _order("7", _utc(2024, 2, 1)))
        rows = SalesDashboardHandler(repo).monthly(now=now)
        assert [(r.year, r.month) for r in rows] == [(2023, 11), (2024, 2)]


class TestMonthsBefore:

    @pytest.mark.parametrize(
        "moment, months, expected",
        [
            (_utc(2024, 6, 20), 5, _utc(2024, 1, 20)),
            (_utc(2024, 2, 10), 5, _utc(2023, 9, 10)),
            (_utc(2024, 7, 31), 5, _utc(2024, 2, 29)),
            (_utc(2023, 7, 31), 5, _utc(2023, 2, 28)),
            (_utc(2024, 3, 15), 0, _utc(2024, 3, 15)),
        ],
    )
    def test_shift(self, moment, months, expected):
        assert months_before(moment, months) == expected


class TestColors:

    def test_add_and_list(self):
        repo = FakeColorRepository()
        AddColorHandler(repo).handle("  Maroon ", "#800000")
        colors = ListColorsHandler(repo).handle()
        assert [(c.name, c.hex) for c in colors] == [("Maroon", "#800000")]

    def test_name_required(self):
        with pytest.raises(ValidationError, match="Color name required"):
            AddColorHandler(FakeColorRepository()).handle("   ")
