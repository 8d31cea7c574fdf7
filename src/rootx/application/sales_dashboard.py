"""Application service: Sales Dashboard (queries).

Both rollups sum ``total_value``, which excludes the delivery charge.
"""

from __future__ import annotations

import calendar
from datetime import datetime, timezone

from rootx.application.dto import MonthlySales, SalesTotals
from rootx.domain.model.value_objects import Money
from rootx.domain.repository.order_repository import OrderRepository

MONTHS_SHOWN = 6


class SalesDashboardHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def totals(self) -> SalesTotals:
        total = Money.zero()
        count = 0
        for order in self._order_repo.list_all():
            total = total + order.total_value
            count += 1
        return SalesTotals(total=total, order_count=count)

    def monthly(self, now: datetime | None = None) -> list[MonthlySales]:
        """Sales per month for the current month and the five before it."""
        cutoff = months_before(now or datetime.now(timezone.utc), MONTHS_SHOWN - 1)

        buckets: dict[tuple[int, int], tuple[Money, int]] = {}
        for order in self._order_repo.list_all():
            if order.created_at < cutoff:
                continue
            key = (order.created_at.year, order.created_at.month)
            total, count = buckets.get(key, (Money.zero(), 0))
            buckets[key] = (total + order.total_value, count + 1)

        return [
            MonthlySales(year=year, month=month, total=total, order_count=count)
            for (year, month), (total, count) in sorted(buckets.items())
        ]


def months_before(moment: datetime, months: int) -> datetime:
    """Shift back whole calendar months, clamping the day (Jul 31 -> Feb 28)."""
    index = moment.year * 12 + (moment.month - 1) - months
    year, month = divmod(index, 12)
    month += 1
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)
