"""Data Transfer Objects: plain containers that cross layer boundaries.

Dashboard results are read-only rollups; they carry Money so callers
decide how to render amounts.
"""

from __future__ import annotations

from dataclasses import dataclass

from rootx.domain.model.value_objects import Money


@dataclass(frozen=True)
class SalesTotals:
    """Output: all-time sales."""

    total: Money
    order_count: int


@dataclass(frozen=True)
class MonthlySales:
    """Output: sales for one calendar month."""

    year: int
    month: int
    total: Money
    order_count: int
