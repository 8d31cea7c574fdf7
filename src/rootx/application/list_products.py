"""Application service: List Products use case (query).

Filtering is plain matching: no relevance ranking, results stay
newest first.
"""

from __future__ import annotations

from rootx.domain.model.product import Product
from rootx.domain.repository.product_repository import ProductRepository


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        categories: list[str] | None = None,
        search: str | None = None,
    ) -> list[Product]:
        products = sorted(
            self._product_repo.list_all(), key=lambda p: p.created_at, reverse=True
        )
        wanted = {c.strip() for c in categories or [] if c.strip()}
        if wanted:
            products = [p for p in products if wanted.intersection(p.categories)]
        if search and search.strip():
            products = [p for p in products if p.matches(search)]
        return products
