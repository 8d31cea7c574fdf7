"""Application service: Show Product use case (query)."""

from __future__ import annotations

from rootx.domain.exceptions import NotFoundError, ValidationError
from rootx.domain.model.product import Product
from rootx.domain.model.value_objects import is_valid_entity_id
from rootx.domain.repository.product_repository import ProductRepository


def load_product(product_repo: ProductRepository, product_id: str) -> Product:
    if not is_valid_entity_id(product_id):
        raise ValidationError("Invalid product id")
    product = product_repo.get_by_id(product_id)
    if product is None:
        raise NotFoundError("Product not found")
    return product


class ShowProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str) -> Product:
        return load_product(self._product_repo, product_id)
