"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

from pathlib import Path

from rootx.domain.exceptions import ValidationError
from rootx.domain.model.product import Product
from rootx.domain.repository.product_repository import ProductRepository
from rootx.infrastructure.documents import product_from_document, product_to_document
from rootx.infrastructure.persistence.json_document_file import JsonDocumentFile


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path, timeout: float = 30.0) -> None:
        self._file = JsonDocumentFile(file_path, timeout)

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        doc = self._file.find(lambda d: d["_id"] == product_id)
        return product_from_document(doc) if doc is not None else None

    def get_by_code(self, code: str) -> Product | None:
        doc = self._file.find(lambda d: d.get("code") == code)
        return product_from_document(doc) if doc is not None else None

    def list_all(self) -> list[Product]:
        products = [product_from_document(doc) for doc in self._file.load()]
        return sorted(products, key=lambda p: p.created_at, reverse=True)

    def add(self, product: Product) -> None:
        added = self._file.insert_unless(
            product_to_document(product),
            lambda d: d.get("code") == product.code,
        )
        if not added:
            raise ValidationError("Product code must be unique")

    def save(self, product: Product) -> None:
        self._file.upsert(product_to_document(product))

    def delete(self, product_id: str) -> None:
        self._file.remove(product_id)
