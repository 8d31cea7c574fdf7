"""JSON-file-backed implementation of OrderRepository."""

from __future__ import annotations

from pathlib import Path

from rootx.domain.model.order import Order
from rootx.domain.repository.order_repository import OrderRepository
from rootx.infrastructure.documents import order_from_document, order_to_document
from rootx.infrastructure.persistence.json_document_file import JsonDocumentFile


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path, timeout: float = 30.0) -> None:
        self._file = JsonDocumentFile(file_path, timeout)

    # --- OrderRepository interface --------------------------------------------

    def get_by_id(self, order_id: str) -> Order | None:
        doc = self._file.find(lambda d: d["_id"] == order_id)
        return order_from_document(doc) if doc is not None else None

    def list_all(self) -> list[Order]:
        orders = [order_from_document(doc) for doc in self._file.load()]
        return sorted(orders, key=lambda o: o.created_at, reverse=True)

    def save(self, order: Order) -> None:
        self._file.upsert(order_to_document(order))

    def delete(self, order_id: str) -> None:
        self._file.remove(order_id)
