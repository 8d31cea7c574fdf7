"""Abstract repository for Product aggregate (the Catalog Store).

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, in-memory)
live in the infrastructure layer and the test suite.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from rootx.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def get_by_code(self, code: str) -> Product | None:
        """Return a product by its exact code, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog, newest first."""

    @abstractmethod
    def add(self, product: Product) -> None:
        """Insert a new product.

        Raises ValidationError when another product already has the same
        code.  The check and the insert happen as one step.
        """

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a new or updated product."""

    @abstractmethod
    def delete(self, product_id: str) -> None:
        """Remove a product.  Unknown IDs are ignored."""
