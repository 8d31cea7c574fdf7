"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from fastapi import FastAPI

from rootx.infrastructure.config import Settings
from rootx.infrastructure.log_config import configure_logging
from rootx.infrastructure.persistence.json_color_repository import JsonColorRepository
from rootx.infrastructure.persistence.json_order_repository import JsonOrderRepository
from rootx.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from rootx.infrastructure.web.app import create_app


def settings() -> Settings:
    return Settings.from_env()


def product_repository(config: Settings | None = None) -> JsonProductRepository:
    config = config or settings()
    return JsonProductRepository(config.data_dir / "products.json", config.store_timeout)


def order_repository(config: Settings | None = None) -> JsonOrderRepository:
    config = config or settings()
    return JsonOrderRepository(config.data_dir / "orders.json", config.store_timeout)


def color_repository(config: Settings | None = None) -> JsonColorRepository:
    config = config or settings()
    return JsonColorRepository(config.data_dir / "colors.json", config.store_timeout)


def create_asgi_app() -> FastAPI:
    """Factory used by uvicorn (``factory=True``)."""
    config = settings()
    configure_logging(config.log_level)
    return create_app(
        product_repo=product_repository(config),
        order_repo=order_repository(config),
        color_repo=color_repository(config),
        api_prefix=config.api_prefix,
        cors_origins=config.cors_origins,
    )
