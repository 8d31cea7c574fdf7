from __future__ import annotations

import logging
import time
from collections.abc import Sequence
from typing import Any

from fastapi import APIRouter, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from rootx.application.add_product import AddProductHandler
from rootx.application.create_order import CreateOrderHandler
from rootx.application.delete_order import DeleteOrderHandler
from rootx.application.list_products import ListProductsHandler
from rootx.application.manage_colors import AddColorHandler, ListColorsHandler
from rootx.application.remove_product import RemoveProductHandler
from rootx.application.sales_dashboard import SalesDashboardHandler
from rootx.application.set_order_status import SetOrderStatusHandler
from rootx.application.show_order import ListOrdersHandler, ShowOrderHandler
from rootx.application.show_product import ShowProductHandler
from rootx.application.update_order import UpdateOrderHandler
from rootx.application.update_product import UpdateProductHandler
from rootx.domain.exceptions import (
    DomainException,
    NotFoundError,
    StoreError,
    ValidationError,
)
from rootx.domain.repository.color_repository import ColorRepository
from rootx.domain.repository.order_repository import OrderRepository
from rootx.domain.repository.product_repository import ProductRepository
from rootx.infrastructure.documents import (
    color_to_document,
    order_to_document,
    product_to_document,
)
from rootx.infrastructure.web.schemas import (
    ColorCreateRequest,
    OrderCreateRequest,
    OrderUpdateRequest,
    ProductCreateRequest,
    ProductUpdateRequest,
    StatusUpdateRequest,
)

logger = logging.getLogger(__name__)


def _error(status: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status, content={"message": message})


def _map_error_to_http(err: DomainException) -> tuple[int, str]:
    if isinstance(err, ValidationError):
        return 400, str(err)
    if isinstance(err, NotFoundError):
        return 404, str(err)
    if isinstance(err, StoreError):
        return 503, "Storage is temporarily unavailable"
    return 500, "Internal Server Error"


def _populate_products(
    doc: dict[str, Any],
    product_repo: ProductRepository,
    seen: dict[str, dict[str, Any] | None],
) -> dict[str, Any]:
    """Replace each line's productId with the live product's id, title and code.

    Lines whose product has since been removed get None.
    """
    for line in doc["products"]:
        product_id = line["productId"]
        if product_id not in seen:
            product = product_repo.get_by_id(product_id)
            seen[product_id] = (
                {"_id": product.id, "title": product.title, "code": product.code}
                if product is not None
                else None
            )
        line["productId"] = seen[product_id]
    return doc


def create_app(
    product_repo: ProductRepository,
    order_repo: OrderRepository,
    color_repo: ColorRepository,
    api_prefix: str = "",
    cors_origins: Sequence[str] = ("*",),
) -> FastAPI:
    app = FastAPI(title="Rootx Admin API")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        status = 500
        try:
            response = await call_next(request)
            status = response.status_code
            return response
        finally:
            logger.info(
                "%s %s %d %.1fms",
                request.method,
                request.url.path,
                status,
                (time.perf_counter() - started) * 1000,
            )

    # --- exception handlers ---------------------------------------------------

    @app.exception_handler(DomainException)
    async def handle_domain_error(_: Request, exc: DomainException) -> JSONResponse:
        status, message = _map_error_to_http(exc)
        if status >= 500:
            logger.error("%s: %s", type(exc).__name__, exc)
        return _error(status, message)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        _: Request, exc: RequestValidationError
    ) -> JSONResponse:
        errors = exc.errors()
        if not errors:
            return _error(400, "Invalid request")
        first = errors[0]
        where = ".".join(str(part) for part in first.get("loc", ()))
        return _error(400, f"Invalid request: {where}: {first.get('msg', 'invalid')}")

    @app.exception_handler(Exception)
    async def handle_unexpected(_: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error", exc_info=exc)
        return _error(500, "Internal Server Error")

    # --- routes ---------------------------------------------------------------

    router = APIRouter()

    @app.get("/")
    def root() -> dict[str, str]:
        return {"name": "Rootx Admin API", "status": "ok"}

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    # Orders

    @router.post("/orders", status_code=201)
    def create_order(req: OrderCreateRequest) -> dict[str, Any]:
        handler = CreateOrderHandler(order_repo, product_repo)
        try:
            order = handler.handle(req.to_cart(), req.to_customer_info())
        except NotFoundError as exc:
            # an unknown product in the cart is a client input error
            raise ValidationError(str(exc)) from exc
        return order_to_document(order)

    @router.get("/orders")
    def list_orders(populate: bool = False) -> list[dict[str, Any]]:
        docs = [order_to_document(o) for o in ListOrdersHandler(order_repo).handle()]
        if populate:
            seen: dict[str, dict[str, Any] | None] = {}
            docs = [_populate_products(d, product_repo, seen) for d in docs]
        return docs

    @router.get("/orders/{order_id}")
    def get_order(order_id: str, populate: bool = False) -> dict[str, Any]:
        doc = order_to_document(ShowOrderHandler(order_repo).handle(order_id))
        if populate:
            doc = _populate_products(doc, product_repo, {})
        return doc

    @router.put("/orders/{order_id}")
    def update_order(order_id: str, req: OrderUpdateRequest) -> dict[str, Any]:
        changes = req.model_dump(exclude_unset=True)
        return order_to_document(UpdateOrderHandler(order_repo).handle(order_id, changes))

    @router.patch("/orders/{order_id}/status")
    def set_order_status(order_id: str, req: StatusUpdateRequest) -> dict[str, Any]:
        order = SetOrderStatusHandler(order_repo).handle(order_id, req.status)
        return order_to_document(order)

    @router.delete("/orders/{order_id}")
    def delete_order(order_id: str) -> dict[str, str]:
        DeleteOrderHandler(order_repo).handle(order_id)
        return {"message": "Order removed"}

    # Products

    @router.post("/products", status_code=201)
    def create_product(req: ProductCreateRequest) -> dict[str, Any]:
        product = AddProductHandler(product_repo).handle(
            title=req.title,
            code=req.code,
            price=req.price,
            price_after_discount=req.price_after_discount,
            description=req.description,
            image_url=req.image_url,
            categories=req.categories,
            sizes=req.sizes,
        )
        return product_to_document(product)

    @router.get("/products")
    def list_products(
        categories: str | None = None, search: str | None = None
    ) -> list[dict[str, Any]]:
        wanted = categories.split(",") if categories else None
        products = ListProductsHandler(product_repo).handle(categories=wanted, search=search)
        return [product_to_document(p) for p in products]

    @router.get("/products/{product_id}")
    def get_product(product_id: str) -> dict[str, Any]:
        return product_to_document(ShowProductHandler(product_repo).handle(product_id))

    @router.put("/products/{product_id}")
    def update_product(product_id: str, req: ProductUpdateRequest) -> dict[str, Any]:
        changes = req.model_dump(exclude_unset=True)
        product = UpdateProductHandler(product_repo).handle(product_id, changes)
        return product_to_document(product)

    @router.delete("/products/{product_id}")
    def delete_product(product_id: str) -> dict[str, str]:
        RemoveProductHandler(product_repo).handle(product_id)
        return {"message": "Product removed"}

    # Colors

    @router.post("/colors", status_code=201)
    def create_color(req: ColorCreateRequest) -> dict[str, Any]:
        return color_to_document(AddColorHandler(color_repo).handle(req.name, req.hex))

    @router.get("/colors")
    def list_colors() -> list[dict[str, Any]]:
        return [color_to_document(c) for c in ListColorsHandler(color_repo).handle()]

    # Dashboard

    @router.get("/dashboard/total-sales")
    def total_sales() -> dict[str, Any]:
        totals = SalesDashboardHandler(order_repo).totals()
        return {"totalBDT": totals.total.to_number(), "totalOrders": totals.order_count}

    @router.get("/dashboard/monthly-sales")
    def monthly_sales() -> list[dict[str, Any]]:
        return [
            {
                "year": m.year,
                "month": m.month,
                "total": m.total.to_number(),
                "count": m.order_count,
            }
            for m in SalesDashboardHandler(order_repo).monthly()
        ]

    app.include_router(router, prefix=api_prefix)
    return app
