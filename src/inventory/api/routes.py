"""FastAPI routes for the Inventory domain: product lookup and stock adjustment.

Every route requires a bearer token; the resolved actor is recorded on the
adjustments it makes.
"""

from fastapi import APIRouter, Depends, Query, Request

from identity.api.dependencies import current_actor
from identity.port import ActorIdentity
from inventory.adjustment.service import AdjustmentService
from inventory.api.schemas import AdjustmentResponse, AdjustStockRequest, ProductResponse
from inventory.product.catalog import SearchFilter
from inventory.product.product import ProductCategory
from inventory.product.status import ProductStatus
from inventory.queries import QueryService
from inventory.store import Inventory


def get_inventory(request: Request) -> Inventory:
    return request.app.state.inventory


def get_query_service(inventory: Inventory = Depends(get_inventory)) -> QueryService:
    return QueryService(inventory)


def get_adjustment_service(inventory: Inventory = Depends(get_inventory)) -> AdjustmentService:
    return AdjustmentService(inventory)


# ---------------------------------------------------------------------------
# Product Router
# ---------------------------------------------------------------------------
product_router = APIRouter(prefix="/products", tags=["products"], dependencies=[Depends(current_actor)])


@product_router.get("", response_model=list[ProductResponse])
async def search_products(
    query: str | None = None,
    category: ProductCategory | None = None,
    status: ProductStatus | None = None,
    min_stock: int | None = Query(default=None, ge=0),
    max_stock: int | None = Query(default=None, ge=0),
    queries: QueryService = Depends(get_query_service),
) -> list[ProductResponse]:
    search_filter = SearchFilter(
        text=query,
        category=category,
        status=status,
        min_stock=min_stock,
        max_stock=max_stock,
    )
    return [ProductResponse.from_product(product) for product in queries.search(search_filter)]


@product_router.get("/sku/{sku}", response_model=ProductResponse)
async def get_product_by_sku(sku: str, queries: QueryService = Depends(get_query_service)) -> ProductResponse:
    return ProductResponse.from_product(queries.get_by_sku(sku))


@product_router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: str, queries: QueryService = Depends(get_query_service)) -> ProductResponse:
    return ProductResponse.from_product(queries.get_by_id(product_id))


@product_router.patch("/{product_id}/stock", response_model=AdjustmentResponse)
async def adjust_stock(
    product_id: str,
    body: AdjustStockRequest,
    actor: ActorIdentity = Depends(current_actor),
    service: AdjustmentService = Depends(get_adjustment_service),
) -> AdjustmentResponse:
    adjustment = service.adjust_stock(
        product_id,
        new_stock=body.new_stock,
        adjustment_type=body.adjustment_type,
        reason=body.reason,
        notes=body.notes,
        actor=actor,
    )
    return AdjustmentResponse.from_adjustment(adjustment)


@product_router.get("/{product_id}/adjustments", response_model=list[AdjustmentResponse])
async def adjustment_history(product_id: str, queries: QueryService = Depends(get_query_service)) -> list[AdjustmentResponse]:
    return [AdjustmentResponse.from_adjustment(adjustment) for adjustment in queries.history(product_id)]
