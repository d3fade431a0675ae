"""Warehouse stock FastAPI application.

Serves product lookups, stock adjustments and login over HTTP. The product
catalog and adjustment ledger live in memory for the lifetime of the process.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 3000 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# PROTEAN_ENV controls which config overlay is applied.
from datetime import UTC, datetime, timedelta

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from protean.integrations.fastapi import register_exception_handlers

from config import Settings, get_settings
from identity.jwt_adapter import JwtIdentityProvider
from identity.users import demo_directory
from inventory.domain import inventory, logger
from inventory.utils.logging import add_context, clear_context

inventory.init()

from identity.api import auth_router  # noqa: E402
from inventory.api import product_router  # noqa: E402
from inventory.product.seed import demo_products  # noqa: E402
from inventory.store import Inventory, build_inventory  # noqa: E402


def create_app(
    settings: Settings | None = None,
    store: Inventory | None = None,
    identity_provider: JwtIdentityProvider | None = None,
) -> FastAPI:
    settings = settings or get_settings()

    if store is None:
        with inventory.domain_context():
            store = build_inventory(demo_products() if settings.SEED_DEMO_DATA else ())

    if identity_provider is None:
        identity_provider = JwtIdentityProvider(
            demo_directory(),
            secret=settings.JWT_SECRET,
            algorithm=settings.JWT_ALGORITHM,
            expires_in=timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
        )

    app = FastAPI(
        title="Warehouse Stock API",
        description="Product stock levels and their adjustment history",
    )
    app.state.inventory = store
    app.state.identity_provider = identity_provider

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def domain_context_middleware(request: Request, call_next):
        """Push the inventory domain context for product requests."""
        clear_context()
        add_context(method=request.method, path=request.url.path)
        if request.url.path.startswith("/products"):
            with inventory.domain_context():
                return await call_next(request)
        return await call_next(request)

    app.include_router(auth_router)
    app.include_router(product_router)
    register_exception_handlers(app)

    @app.get("/health")
    async def health():
        return JSONResponse(
            content={
                "status": "ok",
                "timestamp": datetime.now(UTC).isoformat(),
                "products": len(app.state.inventory.catalog),
            }
        )

    logger.info("app_created", products=len(store.catalog), seeded=settings.SEED_DEMO_DATA)
    return app


app = create_app()
