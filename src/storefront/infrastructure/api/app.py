"""Storefront FastAPI application.

Usage:
    uvicorn storefront.infrastructure.api.app:create_app --factory
"""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from storefront.config import Settings
from storefront.infrastructure.api.errors import register_error_handlers
from storefront.infrastructure.api.routes import (
    admin_router,
    auth_router,
    delivery_router,
    order_router,
    product_router,
)
from storefront.infrastructure.bootstrap import Container, build_container
from storefront.infrastructure.logging import configure_logging


def create_app(container: Container | None = None) -> FastAPI:
    """Build the app around *container*, or from the environment if omitted."""
    if container is None:
        settings = Settings.from_env()
        configure_logging(settings.log_level, settings.log_json)
        container = build_container(settings)

    app = FastAPI(
        title="Storefront API",
        description="Catalog, orders, payments and fulfillment",
    )
    app.state.container = container

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)

    app.include_router(auth_router)
    app.include_router(product_router)
    app.include_router(order_router)
    app.include_router(admin_router)
    app.include_router(delivery_router)

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    return app
