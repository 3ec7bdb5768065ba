from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from restaurant_orders.api import health
from restaurant_orders.api.routes.kitchen import router as kitchen_router
from restaurant_orders.api.routes.menu import router as menu_router
from restaurant_orders.api.routes.orders import router as orders_router
from restaurant_orders.config import settings
from restaurant_orders.db.context import RestaurantContext
from restaurant_orders.logging import get_logger, setup_logging

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    if app.state.context is None:
        app.state.context = RestaurantContext.with_default_menu()
    logger.info("🚀 Application started")
    yield
    logger.info("🛑 Application stopped")


def create_app(context: Optional[RestaurantContext] = None) -> FastAPI:
    app = FastAPI(title=settings.APP_TITLE, lifespan=lifespan)
    app.state.context = context

    # Подключаем роуты
    app.include_router(health.router)
    app.include_router(menu_router)
    app.include_router(orders_router)
    app.include_router(kitchen_router)
    return app


app = create_app()
