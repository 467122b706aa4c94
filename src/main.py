"""FastAPI application entrypoint."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI

from src.api.health import router as health_router
from src.api.inventory import router as inventory_router
from src.config import settings
from src.core.logging import get_logger, setup_logging
from src.services.game_api import GameApi
from src.services.transport import get_request_handler

setup_logging(settings.LOG_LEVEL, debug=settings.DEBUG)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup and shutdown events."""
    logger.info("Initializing request handler...")
    request_handler = get_request_handler()
    app.state.game_api = GameApi(request_handler)
    logger.info(f"Request handler initialized: {request_handler.name}")

    yield

    # 종료 시 정리
    logger.info("Shutting down...")
    app.state.game_api.close()


app = FastAPI(title="Game API Item Bag", lifespan=lifespan)

app.include_router(health_router)
app.include_router(inventory_router)
