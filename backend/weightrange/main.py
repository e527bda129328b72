"""Weight Range API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map WeightRangeError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Counter store and usage counter initialized on startup via lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Usage and calculation routes mounted at the root and again under /api,
      the prefix the existing frontend calls
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import weightrange.infrastructure.database as db_module
from weightrange.api.error_handlers import register_error_handlers
from weightrange.api.routes import health, usage, weight_range
from weightrange.config import get_settings
from weightrange.infrastructure.counter_store_factory import build_counter_store
from weightrange.infrastructure.observability import setup_logging
from weightrange.services.usage_counter import init_usage_counter

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    store = await build_counter_store(settings)
    init_usage_counter(store, settings.counter_policy)
    logger.info("Weight Range API started")
    yield
    if db_module.db_manager:
        await db_module.db_manager.dispose()
    logger.info("Weight Range API shutting down")


app = FastAPI(
    title="Weight Range API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(usage.router)
app.include_router(usage.router, prefix="/api", include_in_schema=False)
app.include_router(weight_range.router)
app.include_router(weight_range.router, prefix="/api", include_in_schema=False)

register_error_handlers(app)
