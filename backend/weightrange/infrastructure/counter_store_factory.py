"""Counter Store Factory — builds the CounterStore selected by settings.

Invariants:
    - json backend needs no startup IO (file created lazily on first read)
    - database backend initializes db_manager and, when enabled, creates tables
"""

import logging

from weightrange.config import Settings
from weightrange.core.domain_types import CounterBackend
from weightrange.core.repository_protocols import CounterStore
from weightrange.infrastructure.database import init_db
from weightrange.infrastructure.json_counter_store import JsonFileCounterStore
from weightrange.infrastructure.sql_counter_store import SqlCounterStore

logger = logging.getLogger(__name__)


async def build_counter_store(settings: Settings) -> CounterStore:
    """Create the configured store; database setup happens here."""
    if settings.counter_backend is CounterBackend.DATABASE:
        manager = init_db(
            settings.database_url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
        )
        if settings.database_create_tables:
            await manager.create_tables()
        return SqlCounterStore(manager)

    logger.info(f"Usage counter file: {settings.usage_file}")
    return JsonFileCounterStore(settings.usage_file)
