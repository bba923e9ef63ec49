"""Library lifespan: startup and shutdown.

Single place for startup/shutdown wiring: Redis cache (if enabled), the
fatal field-binding check, and SQL engine disposal. No business logic.
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from admin_core.application.services.constraint_validator import ConstraintValidator
from admin_core.core.composition import build_master_code_registry
from admin_core.core.config import Settings, get_settings
from admin_core.infrastructure.cache.redis_cache import CacheService
from admin_core.infrastructure.persistence.database import (
    dispose_engine,
    get_session_factory,
)

logger = logging.getLogger(__name__)


async def verify_field_bindings(settings: Settings | None = None) -> None:
    """Fail fast if a configured binding names a group that does not exist.

    Raises:
        ConfigurationException: Unknown group in field_bindings.
    """
    settings = settings or get_settings()
    if not settings.field_bindings:
        return
    session_factory = get_session_factory()
    async with session_factory() as db:
        registry = build_master_code_registry(db, cache=None, settings=settings)
        await ConstraintValidator(registry, settings.binding_map()).verify_bindings()


@asynccontextmanager
async def core_lifespan(
    settings: Settings | None = None,
) -> AsyncIterator[CacheService | None]:
    """Run startup, yield the cache (or None), then run shutdown.

    Startup order: field binding check, Redis cache (if enabled).
    Shutdown order: cache disconnect, SQL engine dispose.
    """
    settings = settings or get_settings()

    # ---- Startup ----
    await verify_field_bindings(settings)

    cache: CacheService | None = None
    if settings.redis_enabled:
        cache = CacheService(settings=settings)
        await cache.connect()

    try:
        yield cache
    finally:
        # ---- Shutdown ----
        if cache is not None:
            await cache.disconnect()
        await dispose_engine()
        logger.info("admin-core shut down")
