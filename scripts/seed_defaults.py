"""Seed default master codes (GROUP002 status) and roles (ADMIN, EDITOR, VIEWER).

Usage:
    uv run python -m scripts.seed_defaults
Requires DATABASE_URL (Postgres) and an upgraded schema (alembic upgrade head).
"""

import asyncio
import sys

from admin_core.application.use_cases.seed_defaults import SeedDefaultsUseCase
from admin_core.core.composition import build_master_code_registry, build_role_registry
from admin_core.core.config import get_settings
from admin_core.domain.exceptions import SqlNotConfiguredException
from admin_core.infrastructure.persistence.database import (
    dispose_engine,
    transactional_session,
)
from admin_core.shared.telemetry.logging import setup_logging


async def main() -> None:
    """Seed defaults in one transaction."""
    setup_logging()
    settings = get_settings()
    try:
        async with transactional_session() as session:
            use_case = SeedDefaultsUseCase(
                build_master_code_registry(session, settings=settings),
                build_role_registry(session, settings=settings),
            )
            result = await use_case.execute()
    except SqlNotConfiguredException as e:
        print(e.message, file=sys.stderr)
        sys.exit(1)
    finally:
        await dispose_engine()
    print(
        f"Seeded {result.groups} group(s), {result.subcodes} subcode(s), "
        f"{result.roles} role(s)"
    )


if __name__ == "__main__":
    asyncio.run(main())
