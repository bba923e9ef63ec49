"""Pytest configuration and fixtures for admin-core.

Unit tests run against in-memory fakes (tests/fakes.py). Tests marked
requires_db use the Postgres-backed fixtures below and skip when
DATABASE_URL is not configured.
"""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from admin_core.application.services.authorization_service import AuthorizationService
from admin_core.application.services.code_allocator import CodeAllocator
from admin_core.application.services.constraint_validator import ConstraintValidator
from admin_core.application.services.master_code_registry import MasterCodeRegistry
from admin_core.application.services.role_registry import RoleRegistry
from admin_core.core.config import Settings
from admin_core.domain.exceptions import SqlNotConfiguredException
from admin_core.infrastructure.persistence.database import (
    dispose_engine,
    get_session_factory,
)
from tests.fakes import (
    FakeCache,
    FakeMasterCodeRepository,
    FakeRoleRepository,
    FakeSequenceCounterRepository,
    FakeUserRoleRepository,
)


@pytest.fixture
def settings() -> Settings:
    """Settings independent of the environment's bindings and prefixes."""
    return Settings(
        database_url="",
        redis_enabled=False,
        code_prefixes={"main_task": "MAIN-TASK"},
        field_bindings={"main_task_data.status": "GROUP002"},
        allocation_retry_backoff_ms=0,
    )


@pytest.fixture
def cache() -> FakeCache:
    return FakeCache()


@pytest.fixture
def master_code_repo() -> FakeMasterCodeRepository:
    return FakeMasterCodeRepository()


@pytest.fixture
def role_repo() -> FakeRoleRepository:
    return FakeRoleRepository()


@pytest.fixture
def user_role_repo() -> FakeUserRoleRepository:
    return FakeUserRoleRepository({"u-alice": [], "u-bob": []})


@pytest.fixture
def counter_repo() -> FakeSequenceCounterRepository:
    return FakeSequenceCounterRepository()


@pytest.fixture
def registry(master_code_repo, cache) -> MasterCodeRegistry:
    return MasterCodeRegistry(master_code_repo, cache=cache, cache_ttl=60)


@pytest.fixture
def role_registry(role_repo, cache) -> RoleRegistry:
    return RoleRegistry(role_repo, cache=cache, cache_ttl=300)


@pytest.fixture
def authorization(role_registry, user_role_repo, cache) -> AuthorizationService:
    return AuthorizationService(role_registry, user_role_repo, cache=cache, cache_ttl=300)


@pytest.fixture
def validator(registry, settings) -> ConstraintValidator:
    return ConstraintValidator(registry, settings.binding_map())


@pytest.fixture
def allocator(counter_repo, settings) -> CodeAllocator:
    return CodeAllocator(counter_repo, settings=settings)


@pytest.fixture
async def session_factory() -> async_sessionmaker[AsyncSession]:
    """Session factory for Postgres tests. Skips when DATABASE_URL is not set.

    Run `alembic upgrade head` against the test database first. The engine
    is disposed after each test since pooled connections belong to the
    test's event loop.
    """
    try:
        factory = get_session_factory()
    except SqlNotConfiguredException:
        pytest.skip(
            "Postgres not configured: set DATABASE_URL, "
            "then run: uv run alembic upgrade head"
        )
    yield factory
    await dispose_engine()


@pytest.fixture
async def db_session(session_factory) -> AsyncSession:
    """Database session for repository/integration tests. Rolls back after test.

    Use @pytest.mark.requires_db to mark tests that need this fixture;
    run without DB via: pytest -m 'not requires_db'.
    """
    async with session_factory() as session:
        yield session
        await session.rollback()
