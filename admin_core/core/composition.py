"""Composition root: builds services from infrastructure implementations.

The surrounding application owns sessions and transactions; it hands a
session (and optionally its own session factory and cache) to
CoreServices.for_session and calls the services from there. Code
allocation always uses the session factory, never the caller's session.
"""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from admin_core.application.interfaces.services import ICacheService
from admin_core.application.services.authorization_service import AuthorizationService
from admin_core.application.services.code_allocator import CodeAllocator
from admin_core.application.services.constraint_validator import ConstraintValidator
from admin_core.application.services.master_code_registry import MasterCodeRegistry
from admin_core.application.services.role_registry import RoleRegistry
from admin_core.application.use_cases.record_write import RecordWriteGuard
from admin_core.core.config import Settings, get_settings
from admin_core.infrastructure.persistence.database import get_session_factory
from admin_core.infrastructure.persistence.repositories import (
    MasterCodeRepository,
    RoleRepository,
    SequenceCounterRepository,
    UserRoleRepository,
)


def build_master_code_registry(
    db: AsyncSession,
    cache: ICacheService | None = None,
    settings: Settings | None = None,
) -> MasterCodeRegistry:
    """MasterCodeRegistry over the given session, with optional cache."""
    settings = settings or get_settings()
    return MasterCodeRegistry(
        MasterCodeRepository(db),
        cache=cache,
        cache_ttl=settings.cache_ttl_master_codes,
    )


def build_role_registry(
    db: AsyncSession,
    cache: ICacheService | None = None,
    settings: Settings | None = None,
) -> RoleRegistry:
    """RoleRegistry over the given session, with optional cache."""
    settings = settings or get_settings()
    return RoleRegistry(
        RoleRepository(db), cache=cache, cache_ttl=settings.cache_ttl_roles
    )


def build_code_allocator(
    session_factory: async_sessionmaker[AsyncSession] | None = None,
    settings: Settings | None = None,
) -> CodeAllocator:
    """CodeAllocator whose increments commit in their own transactions."""
    return CodeAllocator(
        SequenceCounterRepository(session_factory or get_session_factory()),
        settings=settings or get_settings(),
    )


@dataclass
class CoreServices:
    """All services for one unit of work, sharing one session and cache."""

    master_codes: MasterCodeRegistry
    roles: RoleRegistry
    authorization: AuthorizationService
    validator: ConstraintValidator
    allocator: CodeAllocator
    write_guard: RecordWriteGuard

    @classmethod
    def for_session(
        cls,
        db: AsyncSession,
        *,
        session_factory: async_sessionmaker[AsyncSession] | None = None,
        cache: ICacheService | None = None,
        settings: Settings | None = None,
    ) -> CoreServices:
        """Wire every service over db.

        session_factory defaults to the engine built from DATABASE_URL and
        is only used for code allocation.
        """
        settings = settings or get_settings()
        master_codes = build_master_code_registry(db, cache, settings)
        roles = build_role_registry(db, cache, settings)
        authorization = AuthorizationService(
            role_registry=roles,
            user_roles=UserRoleRepository(db),
            cache=cache,
            cache_ttl=settings.cache_ttl_permissions,
        )
        validator = ConstraintValidator(master_codes, settings.binding_map())
        allocator = build_code_allocator(session_factory, settings)
        return cls(
            master_codes=master_codes,
            roles=roles,
            authorization=authorization,
            validator=validator,
            allocator=allocator,
            write_guard=RecordWriteGuard(authorization, validator, allocator),
        )
