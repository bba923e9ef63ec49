"""Application use cases: one entry point per workflow."""

from admin_core.application.use_cases.record_write import RecordWriteGuard
from admin_core.application.use_cases.seed_defaults import (
    SeedDefaultsUseCase,
    SeedResult,
)

__all__ = ["RecordWriteGuard", "SeedDefaultsUseCase", "SeedResult"]
