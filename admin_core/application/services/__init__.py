"""Application services: master codes, code allocation, roles, authorization, constraints."""

from admin_core.application.services.authorization_service import AuthorizationService
from admin_core.application.services.code_allocator import CodeAllocator
from admin_core.application.services.constraint_validator import ConstraintValidator
from admin_core.application.services.master_code_registry import MasterCodeRegistry
from admin_core.application.services.role_registry import RoleRegistry

__all__ = [
    "AuthorizationService",
    "CodeAllocator",
    "ConstraintValidator",
    "MasterCodeRegistry",
    "RoleRegistry",
]
