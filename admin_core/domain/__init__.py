"""Domain layer: value objects, enums, and exceptions.

No dependencies on infrastructure. Used by application and
infrastructure layers.
"""

from admin_core.domain.enums import AuthorizationState, CodeOverflowPolicy
from admin_core.domain.exceptions import (
    AdminCoreException,
    AllocationConflictException,
    AllocationFailedException,
    AuthorizationException,
    ConfigurationException,
    DuplicateGroupCodeException,
    GroupCodeImmutableException,
    InvalidEnumValueException,
    ResourceNotFoundException,
    SequenceExhaustedException,
    SqlNotConfiguredException,
    ValidationException,
)
from admin_core.domain.value_objects import (
    BusinessCode,
    CodePrefix,
    GroupCode,
    Period,
)

__all__ = [
    "AdminCoreException",
    "AllocationConflictException",
    "AllocationFailedException",
    "AuthorizationException",
    "AuthorizationState",
    "BusinessCode",
    "CodeOverflowPolicy",
    "CodePrefix",
    "ConfigurationException",
    "DuplicateGroupCodeException",
    "GroupCode",
    "GroupCodeImmutableException",
    "InvalidEnumValueException",
    "Period",
    "ResourceNotFoundException",
    "SequenceExhaustedException",
    "SqlNotConfiguredException",
    "ValidationException",
]
