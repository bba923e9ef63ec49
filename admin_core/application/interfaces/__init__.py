"""Application interfaces (ports): repository and service protocols.

Define contracts for infrastructure implementations (DIP).
No runtime imports from admin_core.infrastructure.
"""

from admin_core.application.interfaces.repositories import (
    IMasterCodeRepository,
    IRoleRepository,
    ISequenceCounterRepository,
    IUserRoleRepository,
)
from admin_core.application.interfaces.services import ICacheService

__all__ = [
    "ICacheService",
    "IMasterCodeRepository",
    "IRoleRepository",
    "ISequenceCounterRepository",
    "IUserRoleRepository",
]
