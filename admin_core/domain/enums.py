"""Domain enumerations for admin-core.

Enums represent fixed sets of domain values (e.g. authorization state).
"""

from enum import Enum


class AuthorizationState(str, Enum):
    """Per-request authorization state.

    unauthenticated -> identified -> authorized | forbidden. A request
    without a user id never leaves UNAUTHENTICATED and is treated as
    forbidden by callers.
    """

    UNAUTHENTICATED = "unauthenticated"
    IDENTIFIED = "identified"
    AUTHORIZED = "authorized"
    FORBIDDEN = "forbidden"

    @property
    def is_allowed(self) -> bool:
        return self is AuthorizationState.AUTHORIZED


class CodeOverflowPolicy(str, Enum):
    """What CodeAllocator does when an ordinal outgrows its digit budget."""

    REJECT = "reject"
    WIDEN = "widen"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid policy values as strings."""
        return [policy.value for policy in cls]
