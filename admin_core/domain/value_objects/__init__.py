"""Domain value objects and shared value types."""

from admin_core.domain.value_objects.core import (
    BusinessCode,
    CodePrefix,
    GroupCode,
    Period,
)

__all__ = [
    "BusinessCode",
    "CodePrefix",
    "GroupCode",
    "Period",
]
