"""Shared utilities: datetime and id generators."""

from admin_core.shared.utils.datetime import current_period_year, utc_now
from admin_core.shared.utils.generators import generate_cuid

__all__ = [
    "current_period_year",
    "generate_cuid",
    "utc_now",
]
