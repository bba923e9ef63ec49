"""Core constants: cache key prefixes, code format, and shared literal values.

Single source of truth for cache key structure and the business code
format (PREFIX-YY-NNN), which downstream systems parse.
"""

# Cache key prefixes
CACHE_PREFIX_GROUP = "mc_group"
CACHE_PREFIX_SUBCODES = "mc_subcodes"
CACHE_PREFIX_ROLE = "role"
CACHE_PREFIX_PERMISSION = "permission"

# Delimiter for composite keys
CACHE_KEY_SEP = ":"

# Business code format
CODE_SEPARATOR = "-"
DEFAULT_ORDINAL_WIDTH = 3
PERIOD_WIDTH = 2

# Auto-numbered group codes (GROUP001, GROUP002, ...)
GROUP_CODE_PREFIX = "GROUP"
GROUP_CODE_WIDTH = 3

# Wildcard action: grants every action on its resource
MANAGE_ALL_ACTION = "manage-all"

# "table.column" in configured field bindings
BINDING_KEY_SEP = "."
