"""Core constants: cache key prefixes and shared literal values.

Single source of truth for cache key structure and pagination defaults.
"""

# Cache key prefixes
CACHE_PREFIX_DOMAIN_ACCESS = "domain_access"

# Delimiter for composite keys
CACHE_KEY_SEP = ":"

# Unique key appended to every compound order as the final tiebreaker.
TIEBREAKER_FIELD = "id"

# Window size when neither first nor last is given.
DEFAULT_PAGE_SIZE = 20

# Upper bound on accepted cursor token length (characters).
MAX_CURSOR_LENGTH = 4096
