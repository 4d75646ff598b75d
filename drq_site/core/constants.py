"""Core constants: cache key prefixes and shared literal values.

Single source of truth for cache key structure (DRY). Used by
infrastructure cache and the search / service-area use cases.
"""

# Cache key prefixes
CACHE_PREFIX_SEARCH = "search"
CACHE_PREFIX_SERVICE_AREAS = "service-areas"

# Delimiter for composite keys
CACHE_KEY_SEP = ":"

# Australian postcodes are exactly four digits
POSTCODE_PATTERN = r"^\d{4}$"

# Suggestions: maximum edit distance kept, and how many are returned
SUGGESTION_MAX_DISTANCE = 3
SUGGESTION_LIMIT = 5
