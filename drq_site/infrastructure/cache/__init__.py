"""Cache: in-process result cache and cache key utilities.

Used by the search and service-area use cases. Key format is in keys.py (DRY).
"""

from drq_site.infrastructure.cache.keys import (
    generate_cache_key,
    search_key,
    service_areas_all_key,
    service_areas_postcode_key,
)
from drq_site.infrastructure.cache.memory_cache import (
    CacheEntry,
    ResultCache,
    run_periodic_sweep,
)

__all__ = [
    "CacheEntry",
    "ResultCache",
    "generate_cache_key",
    "run_periodic_sweep",
    "search_key",
    "service_areas_all_key",
    "service_areas_postcode_key",
]
