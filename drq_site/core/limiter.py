"""Rate limiter instance for SlowAPI.

Shared by main (app.state.limiter) and route modules. Limit strings come
from settings at request time so tests and deployments can change them.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from drq_site.core.config import get_settings

limiter = Limiter(key_func=get_remote_address)


def _search_limit() -> str:
    return get_settings().search_rate_limit


def _form_limit() -> str:
    return get_settings().form_rate_limit


limit_search = limiter.limit(_search_limit)
limit_forms = limiter.limit(_form_limit)
