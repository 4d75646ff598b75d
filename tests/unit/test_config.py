"""Tests for Settings validation."""

import pytest
from pydantic import ValidationError

from drq_site.core.config import Settings


def test_defaults() -> None:
    settings = Settings(_env_file=None)
    assert settings.cache_ttl_search == 300
    assert settings.cache_ttl_service_areas == 86400
    assert settings.cache_ttl_postcode == 43200
    assert settings.search_default_limit == 10


def test_negative_ttl_rejected() -> None:
    with pytest.raises(ValidationError):
        Settings(cache_ttl_search=-1)


def test_unknown_tracking_sink_rejected() -> None:
    with pytest.raises(ValidationError):
        Settings(tracking_sink="gtag")


def test_unknown_exporter_rejected() -> None:
    with pytest.raises(ValidationError):
        Settings(telemetry_exporter="jaeger")


def test_default_limit_bounded_by_max() -> None:
    with pytest.raises(ValidationError):
        Settings(search_default_limit=60, search_max_limit=50)
