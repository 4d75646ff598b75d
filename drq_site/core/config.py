"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Values are validated at load time.
"""

from functools import lru_cache

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_TRACKING_SINKS = ("none", "logging", "otel")
_TELEMETRY_EXPORTERS = ("console", "otlp", "none")


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    All settings have defaults; validate_values rejects negative TTLs and
    unknown tracking sinks or exporters.
    """

    # App
    app_name: str = "Disaster Recovery Queensland"
    app_version: str = "1.0.0"
    debug: bool = False

    # CORS
    allowed_origins: str = "http://localhost:3000,http://localhost:8080"

    # Request / middleware
    request_timeout_seconds: int = 30
    request_id_header: str = "X-Request-ID"
    correlation_id_header: str = "X-Correlation-ID"
    max_body_size: int = 64 * 1024  # 64KB; forms and search only

    # Result cache (seconds). Sweep interval 0 = lazy expiry on read only.
    cache_ttl_search: int = 300
    cache_ttl_service_areas: int = 24 * 60 * 60
    cache_ttl_postcode: int = 12 * 60 * 60
    cache_sweep_interval_seconds: int = 0
    search_default_limit: int = 10
    search_max_limit: int = 50

    # Rate limits (slowapi strings)
    rate_limit_enabled: bool = True
    search_rate_limit: str = "60/minute"
    form_rate_limit: str = "10/minute"

    # Business contact (emergency call-to-action)
    emergency_phone: str = "1300 309 361"
    contact_email: str = "admin@disasterrecoveryqld.au"
    emergency_response_time: str = "1-2 hours"

    # Client analytics events kept in memory (oldest dropped first)
    analytics_max_events: int = 1000

    # Tracking sink: none | logging | otel
    tracking_enabled: bool = True
    tracking_sink: str = "logging"

    # OpenTelemetry
    telemetry_enabled: bool = False
    telemetry_exporter: str = "console"
    telemetry_otlp_endpoint: str | None = None
    telemetry_sample_rate: float = 1.0
    telemetry_environment: str = "development"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_values(self) -> "Settings":
        """Validate TTLs, limits, and enumerated string settings."""
        for name in (
            "cache_ttl_search",
            "cache_ttl_service_areas",
            "cache_ttl_postcode",
            "cache_sweep_interval_seconds",
        ):
            if getattr(self, name) < 0:
                raise ValueError(f"{name.upper()} must be >= 0")
        if self.analytics_max_events < 1:
            raise ValueError("ANALYTICS_MAX_EVENTS must be >= 1")
        if not 1 <= self.search_default_limit <= self.search_max_limit:
            raise ValueError(
                "SEARCH_DEFAULT_LIMIT must be between 1 and SEARCH_MAX_LIMIT"
            )
        if self.tracking_sink not in _TRACKING_SINKS:
            raise ValueError(
                f"tracking_sink must be one of {_TRACKING_SINKS}, got: {self.tracking_sink!r}"
            )
        if self.telemetry_exporter not in _TELEMETRY_EXPORTERS:
            raise ValueError(
                f"telemetry_exporter must be one of {_TELEMETRY_EXPORTERS}, "
                f"got: {self.telemetry_exporter!r}"
            )
        if not 0.0 <= self.telemetry_sample_rate <= 1.0:
            raise ValueError("TELEMETRY_SAMPLE_RATE must be between 0.0 and 1.0")
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
