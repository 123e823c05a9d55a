"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Search settings are validated at load time and handed
to the filter components as an immutable SearchConfig.
"""

from dataclasses import dataclass
from functools import lru_cache

from pydantic import SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from whitehall.core.constants import DEFAULT_PER_PAGE, MAX_PER_PAGE


@dataclass(frozen=True)
class SearchConfig:
    """Explicit configuration for the document filter components.

    Attributes:
        search_api_url: Base URL of the search provider (no trailing slash).
        search_index: Index name appended to the base URL.
        timeout_seconds: Transport timeout for provider requests.
        default_per_page: Page size used when the caller gives none.
        relevant_to_local_government: Default for the local government facet.
    """

    search_api_url: str
    search_index: str = "government"
    timeout_seconds: float = 10.0
    default_per_page: int = DEFAULT_PER_PAGE
    relevant_to_local_government: bool = False

    @property
    def advanced_search_url(self) -> str:
        """Full URL of the provider's advanced search endpoint."""
        return f"{self.search_api_url.rstrip('/')}/{self.search_index}/advanced_search"


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    All settings are optional with defaults; validate_search_and_paging
    rejects a malformed search URL or an out-of-range page size.
    """

    # App
    app_name: str = "whitehall-document-filter"
    app_version: str = "1.0.0"
    debug: bool = False

    # Database (system of record). Empty means DB-backed endpoints are unavailable.
    database_url: str = ""
    database_echo: bool = False
    db_pool_size: int | None = None
    db_max_overflow: int | None = None

    # Search provider
    search_api_url: str = "http://localhost:3009"
    search_index: str = "government"
    search_timeout_seconds: float = 10.0
    default_per_page: int = DEFAULT_PER_PAGE
    relevant_to_local_government_default: bool = False

    # CORS
    allowed_origins: str = "http://localhost:3000"

    # Redis cache (taggable select options)
    redis_enabled: bool = True
    redis_host: str = "localhost"
    redis_port: int = 6379
    redis_db: int = 0
    redis_password: SecretStr | None = None
    cache_ttl_taggable: int = 3600

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
    def validate_search_and_paging(self) -> "Settings":
        """Validate the search endpoint and default page size."""
        if not self.search_api_url.startswith(("http://", "https://")):
            raise ValueError(
                f"SEARCH_API_URL must start with http:// or https://, got: {self.search_api_url!r}"
            )
        if not 1 <= self.default_per_page <= MAX_PER_PAGE:
            raise ValueError(
                f"DEFAULT_PER_PAGE must be between 1 and {MAX_PER_PAGE}, got: {self.default_per_page}"
            )
        if self.search_timeout_seconds <= 0:
            raise ValueError("SEARCH_TIMEOUT_SECONDS must be positive")
        return self

    def search_config(self) -> SearchConfig:
        """Return the immutable search configuration derived from these settings."""
        return SearchConfig(
            search_api_url=self.search_api_url,
            search_index=self.search_index,
            timeout_seconds=self.search_timeout_seconds,
            default_per_page=self.default_per_page,
            relevant_to_local_government=self.relevant_to_local_government_default,
        )


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
