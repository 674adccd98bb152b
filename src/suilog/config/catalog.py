"""Catalog feed configuration values."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Final

from .env import env_float, optional_env_var
from .errors import ConfigurationError
from .http_client import DEFAULT_TIMEOUT_SECONDS, HttpClientConfig

DEFAULT_CATALOG_URL: Final[str] = "https://suilog-3a94e.web.app/aquariums.json"

# the version gate relies on seeing the current feed, never a cached copy
NO_CACHE_HEADERS: Final[dict[str, str]] = {"Cache-Control": "no-cache", "Pragma": "no-cache"}


def _default_http_config() -> HttpClientConfig:
    return HttpClientConfig(
        name="catalog",
        timeout_seconds=DEFAULT_TIMEOUT_SECONDS,
        default_headers=NO_CACHE_HEADERS,
    )


@dataclass(frozen=True, slots=True)
class CatalogConfig:
    """Where the catalog feed lives and how it is requested."""

    url: str = DEFAULT_CATALOG_URL
    http: HttpClientConfig = field(default_factory=_default_http_config)

    @property
    def is_overridden(self) -> bool:
        return self.url != DEFAULT_CATALOG_URL


def get_catalog_config() -> CatalogConfig:
    url = optional_env_var("SUILOG_CATALOG_URL") or DEFAULT_CATALOG_URL
    timeout = env_float("SUILOG_CATALOG_TIMEOUT", DEFAULT_TIMEOUT_SECONDS)
    if timeout <= 0:
        raise ConfigurationError("SUILOG_CATALOG_TIMEOUT must be positive")
    return CatalogConfig(
        url=url,
        http=HttpClientConfig(
            name="catalog",
            timeout_seconds=timeout,
            default_headers=NO_CACHE_HEADERS,
        ),
    )
