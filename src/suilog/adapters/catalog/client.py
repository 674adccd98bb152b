"""HTTP fetcher for the remote aquarium catalog."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from http import HTTPStatus
from logging import getLogger
from typing import TYPE_CHECKING

import httpx
from pydantic import ValidationError

from suilog.adapters.http_client import HttpClient
from suilog.config.catalog import CatalogConfig, get_catalog_config
from suilog.domain.ports.fetching import CatalogFetcher, CatalogFetchError

from .schema import CatalogPayload
from .translator import parse_catalog

if TYPE_CHECKING:
    from collections.abc import Callable

    from suilog.config.http_client import HttpClientConfig
    from suilog.domain.model import CatalogResponse

log = getLogger(__name__)

_ALLOWED_SCHEMES = frozenset({"http", "https"})


def _default_client_factory(config: HttpClientConfig) -> HttpClient:
    return HttpClient(config)


def validate_catalog_url(url: str) -> httpx.URL:
    """Parse ``url`` or raise an ``INVALID_URL`` fetch error."""

    if not url or not url.strip():
        raise CatalogFetchError.invalid_url(url)
    try:
        parsed = httpx.URL(url.strip())
    except httpx.InvalidURL as exc:
        raise CatalogFetchError.invalid_url(url) from exc
    if parsed.scheme not in _ALLOWED_SCHEMES or not parsed.host:
        raise CatalogFetchError.invalid_url(url)
    return parsed


@dataclass(slots=True)
class HttpCatalogFetcher:
    """Fetch one catalog revision. Never retries and never serves a cached copy."""

    config: CatalogConfig = field(default_factory=get_catalog_config)
    client_factory: Callable[[HttpClientConfig], HttpClient] = field(
        default=_default_client_factory
    )

    def __call__(self, url: str | None = None) -> CatalogResponse:
        target = validate_catalog_url(url or self.config.url)
        try:
            return asyncio.run(self.fetch_async(target))
        except asyncio.CancelledError as exc:
            log.warning("Catalog fetch from %s was cancelled", target)
            raise CatalogFetchError.network("Catalog fetch was cancelled") from exc

    async def fetch_async(self, url: httpx.URL | str) -> CatalogResponse:
        target = url if isinstance(url, httpx.URL) else validate_catalog_url(url)
        timeout = self.config.http.timeout_seconds

        async with self.client_factory(self.config.http) as client:
            try:
                async with asyncio.timeout(timeout):
                    response = await client.get(target)
            except TimeoutError as exc:
                log.warning("Catalog request to %s timed out after %ss", target, timeout)
                raise CatalogFetchError.network(
                    f"Catalog request timed out after {timeout}s"
                ) from exc
            except httpx.UnsupportedProtocol as exc:
                raise CatalogFetchError.invalid_url(str(target)) from exc
            except httpx.TimeoutException as exc:
                log.warning("Catalog request to %s timed out: %s", target, exc)
                raise CatalogFetchError.network(f"Catalog request timed out: {exc}") from exc
            except httpx.HTTPError as exc:
                log.warning("Catalog request to %s failed: %s", target, exc)
                raise CatalogFetchError.network(f"Catalog request failed: {exc}") from exc

        if response.status_code != HTTPStatus.OK:
            log.warning("Catalog request to %s returned HTTP %s", target, response.status_code)
            raise CatalogFetchError.http(response.status_code)

        try:
            payload = CatalogPayload.model_validate_json(response.content)
        except ValidationError as exc:
            log.warning("Catalog payload from %s could not be decoded: %s", target, exc)
            raise CatalogFetchError.decoding(f"Invalid catalog payload: {exc}") from exc

        catalog = parse_catalog(payload)
        log.info(
            "Fetched catalog v%s with %s aquariums from %s",
            catalog.version,
            len(catalog.entries),
            target,
        )
        return catalog


if TYPE_CHECKING:
    _fetcher_check: CatalogFetcher = HttpCatalogFetcher()
