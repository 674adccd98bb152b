"""Public interface for the catalog feed adapter."""

from __future__ import annotations

from .client import HttpCatalogFetcher, validate_catalog_url
from .schema import CatalogEntryPayload, CatalogPayload
from .translator import parse_catalog, parse_catalog_entry

__all__ = [
    "CatalogEntryPayload",
    "CatalogPayload",
    "HttpCatalogFetcher",
    "parse_catalog",
    "parse_catalog_entry",
    "validate_catalog_url",
]
