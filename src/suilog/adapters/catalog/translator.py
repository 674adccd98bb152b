"""Translate validated feed payloads into domain catalog values."""

from __future__ import annotations

from typing import TYPE_CHECKING

from suilog.domain.model import CatalogEntry, CatalogResponse

if TYPE_CHECKING:
    from .schema import CatalogEntryPayload, CatalogPayload


def parse_catalog_entry(payload: CatalogEntryPayload) -> CatalogEntry:
    return CatalogEntry(
        name=payload.name,
        latitude=payload.latitude,
        longitude=payload.longitude,
        description=payload.description,
        region=payload.region,
        representative_fish=payload.representative_fish,
        fish_icon_size=payload.fish_icon_size,
        address=payload.address,
        affiliate_link=payload.affiliate_link,
        stable_id=payload.stable_id,
    )


def parse_catalog(payload: CatalogPayload) -> CatalogResponse:
    return CatalogResponse(
        version=payload.version,
        entries=tuple(parse_catalog_entry(entry) for entry in payload.aquariums),
    )
