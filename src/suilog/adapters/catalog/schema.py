"""Pydantic models describing the catalog feed payload."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from suilog.domain.model import MAX_FISH_ICON_SIZE, MIN_FISH_ICON_SIZE


def _blank_to_none(value: object) -> object:
    if isinstance(value, str) and not value.strip():
        return None
    return value


class CatalogBaseModel(BaseModel):
    # strict: a feed that needs coercion is a malformed feed
    model_config = ConfigDict(extra="ignore", populate_by_name=True, strict=True)


class CatalogEntryPayload(CatalogBaseModel):
    name: str
    latitude: float
    longitude: float
    description: str
    region: str
    representative_fish: str = Field(alias="representativeFish")
    fish_icon_size: int = Field(alias="fishIconSize", ge=MIN_FISH_ICON_SIZE, le=MAX_FISH_ICON_SIZE)
    address: str | None = None
    affiliate_link: str | None = Field(default=None, alias="affiliateLink")
    stable_id: str | None = Field(default=None, alias="stableId")

    _normalize_stable_id = field_validator("stable_id", mode="before")(_blank_to_none)


class CatalogPayload(CatalogBaseModel):
    version: int
    aquariums: list[CatalogEntryPayload]
