from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from suilog.adapters.catalog import CatalogPayload, parse_catalog


def _entry(**overrides: object) -> dict[str, object]:
    entry: dict[str, object] = {
        "name": "Kaiyukan",
        "latitude": 34.6545,
        "longitude": 135.4289,
        "description": "Whale shark tank",
        "region": "近畿",
        "representativeFish": "shark",
        "fishIconSize": 5,
    }
    entry.update(overrides)
    return entry


def _document(*entries: dict[str, object], version: object = 2) -> bytes:
    return json.dumps({"version": version, "aquariums": list(entries)}).encode()


def test_parse_sample_catalog(catalog_json: bytes) -> None:
    response = parse_catalog(CatalogPayload.model_validate_json(catalog_json))

    assert response.version == 3
    assert [entry.name for entry in response.entries] == ["おたる水族館", "サンシャイン水族館", "海遊館"]
    otaru, sunshine, kaiyukan = response.entries
    assert otaru.stable_id == "otaru"
    assert otaru.address == "北海道小樽市祝津3-303"
    assert sunshine.affiliate_link == "https://example.com/sunshine"
    assert kaiyukan.stable_id is None
    assert kaiyukan.fish_icon_size == 5


def test_optional_fields_default_to_none() -> None:
    payload = CatalogPayload.model_validate_json(_document(_entry()))

    (entry,) = parse_catalog(payload).entries
    assert entry.address is None
    assert entry.affiliate_link is None
    assert entry.stable_id is None


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("", None), ("   ", None), (" A-1 ", " A-1 "), ("A-1", "A-1")],
)
def test_stable_id_keeps_raw_value_unless_blank(raw: str, expected: str | None) -> None:
    payload = CatalogPayload.model_validate_json(_document(_entry(stableId=raw)))

    (entry,) = parse_catalog(payload).entries
    assert entry.stable_id == expected


def test_unknown_fields_are_ignored() -> None:
    payload = CatalogPayload.model_validate_json(_document(_entry(prefecture="大阪府")))

    assert payload.aquariums[0].name == "Kaiyukan"


def test_integer_coordinates_are_accepted() -> None:
    payload = CatalogPayload.model_validate_json(_document(_entry(latitude=35, longitude=139)))

    assert payload.aquariums[0].latitude == 35.0


@pytest.mark.parametrize(
    "document",
    [
        _document(_entry(fishIconSize=0)),
        _document(_entry(fishIconSize=6)),
        _document(_entry(latitude="34.6")),
        _document(_entry(), version="2"),
        b'{"version": 2}',
        b"not json",
    ],
)
def test_malformed_documents_are_rejected(document: bytes) -> None:
    with pytest.raises(ValidationError):
        CatalogPayload.model_validate_json(document)


def test_missing_required_field_is_rejected() -> None:
    entry = _entry()
    del entry["region"]

    with pytest.raises(ValidationError):
        CatalogPayload.model_validate_json(_document(entry))
