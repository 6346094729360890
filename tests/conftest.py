"""Test configuration."""

from typing import Any

import pytest
from pytest import Config

from geodoc.core.logging import configure_logging
from geodoc.models import PlaceRecord, ProjectionConfig

fixture = pytest.fixture


def pytest_configure(config: Config) -> None:
    """Configure pytest.

    Args:
        config: Pytest configuration object
    """
    # Configure logging for test environment
    configure_logging(testing=True)


@fixture
def berlin_data() -> dict[str, Any]:
    """Raw record for a city with names, address tiers, context and tags."""
    return {
        "osm_id": 240109189,
        "osm_type": "N",
        "tag_key": "place",
        "tag_value": "city",
        "importance": 0.83,
        "address_type": "city",
        "centroid": {"lat": 52.5170365, "lon": 13.3888599},
        "bbox": {"min_x": 13.088, "max_x": 13.761, "min_y": 52.338, "max_y": 52.675},
        "postcode": "10117",
        "country_code": "de",
        "names": {
            "name": "Berlin",
            "name:fr": "Berlin",
            "name:ru": "Берлин",
            "alt_name": "Berlin Stadt",
        },
        "address_parts": {
            "state": {"name": "Berlin", "name:en": "Berlin"},
            "country": {"name": "Deutschland", "name:en": "Germany"},
        },
        "context": [
            {"name": "Mitte", "name:en": "Centre"},
            {"name": "Brandenburg"},
        ],
        "extratags": {"wikidata": "Q64", "website": "https://berlin.de"},
    }


@fixture
def berlin(berlin_data: dict[str, Any]) -> PlaceRecord:
    return PlaceRecord.model_validate(berlin_data)


@fixture
def shop() -> PlaceRecord:
    """Minimal record: identity only."""
    return PlaceRecord(osm_id=42, osm_type="W", tag_key="shop", tag_value="bakery")


@fixture
def config() -> ProjectionConfig:
    return ProjectionConfig(languages=("en", "fr"), extra_tags=("wikidata",))
