"""Models for place records and projection configuration."""

from .config import ProjectionConfig
from .geographic import Envelope, Point
from .place import (
    ADDRESS_RANK_RANGES,
    IDENTITY_FIELDS,
    AddressType,
    NameMap,
    OsmType,
    PlaceRecord,
)

__all__ = [
    "ADDRESS_RANK_RANGES",
    "IDENTITY_FIELDS",
    "AddressType",
    "Envelope",
    "NameMap",
    "OsmType",
    "PlaceRecord",
    "Point",
    "ProjectionConfig",
]
