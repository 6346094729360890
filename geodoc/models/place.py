"""Place record model consumed by the document projector."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .geographic import Envelope, Point

NameMap = dict[str, str | None]


class OsmType(str, Enum):
    """OSM object type, stored as its single-letter wire value."""

    NODE = "N"
    WAY = "W"
    RELATION = "R"

    @classmethod
    def _missing_(cls, value: object) -> "OsmType | None":
        if isinstance(value, str):
            normalized = value.strip().lower()
            for member in cls:
                if normalized in (member.name.lower(), member.value.lower()):
                    return member
        return None


class AddressType(str, Enum):
    """One tier of the address hierarchy, valued by its output label."""

    HOUSE = "house"
    STREET = "street"
    LOCALITY = "locality"
    DISTRICT = "district"
    CITY = "city"
    COUNTY = "county"
    STATE = "state"
    COUNTRY = "country"

    @property
    def label(self) -> str:
        return self.value

    @property
    def rank_range(self) -> tuple[int, int]:
        """Inclusive address-rank range covered by this tier."""
        return ADDRESS_RANK_RANGES[self]

    def covers_rank(self, rank: int) -> bool:
        low, high = self.rank_range
        return low <= rank <= high

    @classmethod
    def from_rank(cls, rank: int) -> "AddressType | None":
        """Return the tier covering ``rank``, or None for unranked values."""
        for address_type in cls:
            if address_type.covers_rank(rank):
                return address_type
        return None


ADDRESS_RANK_RANGES: dict[AddressType, tuple[int, int]] = {
    AddressType.HOUSE: (29, 30),
    AddressType.STREET: (26, 28),
    AddressType.LOCALITY: (22, 25),
    AddressType.DISTRICT: (17, 21),
    AddressType.CITY: (13, 16),
    AddressType.COUNTY: (10, 12),
    AddressType.STATE: (5, 9),
    AddressType.COUNTRY: (4, 4),
}

# Fields a record cannot be projected without, in output order.
IDENTITY_FIELDS: tuple[str, ...] = ("osm_id", "osm_type", "tag_key", "tag_value")


class PlaceRecord(BaseModel):
    """Normalized description of one geographic place.

    Identity fields are optional at parse time so an incomplete record can
    still be loaded; the projector rejects it with ``InvalidRecordError``.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        json_schema_extra={
            "example": {
                "osm_id": 240109189,
                "osm_type": "N",
                "tag_key": "place",
                "tag_value": "city",
                "importance": 0.83,
                "centroid": {"lat": 52.5170365, "lon": 13.3888599},
                "names": {"name": "Berlin", "name:fr": "Berlin"},
                "country_code": "DE",
            }
        },
    )

    osm_id: int | None = Field(default=None, description="Source object id")
    osm_type: OsmType | None = Field(default=None, description="Source object type")
    tag_key: str | None = Field(default=None, description="Primary tag key")
    tag_value: str | None = Field(default=None, description="Primary tag value")
    importance: float = Field(default=0.0, description="Importance score")

    centroid: Point | None = None
    bbox: Envelope | None = None

    housenumber: str | None = None
    postcode: str | None = None
    country_code: str | None = Field(
        default=None,
        description="ISO 3166-1 alpha-2 country code",
        pattern=r"^[A-Za-z]{2}$",
    )

    address_type: AddressType | None = Field(
        default=None, description="Tier this place itself occupies"
    )
    rank_address: int | None = Field(
        default=None, description="Address rank, used when address_type is absent"
    )

    names: NameMap | None = None
    address_parts: dict[AddressType, NameMap | None] | None = Field(default_factory=dict)
    context: list[NameMap | None] | None = Field(default_factory=list)
    extratags: dict[str, str | None] | None = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def derive_address_type(cls, data: Any) -> Any:
        """Fill ``address_type`` from ``rank_address`` when only the rank is known."""
        if not isinstance(data, dict):
            return data
        if data.get("address_type") is None and data.get("rank_address") is not None:
            data = dict(data)
            data["address_type"] = AddressType.from_rank(int(data["rank_address"]))
        return data

    @field_validator("country_code")
    @classmethod
    def upper_country_code(cls, value: str | None) -> str | None:
        return value.upper() if value is not None else None

    def missing_identity_fields(self) -> tuple[str, ...]:
        """Names of identity fields that are null or blank."""
        missing = []
        for name in IDENTITY_FIELDS:
            value = getattr(self, name)
            if value is None or (isinstance(value, str) and not value):
                missing.append(name)
        return tuple(missing)
