"""Geographic models for place centroids and bounding boxes."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Point(BaseModel):
    """A WGS84 point, used as the centroid of a place."""

    model_config = ConfigDict(frozen=True)

    lat: float = Field(..., description="Latitude in decimal degrees", ge=-90, le=90)
    lon: float = Field(
        ..., description="Longitude in decimal degrees", ge=-180, le=180
    )


class Envelope(BaseModel):
    """Axis-aligned bounding box in lon/lat space.

    Bounds supplied in the wrong order are swapped, so ``min_x <= max_x`` and
    ``min_y <= max_y`` always hold after construction.
    """

    model_config = ConfigDict(frozen=True)

    min_x: float = Field(..., description="Western longitude boundary")
    max_x: float = Field(..., description="Eastern longitude boundary")
    min_y: float = Field(..., description="Southern latitude boundary")
    max_y: float = Field(..., description="Northern latitude boundary")

    @model_validator(mode="before")
    @classmethod
    def order_bounds(cls, data: Any) -> Any:
        """Swap inverted bounds before field validation."""
        if not isinstance(data, dict):
            return data
        data = dict(data)
        for low, high in (("min_x", "max_x"), ("min_y", "max_y")):
            lo_value, hi_value = data.get(low), data.get(high)
            if lo_value is None or hi_value is None:
                continue
            if float(lo_value) > float(hi_value):
                data[low], data[high] = hi_value, lo_value
        return data

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def area(self) -> float:
        """Planar area in square degrees."""
        return self.width * self.height
