"""Bounding box encoding as a search-engine envelope shape."""

from typing import Any

from geodoc.models.geographic import Envelope

ENVELOPE_TYPE = "envelope"


def envelope_coordinates(bbox: Envelope) -> list[list[float]]:
    """Upper-left then lower-right corner, each as ``[lon, lat]``."""
    return [[bbox.min_x, bbox.max_y], [bbox.max_x, bbox.min_y]]


def encode_extent(bbox: Envelope | None) -> dict[str, Any] | None:
    """Encode ``bbox`` as an envelope geometry.

    Returns None when there is no box or its area is zero.
    """
    if bbox is None or not bbox.area > 0:
        return None
    return {"type": ENVELOPE_TYPE, "coordinates": envelope_coordinates(bbox)}
