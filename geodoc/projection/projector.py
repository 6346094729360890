"""Projection of place records into search index documents."""

from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from geodoc.core.exceptions import InvalidRecordError
from geodoc.core.logging import get_logger
from geodoc.models.config import ProjectionConfig
from geodoc.models.place import PlaceRecord

from .builder import DictDocumentBuilder, DocumentBuilder
from .classification import build_classification
from .context import aggregate_context
from .extent import encode_extent
from .extra_tags import filter_extra_tags
from .names import resolve_names, resolve_primary_name

logger = get_logger(module="projector")

# Output field names
OSM_ID = "osm_id"
OSM_TYPE = "osm_type"
OSM_KEY = "osm_key"
OSM_VALUE = "osm_value"
OBJECT_TYPE = "object_type"
IMPORTANCE = "importance"
CLASSIFICATION = "classification"
COORDINATE = "coordinate"
HOUSENUMBER = "housenumber"
POSTCODE = "postcode"
NAME = "name"
COUNTRYCODE = "countrycode"
CONTEXT = "context"
EXTRA = "extra"
EXTENT = "extent"

DEFAULT_OBJECT_TYPE = "locality"


def _write_section(
    builder: DocumentBuilder, name: str, values: Mapping[str, Any]
) -> None:
    """Write ``values`` as a named object, or nothing when empty."""
    if not values:
        return
    builder.start_object(name)
    for key, value in values.items():
        builder.field(key, value)
    builder.end_object()


def _write_extent(builder: DocumentBuilder, extent: Mapping[str, Any] | None) -> None:
    if extent is None:
        return
    builder.start_object(EXTENT).field("type", extent["type"])
    builder.start_array("coordinates")
    for lon, lat in extent["coordinates"]:
        builder.start_array().value(lon).value(lat).end_array()
    builder.end_array()
    builder.end_object()


def check_identity(record: PlaceRecord) -> None:
    """Raise InvalidRecordError when an identity field is null or blank."""
    missing = record.missing_identity_fields()
    if missing:
        raise InvalidRecordError(missing, osm_id=record.osm_id)


def write_place(
    record: PlaceRecord, config: ProjectionConfig, builder: DocumentBuilder
) -> None:
    """Write the document for ``record`` into ``builder``.

    Identity is checked before anything is written, so a rejected record
    leaves the builder untouched.
    """
    check_identity(record)
    languages = config.languages
    object_type = record.address_type.label if record.address_type else None

    builder.start_object()
    builder.field(OSM_ID, record.osm_id)
    builder.field(OSM_TYPE, record.osm_type.value if record.osm_type else None)
    builder.field(OSM_KEY, record.tag_key)
    builder.field(OSM_VALUE, record.tag_value)
    builder.field(OBJECT_TYPE, object_type or DEFAULT_OBJECT_TYPE)
    builder.field(IMPORTANCE, record.importance)

    classification = build_classification(record.tag_key, record.tag_value)
    if classification is not None:
        builder.field(CLASSIFICATION, classification)

    if record.centroid is not None:
        builder.start_object(COORDINATE)
        builder.field("lat", record.centroid.lat)
        builder.field("lon", record.centroid.lon)
        builder.end_object()

    if record.housenumber is not None:
        builder.field(HOUSENUMBER, record.housenumber)

    if record.postcode is not None:
        builder.field(POSTCODE, record.postcode)

    _write_section(builder, NAME, resolve_primary_name(record.names, languages))
    for address_type, names in (record.address_parts or {}).items():
        _write_section(builder, address_type.label, resolve_names(names, languages))

    if record.country_code is not None:
        builder.field(COUNTRYCODE, record.country_code)

    _write_section(builder, CONTEXT, aggregate_context(record.context, languages))
    _write_section(builder, EXTRA, filter_extra_tags(record.extratags, config.extra_tags))
    _write_extent(builder, encode_extent(record.bbox))

    builder.end_object()


def project_place(
    record: PlaceRecord,
    config: ProjectionConfig,
    builder: DictDocumentBuilder | None = None,
) -> dict[str, Any]:
    """Project ``record`` into a fresh index document.

    Args:
        record: Place to convert
        config: Languages and extra-tag keys to expose
        builder: Optional empty builder to write into

    Returns:
        The built document

    Raises:
        InvalidRecordError: If an identity field is missing
    """
    builder = builder if builder is not None else DictDocumentBuilder()
    write_place(record, config, builder)
    return builder.build()


class DocumentProjector:
    """Projects place records using one configuration snapshot."""

    def __init__(self, config: ProjectionConfig) -> None:
        self.config = config

    def project(self, record: PlaceRecord) -> dict[str, Any]:
        return project_place(record, self.config)

    def project_many(self, records: Iterable[PlaceRecord]) -> Iterator[dict[str, Any]]:
        """Lazily project ``records``, stopping at the first invalid one."""
        count = 0
        for record in records:
            yield self.project(record)
            count += 1
        logger.debug("projection_batch_finished", documents=count)
