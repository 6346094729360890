"""Projection of place records into index documents.

This package provides:
- Multilingual name resolution for the place and its address tiers
- Context name aggregation
- Extra-tag whitelisting
- Envelope encoding of bounding boxes
- Classification tokens for the primary tag
"""

from geodoc.projection.builder import DictDocumentBuilder, DocumentBuilder
from geodoc.projection.classification import build_classification
from geodoc.projection.context import aggregate_context
from geodoc.projection.extent import encode_extent
from geodoc.projection.extra_tags import filter_extra_tags
from geodoc.projection.names import resolve_names, resolve_primary_name
from geodoc.projection.projector import DocumentProjector, project_place

__all__ = [
    "DictDocumentBuilder",
    "DocumentBuilder",
    "DocumentProjector",
    "aggregate_context",
    "build_classification",
    "encode_extent",
    "filter_extra_tags",
    "project_place",
    "resolve_names",
    "resolve_primary_name",
]
