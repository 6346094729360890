"""Classification token derived from a place's primary tag.

The token has the form ``tpfld<value>clsfld<key>``: underscores are removed
and both parts are lower-cased, so it is a single alphanumeric term that
the search engine can index without tokenizing it.
"""

import re

TYPE_PREFIX = "tpfld"
CLASS_PREFIX = "clsfld"

# Keys too generic to classify, whatever their value.
UNCLASSIFIED_KEYS: frozenset[str] = frozenset({"place", "building"})

# Specific key/value pairs too generic to classify.
UNCLASSIFIED_VALUES: dict[str, frozenset[str]] = {
    "highway": frozenset({"unclassified", "residential"}),
}

_TOKEN_PART = re.compile(r"[A-Za-z0-9_]+")


def _normalize(part: str) -> str:
    return part.replace("_", "").lower()


def is_classifiable(key: str, value: str) -> bool:
    """Whether ``key``/``value`` may produce a classification token."""
    if key in UNCLASSIFIED_KEYS:
        return False
    if value in UNCLASSIFIED_VALUES.get(key, frozenset()):
        return False
    return all(
        _TOKEN_PART.fullmatch(part) is not None and _normalize(part)
        for part in (key, value)
    )


def build_classification(key: str | None, value: str | None) -> str | None:
    """Build the classification token, or None when the tag is not classified.

    >>> build_classification("highway", "primary")
    'tpfldprimaryclsfldhighway'
    >>> build_classification("highway", "residential") is None
    True
    """
    if not key or not value or not is_classifiable(key, value):
        return None
    return f"{TYPE_PREFIX}{_normalize(value)}{CLASS_PREFIX}{_normalize(key)}"
