"""Whitelisting of free-form tags into the extra section."""

from collections.abc import Mapping, Sequence


def filter_extra_tags(
    tags: Mapping[str, str | None] | None, keys: Sequence[str]
) -> dict[str, str]:
    """Copy the configured ``keys`` that have a value in ``tags``.

    Output follows the order of ``keys``; each key appears at most once.
    """
    if not tags:
        return {}
    found: dict[str, str] = {}
    for key in keys:
        value = tags.get(key)
        if value is not None:
            found[key] = value
    return found
