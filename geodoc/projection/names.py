"""Multilingual name selection for the primary name and address tiers."""

from collections.abc import Mapping, Sequence

DEFAULT_NAME_SLOT = "name"
DEFAULT_NAME_KEY = "default"

# Alias slots exposed on the primary name only, as (name slot, output key).
NAME_ALIASES: tuple[tuple[str, str], ...] = (
    ("alt_name", "alt"),
    ("int_name", "int"),
    ("loc_name", "loc"),
    ("old_name", "old"),
    ("reg_name", "reg"),
    ("addr:housename", "housename"),
)


def language_slot(language: str) -> str:
    """Name slot holding the ``language`` variant, e.g. ``name:en``."""
    return f"{DEFAULT_NAME_SLOT}:{language}"


def resolve_names(
    names: Mapping[str, str | None] | None, languages: Sequence[str]
) -> dict[str, str]:
    """Select the default name and the configured language variants.

    Args:
        names: Name-slot mapping; None is treated as empty
        languages: Configured language codes, in output order

    Returns:
        Mapping of ``default`` and language codes to names. Empty when
        nothing matched, which callers treat as "omit the section".
    """
    resolved: dict[str, str] = {}
    if not names:
        return resolved

    default = names.get(DEFAULT_NAME_SLOT)
    if default is not None:
        resolved[DEFAULT_NAME_KEY] = default

    # Repeated codes would only rewrite the same value.
    for language in dict.fromkeys(languages):
        value = names.get(language_slot(language))
        if value is not None:
            resolved[language] = value

    return resolved


def resolve_primary_name(
    names: Mapping[str, str | None] | None, languages: Sequence[str]
) -> dict[str, str]:
    """Resolve the place's own name, including the fixed alias slots."""
    resolved = resolve_names(names, languages)
    if not names:
        return resolved

    for slot, key in NAME_ALIASES:
        value = names.get(slot)
        if value is not None:
            resolved[key] = value

    return resolved
