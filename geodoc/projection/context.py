"""Aggregation of names taken from related context places."""

from collections.abc import Iterable, Mapping, Sequence

from .names import DEFAULT_NAME_KEY, DEFAULT_NAME_SLOT, language_slot

CONTEXT_SEPARATOR = ", "


def collect_context_names(
    contexts: Iterable[Mapping[str, str | None] | None] | None, languages: Sequence[str]
) -> list[str]:
    """Collect distinct context names in first-seen order.

    Each entry contributes its ``name`` slot first, then its ``name:<lang>``
    slots in configured language order.
    """
    seen: dict[str, None] = {}
    if not contexts:
        return []

    slots = [DEFAULT_NAME_SLOT, *(language_slot(lang) for lang in languages)]
    for context in contexts:
        if not context:
            continue
        for slot in slots:
            value = context.get(slot)
            if value is not None:
                seen.setdefault(value, None)

    return list(seen)


def aggregate_context(
    contexts: Iterable[Mapping[str, str | None] | None] | None, languages: Sequence[str]
) -> dict[str, str]:
    """Join all context names into a single ``default`` entry.

    Returns an empty mapping when no context entry carried a usable name.
    """
    names = collect_context_names(contexts, languages)
    if not names:
        return {}
    return {DEFAULT_NAME_KEY: CONTEXT_SEPARATOR.join(names)}
