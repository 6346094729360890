"""Per-call projection configuration."""

from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _unique_codes(values: Iterable[str]) -> tuple[str, ...]:
    """Strip entries, drop blanks and repeat occurrences, keep first-seen order."""
    return tuple(dict.fromkeys(v.strip() for v in values if v and v.strip()))


class ProjectionConfig(BaseModel):
    """Languages and extra-tag keys exposed in projected documents.

    Instances are immutable; callers take a snapshot before projecting.
    """

    model_config = ConfigDict(frozen=True)

    languages: tuple[str, ...] = Field(
        default=(),
        description="Language codes to expose, in output order",
        examples=[("en", "de", "fr")],
    )
    extra_tags: tuple[str, ...] = Field(
        default=(),
        description="Free-form tag keys copied into the extra section",
        examples=[("wikidata", "website")],
    )

    @field_validator("languages", "extra_tags", mode="before")
    @classmethod
    def dedupe(cls, value: object) -> object:
        if isinstance(value, str):
            value = value.split(",")
        if isinstance(value, Iterable):
            return _unique_codes(str(v) for v in value)
        return value
