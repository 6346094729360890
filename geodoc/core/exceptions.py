"""Exceptions raised while projecting place records."""


class InvalidRecordError(ValueError):
    """A place record is missing one of its mandatory identity fields."""

    def __init__(
        self, missing_fields: tuple[str, ...], osm_id: int | None = None
    ) -> None:
        self.missing_fields = missing_fields
        self.osm_id = osm_id
        subject = f"place {osm_id}" if osm_id is not None else "place record"
        super().__init__(
            f"{subject} is missing identity fields: {', '.join(missing_fields)}"
        )
