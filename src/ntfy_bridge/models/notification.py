"""Pydantic models for extraction mappings and ntfy notifications."""

from pydantic import BaseModel, ConfigDict

DEFAULT_TITLE = "New Alert"
DEFAULT_MESSAGE = "Alert body"
DEFAULT_PRIORITY = 3


class ExtractionMapping(BaseModel):
    """Caller-supplied jq queries, one per notification field."""

    model_config = ConfigDict(extra="ignore", strict=True, frozen=True)

    topic: str
    title: str | None = None
    message: str | None = None
    tags: str | None = None
    priority: str | None = None

    def entries(self) -> list[tuple[str, str]]:
        """Return ``(field, query)`` pairs for every mapped field."""
        return list(self.model_dump(exclude_none=True).items())


class Notification(BaseModel):
    """Message published to ntfy."""

    model_config = ConfigDict(extra="forbid", strict=True)

    topic: str
    title: str = DEFAULT_TITLE
    message: str = DEFAULT_MESSAGE
    tags: list[str] | None = None
    priority: int | float = DEFAULT_PRIORITY
