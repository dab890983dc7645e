"""Pydantic models for Alertmanager webhook payloads.

Wire format (webhook version 4)::

    {
      "version": "4",
      "groupKey": <string>,
      "truncatedAlerts": <int>,
      "status": "<resolved|firing>",
      "receiver": <string>,
      "groupLabels": <object>,
      "commonLabels": <object>,
      "commonAnnotations": <object>,
      "externalURL": <string>,
      "alerts": [
        {
          "status": "<resolved|firing>",
          "labels": <object>,
          "annotations": <object>,
          "startsAt": "<rfc3339>",
          "endsAt": "<rfc3339>",
          "generatorURL": <string>,
          "fingerprint": <string>
        },
        ...
      ]
    }
"""

from datetime import datetime
from enum import StrEnum
from typing import Any

from pydantic import AnyUrl, BaseModel, ConfigDict, Field, TypeAdapter, field_validator
from pydantic import ValidationError as PydanticValidationError

_url_adapter = TypeAdapter(AnyUrl)


class AlertStatus(StrEnum):
    FIRING = "firing"
    RESOLVED = "resolved"


class Annotations(BaseModel):
    """Alert annotations. ``summary`` and ``description`` are the well-known keys."""

    model_config = ConfigDict(extra="allow")

    __pydantic_extra__: dict[str, str]

    summary: str | None = None
    description: str | None = None


class Alert(BaseModel):
    """A single alert as sent by Alertmanager."""

    model_config = ConfigDict(populate_by_name=True)

    status: AlertStatus
    labels: dict[str, str]
    annotations: Annotations
    generator_url: str = Field(..., alias="generatorURL")
    fingerprint: str
    starts_at: datetime = Field(..., alias="startsAt")
    ends_at: datetime = Field(..., alias="endsAt")

    @field_validator("generator_url")
    @classmethod
    def _absolute_url(cls, value: str) -> str:
        # Validate, but keep the string exactly as received for queries
        try:
            _url_adapter.validate_python(value)
        except PydanticValidationError as exc:
            raise ValueError(f"not an absolute URL: {value!r}") from exc
        return value

    def document(self) -> dict[str, Any]:
        """Return the alert as the JSON document queries are evaluated against."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class AlertBatch(BaseModel):
    """Inbound webhook payload.

    Alerts are kept as raw objects here; each one is validated against
    :class:`Alert` inside its own dispatch pipeline.
    """

    model_config = ConfigDict(extra="allow")

    alerts: list[dict[str, Any]]

    @property
    def receiver(self) -> str | None:
        extra = self.model_extra or {}
        receiver = extra.get("receiver")
        return receiver if isinstance(receiver, str) else None
