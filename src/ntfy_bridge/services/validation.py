"""Structural validation of inbound requests and outbound notifications.

Every validator returns the typed model on success and raises a typed error
carrying *all* violations on failure. Callers decide how to log and map the
error; nothing here has side effects.
"""

from typing import Any

from pydantic import ValidationError as PydanticValidationError

from ntfy_bridge.errors.exceptions import NotificationSchemaError, ValidationError
from ntfy_bridge.models.alert import Alert, AlertBatch
from ntfy_bridge.models.notification import ExtractionMapping, Notification

MAPPING_REJECTED = "Set 'topic' parameter, and verify the query is correct, please."
BATCH_REJECTED = "Alerts not found"
ALERT_REJECTED = "Alert object is malformed"
NOTIFICATION_REJECTED = "Notification does not match the ntfy message contract"


def violations(exc: PydanticValidationError) -> list[dict[str, str]]:
    """Flatten a pydantic error into ``{"loc", "msg"}`` entries."""
    return [
        {
            "loc": ".".join(str(part) for part in err["loc"]) or "<root>",
            "msg": err["msg"],
        }
        for err in exc.errors()
    ]


def validate_mapping(raw: Any) -> ExtractionMapping:
    """Validate the flat query-string mapping; ``topic`` is mandatory."""
    try:
        return ExtractionMapping.model_validate(raw)
    except PydanticValidationError as exc:
        raise ValidationError(MAPPING_REJECTED, details=violations(exc)) from exc


def validate_batch(raw: Any) -> AlertBatch:
    """Validate the webhook payload shape: an object with an ``alerts`` array of objects."""
    try:
        return AlertBatch.model_validate(raw)
    except PydanticValidationError as exc:
        raise ValidationError(BATCH_REJECTED, details=violations(exc)) from exc


def validate_alert(raw: Any) -> Alert:
    """Validate one alert against the full :class:`Alert` contract."""
    try:
        return Alert.model_validate(raw)
    except PydanticValidationError as exc:
        raise ValidationError(ALERT_REJECTED, details=violations(exc)) from exc


def validate_notification(fields: dict[str, Any]) -> Notification:
    """Apply defaults and check the assembled fields against :class:`Notification`."""
    try:
        return Notification.model_validate(fields)
    except PydanticValidationError as exc:
        raise NotificationSchemaError(NOTIFICATION_REJECTED, details=violations(exc)) from exc
